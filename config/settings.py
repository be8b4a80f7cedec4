from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	EXCHANGERATE_API_KEY: str = ''
	EXCHANGERATE_BASE_URL: str = 'https://v6.exchangerate-api.com/v6'

	REQUEST_TIMEOUT: float = 10.0
	RATE_CACHE_TTL_SECONDS: int = 300
	USER_AGENT: str = 'CurrencyConverter/1.0'

	# Logging
	LOG_LEVEL: str = 'WARNING'
	LOG_FILE: str | None = None

	# Application
	APP_NAME: str = 'Currency Converter'
	DEBUG: bool = False

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()
