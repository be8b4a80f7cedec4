import contextlib
import logging

import httpx
from pydantic import BaseModel, ValidationError

from domain.exceptions.currency import (
    ProviderAPIError,
    ProviderConnectionError,
    ProviderHTTPError,
    ProviderResponseError,
    ProviderTimeoutError,
)
from domain.models.currency import PairRate, RateTable
from infrastructure.providers.schemas import LatestRatesPayload, PairRatePayload, ProviderEnvelope
from utils.time import from_unix

logger = logging.getLogger(__name__)

ERROR_MESSAGES = {
    "unsupported-code": "Unsupported currency code",
    "malformed-request": "Malformed request",
    "invalid-key": "Invalid API key",
    "inactive-account": "Inactive API account",
    "quota-reached": "API quota reached",
}


def translate_error(error_type: str | None) -> str:
    return ERROR_MESSAGES.get(error_type or "", f"Provider error: {error_type}")


class ExchangeRateAPIClient:
    BASE_URL = "https://v6.exchangerate-api.com/v6"

    def __init__(
        self,
        api_key: str,
        client: httpx.AsyncClient | None = None,
        base_url: str | None = None,
        timeout: float = 10,
        user_agent: str = "CurrencyConverter/1.0",
    ):
        self.api_key = api_key
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self._client = client or httpx.AsyncClient(
            timeout=timeout,
            headers={"Accept": "application/json", "User-Agent": user_agent},
        )

    @property
    def name(self) -> str:
        return "exchangerate-api"

    async def _request(self, endpoint: str) -> dict:
        url = f"{self.base_url}/{self.api_key}/{endpoint}"
        logger.debug(f"Requesting {endpoint} from {self.name}")
        try:
            response = await self._client.get(url)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            body = None
            with contextlib.suppress(ValueError):
                body = e.response.json()
            if isinstance(body, dict) and body.get("result") == "error":
                error_type = body.get("error-type")
                raise ProviderAPIError(translate_error(error_type), error_type) from e
            raise ProviderHTTPError(
                f"HTTP error {e.response.status_code}: {e.response.text[:200]}",
                status_code=e.response.status_code,
            ) from e
        except httpx.TimeoutException as e:
            raise ProviderTimeoutError("Timeout: the request took too long to respond") from e
        except httpx.RequestError as e:
            raise ProviderConnectionError(f"Connection error: {e.__class__.__name__}") from e
        except ValueError as e:
            raise ProviderResponseError(f"Invalid JSON in provider response: {e}") from e

        if not isinstance(data, dict):
            raise ProviderResponseError("Unexpected provider response format")
        return data

    def _parse(self, data: dict, model: type[BaseModel]):
        try:
            envelope = ProviderEnvelope.model_validate(data)
            if envelope.result == "error":
                raise ProviderAPIError(translate_error(envelope.error_type), envelope.error_type)
            return model.model_validate(data)
        except ValidationError as e:
            raise ProviderResponseError(
                f"Invalid provider response: {e.error_count()} validation error(s)"
            ) from e

    async def fetch_pair_rate(self, from_currency: str, to_currency: str) -> PairRate:
        data = await self._request(f"pair/{from_currency}/{to_currency}")
        payload = self._parse(data, PairRatePayload)
        return PairRate(
            from_currency=from_currency,
            to_currency=to_currency,
            rate=payload.conversion_rate,
            last_updated=from_unix(payload.time_last_update_unix),
        )

    async def fetch_latest_rates(self, base_currency: str) -> RateTable:
        data = await self._request(f"latest/{base_currency}")
        payload = self._parse(data, LatestRatesPayload)
        return RateTable(
            base_currency=payload.base_code,
            rates=dict(payload.conversion_rates),
            last_updated=from_unix(payload.time_last_update_unix),
        )

    async def close(self) -> None:
        await self._client.aclose()

