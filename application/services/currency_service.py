import logging
from collections.abc import Iterable

from domain.exceptions.currency import InvalidCurrencyError
from domain.models.currency import DEFAULT_CURRENCIES, Currency

logger = logging.getLogger(__name__)


class CurrencyService:
	def __init__(self, currencies: Iterable[Currency] = DEFAULT_CURRENCIES):
		self._currencies = list(currencies)
		self._by_code = {c.code: c for c in self._currencies}

	def list_currencies(self) -> list[Currency]:
		return list(self._currencies)

	def is_supported(self, code: object) -> bool:
		return isinstance(code, str) and code.upper() in self._by_code

	def get(self, code: str) -> Currency:
		self.validate_currency(code)
		return self._by_code[code.upper()]

	def validate_currency(self, code: object) -> None:
		if not self.is_supported(code):
			logger.debug(f'Rejected unsupported currency {code!r}')
			raise InvalidCurrencyError(f'Unsupported currency: {code}')
