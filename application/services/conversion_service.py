import logging
import math
import numbers

from application.services.currency_service import CurrencyService
from application.services.rate_service import RateService
from domain.exceptions.currency import CurrencyException, InvalidAmountError
from domain.models.currency import CacheStats, Currency, RateTable
from domain.models.result import (
	ConversionFailure,
	ConversionResult,
	ConversionSuccess,
	Failure,
	FailureKind,
	Success,
)

logger = logging.getLogger(__name__)


class ConversionService:
	def __init__(self, rate_service: RateService, currency_service: CurrencyService):
		self.rate_service = rate_service
		self.currency_service = currency_service

	@staticmethod
	def _validate_amount(amount: object) -> float:
		if isinstance(amount, bool) or not isinstance(amount, numbers.Real):
			raise InvalidAmountError('Amount must be a positive number')
		try:
			value = float(amount)
		except OverflowError:
			raise InvalidAmountError('Amount must be a positive number') from None
		if not math.isfinite(value) or value <= 0:
			raise InvalidAmountError('Amount must be a positive number')
		return value

	async def convert(self, from_currency: str, to_currency: str, amount: float) -> ConversionResult:
		"""Converts `amount`; failures are returned, never raised."""

		def failure(kind: FailureKind, message: str) -> ConversionFailure:
			return ConversionFailure(
				from_currency=from_currency,
				to_currency=to_currency,
				amount=amount,
				kind=kind,
				message=message,
			)

		try:
			self.currency_service.validate_currency(from_currency)
			self.currency_service.validate_currency(to_currency)
			value = self._validate_amount(amount)

			from_code = from_currency.upper()
			to_code = to_currency.upper()
			lookup = await self.rate_service.get_rate(from_code, to_code)
			if isinstance(lookup, Failure):
				return failure(lookup.kind, lookup.message)

			rate = lookup.value.rate
			converted = value * rate
			if not math.isfinite(converted):
				return failure(FailureKind.INVALID_AMOUNT, 'Converted amount is too large to represent')
			return ConversionSuccess(
				from_currency=from_code,
				to_currency=to_code,
				amount=value,
				converted_amount=converted,
				exchange_rate=rate,
				last_updated=lookup.value.last_updated,
			)
		except CurrencyException as e:
			return failure(e.kind, str(e))
		except Exception as e:
			logger.exception(f'Unexpected error converting {from_currency!r} -> {to_currency!r}')
			return failure(FailureKind.UNEXPECTED, f'Conversion error: {e}')

	async def get_rates(self, base_currency: str) -> Success[RateTable] | Failure:
		if not self.currency_service.is_supported(base_currency):
			return Failure(FailureKind.INVALID_CURRENCY, f'Unsupported currency: {base_currency}')
		return await self.rate_service.get_all_rates(base_currency.upper())

	def is_currency_supported(self, code: str) -> bool:
		return self.currency_service.is_supported(code)

	def get_supported_currencies(self) -> list[Currency]:
		return self.currency_service.list_currencies()

	def clear_cache(self) -> None:
		self.rate_service.clear_cache()

	def cache_stats(self) -> CacheStats:
		return self.rate_service.cache_stats()
