from dataclasses import dataclass, field
from datetime import datetime

from utils.time import format_local


@dataclass(frozen=True)
class Currency:
    code: str
    name: str
    symbol: str


DEFAULT_CURRENCIES: tuple[Currency, ...] = (
    Currency("USD", "US Dollar", "$"),
    Currency("EUR", "Euro", "€"),
    Currency("GBP", "British Pound", "£"),
    Currency("JPY", "Japanese Yen", "¥"),
    Currency("AUD", "Australian Dollar", "A$"),
    Currency("CAD", "Canadian Dollar", "C$"),
    Currency("CHF", "Swiss Franc", "Fr"),
    Currency("CNY", "Chinese Yuan", "¥"),
    Currency("SEK", "Swedish Krona", "kr"),
    Currency("NZD", "New Zealand Dollar", "NZ$"),
    Currency("MXN", "Mexican Peso", "MX$"),
    Currency("SGD", "Singapore Dollar", "S$"),
    Currency("HKD", "Hong Kong Dollar", "HK$"),
    Currency("NOK", "Norwegian Krone", "kr"),
    Currency("BRL", "Brazilian Real", "R$"),
    Currency("ARS", "Argentine Peso", "AR$"),
    Currency("COP", "Colombian Peso", "COL$"),
    Currency("CLP", "Chilean Peso", "CLP$"),
    Currency("PEN", "Peruvian Sol", "S/"),
    Currency("UYU", "Uruguayan Peso", "$U"),
)


@dataclass(frozen=True)
class PairRate:
    from_currency: str
    to_currency: str
    rate: float
    last_updated: datetime

    @property
    def last_update(self) -> str:
        return format_local(self.last_updated)


@dataclass(frozen=True)
class RateTable:
    base_currency: str
    rates: dict[str, float] = field(hash=False)
    last_updated: datetime

    @property
    def last_update(self) -> str:
        return format_local(self.last_updated)


@dataclass(frozen=True)
class CacheStats:
    size: int
    ttl_seconds: float


@dataclass(frozen=True)
class ConversionHistoryEntry:
    from_currency: str
    to_currency: str
    amount: float
    converted_amount: float
    exchange_rate: float
    timestamp: datetime
