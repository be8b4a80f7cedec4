from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import ClassVar, Generic, Literal, TypeVar

from utils.time import format_local

T = TypeVar("T")


class FailureKind(Enum):
    INVALID_CURRENCY = "invalid_currency"
    INVALID_AMOUNT = "invalid_amount"
    PROVIDER = "provider"
    TIMEOUT = "timeout"
    CONNECTION = "connection"
    HTTP = "http"
    INVALID_RESPONSE = "invalid_response"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T
    success: ClassVar[Literal[True]] = True


@dataclass(frozen=True)
class Failure:
    kind: FailureKind
    message: str
    success: ClassVar[Literal[False]] = False


@dataclass(frozen=True)
class ConversionSuccess:
    """A completed conversion, including the rate that produced it."""

    from_currency: str
    to_currency: str
    amount: float
    converted_amount: float
    exchange_rate: float
    last_updated: datetime
    success: ClassVar[Literal[True]] = True

    @property
    def last_update(self) -> str:
        return format_local(self.last_updated)

    @property
    def percentage_difference(self) -> float:
        """How far the rate is from parity, in percent."""
        return (self.exchange_rate - 1.0) * 100

    def summary(self) -> str:
        return (
            f"{self.amount:.2f} {self.from_currency} = "
            f"{self.converted_amount:.2f} {self.to_currency} "
            f"(rate: {self.exchange_rate:.6f}) as of {self.last_update}"
        )


@dataclass(frozen=True)
class ConversionFailure:
    """A rejected conversion. The input parameters are echoed back unchanged."""

    from_currency: object
    to_currency: object
    amount: object
    kind: FailureKind
    message: str
    success: ClassVar[Literal[False]] = False


ConversionResult = ConversionSuccess | ConversionFailure
