import time
from datetime import UTC, datetime
from typing import Protocol


class Clock(Protocol):
    def now(self) -> float: ...


class MonotonicClock:
    """Seconds from time.monotonic(); only differences are meaningful."""

    def now(self) -> float:
        return time.monotonic()


def from_unix(timestamp: int | float) -> datetime:
    """Converts a unix timestamp to an aware datetime in the local timezone."""
    return datetime.fromtimestamp(timestamp, tz=UTC).astimezone()


def format_local(dt: datetime) -> str:
    """Formats a datetime using the locale's date and time representation."""
    return dt.strftime("%c")
