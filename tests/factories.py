"""
Builders for provider payloads and mocked httpx responses.
"""

from unittest.mock import Mock

TEST_API_KEY = "test_api_key_12345"
LAST_UPDATE_UNIX = 1_700_000_000


class FakeClock:
    """Manually advanced clock for cache expiry tests."""

    def __init__(self, start: float = 1000.0):
        self.current = start

    def now(self) -> float:
        return self.current

    def advance(self, seconds: float) -> None:
        self.current += seconds


def make_response(json_data):
    response = Mock()
    response.raise_for_status = Mock()
    if isinstance(json_data, Exception):
        response.json.side_effect = json_data
    else:
        response.json.return_value = json_data
    return response


def pair_payload(rate: float = 0.9, base: str = "USD", target: str = "EUR") -> dict:
    return {
        "result": "success",
        "base_code": base,
        "target_code": target,
        "conversion_rate": rate,
        "time_last_update_unix": LAST_UPDATE_UNIX,
    }


def latest_payload(base: str = "USD", rates: dict | None = None) -> dict:
    return {
        "result": "success",
        "base_code": base,
        "conversion_rates": rates or {"USD": 1, "EUR": 0.9, "GBP": 0.79, "JPY": 149.5},
        "time_last_update_unix": LAST_UPDATE_UNIX,
    }


def error_payload(error_type: str) -> dict:
    return {"result": "error", "error-type": error_type}
