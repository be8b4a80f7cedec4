# nosec B101


import json
import logging
from datetime import UTC, datetime

import pytest

from config.logging import JSONFormatter, configure_logging
from config.settings import Settings


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_json_formatter_outputs_structured_record():
    record = logging.LogRecord("rates", logging.WARNING, __file__, 10, "lookup %s failed", ("USD-EUR",), None)

    entry = json.loads(JSONFormatter().format(record))

    assert entry["level"] == "WARNING"
    assert entry["logger"] == "rates"
    assert entry["message"] == "lookup USD-EUR failed"


def test_json_formatter_serializes_extra_data_with_datetimes():
    updated = datetime(2025, 11, 5, 10, 30, tzinfo=UTC)
    record = logging.LogRecord("rates", logging.INFO, __file__, 10, "fetched", None, None)
    record.extra_data = {"pair": "USD-EUR", "rate": 0.9, "last_updated": updated}

    entry = json.loads(JSONFormatter().format(record))

    assert entry["data"] == {
        "pair": "USD-EUR",
        "rate": 0.9,
        "last_updated": "2025-11-05T10:30:00+00:00",
    }


def test_structured_rate_log_reaches_json_file(tmp_path, restore_root_logger):
    log_file = tmp_path / "app.log"
    updated = datetime(2025, 11, 5, 10, 30, tzinfo=UTC)

    configure_logging("ERROR", str(log_file))
    logging.getLogger("application.services.rate_service").info(
        "Fetched USD-EUR rate 0.9",
        extra={"extra_data": {"pair": "USD-EUR", "last_updated": updated}},
    )
    for handler in logging.getLogger().handlers:
        handler.flush()

    entry = json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])
    assert entry["data"]["pair"] == "USD-EUR"
    assert entry["data"]["last_updated"] == "2025-11-05T10:30:00+00:00"


def test_configure_logging_writes_json_file(tmp_path, restore_root_logger):
    log_file = tmp_path / "logs" / "app.log"

    configure_logging("ERROR", str(log_file))
    logging.getLogger("application.services.rate_service").info("Rate cache cleared")
    for handler in logging.getLogger().handlers:
        handler.flush()

    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert json.loads(lines[-1])["message"] == "Rate cache cleared"
    assert logging.getLogger("httpx").level == logging.WARNING


def test_settings_defaults():
    settings = Settings(_env_file=None)

    assert settings.EXCHANGERATE_BASE_URL == "https://v6.exchangerate-api.com/v6"
    assert settings.REQUEST_TIMEOUT == 10.0
    assert settings.RATE_CACHE_TTL_SECONDS == 300
    assert settings.USER_AGENT == "CurrencyConverter/1.0"


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("EXCHANGERATE_API_KEY", "from-env")
    monkeypatch.setenv("rate_cache_ttl_seconds", "30")

    settings = Settings(_env_file=None)

    assert settings.EXCHANGERATE_API_KEY == "from-env"
    assert settings.RATE_CACHE_TTL_SECONDS == 30
