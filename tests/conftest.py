"""
Shared test configuration and fixtures.
"""

from unittest.mock import AsyncMock

import httpx
import pytest

from tests.factories import FakeClock


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def mock_http_client():
    return AsyncMock(spec=httpx.AsyncClient)
