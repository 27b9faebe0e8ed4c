"""Fixtures for action tests: a runtime holding a mocked market data client."""

from collections.abc import Callable
from unittest.mock import AsyncMock

import pytest

from dexscreener_plugin.client.base import SERVICE_TYPE, MarketDataClient
from dexscreener_plugin.models import TradingPair
from dexscreener_plugin.runtime import LocalRuntime


@pytest.fixture
def mock_client() -> AsyncMock:
    return AsyncMock(spec=MarketDataClient)


@pytest.fixture
def runtime(mock_client: AsyncMock) -> LocalRuntime:
    runtime = LocalRuntime()
    runtime.register_service(SERVICE_TYPE, mock_client)
    return runtime


@pytest.fixture
def pair(make_pair) -> Callable[..., TradingPair]:
    """Factory for parsed TradingPair models."""

    def _pair(*args, **kwargs) -> TradingPair:
        return TradingPair.model_validate(make_pair(*args, **kwargs))

    return _pair
