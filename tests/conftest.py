"""Shared test fixtures for the DexScreener plugin."""

import time
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from dexscreener_plugin.client.dexscreener import DexScreenerClient
from dexscreener_plugin.config import DexScreenerSettings


class FakeDexScreener:
    """Canned DexScreener API served through httpx.MockTransport.

    Routes are keyed by URL path. A route value may be a JSON body, a
    (status, body) tuple, or an exception to raise. Every request is
    recorded in order, with its monotonic arrival time in ``times``.
    """

    def __init__(self) -> None:
        self.routes: dict[str, Any] = {}
        self.requests: list[httpx.Request] = []
        self.times: list[float] = []

    def add(self, path: str, body: Any, status: int = 200) -> None:
        self.routes[path] = (status, body)

    def fail(self, path: str, error: Exception) -> None:
        self.routes[path] = error

    @property
    def paths(self) -> list[str]:
        return [request.url.path for request in self.requests]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        self.times.append(time.monotonic())
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"message": f"No route for {request.url.path}"})
        if isinstance(route, Exception):
            raise route
        status, body = route
        if isinstance(body, str):
            return httpx.Response(status, text=body)
        return httpx.Response(status, json=body)


@pytest.fixture
def fake_api() -> FakeDexScreener:
    return FakeDexScreener()


@pytest.fixture
def test_settings() -> DexScreenerSettings:
    """Settings with pacing disabled so tests never sleep."""
    return DexScreenerSettings(api_url="https://api.dexscreener.com", rate_limit_delay=0)


@pytest.fixture
def client(fake_api: FakeDexScreener, test_settings: DexScreenerSettings) -> DexScreenerClient:
    return DexScreenerClient(test_settings, transport=httpx.MockTransport(fake_api.handler))


@pytest.fixture
def make_pair() -> Callable[..., dict]:
    """Factory for camelCase pair payloads as the API returns them."""

    def _make_pair(
        base: str = "PEPE",
        quote: str = "WETH",
        chain_id: str = "ethereum",
        **overrides: Any,
    ) -> dict:
        payload: dict[str, Any] = {
            "chainId": chain_id,
            "dexId": "uniswap",
            "url": f"https://dexscreener.com/{chain_id}/{base.lower()}",
            "pairAddress": f"0xpair{base.lower()}",
            "baseToken": {"address": f"0x{base.lower()}", "name": base.title(), "symbol": base},
            "quoteToken": {"address": f"0x{quote.lower()}", "name": quote, "symbol": quote},
            "priceNative": "0.0000001",
            "priceUsd": "0.00001234",
            "txns": {"h24": {"buys": 100, "sells": 50}},
            "volume": {"h24": 1000000},
            "priceChange": {"h24": 12.5},
            "liquidity": {"usd": 250000, "base": 1000, "quote": 50},
        }
        payload.update(overrides)
        return payload

    return _make_pair
