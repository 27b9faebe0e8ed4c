"""Market data client layer -- DexScreener REST API integration via httpx."""

from dexscreener_plugin.client.base import SERVICE_TYPE, MarketDataClient
from dexscreener_plugin.client.dexscreener import DexScreenerClient

__all__ = ["DexScreenerClient", "MarketDataClient", "SERVICE_TYPE"]
