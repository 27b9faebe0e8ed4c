"""DexScreener analytics plugin for conversational agents."""

from dexscreener_plugin.actions import DEXSCREENER_ACTIONS, Action, ActionResult, Message
from dexscreener_plugin.client import SERVICE_TYPE, DexScreenerClient, MarketDataClient
from dexscreener_plugin.config import AppSettings, DexScreenerSettings
from dexscreener_plugin.models import (
    BoostedToken,
    OrderStatus,
    ServiceResult,
    TokenProfile,
    TradingPair,
)
from dexscreener_plugin.plugin import DexScreenerPlugin, dexscreener_plugin
from dexscreener_plugin.runtime import AgentRuntime, LocalRuntime

__all__ = [
    "DEXSCREENER_ACTIONS",
    "SERVICE_TYPE",
    "Action",
    "ActionResult",
    "AgentRuntime",
    "AppSettings",
    "BoostedToken",
    "DexScreenerClient",
    "DexScreenerPlugin",
    "DexScreenerSettings",
    "LocalRuntime",
    "MarketDataClient",
    "Message",
    "OrderStatus",
    "ServiceResult",
    "TokenProfile",
    "TradingPair",
    "dexscreener_plugin",
]
