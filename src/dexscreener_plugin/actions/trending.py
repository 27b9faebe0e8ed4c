"""Trending tokens, approximated from the promoted-token listing."""

import re
from typing import Any

from dexscreener_plugin.actions.base import (
    Action,
    ActionResult,
    format_optional_usd,
    get_client,
    message_text,
)
from dexscreener_plugin.formatting import format_price, format_price_change, format_usd_value
from dexscreener_plugin.logging import get_logger
from dexscreener_plugin.models import TradingPair
from dexscreener_plugin.runtime import AgentRuntime

logger = get_logger(__name__)

NAME = "dexscreener_trending"
DEFAULT_TIMEFRAME = "24h"
DEFAULT_LIMIT = 10

KEYWORDS = ("trending", "hot", "popular", "gainers")
TIMEFRAME_PATTERN = re.compile(r"\b(1h|6h|24h)\b", re.IGNORECASE)
LIMIT_PATTERN = re.compile(r"top\s+(\d+)", re.IGNORECASE)


def extract_params(text: str) -> tuple[str, int]:
    """Return (timeframe, limit) with defaults for anything not mentioned."""
    timeframe_match = TIMEFRAME_PATTERN.search(text)
    limit_match = LIMIT_PATTERN.search(text)
    timeframe = timeframe_match.group(1).lower() if timeframe_match else DEFAULT_TIMEFRAME
    limit = int(limit_match.group(1)) if limit_match else DEFAULT_LIMIT
    return timeframe, limit


async def validate(runtime: AgentRuntime, message: Any) -> bool:
    text = message_text(message).lower()
    return any(keyword in text for keyword in KEYWORDS)


def _render(index: int, pair: TradingPair) -> str:
    return (
        f"**{index}. {pair.symbol_pair}**\n"
        f"   💰 {format_price(pair.display_price)}"
        f" ({format_price_change(pair.price_change.h24)})\n"
        f"   📊 Vol: {format_usd_value(pair.volume.h24)}"
        f" | MCap: {format_optional_usd(pair.market_cap)}\n"
        f"   🔥 Buys: {pair.txns.h24.buys} | Sells: {pair.txns.h24.sells}"
    )


async def handle(runtime: AgentRuntime, message: Any) -> ActionResult:
    timeframe, limit = extract_params(message_text(message))

    logger.info("trending_requested", timeframe=timeframe, limit=limit)
    result = await get_client(runtime).get_trending(timeframe=timeframe, limit=limit)
    if not result.success or result.data is None:
        return ActionResult(
            text=f"Failed to get trending tokens: {result.error}", action=NAME
        )

    pairs = result.data
    if not pairs:
        return ActionResult(text="No trending tokens found", action=NAME)

    listing = "\n\n".join(_render(i, pair) for i, pair in enumerate(pairs, 1))
    return ActionResult(
        text=f"**🔥 Trending Tokens ({timeframe})**\n\n{listing}",
        action=NAME,
        data=pairs,
    )


trending_action = Action(
    name=NAME,
    description="Get trending tokens from DexScreener",
    validate=validate,
    handler=handle,
    similes=["hot tokens", "popular coins", "top gainers", "what's trending"],
    examples=[
        "Show me trending tokens on DexScreener",
        "What are the top 5 hot tokens in the last 6h?",
    ],
)
