"""Newly listed pairs, approximated from the latest token profiles."""

import re
import time
from typing import Any

from dexscreener_plugin.actions.base import (
    Action,
    ActionResult,
    format_liquidity,
    get_client,
    message_text,
)
from dexscreener_plugin.formatting import format_price
from dexscreener_plugin.logging import get_logger
from dexscreener_plugin.models import NEW_LABEL, TradingPair
from dexscreener_plugin.runtime import AgentRuntime

logger = get_logger(__name__)

NAME = "dexscreener_new_pairs"
DEFAULT_LIMIT = 10

LISTING_KEYWORDS = ("pairs", "tokens", "listings")
CHAIN_PATTERN = re.compile(r"\bon\s+(\w+)", re.IGNORECASE)
LIMIT_PATTERN = re.compile(r"(\d+)\s+(?:new|latest)", re.IGNORECASE)

# "on DexScreener" names the data source, not a chain
_NOT_CHAINS = {"dexscreener"}


def extract_params(text: str) -> tuple[str | None, int]:
    """Return (chain, limit); chain is None when no chain is named."""
    chain = None
    for match in CHAIN_PATTERN.finditer(text):
        if match.group(1).lower() not in _NOT_CHAINS:
            chain = match.group(1)
            break

    limit_match = LIMIT_PATTERN.search(text)
    limit = int(limit_match.group(1)) if limit_match else DEFAULT_LIMIT
    return chain, limit


def format_age(created_at_ms: int | None, now_ms: float | None = None) -> str:
    if not created_at_ms:
        return "Unknown"
    if now_ms is None:
        now_ms = time.time() * 1000
    return f"{int((now_ms - created_at_ms) // 60000)} mins ago"


async def validate(runtime: AgentRuntime, message: Any) -> bool:
    text = message_text(message).lower()
    return "new" in text and any(keyword in text for keyword in LISTING_KEYWORDS)


def _render(index: int, pair: TradingPair) -> str:
    badge = " 🆕" if pair.has_label(NEW_LABEL) else ""
    return (
        f"**{index}. {pair.symbol_pair}**{badge}\n"
        f"   ⏰ Created: {format_age(pair.pair_created_at)} on {pair.dex_id} ({pair.chain_id})\n"
        f"   💰 Price: {format_price(pair.display_price)}\n"
        f"   💧 Liquidity: {format_liquidity(pair)}"
    )


async def handle(runtime: AgentRuntime, message: Any) -> ActionResult:
    chain, limit = extract_params(message_text(message))

    logger.info("new_pairs_requested", chain=chain, limit=limit)
    result = await get_client(runtime).get_new_pairs(chain=chain, limit=limit)
    if not result.success or result.data is None:
        return ActionResult(text=f"Failed to get new pairs: {result.error}", action=NAME)

    pairs = result.data
    scope = f" on {chain}" if chain else ""
    if not pairs:
        return ActionResult(text=f"No new pairs found{scope}", action=NAME)

    listing = "\n\n".join(_render(i, pair) for i, pair in enumerate(pairs, 1))
    return ActionResult(
        text=f"**🆕 New Trading Pairs{scope}**\n\n{listing}",
        action=NAME,
        data=pairs,
    )


new_pairs_action = Action(
    name=NAME,
    description="Get newly created trading pairs from DexScreener",
    validate=validate,
    handler=handle,
    similes=["new listings", "latest pairs", "new tokens", "fresh pairs"],
    examples=[
        "Show me new pairs on DexScreener",
        "What are the 5 new tokens on ethereum?",
    ],
)
