"""Free-text token and pair search."""

import re
from typing import Any

from dexscreener_plugin.actions.base import (
    Action,
    ActionResult,
    format_liquidity,
    get_client,
    message_text,
)
from dexscreener_plugin.formatting import format_price, format_price_change, format_usd_value
from dexscreener_plugin.logging import get_logger
from dexscreener_plugin.models import TradingPair
from dexscreener_plugin.runtime import AgentRuntime

logger = get_logger(__name__)

NAME = "dexscreener_search"
MAX_RESULTS = 5

KEYWORDS = ("search", "find", "look for")
QUERY_PATTERN = re.compile(
    r"(?:search|find|look for)\s+(?:for\s+)?(.+?)(?:\s+on\s+dexscreener)?$",
    re.IGNORECASE,
)


def extract_query(text: str) -> str | None:
    match = QUERY_PATTERN.search(text.strip())
    if not match:
        return None
    query = match.group(1).strip()
    # "search for" with nothing after it leaves the connective as the query
    if not query or query.lower() == "for":
        return None
    return query


async def validate(runtime: AgentRuntime, message: Any) -> bool:
    text = message_text(message).lower()
    return any(keyword in text for keyword in KEYWORDS)


def _render(index: int, pair: TradingPair) -> str:
    return (
        f"**{index}. {pair.symbol_pair}** on {pair.dex_id} ({pair.chain_id})\n"
        f"   💰 Price: {format_price(pair.display_price)}\n"
        f"   📈 24h: {format_price_change(pair.price_change.h24)}"
        f" | Vol: {format_usd_value(pair.volume.h24)}\n"
        f"   💧 Liq: {format_liquidity(pair)}\n"
        f"   🔗 {pair.url}"
    )


async def handle(runtime: AgentRuntime, message: Any) -> ActionResult:
    query = extract_query(message_text(message))
    if query is None:
        return ActionResult(
            text='Please provide a search query. Example: "Search for PEPE"',
            action=NAME,
        )

    logger.info("search_requested", query=query)
    result = await get_client(runtime).search(query=query)
    if not result.success or result.data is None:
        return ActionResult(text=f"Failed to search: {result.error}", action=NAME)

    pairs = result.data[:MAX_RESULTS]
    if not pairs:
        return ActionResult(text=f'No results found for "{query}"', action=NAME)

    listing = "\n\n".join(_render(i, pair) for i, pair in enumerate(pairs, 1))
    return ActionResult(
        text=f'**🔍 Search Results for "{query}"**\n\n{listing}',
        action=NAME,
        data=pairs,
    )


search_action = Action(
    name=NAME,
    description="Search for tokens/pairs on DexScreener",
    validate=validate,
    handler=handle,
    similes=["find token", "look for", "search dexscreener"],
    examples=["Search for PEPE tokens", "Find USDC pairs on dexscreener"],
)
