"""Top pairs on a named blockchain."""

import re
from typing import Any

from dexscreener_plugin.actions.base import (
    Action,
    ActionResult,
    format_liquidity,
    get_client,
    message_text,
)
from dexscreener_plugin.client.base import SortKey
from dexscreener_plugin.formatting import format_price, format_price_change, format_usd_value
from dexscreener_plugin.logging import get_logger
from dexscreener_plugin.models import TradingPair
from dexscreener_plugin.runtime import AgentRuntime

logger = get_logger(__name__)

NAME = "dexscreener_chain_pairs"
REQUEST_LIMIT = 10
MAX_DISPLAYED = 5

SUPPORTED_CHAINS = (
    "ethereum",
    "bsc",
    "polygon",
    "arbitrum",
    "optimism",
    "base",
    "solana",
    "avalanche",
)
# Whole-word match so "base" does not fire on "database"
_CHAIN_PATTERNS = [(chain, re.compile(rf"\b{chain}\b")) for chain in SUPPORTED_CHAINS]


def extract_chain(text: str) -> str | None:
    lowered = text.lower()
    for chain, pattern in _CHAIN_PATTERNS:
        if pattern.search(lowered):
            return chain
    return None


def extract_sort_key(text: str) -> SortKey:
    lowered = text.lower()
    if "liquid" in lowered:
        return "liquidity"
    if "gain" in lowered or "change" in lowered:
        return "priceChange"
    if "active" in lowered or "trades" in lowered:
        return "txns"
    return "volume"


def _metric(pair: TradingPair, sort_by: SortKey) -> str:
    if sort_by == "liquidity":
        return f"Liq: {format_liquidity(pair)}"
    if sort_by == "priceChange":
        return f"24h: {format_price_change(pair.price_change.h24)}"
    if sort_by == "txns":
        return f"Trades: {pair.total_txns_24h}"
    return f"Vol: {format_usd_value(pair.volume.h24)}"


async def validate(runtime: AgentRuntime, message: Any) -> bool:
    return extract_chain(message_text(message)) is not None


async def handle(runtime: AgentRuntime, message: Any) -> ActionResult:
    text = message_text(message)
    chain = extract_chain(text)
    if chain is None:
        return ActionResult(
            text=f"Please specify a blockchain. Supported: {', '.join(SUPPORTED_CHAINS)}",
            action=NAME,
        )

    sort_by = extract_sort_key(text)
    logger.info("chain_pairs_requested", chain=chain, sort_by=sort_by)
    result = await get_client(runtime).get_pairs_by_chain(
        chain=chain, sort_by=sort_by, limit=REQUEST_LIMIT
    )
    if not result.success or result.data is None:
        return ActionResult(text=f"Failed to get {chain} pairs: {result.error}", action=NAME)

    pairs = result.data
    if not pairs:
        return ActionResult(text=f"No {chain} pairs found", action=NAME)

    listing = "\n\n".join(
        f"**{i}. {pair.symbol_pair}** on {pair.dex_id}\n"
        f"   💰 {format_price(pair.display_price)} | {_metric(pair, sort_by)}"
        for i, pair in enumerate(pairs[:MAX_DISPLAYED], 1)
    )
    return ActionResult(
        text=f"**⛓️ Top {chain.capitalize()} Pairs by {sort_by}**\n\n{listing}",
        action=NAME,
        data=pairs,
    )


chain_pairs_action = Action(
    name=NAME,
    description="Get top trading pairs from a specific blockchain",
    validate=validate,
    handler=handle,
    similes=["tokens on", "pairs on", "top on"],
    examples=[
        "Show me top tokens on ethereum",
        "What are the most liquid pairs on polygon?",
    ],
)
