"""Token details resolved from an EVM-style contract address."""

import re
from typing import Any

from dexscreener_plugin.actions.base import (
    Action,
    ActionResult,
    format_liquidity,
    format_optional_usd,
    get_client,
    message_text,
)
from dexscreener_plugin.formatting import format_price, format_price_change, format_usd_value
from dexscreener_plugin.logging import get_logger
from dexscreener_plugin.runtime import AgentRuntime

logger = get_logger(__name__)

NAME = "dexscreener_token_info"
MAX_LISTED_PAIRS = 3

ADDRESS_PATTERN = re.compile(r"0x[a-fA-F0-9]{40}")
DETAIL_KEYWORDS = ("info", "details", "price")


def extract_address(text: str) -> str | None:
    match = ADDRESS_PATTERN.search(text)
    return match.group(0) if match else None


async def validate(runtime: AgentRuntime, message: Any) -> bool:
    text = message_text(message).lower()
    return "token" in text and any(keyword in text for keyword in DETAIL_KEYWORDS)


async def handle(runtime: AgentRuntime, message: Any) -> ActionResult:
    address = extract_address(message_text(message))
    if address is None:
        return ActionResult(
            text='Please provide a token address. Example: "Get token info for 0x..."',
            action=NAME,
        )

    logger.info("token_info_requested", token_address=address)
    result = await get_client(runtime).get_token_pairs(token_address=address)
    if not result.success or result.data is None:
        return ActionResult(text=f"Failed to get token info: {result.error}", action=NAME)

    pairs = result.data
    if not pairs:
        return ActionResult(text=f"No pairs found for token {address}", action=NAME)

    # The deepest pool gives the most representative price
    main = max(pairs, key=lambda pair: pair.liquidity_usd)

    pair_lines = "\n".join(
        f"• **{pair.symbol_pair}** on {pair.dex_id} ({pair.chain_id})\n"
        f"  Price: {format_price(pair.display_price)} | Liq: {format_liquidity(pair)}"
        for pair in pairs[:MAX_LISTED_PAIRS]
    )

    text = (
        "**📊 Token Information**\n\n"
        f"**Token:** {main.base_token.name} ({main.base_token.symbol})\n"
        f"**Address:** `{main.base_token.address}`\n"
        f"**Price:** {format_price(main.display_price)}\n"
        f"**24h Change:** {format_price_change(main.price_change.h24)}\n"
        f"**24h Volume:** {format_usd_value(main.volume.h24)}\n"
        f"**Market Cap:** {format_optional_usd(main.market_cap)}\n"
        f"**FDV:** {format_optional_usd(main.fdv)}\n\n"
        f"**Top Trading Pairs:**\n{pair_lines}"
    )
    return ActionResult(text=text, action=NAME, data=pairs)


token_info_action = Action(
    name=NAME,
    description="Get detailed information about a token from DexScreener",
    validate=validate,
    handler=handle,
    similes=["token details", "token price", "get token", "check token"],
    examples=[
        "Get token info for 0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48",
        "What is the price of token 0x...",
    ],
)
