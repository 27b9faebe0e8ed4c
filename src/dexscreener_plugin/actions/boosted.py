"""Boosted (promoted) tokens, top or latest."""

from typing import Any

from dexscreener_plugin.actions.base import Action, ActionResult, get_client, message_text
from dexscreener_plugin.logging import get_logger
from dexscreener_plugin.models import BoostedToken
from dexscreener_plugin.runtime import AgentRuntime

logger = get_logger(__name__)

NAME = "dexscreener_boosted_tokens"
MAX_DISPLAYED = 10

KEYWORDS = ("boosted", "promoted", "sponsored")


async def validate(runtime: AgentRuntime, message: Any) -> bool:
    text = message_text(message).lower()
    return any(keyword in text for keyword in KEYWORDS)


def _render(index: int, token: BoostedToken) -> str:
    return (
        f"**{index}. {token.token_address}** on {token.chain_id}\n"
        f"   💰 Boost Amount: {token.amount} (Total: {token.total_amount})\n"
        f"   📝 {token.description or 'No description'}\n"
        f"   🔗 {token.url}"
    )


async def handle(runtime: AgentRuntime, message: Any) -> ActionResult:
    is_top = "top" in message_text(message).lower()
    client = get_client(runtime)

    logger.info("boosted_tokens_requested", source="top" if is_top else "latest")
    if is_top:
        result = await client.get_top_boosted_tokens()
    else:
        result = await client.get_latest_boosted_tokens()

    if not result.success or result.data is None:
        return ActionResult(text=f"Failed to get boosted tokens: {result.error}", action=NAME)

    tokens = result.data[:MAX_DISPLAYED]
    if not tokens:
        return ActionResult(text="No boosted tokens found", action=NAME)

    listing = "\n\n".join(_render(i, token) for i, token in enumerate(tokens, 1))
    heading = "Top" if is_top else "Latest"
    return ActionResult(
        text=f"**⚡ {heading} Boosted Tokens**\n\n{listing}",
        action=NAME,
        data=tokens,
    )


boosted_tokens_action = Action(
    name=NAME,
    description="Get boosted tokens from DexScreener",
    validate=validate,
    handler=handle,
    similes=["promoted tokens", "sponsored tokens", "boosted coins"],
    examples=[
        "Show me boosted tokens on DexScreener",
        "What are the top promoted tokens?",
    ],
)
