"""Latest token profiles."""

from typing import Any

from dexscreener_plugin.actions.base import Action, ActionResult, get_client, message_text
from dexscreener_plugin.models import TokenProfile
from dexscreener_plugin.runtime import AgentRuntime

NAME = "dexscreener_token_profiles"
MAX_DISPLAYED = 5


async def validate(runtime: AgentRuntime, message: Any) -> bool:
    text = message_text(message).lower()
    return "profile" in text and "token" in text


def _render(index: int, profile: TokenProfile) -> str:
    links = " | ".join(
        f"[{link.label or link.type or 'link'}]({link.url})" for link in profile.links
    )
    return (
        f"**{index}. {profile.token_address}** on {profile.chain_id}\n"
        f"   📝 {profile.description or 'No description'}\n"
        f"   🔗 Links: {links or 'No links'}\n"
        f"   🌐 {profile.url}"
    )


async def handle(runtime: AgentRuntime, message: Any) -> ActionResult:
    result = await get_client(runtime).get_latest_token_profiles()
    if not result.success or result.data is None:
        return ActionResult(text=f"Failed to get token profiles: {result.error}", action=NAME)

    profiles = result.data[:MAX_DISPLAYED]
    if not profiles:
        return ActionResult(text="No token profiles found", action=NAME)

    listing = "\n\n".join(_render(i, profile) for i, profile in enumerate(profiles, 1))
    return ActionResult(
        text=f"**📋 Latest Token Profiles**\n\n{listing}",
        action=NAME,
        data=profiles,
    )


token_profiles_action = Action(
    name=NAME,
    description="Get latest token profiles from DexScreener",
    validate=validate,
    handler=handle,
    similes=["token profiles", "token details page"],
    examples=["Show me latest token profiles"],
)
