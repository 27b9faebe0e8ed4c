"""Shared action types and rendering helpers.

An Action pairs a keyword predicate with a handler. Predicates are plain
substring / regex tests over the lowercased message text; this is
pattern matching, not language understanding.
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any

from dexscreener_plugin.client.base import SERVICE_TYPE, MarketDataClient
from dexscreener_plugin.formatting import format_usd_value
from dexscreener_plugin.models import TradingPair
from dexscreener_plugin.runtime import AgentRuntime

NOT_AVAILABLE = "N/A"


@dataclass
class Message:
    """Minimal inbound message: the host's content text."""

    text: str


@dataclass
class ActionResult:
    """Handler output delivered back to the host."""

    text: str
    action: str
    data: list[Any] | None = None


Validator = Callable[[AgentRuntime, Any], Awaitable[bool]]
Handler = Callable[[AgentRuntime, Any], Awaitable[ActionResult]]


@dataclass(frozen=True)
class Action:
    name: str
    description: str
    validate: Validator
    handler: Handler
    similes: list[str] = field(default_factory=list)
    examples: list[str] = field(default_factory=list)


def message_text(message: Any) -> str:
    """Return the text of a host message.

    Accepts a bare string, an object with ``text``, an object whose
    ``content`` is a string or has ``text``, or a dict with a "text" key.
    """
    if isinstance(message, str):
        return message
    if isinstance(message, dict):
        # A missing or null "content" means the text sits on the dict itself
        content = message.get("content") or message
        if isinstance(content, str):
            return content
        if isinstance(content, dict):
            return str(content.get("text") or "")
        return ""

    content = getattr(message, "content", None)
    if isinstance(content, str):
        return content
    if content is not None:
        return str(getattr(content, "text", "") or "")
    return str(getattr(message, "text", "") or "")


def get_client(runtime: AgentRuntime) -> MarketDataClient:
    return runtime.get_service(SERVICE_TYPE)


def format_liquidity(pair: TradingPair) -> str:
    if pair.liquidity is None or not pair.liquidity.usd:
        return NOT_AVAILABLE
    return format_usd_value(pair.liquidity.usd)


def format_optional_usd(value: Any) -> str:
    return format_usd_value(value) if value else NOT_AVAILABLE
