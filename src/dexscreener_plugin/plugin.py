"""Plugin definition: client registration and first-match action routing."""

from collections.abc import Callable
from typing import Any

import structlog

from dexscreener_plugin.actions import DEXSCREENER_ACTIONS, Action, ActionResult
from dexscreener_plugin.client.base import SERVICE_TYPE, MarketDataClient
from dexscreener_plugin.client.dexscreener import DexScreenerClient
from dexscreener_plugin.config import DexScreenerSettings
from dexscreener_plugin.logging import get_logger
from dexscreener_plugin.runtime import AgentRuntime

logger = get_logger(__name__)

ClientFactory = Callable[[DexScreenerSettings], MarketDataClient]


class DexScreenerPlugin:
    """Bundles the DexScreener client with its intent actions.

    The host calls init() once to register the client, then either
    dispatches to individual actions itself or calls route().
    """

    name = "dexscreener-analytics-plugin"
    description = "Plugin for DexScreener DEX analytics and token information"

    def __init__(
        self,
        actions: list[Action] | None = None,
        client_factory: ClientFactory = DexScreenerClient,
    ) -> None:
        self.actions = list(actions if actions is not None else DEXSCREENER_ACTIONS)
        self._client_factory = client_factory

    async def init(self, runtime: AgentRuntime) -> MarketDataClient:
        """Build the client from runtime settings and register it."""
        settings = DexScreenerSettings.from_runtime(runtime)
        client = self._client_factory(settings)
        runtime.register_service(SERVICE_TYPE, client)
        logger.info(
            "dexscreener_plugin_initialized",
            api_url=settings.api_url,
            rate_limit_delay_ms=settings.rate_limit_delay,
            actions=[action.name for action in self.actions],
        )
        return client

    async def route(self, runtime: AgentRuntime, message: Any) -> ActionResult | None:
        """Run the first action whose predicate accepts ``message``.

        Returns None when no action matches.
        """
        for action in self.actions:
            if await action.validate(runtime, message):
                with structlog.contextvars.bound_contextvars(action=action.name):
                    logger.debug("action_matched")
                    return await action.handler(runtime, message)

        logger.info("no_action_matched")
        return None

    async def shutdown(self, runtime: AgentRuntime) -> None:
        client: MarketDataClient = runtime.get_service(SERVICE_TYPE)
        await client.stop()


dexscreener_plugin = DexScreenerPlugin()
