"""Command-line entry point for the DexScreener plugin.

Runs a single natural-language message through the plugin the same way
an agent host would:

1. AppSettings (configuration)
2. Logging setup
3. LocalRuntime exposing the DexScreener settings
4. Plugin init (client registration)
5. First-match routing of the message
6. Client shutdown

Example:
    dexscreener-plugin "top 5 hot tokens in the last 6h"
"""

import argparse
import asyncio

from dexscreener_plugin.config import AppSettings
from dexscreener_plugin.logging import get_logger, setup_logging
from dexscreener_plugin.plugin import DexScreenerPlugin
from dexscreener_plugin.runtime import LocalRuntime

NO_MATCH_TEXT = (
    "Sorry, I can search tokens, show token info, trending tokens, new pairs, "
    "top pairs per chain, boosted tokens and token profiles."
)


async def run(message: str) -> str:
    """Route ``message`` through the plugin and return the reply text."""
    settings = AppSettings()
    setup_logging(settings.log_level)
    logger = get_logger("dexscreener_plugin.main")

    runtime = LocalRuntime.from_settings(settings.dexscreener)
    plugin = DexScreenerPlugin()
    await plugin.init(runtime)

    try:
        result = await plugin.route(runtime, message)
    finally:
        await plugin.shutdown(runtime)

    if result is None:
        return NO_MATCH_TEXT

    logger.info(
        "message_handled",
        action=result.action,
        results=len(result.data) if result.data is not None else 0,
    )
    return result.text


def main() -> None:
    """Synchronous entry point."""
    parser = argparse.ArgumentParser(
        prog="dexscreener-plugin",
        description="Ask DexScreener a question in plain English.",
    )
    parser.add_argument("message", nargs="+", help="the message to answer")
    args = parser.parse_args()

    print(asyncio.run(run(" ".join(args.message))))


if __name__ == "__main__":
    main()
