"""Configuration system using pydantic-settings with environment variable loading."""

import re
from typing import Any

from pydantic_settings import BaseSettings, SettingsConfigDict

from dexscreener_plugin.logging import get_logger

logger = get_logger(__name__)

# Host settings keys consulted by DexScreenerSettings.from_runtime()
API_URL_SETTING = "DEXSCREENER_API_URL"
RATE_LIMIT_DELAY_SETTING = "DEXSCREENER_RATE_LIMIT_DELAY"

# Leading integer, so host values like "150ms" read as 150
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class DexScreenerSettings(BaseSettings):
    """DexScreener API connection settings."""

    model_config = SettingsConfigDict(env_prefix="DEXSCREENER_")

    api_url: str = "https://api.dexscreener.com"
    rate_limit_delay: int = 100  # milliseconds between outbound requests
    timeout_seconds: float = 10.0
    user_agent: str = "ElizaOS-DexScreener-Plugin/1.0"

    @classmethod
    def from_runtime(cls, runtime: Any) -> "DexScreenerSettings":
        """Build settings from the host's string-keyed settings lookup.

        Keys the host does not define fall back to environment variables
        and then to the field defaults. A delay without a leading integer
        is ignored with a warning.
        """
        overrides: dict[str, Any] = {}

        api_url = runtime.get_setting(API_URL_SETTING)
        if api_url:
            overrides["api_url"] = api_url

        delay = runtime.get_setting(RATE_LIMIT_DELAY_SETTING)
        if delay not in (None, ""):
            match = _LEADING_INT.match(str(delay))
            if match:
                overrides["rate_limit_delay"] = int(match.group(1))
            else:
                logger.warning(
                    "invalid_rate_limit_delay",
                    setting=RATE_LIMIT_DELAY_SETTING,
                    value=delay,
                )

        return cls(**overrides)


class AppSettings(BaseSettings):
    """Root application settings, composing all sub-settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    log_level: str = "INFO"
    dexscreener: DexScreenerSettings = DexScreenerSettings()
