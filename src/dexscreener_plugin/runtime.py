"""Host runtime boundary.

The plugin needs three things from the agent host: a string-keyed
settings lookup, a service registry, and a place to register actions.
AgentRuntime describes the first two; LocalRuntime is a dict-backed
implementation for the CLI and tests.
"""

from typing import Any, Protocol

from dexscreener_plugin.config import (
    API_URL_SETTING,
    RATE_LIMIT_DELAY_SETTING,
    DexScreenerSettings,
)
from dexscreener_plugin.exceptions import ServiceNotRegisteredError


class AgentRuntime(Protocol):
    def get_setting(self, key: str) -> str | None: ...

    def get_service(self, name: str) -> Any: ...

    def register_service(self, name: str, service: Any) -> None: ...


class LocalRuntime:
    """In-process runtime holding settings and services in dicts."""

    def __init__(self, settings: dict[str, str] | None = None) -> None:
        self._settings: dict[str, str] = dict(settings or {})
        self._services: dict[str, Any] = {}

    @classmethod
    def from_settings(cls, settings: DexScreenerSettings) -> "LocalRuntime":
        """Expose pydantic settings through the host's key/value lookup."""
        return cls(
            {
                API_URL_SETTING: settings.api_url,
                RATE_LIMIT_DELAY_SETTING: str(settings.rate_limit_delay),
            }
        )

    def get_setting(self, key: str) -> str | None:
        return self._settings.get(key)

    def get_service(self, name: str) -> Any:
        try:
            return self._services[name]
        except KeyError:
            raise ServiceNotRegisteredError(f"Service '{name}' is not registered") from None

    def register_service(self, name: str, service: Any) -> None:
        self._services[name] = service
