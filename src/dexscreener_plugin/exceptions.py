"""Custom exceptions for the DexScreener plugin.

Client-layer exceptions never escape a client operation: they are raised
inside the transport helpers and converted to a failed ServiceResult at
the operation boundary.
"""


class PluginError(Exception):
    """Base exception for all plugin errors."""


class UpstreamError(PluginError):
    """Raised when the DexScreener API answers with an error or unusable payload."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ServiceNotRegisteredError(PluginError):
    """Raised when an action runs before the client is registered with the runtime."""
