"""structlog setup for the plugin.

Client operations and action handlers emit snake_case events with
keyword context (``dexscreener_operation_failed``, ``search_requested``).
The plugin router binds the matched action name through contextvars, so
every event raised while that action runs carries ``action=...``.
"""

import logging
import os

import structlog

# Loggers that report each HTTP round trip at INFO
_HTTP_LOGGERS = ("httpx", "httpcore")


def _renderer() -> structlog.types.Processor:
    """Pick the final renderer from LOG_FORMAT ("json" or "console")."""
    if os.environ.get("LOG_FORMAT", "console").lower() == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def setup_logging(log_level: str = "INFO") -> None:
    """Route structlog through stdlib logging on stderr.

    The CLI prints the reply on stdout, so log records never share that
    stream. HTTP client loggers stay at WARNING unless ``log_level`` is
    DEBUG, where per-request lines help trace pacing.
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(),
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    level = getattr(logging, log_level.upper(), logging.INFO)
    root_logger.setLevel(level)

    http_level = logging.DEBUG if level <= logging.DEBUG else logging.WARNING
    for name in _HTTP_LOGGERS:
        logging.getLogger(name).setLevel(http_level)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
