"""Tests for structlog setup."""

import logging
from collections.abc import Iterator

import pytest
import structlog

from dexscreener_plugin.logging import _renderer, setup_logging


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    http_levels = {name: logging.getLogger(name).level for name in ("httpx", "httpcore")}
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    for name, http_level in http_levels.items():
        logging.getLogger(name).setLevel(http_level)
    structlog.reset_defaults()


class TestSetupLogging:
    def test_http_loggers_quiet_at_info(self) -> None:
        setup_logging("INFO")

        assert logging.getLogger().level == logging.INFO
        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING

    def test_http_loggers_verbose_at_debug(self) -> None:
        setup_logging("debug")

        assert logging.getLogger("httpx").level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self) -> None:
        setup_logging("LOUD")

        assert logging.getLogger().level == logging.INFO

    def test_single_stderr_handler(self) -> None:
        setup_logging()
        setup_logging()

        assert len(logging.getLogger().handlers) == 1


class TestRenderer:
    def test_json_when_requested(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_FORMAT", "JSON")

        assert isinstance(_renderer(), structlog.processors.JSONRenderer)

    def test_console_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("LOG_FORMAT", raising=False)

        assert isinstance(_renderer(), structlog.dev.ConsoleRenderer)
