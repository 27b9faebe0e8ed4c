"""Tests for host message text extraction."""

from types import SimpleNamespace

import pytest

from dexscreener_plugin.actions.base import Message, message_text
from dexscreener_plugin.actions.search import search_action


class TestMessageText:
    @pytest.mark.parametrize(
        ("message", "expected"),
        [
            ("Search for PEPE", "Search for PEPE"),
            (Message("hot tokens"), "hot tokens"),
            (SimpleNamespace(content=SimpleNamespace(text="new pairs")), "new pairs"),
            (SimpleNamespace(content="boosted"), "boosted"),
            ({"content": {"text": "token profiles"}}, "token profiles"),
            ({"content": "trending"}, "trending"),
            ({"text": "find WIF"}, "find WIF"),
        ],
    )
    def test_supported_shapes(self, message, expected) -> None:
        assert message_text(message) == expected

    @pytest.mark.parametrize(
        "message",
        [{"content": None}, {"content": {"text": None}}, {"content": ["x"]}, {}],
    )
    def test_empty_content_reads_as_blank(self, message) -> None:
        assert message_text(message) == ""

    @pytest.mark.asyncio
    async def test_null_content_is_not_matched(self, runtime) -> None:
        assert not await search_action.validate(runtime, {"content": None})
