"""Tests for the boosted tokens and token profiles actions."""

import pytest

from dexscreener_plugin.actions.boosted import boosted_tokens_action
from dexscreener_plugin.actions.profiles import token_profiles_action
from dexscreener_plugin.models import BoostedToken, ServiceResult, TokenProfile


def _boost(address: str, **fields) -> BoostedToken:
    return BoostedToken.model_validate(
        {
            "chainId": "solana",
            "tokenAddress": address,
            "amount": 100,
            "totalAmount": 500,
            "url": f"https://dexscreener.com/solana/{address}",
            **fields,
        }
    )


class TestBoostedTokens:
    @pytest.mark.asyncio
    async def test_validate(self, runtime) -> None:
        assert await boosted_tokens_action.validate(runtime, "Show me boosted tokens")
        assert await boosted_tokens_action.validate(runtime, "any sponsored coins?")
        assert not await boosted_tokens_action.validate(runtime, "trending tokens")

    @pytest.mark.asyncio
    async def test_top_source(self, runtime, mock_client) -> None:
        mock_client.get_top_boosted_tokens.return_value = ServiceResult.ok(
            [_boost("Tok1", description="Moon soon")]
        )

        result = await boosted_tokens_action.handler(runtime, "What are the top promoted tokens?")

        mock_client.get_top_boosted_tokens.assert_awaited_once()
        mock_client.get_latest_boosted_tokens.assert_not_awaited()
        assert "Top Boosted Tokens" in result.text
        assert "Boost Amount: 100 (Total: 500)" in result.text
        assert "Moon soon" in result.text

    @pytest.mark.asyncio
    async def test_latest_source_and_limit(self, runtime, mock_client) -> None:
        mock_client.get_latest_boosted_tokens.return_value = ServiceResult.ok(
            [_boost(f"Tok{i}") for i in range(12)]
        )

        result = await boosted_tokens_action.handler(runtime, "boosted tokens please")

        assert "Latest Boosted Tokens" in result.text
        assert "No description" in result.text
        assert len(result.data) == 10

    @pytest.mark.asyncio
    async def test_empty(self, runtime, mock_client) -> None:
        mock_client.get_latest_boosted_tokens.return_value = ServiceResult.ok([])

        result = await boosted_tokens_action.handler(runtime, "boosted")

        assert result.text == "No boosted tokens found"

    @pytest.mark.asyncio
    async def test_failure(self, runtime, mock_client) -> None:
        mock_client.get_latest_boosted_tokens.return_value = ServiceResult.fail("down")

        result = await boosted_tokens_action.handler(runtime, "boosted")

        assert result.text == "Failed to get boosted tokens: down"


class TestTokenProfiles:
    @pytest.mark.asyncio
    async def test_validate(self, runtime) -> None:
        assert await token_profiles_action.validate(runtime, "Show me latest token profiles")
        assert not await token_profiles_action.validate(runtime, "my profile")

    @pytest.mark.asyncio
    async def test_renders_links(self, runtime, mock_client) -> None:
        profiles = [
            TokenProfile.model_validate(
                {
                    "chainId": "ethereum",
                    "tokenAddress": f"0x{i}",
                    "url": f"https://dexscreener.com/ethereum/0x{i}",
                    "links": [
                        {"label": "Website", "url": "https://site.io"},
                        {"type": "twitter", "url": "https://x.com/tok"},
                    ],
                }
            )
            for i in range(6)
        ]
        mock_client.get_latest_token_profiles.return_value = ServiceResult.ok(profiles)

        result = await token_profiles_action.handler(runtime, "token profiles")

        assert "Latest Token Profiles" in result.text
        assert "[Website](https://site.io) | [twitter](https://x.com/tok)" in result.text
        assert len(result.data) == 5

    @pytest.mark.asyncio
    async def test_no_links(self, runtime, mock_client) -> None:
        mock_client.get_latest_token_profiles.return_value = ServiceResult.ok(
            [TokenProfile.model_validate({"chainId": "base", "tokenAddress": "0xb"})]
        )

        result = await token_profiles_action.handler(runtime, "token profiles")

        assert "Links: No links" in result.text

    @pytest.mark.asyncio
    async def test_failure(self, runtime, mock_client) -> None:
        mock_client.get_latest_token_profiles.return_value = ServiceResult.fail("err")

        result = await token_profiles_action.handler(runtime, "token profiles")

        assert result.text == "Failed to get token profiles: err"
