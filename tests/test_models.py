"""Tests for payload parsing and entity helpers."""

from decimal import Decimal

from dexscreener_plugin.models import (
    BoostedToken,
    OrderState,
    OrderStatus,
    ServiceResult,
    TokenProfile,
    TradingPair,
)


class TestTradingPair:
    def test_parses_camel_case_payload(self, make_pair) -> None:
        pair = TradingPair.model_validate(
            make_pair(
                "PEPE",
                "WETH",
                fdv=5000000,
                marketCap=4000000,
                pairCreatedAt=1700000000000,
                info={
                    "imageUrl": "https://img/pepe.png",
                    "websites": [{"label": "Website", "url": "https://pepe.vip"}],
                    "socials": [{"type": "twitter", "url": "https://x.com/pepe"}],
                },
            )
        )

        assert pair.chain_id == "ethereum"
        assert pair.pair_address == "0xpairpepe"
        assert pair.symbol_pair == "PEPE/WETH"
        assert pair.price_usd == Decimal("0.00001234")
        assert pair.market_cap == Decimal("4000000")
        assert pair.pair_created_at == 1700000000000
        assert pair.info.image_url == "https://img/pepe.png"
        assert pair.info.socials[0].type == "twitter"

    def test_windows_always_complete(self) -> None:
        pair = TradingPair.model_validate(
            {
                "chainId": "bsc",
                "txns": {"h24": {"buys": 3}, "m5": None},
                "volume": {"h1": 10},
                "priceChange": None,
            }
        )

        for window in ("m5", "h1", "h6", "h24"):
            assert getattr(pair.volume, window) >= 0
            assert getattr(pair.price_change, window) == Decimal("0")
        assert pair.txns.h24.buys == 3
        assert pair.txns.h24.sells == 0
        assert pair.txns.m5.total == 0
        assert pair.volume.h1 == Decimal("10")
        assert pair.volume.h24 == Decimal("0")

    def test_minimal_payload_gets_defaults(self) -> None:
        pair = TradingPair.model_validate({"baseToken": {"symbol": "PEPE"}})

        assert pair.base_token.symbol == "PEPE"
        assert pair.quote_token.symbol == ""
        assert pair.liquidity is None
        assert pair.liquidity_usd == Decimal("0")
        assert pair.labels is None

    def test_display_price_falls_back_to_native(self) -> None:
        pair = TradingPair.model_validate({"priceNative": "0.002"})

        assert pair.display_price == Decimal("0.002")

    def test_total_txns_24h(self, make_pair) -> None:
        pair = TradingPair.model_validate(make_pair(txns={"h24": {"buys": 7, "sells": 5}}))

        assert pair.total_txns_24h == 12

    def test_with_label_appends_without_mutating(self, make_pair) -> None:
        original = TradingPair.model_validate(make_pair(labels=["v3"]))

        labeled = original.with_label("new")

        assert labeled.labels == ["v3", "new"]
        assert original.labels == ["v3"]

    def test_with_label_keeps_existing(self, make_pair) -> None:
        original = TradingPair.model_validate(make_pair(labels=["new", "v2"]))

        assert original.with_label("new").labels == ["new", "v2"]

    def test_with_label_on_unlabeled_pair(self, make_pair) -> None:
        pair = TradingPair.model_validate(make_pair())

        assert pair.with_label("new").labels == ["new"]


class TestProfilesAndBoosts:
    def test_profile_null_links(self) -> None:
        profile = TokenProfile.model_validate(
            {"chainId": "solana", "tokenAddress": "So1", "links": None, "openGraph": "og.png"}
        )

        assert profile.links == []
        assert profile.open_graph == "og.png"

    def test_boosted_token_amounts(self) -> None:
        token = BoostedToken.model_validate(
            {"chainId": "base", "tokenAddress": "0xb", "amount": 50, "totalAmount": 250.5}
        )

        assert token.amount == Decimal("50")
        assert token.total_amount == Decimal("250.5")


class TestOrderStatus:
    def test_known_states(self) -> None:
        for status in ("processing", "completed", "failed"):
            order = OrderStatus.model_validate({"type": "boost", "status": status})
            assert order.state == OrderState(status)

    def test_unknown_state_is_other(self) -> None:
        order = OrderStatus.model_validate({"type": "boost", "status": "cancelled"})

        assert order.state == OrderState.OTHER


class TestServiceResult:
    def test_ok(self) -> None:
        result = ServiceResult.ok([1, 2])

        assert result.success
        assert result.data == [1, 2]
        assert result.error is None

    def test_fail(self) -> None:
        result = ServiceResult.fail("boom")

        assert not result.success
        assert result.data is None
        assert result.error == "boom"
