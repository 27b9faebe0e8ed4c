"""Abstract market data client interface.

Defines the contract the intent actions depend on. DexScreener-specific
endpoints, pacing and payload normalization live in the concrete
implementation.

Every coroutine resolves to a ServiceResult; implementations must not
let transport or payload errors escape.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Literal

from dexscreener_plugin import formatting
from dexscreener_plugin.models import (
    BoostedToken,
    OrderStatus,
    ServiceResult,
    TokenProfile,
    TradingPair,
)

Timeframe = Literal["1h", "6h", "24h"]
SortKey = Literal["volume", "liquidity", "priceChange", "txns"]

# Registry identifier used by the host runtime
SERVICE_TYPE = "dexscreener"


class MarketDataClient(ABC):
    """Abstract base class for DEX market data clients."""

    service_type: str = SERVICE_TYPE
    capability_description: str = (
        "Provides DEX analytics and token information from DexScreener"
    )

    @abstractmethod
    async def stop(self) -> None:
        """Release resources held by the client."""
        ...

    @abstractmethod
    async def search(self, query: str) -> ServiceResult[list[TradingPair]]:
        """Free-text search over pairs and tokens."""
        ...

    @abstractmethod
    async def get_token_pairs(self, token_address: str) -> ServiceResult[list[TradingPair]]:
        """All pairs referencing a token, across chains."""
        ...

    @abstractmethod
    async def get_pair(self, pair_address: str) -> ServiceResult[TradingPair]:
        """Exactly one pair by its pair address."""
        ...

    @abstractmethod
    async def get_trending(
        self, timeframe: Timeframe | None = None, limit: int = 10
    ) -> ServiceResult[list[TradingPair]]:
        """Approximate trending pairs from the promoted-token listing."""
        ...

    @abstractmethod
    async def get_pairs_by_chain(
        self, chain: str, sort_by: SortKey | None = None, limit: int | None = None
    ) -> ServiceResult[list[TradingPair]]:
        """Top pairs on one chain, sorted descending by ``sort_by``."""
        ...

    @abstractmethod
    async def get_new_pairs(
        self, chain: str | None = None, limit: int = 10
    ) -> ServiceResult[list[TradingPair]]:
        """Approximate new pairs from the latest token-profile listing."""
        ...

    @abstractmethod
    async def get_token_profile(self, token_address: str) -> ServiceResult[TokenProfile]:
        """Profile of one token, searched within the latest listing."""
        ...

    @abstractmethod
    async def get_multiple_tokens(
        self, chain: str, token_addresses: list[str]
    ) -> ServiceResult[list[TradingPair]]:
        """Batched pair lookup for up to 30 token addresses."""
        ...

    @abstractmethod
    async def get_latest_token_profiles(self) -> ServiceResult[list[TokenProfile]]:
        ...

    @abstractmethod
    async def get_latest_boosted_tokens(self) -> ServiceResult[list[BoostedToken]]:
        ...

    @abstractmethod
    async def get_top_boosted_tokens(self) -> ServiceResult[list[BoostedToken]]:
        ...

    @abstractmethod
    async def check_order_status(
        self, chain: str, token_address: str
    ) -> ServiceResult[list[OrderStatus]]:
        """Purchase orders (profile/boost) placed for a token."""
        ...

    @abstractmethod
    async def get_token_pairs_by_chain(
        self, chain: str, token_address: str
    ) -> ServiceResult[list[TradingPair]]:
        """Pairs of a token restricted to one chain."""
        ...

    # Formatting helpers are pure; exposed here so callers holding only
    # the client can render values.

    @staticmethod
    def format_price(price: Decimal | float | int | str) -> str:
        return formatting.format_price(price)

    @staticmethod
    def format_price_change(change: Decimal | float | int | str) -> str:
        return formatting.format_price_change(change)

    @staticmethod
    def format_usd_value(value: Decimal | float | int | str) -> str:
        return formatting.format_usd_value(value)
