"""Shared data models for the DexScreener plugin.

Entities are parsed from the camelCase JSON the DexScreener API returns.
Attributes are snake_case; unknown upstream keys are ignored. Prices,
volumes and valuations use Decimal.

Every entity is request-scoped: built from one HTTP response, formatted,
then discarded. Nothing here is persisted.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

T = TypeVar("T")

NEW_LABEL = "new"


class ApiModel(BaseModel):
    """Base for models parsed from DexScreener payloads."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class TokenInfo(ApiModel):
    """Base or quote token descriptor of a pair."""

    address: str = ""
    name: str = ""
    symbol: str = ""
    decimals: int | None = None


class TxnCounts(ApiModel):
    buys: int = 0
    sells: int = 0

    @field_validator("buys", "sells", mode="before")
    @classmethod
    def _zero_fill(cls, value: Any) -> Any:
        return 0 if value is None else value

    @property
    def total(self) -> int:
        return self.buys + self.sells


class TxnWindows(ApiModel):
    """Buy/sell counts for the fixed m5/h1/h6/h24 windows."""

    m5: TxnCounts = Field(default_factory=TxnCounts)
    h1: TxnCounts = Field(default_factory=TxnCounts)
    h6: TxnCounts = Field(default_factory=TxnCounts)
    h24: TxnCounts = Field(default_factory=TxnCounts)

    @field_validator("m5", "h1", "h6", "h24", mode="before")
    @classmethod
    def _zero_fill(cls, value: Any) -> Any:
        return {} if value is None else value


class VolumeWindows(ApiModel):
    """USD volume for the fixed m5/h1/h6/h24 windows."""

    m5: Decimal = Decimal("0")
    h1: Decimal = Decimal("0")
    h6: Decimal = Decimal("0")
    h24: Decimal = Decimal("0")

    @field_validator("m5", "h1", "h6", "h24", mode="before")
    @classmethod
    def _zero_fill(cls, value: Any) -> Any:
        return 0 if value is None else value


class PriceChangeWindows(ApiModel):
    """Percentage price change for the fixed m5/h1/h6/h24 windows."""

    m5: Decimal = Decimal("0")
    h1: Decimal = Decimal("0")
    h6: Decimal = Decimal("0")
    h24: Decimal = Decimal("0")

    @field_validator("m5", "h1", "h6", "h24", mode="before")
    @classmethod
    def _zero_fill(cls, value: Any) -> Any:
        return 0 if value is None else value


class Liquidity(ApiModel):
    usd: Decimal | None = None
    base: Decimal = Decimal("0")
    quote: Decimal = Decimal("0")


class Link(ApiModel):
    """Website, social or reference link attached to a token or pair."""

    label: str | None = None
    type: str | None = None
    url: str = ""


class PairInfo(ApiModel):
    image_url: str | None = None
    websites: list[Link] = Field(default_factory=list)
    socials: list[Link] = Field(default_factory=list)


class TradingPair(ApiModel):
    """Snapshot of a DEX trading pair.

    The txns, volume and price_change windows are always complete: any
    window the upstream omits (or sends as null) is zero-filled.
    """

    chain_id: str = ""
    dex_id: str = ""
    url: str = ""
    pair_address: str = ""
    labels: list[str] | None = None
    base_token: TokenInfo = Field(default_factory=TokenInfo)
    quote_token: TokenInfo = Field(default_factory=TokenInfo)
    price_native: Decimal = Decimal("0")
    price_usd: Decimal | None = None
    txns: TxnWindows = Field(default_factory=TxnWindows)
    volume: VolumeWindows = Field(default_factory=VolumeWindows)
    price_change: PriceChangeWindows = Field(default_factory=PriceChangeWindows)
    liquidity: Liquidity | None = None
    fdv: Decimal | None = None
    market_cap: Decimal | None = None
    pair_created_at: int | None = None  # Unix milliseconds
    info: PairInfo | None = None

    @field_validator("txns", "volume", "price_change", mode="before")
    @classmethod
    def _zero_fill_windows(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("price_native", mode="before")
    @classmethod
    def _zero_fill_price(cls, value: Any) -> Any:
        return 0 if value is None else value

    @property
    def symbol_pair(self) -> str:
        """Human label such as ``PEPE/WETH``."""
        return f"{self.base_token.symbol}/{self.quote_token.symbol}"

    @property
    def display_price(self) -> Decimal:
        """USD price when known, otherwise the native-token price."""
        return self.price_usd if self.price_usd else self.price_native

    @property
    def liquidity_usd(self) -> Decimal:
        if self.liquidity is None or self.liquidity.usd is None:
            return Decimal("0")
        return self.liquidity.usd

    @property
    def total_txns_24h(self) -> int:
        return self.txns.h24.total

    def has_label(self, label: str) -> bool:
        return label in (self.labels or [])

    def with_label(self, label: str) -> "TradingPair":
        """Return a copy carrying ``label``; the original is never mutated.

        A pair that already has the label is returned as-is.
        """
        if self.has_label(label):
            return self
        return self.model_copy(update={"labels": [*(self.labels or []), label]})


class TokenProfile(ApiModel):
    """Token-level metadata, independent of any pair."""

    url: str = ""
    chain_id: str = ""
    token_address: str = ""
    icon: str | None = None
    header: str | None = None
    open_graph: str | None = None
    description: str | None = None
    links: list[Link] = Field(default_factory=list)

    @field_validator("links", mode="before")
    @classmethod
    def _empty_links(cls, value: Any) -> Any:
        return [] if value is None else value


class BoostedToken(ApiModel):
    """Token that purchased promotional visibility."""

    url: str = ""
    chain_id: str = ""
    token_address: str = ""
    amount: Decimal = Decimal("0")
    total_amount: Decimal = Decimal("0")
    icon: str | None = None
    header: str | None = None
    description: str | None = None
    links: list[Link] = Field(default_factory=list)

    @field_validator("links", mode="before")
    @classmethod
    def _empty_links(cls, value: Any) -> Any:
        return [] if value is None else value


class OrderState(str, Enum):
    """Known states of a profile/boost purchase order."""

    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"
    OTHER = "other"


class OrderStatus(ApiModel):
    """Purchase-order record for a token profile or boost."""

    type: str = ""  # "tokenProfile", "boost", ...
    status: str = ""
    payment_timestamp: int = 0  # Unix milliseconds

    @property
    def state(self) -> OrderState:
        try:
            return OrderState(self.status)
        except ValueError:
            return OrderState.OTHER


@dataclass
class ServiceResult(Generic[T]):
    """Uniform envelope returned by every client operation.

    On success ``data`` holds the payload; on failure ``error`` holds a
    human-readable message. Client operations never raise past this.
    """

    success: bool
    data: T | None = None
    error: str | None = None

    @classmethod
    def ok(cls, data: T) -> "ServiceResult[T]":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str) -> "ServiceResult[T]":
        return cls(success=False, error=error)
