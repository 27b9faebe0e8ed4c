"""DexScreener market data client implementation via httpx async.

Wraps the public DexScreener REST API with a single global request pacer,
payload normalization into typed models, and error-to-result conversion.

DexScreener has no trending or new-pairs endpoint. get_trending() and
get_new_pairs() approximate them from the promoted-token and latest
token-profile listings, so their output reflects promotion and profile
activity rather than real volume ranking or pair creation time.
"""

import asyncio
import time
from collections.abc import Awaitable, Callable
from decimal import Decimal
from typing import Any, TypeVar

import httpx
from pydantic import ValidationError

from dexscreener_plugin.client.base import MarketDataClient, SortKey, Timeframe
from dexscreener_plugin.config import DexScreenerSettings
from dexscreener_plugin.exceptions import UpstreamError
from dexscreener_plugin.logging import get_logger
from dexscreener_plugin.models import (
    NEW_LABEL,
    BoostedToken,
    OrderStatus,
    ServiceResult,
    TokenProfile,
    TradingPair,
)

logger = get_logger(__name__)

T = TypeVar("T")

# Endpoint paths, relative to the configured base URL
SEARCH_PATH = "/latest/dex/search"
TOKEN_PAIRS_PATH = "/latest/dex/tokens/{address}"
PAIR_PATH = "/latest/dex/pairs/{pair_address}"
TOKENS_PATH = "/tokens/v1/{chain}/{addresses}"
LATEST_PROFILES_PATH = "/token-profiles/latest/v1"
LATEST_BOOSTS_PATH = "/token-boosts/latest/v1"
TOP_BOOSTS_PATH = "/token-boosts/top/v1"
ORDERS_PATH = "/orders/v1/{chain}/{address}"
TOKEN_PAIRS_BY_CHAIN_PATH = "/token-pairs/v1/{chain}/{address}"

MAX_BATCH_ADDRESSES = 30
DEFAULT_TRENDING_LIMIT = 10
DEFAULT_NEW_PAIRS_LIMIT = 10
DEFAULT_CHAIN_PAIRS_LIMIT = 20

_SORT_KEYS: dict[str, Callable[[TradingPair], Decimal | int]] = {
    "volume": lambda pair: pair.volume.h24,
    "liquidity": lambda pair: pair.liquidity_usd,
    "priceChange": lambda pair: pair.price_change.h24,
    "txns": lambda pair: pair.total_txns_24h,
}


def _as_list(payload: Any) -> list[Any]:
    """Normalize a list-or-single-object payload into a list."""
    if payload is None:
        return []
    if isinstance(payload, list):
        return payload
    return [payload]


def _parse_pairs(payload: Any) -> list[TradingPair]:
    """Extract pairs from any of the shapes the pair endpoints return.

    /latest/dex/* wraps pairs in {"pairs": [...]} (or {"pair": {...}}),
    the v1 endpoints return a bare list.
    """
    if isinstance(payload, dict):
        if "pairs" in payload:
            items = payload["pairs"] or []
        elif "pair" in payload:
            items = [payload["pair"]] if payload["pair"] else []
        elif "chainId" in payload:
            items = [payload]
        else:
            items = []
    else:
        items = _as_list(payload)
    return [TradingPair.model_validate(item) for item in items]


def _upstream_message(response: httpx.Response) -> str | None:
    """Pull the error text out of an error response body, if there is one."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        message = body.get("message") or body.get("error")
        if isinstance(message, str) and message:
            return message
    return None


class DexScreenerClient(MarketDataClient):
    """Concrete DexScreener client using httpx async.

    Holds one AsyncClient for the lifetime of the instance. Call stop()
    to release its connection pool.
    """

    def __init__(
        self,
        settings: DexScreenerSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings
        self._min_interval = settings.rate_limit_delay / 1000
        self._last_request_time: float | None = None
        self._http = httpx.AsyncClient(
            base_url=settings.api_url,
            timeout=settings.timeout_seconds,
            headers={
                "Accept": "application/json",
                "User-Agent": settings.user_agent,
            },
            transport=transport,
        )
        self._stopped = False

    @property
    def settings(self) -> DexScreenerSettings:
        return self._settings

    async def stop(self) -> None:
        """Close the underlying HTTP client. Safe to call more than once."""
        if self._stopped:
            return
        await self._http.aclose()
        self._stopped = True
        logger.info("dexscreener_client_stopped")

    # ──────────────────────────────────────────────
    # Transport helpers
    # ──────────────────────────────────────────────

    async def _throttle(self) -> None:
        """Wait until the minimum delay since the previous request has passed.

        The next request slot is reserved before sleeping, so coroutines
        sharing this client queue up one delay apart instead of all
        waking at once.
        """
        now = time.monotonic()
        if self._last_request_time is None:
            self._last_request_time = now
            return

        wait = self._last_request_time + self._min_interval - now
        if wait > 0:
            self._last_request_time = now + wait
            await asyncio.sleep(wait)
        else:
            self._last_request_time = now

    async def _get(self, path: str, params: dict[str, str] | None = None) -> Any:
        """Issue a paced GET and return the decoded JSON body.

        Raises:
            UpstreamError: On a non-2xx status or a body that is not JSON.
            httpx.HTTPError: On transport failures (timeouts, DNS, resets).
        """
        await self._throttle()
        logger.debug("dexscreener_request", path=path, params=params)
        response = await self._http.get(path, params=params)

        if response.is_error:
            message = _upstream_message(response) or (
                f"Request failed with status code {response.status_code}"
            )
            raise UpstreamError(message, status_code=response.status_code)

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamError("Malformed JSON response from DexScreener") from e

    async def _run(
        self, operation: str, fallback: str, call: Awaitable[T]
    ) -> ServiceResult[T]:
        """Await ``call`` and wrap its outcome in a ServiceResult.

        Error text prefers the upstream message, then the exception's own
        text, then ``fallback``.
        """
        try:
            return ServiceResult.ok(await call)
        except UpstreamError as e:
            message = e.message or fallback
        except ValidationError:
            message = fallback
        except Exception as e:
            message = str(e) or fallback

        logger.warning("dexscreener_operation_failed", operation=operation, error=message)
        return ServiceResult.fail(message)

    async def _first_pair(self, chain: str, token_address: str) -> TradingPair | None:
        """Look up a token's pairs and return the first, or None on any failure."""
        try:
            payload = await self._get(
                TOKENS_PATH.format(chain=chain, addresses=token_address)
            )
            pairs = _parse_pairs(payload)
        except Exception as e:
            logger.warning(
                "pair_lookup_failed",
                chain=chain,
                token_address=token_address,
                error=str(e),
            )
            return None
        return pairs[0] if pairs else None

    # ──────────────────────────────────────────────
    # Pair lookups
    # ──────────────────────────────────────────────

    async def search(self, query: str) -> ServiceResult[list[TradingPair]]:
        async def _search() -> list[TradingPair]:
            return _parse_pairs(await self._get(SEARCH_PATH, params={"q": query}))

        return await self._run("search", "Failed to search tokens", _search())

    async def get_token_pairs(self, token_address: str) -> ServiceResult[list[TradingPair]]:
        async def _token_pairs() -> list[TradingPair]:
            payload = await self._get(TOKEN_PAIRS_PATH.format(address=token_address))
            return _parse_pairs(payload)

        return await self._run("get_token_pairs", "Failed to get token pairs", _token_pairs())

    async def get_pair(self, pair_address: str) -> ServiceResult[TradingPair]:
        async def _pair() -> TradingPair:
            payload = await self._get(PAIR_PATH.format(pair_address=pair_address))
            pairs = _parse_pairs(payload)
            if not pairs:
                raise UpstreamError("Pair not found")
            return pairs[0]

        return await self._run("get_pair", "Failed to get pair", _pair())

    async def get_multiple_tokens(
        self, chain: str, token_addresses: list[str]
    ) -> ServiceResult[list[TradingPair]]:
        """Batched lookup; more than 30 addresses fails without a request."""
        if len(token_addresses) > MAX_BATCH_ADDRESSES:
            logger.warning(
                "too_many_token_addresses",
                count=len(token_addresses),
                max=MAX_BATCH_ADDRESSES,
            )
            return ServiceResult.fail(
                f"Maximum {MAX_BATCH_ADDRESSES} token addresses allowed"
            )

        async def _multiple() -> list[TradingPair]:
            path = TOKENS_PATH.format(chain=chain, addresses=",".join(token_addresses))
            return _parse_pairs(await self._get(path))

        return await self._run(
            "get_multiple_tokens", "Failed to get multiple tokens", _multiple()
        )

    async def get_token_pairs_by_chain(
        self, chain: str, token_address: str
    ) -> ServiceResult[list[TradingPair]]:
        async def _by_chain() -> list[TradingPair]:
            path = TOKEN_PAIRS_BY_CHAIN_PATH.format(chain=chain, address=token_address)
            return _parse_pairs(await self._get(path))

        return await self._run(
            "get_token_pairs_by_chain", "Failed to get token pairs by chain", _by_chain()
        )

    # ──────────────────────────────────────────────
    # Aggregated views
    # ──────────────────────────────────────────────

    async def get_trending(
        self, timeframe: Timeframe | None = None, limit: int = DEFAULT_TRENDING_LIMIT
    ) -> ServiceResult[list[TradingPair]]:
        """Approximate trending pairs from the top boosted tokens.

        Takes the first ``limit`` promoted tokens, looks up each token's
        pairs concurrently and keeps the first pair per token. Tokens whose
        lookup fails are dropped. Output follows promotion order; the
        timeframe is accepted for display only.
        """
        limit = limit or DEFAULT_TRENDING_LIMIT

        async def _trending() -> list[TradingPair]:
            tokens = [
                BoostedToken.model_validate(item)
                for item in _as_list(await self._get(TOP_BOOSTS_PATH))
            ][:limit]
            found = await asyncio.gather(
                *(self._first_pair(t.chain_id, t.token_address) for t in tokens)
            )
            pairs = [pair for pair in found if pair is not None]
            logger.info(
                "trending_pairs_built",
                timeframe=timeframe,
                candidates=len(tokens),
                returned=len(pairs),
            )
            return pairs

        return await self._run("get_trending", "Failed to get trending pairs", _trending())

    async def get_pairs_by_chain(
        self, chain: str, sort_by: SortKey | None = None, limit: int | None = None
    ) -> ServiceResult[list[TradingPair]]:
        """Top pairs on a chain, found by searching for the chain name.

        DexScreener has no chain listing endpoint, so results are limited
        to what a text search for the chain name returns.
        """
        limit = limit or DEFAULT_CHAIN_PAIRS_LIMIT
        wanted = chain.lower()

        async def _chain_pairs() -> list[TradingPair]:
            pairs = [
                pair
                for pair in _parse_pairs(await self._get(SEARCH_PATH, params={"q": chain}))
                if pair.chain_id.lower() == wanted
            ]
            key = _SORT_KEYS.get(sort_by) if sort_by else None
            if key is not None:
                pairs.sort(key=key, reverse=True)
            return pairs[:limit]

        return await self._run(
            "get_pairs_by_chain", "Failed to get pairs by chain", _chain_pairs()
        )

    async def get_new_pairs(
        self, chain: str | None = None, limit: int = DEFAULT_NEW_PAIRS_LIMIT
    ) -> ServiceResult[list[TradingPair]]:
        """Approximate new pairs from the latest token profiles.

        Recently registered profiles are used as a proxy for new tokens.
        Each returned pair carries the "new" label; it marks how the pair
        was selected and says nothing about its actual creation time.
        """
        limit = limit or DEFAULT_NEW_PAIRS_LIMIT

        async def _new_pairs() -> list[TradingPair]:
            profiles = [
                TokenProfile.model_validate(item)
                for item in _as_list(await self._get(LATEST_PROFILES_PATH))
            ]
            if chain:
                profiles = [p for p in profiles if p.chain_id.lower() == chain.lower()]

            found = await asyncio.gather(
                *(self._first_pair(p.chain_id, p.token_address) for p in profiles[:limit])
            )
            return [pair.with_label(NEW_LABEL) for pair in found if pair is not None]

        return await self._run("get_new_pairs", "Failed to get new pairs", _new_pairs())

    # ──────────────────────────────────────────────
    # Profiles, boosts and orders
    # ──────────────────────────────────────────────

    async def get_token_profile(self, token_address: str) -> ServiceResult[TokenProfile]:
        """Find a token's profile within the latest-profiles listing.

        Only profiles still inside that listing window can be found.
        """
        wanted = token_address.lower()

        async def _profile() -> TokenProfile:
            for item in _as_list(await self._get(LATEST_PROFILES_PATH)):
                profile = TokenProfile.model_validate(item)
                if profile.token_address.lower() == wanted:
                    return profile
            raise UpstreamError("Token profile not found")

        return await self._run("get_token_profile", "Failed to get token profile", _profile())

    async def get_latest_token_profiles(self) -> ServiceResult[list[TokenProfile]]:
        async def _profiles() -> list[TokenProfile]:
            payload = await self._get(LATEST_PROFILES_PATH)
            return [TokenProfile.model_validate(item) for item in _as_list(payload)]

        return await self._run(
            "get_latest_token_profiles", "Failed to get latest token profiles", _profiles()
        )

    async def get_latest_boosted_tokens(self) -> ServiceResult[list[BoostedToken]]:
        return await self._run(
            "get_latest_boosted_tokens",
            "Failed to get latest boosted tokens",
            self._boosted(LATEST_BOOSTS_PATH),
        )

    async def get_top_boosted_tokens(self) -> ServiceResult[list[BoostedToken]]:
        return await self._run(
            "get_top_boosted_tokens",
            "Failed to get top boosted tokens",
            self._boosted(TOP_BOOSTS_PATH),
        )

    async def _boosted(self, path: str) -> list[BoostedToken]:
        return [BoostedToken.model_validate(item) for item in _as_list(await self._get(path))]

    async def check_order_status(
        self, chain: str, token_address: str
    ) -> ServiceResult[list[OrderStatus]]:
        async def _orders() -> list[OrderStatus]:
            payload = await self._get(ORDERS_PATH.format(chain=chain, address=token_address))
            return [OrderStatus.model_validate(item) for item in _as_list(payload)]

        return await self._run("check_order_status", "Failed to check order status", _orders())
