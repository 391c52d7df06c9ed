"""
Core types for derived pricing.

Domain models for tokens, pairs, the native price bundle and the immutable
pricing configuration that every pricing call receives.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Callable, FrozenSet, Optional, Tuple

from .decimal_utils import ZERO_ADDRESS, ZERO_BD

BUNDLE_ID = "1"


def normalize_address(address: str) -> str:
    """Canonical form used for every token/pair id: lower-case hex."""
    return address.lower()


@dataclass
class Token:
    """
    Token record maintained by the indexing pipeline.

    Attributes:
        id: Token address (lower-case)
        derived_native_price: Token price denominated in the native coin
        symbol: Token symbol (optional, informational)
        decimals: ERC20 decimals used to scale raw reserves (optional)
    """

    id: str
    derived_native_price: Decimal = ZERO_BD
    symbol: Optional[str] = None
    decimals: Optional[int] = None


@dataclass
class Pair:
    """
    AMM pair record maintained by the indexing pipeline.

    Attributes:
        id: Pair contract address (lower-case)
        token0: Address of the first token
        token1: Address of the second token
        token0_price: token0 per token1 (reserve0 / reserve1)
        token1_price: token1 per token0 (reserve1 / reserve0)
        reserve_native: Pooled liquidity valued in native coin
        reserve0: Human readable token0 reserve
        reserve1: Human readable token1 reserve
        reserve_usd: reserve_native valued in USD
        tracked_reserve_native: Whitelist-tracked part of the reserves in native coin
    """

    id: str
    token0: str
    token1: str
    token0_price: Decimal = ZERO_BD
    token1_price: Decimal = ZERO_BD
    reserve_native: Decimal = ZERO_BD
    reserve0: Decimal = ZERO_BD
    reserve1: Decimal = ZERO_BD
    reserve_usd: Decimal = ZERO_BD
    tracked_reserve_native: Decimal = ZERO_BD


@dataclass
class Bundle:
    """Process-wide snapshot of the native coin USD price."""

    id: str = BUNDLE_ID
    native_price_usd: Decimal = ZERO_BD


@dataclass(frozen=True)
class PricingConfig:
    """
    Immutable pricing settings for one deployment.

    Attributes:
        native_token: Wrapped native coin address (priced at exactly 1)
        stable_native_pair: Pair whose token1_price is the native coin USD price
        whitelist: Ordered reference tokens; order decides which pair wins
        minimum_liquidity_threshold: Pairs must hold strictly more native
            liquidity than this to be used for pricing
        factory_address: Factory whose getPair backs pair lookups (optional)
    """

    native_token: str
    stable_native_pair: str
    whitelist: Tuple[str, ...]
    minimum_liquidity_threshold: Decimal
    factory_address: Optional[str] = None
    _whitelist_set: FrozenSet[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        # Frozen dataclass: go through object.__setattr__ to normalize
        object.__setattr__(self, "native_token", normalize_address(self.native_token))
        object.__setattr__(
            self, "stable_native_pair", normalize_address(self.stable_native_pair)
        )
        whitelist = tuple(normalize_address(token) for token in self.whitelist)
        object.__setattr__(self, "whitelist", whitelist)
        object.__setattr__(self, "_whitelist_set", frozenset(whitelist))
        if self.factory_address is not None:
            object.__setattr__(
                self, "factory_address", normalize_address(self.factory_address)
            )

    def is_whitelisted(self, token_id: str) -> bool:
        """Check whitelist membership of a token address."""
        return normalize_address(token_id) in self._whitelist_set


PairAddressLookup = Callable[[str, str], Optional[str]]
PairLoader = Callable[[str], Optional[Pair]]
TokenLoader = Callable[[str], Optional[Token]]

__all__ = [
    "BUNDLE_ID",
    "ZERO_ADDRESS",
    "Token",
    "Pair",
    "Bundle",
    "PricingConfig",
    "PairAddressLookup",
    "PairLoader",
    "TokenLoader",
    "normalize_address",
]
