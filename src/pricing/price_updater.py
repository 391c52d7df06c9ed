"""
Pipeline-side derived price maintenance.

The pricing functions are pure; this module is where their results are
written back to the entity store. It mirrors what the indexer does on every
pair sync: refresh the native price bundle, re-derive both token prices and
revalue the pair reserves.
"""

import logging
from decimal import Decimal
from typing import TYPE_CHECKING, Dict, Iterable, Optional

from .decimal_utils import (
    ZERO_BD,
    Numeric,
    convert_token_to_decimal,
    pricing_precision,
    safe_div,
)
from .native_price import get_native_price_usd
from .price_resolver import find_price_in_native
from .pricing_types import (
    Bundle,
    Pair,
    PairAddressLookup,
    PricingConfig,
    Token,
    normalize_address,
)
from .tracked_volume import get_tracked_liquidity_usd

if TYPE_CHECKING:
    from src.core.storage import EntityStore

logger = logging.getLogger(__name__)


def _scale_reserve(raw_reserve: Numeric, token: Optional[Token]) -> Decimal:
    decimals = token.decimals if token is not None else None
    return convert_token_to_decimal(raw_reserve, decimals or 0)


class DerivedPriceUpdater:
    """Recompute and store bundle, token and pair prices."""

    def __init__(
        self,
        config: PricingConfig,
        store: "EntityStore",
        lookup_pair_address: PairAddressLookup,
    ):
        """
        Initialize the updater.

        Args:
            config: Pricing configuration
            store: EntityStore holding pairs, tokens and the bundle
            lookup_pair_address: (token_a, token_b) -> pair address, None or zero address if none
        """
        self.config = config
        self.store = store
        self.lookup_pair_address = lookup_pair_address

    def refresh_bundle(self) -> Bundle:
        """Update the bundle with the current native coin USD price."""
        bundle = self.store.load_bundle()
        bundle.native_price_usd = get_native_price_usd(self.config, self.store.load_pair)
        self.store.save_bundle(bundle)
        return bundle

    def refresh_token(self, token_id: str) -> Decimal:
        """
        Re-derive a token's native price and store it.

        Returns:
            New derived price, zero if the token is not indexed
        """
        token = self.store.load_token(token_id)
        if token is None:
            logger.warning(f"Token {token_id} not found, cannot refresh price")
            return ZERO_BD

        token.derived_native_price = find_price_in_native(
            token,
            self.config,
            self.lookup_pair_address,
            self.store.load_pair,
            self.store.load_token,
        )
        self.store.save_token(token)
        return token.derived_native_price

    @pricing_precision
    def sync_pair(
        self,
        pair_id: str,
        raw_reserve0: Numeric,
        raw_reserve1: Numeric,
    ) -> Optional[Pair]:
        """
        Apply new on-chain reserves to a pair and revalue everything that depends on them.

        Raw reserves are scaled by each token's decimals. Tokens with unknown
        decimals (or no record) are taken as already scaled.

        Args:
            pair_id: Pair address
            raw_reserve0: token0 reserve as reported by the pair contract
            raw_reserve1: token1 reserve as reported by the pair contract

        Returns:
            Updated pair, or None if the pair is not indexed
        """
        pair = self.store.load_pair(pair_id)
        if pair is None:
            logger.warning(f"Pair {pair_id} not found, skipping sync")
            return None

        pair.reserve0 = _scale_reserve(raw_reserve0, self.store.load_token(pair.token0))
        pair.reserve1 = _scale_reserve(raw_reserve1, self.store.load_token(pair.token1))
        pair.token0_price = safe_div(pair.reserve0, pair.reserve1)
        pair.token1_price = safe_div(pair.reserve1, pair.reserve0)
        self.store.save_pair(pair)

        # spot prices must be stored before the bundle and tokens read them back
        bundle = self.refresh_bundle()
        self.refresh_token(pair.token0)
        self.refresh_token(pair.token1)

        token0 = self.store.load_token(pair.token0)
        token1 = self.store.load_token(pair.token1)
        if token0 is None or token1 is None:
            logger.warning(f"Pair {pair.id} references unindexed tokens, reserves not revalued")
            return pair

        pair.reserve_native = (
            pair.reserve0 * token0.derived_native_price
            + pair.reserve1 * token1.derived_native_price
        )
        pair.reserve_usd = pair.reserve_native * bundle.native_price_usd

        tracked_liquidity_usd = get_tracked_liquidity_usd(
            self.config, bundle, pair.reserve0, token0, pair.reserve1, token1
        )
        pair.tracked_reserve_native = safe_div(
            tracked_liquidity_usd, bundle.native_price_usd
        )
        self.store.save_pair(pair)

        logger.debug(
            f"Synced pair {pair.id}: reserve_native={pair.reserve_native}, "
            f"reserve_usd={pair.reserve_usd}"
        )
        return pair

    def converge(
        self,
        token_ids: Iterable[str],
        max_iterations: int = 10,
    ) -> Dict[str, Decimal]:
        """
        Iteratively re-derive prices until they stop changing.

        Each round refreshes every token once, in the given order, so prices
        can propagate one hop further per round. Bounded rounds keep cycles in
        the token graph from looping forever.

        Args:
            token_ids: Tokens to price
            max_iterations: Maximum number of refresh rounds

        Returns:
            Dict of token address -> derived native price
        """
        token_ids = [normalize_address(token_id) for token_id in token_ids]
        prices: Dict[str, Decimal] = {}

        for iteration in range(max_iterations):
            changed = 0
            for token_id in token_ids:
                token = self.store.load_token(token_id)
                previous = token.derived_native_price if token is not None else ZERO_BD
                price = self.refresh_token(token_id)
                if price != previous:
                    changed += 1
                prices[token_id] = price

            logger.debug(f"Round {iteration + 1}: {changed} prices changed")
            if changed == 0:
                logger.info(f"Prices converged after {iteration + 1} rounds")
                break
        else:
            logger.warning(f"Prices did not converge within {max_iterations} rounds")

        return prices
