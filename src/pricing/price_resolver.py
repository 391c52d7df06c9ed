"""
Derived native price discovery through whitelist pairs.

A token is priced through the first whitelist token (in declared order) that
forms a sufficiently liquid pair with it. Only one hop is taken: the counter
token's stored derived_native_price is trusted as-is, and keeping those values
converged across the token graph is the job of DerivedPriceUpdater.converge().
"""

import logging
from decimal import Decimal
from typing import Optional

from .decimal_utils import ONE_BD, ZERO_ADDRESS, ZERO_BD, pricing_precision
from .pricing_types import (
    Pair,
    PairAddressLookup,
    PairLoader,
    PricingConfig,
    Token,
    TokenLoader,
    normalize_address,
)

logger = logging.getLogger(__name__)


def _derived_native_price(token_id: str, load_token: TokenLoader) -> Decimal:
    """Stored derived price of a counter token, zero if the token is unknown."""
    token = load_token(token_id)
    if token is None:
        logger.warning(f"Counter token {token_id} not found, using zero price")
        return ZERO_BD
    return token.derived_native_price


def _price_from_pair(
    token_id: str,
    pair: Pair,
    threshold: Decimal,
    load_token: TokenLoader,
) -> Optional[Decimal]:
    """
    Price token_id through a single pair.

    Returns:
        Derived native price, or None if the pair is not usable
    """
    if pair.reserve_native <= threshold:
        logger.debug(
            f"Pair {pair.id} below liquidity threshold "
            f"({pair.reserve_native} <= {threshold})"
        )
        return None

    if normalize_address(pair.token0) == token_id:
        # token1 per our token * native per token1
        return pair.token1_price * _derived_native_price(
            normalize_address(pair.token1), load_token
        )

    if normalize_address(pair.token1) == token_id:
        # token0 per our token * native per token0
        return pair.token0_price * _derived_native_price(
            normalize_address(pair.token0), load_token
        )

    logger.debug(f"Pair {pair.id} does not contain token {token_id}")
    return None


@pricing_precision
def find_price_in_native(
    token: Token,
    config: PricingConfig,
    lookup_pair_address: PairAddressLookup,
    load_pair: PairLoader,
    load_token: TokenLoader,
) -> Decimal:
    """
    Search the whitelist for a liquid pair and derive the token's native price.

    Args:
        token: Token to price
        config: Pricing configuration (native token, whitelist, threshold)
        lookup_pair_address: (token_a, token_b) -> pair address; None or the
            zero address means no pool
        load_pair: Pair loader
        load_token: Token loader

    Returns:
        Price of one token in native coin; 1 for the native token itself and
        zero when no whitelist pair qualifies

    Raises:
        Whatever lookup_pair_address raises. FactoryPairLookup raises
        PairLookupError when the node cannot be reached; reverted lookups
        are already mapped to the zero address.
    """
    token_id = normalize_address(token.id)
    if token_id == config.native_token:
        return ONE_BD

    for whitelist_token in config.whitelist:
        logger.debug(f"Get pair {token_id} {whitelist_token}")
        pair_address = lookup_pair_address(token_id, whitelist_token)
        if not pair_address:
            continue
        pair_address = normalize_address(pair_address)
        if pair_address == ZERO_ADDRESS:
            continue

        pair = load_pair(pair_address)
        if pair is None:
            logger.warning(
                f"Pair {pair_address} returned by lookup for "
                f"{token_id}/{whitelist_token} is not indexed"
            )
            continue

        price = _price_from_pair(
            token_id, pair, config.minimum_liquidity_threshold, load_token
        )
        if price is not None:
            return price

    logger.debug(f"No liquid whitelist pair for {token_id}")
    return ZERO_BD
