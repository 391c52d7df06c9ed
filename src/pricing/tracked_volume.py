"""
Tracked volume and liquidity in USD.

Only amounts of whitelisted tokens count toward USD aggregates:

    whitelisted legs   tracked volume        tracked liquidity
    both               average of the legs   sum of the legs
    token0 only        token0 leg            2 * token0 leg
    token1 only        token1 leg            2 * token1 leg
    neither            0                     0
"""

from decimal import Decimal
from typing import Tuple

from .decimal_utils import ZERO_BD, pricing_precision
from .pricing_types import Bundle, PricingConfig, Token

TWO_BD = Decimal(2)


def _usd_prices(bundle: Bundle, token0: Token, token1: Token) -> Tuple[Decimal, Decimal]:
    price0 = token0.derived_native_price * bundle.native_price_usd
    price1 = token1.derived_native_price * bundle.native_price_usd
    return price0, price1


@pricing_precision
def get_tracked_volume_usd(
    config: PricingConfig,
    bundle: Bundle,
    amount0: Decimal,
    token0: Token,
    amount1: Decimal,
    token1: Token,
) -> Decimal:
    """
    USD volume of a trade that counts toward global statistics.

    Args:
        config: Pricing configuration holding the whitelist
        bundle: Native price snapshot
        amount0: Amount of token0 moved
        token0: First token of the pair
        amount1: Amount of token1 moved
        token1: Second token of the pair

    Returns:
        Tracked USD volume, zero if neither token is whitelisted
    """
    price0, price1 = _usd_prices(bundle, token0, token1)
    whitelisted0 = config.is_whitelisted(token0.id)
    whitelisted1 = config.is_whitelisted(token1.id)

    # both legs should be worth the same, average out spot price noise
    if whitelisted0 and whitelisted1:
        return (amount0 * price0 + amount1 * price1) / TWO_BD

    if whitelisted0:
        return amount0 * price0

    if whitelisted1:
        return amount1 * price1

    return ZERO_BD


@pricing_precision
def get_tracked_liquidity_usd(
    config: PricingConfig,
    bundle: Bundle,
    amount0: Decimal,
    token0: Token,
    amount1: Decimal,
    token1: Token,
) -> Decimal:
    """
    USD liquidity that counts toward global statistics.

    A single whitelisted leg is doubled on the assumption that the pool is
    roughly balanced.
    """
    price0, price1 = _usd_prices(bundle, token0, token1)
    whitelisted0 = config.is_whitelisted(token0.id)
    whitelisted1 = config.is_whitelisted(token1.id)

    if whitelisted0 and whitelisted1:
        return amount0 * price0 + amount1 * price1

    if whitelisted0:
        return amount0 * price0 * TWO_BD

    if whitelisted1:
        return amount1 * price1 * TWO_BD

    return ZERO_BD
