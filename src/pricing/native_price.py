"""
Native coin USD price from the designated stable/native pair.
"""

import logging
from decimal import Decimal

from .decimal_utils import ZERO_BD
from .pricing_types import PairLoader, PricingConfig

logger = logging.getLogger(__name__)


def get_native_price_usd(config: PricingConfig, load_pair: PairLoader) -> Decimal:
    """
    Get the USD price of the native coin.

    The stable/native pair is configured with the native coin as token0 and the
    stable coin as token1, so its token1_price is used as-is.

    Args:
        config: Pricing configuration holding the stable/native pair id
        load_pair: Pair loader

    Returns:
        Native coin price in USD, or zero if the pair has not been indexed yet
    """
    stable_pair = load_pair(config.stable_native_pair)
    if stable_pair is None:
        logger.info(
            f"Stable pair {config.stable_native_pair} not found, native price is {ZERO_BD}"
        )
        return ZERO_BD

    logger.debug(
        f"Stable pair {stable_pair.id} prices: "
        f"token0={stable_pair.token0_price}, token1={stable_pair.token1_price}"
    )
    return stable_pair.token1_price
