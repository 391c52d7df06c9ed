"""Derived token pricing and tracked volume module."""

from src.pricing.native_price import get_native_price_usd
from src.pricing.price_resolver import find_price_in_native
from src.pricing.price_updater import DerivedPriceUpdater
from src.pricing.pricing_types import Bundle, Pair, PricingConfig, Token
from src.pricing.tracked_volume import get_tracked_liquidity_usd, get_tracked_volume_usd

__all__ = [
    "Bundle",
    "Pair",
    "PricingConfig",
    "Token",
    "get_native_price_usd",
    "find_price_in_native",
    "get_tracked_volume_usd",
    "get_tracked_liquidity_usd",
    "DerivedPriceUpdater",
]
