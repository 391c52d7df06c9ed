"""
Pytest configuration for pricing tests.
"""

from decimal import Decimal

import pytest

from src.contracts import StaticPairLookup
from src.core.storage import InMemoryEntityStore
from src.pricing.pricing_types import PricingConfig, Token

WNEAR = "0xc42c30ac6cc15fac9bd938618bcaa1a1fae8501d"
USDC = "0xb12bfca5a55806aaf64e99521918a4bf0fc40802"
USDT = "0x4988a896b1227218e4a686fde5eabdcabd91571f"
STABLE_PAIR = "0x20f8aefb5697b77e0bb835a8518be70775cda1b0"


@pytest.fixture
def pricing_config():
    """Pricing configuration with wNEAR, USDC, USDT whitelisted in that order."""
    return PricingConfig(
        native_token=WNEAR,
        stable_native_pair=STABLE_PAIR,
        whitelist=(WNEAR, USDC, USDT),
        minimum_liquidity_threshold=Decimal("10"),
    )


@pytest.fixture
def store():
    """Entity store preloaded with the whitelist tokens."""
    return InMemoryEntityStore(
        tokens=[
            Token(id=WNEAR, derived_native_price=Decimal("1"), symbol="wNEAR", decimals=24),
            Token(id=USDC, derived_native_price=Decimal("0.25"), symbol="USDC", decimals=6),
            Token(id=USDT, derived_native_price=Decimal("0.25"), symbol="USDT", decimals=6),
        ]
    )


@pytest.fixture
def pair_lookup():
    """Empty in-memory pair registry."""
    return StaticPairLookup()
