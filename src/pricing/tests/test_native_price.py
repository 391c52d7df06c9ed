"""
Test suite for the native coin USD price lookup.
"""

from decimal import Decimal
from unittest.mock import Mock

from src.pricing.native_price import get_native_price_usd
from src.pricing.pricing_types import Pair

WNEAR = "0xc42c30ac6cc15fac9bd938618bcaa1a1fae8501d"
USDC = "0xb12bfca5a55806aaf64e99521918a4bf0fc40802"
STABLE_PAIR = "0x20f8aefb5697b77e0bb835a8518be70775cda1b0"


class TestNativePrice:
    """Test native price resolution from the stable pair."""

    def test_missing_stable_pair_returns_zero(self, pricing_config, store):
        """Test that an unindexed stable pair degrades to zero."""
        assert get_native_price_usd(pricing_config, store.load_pair) == Decimal(0)

    def test_returns_token1_price_verbatim(self, pricing_config, store):
        """Test that token1_price is returned without rounding."""
        price = Decimal("3.141592653589793238462643383")
        store.save_pair(
            Pair(
                id=STABLE_PAIR,
                token0=WNEAR,
                token1=USDC,
                token0_price=Decimal("0.3183"),
                token1_price=price,
            )
        )

        result = get_native_price_usd(pricing_config, store.load_pair)

        assert result == price
        assert str(result) == str(price)

    def test_loads_configured_pair_only(self, pricing_config):
        """Test that exactly the configured stable pair is loaded."""
        load_pair = Mock(return_value=None)

        get_native_price_usd(pricing_config, load_pair)

        load_pair.assert_called_once_with(STABLE_PAIR)

    def test_repeated_calls_are_identical(self, pricing_config, store):
        """Test that calling twice with the same store gives the same result."""
        store.save_pair(
            Pair(id=STABLE_PAIR, token0=WNEAR, token1=USDC, token1_price=Decimal("5.5"))
        )

        first = get_native_price_usd(pricing_config, store.load_pair)
        second = get_native_price_usd(pricing_config, store.load_pair)

        assert first == second == Decimal("5.5")
