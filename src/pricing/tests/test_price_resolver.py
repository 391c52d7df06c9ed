"""
Test suite for whitelist price discovery.

Covers the native token base case, whitelist ordering, the liquidity gate,
pair orientation and the degrade-to-zero paths.
"""

from decimal import Decimal
from unittest.mock import Mock

import pytest

from src.contracts import PairLookupError
from src.pricing.decimal_utils import ZERO_ADDRESS
from src.pricing.price_resolver import find_price_in_native
from src.pricing.pricing_types import Pair, PricingConfig, Token

WNEAR = "0xc42c30ac6cc15fac9bd938618bcaa1a1fae8501d"
USDC = "0xb12bfca5a55806aaf64e99521918a4bf0fc40802"
USDT = "0x4988a896b1227218e4a686fde5eabdcabd91571f"
FOO = "0x1111111111111111111111111111111111111111"
FOO_WNEAR_PAIR = "0xaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaa"
FOO_USDC_PAIR = "0xbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbb"


def resolve(token, config, lookup, store):
    return find_price_in_native(token, config, lookup, store.load_pair, store.load_token)


def add_pair(store, lookup, pair: Pair):
    store.save_pair(pair)
    lookup.register(pair.token0, pair.token1, pair.id)


class TestNativeToken:
    """Test the native token base case."""

    def test_native_token_is_one(self, pricing_config, pair_lookup, store):
        """Test that the native token is priced at exactly one."""
        token = Token(id=WNEAR, derived_native_price=Decimal("7"))
        assert resolve(token, pricing_config, pair_lookup, store) == Decimal(1)

    def test_native_token_case_insensitive(self, pricing_config, pair_lookup, store):
        """Test that a mixed-case native token address is still recognized."""
        token = Token(id="0xC42C30aC6Cc15faC9bD938618BcaA1a1FaE8501d")
        assert resolve(token, pricing_config, pair_lookup, store) == Decimal(1)

    def test_native_token_skips_lookups(self, pricing_config, store):
        """Test that no pair lookups happen for the native token."""
        lookup = Mock(return_value=ZERO_ADDRESS)
        resolve(Token(id=WNEAR), pricing_config, lookup, store)
        lookup.assert_not_called()


class TestWhitelistSearch:
    """Test the first-match whitelist search."""

    def test_no_pairs_returns_zero(self, pricing_config, pair_lookup, store):
        """Test that a token without whitelist pairs has no price."""
        assert resolve(Token(id=FOO), pricing_config, pair_lookup, store) == Decimal(0)

    def test_lookups_follow_whitelist_order(self, pricing_config, store):
        """Test that every whitelist entry is queried in declared order."""
        lookup = Mock(return_value=ZERO_ADDRESS)

        resolve(Token(id=FOO), pricing_config, lookup, store)

        assert [c.args for c in lookup.call_args_list] == [
            (FOO, WNEAR),
            (FOO, USDC),
            (FOO, USDT),
        ]

    def test_token0_orientation(self, pricing_config, pair_lookup, store):
        """Test pricing when the token is token0 of the pair."""
        add_pair(
            store,
            pair_lookup,
            Pair(
                id=FOO_WNEAR_PAIR,
                token0=FOO,
                token1=WNEAR,
                token0_price=Decimal("2"),
                token1_price=Decimal("0.5"),
                reserve_native=Decimal("100"),
            ),
        )

        # 0.5 wNEAR per FOO * 1 native per wNEAR
        assert resolve(Token(id=FOO), pricing_config, pair_lookup, store) == Decimal("0.5")

    def test_token1_orientation(self, pricing_config, pair_lookup, store):
        """Test pricing when the token is token1 of the pair."""
        add_pair(
            store,
            pair_lookup,
            Pair(
                id=FOO_USDC_PAIR,
                token0=USDC,
                token1=FOO,
                token0_price=Decimal("12"),
                token1_price=Decimal("0.0833"),
                reserve_native=Decimal("100"),
            ),
        )

        # 12 USDC per FOO * 0.25 native per USDC
        assert resolve(Token(id=FOO), pricing_config, pair_lookup, store) == Decimal("3.00")

    def test_first_whitelist_match_wins(self, pricing_config, pair_lookup, store):
        """Test that the earlier whitelist entry is used even if a later one is more liquid."""
        add_pair(
            store,
            pair_lookup,
            Pair(
                id=FOO_WNEAR_PAIR,
                token0=FOO,
                token1=WNEAR,
                token1_price=Decimal("0.5"),
                reserve_native=Decimal("11"),
            ),
        )
        add_pair(
            store,
            pair_lookup,
            Pair(
                id=FOO_USDC_PAIR,
                token0=USDC,
                token1=FOO,
                token0_price=Decimal("12"),
                reserve_native=Decimal("100000"),
            ),
        )

        assert resolve(Token(id=FOO), pricing_config, pair_lookup, store) == Decimal("0.5")

        reordered = PricingConfig(
            native_token=WNEAR,
            stable_native_pair=pricing_config.stable_native_pair,
            whitelist=(USDC, WNEAR, USDT),
            minimum_liquidity_threshold=Decimal("10"),
        )
        assert resolve(Token(id=FOO), reordered, pair_lookup, store) == Decimal("3.00")

    def test_pair_not_containing_token_is_skipped(self, pricing_config, store):
        """Test that a pair with the wrong tokens does not price the token."""
        store.save_pair(
            Pair(
                id=FOO_WNEAR_PAIR,
                token0=USDC,
                token1=WNEAR,
                token0_price=Decimal("4"),
                token1_price=Decimal("0.25"),
                reserve_native=Decimal("100"),
            )
        )
        lookup = Mock(return_value=FOO_WNEAR_PAIR)

        assert resolve(Token(id=FOO), pricing_config, lookup, store) == Decimal(0)
        assert lookup.call_count == 3


class TestLiquidityGate:
    """Test the minimum liquidity threshold."""

    @pytest.mark.parametrize(
        "reserve_native,expected",
        [
            (Decimal("0"), Decimal("0")),
            (Decimal("9.99"), Decimal("0")),
            (Decimal("10"), Decimal("0")),
            (Decimal("10.000000001"), Decimal("0.5")),
            (Decimal("5000"), Decimal("0.5")),
        ],
    )
    def test_threshold_is_exclusive(
        self, pricing_config, pair_lookup, store, reserve_native, expected
    ):
        """Test that reserves at or below the threshold are skipped."""
        add_pair(
            store,
            pair_lookup,
            Pair(
                id=FOO_WNEAR_PAIR,
                token0=FOO,
                token1=WNEAR,
                token1_price=Decimal("0.5"),
                reserve_native=reserve_native,
            ),
        )

        assert resolve(Token(id=FOO), pricing_config, pair_lookup, store) == expected

    def test_illiquid_pair_falls_through_to_next_entry(self, pricing_config, pair_lookup, store):
        """Test that an illiquid earlier pair lets a later whitelist pair win."""
        add_pair(
            store,
            pair_lookup,
            Pair(
                id=FOO_WNEAR_PAIR,
                token0=FOO,
                token1=WNEAR,
                token1_price=Decimal("0.5"),
                reserve_native=Decimal("10"),
            ),
        )
        add_pair(
            store,
            pair_lookup,
            Pair(
                id=FOO_USDC_PAIR,
                token0=USDC,
                token1=FOO,
                token0_price=Decimal("12"),
                reserve_native=Decimal("50"),
            ),
        )

        assert resolve(Token(id=FOO), pricing_config, pair_lookup, store) == Decimal("3.00")


class TestMissingRecords:
    """Test degrade-to-zero behaviour for missing records."""

    def test_unindexed_pair_is_skipped(self, pricing_config, pair_lookup, store):
        """Test that a looked-up pair missing from storage moves on to the next entry."""
        pair_lookup.register(FOO, WNEAR, FOO_WNEAR_PAIR)
        add_pair(
            store,
            pair_lookup,
            Pair(
                id=FOO_USDC_PAIR,
                token0=USDC,
                token1=FOO,
                token0_price=Decimal("12"),
                reserve_native=Decimal("50"),
            ),
        )

        assert resolve(Token(id=FOO), pricing_config, pair_lookup, store) == Decimal("3.00")

    def test_unindexed_counter_token_prices_at_zero(self, pricing_config, pair_lookup, store):
        """Test that a missing counter token record yields a zero price."""
        del store.tokens[WNEAR]
        add_pair(
            store,
            pair_lookup,
            Pair(
                id=FOO_WNEAR_PAIR,
                token0=FOO,
                token1=WNEAR,
                token1_price=Decimal("0.5"),
                reserve_native=Decimal("100"),
            ),
        )

        assert resolve(Token(id=FOO), pricing_config, pair_lookup, store) == Decimal(0)

    def test_lookup_returning_none_means_no_pool(self, pricing_config, store):
        """Test that a lookup answering None is treated like the zero address."""
        lookup = Mock(return_value=None)

        assert resolve(Token(id=FOO), pricing_config, lookup, store) == Decimal(0)
        assert lookup.call_count == len(pricing_config.whitelist)

    def test_none_then_pair_moves_on_to_next_entry(self, pricing_config, pair_lookup, store):
        """Test that a None answer skips to the next whitelist token."""
        store.save_pair(
            Pair(
                id=FOO_USDC_PAIR,
                token0=USDC,
                token1=FOO,
                token0_price=Decimal("12"),
                reserve_native=Decimal("50"),
            )
        )
        lookup = Mock(side_effect=[None, FOO_USDC_PAIR])

        assert resolve(Token(id=FOO), pricing_config, lookup, store) == Decimal("3.00")

    def test_lookup_errors_propagate(self, pricing_config, store):
        """Test that an unreachable node surfaces as PairLookupError to the caller."""
        lookup = Mock(side_effect=PairLookupError("RPC unavailable", FOO, WNEAR))

        with pytest.raises(PairLookupError):
            resolve(Token(id=FOO), pricing_config, lookup, store)


class TestDeterminism:
    """Test that resolution holds no state between calls."""

    def test_repeated_resolution_repeats_lookups(self, pricing_config, pair_lookup, store):
        """Test that a second call gives the same price and queries again."""
        add_pair(
            store,
            pair_lookup,
            Pair(
                id=FOO_USDC_PAIR,
                token0=USDC,
                token1=FOO,
                token0_price=Decimal("12"),
                reserve_native=Decimal("50"),
            ),
        )
        lookup = Mock(side_effect=pair_lookup)

        first = resolve(Token(id=FOO), pricing_config, lookup, store)
        second = resolve(Token(id=FOO), pricing_config, lookup, store)

        assert first == second == Decimal("3.00")
        assert lookup.call_count == 4

    def test_updated_counter_price_is_picked_up(self, pricing_config, pair_lookup, store):
        """Test that a changed counter token price is used on the next call."""
        add_pair(
            store,
            pair_lookup,
            Pair(
                id=FOO_USDC_PAIR,
                token0=USDC,
                token1=FOO,
                token0_price=Decimal("12"),
                reserve_native=Decimal("50"),
            ),
        )

        assert resolve(Token(id=FOO), pricing_config, pair_lookup, store) == Decimal("3.00")

        store.load_token(USDC).derived_native_price = Decimal("0.5")

        assert resolve(Token(id=FOO), pricing_config, pair_lookup, store) == Decimal("6.0")
