"""
Decimal helpers shared by the pricing modules.

All prices and amounts are kept as Decimal so that repeated multiply/divide
steps do not accumulate float drift. Pricing arithmetic runs with 34
significant digits (IEEE 754 decimal128) rather than the interpreter's
default of 28, so large raw reserves times 18-decimal prices keep their
precision.
"""

import functools
from decimal import Decimal, localcontext
from typing import Union

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

ZERO_BD = Decimal(0)
ONE_BD = Decimal(1)

PRICING_PRECISION = 34

Numeric = Union[Decimal, int, str, float]


def pricing_precision(func):
    """Run func inside a local Decimal context with PRICING_PRECISION digits."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        with localcontext() as ctx:
            ctx.prec = PRICING_PRECISION
            return func(*args, **kwargs)

    return wrapper


def to_decimal(value: Numeric) -> Decimal:
    """
    Convert a value to Decimal.

    Floats go through str() first so Decimal(0.1) style binary noise never
    leaks into prices.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


@pricing_precision
def exponent_to_decimal(decimals: int) -> Decimal:
    """Return 10 ** decimals as a Decimal."""
    return Decimal(10) ** decimals


@pricing_precision
def convert_token_to_decimal(raw_amount: Numeric, decimals: int) -> Decimal:
    """
    Convert a raw on-chain token amount to a human readable amount.

    Args:
        raw_amount: Integer amount as stored on-chain
        decimals: ERC20 decimals of the token

    Returns:
        raw_amount / 10**decimals, or raw_amount unchanged for 0 decimals
    """
    amount = to_decimal(raw_amount)
    if decimals == 0:
        return amount
    return amount / exponent_to_decimal(decimals)


@pricing_precision
def safe_div(amount0: Decimal, amount1: Decimal) -> Decimal:
    """Divide, returning zero instead of raising when the divisor is zero."""
    if amount1 == ZERO_BD:
        return ZERO_BD
    return amount0 / amount1
