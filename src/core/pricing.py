"""
Checkout price computation.

SauceDemo renders the checkout overview with its own float arithmetic:
the subtotal is the plain sum of item prices, the tax is derived from a
multiplier of 1.08002667 and every label is formatted with two decimals.
The values produced here must match those labels byte for byte, so the
rate and the order of operations are fixed:

1. subtotal = sum(prices)                       (full precision)
2. tax      = subtotal * TAX_RATE - subtotal    (from unrounded subtotal)
3. total    = subtotal + tax                    (from unrounded values)
4. each value is rounded to 2 places only when formatted

Rounding is half-up on the exact binary value of the float, which is what
the application's formatter does.
"""

import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, NamedTuple

from .errors import InvalidPriceError

TAX_RATE = 1.08002667

_CENTS = Decimal("0.01")


class CheckoutTotals(NamedTuple):
    """Subtotal, tax and total as two-decimal strings."""
    subtotal: str
    tax: str
    total: str


def parse_price(value: str) -> float:
    """
    Parse a decimal price literal.

    Args:
        value: Price string such as "9.99" (no currency symbol)

    Returns:
        Price as float

    Raises:
        InvalidPriceError: If the value is not a finite, non-negative number
    """
    try:
        amount = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidPriceError(f"Not a decimal price: {value!r}") from e

    if not math.isfinite(amount):
        raise InvalidPriceError(f"Price must be finite: {value!r}")
    if amount < 0:
        raise InvalidPriceError(f"Price must not be negative: {value!r}")
    return amount


def format_money(amount: float) -> str:
    """Format an amount with exactly two decimals, rounding half up."""
    return str(Decimal(amount).quantize(_CENTS, rounding=ROUND_HALF_UP))


def calculate_checkout_values(prices: Iterable[str]) -> CheckoutTotals:
    """
    Compute checkout totals for a list of item prices.

    Args:
        prices: Item prices in cart order, as decimal strings

    Returns:
        CheckoutTotals(subtotal, tax, total)

    Raises:
        InvalidPriceError: If any price is malformed
    """
    subtotal = 0.0
    for price in prices:
        subtotal += parse_price(price)

    tax = (subtotal * TAX_RATE) - subtotal
    total = subtotal + tax

    return CheckoutTotals(format_money(subtotal), format_money(tax), format_money(total))
