"""
Utility functions for Crypto Ticker.
"""

from decimal import ROUND_HALF_UP, Decimal, localcontext

POSITIVE_COLOR = "#4CAF50"
NEGATIVE_COLOR = "#F44336"

_CENTS = Decimal("0.01")


def _round2(value: Decimal) -> Decimal:
    # Half away from zero; precision grows with the integer digits
    value = Decimal(value)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 4)
        return value.quantize(_CENTS, rounding=ROUND_HALF_UP)


def format_price(price: Decimal) -> str:
    """
    Format a price with two decimals.

    Args:
        price: The price to format.

    Returns:
        Formatted price string, e.g. "98000.00".
    """
    return f"{_round2(price):f}"


def format_change(change: Decimal) -> str:
    """
    Format a percent change with an explicit sign and two decimals.

    Values that round to zero are shown as "+0.00", including small negatives.
    """
    rounded = _round2(change)
    if rounded >= 0:
        return f"+{rounded.copy_abs():f}"
    return f"{rounded:f}"


def change_color(change: Decimal) -> str:
    """Green for non-negative change, red otherwise."""
    return POSITIVE_COLOR if change >= 0 else NEGATIVE_COLOR


def display_name(token_id: str) -> str:
    """Token id with its first character upper-cased ("bitcoin" -> "Bitcoin")."""
    return token_id[:1].upper() + token_id[1:]
