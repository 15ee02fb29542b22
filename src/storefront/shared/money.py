"""Decimal helpers for monetary amounts.

Amounts are accumulated as ``Decimal`` and rounded half-up to cents at the
point they are persisted or rendered.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

CENT = Decimal("0.01")


def to_decimal(value) -> Decimal:
    """Convert a float, int, str or Decimal amount without binary-float drift."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        # str() gives the shortest repr, so 79.99 stays 79.99
        value = str(value)
    try:
        return Decimal(value)
    except (InvalidOperation, TypeError):
        raise ValueError(f"Invalid monetary amount: {value!r}") from None


def round_money(value) -> Decimal:
    return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def format_money(value) -> str | None:
    """Render an amount as a 2-dp decimal string (``None`` passes through)."""
    if value is None:
        return None
    return str(round_money(value))
