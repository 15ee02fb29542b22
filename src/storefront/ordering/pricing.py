"""Order pricing: subtotal, flat shipping, flat-rate tax and total.

Line amounts are accumulated as ``Decimal``. Each component is rounded to
cents, and the total is the sum of the rounded components so that
``total == subtotal + shipping + tax`` holds exactly for the stored strings.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

from storefront.shared.money import round_money, to_decimal

SHIPPING_FLAT_RATE = Decimal("9.99")
TAX_RATE = Decimal("0.08")


@dataclass(frozen=True)
class Pricing:
    subtotal: Decimal
    shipping: Decimal
    tax: Decimal
    total: Decimal

    def as_strings(self) -> dict[str, str]:
        return {
            "subtotal": str(self.subtotal),
            "shipping": str(self.shipping),
            "tax": str(self.tax),
            "total": str(self.total),
        }


def calculate_pricing(lines: Iterable[tuple[object, int]]) -> Pricing:
    """Price ``(unit_price, quantity)`` pairs."""
    raw_subtotal = Decimal("0")
    for unit_price, quantity in lines:
        if quantity is None or quantity < 0:
            raise ValueError(f"Invalid quantity: {quantity!r}")
        raw_subtotal += to_decimal(unit_price) * quantity

    subtotal = round_money(raw_subtotal)
    shipping = round_money(SHIPPING_FLAT_RATE)
    tax = round_money(raw_subtotal * TAX_RATE)

    return Pricing(
        subtotal=subtotal,
        shipping=shipping,
        tax=tax,
        total=subtotal + shipping + tax,
    )
