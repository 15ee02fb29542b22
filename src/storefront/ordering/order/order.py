"""Order aggregate: a checked-out cart with prices frozen at purchase time.

State Machine:
    (cart) → PENDING → PROCESSING → SHIPPED → DELIVERED
    CANCELLED is reachable from every non-terminal state.
    DELIVERED and CANCELLED are terminal.

Monetary amounts are stored as 2-dp decimal strings. ``total`` is always
``subtotal + shipping + tax``; it is derived at placement and never set on
its own.
"""

from datetime import UTC, datetime
from decimal import Decimal
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Identifier, Integer, String, Text

from storefront.domain import storefront
from storefront.ordering.order.events import OrderPlaced, OrderStatusChanged
from storefront.ordering.pricing import calculate_pricing
from storefront.shared.money import format_money


class OrderStatus(Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


# State machine transition map
_VALID_TRANSITIONS = {
    OrderStatus.PENDING: {OrderStatus.PROCESSING, OrderStatus.CANCELLED},
    OrderStatus.PROCESSING: {OrderStatus.SHIPPED, OrderStatus.CANCELLED},
    OrderStatus.SHIPPED: {OrderStatus.DELIVERED, OrderStatus.CANCELLED},
    OrderStatus.DELIVERED: set(),  # Terminal
    OrderStatus.CANCELLED: set(),  # Terminal
}


@storefront.entity(part_of="Order")
class OrderItem:
    """A line of a placed order. ``price`` is the unit price at purchase time."""

    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    price = String(required=True, max_length=20)


@storefront.aggregate
class Order:
    user_id = Identifier(required=True)
    status = String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    items = HasMany(OrderItem)
    subtotal = String(required=True, max_length=20)
    shipping = String(required=True, max_length=20)
    tax = String(required=True, max_length=20)
    total = String(required=True, max_length=20)
    shipping_address = Text(required=True)
    payment_method = String(max_length=50)  # Captured only, never charged
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def order_must_have_items(self):
        if not self.items:
            raise ValidationError({"items": ["An order must have at least one item"]})

    @invariant.post
    def total_is_sum_of_parts(self):
        if None in (self.subtotal, self.shipping, self.tax, self.total):
            return  # Required-field validation reports these

        expected = Decimal(self.subtotal) + Decimal(self.shipping) + Decimal(self.tax)
        if Decimal(self.total) != expected:
            raise ValidationError({"total": [f"Total {self.total} does not equal subtotal + shipping + tax"]})

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def place(cls, user_id, lines, shipping_address, payment_method=None):
        """Create a pending order from ``(product_id, unit_price, quantity)`` lines."""
        if not shipping_address or not shipping_address.strip():
            raise ValidationError({"shipping_address": ["Shipping address is required"]})

        lines = list(lines)
        pricing = calculate_pricing((unit_price, quantity) for _, unit_price, quantity in lines)
        now = datetime.now(UTC)

        order = cls(
            user_id=user_id,
            status=OrderStatus.PENDING.value,
            items=[
                OrderItem(
                    product_id=product_id,
                    quantity=quantity,
                    price=format_money(unit_price),
                )
                for product_id, unit_price, quantity in lines
            ],
            shipping_address=shipping_address.strip(),
            payment_method=payment_method,
            created_at=now,
            updated_at=now,
            **pricing.as_strings(),
        )

        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                user_id=str(user_id),
                item_count=len(lines),
                subtotal=order.subtotal,
                shipping=order.shipping,
                tax=order.tax,
                total=order.total,
                placed_at=now,
            )
        )
        return order

    # -------------------------------------------------------------------
    # State transitions
    # -------------------------------------------------------------------
    def _transition_to(self, target_status):
        current = OrderStatus(self.status)
        if target_status not in _VALID_TRANSITIONS.get(current, set()):
            raise ValidationError({"status": [f"Cannot transition from {current.value} to {target_status.value}"]})

        now = datetime.now(UTC)
        self.status = target_status.value
        self.updated_at = now

        self.raise_(
            OrderStatusChanged(
                order_id=str(self.id),
                previous_status=current.value,
                new_status=target_status.value,
                changed_at=now,
            )
        )

    def mark_processing(self):
        self._transition_to(OrderStatus.PROCESSING)

    def mark_shipped(self):
        self._transition_to(OrderStatus.SHIPPED)

    def mark_delivered(self):
        self._transition_to(OrderStatus.DELIVERED)

    def cancel(self):
        self._transition_to(OrderStatus.CANCELLED)
