"""Checkout: turn the user's cart into a pending order.

The handler runs inside a single UnitOfWork: the cart read, the order and
its items, and the cart clear commit together or not at all.
"""

import structlog
from protean import handle
from protean.exceptions import ExpectedVersionError, ValidationError
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from storefront.cart.cart import Cart
from storefront.cart.listing import cart_lines
from storefront.domain import storefront
from storefront.ordering.order.order import Order
from storefront.shared.errors import Conflict, EmptyCartError, InternalError, StorefrontError
from storefront.shared.locking import process_for_user

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Order")
class PlaceOrder:
    user_id = Identifier(required=True)
    shipping_address = Text(required=True)
    payment_method = String(max_length=50)


@storefront.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        lines = cart_lines(command.user_id)
        if not lines:
            raise EmptyCartError()

        order = Order.place(
            user_id=command.user_id,
            lines=[(line.item.product_id, line.unit_price, line.item.quantity) for line in lines],
            shipping_address=command.shipping_address,
            payment_method=command.payment_method,
        )
        current_domain.repository_for(Order).add(order)

        cart_repo = current_domain.repository_for(Cart)
        cart = cart_repo.for_user(command.user_id)
        cart.clear()
        cart_repo.add(cart)

        logger.info(
            "order_placed",
            order_id=str(order.id),
            user_id=str(command.user_id),
            item_count=len(order.items),
            total=order.total,
        )
        return str(order.id)


def place_order(user_id, shipping_address, payment_method=None) -> Order:
    """Check out ``user_id``'s cart and return the stored order.

    Domain and validation errors propagate unchanged. A concurrent write to
    the cart or order surfaces as Conflict, and anything else raised while
    persisting as InternalError, both after the unit of work has rolled back.
    """
    command = PlaceOrder(
        user_id=user_id,
        shipping_address=shipping_address,
        payment_method=payment_method,
    )
    try:
        order_id = process_for_user(user_id, command)
    except (StorefrontError, ValidationError):
        raise
    except ExpectedVersionError as exc:
        logger.warning("order_placement_conflict", user_id=str(user_id))
        raise Conflict() from exc
    except Exception as exc:
        logger.exception("order_placement_failed", user_id=str(user_id))
        raise InternalError("Order could not be placed") from exc

    return current_domain.repository_for(Order).get(order_id)
