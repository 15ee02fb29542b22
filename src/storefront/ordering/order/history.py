"""Order history reads, always scoped to the requesting user."""

from protean.utils.globals import current_domain

from storefront.ordering.order.order import Order
from storefront.shared.errors import NotFound


def orders_for(user_id) -> list[Order]:
    return current_domain.repository_for(Order).for_user(user_id)


def order_for(user_id, order_id) -> Order:
    """The user's order; another user's order is reported as not found."""
    order = current_domain.repository_for(Order).for_user_by_id(user_id, order_id)
    if order is None:
        raise NotFound("Order not found")
    return order
