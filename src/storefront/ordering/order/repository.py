"""Repository for the Order aggregate: history reads scoped to one user."""

from storefront.domain import storefront
from storefront.ordering.order.order import Order


@storefront.repository(part_of=Order)
class OrderRepository:
    def for_user(self, user_id) -> list[Order]:
        """The user's orders, newest first."""
        return self._dao.query.filter(user_id=str(user_id)).order_by("-created_at").all().items

    def for_user_by_id(self, user_id, order_id) -> Order | None:
        """One order, or ``None`` if it does not exist or belongs to someone else."""
        return self._dao.query.filter(id=str(order_id), user_id=str(user_id)).all().first
