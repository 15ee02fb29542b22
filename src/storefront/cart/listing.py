"""Cart read side: the user's lines joined with live product data."""

from dataclasses import dataclass

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.cart.cart import Cart, CartItem
from storefront.catalogue.product.product import Product


@dataclass(frozen=True)
class CartLine:
    user_id: str
    item: CartItem
    product: Product

    @property
    def unit_price(self):
        # Live catalogue price; checkout snapshots it onto the order item
        return self.product.price


def cart_lines(user_id) -> list[CartLine]:
    """Lines of the user's cart in insertion order.

    Lines whose product has disappeared from the catalogue are skipped.
    """
    cart = current_domain.repository_for(Cart).for_user(user_id)
    if cart is None:
        return []

    product_repo = current_domain.repository_for(Product)
    lines = []
    for item in sorted(cart.items, key=lambda i: i.added_at or cart.created_at):
        try:
            product = product_repo.get(item.product_id)
        except ObjectNotFoundError:
            continue
        lines.append(CartLine(user_id=str(user_id), item=item, product=product))
    return lines


def cart_line(user_id, item_id) -> CartLine | None:
    return next((line for line in cart_lines(user_id) if str(line.item.id) == str(item_id)), None)
