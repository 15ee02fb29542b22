"""Cart line management: commands and handler.

Every command names the acting user; lines are only ever looked up inside
that user's own cart, so another user's line id behaves as not found.
"""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from storefront.cart.cart import Cart
from storefront.catalogue.product.product import Product
from storefront.domain import storefront
from storefront.shared.errors import NotFound

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Cart")
class AddToCart:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@storefront.command(part_of="Cart")
class UpdateCartItemQuantity:
    user_id = Identifier(required=True)
    item_id = Identifier(required=True)
    quantity = Integer(required=True)  # <= 0 removes the line


@storefront.command(part_of="Cart")
class RemoveFromCart:
    user_id = Identifier(required=True)
    item_id = Identifier(required=True)


@storefront.command(part_of="Cart")
class ClearCart:
    user_id = Identifier(required=True)


def _user_cart(user_id) -> Cart:
    cart = current_domain.repository_for(Cart).for_user(user_id)
    if cart is None:
        raise NotFound("Cart item not found")
    return cart


@storefront.command_handler(part_of=Cart)
class ManageCartItemsHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        try:
            current_domain.repository_for(Product).get(command.product_id)
        except ObjectNotFoundError:
            raise NotFound("Product not found") from None

        repo = current_domain.repository_for(Cart)
        cart = repo.for_user_or_new(command.user_id)
        item = cart.add_item(product_id=command.product_id, quantity=command.quantity)
        repo.add(cart)

        logger.info(
            "cart_item_merged",
            user_id=str(command.user_id),
            product_id=str(command.product_id),
            line_quantity=item.quantity,
        )
        return str(item.id)

    @handle(UpdateCartItemQuantity)
    def update_quantity(self, command):
        cart = _user_cart(command.user_id)
        item = cart.set_item_quantity(command.item_id, command.quantity)
        current_domain.repository_for(Cart).add(cart)
        return str(item.id) if item is not None else None

    @handle(RemoveFromCart)
    def remove_from_cart(self, command):
        cart = _user_cart(command.user_id)
        cart.remove_item(command.item_id)
        current_domain.repository_for(Cart).add(cart)

    @handle(ClearCart)
    def clear_cart(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.for_user(command.user_id)
        if cart is None:
            return
        cart.clear()
        repo.add(cart)
