"""Product price change: command and handler."""

from protean import handle
from protean.fields import Float, Identifier
from protean.utils.globals import current_domain

from storefront.catalogue.product.product import Product
from storefront.domain import storefront


@storefront.command(part_of="Product")
class ChangeProductPrice:
    product_id: Identifier(required=True)
    price: Float(required=True, min_value=0.0)


@storefront.command_handler(part_of=Product)
class ChangeProductPriceHandler:
    @handle(ChangeProductPrice)
    def change_price(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.change_price(command.price)
        repo.add(product)
