"""Domain events for the Product aggregate."""

from protean.fields import Boolean, DateTime, Float, Identifier, String

from storefront.domain import storefront


@storefront.event(part_of="Product")
class ProductAdded:
    """A new product was added to the catalogue."""

    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    price: Float(required=True)
    brand: String()
    category_id: Identifier()
    featured: Boolean(default=False)
    created_at: DateTime()


@storefront.event(part_of="Product")
class ProductPriceChanged:
    """A product's list price changed. Placed orders keep their snapshot."""

    __version__ = 1

    product_id: Identifier(required=True)
    previous_price: Float(required=True)
    new_price: Float(required=True)
