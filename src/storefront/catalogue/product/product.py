"""Product aggregate root."""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, Identifier, Integer, String, Text

from storefront.catalogue.product.events import ProductAdded, ProductPriceChanged
from storefront.domain import storefront


@storefront.aggregate
class Product:
    """A sellable catalogue item.

    ``price`` is stored as a number so that range filters compile to the
    store's comparison operators; it is rendered as a 2-dp decimal string at
    the API boundary.
    """

    name: String(required=True, max_length=255)
    description: Text(default="")
    price: Float(required=True, min_value=0.0)
    original_price: Float(min_value=0.0)
    brand: String(max_length=100)
    category_id: Identifier()
    image_url: String(max_length=500)
    stock: Integer(default=0, min_value=0)
    rating: Float(default=0.0, min_value=0.0, max_value=5.0)
    review_count: Integer(default=0, min_value=0)
    featured: Boolean(default=False)
    created_at: DateTime(default=lambda: datetime.now(UTC))

    @invariant.post
    def name_must_not_be_blank(self):
        if not self.name or not self.name.strip():
            raise ValidationError({"name": ["Product name cannot be blank"]})

    @classmethod
    def create(
        cls,
        name,
        price,
        description=None,
        brand=None,
        category_id=None,
        original_price=None,
        image_url=None,
        stock=0,
        rating=0.0,
        review_count=0,
        featured=False,
        created_at=None,
    ):
        product = cls(
            name=name,
            description=description or "",
            price=price,
            original_price=original_price,
            brand=brand,
            category_id=category_id,
            image_url=image_url,
            stock=stock or 0,
            rating=rating or 0.0,
            review_count=review_count or 0,
            featured=bool(featured),
            created_at=created_at or datetime.now(UTC),
        )

        product.raise_(
            ProductAdded(
                product_id=str(product.id),
                name=product.name,
                price=product.price,
                brand=product.brand,
                category_id=str(product.category_id) if product.category_id else None,
                featured=product.featured,
                created_at=product.created_at,
            )
        )
        return product

    def change_price(self, new_price):
        if new_price is None or new_price < 0:
            raise ValidationError({"price": ["Price must be zero or positive"]})

        previous_price = self.price
        self.price = new_price

        self.raise_(
            ProductPriceChanged(
                product_id=str(self.id),
                previous_price=previous_price,
                new_price=new_price,
            )
        )

