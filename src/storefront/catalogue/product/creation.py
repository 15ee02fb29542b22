"""Product creation: command and handler."""

from protean import handle
from protean.fields import Boolean, Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from storefront.catalogue.product.product import Product
from storefront.domain import storefront


@storefront.command(part_of="Product")
class CreateProduct:
    name: String(required=True, max_length=255)
    description: Text()
    price: Float(required=True, min_value=0.0)
    original_price: Float(min_value=0.0)
    brand: String(max_length=100)
    category_id: Identifier()
    image_url: String(max_length=500)
    stock: Integer(default=0, min_value=0)
    rating: Float(default=0.0, min_value=0.0, max_value=5.0)
    review_count: Integer(default=0, min_value=0)
    featured: Boolean(default=False)


@storefront.command_handler(part_of=Product)
class CreateProductHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        product = Product.create(
            name=command.name,
            price=command.price,
            description=command.description,
            brand=command.brand,
            category_id=command.category_id,
            original_price=command.original_price,
            image_url=command.image_url,
            stock=command.stock,
            rating=command.rating,
            review_count=command.review_count,
            featured=command.featured,
        )
        current_domain.repository_for(Product).add(product)
        return str(product.id)
