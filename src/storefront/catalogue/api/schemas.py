"""Pydantic response schemas for the Catalogue API."""

from datetime import datetime

from storefront.shared.money import format_money
from storefront.shared.schemas import ApiModel


class ProductResponse(ApiModel):
    id: str
    name: str
    description: str | None = None
    price: str
    original_price: str | None = None
    brand: str | None = None
    category_id: str | None = None
    image_url: str | None = None
    stock: int = 0
    rating: float = 0.0
    review_count: int = 0
    featured: bool = False
    created_at: datetime | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "id": "4b8f0c1e-2f7a-4e51-9d8e-0a6c3c1f2d10",
                    "name": "Premium Wireless Headphones",
                    "description": "High-quality wireless headphones with noise cancellation",
                    "price": "79.99",
                    "originalPrice": "99.99",
                    "brand": "AudioTech",
                    "categoryId": "9a1d3c55-7a0e-4a61-8d0b-3e2f1b6c9d21",
                    "stock": 50,
                    "rating": 4.5,
                    "reviewCount": 127,
                    "featured": True,
                }
            ]
        }
    }

    @classmethod
    def from_product(cls, product) -> "ProductResponse":
        return cls(
            id=str(product.id),
            name=product.name,
            description=product.description,
            price=format_money(product.price),
            original_price=format_money(product.original_price),
            brand=product.brand,
            category_id=str(product.category_id) if product.category_id else None,
            image_url=product.image_url,
            stock=product.stock or 0,
            rating=product.rating or 0.0,
            review_count=product.review_count or 0,
            featured=bool(product.featured),
            created_at=product.created_at,
        )


class CategoryResponse(ApiModel):
    id: str
    name: str
    slug: str
    description: str | None = None

    @classmethod
    def from_category(cls, category) -> "CategoryResponse":
        return cls(
            id=str(category.id),
            name=category.name,
            slug=category.slug,
            description=category.description,
        )
