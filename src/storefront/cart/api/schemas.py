"""Pydantic request/response schemas for the Cart API."""

from datetime import datetime

from pydantic import Field

from storefront.catalogue.api.schemas import ProductResponse
from storefront.shared.schemas import ApiModel, ApiRequest


class AddToCartRequest(ApiRequest):
    product_id: str
    quantity: int = Field(ge=1, default=1)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "productId": "4b8f0c1e-2f7a-4e51-9d8e-0a6c3c1f2d10",
                    "quantity": 2,
                }
            ]
        }
    }


class UpdateCartItemRequest(ApiRequest):
    # Zero or negative removes the line
    quantity: int


class CartLineResponse(ApiModel):
    id: str
    user_id: str
    product_id: str
    quantity: int
    created_at: datetime | None = None
    product: ProductResponse

    @classmethod
    def from_line(cls, line) -> "CartLineResponse":
        return cls(
            id=str(line.item.id),
            user_id=line.user_id,
            product_id=str(line.item.product_id),
            quantity=line.item.quantity,
            created_at=line.item.added_at,
            product=ProductResponse.from_product(line.product),
        )


class CartItemRemovedResponse(ApiModel):
    id: str
    removed: bool = True
