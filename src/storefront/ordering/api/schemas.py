"""Pydantic request/response schemas for the Orders API."""

from datetime import datetime

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain
from pydantic import Field

from storefront.catalogue.api.schemas import ProductResponse
from storefront.catalogue.product.product import Product
from storefront.shared.schemas import ApiModel, ApiRequest


class PlaceOrderRequest(ApiRequest):
    shipping_address: str = Field(min_length=1, max_length=1000)
    # Captured for the record only; no payment is taken
    payment_method: str | None = Field(default=None, max_length=50)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "shippingAddress": "123 Main St, Springfield, IL 62701, US",
                    "paymentMethod": "credit_card",
                }
            ]
        }
    }


class OrderItemResponse(ApiModel):
    id: str
    order_id: str
    product_id: str
    quantity: int
    price: str
    product: ProductResponse | None = None


class OrderResponse(ApiModel):
    id: str
    user_id: str
    status: str
    subtotal: str
    shipping: str
    tax: str
    total: str
    shipping_address: str
    payment_method: str | None = None
    created_at: datetime | None = None
    order_items: list[OrderItemResponse]

    @classmethod
    def from_order(cls, order) -> "OrderResponse":
        product_repo = current_domain.repository_for(Product)

        items = []
        for item in order.items:
            # Current catalogue entry for display; the price stays the snapshot
            try:
                product = ProductResponse.from_product(product_repo.get(item.product_id))
            except ObjectNotFoundError:
                product = None
            items.append(
                OrderItemResponse(
                    id=str(item.id),
                    order_id=str(order.id),
                    product_id=str(item.product_id),
                    quantity=item.quantity,
                    price=item.price,
                    product=product,
                )
            )

        return cls(
            id=str(order.id),
            user_id=str(order.user_id),
            status=order.status,
            subtotal=order.subtotal,
            shipping=order.shipping,
            tax=order.tax,
            total=order.total,
            shipping_address=order.shipping_address,
            payment_method=order.payment_method,
            created_at=order.created_at,
            order_items=items,
        )
