"""FastAPI routes for checkout and order history."""

from fastapi import APIRouter, Depends

from storefront.identity.auth import AuthSession, require_session
from storefront.ordering.api.schemas import OrderResponse, PlaceOrderRequest
from storefront.ordering.order.history import order_for, orders_for
from storefront.ordering.order.placement import place_order

order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.post("", status_code=201, response_model=OrderResponse)
async def create_order(body: PlaceOrderRequest, session: AuthSession = Depends(require_session)) -> OrderResponse:
    """Check out the caller's cart. 400 when the cart is empty."""
    order = place_order(
        user_id=session.user_id,
        shipping_address=body.shipping_address,
        payment_method=body.payment_method,
    )
    return OrderResponse.from_order(order)


@order_router.get("", response_model=list[OrderResponse])
async def list_orders(session: AuthSession = Depends(require_session)) -> list[OrderResponse]:
    return [OrderResponse.from_order(order) for order in orders_for(session.user_id)]


@order_router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str, session: AuthSession = Depends(require_session)) -> OrderResponse:
    return OrderResponse.from_order(order_for(session.user_id, order_id))
