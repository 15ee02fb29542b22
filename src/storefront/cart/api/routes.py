"""FastAPI routes for the shopping cart.

All routes act on the authenticated user's own cart.
"""

from fastapi import APIRouter, Depends

from storefront.cart.api.schemas import (
    AddToCartRequest,
    CartItemRemovedResponse,
    CartLineResponse,
    UpdateCartItemRequest,
)
from storefront.cart.items import AddToCart, ClearCart, RemoveFromCart, UpdateCartItemQuantity
from storefront.cart.listing import cart_line, cart_lines
from storefront.identity.auth import AuthSession, require_session
from storefront.shared.errors import NotFound
from storefront.shared.locking import process_for_user
from storefront.shared.schemas import MessageResponse

cart_router = APIRouter(prefix="/cart", tags=["cart"])


def _line_response(user_id, item_id) -> CartLineResponse:
    line = cart_line(user_id, item_id)
    if line is None:
        raise NotFound("Cart item not found")
    return CartLineResponse.from_line(line)


@cart_router.get("", response_model=list[CartLineResponse])
async def get_cart(session: AuthSession = Depends(require_session)) -> list[CartLineResponse]:
    return [CartLineResponse.from_line(line) for line in cart_lines(session.user_id)]


@cart_router.post("", response_model=CartLineResponse)
async def add_to_cart(body: AddToCartRequest, session: AuthSession = Depends(require_session)) -> CartLineResponse:
    command = AddToCart(
        user_id=session.user_id,
        product_id=body.product_id,
        quantity=body.quantity,
    )
    item_id = process_for_user(session.user_id, command)
    return _line_response(session.user_id, item_id)


@cart_router.put("/{item_id}", response_model=CartLineResponse | CartItemRemovedResponse)
async def update_cart_item(
    item_id: str,
    body: UpdateCartItemRequest,
    session: AuthSession = Depends(require_session),
) -> CartLineResponse | CartItemRemovedResponse:
    command = UpdateCartItemQuantity(
        user_id=session.user_id,
        item_id=item_id,
        quantity=body.quantity,
    )
    updated_id = process_for_user(session.user_id, command)
    if updated_id is None:
        return CartItemRemovedResponse(id=item_id)
    return _line_response(session.user_id, updated_id)


@cart_router.delete("/{item_id}", response_model=MessageResponse)
async def remove_cart_item(item_id: str, session: AuthSession = Depends(require_session)) -> MessageResponse:
    command = RemoveFromCart(user_id=session.user_id, item_id=item_id)
    process_for_user(session.user_id, command)
    return MessageResponse(message="Item removed")


@cart_router.delete("", response_model=MessageResponse)
async def clear_cart(session: AuthSession = Depends(require_session)) -> MessageResponse:
    process_for_user(session.user_id, ClearCart(user_id=session.user_id))
    return MessageResponse(message="Cart cleared")
