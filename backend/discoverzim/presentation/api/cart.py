"""
Cart API Router - The signed-in user's shopping cart.

Flow:
  POST /cart           add a destination or event
  GET /cart            items with the destination/event they refer to
  PATCH /cart/{id}     change quantity or preferred date
  DELETE /cart/{id}    remove one item
  DELETE /cart         empty the cart
"""

from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel, Field

from discoverzim.application.dto.cart import CartItem, CartItemCreate, CartItemUpdate
from discoverzim.domain.entities.session import SessionState
from discoverzim.infrastructure.persistence import CartRepository
from discoverzim.presentation.dependencies.auth import require_session

router = APIRouter(prefix="/cart", tags=["cart"])


class AddToCartRequest(BaseModel):
    destination_id: Optional[str] = None
    event_id: Optional[str] = None
    quantity: int = Field(default=1, ge=1)
    preferred_date: Optional[str] = None


class CartActionResponse(BaseModel):
    success: bool


@router.get("", response_model=list[CartItem])
@inject
async def get_cart(
    repository: FromDishka[CartRepository],
    session: SessionState = Depends(require_session),
):
    return await repository.get_user_cart(session.user.id)


@router.post("", response_model=CartItem, status_code=status.HTTP_201_CREATED)
@inject
async def add_to_cart(
    request: AddToCartRequest,
    repository: FromDishka[CartRepository],
    session: SessionState = Depends(require_session),
):
    if not request.destination_id and not request.event_id:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="A destination or an event is required",
        )
    item = await repository.add_to_cart(
        CartItemCreate(user_id=session.user.id, **request.model_dump(exclude_none=True))
    )
    if item is None:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY, detail="Failed to add to cart"
        )
    return item


@router.patch("/{item_id}", response_model=CartItem)
@inject
async def update_cart_item(
    item_id: str,
    request: CartItemUpdate,
    repository: FromDishka[CartRepository],
    session: SessionState = Depends(require_session),
):
    item = await repository.update_cart_item(item_id, request, user_id=session.user.id)
    if item is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Cart item not found")
    return item


@router.delete("/{item_id}", response_model=CartActionResponse)
@inject
async def remove_from_cart(
    item_id: str,
    repository: FromDishka[CartRepository],
    session: SessionState = Depends(require_session),
):
    cart = await repository.get_user_cart(session.user.id)
    if all(item.id != item_id for item in cart):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Cart item not found")
    return CartActionResponse(
        success=await repository.remove_from_cart(item_id, user_id=session.user.id)
    )


@router.delete("", response_model=CartActionResponse)
@inject
async def clear_cart(
    repository: FromDishka[CartRepository],
    session: SessionState = Depends(require_session),
):
    return CartActionResponse(success=await repository.clear_cart(session.user.id))
