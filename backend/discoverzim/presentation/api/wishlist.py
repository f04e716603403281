"""Wishlist API Router - Destinations the signed-in user saved."""

from fastapi import APIRouter, Depends, HTTPException, status
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel

from discoverzim.application.dto.wishlist import WishlistEntry
from discoverzim.domain.entities.session import SessionState
from discoverzim.infrastructure.persistence import WishlistRepository
from discoverzim.presentation.dependencies.auth import require_session

router = APIRouter(prefix="/wishlist", tags=["wishlist"])


class AddToWishlistRequest(BaseModel):
    destination_id: str


class WishlistStatusResponse(BaseModel):
    destination_id: str
    in_wishlist: bool


class RemoveResponse(BaseModel):
    success: bool


@router.get("", response_model=list[WishlistEntry])
@inject
async def get_wishlist(
    repository: FromDishka[WishlistRepository],
    session: SessionState = Depends(require_session),
):
    return await repository.get_user_wishlist(session.user.id)


@router.post("", response_model=WishlistEntry, status_code=status.HTTP_201_CREATED)
@inject
async def add_to_wishlist(
    request: AddToWishlistRequest,
    repository: FromDishka[WishlistRepository],
    session: SessionState = Depends(require_session),
):
    entry = await repository.add_to_wishlist(session.user.id, request.destination_id)
    if entry is None:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY, detail="Failed to add to wishlist"
        )
    return entry


@router.get("/{destination_id}", response_model=WishlistStatusResponse)
@inject
async def wishlist_status(
    destination_id: str,
    repository: FromDishka[WishlistRepository],
    session: SessionState = Depends(require_session),
):
    return WishlistStatusResponse(
        destination_id=destination_id,
        in_wishlist=await repository.is_in_wishlist(session.user.id, destination_id),
    )


@router.delete("/{destination_id}", response_model=RemoveResponse)
@inject
async def remove_from_wishlist(
    destination_id: str,
    repository: FromDishka[WishlistRepository],
    session: SessionState = Depends(require_session),
):
    return RemoveResponse(
        success=await repository.remove_from_wishlist(session.user.id, destination_id)
    )
