"""
Destinations API Router.

Browsing is public; creating, editing and deleting destinations requires an
administrator session.
"""

from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel

from discoverzim.application.dto.destination import (
    Destination,
    DestinationInput,
    DestinationUpdate,
)
from discoverzim.domain.entities.session import SessionState
from discoverzim.infrastructure.persistence import DestinationRepository
from discoverzim.presentation.dependencies.auth import require_admin

router = APIRouter(prefix="/destinations", tags=["destinations"])


class DeleteResponse(BaseModel):
    success: bool


@router.get("", response_model=list[Destination])
@inject
async def list_destinations(
    repository: FromDishka[DestinationRepository], q: Optional[str] = None
):
    if q:
        return await repository.search_destinations(q)
    return await repository.get_destinations()


@router.get("/featured", response_model=list[Destination])
@inject
async def featured_destinations(repository: FromDishka[DestinationRepository]):
    return await repository.get_featured_destinations()


@router.get("/{destination_id}", response_model=Destination)
@inject
async def get_destination(
    destination_id: str, repository: FromDishka[DestinationRepository]
):
    destination = await repository.get_destination(destination_id)
    if destination is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Destination not found"
        )
    return destination


@router.post("", response_model=Destination, status_code=status.HTTP_201_CREATED)
@inject
async def add_destination(
    request: DestinationInput,
    repository: FromDishka[DestinationRepository],
    session: SessionState = Depends(require_admin),
):
    destination = await repository.add_destination(request)
    if destination is None:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY, detail="Failed to add destination"
        )
    return destination


@router.patch("/{destination_id}", response_model=Destination)
@inject
async def update_destination(
    destination_id: str,
    request: DestinationUpdate,
    repository: FromDishka[DestinationRepository],
    session: SessionState = Depends(require_admin),
):
    destination = await repository.update_destination(destination_id, request)
    if destination is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Destination not found"
        )
    return destination


@router.delete("/{destination_id}", response_model=DeleteResponse)
@inject
async def delete_destination(
    destination_id: str,
    repository: FromDishka[DestinationRepository],
    session: SessionState = Depends(require_admin),
):
    return DeleteResponse(success=await repository.delete_destination(destination_id))
