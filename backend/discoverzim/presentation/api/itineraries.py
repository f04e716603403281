"""
Itineraries API Router.

Guidelines:
- Owners manage their itineraries and the ordered stops in them
- A public itinerary can be read by anyone through its share code
- Private itineraries are visible to their owner only
"""

from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel

from discoverzim.application.dto.itinerary import (
    Itinerary,
    ItineraryCreate,
    ItineraryDestination,
    ItineraryDestinationCreate,
    ItineraryDestinationUpdate,
    ItineraryUpdate,
)
from discoverzim.domain.entities.session import SessionState
from discoverzim.infrastructure.persistence import ItineraryRepository
from discoverzim.presentation.dependencies.auth import require_session

router = APIRouter(prefix="/itineraries", tags=["itineraries"])


class CreateItineraryRequest(BaseModel):
    title: str
    description: Optional[str] = None
    is_public: bool = False


class DeleteResponse(BaseModel):
    success: bool


async def _owned(
    itinerary_id: str, repository: ItineraryRepository, session: SessionState
) -> Itinerary:
    itinerary = await repository.get_itinerary(itinerary_id)
    if itinerary is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Itinerary not found")
    if itinerary.user_id != session.user.id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN, detail="Access denied to this itinerary"
        )
    return itinerary


def _require_stop(itinerary: Itinerary, stop_id: str) -> None:
    if all(stop.id != stop_id for stop in itinerary.destinations):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Destination not found")


@router.get("/shared/{share_code}", response_model=Itinerary)
@inject
async def shared_itinerary(share_code: str, repository: FromDishka[ItineraryRepository]):
    itinerary = await repository.get_itinerary_by_share_code(share_code)
    if itinerary is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Itinerary not found")
    return itinerary


@router.get("", response_model=list[Itinerary])
@inject
async def list_itineraries(
    repository: FromDishka[ItineraryRepository],
    session: SessionState = Depends(require_session),
):
    return await repository.get_user_itineraries(session.user.id)


@router.post("", response_model=Itinerary, status_code=status.HTTP_201_CREATED)
@inject
async def create_itinerary(
    request: CreateItineraryRequest,
    repository: FromDishka[ItineraryRepository],
    session: SessionState = Depends(require_session),
):
    itinerary = await repository.create_itinerary(
        ItineraryCreate(user_id=session.user.id, **request.model_dump(exclude_none=True))
    )
    if itinerary is None:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY, detail="Failed to create itinerary"
        )
    return itinerary


@router.get("/{itinerary_id}", response_model=Itinerary)
@inject
async def get_itinerary(
    itinerary_id: str,
    repository: FromDishka[ItineraryRepository],
    session: SessionState = Depends(require_session),
):
    return await _owned(itinerary_id, repository, session)


@router.patch("/{itinerary_id}", response_model=Itinerary)
@inject
async def update_itinerary(
    itinerary_id: str,
    request: ItineraryUpdate,
    repository: FromDishka[ItineraryRepository],
    session: SessionState = Depends(require_session),
):
    await _owned(itinerary_id, repository, session)
    itinerary = await repository.update_itinerary(itinerary_id, request)
    if itinerary is None:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY, detail="Failed to update itinerary"
        )
    return itinerary


@router.delete("/{itinerary_id}", response_model=DeleteResponse)
@inject
async def delete_itinerary(
    itinerary_id: str,
    repository: FromDishka[ItineraryRepository],
    session: SessionState = Depends(require_session),
):
    await _owned(itinerary_id, repository, session)
    return DeleteResponse(success=await repository.delete_itinerary(itinerary_id))


@router.post(
    "/{itinerary_id}/destinations",
    response_model=ItineraryDestination,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def add_stop(
    itinerary_id: str,
    request: ItineraryDestinationCreate,
    repository: FromDishka[ItineraryRepository],
    session: SessionState = Depends(require_session),
):
    await _owned(itinerary_id, repository, session)
    stop = await repository.add_destination_to_itinerary(itinerary_id, request)
    if stop is None:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY, detail="Failed to add destination"
        )
    return stop


@router.patch("/{itinerary_id}/destinations/{stop_id}", response_model=ItineraryDestination)
@inject
async def update_stop(
    itinerary_id: str,
    stop_id: str,
    request: ItineraryDestinationUpdate,
    repository: FromDishka[ItineraryRepository],
    session: SessionState = Depends(require_session),
):
    _require_stop(await _owned(itinerary_id, repository, session), stop_id)
    stop = await repository.update_itinerary_destination(
        stop_id, request, itinerary_id=itinerary_id
    )
    if stop is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Destination not found")
    return stop


@router.delete("/{itinerary_id}/destinations/{stop_id}", response_model=DeleteResponse)
@inject
async def remove_stop(
    itinerary_id: str,
    stop_id: str,
    repository: FromDishka[ItineraryRepository],
    session: SessionState = Depends(require_session),
):
    _require_stop(await _owned(itinerary_id, repository, session), stop_id)
    return DeleteResponse(
        success=await repository.remove_destination_from_itinerary(
            stop_id, itinerary_id=itinerary_id
        )
    )
