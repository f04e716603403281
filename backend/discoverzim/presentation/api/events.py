"""
Events API Router.

Browsing is public; event administration requires an administrator session.
"""

from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel

from discoverzim.application.dto.event import Event, EventInput, EventUpdate
from discoverzim.domain.entities.session import SessionState
from discoverzim.infrastructure.persistence import EventRepository
from discoverzim.presentation.dependencies.auth import require_admin

router = APIRouter(prefix="/events", tags=["events"])


class DeleteResponse(BaseModel):
    success: bool


@router.get("", response_model=list[Event])
@inject
async def list_events(repository: FromDishka[EventRepository], q: Optional[str] = None):
    if q:
        return await repository.search_events(q)
    return await repository.get_events()


@router.get("/upcoming", response_model=list[Event])
@inject
async def upcoming_events(repository: FromDishka[EventRepository]):
    return await repository.get_upcoming_events()


@router.get("/{event_id}", response_model=Event)
@inject
async def get_event(event_id: str, repository: FromDishka[EventRepository]):
    event = await repository.get_event(event_id)
    if event is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found")
    return event


@router.post("", response_model=Event, status_code=status.HTTP_201_CREATED)
@inject
async def add_event(
    request: EventInput,
    repository: FromDishka[EventRepository],
    session: SessionState = Depends(require_admin),
):
    event = await repository.add_event(request)
    if event is None:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY, detail="Failed to add event"
        )
    return event


@router.patch("/{event_id}", response_model=Event)
@inject
async def update_event(
    event_id: str,
    request: EventUpdate,
    repository: FromDishka[EventRepository],
    session: SessionState = Depends(require_admin),
):
    event = await repository.update_event(event_id, request)
    if event is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found")
    return event


@router.delete("/{event_id}", response_model=DeleteResponse)
@inject
async def delete_event(
    event_id: str,
    repository: FromDishka[EventRepository],
    session: SessionState = Depends(require_admin),
):
    return DeleteResponse(success=await repository.delete_event(event_id))
