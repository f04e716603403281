"""
Accommodations API Router - Public browsing of places to stay.

Endpoints:
- GET /accommodations?q=&location=   list, or search when either is given
- GET /accommodations/featured
- GET /accommodations/{accommodation_id}
"""

from typing import Optional
from fastapi import APIRouter, HTTPException, status
from dishka.integrations.fastapi import FromDishka, inject

from discoverzim.application.dto.accommodation import Accommodation
from discoverzim.infrastructure.persistence import AccommodationRepository

router = APIRouter(prefix="/accommodations", tags=["accommodations"])


@router.get("", response_model=list[Accommodation])
@inject
async def list_accommodations(
    repository: FromDishka[AccommodationRepository],
    q: Optional[str] = None,
    location: Optional[str] = None,
):
    if q or location:
        return await repository.search_accommodations(q or "", location)
    return await repository.get_accommodations()


@router.get("/featured", response_model=list[Accommodation])
@inject
async def featured_accommodations(repository: FromDishka[AccommodationRepository]):
    return await repository.get_featured_accommodations()


@router.get("/{accommodation_id}", response_model=Accommodation)
@inject
async def get_accommodation(
    accommodation_id: str, repository: FromDishka[AccommodationRepository]
):
    accommodation = await repository.get_accommodation(accommodation_id)
    if accommodation is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Accommodation not found"
        )
    return accommodation
