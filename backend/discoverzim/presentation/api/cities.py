"""Cities API Router - Locations derived from destinations and events."""

from fastapi import APIRouter
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel

from discoverzim.application.dto.location import CityContent
from discoverzim.infrastructure.persistence import LocationRepository

router = APIRouter(prefix="/cities", tags=["cities"])


class CitiesResponse(BaseModel):
    cities: list[str]


@router.get("", response_model=CitiesResponse)
@inject
async def list_cities(repository: FromDishka[LocationRepository]):
    return CitiesResponse(cities=await repository.get_all_cities_with_content())


@router.get("/{city}", response_model=CityContent)
@inject
async def city_content(city: str, repository: FromDishka[LocationRepository]):
    return await repository.get_city_content(city)
