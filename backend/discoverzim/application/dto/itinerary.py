"""Itinerary records and write payloads."""

from datetime import datetime
from typing import Optional
from pydantic import Field, field_validator

from discoverzim.application.dto.base import Record, WritePayload


class ItineraryDestination(Record):
    id: str
    itinerary_id: Optional[str] = None
    destination_id: Optional[str] = None
    name: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    notes: Optional[str] = None
    order: int = 0

    @field_validator("order", mode="before")
    @classmethod
    def _null_order(cls, value):
        return 0 if value is None else value


class Itinerary(Record):
    id: str
    user_id: Optional[str] = None
    title: str
    description: Optional[str] = None
    is_public: bool = False
    share_code: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    destinations: list[ItineraryDestination] = Field(
        default_factory=list, alias="itinerary_destinations"
    )

    @field_validator("destinations", mode="before")
    @classmethod
    def _default_destinations(cls, value):
        return value or []

    @field_validator("destinations")
    @classmethod
    def _sort_by_order(cls, value: list[ItineraryDestination]):
        return sorted(value, key=lambda dest: dest.order)

    @field_validator("is_public", mode="before")
    @classmethod
    def _null_is_private(cls, value):
        return bool(value)


class ItineraryUpdate(WritePayload):
    title: Optional[str] = None
    description: Optional[str] = None
    is_public: Optional[bool] = None


class ItineraryCreate(ItineraryUpdate):
    user_id: str
    title: str


class ItineraryDestinationUpdate(WritePayload):
    name: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    notes: Optional[str] = None
    order: Optional[int] = None


class ItineraryDestinationCreate(ItineraryDestinationUpdate):
    destination_id: Optional[str] = None
    name: str
