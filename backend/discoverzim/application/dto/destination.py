"""Destination records and write payloads."""

from datetime import datetime
from typing import Any, Optional

from discoverzim.application.dto.base import Record, WritePayload

# Columns the backend stores as arrays; writes never send null for these
LIST_FIELDS = (
    "activities",
    "amenities",
    "what_to_bring",
    "highlights",
    "categories",
    "additional_images",
)


class Destination(Record):
    id: str
    name: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    price: Optional[float] = None
    image_url: Optional[str] = None
    activities: Optional[list[str]] = None
    best_time_to_visit: Optional[str] = None
    duration_recommended: Optional[str] = None
    difficulty_level: Optional[str] = None
    amenities: Optional[list[str]] = None
    what_to_bring: Optional[list[str]] = None
    highlights: Optional[list[str]] = None
    weather_info: Optional[str] = None
    getting_there: Optional[str] = None
    categories: Optional[list[str]] = None
    additional_images: Optional[list[str]] = None
    additional_costs: Optional[dict[str, Any] | list[Any]] = None
    is_featured: Optional[bool] = None
    payment_url: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class DestinationUpdate(WritePayload):
    name: Optional[str] = None
    location: Optional[str] = None
    price: Optional[float] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    activities: Optional[list[str]] = None
    best_time_to_visit: Optional[str] = None
    duration_recommended: Optional[str] = None
    difficulty_level: Optional[str] = None
    amenities: Optional[list[str]] = None
    what_to_bring: Optional[list[str]] = None
    highlights: Optional[list[str]] = None
    weather_info: Optional[str] = None
    getting_there: Optional[str] = None
    categories: Optional[list[str]] = None
    additional_images: Optional[list[str]] = None
    additional_costs: Optional[dict[str, Any] | list[Any]] = None
    is_featured: Optional[bool] = None
    payment_url: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    def to_row(self) -> dict:
        row = super().to_row()
        for field in LIST_FIELDS:
            if field in row and row[field] is None:
                row[field] = []
        return row


class DestinationInput(DestinationUpdate):
    name: str
    location: str
    price: float

    def to_row(self) -> dict:
        row = super().to_row()
        for field in LIST_FIELDS:
            row[field] = row.get(field) or []
        return row
