"""Accommodation records."""

import json
from datetime import datetime
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from discoverzim.application.dto.base import Record

# Price multipliers for the stock room classes offered when a property lists none
DEFAULT_ROOM_MULTIPLIERS = {"standard": 1.0, "deluxe": 1.5, "suite": 2.0}


class RoomType(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: Optional[str] = None
    name: Optional[str] = Field(default=None, alias="type")
    price: Optional[float] = None
    capacity: Optional[int] = None
    multiplier: Optional[float] = None


class Accommodation(Record):
    id: str
    name: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    price_per_night: Optional[float] = None
    image_url: Optional[str] = None
    additional_images: Optional[list[str]] = None
    amenities: Optional[list[str]] = None
    room_types: Optional[list[RoomType]] = None
    max_guests: Optional[int] = None
    rating: Optional[float] = None
    review_count: Optional[int] = None
    is_featured: Optional[bool] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("room_types", mode="before")
    @classmethod
    def _parse_room_types(cls, value: Any) -> Any:
        # Some rows carry the room list as a JSON-encoded string
        if isinstance(value, str):
            try:
                value = json.loads(value)
            except ValueError:
                return None
        if value is not None and not isinstance(value, list):
            return None
        return value

    def room_multiplier(self, room_type: str) -> float:
        for room in self.room_types or []:
            if room_type in (room.id, room.name) and room.multiplier:
                return room.multiplier
        return DEFAULT_ROOM_MULTIPLIERS.get(room_type, 1.0)
