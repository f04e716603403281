"""Review records and write payloads."""

from datetime import datetime
from typing import Optional
from pydantic import Field

from discoverzim.application.dto.base import Record, WritePayload


class Review(Record):
    id: str
    user_id: str
    destination_id: str
    rating: int
    comment: Optional[str] = None
    images: Optional[list[str]] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ReviewUpdate(WritePayload):
    rating: Optional[int] = Field(default=None, ge=1, le=5)
    comment: Optional[str] = None
    images: Optional[list[str]] = None


class ReviewCreate(ReviewUpdate):
    user_id: str
    destination_id: str
    rating: int = Field(ge=1, le=5)
