"""Event records and write payloads."""

from datetime import datetime
from typing import Any, Optional

from discoverzim.application.dto.base import Record, WritePayload


class Event(Record):
    id: str
    title: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    price: Optional[float] = None
    ticket_types: Optional[dict[str, Any] | list[Any]] = None
    image_url: Optional[str] = None
    event_type: Optional[str] = None
    program_type: Optional[str] = None
    program_name: Optional[str] = None
    program_url: Optional[str] = None
    payment_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class EventUpdate(WritePayload):
    title: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    price: Optional[float] = None
    ticket_types: Optional[dict[str, Any] | list[Any]] = None
    image_url: Optional[str] = None
    event_type: Optional[str] = None
    program_type: Optional[str] = None
    program_name: Optional[str] = None
    program_url: Optional[str] = None
    payment_url: Optional[str] = None


class EventInput(EventUpdate):
    title: str
