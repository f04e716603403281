"""Cart records and write payloads."""

from datetime import datetime
from typing import Optional
from pydantic import Field

from discoverzim.application.dto.base import Record, WritePayload
from discoverzim.application.dto.destination import Destination
from discoverzim.application.dto.event import Event


class CartItem(Record):
    id: str
    user_id: str
    destination_id: Optional[str] = None
    event_id: Optional[str] = None
    quantity: int = 1
    preferred_date: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    # Embedded rows, present when the cart is read with its relations
    destination: Optional[Destination] = Field(default=None, alias="destinations")
    event: Optional[Event] = Field(default=None, alias="events")


class CartItemCreate(WritePayload):
    user_id: str
    quantity: Optional[int] = None
    destination_id: Optional[str] = None
    event_id: Optional[str] = None
    preferred_date: Optional[str] = None


class CartItemUpdate(WritePayload):
    quantity: Optional[int] = None
    preferred_date: Optional[str] = None
    destination_id: Optional[str] = None
    event_id: Optional[str] = None
