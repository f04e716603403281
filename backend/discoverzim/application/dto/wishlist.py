"""Wishlist records."""

from datetime import datetime
from typing import Optional
from pydantic import Field

from discoverzim.application.dto.base import Record
from discoverzim.application.dto.destination import Destination


class WishlistEntry(Record):
    id: str
    user_id: str
    destination_id: str
    created_at: Optional[datetime] = None
    destination: Optional[Destination] = Field(default=None, alias="destinations")
