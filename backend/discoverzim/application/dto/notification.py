"""Notification records."""

from datetime import datetime
from typing import Optional

from discoverzim.application.dto.base import Record


class Notification(Record):
    id: str
    user_id: str
    title: str
    description: Optional[str] = None
    type: Optional[str] = None
    is_read: Optional[bool] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
