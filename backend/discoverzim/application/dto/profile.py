"""Profile records."""

from datetime import datetime
from typing import Literal, Optional

from discoverzim.application.dto.base import Record, WritePayload

UserRole = Literal["USER", "ADMIN"]


class Profile(Record):
    id: str
    username: Optional[str] = None
    email: Optional[str] = None
    avatar_url: Optional[str] = None
    role: Optional[str] = None
    is_locked: Optional[bool] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ProfileUpdate(WritePayload):
    """Self-service profile fields; role and lock flags are admin-only."""

    username: Optional[str] = None
    avatar_url: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
