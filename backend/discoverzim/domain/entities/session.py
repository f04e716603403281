"""
Session Entity - The authentication state threaded through a request.

Replaces an ambient, process-wide auth context: every consumer receives the
SessionState it should act on instead of reaching for a global.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class SessionPhase(str, Enum):
    RESOLVING = "resolving"
    ANONYMOUS = "anonymous"
    AUTHENTICATED = "authenticated"
    PRIVILEGED = "privileged"


@dataclass(frozen=True)
class AuthUser:
    id: str
    email: Optional[str] = None

    def __post_init__(self):
        if not self.id:
            raise ValueError("AuthUser must have an id.")


@dataclass(frozen=True)
class SessionState:
    user: Optional[AuthUser] = None
    is_admin: bool = False
    is_loading: bool = False
    session_id: Optional[str] = None
    role: Optional[str] = None
    # Epoch seconds after which the access token is no longer valid
    expires_at: Optional[float] = None

    @property
    def phase(self) -> SessionPhase:
        if self.is_loading:
            return SessionPhase.RESOLVING
        if self.user is None:
            return SessionPhase.ANONYMOUS
        if self.is_admin:
            return SessionPhase.PRIVILEGED
        return SessionPhase.AUTHENTICATED

    @classmethod
    def resolving(cls) -> SessionState:
        return cls(is_loading=True)

    @classmethod
    def anonymous(cls) -> SessionState:
        return cls()
