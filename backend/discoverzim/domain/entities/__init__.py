"""
ENTITIES - Domain state objects

Remote rows are mirrored by pydantic records in the application layer; the
domain only owns the session state it reasons about.
"""

from discoverzim.domain.entities.session import AuthUser, SessionPhase, SessionState

__all__ = [
    "AuthUser",
    "SessionPhase",
    "SessionState",
]
