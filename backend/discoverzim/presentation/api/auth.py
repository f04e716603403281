"""
Auth API Router - Session introspection and sign-out.

Signing in happens against the hosted auth service directly; this backend
only reads the resulting access token.
"""

from typing import Optional
from fastapi import APIRouter, Depends
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel

from discoverzim.domain.entities.session import SessionState
from discoverzim.presentation.dependencies.auth import get_session, require_session
from discoverzim.services import SessionManager

router = APIRouter(prefix="/auth", tags=["auth"])


class SessionResponse(BaseModel):
    phase: str
    user_id: Optional[str] = None
    email: Optional[str] = None
    role: Optional[str] = None
    is_admin: bool = False


def _session_response(session: SessionState) -> SessionResponse:
    return SessionResponse(
        phase=session.phase.value,
        user_id=session.user.id if session.user else None,
        email=session.user.email if session.user else None,
        role=session.role,
        is_admin=session.is_admin,
    )


@router.get("/session", response_model=SessionResponse)
async def current_session(session: SessionState = Depends(get_session)):
    return _session_response(session)


@router.post("/sign-out", response_model=SessionResponse)
@inject
async def sign_out(
    manager: FromDishka[SessionManager],
    session: SessionState = Depends(require_session),
):
    return _session_response(manager.sign_out())
