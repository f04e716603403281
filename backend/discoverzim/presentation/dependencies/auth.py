"""
Session and Access Gate Dependencies for FastAPI.

Guidelines:
- The session comes from the access token in the Authorization header
  (Bearer scheme); a missing or invalid token is an anonymous session
- require_session / require_admin run the route guard of the caller's session
- A guard that does not allow rendering interrupts the request:
    loading  -> 202 with {"status": "loading"}
    sign-in  -> 303 to the sign-in page, requested location kept in ?next=
    landing  -> 303 to the landing page, denial notice in X-Access-Notice
"""

import json
from typing import Optional

from fastapi import Depends, Request, status
from fastapi.responses import JSONResponse, RedirectResponse
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from discoverzim.domain.entities.session import SessionState
from discoverzim.domain.services.route_guard import GateDecision, GateOutcome
from discoverzim.services import RouteGuardRegistry, SessionManager

ACCESS_NOTICE_HEADER = "X-Access-Notice"

security = HTTPBearer(auto_error=False)


class AccessGateInterrupt(Exception):
    """Raised when the route guard decides against rendering."""

    def __init__(self, decision: GateDecision):
        super().__init__(decision.outcome.value)
        self.decision = decision


def gate_response(decision: GateDecision):
    """HTTP response for a guard decision that is not RENDER."""
    if decision.outcome is GateOutcome.LOADING:
        return JSONResponse(
            status_code=status.HTTP_202_ACCEPTED, content={"status": "loading"}
        )
    response = RedirectResponse(
        decision.redirect_to, status_code=status.HTTP_303_SEE_OTHER
    )
    if decision.notice is not None:
        response.headers[ACCESS_NOTICE_HEADER] = json.dumps(decision.notice.as_dict())
    return response


def _requested_location(request: Request) -> str:
    if request.url.query:
        return f"{request.url.path}?{request.url.query}"
    return request.url.path


async def get_session(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> SessionState:
    """Establish the caller's session for this request."""
    container = request.state.dishka_container
    manager = await container.get(SessionManager)
    token = credentials.credentials if credentials else None
    return await manager.refresh(token)


async def _gate(request: Request, session: SessionState, require_admin: bool) -> SessionState:
    registry = await request.state.dishka_container.get(RouteGuardRegistry)
    decision = registry.guard_for(session).evaluate(
        session, _requested_location(request), require_admin=require_admin
    )
    if not decision.allowed:
        raise AccessGateInterrupt(decision)
    return session


async def require_session(
    request: Request, session: SessionState = Depends(get_session)
) -> SessionState:
    return await _gate(request, session, require_admin=False)


async def require_admin(
    request: Request, session: SessionState = Depends(get_session)
) -> SessionState:
    return await _gate(request, session, require_admin=True)
