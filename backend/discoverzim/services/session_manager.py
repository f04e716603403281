"""
Session Manager - Owns the lifecycle of one client session.

Lifecycle:
    establish(token) -> resolving -> authenticated | privileged | anonymous
    refresh(token)   -> re-establish only when the token changed
    sign_out()       -> anonymous

Tokens are the hosted auth service's access tokens (HS256 JWTs). The user's
role is not in the token; it is read from the user's profile row, and only
the ADMIN role makes a session privileged.

Every published state reaches every subscriber, in order.
"""

import logging
from typing import Callable, Optional

import jwt

from discoverzim.domain.entities.session import AuthUser, SessionState
from discoverzim.infrastructure.persistence.profile_repository import (
    ADMIN_ROLE,
    ProfileRepository,
)

logger = logging.getLogger(__name__)

SessionListener = Callable[[SessionState], None]


class SessionManager:
    def __init__(
        self,
        profiles: ProfileRepository,
        jwt_secret: str,
        audience: str = "authenticated",
    ):
        self._profiles = profiles
        self._jwt_secret = jwt_secret
        self._audience = audience
        self._listeners: list[SessionListener] = []
        self._token: Optional[str] = None
        self.state = SessionState.resolving()

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Register a listener; returns a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _publish(self, state: SessionState) -> None:
        self.state = state
        for listener in list(self._listeners):
            listener(state)

    def _decode(self, token: str) -> Optional[dict]:
        try:
            return jwt.decode(
                token,
                self._jwt_secret,
                algorithms=["HS256"],
                audience=self._audience,
                options={"require": ["exp", "sub"]},
            )
        except jwt.ExpiredSignatureError:
            logger.info("Session token has expired")
        except jwt.InvalidTokenError as e:
            logger.warning(f"Invalid session token: {e}")
        return None

    async def establish(self, token: Optional[str]) -> SessionState:
        self._token = token
        self._publish(SessionState.resolving())

        claims = self._decode(token) if token else None
        if not claims:
            self._publish(SessionState.anonymous())
            return self.state

        user = AuthUser(id=claims["sub"], email=claims.get("email"))
        role = await self._profiles.get_user_role(user.id)
        self._publish(
            SessionState(
                user=user,
                is_admin=role == ADMIN_ROLE,
                session_id=claims.get("session_id") or user.id,
                role=role,
                expires_at=claims["exp"],
            )
        )
        logger.debug(f"Session established for user {user.id} (role={role})")
        return self.state

    async def refresh(self, token: Optional[str]) -> SessionState:
        if token == self._token and not self.state.is_loading:
            return self.state
        return await self.establish(token)

    def sign_out(self) -> SessionState:
        if self.state.user is not None:
            logger.info(f"Session signed out for user {self.state.user.id}")
        self._token = None
        self._publish(SessionState.anonymous())
        return self.state
