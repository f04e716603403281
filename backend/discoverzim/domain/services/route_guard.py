"""
Route Guard - Decides whether a navigation target may be rendered.

Outcomes per session phase:
    resolving                  -> LOADING  (placeholder, never a premature redirect)
    anonymous                  -> SIGN_IN  (redirect, requested location preserved)
    authenticated, admin page  -> LANDING  (redirect + one denial notice)
    otherwise                  -> RENDER

The denial notice fires once per transition into "authenticated-plain while
targeting a privileged page". Re-evaluating the same denial does not repeat
it; any other outcome in between re-arms it.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional
from urllib.parse import urlencode

from discoverzim.domain.entities.session import SessionPhase, SessionState
from discoverzim.domain.ports.notifier import AccessNotice, Notifier

ADMIN_DENIED_NOTICE = AccessNotice(
    title="Access denied",
    description="You need administrator privileges to view this page.",
    variant="destructive",
)


class GateOutcome(str, Enum):
    LOADING = "loading"
    RENDER = "render"
    SIGN_IN = "sign_in"
    LANDING = "landing"


@dataclass(frozen=True)
class GateDecision:
    outcome: GateOutcome
    redirect_to: Optional[str] = None
    return_to: Optional[str] = None
    notice: Optional[AccessNotice] = None

    @property
    def allowed(self) -> bool:
        return self.outcome is GateOutcome.RENDER


class RouteGuard:
    def __init__(
        self,
        notifier: Optional[Notifier] = None,
        sign_in_path: str = "/auth",
        landing_path: str = "/dashboard",
    ):
        self._notifier = notifier
        self._sign_in_path = sign_in_path
        self._landing_path = landing_path
        # Location whose denial has already been announced
        self._denied_location: Optional[str] = None

    def evaluate(
        self, session: SessionState, location: str, require_admin: bool = False
    ) -> GateDecision:
        phase = session.phase

        if phase is SessionPhase.RESOLVING:
            self._denied_location = None
            return GateDecision(GateOutcome.LOADING)

        if phase is SessionPhase.ANONYMOUS:
            self._denied_location = None
            return GateDecision(
                GateOutcome.SIGN_IN,
                redirect_to=self.sign_in_url(location),
                return_to=location,
            )

        if require_admin and phase is SessionPhase.AUTHENTICATED:
            notice = None
            if self._denied_location != location:
                self._denied_location = location
                notice = ADMIN_DENIED_NOTICE
                if self._notifier is not None:
                    self._notifier(notice)
            return GateDecision(
                GateOutcome.LANDING,
                redirect_to=self._landing_path,
                return_to=location,
                notice=notice,
            )

        self._denied_location = None
        return GateDecision(GateOutcome.RENDER)

    def sign_in_url(self, location: str) -> str:
        return f"{self._sign_in_path}?{urlencode({'next': location})}"
