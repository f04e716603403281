"""
Route Guard Registry - One RouteGuard per live session.

A guard remembers which denial it already announced, so it has to outlive a
single request. Guards are keyed by session id and dropped when the session
signs out, when its access token expires, or when the registry is full and
the guard is the least recently used one.
"""

import logging
import threading
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Callable, Optional

from discoverzim.domain.entities.session import SessionState
from discoverzim.domain.ports.notifier import Notifier
from discoverzim.domain.services.route_guard import RouteGuard
from discoverzim.services.session_manager import SessionManager

logger = logging.getLogger(__name__)

ANONYMOUS_KEY = "anonymous"
DEFAULT_MAX_GUARDS = 10_000


@dataclass
class _Entry:
    guard: RouteGuard
    expires_at: Optional[float] = None


class RouteGuardRegistry:
    """
    Args:
        sign_in_path: Where anonymous callers are sent
        landing_path: Where callers without the admin role are sent
        notifier: Receives denial notices (optional)
        max_guards: Guards kept at most; the least recently used goes first
        clock: Current time in epoch seconds (time.time by default)
    """

    def __init__(
        self,
        sign_in_path: str = "/auth",
        landing_path: str = "/dashboard",
        notifier: Optional[Notifier] = None,
        max_guards: int = DEFAULT_MAX_GUARDS,
        clock: Callable[[], float] = time.time,
    ):
        if max_guards < 1:
            raise ValueError("max_guards must be at least 1")
        self._sign_in_path = sign_in_path
        self._landing_path = landing_path
        self._notifier = notifier
        self._max_guards = max_guards
        self._clock = clock
        self._guards: "OrderedDict[str, _Entry]" = OrderedDict()
        self._lock = threading.Lock()

    def guard_for(self, session: SessionState) -> RouteGuard:
        key = session.session_id or ANONYMOUS_KEY
        now = self._clock()
        with self._lock:
            entry = self._guards.get(key)
            if entry is not None and self._expired(entry, now):
                del self._guards[key]
                entry = None
            if entry is None:
                self._evict_expired(now)
                entry = _Entry(
                    RouteGuard(
                        notifier=self._notifier,
                        sign_in_path=self._sign_in_path,
                        landing_path=self._landing_path,
                    )
                )
                self._guards[key] = entry
                while len(self._guards) > self._max_guards:
                    evicted, _ = self._guards.popitem(last=False)
                    logger.debug(f"Evicted route guard for session {evicted}")
            else:
                self._guards.move_to_end(key)
            # A refreshed token keeps the session and moves its expiry
            if session.expires_at is not None:
                entry.expires_at = session.expires_at
            return entry.guard

    def _expired(self, entry: _Entry, now: float) -> bool:
        return entry.expires_at is not None and entry.expires_at <= now

    def _evict_expired(self, now: float) -> None:
        expired = [key for key, entry in self._guards.items() if self._expired(entry, now)]
        for key in expired:
            del self._guards[key]
        if expired:
            logger.debug(f"Dropped {len(expired)} route guard(s) of expired sessions")

    def release(self, session_id: Optional[str]) -> None:
        if not session_id:
            return
        with self._lock:
            if self._guards.pop(session_id, None) is not None:
                logger.debug(f"Released route guard for session {session_id}")

    def track(self, manager: SessionManager) -> None:
        """Release the guard of ``manager``'s session once it turns anonymous."""
        current = {"session_id": manager.state.session_id}

        def on_change(state: SessionState) -> None:
            if state.is_loading:
                return
            if state.user is None:
                self.release(current["session_id"])
            current["session_id"] = state.session_id

        manager.subscribe(on_change)

    def __len__(self) -> int:
        return len(self._guards)
