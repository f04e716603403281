"""
DOMAIN SERVICES - Pure logic with no I/O

- RouteGuard: render / redirect decisions for navigation targets
- ProcessTracker: step and percentage state for multi-step workflows
"""

from discoverzim.domain.services.route_guard import (
    ADMIN_DENIED_NOTICE,
    GateDecision,
    GateOutcome,
    RouteGuard,
)
from discoverzim.domain.services.process_tracker import ProcessSnapshot, ProcessTracker

__all__ = [
    "ADMIN_DENIED_NOTICE",
    "GateDecision",
    "GateOutcome",
    "RouteGuard",
    "ProcessSnapshot",
    "ProcessTracker",
]
