from discoverzim.services.route_guards import RouteGuardRegistry
from discoverzim.services.session_manager import SessionManager

__all__ = ["RouteGuardRegistry", "SessionManager"]
