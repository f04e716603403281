from discoverzim.presentation.dependencies.auth import (
    AccessGateInterrupt,
    get_session,
    require_admin,
    require_session,
)

__all__ = ["AccessGateInterrupt", "get_session", "require_admin", "require_session"]
