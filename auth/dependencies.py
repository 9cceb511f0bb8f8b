"""
FastAPI dependency functions for authentication.

These can be used in routes with Depends() to protect individual endpoints
instead of (or in addition to) the middleware.
"""

from typing import Callable, Optional

from fastapi import Request

from basic_gate.engine.auth_engine import AuthEngine
from basic_gate.engine.decision import Authenticated, Challenge

from .service import as_http_exception
from .utils import gate_request_from, request_state


def require_basic_auth(engine: AuthEngine) -> Callable[[Request], Optional[str]]:
    """
    Build a dependency that evaluates `engine` for the current request.

    Usage:
        guard = require_basic_auth(AuthEngine(realm="Reports"))

        @app.get("/reports")
        def reports(realm: Optional[str] = Depends(guard)): ...

    Returns:
        Callable: Dependency returning the realm on success, or None when the
        request is outside the engine's scope.

    Raises:
        HTTPException: With the challenge status and WWW-Authenticate header.
    """

    def dependency(request: Request) -> Optional[str]:
        decision = engine.evaluate(gate_request_from(request), request_state(request))
        if isinstance(decision, Challenge):
            raise as_http_exception(decision)
        if isinstance(decision, Authenticated):
            return decision.realm
        return None

    return dependency
