"""
Utility functions for the auth module: adapting Starlette requests.
"""

from typing import Any, Dict

from starlette.requests import HTTPConnection

from basic_gate.request import GateRequest


def gate_request_from(connection: HTTPConnection, **context: Any) -> GateRequest:
    """
    Build a GateRequest from a Starlette `Request`/`HTTPConnection`.

    Args:
        connection (HTTPConnection): Incoming request.
        **context: Extra host data for custom scope predicates. The ASGI
            scope is always available under "asgi_scope".

    Returns:
        GateRequest: Engine view of the request.
    """
    return GateRequest(
        method=connection.scope.get("method", "GET"),
        url=str(connection.url),
        path=connection.scope.get("path") or "/",
        headers=connection.headers.items(),
        context={"asgi_scope": connection.scope, **context},
    )


def request_state(connection: HTTPConnection) -> Dict[str, Any]:
    """
    Return the dict backing `request.state`.

    Engines write their realm here; handlers read it back as
    `request.state.<state_key>`.
    """
    return connection.scope.setdefault("state", {})
