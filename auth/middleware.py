"""
Pure ASGI Basic-Auth middleware.

Runs before routing, so an in-scope request for a route that does not exist
is still challenged (401) and only reaches the router's 404 once
authenticated. Each middleware instance answers only its own engine's
challenges; stacking several instances gives independent realms.

Websocket handshakes are gated like any other GET. A challenged handshake is
refused before it is accepted, with close code 1008 (policy violation).
Only lifespan events pass through unchecked.

Uses pure ASGI rather than BaseHTTPMiddleware to keep streaming responses
untouched.
"""

import logging

from starlette.requests import HTTPConnection
from starlette.types import ASGIApp, Receive, Scope, Send
from starlette.websockets import WebSocketClose

from basic_gate.engine.auth_engine import AuthEngine
from basic_gate.engine.decision import Challenge

from .service import to_response
from .utils import gate_request_from, request_state

log = logging.getLogger("basic_gate.middleware")

GATED_SCOPES = ("http", "websocket")
WS_POLICY_VIOLATION = 1008


class BasicAuthMiddleware:
    """Gate HTTP requests and websocket handshakes through an `AuthEngine`."""

    def __init__(self, app: ASGIApp, engine: AuthEngine) -> None:
        self.app = app
        self.engine = engine

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] not in GATED_SCOPES:
            await self.app(scope, receive, send)
            return

        connection = HTTPConnection(scope)
        decision = self.engine.evaluate(gate_request_from(connection), request_state(connection))

        if not isinstance(decision, Challenge):
            await self.app(scope, receive, send)
            return

        log.info(
            "Challenged %s %s (realm=%r, status=%d)",
            scope.get("method", scope["type"].upper()),
            scope.get("path", "-"),
            self.engine.realm,
            decision.status,
        )
        if scope["type"] == "websocket":
            await WebSocketClose(code=WS_POLICY_VIOLATION)(scope, receive, send)
            return
        await to_response(decision)(scope, receive, send)
