"""
Main API module for the basic-gate demo service.

Responsibilities:
    - Mount one BasicAuthMiddleware per configured AuthEngine
    - Expose public, protected and health endpoints
    - Show how handlers read the realm each engine published

Architecture:
    - App Factory pattern (create_app) for test isolation and DI.
    - Engines come from the environment by default (auth.config.load_engines)
      and can be injected directly in tests.
    - Authentication runs as middleware, before routing.

LLM Prompt Example:
    "Explain how to structure a FastAPI service with an application factory
    where independent Basic Auth realms guard different path prefixes."
"""

import logging
from typing import Optional, Sequence

from fastapi import FastAPI, Request, WebSocket
from fastapi.responses import PlainTextResponse
from starlette.requests import HTTPConnection

from auth.config import load_engines
from auth.middleware import BasicAuthMiddleware
from auth.schemas import HealthOut, MessageOut, PrivateOut
from auth.utils import request_state
from basic_gate.engine.auth_engine import AuthEngine


def create_app(engines: Optional[Sequence[AuthEngine]] = None) -> FastAPI:
    """
    Factory function to build and configure a new FastAPI app instance.

    Args:
        engines (Sequence[AuthEngine], optional): Engines to mount. When omitted
            they are built from the environment; a bad credential file or
            scope raises here, before the app can serve anything.

    Returns:
        FastAPI: A configured application instance.
    """
    app = FastAPI(
        title="Basic Gate",
        description="HTTP Basic Authentication gate with independent realms",
        docs_url="/docs",
    )
    log = logging.getLogger("basic_gate")

    # basic console logging (optional)
    if not logging.getLogger().handlers:
        logging.basicConfig(level=logging.INFO)

    if engines is None:
        engines = load_engines()
    engines = list(engines)

    # add_middleware wraps outermost-last; reverse so the first engine runs first
    for engine in reversed(engines):
        app.add_middleware(BasicAuthMiddleware, engine=engine)
    log.info("Basic auth engines: %s", ", ".join(repr(e) for e in engines) or "none")

    state_keys = sorted({e.state_key for e in engines})

    def _published_realms(connection: HTTPConnection):
        state = request_state(connection)
        return {key: state[key] for key in state_keys if key in state}

    @app.get("/health_gate", response_model=HealthOut)
    def health_gate():
        return {"status": "ok"}

    @app.get("/public", response_model=MessageOut)
    def public():
        return {"message": "public"}

    @app.get("/private/{item:path}", response_model=PrivateOut)
    def private(item: str, request: Request):
        """
        Protected resource; returns the realms that authenticated the request.

        Notes:
            - With several engines on overlapping scopes each publishes under
              its own state_key, so all of them show up here.
        """
        return {"item": item, "realms": _published_realms(request)}

    @app.options("/private/{item:path}")
    def private_preflight(item: str):
        return PlainTextResponse("public for CORS preflight requests")

    @app.websocket("/private/ws")
    async def private_ws(websocket: WebSocket):
        """Protected websocket; the handshake is gated by the middleware."""
        await websocket.accept()
        await websocket.send_json({"realms": _published_realms(websocket)})
        await websocket.close()

    return app


# `uvicorn main:app` and `from main import app` continue to work.
app = create_app()
