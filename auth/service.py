"""
Decision -> HTTP translation.

The engine returns decisions; this module is the only place that turns a
`Challenge` into something FastAPI can send. Every failure cause produces the
same response shape, so clients cannot tell an unknown user from a wrong
password.
"""

from typing import Optional

from fastapi import HTTPException
from fastapi.responses import PlainTextResponse, Response

from basic_gate.engine.decision import Challenge, Decision


def to_response(decision: Decision) -> Optional[Response]:
    """
    Map a decision to a response.

    Returns:
        Optional[Response]: A plain-text challenge response, or None when the
        request should continue to the next handler.
    """
    if not isinstance(decision, Challenge):
        return None
    return PlainTextResponse(
        decision.message,
        status_code=decision.status,
        headers=decision.headers,
    )


def as_http_exception(challenge: Challenge) -> HTTPException:
    """
    Wrap a challenge for route-level dependencies.

    Note:
        FastAPI renders HTTPException bodies as JSON ({"detail": ...});
        status and WWW-Authenticate header are identical to `to_response`.
    """
    return HTTPException(
        status_code=challenge.status,
        detail=challenge.message,
        headers=challenge.headers,
    )
