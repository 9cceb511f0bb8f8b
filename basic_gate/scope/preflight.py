"""
CORS preflight detection.

A heuristic, not the full CORS algorithm: it only has to recognize browser
probes well enough to let them through without credentials when the engine
is configured to do so.
"""

from ..request import GateRequest

# The second name is the one browsers actually send
REQUEST_METHOD_HEADERS = ("Cross-Origin-Request-Method", "Access-Control-Request-Method")


def is_preflight(request: GateRequest) -> bool:
    """True for `OPTIONS` requests carrying `Origin` and a requested-method header."""
    return (
        request.method == "OPTIONS"
        and request.has_header("Origin")
        and any(request.has_header(h) for h in REQUEST_METHOD_HEADERS)
    )
