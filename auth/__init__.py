"""
Auth package for FastAPI applications.

Wires the framework-neutral `basic_gate.AuthEngine` into FastAPI/Starlette:
a pure ASGI middleware that gates requests before routing, and a route-level
dependency for protecting individual endpoints.
"""

from .dependencies import require_basic_auth
from .middleware import BasicAuthMiddleware

__all__ = ["BasicAuthMiddleware", "require_basic_auth"]
