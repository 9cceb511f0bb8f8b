"""
Request-gating engine: options, decisions and the orchestrator.
"""

from .auth_engine import AuthEngine
from .decision import Authenticated, Challenge, Decision, NotApplicable
from .options import AuthOptions

__all__ = [
    "AuthEngine",
    "AuthOptions",
    "Authenticated",
    "Challenge",
    "Decision",
    "NotApplicable",
]
