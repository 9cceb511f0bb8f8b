"""
basic_gate package initializer.

HTTP Basic Authentication (RFC 7617) request-gating engine, independent of
any web framework. See `auth` for the FastAPI/Starlette integration.
"""

from . import credentials
from . import engine
from . import scope
from .codec import decode_basic, encode_basic
from .credentials import Credential, CredentialStore, load_store
from .engine import AuthEngine, AuthOptions, Authenticated, Challenge, Decision, NotApplicable
from .errors import ConfigError, InvalidOption, SourceUnreadable, UnknownCredentialSource, UnknownScopeSpec
from .matching import timing_safe_equal
from .request import GateRequest

__all__ = [
    "credentials",
    "engine",
    "scope",
    "AuthEngine",
    "AuthOptions",
    "Authenticated",
    "Challenge",
    "ConfigError",
    "Credential",
    "CredentialStore",
    "Decision",
    "GateRequest",
    "InvalidOption",
    "NotApplicable",
    "SourceUnreadable",
    "UnknownCredentialSource",
    "UnknownScopeSpec",
    "decode_basic",
    "encode_basic",
    "load_store",
    "timing_safe_equal",
]
