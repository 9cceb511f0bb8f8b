"""
Runtime configuration for basic_gate
====================================

Reads environment variables (only here) and turns them into `AuthOptions`.
Env is read **at call time**, never at import time, so tests can monkeypatch
it freely. Avoid reading env vars anywhere else; call `load_options()`.

Variables (default prefix BASIC_AUTH_)
--------------------------------------
- BASIC_AUTH_HEADER           : header to inspect (default "Authorization")
- BASIC_AUTH_REALM            : realm (default "Secure Area")
- BASIC_AUTH_STATUS           : challenge status code (default 401)
- BASIC_AUTH_MESSAGE          : challenge body (default "Unauthorized")
- BASIC_AUTH_SCOPE            : comma-separated path prefixes (default "/")
- BASIC_AUTH_SKIP_PREFLIGHT   : let CORS preflights through (default false)
- BASIC_AUTH_ENABLED          : master switch (default true)
- BASIC_AUTH_STATE_KEY        : request-state slot for the realm (default "auth_realm")

Credential source (first match wins)
------------------------------------
- BASIC_AUTH_CREDENTIALS_FILE : path to a `user:pass` per line file
- BASIC_AUTH_CREDENTIALS_ENV  : name of the variable holding `user:pass;...`
                                (default "BASIC_AUTH_CREDENTIALS")
"""

import os
from typing import Any, Dict, Optional

from .credentials.sources import DEFAULT_CREDENTIALS_ENV
from .engine.options import (
    DEFAULT_HEADER,
    DEFAULT_MESSAGE,
    DEFAULT_REALM,
    DEFAULT_STATE_KEY,
    DEFAULT_STATUS,
    AuthOptions,
)
from .errors import InvalidOption

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _get(name: str) -> Optional[str]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    return raw.strip()


def _get_int(name: str, default: int) -> int:
    raw = _get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise InvalidOption(f"{name} must be an integer, got {raw!r}") from e


def _get_bool(name: str, default: bool) -> bool:
    raw = _get(name)
    if raw is None:
        return default
    value = raw.lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise InvalidOption(f"{name} must be a boolean, got {raw!r}")


def _get_scope(name: str):
    raw = _get(name)
    if raw is None:
        return None
    prefixes = [p.strip() for p in raw.split(",") if p.strip()]
    if len(prefixes) == 1:
        return prefixes[0]
    return prefixes


def _get_credentials(prefix: str) -> Dict[str, Any]:
    path = _get(f"{prefix}CREDENTIALS_FILE")
    if path is not None:
        return {"file": path}
    return {"env": _get(f"{prefix}CREDENTIALS_ENV") or DEFAULT_CREDENTIALS_ENV}


def load_options(prefix: str = "BASIC_AUTH_") -> AuthOptions:
    """
    Build `AuthOptions` from the environment.

    Args:
        prefix (str): Variable prefix; use a different one per engine when an
            app mounts several realms (e.g. "ADMIN_AUTH_").

    Raises:
        InvalidOption: If a value cannot be parsed or is out of range.
    """
    return AuthOptions(
        header=_get(f"{prefix}HEADER") or DEFAULT_HEADER,
        realm=_get(f"{prefix}REALM") or DEFAULT_REALM,
        unauthorized_status=_get_int(f"{prefix}STATUS", DEFAULT_STATUS),
        unauthorized_message=_get(f"{prefix}MESSAGE") or DEFAULT_MESSAGE,
        scope=_get_scope(f"{prefix}SCOPE"),
        skip_cors_preflight=_get_bool(f"{prefix}SKIP_PREFLIGHT", False),
        enabled=_get_bool(f"{prefix}ENABLED", True),
        credentials=_get_credentials(prefix),
        state_key=_get(f"{prefix}STATE_KEY") or DEFAULT_STATE_KEY,
    )
