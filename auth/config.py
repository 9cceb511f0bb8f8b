"""
Configuration for the auth module: which engines an app mounts.

BASIC_GATE_PREFIXES lists env prefixes, one engine per prefix, e.g.

    BASIC_GATE_PREFIXES="ADMIN_AUTH_,USER_AUTH_"
    ADMIN_AUTH_REALM=Admin   ADMIN_AUTH_SCOPE=/admin
    USER_AUTH_REALM=User     USER_AUTH_SCOPE=/user

Each prefix is resolved by `basic_gate.config.load_options`. The default is a
single engine configured from BASIC_AUTH_* variables.
"""

import os
from typing import List

from basic_gate.engine.auth_engine import AuthEngine

DEFAULT_PREFIXES = "BASIC_AUTH_"


def load_engines() -> List[AuthEngine]:
    raw = os.getenv("BASIC_GATE_PREFIXES", DEFAULT_PREFIXES)
    prefixes = [p.strip() for p in raw.split(",") if p.strip()] or [DEFAULT_PREFIXES]
    return [AuthEngine.from_env(prefix) for prefix in prefixes]
