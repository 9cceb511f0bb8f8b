"""
Request applicability: which requests are subject to authentication.
"""

from .preflight import is_preflight
from .scopes import BaseScope, PredicateScope, PrefixScope, PrefixSetScope, build_scope

__all__ = [
    "BaseScope",
    "PredicateScope",
    "PrefixScope",
    "PrefixSetScope",
    "build_scope",
    "is_preflight",
]
