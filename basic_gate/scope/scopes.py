"""
Scope variants for basic_gate.

Provided scopes:
- PrefixScope: request path starts with a single prefix
- PrefixSetScope: request path starts with any of several prefixes
- PredicateScope: custom callable deciding from the whole request

A scope spec is resolved once, at setup, by `build_scope`. The request path
then only ever calls `scope(request) -> bool`; no type inspection happens
per request.

Spec shapes:
- None                          -> PrefixScope("/") (everything)
- "str"                         -> PrefixScope
- list/tuple/set/frozenset[str] -> PrefixSetScope
- callable                      -> PredicateScope
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Tuple

from ..errors import UnknownScopeSpec
from ..request import GateRequest

ScopeFn = Callable[[GateRequest], bool]


class BaseScope(ABC):
    """Abstract base for scope predicates."""

    @abstractmethod
    def __call__(self, request: GateRequest) -> bool:
        """Return True when `request` is subject to authentication."""
        raise NotImplementedError


@dataclass(frozen=True)
class PrefixScope(BaseScope):
    prefix: str

    def __call__(self, request: GateRequest) -> bool:
        return request.path.startswith(self.prefix)


@dataclass(frozen=True)
class PrefixSetScope(BaseScope):
    """Logical OR over several path prefixes."""
    prefixes: Tuple[str, ...]

    def __call__(self, request: GateRequest) -> bool:
        # str.startswith accepts a tuple and checks every member
        return request.path.startswith(self.prefixes)


@dataclass(frozen=True)
class PredicateScope(BaseScope):
    """Delegates to a host-supplied callable; `request.context` carries host data."""
    predicate: ScopeFn

    def __call__(self, request: GateRequest) -> bool:
        return bool(self.predicate(request))


def build_scope(spec: Any = None) -> BaseScope:
    """
    Resolve a scope spec into a scope object.

    Raises:
        UnknownScopeSpec: If the shape is not recognized, or a collection
            is empty or holds non-string members.
    """
    if spec is None:
        return PrefixScope("/")
    if isinstance(spec, BaseScope):
        return spec
    if isinstance(spec, str):
        return PrefixScope(spec)
    if isinstance(spec, (list, tuple, set, frozenset)):
        if not spec:
            raise UnknownScopeSpec("Scope prefix collection must not be empty")
        if not all(isinstance(p, str) for p in spec):
            raise UnknownScopeSpec("Scope prefix collection must contain only strings")
        return PrefixSetScope(tuple(sorted(set(spec))))
    if callable(spec):
        return PredicateScope(spec)
    raise UnknownScopeSpec(f"Unhandled scope type: {type(spec).__name__}")
