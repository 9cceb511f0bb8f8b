"""
Framework-neutral request abstraction.

The engine only needs three things from a request: its method, its URL
(for the path) and case-insensitive header lookup. Hosts adapt their own
request objects into a `GateRequest` (see `auth.utils.gate_request_from`
for Starlette/FastAPI).

`context` is a free-form mapping the host may attach; custom scope
predicates receive it through the request.
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional, Tuple, Union
from urllib.parse import urlsplit

HeaderItems = Union[Mapping[str, str], Iterable[Tuple[str, str]]]


def _lower_headers(headers: Optional[HeaderItems]) -> Mapping[str, str]:
    if headers is None:
        return {}
    items = headers.items() if isinstance(headers, Mapping) else headers
    # First occurrence wins, matching how most servers expose duplicate headers
    out = {}
    for name, value in items:
        out.setdefault(name.lower(), value)
    return out


@dataclass(frozen=True)
class GateRequest:
    """Minimal view of an HTTP request as seen by the auth engine."""

    method: str
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    context: Mapping[str, Any] = field(default_factory=dict)
    #: Decoded request path. When omitted it is parsed from `url`; hosts that
    #: already hold the decoded path (ASGI `scope["path"]`) should pass it, since
    #: a decoded "%3F" or "%23" would otherwise be re-read as a delimiter.
    path: str = ""

    def __post_init__(self):
        object.__setattr__(self, "method", self.method.upper())
        object.__setattr__(self, "headers", _lower_headers(self.headers))
        if not self.path:
            object.__setattr__(self, "path", urlsplit(self.url).path or "/")

    def header(self, name: str) -> Optional[str]:
        """Case-insensitive header lookup. Returns None when absent."""
        return self.headers.get(name.lower())

    def has_header(self, name: str) -> bool:
        return name.lower() in self.headers
