"""
Base credential-source interface for basic_gate.

Purpose:
    Define a small, stable contract that every credential source (inline
    list, file, environment variable) implements, so the store and the
    engine never care where credentials come from.

Testing & Coverage:
    Abstract methods are not executed directly; they are annotated with
    `# pragma: no cover` and exercised through a probe subclass in tests.

LLM Prompt Example:
    "Show how a narrow source interface lets you add a Vault- or
    DB-backed credential source without touching the engine."
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass(frozen=True)
class Credential:
    """A username/password pair, compared byte for byte as given."""

    username: str
    password: str

    def __repr__(self) -> str:
        return f"Credential(username={self.username!r}, password='***')"


def parse_entry(entry: str) -> Optional[Credential]:
    """
    Parse a single `username:password` entry.

    Returns:
        Optional[Credential]: None when either part is missing, so callers
        can skip malformed entries without raising.
    """
    username, sep, password = entry.strip().partition(":")
    if not sep or not username or not password:
        return None
    return Credential(username=username, password=password)


class BaseCredentialSource(ABC):
    """Abstract base class for credential sources."""

    #: Number of malformed entries skipped by the last `load()` call.
    skipped: int = 0

    @abstractmethod  # pragma: no cover
    def load(self) -> Iterator[Credential]:
        """
        Yield credentials in source order.

        Raises:
            SourceUnreadable: If the backing resource cannot be read.

        LLM Prompt Example:
            "Explain why a credential source should fail fast at startup
            rather than degrade to an empty user list."
        """
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def describe(self) -> str:
        """Human-readable origin for logs (never includes secrets)."""
        raise NotImplementedError
