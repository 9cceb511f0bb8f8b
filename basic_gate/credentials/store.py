"""
Immutable credential store.

Responsibilities:
    - Index credentials by username for O(1) lookup
    - Resolve duplicate usernames (last one wins)
    - Stay read-only after construction so it can be shared by any number
      of concurrent requests without locking

Design:
    The mapping is built in a single pass and then wrapped in a
    MappingProxyType; there are no mutators.

LLM Prompt Example:
    "Explain why an immutable, pre-indexed credential map is safe to share
    across threads in a WSGI/ASGI server without locks."
"""

from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Optional

from .base import Credential


class CredentialStore:
    def __init__(self, credentials: Iterable[Credential] = ()):
        """
        Build the username index.

        Internal schema:
            self._by_username = { username: Credential }
        """
        index: Dict[str, Credential] = {}
        for cred in credentials:
            index[cred.username] = cred
        self._by_username = MappingProxyType(index)

    def find(self, username: str) -> Optional[Credential]:
        """
        Look up a credential by username.

        Returns:
            Optional[Credential]: The stored credential or None if unknown.
        """
        return self._by_username.get(username)

    def usernames(self):
        return self._by_username.keys()

    def __contains__(self, username: object) -> bool:
        return username in self._by_username

    def __iter__(self) -> Iterator[str]:
        return iter(self._by_username)

    def __len__(self) -> int:
        return len(self._by_username)

    def __repr__(self) -> str:
        return f"CredentialStore(users={len(self)})"
