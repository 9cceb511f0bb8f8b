"""
Credential source factory
=========================

Centralizes how a credential source spec is turned into a source object and
then into a `CredentialStore`, so the engine stays ignorant of where
credentials live.

Accepted specs
--------------
- None                        -> EnvSource("BASIC_AUTH_CREDENTIALS")
- list / tuple of records     -> ListSource
- {"file": path}              -> FileSource
- {"env": name}               -> EnvSource
- BaseCredentialSource        -> used as is

Anything else raises UnknownCredentialSource. The store is loaded eagerly:
an unreadable file aborts setup.
"""

import logging
from typing import Any, Mapping

from ..errors import UnknownCredentialSource
from .base import BaseCredentialSource
from .sources import DEFAULT_CREDENTIALS_ENV, EnvSource, FileSource, ListSource
from .store import CredentialStore

log = logging.getLogger("basic_gate.credentials")


def get_source(spec: Any = None) -> BaseCredentialSource:
    """
    Return a credential source for the given spec.

    Raises:
        UnknownCredentialSource: If the spec shape is not recognized.
    """
    if spec is None:
        return EnvSource(DEFAULT_CREDENTIALS_ENV)

    if isinstance(spec, BaseCredentialSource):
        return spec

    if isinstance(spec, Mapping):
        keys = set(spec)
        if keys == {"file"}:
            return FileSource(spec["file"])
        if keys == {"env"}:
            return EnvSource(spec["env"])
        raise UnknownCredentialSource(
            f"Credential source mapping must have exactly one of 'file' or 'env', got {sorted(keys)!r}"
        )

    if isinstance(spec, (list, tuple)):
        return ListSource(spec)

    raise UnknownCredentialSource(f"Unknown credential source: {type(spec).__name__}")


def load_store(spec: Any = None) -> CredentialStore:
    """Resolve `spec` and load it into an immutable store."""
    source = get_source(spec)
    store = CredentialStore(source.load())
    log.info("Loaded %d credential(s) from %s", len(store), source.describe())
    if source.skipped:
        log.warning("Skipped %d malformed credential entries in %s", source.skipped, source.describe())
    return store
