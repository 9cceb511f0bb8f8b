"""
Credential loading and lookup.
"""

from .base import BaseCredentialSource, Credential
from .source_factory import get_source, load_store
from .sources import EnvSource, FileSource, ListSource
from .store import CredentialStore

__all__ = [
    "BaseCredentialSource",
    "Credential",
    "CredentialStore",
    "EnvSource",
    "FileSource",
    "ListSource",
    "get_source",
    "load_store",
]
