"""
Unit tests for CredentialStore.

Covers:
    - lookup (found & not found)
    - last duplicate wins
    - read-only mapping after construction
    - container protocol (len, in, iter)
"""

import pytest

from basic_gate.credentials.base import Credential
from basic_gate.credentials.store import CredentialStore


def test_find_known_and_unknown(store):
    assert store.find("admin") == Credential("admin", "admin")
    assert store.find("nobody") is None


def test_last_duplicate_wins():
    store = CredentialStore(
        [
            Credential("alice", "first"),
            Credential("bob", "1234"),
            Credential("alice", "second"),
        ]
    )
    assert len(store) == 2
    assert store.find("alice").password == "second"


def test_empty_store():
    store = CredentialStore()
    assert len(store) == 0
    assert store.find("admin") is None
    assert "admin" not in store


def test_container_protocol(store):
    assert "admin" in store
    assert list(store) == ["admin"]
    assert list(store.usernames()) == ["admin"]


def test_store_is_read_only(store):
    with pytest.raises(TypeError):
        store._by_username["eve"] = Credential("eve", "x")  # type: ignore[index]


def test_store_is_detached_from_input_list():
    records = [Credential("alice", "pw")]
    store = CredentialStore(records)
    records.append(Credential("mallory", "pw"))
    assert "mallory" not in store


def test_repr_hides_passwords(store):
    assert "admin" not in repr(store)
    assert "password='***'" in repr(store.find("admin"))
