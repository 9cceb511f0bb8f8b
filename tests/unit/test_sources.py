"""
Unit tests for credential sources and the source factory.

Covers:
    - file parsing (blank lines, malformed lines, colons in passwords)
    - unreadable files fail fast
    - env parsing, unset variable yields an empty store
    - inline records in several shapes
    - spec dispatch in get_source and logging in load_store
"""

import logging
from pathlib import Path

import pytest

from basic_gate.credentials.base import Credential, parse_entry
from basic_gate.credentials.source_factory import get_source, load_store
from basic_gate.credentials.sources import EnvSource, FileSource, ListSource
from basic_gate.errors import ConfigError, SourceUnreadable, UnknownCredentialSource

FIXTURES = Path(__file__).resolve().parent.parent / "fixtures"


@pytest.mark.parametrize(
    "entry, expected",
    [
        ("admin:admin", Credential("admin", "admin")),
        ("  admin:admin  ", Credential("admin", "admin")),
        ("ops:a:b", Credential("ops", "a:b")),
        ("justauser", None),
        ("user:", None),
        (":password", None),
        ("", None),
    ],
)
def test_parse_entry(entry, expected):
    assert parse_entry(entry) == expected


def test_file_source_skips_malformed_lines():
    """A credential file with `admin:admin` and `justauser` only yields admin."""
    source = FileSource(FIXTURES / "credentials")
    store = load_store(source)
    assert sorted(store) == ["admin", "ops"]
    assert store.find("ops").password == "s3cr3t:with:colons"
    assert source.skipped == 1


def test_file_source_via_mapping_spec(tmp_path):
    path = tmp_path / "creds"
    path.write_text("admin:admin\njustauser\n", encoding="utf-8")
    store = load_store({"file": str(path)})
    assert list(store) == ["admin"]


def test_file_source_handles_crlf(tmp_path):
    path = tmp_path / "creds"
    path.write_bytes(b"alice:wonder\r\nbob:builder\r\n")
    store = load_store({"file": path})
    assert store.find("alice").password == "wonder"
    assert store.find("bob").password == "builder"


def test_missing_file_is_fatal(tmp_path):
    missing = tmp_path / "does-not-exist"
    with pytest.raises(SourceUnreadable) as exc:
        load_store({"file": str(missing)})
    assert exc.value.path == str(missing)
    assert isinstance(exc.value, ConfigError)


def test_non_utf8_file_is_fatal(tmp_path):
    path = tmp_path / "latin1"
    path.write_bytes(b"j\xf6rg:pw\n")
    with pytest.raises(SourceUnreadable):
        load_store({"file": path})


def test_env_source(monkeypatch):
    monkeypatch.setenv("MY_CREDENTIALS", "admin:admin;bob:1234;broken;;")
    source = EnvSource("MY_CREDENTIALS")
    store = load_store(source)
    assert sorted(store) == ["admin", "bob"]
    assert source.skipped == 1


def test_env_source_unset_yields_empty_store(monkeypatch):
    monkeypatch.delenv("NOT_THERE", raising=False)
    store = load_store({"env": "NOT_THERE"})
    assert len(store) == 0


def test_default_source_is_basic_auth_credentials(monkeypatch):
    monkeypatch.setenv("BASIC_AUTH_CREDENTIALS", "admin:admin")
    source = get_source(None)
    assert isinstance(source, EnvSource)
    assert source.name == "BASIC_AUTH_CREDENTIALS"
    assert list(load_store(None)) == ["admin"]


def test_list_source_accepts_records_pairs_and_mappings():
    source = ListSource(
        [
            Credential("a", "1"),
            ("b", "2"),
            {"username": "c", "password": "3"},
        ]
    )
    store = load_store(source)
    assert [store.find(u).password for u in ("a", "b", "c")] == ["1", "2", "3"]


def test_list_source_via_plain_list():
    assert isinstance(get_source([("a", "1")]), ListSource)


@pytest.mark.parametrize("record", [{"username": "a"}, ("a", "b", "c"), "a:b", 42])
def test_list_source_rejects_bad_records(record):
    with pytest.raises(UnknownCredentialSource):
        ListSource([record])


@pytest.mark.parametrize(
    "spec",
    [42, "admin:admin", {"file": "x", "env": "y"}, {"path": "x"}, {}],
)
def test_unknown_source_shapes(spec):
    with pytest.raises(UnknownCredentialSource):
        get_source(spec)


def test_source_instance_passes_through():
    source = EnvSource("X")
    assert get_source(source) is source


def test_load_store_logs_counts_not_secrets(caplog):
    caplog.set_level(logging.INFO, logger="basic_gate.credentials")
    load_store({"file": str(FIXTURES / "credentials")})
    assert "Loaded 2 credential(s)" in caplog.text
    assert "Skipped 1 malformed" in caplog.text
    assert "s3cr3t" not in caplog.text
