"""
Unit tests for basic_gate.config.load_options (env -> AuthOptions).
"""

import pytest

from basic_gate.config import load_options
from basic_gate.errors import InvalidOption


def test_defaults_from_empty_env():
    opts = load_options()
    assert opts.header == "Authorization"
    assert opts.realm == "Secure Area"
    assert opts.unauthorized_status == 401
    assert opts.unauthorized_message == "Unauthorized"
    assert opts.scope is None
    assert opts.skip_cors_preflight is False
    assert opts.enabled is True
    assert opts.credentials == {"env": "BASIC_AUTH_CREDENTIALS"}
    assert opts.state_key == "auth_realm"


def test_all_values_from_env(monkeypatch):
    monkeypatch.setenv("BASIC_AUTH_HEADER", "Proxy-Authorization")
    monkeypatch.setenv("BASIC_AUTH_REALM", "Proxy")
    monkeypatch.setenv("BASIC_AUTH_STATUS", "407")
    monkeypatch.setenv("BASIC_AUTH_MESSAGE", "Nope")
    monkeypatch.setenv("BASIC_AUTH_SCOPE", "/private")
    monkeypatch.setenv("BASIC_AUTH_SKIP_PREFLIGHT", "yes")
    monkeypatch.setenv("BASIC_AUTH_ENABLED", "off")
    monkeypatch.setenv("BASIC_AUTH_STATE_KEY", "proxy_realm")
    monkeypatch.setenv("BASIC_AUTH_CREDENTIALS_ENV", "PROXY_USERS")

    opts = load_options()
    assert opts.header == "Proxy-Authorization"
    assert opts.realm == "Proxy"
    assert opts.unauthorized_status == 407
    assert opts.unauthorized_message == "Nope"
    assert opts.scope == "/private"
    assert opts.skip_cors_preflight is True
    assert opts.enabled is False
    assert opts.state_key == "proxy_realm"
    assert opts.credentials == {"env": "PROXY_USERS"}


def test_scope_list_from_env(monkeypatch):
    monkeypatch.setenv("BASIC_AUTH_SCOPE", "/private, /admin,,")
    assert load_options().scope == ["/private", "/admin"]


def test_credentials_file_wins_over_env(monkeypatch):
    monkeypatch.setenv("BASIC_AUTH_CREDENTIALS_FILE", "/etc/gate/credentials")
    monkeypatch.setenv("BASIC_AUTH_CREDENTIALS_ENV", "IGNORED")
    assert load_options().credentials == {"file": "/etc/gate/credentials"}


def test_custom_prefix(monkeypatch):
    monkeypatch.setenv("ADMIN_AUTH_REALM", "Admin")
    monkeypatch.setenv("ADMIN_AUTH_SCOPE", "/admin")
    opts = load_options("ADMIN_AUTH_")
    assert opts.realm == "Admin"
    assert opts.scope == "/admin"


def test_blank_values_fall_back_to_defaults(monkeypatch):
    monkeypatch.setenv("BASIC_AUTH_REALM", "   ")
    monkeypatch.setenv("BASIC_AUTH_STATUS", "")
    opts = load_options()
    assert opts.realm == "Secure Area"
    assert opts.unauthorized_status == 401


@pytest.mark.parametrize(
    "name, value",
    [
        ("BASIC_AUTH_STATUS", "four-oh-one"),
        ("BASIC_AUTH_STATUS", "200"),
        ("BASIC_AUTH_ENABLED", "maybe"),
        ("BASIC_AUTH_SKIP_PREFLIGHT", "2"),
    ],
)
def test_invalid_env_values(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(InvalidOption):
        load_options()
