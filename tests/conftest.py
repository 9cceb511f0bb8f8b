"""
Global pytest fixtures for the basic-gate test suite.

Responsibilities:
    - Provide a request builder for engine-level unit tests
    - Provide a default credential list, store and engine
    - Provide a fresh FastAPI TestClient via the app factory for integration tests

Why an app factory?
    Using `create_app()` with injected engines gives each test its own
    middleware stack and keeps tests independent of the process environment.
"""

import os

import pytest
from fastapi.testclient import TestClient

from basic_gate.credentials.base import Credential
from basic_gate.credentials.store import CredentialStore
from basic_gate.engine.auth_engine import AuthEngine
from basic_gate.request import GateRequest
from main import create_app

ADMIN = Credential(username="admin", password="admin")


@pytest.fixture(autouse=True)
def _clean_auth_env(monkeypatch):
    """Keep the developer's own BASIC_AUTH_* settings out of every test."""
    for name in list(os.environ):
        if name.startswith(("BASIC_AUTH_", "BASIC_GATE_")):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_request():
    """
    Build GateRequest objects for a path on localhost.

    Usage:
        make_request("/private", headers={"Authorization": "..."}, method="POST")
    """

    def _make(path="/", method="GET", headers=None, context=None):
        return GateRequest(
            method=method,
            url=f"http://localhost{path}",
            headers=headers or {},
            context=context or {},
        )

    return _make


@pytest.fixture
def credentials():
    return [ADMIN]


@pytest.fixture
def store(credentials) -> CredentialStore:
    return CredentialStore(credentials)


@pytest.fixture
def engine(credentials) -> AuthEngine:
    """Default-option engine guarding every path with admin:admin."""
    return AuthEngine(credentials=credentials)


@pytest.fixture
def client(engine) -> TestClient:
    """
    Provide a fresh TestClient with a new app instance guarded by `engine`.
    """
    return TestClient(create_app(engines=[engine]))
