"""
AuthEngine module for basic_gate.

Responsibilities:
    - Decide whether a request is subject to authentication (enabled flag,
      scope, CORS preflight bypass)
    - Extract Basic credentials from the configured header
    - Verify them against the credential store in constant time
    - Return a Decision and publish the realm into request-scoped state

Design notes:
    - Store, scope and options are built once in the constructor and never
      mutated, so one engine can serve any number of concurrent requests.
    - Configuration errors (unreadable file, unknown scope shape) are raised
      from the constructor; per-request failures are Challenge values.
    - Both the username and the password comparison always run, against an
      empty reference when the user is unknown, so "unknown user" and
      "wrong password" take the same path.
    - Each engine writes only its own `state_key`, so several engines with
      different realms can guard one pipeline without clobbering each other.

LLM Prompt Example:
    "Explain how to structure a framework-neutral Basic Auth engine that
    several middleware instances can share a request pipeline with."
"""

import logging
from dataclasses import replace
from typing import Any, MutableMapping, Optional

from ..codec import decode_basic
from ..credentials.source_factory import load_store
from ..credentials.store import CredentialStore
from ..matching import timing_safe_equal
from ..request import GateRequest
from ..scope.preflight import is_preflight
from ..scope.scopes import build_scope
from .decision import Authenticated, Challenge, Decision, NotApplicable
from .options import AuthOptions

log = logging.getLogger("basic_gate.engine")

SCHEME_PREFIX = "basic "
NOT_APPLICABLE = NotApplicable()


class AuthEngine:
    def __init__(
        self,
        options: Optional[AuthOptions] = None,
        store: Optional[CredentialStore] = None,
        **overrides: Any,
    ):
        """
        Build an engine.

        Args:
            options (AuthOptions, optional): Full option set; defaults apply when omitted.
            store (CredentialStore, optional): Pre-built store. When omitted it is
                loaded from `options.credentials` right here, so a bad source
                fails before any request is served.
            **overrides: Individual AuthOptions fields, e.g. realm="Admin".

        Raises:
            ConfigError: On any invalid option, scope or credential source.
        """
        if options is None:
            options = AuthOptions(**overrides)
        elif overrides:
            options = replace(options, **overrides)

        self.options = options
        self.store = store if store is not None else load_store(options.credentials)
        self._in_scope = build_scope(options.scope)

    @classmethod
    def from_env(cls, prefix: str = "BASIC_AUTH_", **overrides: Any) -> "AuthEngine":
        """Build an engine from environment variables (see basic_gate.config)."""
        from ..config import load_options

        return cls(load_options(prefix), **overrides)

    @property
    def realm(self) -> str:
        return self.options.realm

    @property
    def state_key(self) -> str:
        return self.options.state_key

    def in_scope(self, request: GateRequest) -> bool:
        return self._in_scope(request)

    def evaluate(
        self,
        request: GateRequest,
        state: Optional[MutableMapping[str, Any]] = None,
    ) -> Decision:
        """
        Evaluate one request.

        Args:
            request (GateRequest): The incoming request.
            state (MutableMapping, optional): Request-scoped scratch area; on
                success `state[self.state_key]` is set to the realm.

        Returns:
            Decision: NotApplicable, Authenticated or Challenge.
        """
        opts = self.options

        if not opts.enabled:
            return NOT_APPLICABLE
        if not self._in_scope(request):
            return NOT_APPLICABLE
        if opts.skip_cors_preflight and is_preflight(request):
            return NOT_APPLICABLE

        header_value = request.header(opts.header)
        if not header_value or not header_value.lower().startswith(SCHEME_PREFIX):
            return self._challenge("invalid header")

        supplied = decode_basic(header_value)
        if not self._check(supplied.username, supplied.password):
            return self._challenge("invalid credentials")

        if state is not None:
            state[opts.state_key] = opts.realm
        return Authenticated(realm=opts.realm)

    authenticate = evaluate

    def _check(self, username: str, password: str) -> bool:
        reference = self.store.find(username)
        ref_username = reference.username if reference is not None else ""
        ref_password = reference.password if reference is not None else ""

        # Non short-circuiting: both comparisons run on every path
        valid = bool(username) & bool(password)
        valid = timing_safe_equal(username, ref_username) & valid
        valid = timing_safe_equal(password, ref_password) & valid
        return valid

    def _challenge(self, cause: str) -> Challenge:
        opts = self.options
        log.debug("Challenge for realm %r: %s", opts.realm, cause)
        return Challenge(
            realm=opts.realm,
            message=opts.unauthorized_message,
            status=opts.unauthorized_status,
            cause=cause,
        )

    def __repr__(self) -> str:
        return f"AuthEngine(realm={self.realm!r}, users={len(self.store)})"
