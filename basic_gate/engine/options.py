"""
Engine options.

`AuthOptions` is frozen: it is read by every request for the lifetime of the
engine and never written after setup. Values are validated in
`__post_init__` so a bad option stops the app at startup.
"""

from dataclasses import dataclass
from typing import Any

from ..errors import InvalidOption

DEFAULT_HEADER = "Authorization"
DEFAULT_REALM = "Secure Area"
DEFAULT_STATUS = 401
DEFAULT_MESSAGE = "Unauthorized"
DEFAULT_STATE_KEY = "auth_realm"


@dataclass(frozen=True)
class AuthOptions:
    """
    Configuration for a single `AuthEngine`.

    Attributes:
        header (str): Request header carrying credentials
            (use "Proxy-Authorization" together with status 407 for proxies).
        realm (str): Realm echoed in the challenge and published on success.
        unauthorized_status (int): Status code of the challenge (400..599).
        unauthorized_message (str): Body of the challenge.
        scope: Path prefix, collection of prefixes, or predicate; None means
            every request.
        skip_cors_preflight (bool): Let CORS preflight probes through.
        enabled (bool): When False every request passes through untouched.
        credentials: Credential source spec; None means the
            BASIC_AUTH_CREDENTIALS environment variable.
        state_key (str): Name of this engine's slot in request state.
    """

    header: str = DEFAULT_HEADER
    realm: str = DEFAULT_REALM
    unauthorized_status: int = DEFAULT_STATUS
    unauthorized_message: str = DEFAULT_MESSAGE
    scope: Any = None
    skip_cors_preflight: bool = False
    enabled: bool = True
    credentials: Any = None
    state_key: str = DEFAULT_STATE_KEY

    def __post_init__(self):
        if not isinstance(self.header, str) or not self.header.strip():
            raise InvalidOption("header must be a non-empty string")
        if not isinstance(self.realm, str):
            raise InvalidOption("realm must be a string")
        if isinstance(self.unauthorized_status, bool) or not isinstance(self.unauthorized_status, int):
            raise InvalidOption("unauthorized_status must be an integer")
        if not 400 <= self.unauthorized_status <= 599:
            raise InvalidOption(f"unauthorized_status out of range: {self.unauthorized_status}")
        if not isinstance(self.unauthorized_message, str):
            raise InvalidOption("unauthorized_message must be a string")
        if not isinstance(self.state_key, str) or not self.state_key:
            raise InvalidOption("state_key must be a non-empty string")
