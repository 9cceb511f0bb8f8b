"""
Decision model returned by `AuthEngine.evaluate`.

Variants:
    NotApplicable   request not subject to this engine; pass through
    Authenticated   credentials valid; pass through, realm published
    Challenge       credentials missing/invalid; host must answer with
                    `status`, body `message` and the `headers` below

The host maps variants to responses (see `auth.service.to_response`); the
engine itself never raises for an authentication failure.

LLM Prompt Example:
    "Show how returning an explicit result type instead of raising makes
    auth middleware composable across independent realms."
"""

from dataclasses import dataclass, field
from typing import Dict

WWW_AUTHENTICATE = "WWW-Authenticate"


def quote_realm(realm: str) -> str:
    """Render `realm` as an HTTP quoted-string (escapes backslash and double quote)."""
    escaped = realm.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


@dataclass(frozen=True)
class Decision:
    """Base of all evaluation outcomes."""

    @property
    def passes(self) -> bool:
        """True when the host should hand the request to the next handler."""
        return True


@dataclass(frozen=True)
class NotApplicable(Decision):
    pass


@dataclass(frozen=True)
class Authenticated(Decision):
    realm: str


@dataclass(frozen=True)
class Challenge(Decision):
    realm: str
    message: str
    status: int
    # Logged only; never part of the response and ignored by equality
    cause: str = field(default="", compare=False, repr=False)

    @property
    def passes(self) -> bool:
        return False

    @property
    def headers(self) -> Dict[str, str]:
        return {WWW_AUTHENTICATE: f"Basic realm={quote_realm(self.realm)}"}
