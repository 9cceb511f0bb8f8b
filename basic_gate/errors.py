"""
Configuration errors for basic_gate.

Every error here is raised at setup time (building a store, a scope or an
engine) and must stop the application from starting. Per-request
authentication failures are never exceptions; they are returned as a
`Challenge` decision instead.

All errors subclass ValueError so callers that already guard configuration
parsing with `except ValueError` keep working.
"""


class ConfigError(ValueError):
    """Base class for fatal configuration errors."""


class SourceUnreadable(ConfigError):
    """A credential file could not be opened or decoded."""

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        detail = f"Credential file unreadable: {path!r}"
        if reason:
            detail = f"{detail} ({reason})"
        super().__init__(detail)


class UnknownCredentialSource(ConfigError):
    """The credential source spec has a shape we do not understand."""


class UnknownScopeSpec(ConfigError):
    """The scope spec is not a prefix, a collection of prefixes, or a callable."""


class InvalidOption(ConfigError):
    """An option value is out of range or cannot be parsed."""
