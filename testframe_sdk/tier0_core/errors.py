"""
testframe_sdk.tier0_core.errors
───────────────────────────────
Standard error taxonomy for the test framework. Every framework error has a
stable machine-readable code so suites can assert on failure kinds without
matching message text.

Errors raised by caller-supplied hooks and by deploy routines are NOT wrapped
in these types; they propagate to the caller unchanged.
"""
from __future__ import annotations

from typing import Any


# ── Base error ────────────────────────────────────────────────────────────────

class FrameworkError(Exception):
    """
    Base class for all framework errors. Every error has:
    - code: stable machine-readable string (snake_case)
    - user_message: short human-readable summary
    - detail: internal context, defaults to user_message
    - metadata: extra key-value fields, handy for structured logs
    """

    code: str = "framework_error"

    def __init__(
        self,
        code: str | None = None,
        user_message: str = "An unexpected framework error occurred.",
        detail: str | None = None,
        **metadata: Any,
    ) -> None:
        self.code = code or self.__class__.code
        self.user_message = user_message
        self.detail = detail or user_message
        self.metadata = metadata
        super().__init__(self.detail)

    def to_dict(self) -> dict:
        return {
            "error": {
                "code": self.code,
                "message": self.user_message,
                **self.metadata,
            }
        }


# ── Typed error classes ───────────────────────────────────────────────────────

class ConfigurationError(FrameworkError):
    """Settings or component defaults could not be derived."""
    code = "configuration_error"


class UnsupportedEnvironmentError(FrameworkError):
    """The active environment has no deployment branch for this component."""
    code = "unsupported_environment"

    def __init__(self, environment: Any, component: str | None = None) -> None:
        self.environment = environment
        name = getattr(environment, "kind", None) or type(environment).__name__
        name = getattr(name, "value", name)
        target = f" for {component}" if component else ""
        super().__init__(
            user_message=f"Unsupported environment{target}: {name}",
            environment=str(name),
        )


class DeployError(FrameworkError):
    """A deploy routine or installer failed to provision the component."""
    code = "deploy_error"


__all__ = [
    "FrameworkError",
    "ConfigurationError",
    "UnsupportedEnvironmentError",
    "DeployError",
]
