"""
testframe_sdk.tier1_runtime.context
────────────────────────────────────
Test context: the active environment, the run settings, and the registry of
resources created during suite setup. Components receive a Context in every
setup function and hand the resources they create over to it.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Protocol, runtime_checkable

from testframe_sdk.tier0_core.config import FrameworkSettings, get_settings
from testframe_sdk.tier1_runtime.environment import Environment, new_environment


# ── Protocols ─────────────────────────────────────────────────────────────────

@runtime_checkable
class Resource(Protocol):
    """Anything tracked by a test context."""

    @property
    def id(self) -> str: ...


@runtime_checkable
class Context(Protocol):
    @property
    def environment(self) -> Environment: ...

    @property
    def settings(self) -> FrameworkSettings: ...

    def track_resource(self, resource: Resource) -> str: ...


# Generic resource setup function: raises on failure.
SetupFn = Callable[[Context], Any]


# ── Default implementation ────────────────────────────────────────────────────

@dataclass
class TestContext:
    """In-process context used by suites and tests."""
    __test__ = False

    environment: Environment
    settings: FrameworkSettings
    resources: list[Resource] = field(default_factory=list)

    def track_resource(self, resource: Resource) -> str:
        """Register *resource* with this context and return its ID."""
        self.resources.append(resource)
        return resource.id


def new_context(settings: FrameworkSettings | None = None) -> TestContext:
    """Create a context for the environment named in *settings* (or the run settings)."""
    settings = settings or get_settings()
    return TestContext(environment=new_environment(settings), settings=settings)


__all__ = ["Resource", "Context", "SetupFn", "TestContext", "new_context"]
