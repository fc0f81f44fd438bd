"""
testframe_sdk.tier1_runtime.environment
─────────────────────────────────────────
Target environment handles. Each environment kind is its own handle type
carrying its own typed data, so components dispatch on the handle itself
and never need to cast a generic handle to a concrete one.

Select via: TESTFRAME_ENVIRONMENT=kube|native
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, ClassVar, Protocol, Union, runtime_checkable

from testframe_sdk.tier0_core.errors import ConfigurationError

if TYPE_CHECKING:
    from testframe_sdk.tier0_core.config import FrameworkSettings
    from testframe_sdk.tier1_runtime.context import Context


class EnvironmentKind(str, Enum):
    KUBE = "kube"
    NATIVE = "native"


# ── Handle protocol ───────────────────────────────────────────────────────────

@runtime_checkable
class Environment(Protocol):
    kind: ClassVar[object]


# ── Variants ──────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class KubeEnvironment:
    """A Kubernetes-backed environment: one cluster reachable via kubeconfig."""
    kind: ClassVar[EnvironmentKind] = EnvironmentKind.KUBE

    cluster_name: str = "primary"
    kubeconfig: str = "~/.kube/config"

    def __str__(self) -> str:
        return f"kube[{self.cluster_name}]"


@dataclass(frozen=True)
class NativeEnvironment:
    """No-op environment: components run in-process and nothing is deployed."""
    kind: ClassVar[EnvironmentKind] = EnvironmentKind.NATIVE

    def __str__(self) -> str:
        return "native"


KnownEnvironment = Union[KubeEnvironment, NativeEnvironment]


# ── Classification ────────────────────────────────────────────────────────────

def environment_name(env: object) -> EnvironmentKind | None:
    """Return the kind of *env*, or None for handles outside the known set."""
    if isinstance(env, (KubeEnvironment, NativeEnvironment)):
        return env.kind
    return None


def classify(ctx: "Context") -> EnvironmentKind | None:
    """Return the kind of the context's active environment. Never raises."""
    return environment_name(ctx.environment)


def new_environment(settings: "FrameworkSettings") -> KnownEnvironment:
    """Build the environment handle named by ``settings.environment``."""
    name = settings.environment
    if name == EnvironmentKind.KUBE.value:
        return KubeEnvironment(
            cluster_name=settings.kube_cluster_name,
            kubeconfig=os.path.expanduser(settings.kube_config),
        )
    if name == EnvironmentKind.NATIVE.value:
        return NativeEnvironment()
    raise ConfigurationError(
        "unknown_environment",
        f"Unknown TESTFRAME_ENVIRONMENT={name!r}. Valid: kube, native",
    )


__all__ = [
    "EnvironmentKind",
    "Environment",
    "KubeEnvironment",
    "NativeEnvironment",
    "KnownEnvironment",
    "environment_name",
    "classify",
    "new_environment",
]
