"""
testframe_sdk.tier2_components.mesh
────────────────────────────────────
Deployment lifecycle of the mesh control plane for a test suite.

``setup`` returns a resource setup function that, per target environment,
either skips deployment (native) or builds the default configuration,
applies the caller's override, runs the context setup hooks in order and
deploys, publishing the resulting instance to the caller.

Usage:
    mesh_slot = InstanceSlot()

    suite_setup = setup(
        mesh_slot,
        lambda cfg: cfg.values.update({"meshConfig.accessLogFile": "/dev/stdout"}),
        create_namespaces,
        label_nodes,
    )
    suite_setup(ctx)
    mesh_slot.instance.settings().system_namespace
"""
from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable

from pydantic import ValidationError

from testframe_sdk.tier0_core.errors import ConfigurationError, UnsupportedEnvironmentError
from testframe_sdk.tier0_core.logging import framework_logger
from testframe_sdk.tier1_runtime.context import Context, Resource, SetupFn
from testframe_sdk.tier1_runtime.environment import EnvironmentKind, KubeEnvironment, classify
from testframe_sdk.tier1_runtime.lifecycle import lifecycle
from testframe_sdk.tier2_components.mesh_config import MeshConfig, default_config
from testframe_sdk.tier2_components.mesh_kube import deploy_kube

COMPONENT = "mesh"

SetupConfigFn = Callable[[MeshConfig], None]
SetupContextFn = Callable[[Context], None]


@runtime_checkable
class MeshInstance(Resource, Protocol):
    """A deployed (or attached) mesh."""

    def settings(self) -> MeshConfig: ...


class InstanceSlot:
    """Caller-owned destination for the instance produced by ``setup``."""

    def __init__(self) -> None:
        self.instance: MeshInstance | None = None

    @property
    def is_set(self) -> bool:
        return self.instance is not None


# ── Setup hooks ───────────────────────────────────────────────────────────────

def _fn_name(fn: Callable) -> str:
    return getattr(fn, "__qualname__", None) or repr(fn)


def run_context_setup(ctx: Context, ctx_fns: tuple[SetupContextFn | None, ...]) -> None:
    """
    Run *ctx_fns* in order, skipping None entries. The first failure is logged
    and re-raised; later functions are not called.
    """
    log = framework_logger()
    for fn in ctx_fns:
        if fn is None:
            continue
        try:
            fn(ctx)
        except Exception as exc:
            log.info("context_setup.failed", function=_fn_name(fn), error=str(exc))
            raise
        log.info("context_setup.succeeded", function=_fn_name(fn))


# ── Deploy ────────────────────────────────────────────────────────────────────

def _validated_copy(cfg: MeshConfig) -> MeshConfig:
    try:
        return MeshConfig.model_validate(cfg.model_dump(warnings=False), strict=True)
    except ValidationError as exc:
        raise ConfigurationError(
            "invalid_mesh_config",
            f"Mesh configuration is invalid: {exc.error_count()} invalid field(s).",
            detail=str(exc),
        ) from exc


def _dispatch(ctx: Context, cfg: MeshConfig) -> MeshInstance:
    env = ctx.environment
    if isinstance(env, KubeEnvironment):
        return deploy_kube(ctx, env, _validated_copy(cfg))
    raise UnsupportedEnvironmentError(env, component=COMPONENT)


def deploy(ctx: Context, cfg: MeshConfig | None = None) -> MeshInstance:
    """
    Deploy (or attach to) the mesh and return a handle. If *cfg* is None,
    ``default_config(ctx)`` is used. The caller's *cfg* is never mutated and
    later changes to it are not seen by the instance.
    """
    with lifecycle("deploy", suite=ctx.settings.test_id, component=COMPONENT):
        if cfg is None:
            cfg = default_config(ctx)
        return _dispatch(ctx, cfg)


# ── Setup ─────────────────────────────────────────────────────────────────────

def setup(
    slot: InstanceSlot | None = None,
    cfn: SetupConfigFn | None = None,
    *ctx_fns: SetupContextFn | None,
) -> SetupFn:
    """
    Return a setup function that deploys the mesh on kube environments and
    does nothing on native ones.

    On success the instance is returned and, when *slot* is given, stored in
    ``slot.instance``. On failure the exception propagates and *slot* is left
    untouched. Environments of an unknown kind raise UnsupportedEnvironmentError.
    """

    def _setup(ctx: Context) -> MeshInstance | None:
        kind = classify(ctx)
        if kind is EnvironmentKind.NATIVE:
            framework_logger().debug("setup.skipped", component=COMPONENT, environment=kind.value)
            return None

        with lifecycle("deploy", suite=ctx.settings.test_id, component=COMPONENT):
            if kind is None:
                raise UnsupportedEnvironmentError(ctx.environment, component=COMPONENT)
            cfg = default_config(ctx)
            if cfn is not None:
                cfn(cfg)
            run_context_setup(ctx, ctx_fns)
            instance = _dispatch(ctx, cfg)

        if slot is not None:
            slot.instance = instance
        return instance

    return _setup


__all__ = [
    "COMPONENT",
    "MeshInstance",
    "InstanceSlot",
    "SetupConfigFn",
    "SetupContextFn",
    "run_context_setup",
    "deploy",
    "setup",
]
