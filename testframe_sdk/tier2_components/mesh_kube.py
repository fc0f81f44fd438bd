"""
testframe_sdk.tier2_components.mesh_kube
─────────────────────────────────────────
Kubernetes deploy routine for the mesh. Installation itself is delegated to a
MeshInstaller so suites can swap in whatever tooling provisions their
clusters; this module only decides between install and attach, builds the
instance handle, and hands it to the context's resource registry.

Select via: TESTFRAME_KUBE_INSTALLER=recording
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from testframe_sdk.tier0_core.config import FrameworkSettings
from testframe_sdk.tier0_core.errors import ConfigurationError
from testframe_sdk.tier0_core.ids import new_id
from testframe_sdk.tier0_core.logging import framework_logger
from testframe_sdk.tier1_runtime.context import Context
from testframe_sdk.tier1_runtime.environment import KubeEnvironment
from testframe_sdk.tier2_components.mesh_config import MeshConfig


# ── Instance ──────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class KubeMeshInstance:
    """A mesh deployed to (or attached on) a kube cluster."""
    id: str
    environment: KubeEnvironment
    config: MeshConfig = field(repr=False)
    attached: bool = False

    def settings(self) -> MeshConfig:
        """Return a copy of the configuration this instance was deployed with."""
        return self.config.model_copy(deep=True)


# ── Installer protocol ────────────────────────────────────────────────────────

@runtime_checkable
class MeshInstaller(Protocol):
    def install(self, env: KubeEnvironment, cfg: MeshConfig) -> None: ...


# ── Recording installer (default / tests) ─────────────────────────────────────

class RecordingInstaller:
    """
    Records install requests instead of touching a cluster.
    Set ``fail_with`` to make the next installs raise that exception.
    """

    def __init__(self, fail_with: BaseException | None = None) -> None:
        self.installs: list[tuple[KubeEnvironment, MeshConfig]] = []
        self.fail_with = fail_with

    def install(self, env: KubeEnvironment, cfg: MeshConfig) -> None:
        if self.fail_with is not None:
            raise self.fail_with
        self.installs.append((env, cfg))


# ── Installer registry ────────────────────────────────────────────────────────

_installer: MeshInstaller | None = None


def _build_installer(settings: FrameworkSettings) -> MeshInstaller:
    name = settings.kube_installer.lower()
    if name in ("recording", "mock"):
        return RecordingInstaller()
    raise ConfigurationError(
        "unknown_installer",
        f"Unknown TESTFRAME_KUBE_INSTALLER={name!r}. Valid: recording",
    )


def get_installer(settings: FrameworkSettings) -> MeshInstaller:
    global _installer
    if _installer is None:
        _installer = _build_installer(settings)
    return _installer


def set_installer(installer: MeshInstaller) -> None:
    """Use *installer* for all subsequent kube deployments."""
    global _installer
    _installer = installer


def _reset_installer() -> None:
    global _installer
    _installer = None


# ── Deploy routine ────────────────────────────────────────────────────────────

def deploy_kube(ctx: Context, env: KubeEnvironment, cfg: MeshConfig) -> KubeMeshInstance:
    """
    Install the mesh on *env* (or attach to an existing install when
    ``cfg.deploy_mesh`` is False) and register the instance with *ctx*.
    """
    log = framework_logger()
    instance = KubeMeshInstance(
        id=new_id(prefix="mesh"),
        environment=env,
        config=cfg.model_copy(deep=True),
        attached=not cfg.deploy_mesh,
    )

    if cfg.deploy_mesh:
        log.debug(
            "mesh.install",
            cluster=env.cluster_name,
            namespace=cfg.system_namespace,
            hub=cfg.hub,
            tag=cfg.tag,
        )
        get_installer(ctx.settings).install(env, cfg)
    else:
        log.debug("mesh.attach", cluster=env.cluster_name, namespace=cfg.system_namespace)

    ctx.track_resource(instance)
    return instance


__all__ = [
    "KubeMeshInstance",
    "MeshInstaller",
    "RecordingInstaller",
    "get_installer",
    "set_installer",
    "deploy_kube",
]
