"""
testframe_sdk.tier2_components.mesh_config
───────────────────────────────────────────
Deployment parameters for the mesh control plane under test, and the
defaults a suite starts from before applying its own overrides.

Defaults are layered: built-in values → TESTFRAME_MESH_* environment
variables → the active environment (e.g. the kube cluster name).

Usage:
    cfg = default_config(ctx)
    cfg.values["global.proxy.logLevel"] = "debug"
"""
from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from testframe_sdk.tier0_core.errors import ConfigurationError
from testframe_sdk.tier1_runtime.context import Context
from testframe_sdk.tier1_runtime.environment import KubeEnvironment

PullPolicy = Literal["Always", "IfNotPresent", "Never"]

DEFAULT_SYSTEM_NAMESPACE = "mesh-system"
DEFAULT_HUB = "docker.io/meshproject"
DEFAULT_TAG = "latest"


class MeshConfig(BaseModel):
    """
    Desired deployment of the mesh. Mutable until it is handed to ``deploy``;
    the deployed instance keeps its own copy.
    """

    system_namespace: str = DEFAULT_SYSTEM_NAMESPACE
    config_namespace: str = DEFAULT_SYSTEM_NAMESPACE
    telemetry_namespace: str = DEFAULT_SYSTEM_NAMESPACE
    ingress_namespace: str = DEFAULT_SYSTEM_NAMESPACE
    egress_namespace: str = DEFAULT_SYSTEM_NAMESPACE

    hub: str = DEFAULT_HUB
    tag: str = DEFAULT_TAG
    pull_policy: PullPolicy = "Always"

    # seconds
    deploy_timeout: float = Field(default=300.0, gt=0)
    undeploy_timeout: float = Field(default=300.0, gt=0)

    chart_dir: str = ""
    values_file: str = ""
    values: dict[str, str] = Field(default_factory=dict)

    # False attaches to an already-installed mesh instead of installing one.
    deploy_mesh: bool = True
    skip_wait_for_validation_webhook: bool = False

    cluster_name: str = ""


class MeshDefaults(BaseSettings):
    """Environment overrides for mesh defaults, e.g. TESTFRAME_MESH_TAG=1.20."""

    model_config = SettingsConfigDict(
        env_prefix="TESTFRAME_MESH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    system_namespace: str = DEFAULT_SYSTEM_NAMESPACE
    hub: str = DEFAULT_HUB
    tag: str = DEFAULT_TAG
    pull_policy: PullPolicy = "Always"
    deploy_timeout: float = Field(default=300.0, gt=0)
    undeploy_timeout: float = Field(default=300.0, gt=0)
    chart_dir: str = ""
    values_file: str = ""
    # comma-separated key=value pairs
    values: str = ""
    deploy_mesh: bool = True
    skip_wait_for_validation_webhook: bool = False


def parse_values(raw: str) -> dict[str, str]:
    """
    Parse ``"a.b=1,c=two"`` into ``{"a.b": "1", "c": "two"}``.

    Raises ConfigurationError on entries without ``=`` or with an empty key.
    """
    values: dict[str, str] = {}
    for entry in raw.split(","):
        entry = entry.strip()
        if not entry:
            continue
        key, sep, value = entry.partition("=")
        key = key.strip()
        if not sep or not key:
            raise ConfigurationError(
                "invalid_mesh_values",
                f"Invalid mesh values entry {entry!r}; expected key=value.",
                entry=entry,
            )
        values[key] = value.strip()
    return values


def default_config(ctx: Context) -> MeshConfig:
    """
    Build the default mesh configuration for *ctx*.

    Raises ConfigurationError when defaults cannot be derived.
    """
    try:
        defaults = MeshDefaults()
    except ValidationError as exc:
        raise ConfigurationError(
            "invalid_mesh_defaults",
            f"Mesh defaults could not be derived: {exc.error_count()} invalid field(s).",
            detail=str(exc),
        ) from exc

    fields: dict[str, Any] = defaults.model_dump(exclude={"values", "system_namespace"})
    ns = defaults.system_namespace
    cfg = MeshConfig(
        system_namespace=ns,
        config_namespace=ns,
        telemetry_namespace=ns,
        ingress_namespace=ns,
        egress_namespace=ns,
        values=parse_values(defaults.values),
        **fields,
    )
    if isinstance(ctx.environment, KubeEnvironment):
        cfg.cluster_name = ctx.environment.cluster_name
    return cfg


__all__ = ["MeshConfig", "MeshDefaults", "PullPolicy", "parse_values", "default_config"]
