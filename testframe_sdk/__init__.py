"""
testframe_sdk
─────────────
Stable top-level exports. Import from here, not from sub-modules directly.
Every name exported here is part of the public API and subject to semver.
"""
from testframe_sdk.tier0_core.logging import get_logger, framework_logger
from testframe_sdk.tier0_core.errors import (
    FrameworkError,
    ConfigurationError,
    UnsupportedEnvironmentError,
    DeployError,
)
from testframe_sdk.tier0_core.config import get_settings, FrameworkSettings

from testframe_sdk.tier1_runtime.environment import (
    EnvironmentKind,
    KubeEnvironment,
    NativeEnvironment,
    classify,
)
from testframe_sdk.tier1_runtime.context import Context, TestContext, SetupFn, new_context
from testframe_sdk.tier1_runtime.lifecycle import lifecycle

from testframe_sdk.tier2_components.mesh_config import MeshConfig, default_config
from testframe_sdk.tier2_components.mesh_kube import MeshInstaller, set_installer
from testframe_sdk.tier2_components.mesh import (
    MeshInstance,
    InstanceSlot,
    SetupConfigFn,
    SetupContextFn,
    deploy,
    setup,
)

__version__ = "0.1.0"
__all__ = [
    # logging
    "get_logger", "framework_logger",
    # errors
    "FrameworkError", "ConfigurationError", "UnsupportedEnvironmentError", "DeployError",
    # config
    "get_settings", "FrameworkSettings",
    # environment
    "EnvironmentKind", "KubeEnvironment", "NativeEnvironment", "classify",
    # context
    "Context", "TestContext", "SetupFn", "new_context",
    # lifecycle
    "lifecycle",
    # mesh
    "MeshConfig", "default_config", "MeshInstaller", "set_installer",
    "MeshInstance", "InstanceSlot", "SetupConfigFn", "SetupContextFn",
    "deploy", "setup",
]
