"""
testframe_sdk test configuration.

All tests run against the recording installer, so no cluster is required.
Override by setting environment variables before running pytest.
"""
from __future__ import annotations

import os

import pytest

# ── Force test settings ────────────────────────────────────────────────────
# These must be set before any testframe_sdk modules are imported.

os.environ.setdefault("TESTFRAME_ENVIRONMENT", "native")
os.environ.setdefault("TESTFRAME_KUBE_INSTALLER", "recording")
os.environ.setdefault("TESTFRAME_TEST_ID", "test-suite")
os.environ.setdefault("TESTFRAME_LOG_LEVEL", "DEBUG")
os.environ.setdefault("TESTFRAME_LOG_FORMAT", "console")


# ── Fixtures ───────────────────────────────────────────────────────────────

@pytest.fixture(autouse=True)
def reset_module_singletons():
    """
    Reset cached settings and the installer singleton between tests.
    This ensures each test gets a fresh installer with no recorded state.
    """
    import testframe_sdk.tier0_core.config as _config
    import testframe_sdk.tier2_components.mesh_kube as _mesh_kube

    _mesh_kube._reset_installer()
    yield
    _mesh_kube._reset_installer()
    _config._reset_settings()


@pytest.fixture
def settings():
    from testframe_sdk.tier0_core.config import FrameworkSettings
    return FrameworkSettings(test_id="suite-42")


@pytest.fixture
def native_ctx(settings):
    from testframe_sdk.tier1_runtime.context import TestContext
    from testframe_sdk.tier1_runtime.environment import NativeEnvironment
    return TestContext(environment=NativeEnvironment(), settings=settings)


@pytest.fixture
def kube_ctx(settings):
    from testframe_sdk.tier1_runtime.context import TestContext
    from testframe_sdk.tier1_runtime.environment import KubeEnvironment
    return TestContext(
        environment=KubeEnvironment(cluster_name="cluster-a", kubeconfig="/tmp/kubeconfig"),
        settings=settings,
    )


@pytest.fixture
def installer():
    """Install a fresh RecordingInstaller for the duration of the test."""
    from testframe_sdk.tier2_components.mesh_kube import RecordingInstaller, set_installer
    rec = RecordingInstaller()
    set_installer(rec)
    return rec


@pytest.fixture
def framework_events(caplog):
    """Return a callable listing the event dicts logged to the framework scope."""
    from testframe_sdk.tier0_core.logging import FRAMEWORK_SCOPE

    def _events() -> list[dict]:
        return [
            r.msg for r in caplog.records
            if r.name == FRAMEWORK_SCOPE and isinstance(r.msg, dict)
        ]
    return _events
