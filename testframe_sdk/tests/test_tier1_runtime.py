"""Tests for tier1_runtime modules."""
from __future__ import annotations

import pytest

from testframe_sdk.tier0_core.config import FrameworkSettings
from testframe_sdk.tier0_core.errors import ConfigurationError
from testframe_sdk.tier1_runtime.context import Context, TestContext, new_context
from testframe_sdk.tier1_runtime.environment import (
    EnvironmentKind,
    KubeEnvironment,
    NativeEnvironment,
    classify,
    environment_name,
    new_environment,
)
from testframe_sdk.tier1_runtime.lifecycle import lifecycle


# ── environment ────────────────────────────────────────────────────────────

class TestEnvironment:
    def test_kinds(self):
        assert environment_name(KubeEnvironment()) is EnvironmentKind.KUBE
        assert environment_name(NativeEnvironment()) is EnvironmentKind.NATIVE

    def test_unknown_handle_has_no_kind(self):
        class VMEnvironment:
            kind = "vm"

        assert environment_name(VMEnvironment()) is None

    def test_classify_context(self, kube_ctx, native_ctx):
        assert classify(kube_ctx) is EnvironmentKind.KUBE
        assert classify(native_ctx) is EnvironmentKind.NATIVE

    def test_new_environment_kube(self):
        env = new_environment(FrameworkSettings(
            environment="kube", kube_cluster_name="east", kube_config="/etc/kube.conf",
        ))
        assert env == KubeEnvironment(cluster_name="east", kubeconfig="/etc/kube.conf")

    def test_new_environment_native(self):
        assert isinstance(new_environment(FrameworkSettings(environment="native")), NativeEnvironment)

    def test_new_environment_unknown(self):
        with pytest.raises(ConfigurationError) as exc_info:
            new_environment(FrameworkSettings(environment="vm"))
        assert exc_info.value.code == "unknown_environment"


# ── context ────────────────────────────────────────────────────────────────

class _Res:
    def __init__(self, rid: str) -> None:
        self.id = rid


class TestContextRegistry:
    def test_track_resource_in_order(self, native_ctx):
        assert native_ctx.track_resource(_Res("a")) == "a"
        native_ctx.track_resource(_Res("b"))
        assert [r.id for r in native_ctx.resources] == ["a", "b"]

    def test_satisfies_protocol(self, native_ctx):
        assert isinstance(native_ctx, Context)

    def test_new_context_uses_settings(self):
        ctx = new_context(FrameworkSettings(test_id="t-9", environment="kube"))
        assert isinstance(ctx, TestContext)
        assert isinstance(ctx.environment, KubeEnvironment)
        assert ctx.settings.test_id == "t-9"


# ── lifecycle ──────────────────────────────────────────────────────────────

class TestLifecycle:
    def test_success_markers(self, framework_events):
        with lifecycle("deploy", suite="s1", component="mesh"):
            pass
        events = [e["event"] for e in framework_events()]
        assert events == ["deploy.begin", "deploy.succeeded"]
        assert all(e["suite"] == "s1" for e in framework_events())

    def test_failure_marker_and_reraise(self, framework_events):
        boom = RuntimeError("boom")
        with pytest.raises(RuntimeError) as exc_info:
            with lifecycle("deploy", suite="s1"):
                raise boom
        assert exc_info.value is boom
        events = framework_events()
        assert [e["event"] for e in events] == ["deploy.begin", "deploy.failed"]
        assert events[-1]["error"] == "boom"

    def test_early_return_still_closes(self, framework_events):
        def op():
            with lifecycle("deploy", suite="s1"):
                return 7

        assert op() == 7
        assert [e["event"] for e in framework_events()] == ["deploy.begin", "deploy.succeeded"]
