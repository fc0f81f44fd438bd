"""
testframe_sdk.tier0_core.config
────────────────────────────────
Typed framework settings with env layering. Reads from .env → environment
variables. These are the per-run settings a test context exposes (test ID,
target environment, cluster access, logging).

Minimal stack: pydantic-settings + python-dotenv
"""
from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from testframe_sdk.tier0_core.ids import new_id


class FrameworkSettings(BaseSettings):
    """
    Typed settings for a test run. All env vars are prefixed with TESTFRAME_.
    Fields may also be passed by name, e.g. ``FrameworkSettings(test_id="t1")``.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # ── Suite ─────────────────────────────────────────────────────────────────
    test_id: str = Field(
        default_factory=lambda: f"suite-{new_id('uuid4')[:8]}",
        alias="TESTFRAME_TEST_ID",
    )

    # ── Target environment ────────────────────────────────────────────────────
    environment: str = Field(default="native", alias="TESTFRAME_ENVIRONMENT")
    kube_config: str = Field(default="~/.kube/config", alias="TESTFRAME_KUBE_CONFIG")
    kube_cluster_name: str = Field(default="primary", alias="TESTFRAME_KUBE_CLUSTER_NAME")
    kube_installer: str = Field(default="recording", alias="TESTFRAME_KUBE_INSTALLER")

    # ── Logging ───────────────────────────────────────────────────────────────
    log_level: str = Field(default="INFO", alias="TESTFRAME_LOG_LEVEL")
    log_format: str = Field(default="json", alias="TESTFRAME_LOG_FORMAT")

    @field_validator("environment")
    @classmethod
    def normalize_environment(cls, v: str) -> str:
        return v.strip().lower()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        allowed = {"json", "console"}
        if v.lower() not in allowed:
            raise ValueError(f"log_format must be one of {allowed}, got {v!r}")
        return v.lower()


@lru_cache(maxsize=1)
def get_settings() -> FrameworkSettings:
    """
    Return the singleton framework settings. Cached after first call.
    Call _reset_settings() in tests to pick up new env vars.
    """
    return FrameworkSettings()


def _reset_settings() -> None:
    """For tests: clear the settings cache."""
    get_settings.cache_clear()


__all__ = ["FrameworkSettings", "get_settings"]
