"""
testframe_sdk.tier0_core.logging
─────────────────────────────────
Structured logs with levels, redaction, and named scopes. Framework
lifecycle code logs to the ``framework`` scope so suites can filter the
orchestration audit trail from component chatter.

Minimal stack: structlog over stdlib logging (stdout JSON or console)
Configure via: TESTFRAME_LOG_LEVEL, TESTFRAME_LOG_FORMAT=json|console
"""
from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from testframe_sdk.tier0_core.config import get_settings

FRAMEWORK_SCOPE = "framework"


# ── Configuration ─────────────────────────────────────────────────────────────

def _configure_structlog() -> None:
    settings = get_settings()
    log_level = settings.log_level.upper()
    log_format = settings.log_format.lower()

    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        _redact_processor,
    ]

    if log_format == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, log_level, logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, log_level, logging.INFO))


# ── Redaction processor ───────────────────────────────────────────────────────

_REDACT_KEYS = frozenset({
    "password", "secret", "token", "kubeconfig_token", "bearer_token",
    "client_key", "client_secret", "private_key", "pull_secret",
})

_REDACTED = "[REDACTED]"


def _redact_processor(
    logger: Any, method: str, event_dict: dict
) -> dict:
    """Strip sensitive fields (cluster credentials, pull secrets) from log records."""
    for key in list(event_dict.keys()):
        if key.lower() in _REDACT_KEYS:
            event_dict[key] = _REDACTED
    return event_dict


# ── Public API ────────────────────────────────────────────────────────────────

_configured = False


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Return a structured logger bound to the given name.

    Usage:
        log = get_logger(FRAMEWORK_SCOPE)
        log.info("deploy.begin", component="mesh", suite="t-123")
        log.info("context_setup.failed", error="namespace exists")
    """
    global _configured
    if not _configured:
        _configure_structlog()
        _configured = True
    return structlog.get_logger(name or __name__)


def framework_logger() -> structlog.stdlib.BoundLogger:
    """Logger for the ``framework`` scope used by lifecycle orchestration."""
    return get_logger(FRAMEWORK_SCOPE)


__all__ = ["FRAMEWORK_SCOPE", "get_logger", "framework_logger"]
