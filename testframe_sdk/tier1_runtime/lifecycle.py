"""
testframe_sdk.tier1_runtime.lifecycle
──────────────────────────────────────
Begin/succeeded/failed markers around a setup operation. The closing marker
is emitted on scope exit, so it fires exactly once on every exit path.

Usage::

    with lifecycle("deploy", suite=ctx.settings.test_id, component="mesh"):
        instance = provision(ctx)
"""
from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

from testframe_sdk.tier0_core.logging import framework_logger


@contextmanager
def lifecycle(operation: str, *, suite: str, **fields: Any) -> Generator[None, None, None]:
    """
    Log ``<operation>.begin`` on entry, then ``<operation>.succeeded`` or
    ``<operation>.failed`` on exit. Exceptions are re-raised unchanged.
    """
    log = framework_logger()
    log.info(f"{operation}.begin", suite=suite, **fields)
    try:
        yield
    except BaseException as exc:
        error = getattr(exc, "user_message", None) or str(exc)
        log.info(f"{operation}.failed", suite=suite, error=error, **fields)
        raise
    log.info(f"{operation}.succeeded", suite=suite, **fields)


__all__ = ["lifecycle"]
