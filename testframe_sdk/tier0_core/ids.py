"""
testframe_sdk.tier0_core.ids
────────────────────────────
ID generation utilities for suites and tracked resources. Resource IDs are
short, prefixed, and unique within a run so they read well in logs.
"""
from __future__ import annotations

import uuid
from typing import Literal


def new_uuid4() -> str:
    """Generate a random UUID v4 string."""
    return str(uuid.uuid4())


def new_resource_id(prefix: str = "resource") -> str:
    """Generate a resource ID such as ``mesh-1f2e3d4c``."""
    return f"{prefix}-{uuid.uuid4().hex[:8]}"


def new_id(kind: Literal["uuid4", "resource"] = "resource", prefix: str = "resource") -> str:
    """
    Generate a new framework ID using the specified kind.
    Default is a prefixed resource ID.
    """
    if kind == "uuid4":
        return new_uuid4()
    elif kind == "resource":
        return new_resource_id(prefix)
    raise ValueError(f"Unknown ID kind: {kind!r}. Use 'uuid4' or 'resource'.")


__all__ = ["new_uuid4", "new_resource_id", "new_id"]
