from __future__ import annotations

from enum import Enum


class LeaveStatus(str, Enum):
    """Well-known leave statuses. The stored value is free text."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class Readiness(str, Enum):
    """Lifecycle of the in-memory mirror."""

    LOADING = "loading"
    READY = "ready"
    DEGRADED = "degraded"


class WritePolicy(str, Enum):
    """Order in which a write touches the mirror and the store."""

    MIRROR_FIRST = "mirror_first"
    STORE_FIRST = "store_first"


class WriteOutcome(str, Enum):
    APPLIED = "applied"
    PARTIALLY_APPLIED = "partially_applied"
    REJECTED = "rejected"
