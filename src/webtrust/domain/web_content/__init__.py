"""Web content reputation: record reconciliation, status and transitions."""

from __future__ import annotations

from .client import WebContentClient
from .reconciler import ACTIVE_SCORE, INACTIVE_SCORE, VALIDITY_PERIOD, RecordReconciler, utc_now
from .status import StatusResolver, derive_status

__all__ = [
    "ACTIVE_SCORE",
    "INACTIVE_SCORE",
    "VALIDITY_PERIOD",
    "RecordReconciler",
    "StatusResolver",
    "WebContentClient",
    "derive_status",
    "utc_now",
]
