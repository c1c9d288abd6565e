"""Domain port definitions for adapters."""

from __future__ import annotations

from .keys import RecordKeys
from .store import RecordStore

__all__ = ["RecordKeys", "RecordStore"]
