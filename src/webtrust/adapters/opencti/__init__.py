"""OpenCTI record store adapter package."""

from __future__ import annotations

from .client import GRAPHQL_PATH, OpenCTIAPIError, OpenCTIClient
from .store import OpenCTIRecordStore
from .translator import content_type_for, entity_type_for

__all__ = [
    "GRAPHQL_PATH",
    "OpenCTIAPIError",
    "OpenCTIClient",
    "OpenCTIRecordStore",
    "content_type_for",
    "entity_type_for",
]
