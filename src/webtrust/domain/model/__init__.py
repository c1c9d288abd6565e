"""Domain model for web content reputation records."""

from __future__ import annotations

from .content import WEB_SCHEMES, Content
from .enums import DEPRECATED_LABELS, ContentType, RelationshipType, Status, WebContentLabel
from .records import (
    IdentityId,
    IdentityRef,
    Indicator,
    IndicatorDraft,
    IndicatorPatch,
    LabelRef,
    Observable,
    ObservableDraft,
    ObservablePatch,
)
from .status import WebContentStatus

__all__ = [
    "DEPRECATED_LABELS",
    "WEB_SCHEMES",
    "Content",
    "ContentType",
    "IdentityId",
    "IdentityRef",
    "Indicator",
    "IndicatorDraft",
    "IndicatorPatch",
    "LabelRef",
    "Observable",
    "ObservableDraft",
    "ObservablePatch",
    "RelationshipType",
    "Status",
    "WebContentLabel",
    "WebContentStatus",
]
