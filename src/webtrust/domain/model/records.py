"""Records held by the threat-intelligence store, as seen by the domain.

Records are snapshots: every operation re-reads them, nothing is cached.
``id`` is the store's internal id, ``standard_id`` the deterministic STIX id
derived from the content; lookups accept either.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from datetime import datetime

    from .content import Content
    from .enums import ContentType

IdentityId: TypeAlias = str
"""Standard id of an identity, e.g. ``identity--<uuid>``."""


@dataclass(frozen=True, slots=True)
class IdentityRef:
    """Reference to the identity that created or last re-stamped a record."""

    id: str
    standard_id: IdentityId
    name: str | None = None


@dataclass(frozen=True, slots=True)
class LabelRef:
    """Label attached to an observable; ``value`` may be missing on stored labels."""

    value: str | None
    standard_id: str


@dataclass(frozen=True, slots=True)
class Observable:
    id: str
    standard_id: str
    content_type: ContentType
    value: str
    creator: IdentityRef | None = None
    labels: tuple[LabelRef, ...] = ()

    def find_label(self, value: str) -> LabelRef | None:
        return next((label for label in self.labels if label.value == value), None)

    def has_label(self, value: str) -> bool:
        return self.find_label(value) is not None


@dataclass(frozen=True, slots=True)
class Indicator:
    id: str
    standard_id: str
    pattern: str
    score: int
    revoked: bool
    valid_from: datetime | None = None
    valid_until: datetime | None = None
    creator: IdentityRef | None = None


@dataclass(frozen=True, slots=True)
class ObservableDraft:
    """Payload for creating an observable."""

    content: Content
    creator: IdentityId
    labels: tuple[str, ...] = ()
    markings: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class ObservablePatch:
    """Field patch for an observable; ``None`` leaves a field untouched.

    ``label_ids`` replaces the whole label list.
    """

    creator: IdentityId | None = None
    label_ids: tuple[str, ...] | None = None

    @property
    def is_empty(self) -> bool:
        return self.creator is None and self.label_ids is None


@dataclass(frozen=True, slots=True)
class IndicatorDraft:
    name: str
    pattern: str
    main_observable_type: ContentType
    creator: IdentityId
    score: int
    valid_from: datetime
    valid_until: datetime
    pattern_type: str = field(default="stix")


@dataclass(frozen=True, slots=True)
class IndicatorPatch:
    creator: IdentityId | None = None
    score: int | None = None
    revoked: bool | None = None
    valid_from: datetime | None = None
    valid_until: datetime | None = None
