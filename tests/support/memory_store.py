"""In-memory ``RecordStore`` fake that records every write."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from itertools import count
from typing import TYPE_CHECKING, TypeVar

from webtrust.domain.model import (
    IdentityRef,
    Indicator,
    LabelRef,
    Observable,
    WebContentLabel,
)
from webtrust.domain.ports import RecordStore

TRecord = TypeVar("TRecord", Observable, Indicator)

if TYPE_CHECKING:
    from webtrust.domain.model import (
        IndicatorDraft,
        IndicatorPatch,
        ObservableDraft,
        ObservablePatch,
        RelationshipType,
    )
    from webtrust.domain.ports import RecordKeys


class DuplicateRecordError(AssertionError):
    """Raised when a record is created twice for the same standard id."""


@dataclass(frozen=True, slots=True)
class Relationship:
    from_id: str
    to_id: str
    relationship_type: RelationshipType


@dataclass
class InMemoryRecordStore:
    keys: RecordKeys
    observables: dict[str, Observable] = field(default_factory=dict)
    indicators: dict[str, Indicator] = field(default_factory=dict)
    relationships: list[Relationship] = field(default_factory=list)
    markings: dict[str, tuple[str, ...]] = field(default_factory=dict)
    calls: list[tuple[str, str]] = field(default_factory=list)
    identity_names: dict[str, str] = field(default_factory=dict)
    _labels: dict[str, str] = field(default_factory=dict)
    _sequence: count[int] = field(default_factory=lambda: count(1))

    def __post_init__(self) -> None:
        for label in WebContentLabel:
            self.register_label(label)

    # --- helpers for tests -------------------------------------------------

    def register_label(self, value: str) -> LabelRef:
        standard_id = self.keys.label_key(value)
        self._labels[standard_id] = value
        return LabelRef(value=value, standard_id=standard_id)

    def name_identity(self, standard_id: str, name: str) -> None:
        self.identity_names[standard_id] = name

    def writes(self, operation: str | None = None) -> list[tuple[str, str]]:
        return [
            call
            for call in self.calls
            if not call[0].startswith("get_") and (operation is None or call[0] == operation)
        ]

    def seed_observable(self, observable: Observable) -> Observable:
        self.observables[observable.id] = observable
        return observable

    def seed_indicator(self, indicator: Indicator) -> Indicator:
        self.indicators[indicator.id] = indicator
        return indicator

    def _next_id(self, prefix: str) -> str:
        return f"{prefix}-{next(self._sequence)}"

    def _identity(self, standard_id: str) -> IdentityRef:
        return IdentityRef(
            id=f"internal-{standard_id}",
            standard_id=standard_id,
            name=self.identity_names.get(standard_id),
        )

    @staticmethod
    def _lookup(
        records: dict[str, TRecord], record_id: str
    ) -> TRecord | None:
        if record_id in records:
            return records[record_id]
        return next((r for r in records.values() if r.standard_id == record_id), None)

    # --- RecordStore -------------------------------------------------------

    async def get_observable(self, observable_id: str) -> Observable | None:
        self.calls.append(("get_observable", observable_id))
        return self._lookup(self.observables, observable_id)

    async def get_indicator(self, indicator_id: str) -> Indicator | None:
        self.calls.append(("get_indicator", indicator_id))
        return self._lookup(self.indicators, indicator_id)

    async def create_observable(self, draft: ObservableDraft) -> Observable:
        standard_id = self.keys.observable_key(draft.content)
        self.calls.append(("create_observable", standard_id))
        if self._lookup(self.observables, standard_id) is not None:
            raise DuplicateRecordError(f"observable {standard_id} already exists")

        observable = Observable(
            id=self._next_id("observable"),
            standard_id=standard_id,
            content_type=draft.content.type,
            value=draft.content.value,
            creator=self._identity(draft.creator),
            labels=tuple(self.register_label(str(value)) for value in draft.labels),
        )
        self.observables[observable.id] = observable
        self.markings[observable.id] = draft.markings
        return observable

    async def patch_observable(self, observable_id: str, patch: ObservablePatch) -> Observable:
        self.calls.append(("patch_observable", observable_id))
        observable = self.observables[observable_id]
        if patch.creator is not None:
            observable = replace(observable, creator=self._identity(patch.creator))
        if patch.label_ids is not None:
            labels = tuple(
                LabelRef(value=self._labels.get(label_id), standard_id=label_id)
                for label_id in patch.label_ids
            )
            observable = replace(observable, labels=labels)
        self.observables[observable_id] = observable
        return observable

    async def create_indicator(self, draft: IndicatorDraft) -> Indicator:
        standard_id = self.keys.indicator_key(draft.pattern)
        self.calls.append(("create_indicator", standard_id))
        if self._lookup(self.indicators, standard_id) is not None:
            raise DuplicateRecordError(f"indicator {standard_id} already exists")

        indicator = Indicator(
            id=self._next_id("indicator"),
            standard_id=standard_id,
            pattern=draft.pattern,
            score=draft.score,
            revoked=False,
            valid_from=draft.valid_from,
            valid_until=draft.valid_until,
            creator=self._identity(draft.creator),
        )
        self.indicators[indicator.id] = indicator
        return indicator

    async def patch_indicator(self, indicator_id: str, patch: IndicatorPatch) -> Indicator:
        self.calls.append(("patch_indicator", indicator_id))
        indicator = self.indicators[indicator_id]
        changes: dict[str, object] = {
            name: value
            for name, value in (
                ("score", patch.score),
                ("revoked", patch.revoked),
                ("valid_from", patch.valid_from),
                ("valid_until", patch.valid_until),
            )
            if value is not None
        }
        if patch.creator is not None:
            changes["creator"] = self._identity(patch.creator)
        indicator = replace(indicator, **changes)
        self.indicators[indicator_id] = indicator
        return indicator

    async def create_relationship(
        self,
        from_id: str,
        to_id: str,
        relationship_type: RelationshipType,
    ) -> None:
        self.calls.append(("create_relationship", f"{from_id}->{to_id}"))
        self.relationships.append(Relationship(from_id, to_id, relationship_type))


if TYPE_CHECKING:
    def _store_check(keys: RecordKeys) -> RecordStore:
        return InMemoryRecordStore(keys)
