"""Port for the external threat-intelligence record store."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from webtrust.domain.model import (
        Indicator,
        IndicatorDraft,
        IndicatorPatch,
        Observable,
        ObservableDraft,
        ObservablePatch,
        RelationshipType,
    )


@runtime_checkable
class RecordStore(Protocol):
    """Key-addressable store of observables, indicators and their relationships.

    Lookups return ``None`` for absent records; absence is a normal state, not an
    error. Transport, auth and validation failures propagate to the caller.
    """

    async def get_observable(self, observable_id: str) -> Observable | None: ...

    async def get_indicator(self, indicator_id: str) -> Indicator | None: ...

    async def create_observable(self, draft: ObservableDraft) -> Observable: ...

    async def patch_observable(self, observable_id: str, patch: ObservablePatch) -> Observable: ...

    async def create_indicator(self, draft: IndicatorDraft) -> Indicator: ...

    async def patch_indicator(self, indicator_id: str, patch: IndicatorPatch) -> Indicator: ...

    async def create_relationship(
        self,
        from_id: str,
        to_id: str,
        relationship_type: RelationshipType,
    ) -> None: ...
