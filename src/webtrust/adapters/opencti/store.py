"""``RecordStore`` implementation backed by the OpenCTI GraphQL API."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from webtrust.domain.ports import RecordStore

from . import queries
from .schema import (
    IndicatorAddData,
    IndicatorPatchData,
    IndicatorQueryData,
    ObservableAddData,
    ObservablePatchData,
    ObservableQueryData,
    RelationshipAddData,
)
from .translator import (
    indicator_add_input,
    indicator_patch_input,
    observable_add_variables,
    observable_patch_input,
    translate_indicator,
    translate_observable,
)

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

    from .client import OpenCTIClient

log = getLogger(__name__)


class OpenCTIRecordStore:
    def __init__(self, client: OpenCTIClient) -> None:
        self._client = client

    async def get_observable(self, observable_id: str) -> Observable | None:
        data = await self._client.execute(queries.GET_OBSERVABLE, {"id": observable_id})
        payload = ObservableQueryData.model_validate(data).stix_cyber_observable
        return translate_observable(payload) if payload is not None else None

    async def get_indicator(self, indicator_id: str) -> Indicator | None:
        data = await self._client.execute(queries.GET_INDICATOR, {"id": indicator_id})
        payload = IndicatorQueryData.model_validate(data).indicator
        return translate_indicator(payload) if payload is not None else None

    async def create_observable(self, draft: ObservableDraft) -> Observable:
        data = await self._client.execute(queries.ADD_OBSERVABLE, observable_add_variables(draft))
        payload = ObservableAddData.model_validate(data).stix_cyber_observable_add
        return translate_observable(payload)

    async def patch_observable(self, observable_id: str, patch: ObservablePatch) -> Observable:
        data = await self._client.execute(
            queries.PATCH_OBSERVABLE,
            {"id": observable_id, "input": observable_patch_input(patch)},
        )
        edit = ObservablePatchData.model_validate(data).stix_cyber_observable_edit
        return translate_observable(edit.field_patch)

    async def create_indicator(self, draft: IndicatorDraft) -> Indicator:
        data = await self._client.execute(
            queries.ADD_INDICATOR,
            {"input": indicator_add_input(draft)},
        )
        return translate_indicator(IndicatorAddData.model_validate(data).indicator_add)

    async def patch_indicator(self, indicator_id: str, patch: IndicatorPatch) -> Indicator:
        data = await self._client.execute(
            queries.PATCH_INDICATOR,
            {"id": indicator_id, "input": indicator_patch_input(patch)},
        )
        return translate_indicator(IndicatorPatchData.model_validate(data).indicator_field_patch)

    async def create_relationship(
        self,
        from_id: str,
        to_id: str,
        relationship_type: RelationshipType,
    ) -> None:
        data = await self._client.execute(
            queries.ADD_RELATIONSHIP,
            {
                "input": {
                    "fromId": from_id,
                    "toId": to_id,
                    "relationship_type": str(relationship_type),
                }
            },
        )
        relationship = RelationshipAddData.model_validate(data).stix_core_relationship_add
        log.debug("Created %s relationship %s", relationship_type, relationship.standard_id)


if TYPE_CHECKING:
    def _store_check(client: OpenCTIClient) -> RecordStore:
        return OpenCTIRecordStore(client)
