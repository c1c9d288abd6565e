"""Translate OpenCTI payloads into domain records and domain edits into payloads."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final, TypeAlias

from webtrust.domain.model import (
    ContentType,
    IdentityRef,
    Indicator,
    LabelRef,
    Observable,
)

if TYPE_CHECKING:
    from datetime import datetime

    from webtrust.domain.model import (
        IndicatorDraft,
        IndicatorPatch,
        ObservableDraft,
        ObservablePatch,
    )

    from .schema import IdentityPayload, IndicatorPayload, ObservablePayload

# content type -> (OpenCTI entity type, typed add-input argument name)
OBSERVABLE_TYPES: Final[dict[ContentType, tuple[str, str]]] = {
    ContentType.DOMAIN_NAME: ("Domain-Name", "DomainName"),
    ContentType.IPV4_ADDR: ("IPv4-Addr", "IPv4Addr"),
    ContentType.IPV6_ADDR: ("IPv6-Addr", "IPv6Addr"),
    ContentType.URL: ("Url", "Url"),
}

_CONTENT_TYPES_BY_ENTITY: Final = {
    entity_type.lower(): content_type
    for content_type, (entity_type, _argument) in OBSERVABLE_TYPES.items()
}

EditInput: TypeAlias = dict[str, object]


def entity_type_for(content_type: ContentType) -> str:
    return OBSERVABLE_TYPES[content_type][0]


def content_type_for(entity_type: str) -> ContentType:
    try:
        return _CONTENT_TYPES_BY_ENTITY[entity_type.lower()]
    except KeyError:
        raise ValueError(f"Unsupported observable entity type: {entity_type}") from None


def translate_identity(payload: IdentityPayload | None) -> IdentityRef | None:
    if payload is None:
        return None
    return IdentityRef(id=payload.id, standard_id=payload.standard_id, name=payload.name)


def translate_observable(payload: ObservablePayload) -> Observable:
    return Observable(
        id=payload.id,
        standard_id=payload.standard_id,
        content_type=content_type_for(payload.entity_type),
        value=payload.observable_value,
        creator=translate_identity(payload.created_by),
        labels=tuple(
            LabelRef(value=label.value, standard_id=label.standard_id)
            for label in payload.object_label
        ),
    )


def translate_indicator(payload: IndicatorPayload) -> Indicator:
    return Indicator(
        id=payload.id,
        standard_id=payload.standard_id,
        pattern=payload.pattern,
        score=payload.score if payload.score is not None else 0,
        revoked=payload.revoked,
        valid_from=payload.valid_from,
        valid_until=payload.valid_until,
        creator=translate_identity(payload.created_by),
    )


def _timestamp(value: datetime) -> str:
    return value.isoformat()


def observable_add_variables(draft: ObservableDraft) -> dict[str, object]:
    entity_type, argument = OBSERVABLE_TYPES[draft.content.type]
    return {
        "type": entity_type,
        "createdBy": draft.creator,
        "objectMarking": list(draft.markings),
        "objectLabel": [str(label) for label in draft.labels],
        argument: {"value": draft.content.value},
    }


def observable_patch_input(patch: ObservablePatch) -> list[EditInput]:
    edits: list[EditInput] = []
    if patch.creator is not None:
        edits.append({"key": "createdBy", "value": [patch.creator]})
    if patch.label_ids is not None:
        edits.append({"key": "objectLabel", "value": list(patch.label_ids)})
    return edits


def indicator_add_input(draft: IndicatorDraft) -> dict[str, object]:
    return {
        "createdBy": draft.creator,
        "name": draft.name,
        "pattern_type": draft.pattern_type,
        "pattern": draft.pattern,
        "x_opencti_main_observable_type": entity_type_for(draft.main_observable_type),
        "x_opencti_score": draft.score,
        "valid_from": _timestamp(draft.valid_from),
        "valid_until": _timestamp(draft.valid_until),
    }


def indicator_patch_input(patch: IndicatorPatch) -> list[EditInput]:
    edits: list[EditInput] = []
    if patch.valid_from is not None:
        edits.append({"key": "valid_from", "value": [_timestamp(patch.valid_from)]})
    if patch.valid_until is not None:
        edits.append({"key": "valid_until", "value": [_timestamp(patch.valid_until)]})
    if patch.score is not None:
        edits.append({"key": "x_opencti_score", "value": [patch.score]})
    if patch.revoked is not None:
        edits.append({"key": "revoked", "value": [patch.revoked]})
    if patch.creator is not None:
        edits.append({"key": "createdBy", "value": [patch.creator]})
    return edits
