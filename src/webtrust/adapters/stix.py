"""Deterministic STIX ids and patterns for web content.

Observable ids are STIX 2.1 deterministic SCO ids (UUIDv5 over the ``value``
contributing property). Indicator, label and identity ids follow the OpenCTI
convention: UUIDv5 in the OpenCTI namespace over the canonical JSON of the
contributing properties. The store upserts on these ids, so both sides agree on
which record a content value maps to.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

import stix2
from stix2.canonicalization.Canonicalize import canonicalize
from stix2.patterns import (
    EqualityComparisonExpression,
    ObjectPath,
    ObservationExpression,
    StringConstant,
)

from webtrust.domain.model import ContentType

if TYPE_CHECKING:
    from webtrust.domain.model import Content, IdentityId
    from webtrust.domain.ports import RecordKeys

OPENCTI_NAMESPACE: Final = uuid.UUID("b639ff3b-00eb-42ed-aa36-a8dd6f8fb4cf")
MARKING_TLP_CLEAR: Final = "marking-definition--94868c89-83c2-464b-929b-a1a8aa3c8487"

_SCO_CLASSES: Final = {
    ContentType.DOMAIN_NAME: stix2.DomainName,
    ContentType.IPV4_ADDR: stix2.IPv4Address,
    ContentType.IPV6_ADDR: stix2.IPv6Address,
    ContentType.URL: stix2.URL,
}


def _opencti_id(prefix: str, properties: dict[str, str]) -> str:
    name = canonicalize(properties, utf8=False)
    return f"{prefix}--{uuid.uuid5(OPENCTI_NAMESPACE, name)}"


def _normalize_name(value: str) -> str:
    return value.lower().strip()


def observable_id(content: Content) -> str:
    sco = _SCO_CLASSES[content.type](value=content.value)
    return str(sco.id)


def pattern_for(content: Content) -> str:
    comparison = EqualityComparisonExpression(
        ObjectPath(str(content.type), ["value"]),
        StringConstant(content.value),
    )
    return str(ObservationExpression(comparison))


def indicator_id(pattern: str) -> str:
    return _opencti_id("indicator", {"pattern": pattern})


def label_id(value: str) -> str:
    return _opencti_id("label", {"value": _normalize_name(value)})


def identity_id(name: str, identity_class: str = "organization") -> IdentityId:
    """Standard id of an identity, as used for the ``creator`` of records."""

    return _opencti_id(
        "identity",
        {"name": _normalize_name(name), "identity_class": identity_class},
    )


@dataclass(frozen=True, slots=True)
class StixRecordKeys:
    """``RecordKeys`` implementation backed by the functions above."""

    public_marking: str = MARKING_TLP_CLEAR

    def observable_key(self, content: Content) -> str:
        return observable_id(content)

    def pattern_for(self, content: Content) -> str:
        return pattern_for(content)

    def indicator_key(self, pattern: str) -> str:
        return indicator_id(pattern)

    def label_key(self, value: str) -> str:
        return label_id(value)


if TYPE_CHECKING:
    _keys_check: RecordKeys = StixRecordKeys()
