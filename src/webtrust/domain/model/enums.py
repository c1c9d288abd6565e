"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class ContentType(StrEnum):
    """STIX cyber observable types that count as web content."""

    DOMAIN_NAME = "domain-name"
    IPV4_ADDR = "ipv4-addr"
    IPV6_ADDR = "ipv6-addr"
    URL = "url"


class WebContentLabel(StrEnum):
    """Label values used to encode trust/block state on an observable."""

    TRUSTED = "trusted web content"

    # Legacy tags: still read and cleaned up, never written.
    ALLOWLISTED_DOMAIN = "allowlisted domain"
    BLOCKLISTED_DOMAIN = "blocklisted domain"


DEPRECATED_LABELS: tuple[WebContentLabel, ...] = (
    WebContentLabel.ALLOWLISTED_DOMAIN,
    WebContentLabel.BLOCKLISTED_DOMAIN,
)


class Status(StrEnum):
    UNKNOWN = "unknown"
    BLOCKED = "blocked"
    TRUSTED = "trusted"


class RelationshipType(StrEnum):
    BASED_ON = "based-on"
    RELATED_TO = "related-to"
