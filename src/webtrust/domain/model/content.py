"""Web content value objects.

A :class:`Content` is caller-supplied and never stored verbatim. It only feeds
key and pattern derivation, so it is validated eagerly: a malformed value must
fail before anything is written to the store.
"""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass
from urllib.parse import urlsplit

from webtrust.domain.errors import InvalidContentError

from .enums import ContentType

WEB_SCHEMES = frozenset({"http", "https"})


@dataclass(frozen=True, slots=True)
class Content:
    type: ContentType
    value: str

    def __post_init__(self) -> None:
        try:
            content_type = ContentType(self.type)
        except ValueError:
            raise InvalidContentError(
                f"Unsupported content type: {self.type!r}",
                content_type=str(self.type),
                value=self.value,
            ) from None
        object.__setattr__(self, "type", content_type)
        _validate(content_type, self.value)

    @classmethod
    def domain(cls, value: str) -> Content:
        return cls(ContentType.DOMAIN_NAME, value)

    @classmethod
    def ipv4(cls, value: str) -> Content:
        return cls(ContentType.IPV4_ADDR, value)

    @classmethod
    def ipv6(cls, value: str) -> Content:
        return cls(ContentType.IPV6_ADDR, value)

    @classmethod
    def url(cls, value: str) -> Content:
        return cls(ContentType.URL, value)

    @property
    def web_hostname(self) -> str | None:
        """Hostname of an http(s) URL, ``None`` for anything else."""

        if self.type is not ContentType.URL:
            return None
        parts = urlsplit(self.value)
        if parts.scheme.lower() not in WEB_SCHEMES:
            return None
        return parts.hostname

    def __str__(self) -> str:
        return f"{self.type}:{self.value}"


def _is_host_name(value: str) -> bool:
    return bool(value) and not any(char.isspace() for char in value) and "/" not in value


def _validate(content_type: ContentType, value: str) -> None:
    def fail(reason: str) -> InvalidContentError:
        return InvalidContentError(
            f"Invalid {content_type} value {value!r}: {reason}",
            content_type=content_type,
            value=value,
        )

    if not isinstance(value, str) or not value.strip():
        raise fail("value must be a non-empty string")

    match content_type:
        case ContentType.DOMAIN_NAME:
            if not _is_host_name(value):
                raise fail("not a host name")
        case ContentType.IPV4_ADDR:
            try:
                ipaddress.IPv4Address(value)
            except ValueError as exc:
                raise fail(str(exc)) from exc
        case ContentType.IPV6_ADDR:
            try:
                ipaddress.IPv6Address(value)
            except ValueError as exc:
                raise fail(str(exc)) from exc
        case ContentType.URL:
            try:
                parts = urlsplit(value)
                # .hostname and .port parse lazily and raise on malformed netlocs
                hostname = parts.hostname
                _ = parts.port
            except ValueError as exc:
                raise fail(str(exc)) from exc
            if not parts.scheme:
                raise fail("missing scheme")
            if parts.scheme.lower() in WEB_SCHEMES:
                # the hostname is later stored as domain-name content
                if not hostname:
                    raise fail("missing host name")
                if not _is_host_name(hostname):
                    raise fail(f"{hostname!r} is not a host name")
