"""Externally visible reputation status of a piece of web content."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .enums import Status

if TYPE_CHECKING:
    from .records import IdentityRef


@dataclass(frozen=True, slots=True)
class WebContentStatus:
    status: Status
    actor: IdentityRef | None = None

    def __post_init__(self) -> None:
        if self.status is Status.UNKNOWN and self.actor is not None:
            raise ValueError("unknown status carries no actor")

    @classmethod
    def unknown(cls) -> WebContentStatus:
        return cls(Status.UNKNOWN)

    @classmethod
    def blocked(cls, actor: IdentityRef | None) -> WebContentStatus:
        return cls(Status.BLOCKED, actor)

    @classmethod
    def trusted(cls, actor: IdentityRef | None) -> WebContentStatus:
        return cls(Status.TRUSTED, actor)

    @property
    def actor_id(self) -> str | None:
        return self.actor.standard_id if self.actor is not None else None
