"""Derive the visible reputation status from stored records."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import TYPE_CHECKING

from webtrust.domain.model import WebContentLabel, WebContentStatus

if TYPE_CHECKING:
    from webtrust.domain.model import Content, Indicator, Observable
    from webtrust.domain.ports import RecordKeys, RecordStore


# Evaluated in order; labels always win over indicator state.
_LABEL_PRECEDENCE = (
    (WebContentLabel.TRUSTED, WebContentStatus.trusted),
    (WebContentLabel.ALLOWLISTED_DOMAIN, WebContentStatus.trusted),
    (WebContentLabel.BLOCKLISTED_DOMAIN, WebContentStatus.blocked),
)


def derive_status(observable: Observable | None, indicator: Indicator | None) -> WebContentStatus:
    if observable is not None:
        for label, outcome in _LABEL_PRECEDENCE:
            if observable.has_label(label):
                return outcome(observable.creator)

    if indicator is None or indicator.revoked:
        return WebContentStatus.unknown()

    return WebContentStatus.blocked(indicator.creator)


@dataclass(slots=True)
class StatusResolver:
    store: RecordStore
    keys: RecordKeys

    async def resolve(self, content: Content) -> WebContentStatus:
        observable, indicator = await asyncio.gather(
            self.store.get_observable(self.keys.observable_key(content)),
            self.store.get_indicator(self.keys.indicator_key(self.keys.pattern_for(content))),
        )
        return derive_status(observable, indicator)
