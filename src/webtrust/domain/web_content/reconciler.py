"""Idempotent create-or-update of observables and indicators.

Responsibilities of this stage:
- look records up by their deterministic keys and create them when absent
- converge the observable label set and creator towards the requested state
- refresh (and revive) indicator validity windows

Every call re-reads the store. Nothing here is transactional: a failure halfway
through leaves earlier writes in place, and repeating the call converges.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from logging import getLogger
from typing import TYPE_CHECKING

from webtrust.domain.model import (
    Content,
    IndicatorDraft,
    IndicatorPatch,
    ObservableDraft,
    ObservablePatch,
    RelationshipType,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from webtrust.domain.model import IdentityId, Indicator, Observable
    from webtrust.domain.ports import RecordKeys, RecordStore

log = getLogger(__name__)

ACTIVE_SCORE = 100
INACTIVE_SCORE = 0
VALIDITY_PERIOD = timedelta(days=365)


def utc_now() -> datetime:
    return datetime.now(UTC)


@dataclass(slots=True)
class RecordReconciler:
    store: RecordStore
    keys: RecordKeys
    clock: Callable[[], datetime] = field(default=utc_now)

    async def find_observable(self, content: Content) -> Observable | None:
        return await self.store.get_observable(self.keys.observable_key(content))

    async def find_indicator(self, content: Content) -> Indicator | None:
        pattern = self.keys.pattern_for(content)
        return await self.store.get_indicator(self.keys.indicator_key(pattern))

    async def reconcile_observable(
        self,
        content: Content,
        *,
        creator: IdentityId,
        add_labels: Iterable[str] = (),
        remove_labels: Iterable[str] = (),
    ) -> Observable:
        existing = await self.find_observable(content)
        if existing is None:
            return await self._create_observable(content, creator=creator, labels=tuple(add_labels))
        return await self.update_observable(
            existing,
            creator=creator,
            add_labels=add_labels,
            remove_labels=remove_labels,
        )

    async def update_observable(
        self,
        observable: Observable,
        *,
        creator: IdentityId,
        add_labels: Iterable[str] = (),
        remove_labels: Iterable[str] = (),
    ) -> Observable:
        """Patch ``observable`` towards the requested labels and creator.

        The delta is computed against the label list read with ``observable``.
        No mutation is issued when both labels and creator already match.
        """

        remove = set(remove_labels)
        to_add = [value for value in dict.fromkeys(add_labels) if not observable.has_label(value)]
        to_remove = [label for label in observable.labels if label.value in remove]

        label_ids: tuple[str, ...] | None = None
        if to_add or to_remove:
            kept = [label.standard_id for label in observable.labels if label.value not in remove]
            label_ids = (*kept, *(self.keys.label_key(value) for value in to_add))

        current_creator = observable.creator.standard_id if observable.creator else None
        patch = ObservablePatch(
            creator=creator if creator != current_creator else None,
            label_ids=label_ids,
        )
        if patch.is_empty:
            log.debug("Observable %s already up to date", observable.standard_id)
            return observable

        log.info(
            "Patching observable %s: creator=%s, add=%s, remove=%s",
            observable.standard_id,
            patch.creator,
            to_add,
            [label.value for label in to_remove],
        )
        return await self.store.patch_observable(observable.id, patch)

    async def _create_observable(
        self,
        content: Content,
        *,
        creator: IdentityId,
        labels: tuple[str, ...],
    ) -> Observable:
        log.info("Creating observable for %s (labels=%s)", content, list(labels))
        observable = await self.store.create_observable(
            ObservableDraft(
                content=content,
                creator=creator,
                labels=labels,
                markings=(self.keys.public_marking,),
            )
        )

        hostname = content.web_hostname
        if hostname is not None:
            # domain-name content has no hostname, so this recurses at most once
            domain = await self.reconcile_observable(Content.domain(hostname), creator=creator)
            await self.store.create_relationship(
                observable.id, domain.id, RelationshipType.RELATED_TO
            )
            log.info("Linked %s to domain observable %s", content, domain.standard_id)

        return observable

    async def reconcile_indicator(
        self,
        content: Content,
        *,
        creator: IdentityId,
        observable: Observable,
    ) -> Indicator:
        """Create the indicator for ``content`` or revive the existing one."""

        now = self.clock()
        valid_until = now + VALIDITY_PERIOD
        pattern = self.keys.pattern_for(content)

        existing = await self.store.get_indicator(self.keys.indicator_key(pattern))
        if existing is not None:
            log.info(
                "Refreshing indicator %s (revoked=%s) until %s",
                existing.standard_id,
                existing.revoked,
                valid_until.isoformat(),
            )
            return await self.store.patch_indicator(
                existing.id,
                IndicatorPatch(
                    creator=creator,
                    score=ACTIVE_SCORE,
                    revoked=False,
                    valid_from=now,
                    valid_until=valid_until,
                ),
            )

        log.info("Creating indicator %s", pattern)
        indicator = await self.store.create_indicator(
            IndicatorDraft(
                name=content.value,
                pattern=pattern,
                main_observable_type=content.type,
                creator=creator,
                score=ACTIVE_SCORE,
                valid_from=now,
                valid_until=valid_until,
            )
        )
        await self.store.create_relationship(indicator.id, observable.id, RelationshipType.BASED_ON)
        return indicator

    async def revoke_indicator(self, indicator: Indicator) -> Indicator:
        if indicator.revoked:
            return indicator
        log.info("Revoking indicator %s", indicator.standard_id)
        return await self.store.patch_indicator(
            indicator.id,
            IndicatorPatch(score=INACTIVE_SCORE, revoked=True),
        )
