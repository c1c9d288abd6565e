"""Caller-facing block/unblock/trust/untrust transitions for web content."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from webtrust.domain.model import DEPRECATED_LABELS, WebContentLabel

from .reconciler import RecordReconciler, utc_now
from .status import StatusResolver

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import datetime

    from webtrust.domain.model import (
        Content,
        IdentityId,
        Indicator,
        Observable,
        WebContentStatus,
    )
    from webtrust.domain.ports import RecordKeys, RecordStore

log = getLogger(__name__)

_ALL_STATE_LABELS = (WebContentLabel.TRUSTED, *DEPRECATED_LABELS)


class WebContentClient:
    """Move web content between the unknown, blocked and trusted states.

    ``default_identity`` is the creator stamped on records whenever an operation is
    called without an explicit ``creator``. Every operation re-stamps the creator
    on the records it touches, so the last writer owns them.
    """

    def __init__(
        self,
        store: RecordStore,
        keys: RecordKeys,
        default_identity: IdentityId,
        *,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._default_identity = default_identity
        self._reconciler = RecordReconciler(store=store, keys=keys, clock=clock)
        self._resolver = StatusResolver(store=store, keys=keys)

    @property
    def default_identity(self) -> IdentityId:
        return self._default_identity

    async def get_status(self, content: Content) -> WebContentStatus:
        return await self._resolver.resolve(content)

    async def block(self, content: Content, creator: IdentityId | None = None) -> Indicator:
        creator = creator or self._default_identity
        log.info("Blocking %s as %s", content, creator)

        observable = await self._reconciler.reconcile_observable(
            content,
            creator=creator,
            remove_labels=_ALL_STATE_LABELS,
        )
        return await self._reconciler.reconcile_indicator(
            content,
            creator=creator,
            observable=observable,
        )

    async def unblock(
        self, content: Content, creator: IdentityId | None = None
    ) -> Indicator | None:
        """Revoke the indicator for ``content``; the trust label is left alone."""

        creator = creator or self._default_identity
        log.info("Unblocking %s as %s", content, creator)

        observable = await self._reconciler.find_observable(content)
        if observable is not None:
            await self._reconciler.update_observable(
                observable,
                creator=creator,
                remove_labels=DEPRECATED_LABELS,
            )

        indicator = await self._reconciler.find_indicator(content)
        if indicator is None:
            return None
        return await self._reconciler.revoke_indicator(indicator)

    async def trust(self, content: Content, creator: IdentityId | None = None) -> Observable:
        creator = creator or self._default_identity
        log.info("Trusting %s as %s", content, creator)

        await self.unblock(content, creator)
        return await self._reconciler.reconcile_observable(
            content,
            creator=creator,
            add_labels=(WebContentLabel.TRUSTED,),
            remove_labels=DEPRECATED_LABELS,
        )

    async def untrust(
        self, content: Content, creator: IdentityId | None = None
    ) -> Observable | None:
        creator = creator or self._default_identity
        log.info("Untrusting %s as %s", content, creator)

        observable = await self._reconciler.find_observable(content)
        if observable is None:
            return None
        return await self._reconciler.update_observable(
            observable,
            creator=creator,
            remove_labels=_ALL_STATE_LABELS,
        )
