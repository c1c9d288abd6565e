"""Application orchestration entry points."""

from __future__ import annotations

from contextlib import asynccontextmanager
from logging import getLogger
from typing import TYPE_CHECKING

from webtrust.adapters.opencti import OpenCTIClient, OpenCTIRecordStore
from webtrust.adapters.stix import StixRecordKeys, identity_id
from webtrust.config import get_opencti_config
from webtrust.domain.web_content import WebContentClient

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Callable

    from webtrust.adapters.http_resilience import ResilientClient
    from webtrust.config import OpenCTIConfig, ResilienceConfig

log = getLogger(__name__)


@asynccontextmanager
async def open_web_content_client(
    config: OpenCTIConfig | None = None,
    *,
    client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
) -> AsyncIterator[WebContentClient]:
    """Yield a ``WebContentClient`` bound to the configured OpenCTI platform."""

    effective_config = config or get_opencti_config()
    default_identity = identity_id(effective_config.default_identity_name)
    log.info(
        "Connecting to OpenCTI at %s (default identity %s: %s)",
        effective_config.url,
        effective_config.default_identity_name,
        default_identity,
    )

    async with OpenCTIClient(config=effective_config, client_factory=client_factory) as client:
        yield WebContentClient(
            store=OpenCTIRecordStore(client),
            keys=StixRecordKeys(),
            default_identity=default_identity,
        )
