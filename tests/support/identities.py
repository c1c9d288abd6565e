"""Shared identities and time helpers for tests."""

from __future__ import annotations

from datetime import UTC, datetime

from webtrust.adapters.stix import identity_id

SEAL_IDENTITY = identity_id("SEAL")
ACME_IDENTITY = identity_id("ACME")
FIXED_NOW = datetime(2025, 3, 1, 12, 0, tzinfo=UTC)


class FakeClock:
    """Deterministic clock that tests can move forward."""

    def __init__(self, now: datetime = FIXED_NOW) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now
