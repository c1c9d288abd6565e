from __future__ import annotations

import pytest

from tests.support.identities import ACME_IDENTITY, SEAL_IDENTITY, FakeClock
from tests.support.memory_store import InMemoryRecordStore
from webtrust.adapters.stix import StixRecordKeys
from webtrust.domain.web_content import RecordReconciler, WebContentClient


@pytest.fixture
def keys() -> StixRecordKeys:
    return StixRecordKeys()


@pytest.fixture
def store(keys: StixRecordKeys) -> InMemoryRecordStore:
    memory_store = InMemoryRecordStore(keys)
    memory_store.name_identity(SEAL_IDENTITY, "SEAL")
    memory_store.name_identity(ACME_IDENTITY, "ACME")
    return memory_store


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def reconciler(
    store: InMemoryRecordStore,
    keys: StixRecordKeys,
    clock: FakeClock,
) -> RecordReconciler:
    return RecordReconciler(store=store, keys=keys, clock=clock)


@pytest.fixture
def client(
    store: InMemoryRecordStore,
    keys: StixRecordKeys,
    clock: FakeClock,
) -> WebContentClient:
    return WebContentClient(store, keys, SEAL_IDENTITY, clock=clock)
