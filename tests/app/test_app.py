from __future__ import annotations

import asyncio

from tests.support.identities import SEAL_IDENTITY
from tests.support.opencti import (
    GraphQLRecorder,
    identity_payload,
    indicator_payload,
    make_config,
    observable_payload,
)
from webtrust.app import open_web_content_client
from webtrust.domain.model import Content, Status, WebContentStatus


def test_client_is_wired_to_opencti_with_default_identity() -> None:
    recorder = GraphQLRecorder()
    recorder.reply({"stixCyberObservable": None})
    recorder.reply({"indicator": None})

    async def scenario() -> tuple[str, WebContentStatus]:
        async with open_web_content_client(
            make_config(), client_factory=recorder.client_factory()
        ) as client:
            return client.default_identity, await client.get_status(Content.domain("x.invalid"))

    default_identity, status = asyncio.run(scenario())

    assert default_identity == SEAL_IDENTITY
    assert status == WebContentStatus.unknown()
    assert len(recorder.requests) == 2


def test_active_indicator_reports_blocked_through_opencti() -> None:
    recorder = GraphQLRecorder()
    recorder.reply({"indicator": indicator_payload(creator=identity_payload(SEAL_IDENTITY, "SEAL"))})
    recorder.reply({"stixCyberObservable": None})

    async def scenario() -> WebContentStatus:
        async with open_web_content_client(
            make_config(), client_factory=recorder.client_factory()
        ) as client:
            return await client.get_status(Content.domain("example.invalid"))

    status = asyncio.run(scenario())

    assert status.status is Status.BLOCKED
    assert status.actor_id == SEAL_IDENTITY
    assert status.actor is not None
    assert status.actor.name == "SEAL"


def test_block_of_fresh_content_through_opencti() -> None:
    recorder = GraphQLRecorder()
    recorder.reply({"stixCyberObservable": None})
    recorder.reply({"stixCyberObservableAdd": observable_payload(value="fresh.invalid")})
    recorder.reply({"indicator": None})
    recorder.reply({"indicatorAdd": indicator_payload(pattern="[domain-name:value = 'fresh.invalid']")})
    recorder.reply({"stixCoreRelationshipAdd": {"id": "rel-1", "standard_id": "relationship--1"}})

    async def scenario() -> None:
        async with open_web_content_client(
            make_config(), client_factory=recorder.client_factory()
        ) as client:
            await client.block(Content.domain("fresh.invalid"))

    asyncio.run(scenario())

    operations = [recorder.body(index)["query"] for index in range(len(recorder.requests))]
    assert [str(query).split("(")[0].split()[-1] for query in operations] == [
        "WebTrustObservable",
        "WebTrustObservableAdd",
        "WebTrustIndicator",
        "WebTrustIndicatorAdd",
        "WebTrustRelationshipAdd",
    ]
    assert recorder.variables(1)["createdBy"] == SEAL_IDENTITY
    assert recorder.variables(4)["input"] == {
        "fromId": "f1b7c1a0-0000-4000-8000-000000000002",
        "toId": "f1b7c1a0-0000-4000-8000-000000000001",
        "relationship_type": "based-on",
    }
    assert recorder.responses == []
