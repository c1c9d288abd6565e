"""Helpers for driving the OpenCTI adapter against ``httpx.MockTransport``."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import httpx

from webtrust.adapters.http_resilience import ResilientClient
from webtrust.config import OpenCTIConfig, ResilienceConfig, RetryPolicy

if TYPE_CHECKING:
    from collections.abc import Callable

OPENCTI_URL = "https://opencti.example.invalid"
OPENCTI_TOKEN = "00000000-0000-0000-0000-000000000000"


def make_config(*, retries: int = 0) -> OpenCTIConfig:
    return OpenCTIConfig(
        url=OPENCTI_URL,
        token=OPENCTI_TOKEN,
        default_identity_name="SEAL",
        resilience=ResilienceConfig(
            name="opencti-test",
            base_url=f"{OPENCTI_URL}/",
            timeout_seconds=5.0,
            retry=RetryPolicy(total=retries, backoff_factor=0.0, backoff_jitter=0.0),
            default_headers={"Authorization": f"Bearer {OPENCTI_TOKEN}"},
        ),
    )


@dataclass
class GraphQLRecorder:
    """Answers GraphQL requests from queued canned payloads.

    A queued ``data`` payload answers the first request whose query selects its
    top-level field, so concurrent reads may arrive in any order.
    """

    responses: list[httpx.Response | dict[str, object]] = field(default_factory=list)
    requests: list[httpx.Request] = field(default_factory=list)

    def reply(self, data: dict[str, object]) -> None:
        self.responses.append({"data": data})

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.responses.pop(self._match(request))
        if isinstance(response, httpx.Response):
            return response
        return httpx.Response(200, json=response)

    def _match(self, request: httpx.Request) -> int:
        query = str(json.loads(request.content).get("query", ""))
        for index, response in enumerate(self.responses):
            data = response.get("data") if isinstance(response, dict) else None
            if isinstance(data, dict) and any(f"{name}(" in query for name in data):
                return index
        return 0

    def body(self, index: int = -1) -> dict[str, object]:
        return json.loads(self.requests[index].content)

    def variables(self, index: int = -1) -> dict[str, object]:
        variables = self.body(index)["variables"]
        assert isinstance(variables, dict)
        return variables

    def client_factory(self) -> Callable[[ResilienceConfig], ResilientClient]:
        def factory(resilience: ResilienceConfig) -> ResilientClient:
            return ResilientClient(resilience, transport=httpx.MockTransport(self.handler))

        return factory


def identity_payload(standard_id: str, name: str) -> dict[str, object]:
    return {"id": f"internal-{name.lower()}", "standard_id": standard_id, "name": name}


def observable_payload(
    *,
    entity_type: str = "Domain-Name",
    value: str = "example.invalid",
    standard_id: str = "domain-name--8a4b5ec2-8a2c-5a0e-9c3c-4f0f6f2f3a11",
    creator: dict[str, object] | None = None,
    labels: list[dict[str, object]] | None = None,
) -> dict[str, object]:
    return {
        "id": "f1b7c1a0-0000-4000-8000-000000000001",
        "standard_id": standard_id,
        "entity_type": entity_type,
        "observable_value": value,
        "createdBy": creator,
        "objectLabel": labels,
    }


def indicator_payload(
    *,
    pattern: str = "[domain-name:value = 'example.invalid']",
    revoked: bool | None = False,
    score: int | None = 100,
    creator: dict[str, object] | None = None,
) -> dict[str, object]:
    return {
        "id": "f1b7c1a0-0000-4000-8000-000000000002",
        "standard_id": "indicator--3d2f5a4e-1c1b-5b8e-9a6f-2b9a0e4f6c22",
        "pattern": pattern,
        "revoked": revoked,
        "x_opencti_score": score,
        "valid_from": "2025-03-01T12:00:00.000Z",
        "valid_until": "2026-03-01T12:00:00.000Z",
        "createdBy": creator,
    }
