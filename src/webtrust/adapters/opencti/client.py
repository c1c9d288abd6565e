"""OpenCTI GraphQL API client."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from webtrust.adapters.http_resilience import ResilientClient

from .schema import GraphQLResponse

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType

    from webtrust.config.http_resilience import ResilienceConfig
    from webtrust.config.opencti import OpenCTIConfig

    from .schema import GraphQLError

log = getLogger(__name__)

GRAPHQL_PATH = "graphql"


class OpenCTIAPIError(RuntimeError):
    """Raised when the OpenCTI API answers with GraphQL errors or no data."""

    def __init__(self, message: str, *, errors: list[GraphQLError] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []

    @property
    def codes(self) -> list[str]:
        return [error.code for error in self.errors if error.code]


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


class OpenCTIClient:
    """Low-level GraphQL client for the OpenCTI API.

    One underlying HTTP client is opened per ``OpenCTIClient`` and shared by all
    requests; use it as an async context manager to close it.
    """

    def __init__(
        self,
        *,
        config: OpenCTIConfig,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        self._config = config
        factory = client_factory or _default_client_factory
        self._http = factory(config.resilience)

    async def __aenter__(self) -> OpenCTIClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def execute(self, query: str, variables: dict[str, object]) -> dict[str, object]:
        """Run ``query`` and return its ``data`` object.

        HTTP-level failures raise ``httpx.HTTPStatusError``; GraphQL-level
        failures raise :class:`OpenCTIAPIError`.
        """

        response = await self._http.post(
            GRAPHQL_PATH,
            json={"query": query, "variables": variables},
        )
        response.raise_for_status()

        payload = response.json()
        if not isinstance(payload, dict):
            raise OpenCTIAPIError("Unexpected OpenCTI response payload")

        result = GraphQLResponse.model_validate(payload)
        if result.errors:
            messages = "; ".join(error.message for error in result.errors)
            log.error("OpenCTI API error: %s", messages)
            raise OpenCTIAPIError(messages, errors=result.errors)
        if result.data is None:
            raise OpenCTIAPIError("OpenCTI response carries no data")

        return result.data
