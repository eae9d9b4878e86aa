from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
import logging
from typing import Any

import httpx

from sui_dex.infrastructure.clients.errors import GraphQLRequestError, ResponseDecodeError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GraphQLClientSettings:
    url: str
    timeout_seconds: float


def _error_message(errors: list) -> str:
    first = errors[0] if errors else {}
    if not isinstance(first, dict):
        return str(first)
    code = (first.get("extensions") or {}).get("code")
    return str(code or first.get("message") or "GraphQL request failed")


class GraphQLClient:
    def __init__(
        self,
        settings: GraphQLClientSettings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._settings = settings
        self._transport = transport

    async def request(
        self,
        query: str,
        variables: dict[str, Any] | None = None,
        extractor: Callable[[dict[str, Any]], Any] | None = None,
    ) -> Any:
        if not self._settings.url:
            raise GraphQLRequestError("DEX_GRAPHQL_URL is required for GraphQL access.")

        async with httpx.AsyncClient(
            timeout=self._settings.timeout_seconds,
            transport=self._transport,
        ) as client:
            response = await client.post(
                self._settings.url,
                json={"query": query, "variables": variables or {}},
                headers={"content-type": "application/json"},
            )
            if response.is_error and "json" not in response.headers.get("content-type", ""):
                response.raise_for_status()
            payload = response.json()

        if not isinstance(payload, dict):
            raise ResponseDecodeError(f"Unexpected GraphQL response body: {payload!r}")

        errors = payload.get("errors") or []
        if errors:
            logger.error(
                "graphql_client: could not execute graphql request errors=%s",
                errors,
            )
            raise GraphQLRequestError(_error_message(errors), errors=errors)
        response.raise_for_status()

        data = payload.get("data") or {}
        if extractor is not None:
            return extractor(data)
        return data
