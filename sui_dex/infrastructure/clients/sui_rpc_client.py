from __future__ import annotations

from dataclasses import dataclass
import itertools
import logging
from typing import Any

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from sui_dex.domain.entities.coin import CoinBalance
from sui_dex.domain.entities.move_module import MoveModule
from sui_dex.domain.entities.sui_object import OwnedObjectsPage, SuiObject
from sui_dex.infrastructure.clients.errors import ResponseDecodeError, SuiRpcError
from sui_dex.infrastructure.mappers.sui_rpc_mapper import (
    map_coin_balance,
    map_move_module,
    map_object_responses,
    map_owned_objects_page,
)
from sui_dex.infrastructure.schemas.sui_rpc import (
    CoinBalanceModel,
    NormalizedMoveModuleModel,
    PaginatedObjectsResponseModel,
    RpcEnvelopeModel,
    SuiObjectResponseModel,
)


logger = logging.getLogger(__name__)

_OBJECT_RESPONSES = TypeAdapter(list[SuiObjectResponseModel])
_COIN_BALANCES = TypeAdapter(list[CoinBalanceModel])


@dataclass(frozen=True)
class SuiRpcClientSettings:
    url: str
    timeout_seconds: float


class SuiRpcClient:
    def __init__(
        self,
        settings: SuiRpcClientSettings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._settings = settings
        self._transport = transport
        self._ids = itertools.count(1)

    async def get_owned_objects(
        self,
        *,
        owner: str,
        filter: dict[str, Any] | None = None,
        options: dict[str, bool] | None = None,
        cursor: str | None = None,
        limit: int | None = None,
    ) -> OwnedObjectsPage:
        query: dict[str, Any] = {"options": options or {}}
        if filter is not None:
            query["filter"] = filter
        result = await self._call("suix_getOwnedObjects", [owner, query, cursor, limit])
        page = self._decode("suix_getOwnedObjects", PaginatedObjectsResponseModel, result)
        return map_owned_objects_page(page)

    async def multi_get_objects(
        self,
        *,
        ids: list[str],
        options: dict[str, bool] | None = None,
    ) -> list[SuiObject]:
        result = await self._call("sui_multiGetObjects", [ids, options or {}])
        items = self._decode("sui_multiGetObjects", _OBJECT_RESPONSES, result)
        return map_object_responses(items)

    async def get_all_balances(self, *, owner: str) -> list[CoinBalance]:
        result = await self._call("suix_getAllBalances", [owner])
        items = self._decode("suix_getAllBalances", _COIN_BALANCES, result)
        return [map_coin_balance(item) for item in items]

    async def get_normalized_move_module(self, *, package: str, module: str) -> MoveModule:
        result = await self._call("sui_getNormalizedMoveModule", [package, module])
        model = self._decode("sui_getNormalizedMoveModule", NormalizedMoveModuleModel, result)
        return map_move_module(model)

    async def _call(self, method: str, params: list[Any]) -> Any:
        request_id = next(self._ids)
        async with httpx.AsyncClient(
            timeout=self._settings.timeout_seconds,
            transport=self._transport,
        ) as client:
            response = await client.post(
                self._settings.url,
                json={"jsonrpc": "2.0", "id": request_id, "method": method, "params": params},
            )
            response.raise_for_status()
            payload = response.json()

        envelope = self._decode(method, RpcEnvelopeModel, payload)
        if envelope.error is not None:
            logger.error(
                "sui_rpc_client: rpc_error method=%s code=%s message=%s",
                method,
                envelope.error.code,
                envelope.error.message,
            )
            raise SuiRpcError(envelope.error.message, code=envelope.error.code, method=method)
        return envelope.result

    @staticmethod
    def _decode(method: str, schema: type[BaseModel] | TypeAdapter, payload: Any) -> Any:
        try:
            if isinstance(schema, TypeAdapter):
                return schema.validate_python(payload)
            return schema.model_validate(payload)
        except ValidationError as exc:
            raise ResponseDecodeError(f"Unexpected response shape for {method}: {exc}") from exc
