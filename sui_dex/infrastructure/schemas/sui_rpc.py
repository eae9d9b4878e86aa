from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _RpcModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class RpcErrorModel(_RpcModel):
    code: int | None = None
    message: str = ""
    data: Any = None


class RpcEnvelopeModel(_RpcModel):
    jsonrpc: str = "2.0"
    id: int | str | None = None
    result: Any = None
    error: RpcErrorModel | None = None


class SuiObjectDataModel(_RpcModel):
    object_id: str = Field(alias="objectId")
    version: str | None = None
    digest: str | None = None
    type: str | None = None
    owner: Any = None
    content: dict[str, Any] | None = None


class SuiObjectResponseModel(_RpcModel):
    data: SuiObjectDataModel | None = None
    error: dict[str, Any] | None = None


class PaginatedObjectsResponseModel(_RpcModel):
    data: list[SuiObjectResponseModel]
    next_cursor: str | None = Field(None, alias="nextCursor")
    has_next_page: bool = Field(alias="hasNextPage")


class CoinBalanceModel(_RpcModel):
    coin_type: str = Field(alias="coinType")
    coin_object_count: int | None = Field(None, alias="coinObjectCount")
    total_balance: str = Field(alias="totalBalance")


class NormalizedMoveFunctionModel(_RpcModel):
    visibility: str | None = None
    is_entry: bool = Field(False, alias="isEntry")
    type_parameters: list[Any] = Field(default_factory=list, alias="typeParameters")
    parameters: list[Any] = Field(default_factory=list)


class NormalizedMoveModuleModel(_RpcModel):
    address: str
    name: str
    exposed_functions: dict[str, NormalizedMoveFunctionModel] = Field(
        default_factory=dict,
        alias="exposedFunctions",
    )
