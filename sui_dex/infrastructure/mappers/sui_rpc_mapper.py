from __future__ import annotations

from sui_dex.domain.entities.coin import CoinBalance
from sui_dex.domain.entities.move_module import MoveFunction, MoveModule
from sui_dex.domain.entities.sui_object import OwnedObjectsPage, SuiObject
from sui_dex.infrastructure.schemas.sui_rpc import (
    CoinBalanceModel,
    NormalizedMoveModuleModel,
    PaginatedObjectsResponseModel,
    SuiObjectDataModel,
    SuiObjectResponseModel,
)


def map_object_data(model: SuiObjectDataModel) -> SuiObject:
    return SuiObject(
        object_id=model.object_id,
        version=model.version,
        digest=model.digest,
        type=model.type,
        owner=model.owner,
        content=model.content or {},
    )


def map_object_responses(items: list[SuiObjectResponseModel]) -> list[SuiObject]:
    return [map_object_data(item.data) for item in items if item.data is not None]


def map_owned_objects_page(model: PaginatedObjectsResponseModel) -> OwnedObjectsPage:
    return OwnedObjectsPage(
        data=map_object_responses(model.data),
        next_cursor=model.next_cursor,
        has_next_page=model.has_next_page,
    )


def map_coin_balance(model: CoinBalanceModel) -> CoinBalance:
    return CoinBalance(type=model.coin_type, balance=int(model.total_balance))


def map_move_module(model: NormalizedMoveModuleModel) -> MoveModule:
    return MoveModule(
        address=model.address,
        name=model.name,
        exposed_functions={
            name: MoveFunction(
                parameters=list(function.parameters),
                type_parameters=list(function.type_parameters),
                visibility=function.visibility,
                is_entry=function.is_entry,
            )
            for name, function in model.exposed_functions.items()
        },
    )
