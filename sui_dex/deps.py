from __future__ import annotations

from functools import lru_cache

from sui_dex.application.use_cases.build_move_call import BuildMoveCallUseCase
from sui_dex.application.use_cases.get_basic_data import GetBasicDataUseCase
from sui_dex.application.use_cases.get_coin_balances import GetCoinBalancesUseCase
from sui_dex.application.use_cases.get_owned_objects import GetOwnedObjectsUseCase
from sui_dex.application.use_cases.get_pool_infos import GetPoolInfosUseCase
from sui_dex.application.use_cases.list_coins import ListCoinsUseCase
from sui_dex.application.use_cases.list_pools import ListPoolsUseCase
from sui_dex.core.config import get_settings
from sui_dex.infrastructure.clients.dex_catalog_client import DexCatalogClient
from sui_dex.infrastructure.clients.graphql_client import GraphQLClient, GraphQLClientSettings
from sui_dex.infrastructure.clients.sui_rpc_client import SuiRpcClient, SuiRpcClientSettings
from sui_dex.infrastructure.sui.pure_types import get_pure_serialization_type
from sui_dex.infrastructure.sui.transaction_block import TransactionBlock


@lru_cache(maxsize=1)
def get_sui_rpc_client() -> SuiRpcClient:
    settings = get_settings()
    return SuiRpcClient(
        SuiRpcClientSettings(
            url=settings.sui_rpc_url,
            timeout_seconds=settings.sui_rpc_timeout_seconds,
        )
    )


@lru_cache(maxsize=1)
def get_dex_catalog_client() -> DexCatalogClient:
    settings = get_settings()
    return DexCatalogClient(
        GraphQLClient(
            GraphQLClientSettings(
                url=settings.graphql_url,
                timeout_seconds=settings.graphql_timeout_seconds,
            )
        )
    )


def get_owned_objects_use_case() -> GetOwnedObjectsUseCase:
    return GetOwnedObjectsUseCase(sui_rpc_port=get_sui_rpc_client())


def get_pool_infos_use_case() -> GetPoolInfosUseCase:
    return GetPoolInfosUseCase(
        sui_rpc_port=get_sui_rpc_client(),
        chunk_size=get_settings().multi_get_chunk_size,
    )


def get_list_pools_use_case() -> ListPoolsUseCase:
    return ListPoolsUseCase(
        catalog_port=get_dex_catalog_client(),
        get_pool_infos=get_pool_infos_use_case(),
        page_size=get_settings().pairs_page_size,
    )


def get_list_coins_use_case() -> ListCoinsUseCase:
    return ListCoinsUseCase(
        catalog_port=get_dex_catalog_client(),
        page_size=get_settings().coins_page_size,
    )


def get_coin_balances_use_case() -> GetCoinBalancesUseCase:
    return GetCoinBalancesUseCase(sui_rpc_port=get_sui_rpc_client())


def get_basic_data_use_case() -> GetBasicDataUseCase:
    return GetBasicDataUseCase(
        list_coins=get_list_coins_use_case(),
        get_coin_balances=get_coin_balances_use_case(),
        list_pools=get_list_pools_use_case(),
    )


def get_build_move_call_use_case() -> BuildMoveCallUseCase:
    return BuildMoveCallUseCase(
        sui_rpc_port=get_sui_rpc_client(),
        pure_type_resolver=get_pure_serialization_type,
        transaction_factory=TransactionBlock,
    )
