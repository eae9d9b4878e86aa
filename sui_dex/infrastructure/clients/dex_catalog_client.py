from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ValidationError

from sui_dex.domain.entities.coin import CoinMetadata
from sui_dex.domain.entities.pool import Pair
from sui_dex.infrastructure.clients.errors import ResponseDecodeError
from sui_dex.infrastructure.clients.graphql_client import GraphQLClient
from sui_dex.infrastructure.clients.queries import COIN_SETTING_QUERY, GET_PAIRS
from sui_dex.infrastructure.mappers.catalog_mapper import map_coin_setting, map_pair
from sui_dex.infrastructure.schemas.graphql import CoinSettingsDataModel, PairsDataModel


logger = logging.getLogger(__name__)


def _decode(schema: type[BaseModel], data: Any) -> Any:
    try:
        return schema.model_validate(data)
    except ValidationError as exc:
        raise ResponseDecodeError(f"Unexpected GraphQL response for {schema.__name__}: {exc}") from exc


class DexCatalogClient:
    def __init__(self, graphql: GraphQLClient):
        self._graphql = graphql

    async def list_coin_settings(self, *, limit: int) -> list[CoinMetadata]:
        data = await self._graphql.request(COIN_SETTING_QUERY, {"limit": limit})
        model = _decode(CoinSettingsDataModel, data)
        coins = [map_coin_setting(item) for item in model.get_coins_settings.items]
        logger.info("dex_catalog_client: fetched_coin_settings limit=%s fetched=%s", limit, len(coins))
        return coins

    async def list_pairs(self, *, size: int) -> list[Pair]:
        data = await self._graphql.request(GET_PAIRS, {"size": size})
        model = _decode(PairsDataModel, data)
        pairs = [map_pair(item) for item in model.get_pairs or []]
        logger.info("dex_catalog_client: fetched_pairs size=%s fetched=%s", size, len(pairs))
        return pairs
