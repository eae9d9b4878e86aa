from __future__ import annotations

from sui_dex.domain.entities.coin import CoinMetadata
from sui_dex.domain.entities.pool import Pair
from sui_dex.infrastructure.schemas.graphql import CoinSettingModel, PairModel


def map_coin_setting(model: CoinSettingModel) -> CoinMetadata:
    return CoinMetadata(
        type=model.type,
        decimals=model.decimals,
        symbol=model.symbol,
        name=model.name,
        icon_url=model.icon_url,
    )


def map_pair(model: PairModel) -> Pair:
    return Pair(
        lp_object_id=model.lp_object_id,
        coin_x_type=model.coin_x_type,
        coin_y_type=model.coin_y_type,
        lp_name=model.lp_name,
        liquidity_usd=model.liquidity_usd,
        volume_24h=model.volume_24h,
    )
