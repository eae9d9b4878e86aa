from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class _GraphQLModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class CoinSettingModel(_GraphQLModel):
    type: str
    decimals: int
    symbol: str
    name: str | None = None
    icon_url: str | None = Field(None, alias="iconUrl")


class CoinSettingsPageModel(_GraphQLModel):
    items: list[CoinSettingModel]


class CoinSettingsDataModel(_GraphQLModel):
    get_coins_settings: CoinSettingsPageModel = Field(alias="getCoinsSettings")


class PairModel(_GraphQLModel):
    lp_object_id: str = Field(alias="lpObjectId")
    coin_x_type: str | None = Field(None, alias="coinXType")
    coin_y_type: str | None = Field(None, alias="coinYType")
    lp_name: str | None = Field(None, alias="lpName")
    liquidity_usd: Decimal | None = Field(None, alias="liquidityUsd")
    volume_24h: Decimal | None = Field(None, alias="volume24h")


class PairsDataModel(_GraphQLModel):
    get_pairs: list[PairModel] | None = Field(None, alias="getPairs")
