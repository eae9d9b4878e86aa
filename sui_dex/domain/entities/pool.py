from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


DEFAULT_FEE_RATE = Decimal("0.003")


@dataclass(frozen=True)
class ReserveBalance:
    type: str
    balance: str


@dataclass(frozen=True)
class PoolInfo:
    object_id: str
    reserve_x: str | ReserveBalance
    reserve_y: str | ReserveBalance
    total_lp_supply: str
    lp_type: str
    coin_x: str
    coin_y: str
    fee_rate: Decimal = DEFAULT_FEE_RATE


@dataclass(frozen=True)
class Pair:
    lp_object_id: str
    coin_x_type: str | None = None
    coin_y_type: str | None = None
    lp_name: str | None = None
    liquidity_usd: Decimal | None = None
    volume_24h: Decimal | None = None


@dataclass(frozen=True)
class Pool:
    pair: Pair
    info: PoolInfo

    @property
    def object_id(self) -> str:
        return self.info.object_id

    @property
    def coin_x(self) -> str:
        return self.info.coin_x

    @property
    def coin_y(self) -> str:
        return self.info.coin_y

    @property
    def lp_type(self) -> str:
        return self.info.lp_type

    @property
    def fee_rate(self) -> Decimal:
        return self.info.fee_rate
