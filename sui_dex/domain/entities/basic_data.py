from __future__ import annotations

from dataclasses import dataclass

from sui_dex.domain.entities.coin import CoinBalance, CoinMetadata
from sui_dex.domain.entities.pool import Pool


@dataclass(frozen=True)
class BasicData:
    coins: list[CoinMetadata]
    coin_balances: list[CoinBalance]
    pools: list[Pool]
