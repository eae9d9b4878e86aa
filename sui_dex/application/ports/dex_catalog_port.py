from __future__ import annotations

from typing import Protocol

from sui_dex.domain.entities.coin import CoinMetadata
from sui_dex.domain.entities.pool import Pair


class DexCatalogPort(Protocol):
    async def list_coin_settings(self, *, limit: int) -> list[CoinMetadata]:
        ...

    async def list_pairs(self, *, size: int) -> list[Pair]:
        ...
