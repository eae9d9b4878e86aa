from __future__ import annotations

from sui_dex.application.ports.dex_catalog_port import DexCatalogPort
from sui_dex.domain.entities.coin import CoinMetadata


COINS_PAGE_SIZE = 100


class ListCoinsUseCase:
    def __init__(self, *, catalog_port: DexCatalogPort, page_size: int = COINS_PAGE_SIZE):
        self._catalog_port = catalog_port
        self._page_size = page_size

    async def execute(self) -> list[CoinMetadata]:
        return await self._catalog_port.list_coin_settings(limit=self._page_size)
