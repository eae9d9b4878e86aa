from __future__ import annotations

import logging

from sui_dex.application.ports.dex_catalog_port import DexCatalogPort
from sui_dex.application.use_cases.get_pool_infos import GetPoolInfosUseCase
from sui_dex.domain.entities.pool import Pool
from sui_dex.domain.services.pool_info import join_pairs_with_pool_infos


logger = logging.getLogger(__name__)


PAIRS_PAGE_SIZE = 100


class ListPoolsUseCase:
    def __init__(
        self,
        *,
        catalog_port: DexCatalogPort,
        get_pool_infos: GetPoolInfosUseCase,
        page_size: int = PAIRS_PAGE_SIZE,
    ):
        self._catalog_port = catalog_port
        self._get_pool_infos = get_pool_infos
        self._page_size = page_size

    async def execute(self) -> list[Pool]:
        pairs = await self._catalog_port.list_pairs(size=self._page_size)
        pool_infos = await self._get_pool_infos.execute([pair.lp_object_id for pair in pairs])
        pools = join_pairs_with_pool_infos(pairs, pool_infos)
        logger.info("list_pools: merged pairs=%s pools=%s", len(pairs), len(pools))
        return pools
