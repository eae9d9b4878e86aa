from __future__ import annotations

import asyncio
import logging

from sui_dex.application.ports.sui_rpc_port import SuiRpcPort
from sui_dex.domain.entities.pool import PoolInfo
from sui_dex.domain.services.pool_info import pool_info_from_object


logger = logging.getLogger(__name__)


# sui_multiGetObjects accepts at most 50 ids; pages have always been cut at 49.
MULTI_GET_CHUNK_SIZE = 49


def chunk_object_ids(ids: list[str], size: int = MULTI_GET_CHUNK_SIZE) -> list[list[str]]:
    if size <= 0:
        raise ValueError("size must be a positive integer.")
    return [ids[start : start + size] for start in range(0, len(ids), size)]


class GetPoolInfosUseCase:
    def __init__(self, *, sui_rpc_port: SuiRpcPort, chunk_size: int = MULTI_GET_CHUNK_SIZE):
        self._sui_rpc_port = sui_rpc_port
        self._chunk_size = chunk_size

    async def execute(self, lp_object_ids: list[str]) -> list[PoolInfo]:
        chunks = chunk_object_ids(list(lp_object_ids), self._chunk_size)
        results = await asyncio.gather(
            *(
                self._sui_rpc_port.multi_get_objects(ids=chunk, options={"showContent": True})
                for chunk in chunks
            )
        )

        pool_infos = [pool_info_from_object(obj) for objects in results for obj in objects]
        logger.info(
            "get_pool_infos: fetched requested=%s chunks=%s pools=%s",
            len(lp_object_ids),
            len(chunks),
            len(pool_infos),
        )
        return pool_infos
