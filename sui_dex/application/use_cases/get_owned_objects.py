from __future__ import annotations

import logging
from typing import Any

from sui_dex.application.dto.owned_objects import (
    DEFAULT_OWNED_OBJECT_OPTIONS,
    GetAllOwnedObjectsInput,
    GetOwnedObjectsInput,
)
from sui_dex.application.ports.sui_rpc_port import SuiRpcPort
from sui_dex.domain.entities.sui_object import SuiObject


logger = logging.getLogger(__name__)


MAX_LIMIT_PER_RPC_CALL = 50


class GetOwnedObjectsUseCase:
    def __init__(self, *, sui_rpc_port: SuiRpcPort, page_size: int = MAX_LIMIT_PER_RPC_CALL):
        self._sui_rpc_port = sui_rpc_port
        self._page_size = page_size

    async def execute(self, command: GetOwnedObjectsInput) -> list[SuiObject]:
        return await self._paginate(
            owner=command.owner,
            filter={"StructType": command.object_type},
            options=dict(DEFAULT_OWNED_OBJECT_OPTIONS),
            limit=self._page_size,
        )

    async def execute_all(self, command: GetAllOwnedObjectsInput) -> list[SuiObject]:
        return await self._paginate(
            owner=command.owner,
            filter=command.filter,
            options=command.options,
            limit=None,
        )

    async def _paginate(
        self,
        *,
        owner: str,
        filter: dict[str, Any] | None,
        options: dict[str, bool],
        limit: int | None,
    ) -> list[SuiObject]:
        objects: list[SuiObject] = []
        cursor: str | None = None
        pages = 0
        while True:
            page = await self._sui_rpc_port.get_owned_objects(
                owner=owner,
                filter=filter,
                options=options,
                cursor=cursor,
                limit=limit,
            )
            pages += 1
            objects.extend(page.data)
            cursor = page.next_cursor
            if not page.has_next_page:
                break

        logger.info(
            "get_owned_objects: fetched owner=%s filter=%s pages=%s objects=%s",
            owner,
            filter,
            pages,
            len(objects),
        )
        return objects
