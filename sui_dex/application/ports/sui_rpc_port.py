from __future__ import annotations

from typing import Any, Protocol

from sui_dex.domain.entities.coin import CoinBalance
from sui_dex.domain.entities.move_module import MoveModule
from sui_dex.domain.entities.sui_object import OwnedObjectsPage, SuiObject


class SuiRpcPort(Protocol):
    async def get_owned_objects(
        self,
        *,
        owner: str,
        filter: dict[str, Any] | None = None,
        options: dict[str, bool] | None = None,
        cursor: str | None = None,
        limit: int | None = None,
    ) -> OwnedObjectsPage:
        ...

    async def multi_get_objects(
        self,
        *,
        ids: list[str],
        options: dict[str, bool] | None = None,
    ) -> list[SuiObject]:
        ...

    async def get_all_balances(self, *, owner: str) -> list[CoinBalance]:
        ...

    async def get_normalized_move_module(self, *, package: str, module: str) -> MoveModule:
        ...
