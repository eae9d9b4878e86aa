from __future__ import annotations

import asyncio

from sui_dex.application.dto.basic_data import GetBasicDataInput
from sui_dex.application.use_cases.get_coin_balances import GetCoinBalancesUseCase
from sui_dex.application.use_cases.list_coins import ListCoinsUseCase
from sui_dex.application.use_cases.list_pools import ListPoolsUseCase
from sui_dex.domain.entities.basic_data import BasicData


class GetBasicDataUseCase:
    def __init__(
        self,
        *,
        list_coins: ListCoinsUseCase,
        get_coin_balances: GetCoinBalancesUseCase,
        list_pools: ListPoolsUseCase,
    ):
        self._list_coins = list_coins
        self._get_coin_balances = get_coin_balances
        self._list_pools = list_pools

    async def execute(self, command: GetBasicDataInput) -> BasicData:
        coins, coin_balances, pools = await asyncio.gather(
            self._list_coins.execute(),
            self._get_coin_balances.execute(command.address),
            self._list_pools.execute(),
        )
        return BasicData(coins=coins, coin_balances=coin_balances, pools=pools)
