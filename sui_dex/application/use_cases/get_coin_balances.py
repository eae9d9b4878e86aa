from __future__ import annotations

from sui_dex.application.ports.sui_rpc_port import SuiRpcPort
from sui_dex.domain.entities.coin import CoinBalance


class GetCoinBalancesUseCase:
    def __init__(self, *, sui_rpc_port: SuiRpcPort):
        self._sui_rpc_port = sui_rpc_port

    async def execute(self, address: str | None) -> list[CoinBalance]:
        if not address:
            return []
        balances = await self._sui_rpc_port.get_all_balances(owner=address)
        return sorted(balances, key=lambda item: (item.type, item.balance))
