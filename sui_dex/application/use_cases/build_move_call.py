from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from sui_dex.application.dto.move_call import BuildMoveCallInput
from sui_dex.application.ports.sui_rpc_port import SuiRpcPort
from sui_dex.application.ports.transaction_block_port import (
    PureTypeResolverPort,
    TransactionBlockPort,
)


logger = logging.getLogger(__name__)


class BuildMoveCallUseCase:
    def __init__(
        self,
        *,
        sui_rpc_port: SuiRpcPort,
        pure_type_resolver: PureTypeResolverPort,
        transaction_factory: Callable[[], TransactionBlockPort],
    ):
        self._sui_rpc_port = sui_rpc_port
        self._pure_type_resolver = pure_type_resolver
        self._transaction_factory = transaction_factory

    async def execute(
        self,
        command: BuildMoveCallInput,
        tx: TransactionBlockPort | None = None,
    ) -> TransactionBlockPort:
        if tx is None:
            tx = self._transaction_factory()

        module = await self._sui_rpc_port.get_normalized_move_module(
            package=command.package_id,
            module=command.module_name,
        )
        parameters = module.exposed_functions[command.function_name].parameters

        arguments: list[Any] = []
        for index, param in enumerate(command.params):
            if isinstance(param, Mapping):
                arguments.append(param)
            elif self._pure_type_resolver(parameters[index], param):
                arguments.append(tx.pure(param))
            else:
                arguments.append(tx.object(param))

        tx.move_call(
            target=command.target,
            type_arguments=list(command.type_arguments or []),
            arguments=arguments,
        )
        logger.debug("build_move_call: appended target=%s arguments=%s", command.target, len(arguments))
        return tx
