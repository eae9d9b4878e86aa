from __future__ import annotations

import asyncio

from sui_dex.application.dto.move_call import BuildMoveCallInput
from sui_dex.application.use_cases.build_move_call import BuildMoveCallUseCase
from sui_dex.domain.entities.move_module import MoveFunction, MoveModule
from sui_dex.infrastructure.sui.pure_types import get_pure_serialization_type
from sui_dex.infrastructure.sui.transaction_block import TransactionBlock

from _sui_fakes import FakeSuiRpcPort


PACKAGE = "0xba153"
CLOCK = "0x" + "6".rjust(64, "0")
RECIPIENT = "0x" + "beef".rjust(64, "0")


def _struct(address: str, module: str, name: str) -> dict:
    return {"Struct": {"address": address, "module": module, "name": name, "typeArguments": []}}


def _module() -> MoveModule:
    return MoveModule(
        address=PACKAGE,
        name="router",
        exposed_functions={
            "swap_exact_input": MoveFunction(
                parameters=[
                    {"Reference": _struct("0x2", "clock", "Clock")},
                    {"MutableReference": _struct(PACKAGE, "factory", "Container")},
                    _struct("0x2", "coin", "Coin"),
                    "U64",
                    "Address",
                    {"MutableReference": _struct("0x2", "tx_context", "TxContext")},
                ],
                type_parameters=[{"abilities": []}, {"abilities": []}],
                is_entry=True,
            )
        },
    )


def _use_case(rpc: FakeSuiRpcPort) -> BuildMoveCallUseCase:
    return BuildMoveCallUseCase(
        sui_rpc_port=rpc,
        pure_type_resolver=get_pure_serialization_type,
        transaction_factory=TransactionBlock,
    )


def _command(params: list) -> BuildMoveCallInput:
    return BuildMoveCallInput(
        package_id=PACKAGE,
        module_name="router",
        function_name="swap_exact_input",
        params=params,
        type_arguments=["0x2::sui::SUI", "0xde::usdc::USDC"],
    )


def test_classifies_params_as_pure_or_object_and_appends_move_call():
    rpc = FakeSuiRpcPort(module=_module())
    coin_arg = {"kind": "Result", "index": 0}

    tx = asyncio.run(_use_case(rpc).execute(_command(["0x6", "0xc0ffee", coin_arg, 1000, RECIPIENT])))

    assert isinstance(tx, TransactionBlock)
    assert rpc.module_calls == [(PACKAGE, "router")]
    assert [item["type"] for item in tx.inputs] == ["object", "object", "pure", "pure"]
    assert tx.inputs[0]["value"] == CLOCK
    assert [item["value"] for item in tx.inputs[2:]] == [1000, RECIPIENT]

    [call] = tx.transactions
    assert call["kind"] == "MoveCall"
    assert call["target"] == f"{PACKAGE}::router::swap_exact_input"
    assert call["typeArguments"] == ["0x2::sui::SUI", "0xde::usdc::USDC"]
    assert call["arguments"][2] == coin_arg
    assert [arg["index"] for arg in call["arguments"] if arg["kind"] == "Input"] == [0, 1, 2, 3]


def test_appends_to_supplied_transaction_block():
    rpc = FakeSuiRpcPort(module=_module())
    tx = TransactionBlock()
    first = tx.move_call(target="0x2::coin::zero", type_arguments=["0x2::sui::SUI"], arguments=[])

    result = asyncio.run(_use_case(rpc).execute(_command(["0x6", "0xc0ffee", first, 5, RECIPIENT]), tx=tx))

    assert result is tx
    assert len(tx.transactions) == 2
    assert tx.transactions[1]["arguments"][2] == {"kind": "Result", "index": 0}


def test_same_object_is_registered_once():
    tx = TransactionBlock()

    first = tx.object("0x6")
    second = tx.object(CLOCK)

    assert first == second
    assert len(tx.inputs) == 1
    assert tx.to_dict()["inputs"][0]["value"] == CLOCK
