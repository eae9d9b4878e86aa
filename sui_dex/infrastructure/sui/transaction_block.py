from __future__ import annotations

from typing import Any

from sui_dex.domain.services.type_format import standardize_type


class TransactionBlock:
    """Programmable transaction accumulator.

    Records inputs and Move calls in the JSON layout used by the Sui SDKs
    (``inputs`` + ``transactions``). Serialization to BCS and signing happen
    elsewhere.
    """

    def __init__(self):
        self.inputs: list[dict[str, Any]] = []
        self.transactions: list[dict[str, Any]] = []

    def _add_input(self, kind: str, value: Any) -> dict[str, Any]:
        index = len(self.inputs)
        self.inputs.append({"kind": "Input", "index": index, "type": kind, "value": value})
        return {"kind": "Input", "index": index, "type": kind}

    def pure(self, value: Any) -> dict[str, Any]:
        return self._add_input("pure", value)

    def object(self, value: str) -> dict[str, Any]:
        object_id = standardize_type(value)
        for item in self.inputs:
            if item["type"] == "object" and item["value"] == object_id:
                return {"kind": "Input", "index": item["index"], "type": "object"}
        return self._add_input("object", object_id)

    def move_call(
        self,
        *,
        target: str,
        type_arguments: list[str],
        arguments: list[dict[str, Any]],
    ) -> dict[str, Any]:
        self.transactions.append(
            {
                "kind": "MoveCall",
                "target": target,
                "typeArguments": list(type_arguments),
                "arguments": list(arguments),
            }
        )
        return {"kind": "Result", "index": len(self.transactions) - 1}

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": 1,
            "inputs": [dict(item) for item in self.inputs],
            "transactions": [dict(item) for item in self.transactions],
        }
