from __future__ import annotations

from typing import Any, Protocol


class TransactionBlockPort(Protocol):
    def pure(self, value: Any) -> dict[str, Any]:
        ...

    def object(self, value: str) -> dict[str, Any]:
        ...

    def move_call(
        self,
        *,
        target: str,
        type_arguments: list[str],
        arguments: list[dict[str, Any]],
    ) -> dict[str, Any]:
        ...


class PureTypeResolverPort(Protocol):
    def __call__(self, normalized_type: Any, value: Any) -> str | None:
        ...
