from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class MoveFunction:
    parameters: list[Any]
    type_parameters: list[Any] = field(default_factory=list)
    visibility: str | None = None
    is_entry: bool = False


@dataclass(frozen=True)
class MoveModule:
    address: str
    name: str
    exposed_functions: dict[str, MoveFunction]
