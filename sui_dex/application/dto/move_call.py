from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class BuildMoveCallInput:
    package_id: str
    module_name: str
    function_name: str
    params: list[Any] = field(default_factory=list)
    type_arguments: list[str] | None = None

    @property
    def target(self) -> str:
        return f"{self.package_id}::{self.module_name}::{self.function_name}"
