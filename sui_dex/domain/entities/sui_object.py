from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class SuiObject:
    object_id: str
    version: str | None = None
    digest: str | None = None
    type: str | None = None
    owner: Any = None
    content: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class OwnedObjectsPage:
    data: list[SuiObject]
    next_cursor: str | None
    has_next_page: bool
