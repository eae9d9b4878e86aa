from __future__ import annotations

from dataclasses import dataclass, field


DEFAULT_OWNED_OBJECT_OPTIONS = {
    "showContent": True,
    "showOwner": True,
    "showType": True,
}


@dataclass(frozen=True)
class GetOwnedObjectsInput:
    owner: str
    object_type: str


@dataclass(frozen=True)
class GetAllOwnedObjectsInput:
    owner: str
    options: dict[str, bool] = field(default_factory=lambda: dict(DEFAULT_OWNED_OBJECT_OPTIONS))
    filter: dict | None = None
