from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GetBasicDataInput:
    address: str | None = None
