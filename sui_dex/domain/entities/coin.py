from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CoinMetadata:
    type: str
    decimals: int
    symbol: str
    name: str | None = None
    icon_url: str | None = None


@dataclass(frozen=True)
class CoinBalance:
    type: str
    balance: int
