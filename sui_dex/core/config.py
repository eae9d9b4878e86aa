from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


@dataclass(frozen=True)
class Settings:
    sui_rpc_url: str
    sui_rpc_timeout_seconds: float
    graphql_url: str
    graphql_timeout_seconds: float
    pairs_page_size: int
    coins_page_size: int
    multi_get_chunk_size: int


def get_settings() -> Settings:
    return Settings(
        sui_rpc_url=_env("SUI_RPC_URL", "https://fullnode.mainnet.sui.io:443"),
        sui_rpc_timeout_seconds=float(_env("SUI_RPC_TIMEOUT_SECONDS", "15")),
        graphql_url=_env("DEX_GRAPHQL_URL", ""),
        graphql_timeout_seconds=float(_env("GRAPHQL_TIMEOUT_SECONDS", "10")),
        pairs_page_size=int(_env("PAIRS_PAGE_SIZE", "100")),
        coins_page_size=int(_env("COINS_PAGE_SIZE", "100")),
        multi_get_chunk_size=int(_env("MULTI_GET_CHUNK_SIZE", "49")),
    )
