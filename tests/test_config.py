from __future__ import annotations

import pytest

from sui_dex.core.config import get_settings


def test_get_settings_reads_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("SUI_RPC_URL", "https://rpc.example.com")
    monkeypatch.setenv("DEX_GRAPHQL_URL", "https://api.example.com/graphql")
    monkeypatch.setenv("MULTI_GET_CHUNK_SIZE", "50")
    monkeypatch.setenv("PAIRS_PAGE_SIZE", "20")

    settings = get_settings()

    assert settings.sui_rpc_url == "https://rpc.example.com"
    assert settings.graphql_url == "https://api.example.com/graphql"
    assert settings.multi_get_chunk_size == 50
    assert settings.pairs_page_size == 20


def test_get_settings_defaults(monkeypatch: pytest.MonkeyPatch):
    for name in ("MULTI_GET_CHUNK_SIZE", "COINS_PAGE_SIZE", "SUI_RPC_TIMEOUT_SECONDS"):
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()

    assert settings.multi_get_chunk_size == 49
    assert settings.coins_page_size == 100
    assert settings.sui_rpc_timeout_seconds == 15.0
