from __future__ import annotations

import asyncio
from decimal import Decimal
import math

import pytest

from sui_dex.application.use_cases.get_pool_infos import (
    MULTI_GET_CHUNK_SIZE,
    GetPoolInfosUseCase,
    chunk_object_ids,
)
from sui_dex.domain.entities.pool import ReserveBalance
from sui_dex.domain.entities.sui_object import SuiObject
from sui_dex.domain.exceptions import MalformedTypeError

from _sui_fakes import ConcurrencyGate, FakeSuiRpcPort, pool_object


@pytest.mark.parametrize("length", [0, 1, 48, 49, 50, 98, 99, 250])
def test_chunk_object_ids_splits_into_groups_of_at_most_49(length: int):
    ids = [f"0x{index:x}" for index in range(length)]

    chunks = chunk_object_ids(ids)

    assert len(chunks) == math.ceil(length / MULTI_GET_CHUNK_SIZE)
    assert all(len(chunk) <= MULTI_GET_CHUNK_SIZE for chunk in chunks)
    assert [object_id for chunk in chunks for object_id in chunk] == ids


def test_chunk_object_ids_rejects_non_positive_size():
    with pytest.raises(ValueError):
        chunk_object_ids(["0x1"], 0)


def test_fetches_chunks_and_keeps_issue_order():
    ids = [f"0x{index:x}" for index in range(1, 101)]
    port = FakeSuiRpcPort(objects={object_id: pool_object(object_id) for object_id in ids})
    use_case = GetPoolInfosUseCase(sui_rpc_port=port)

    pool_infos = asyncio.run(use_case.execute(ids))

    assert [len(call) for call in port.multi_get_calls] == [49, 49, 2]
    assert [info.object_id for info in pool_infos] == ids


def test_chunks_are_requested_concurrently():
    ids = [f"0x{index:x}" for index in range(1, 101)]
    gate = ConcurrencyGate(expected=3)
    port = FakeSuiRpcPort(objects={object_id: pool_object(object_id) for object_id in ids}, gate=gate)
    use_case = GetPoolInfosUseCase(sui_rpc_port=port)

    pool_infos = asyncio.run(use_case.execute(ids))

    assert gate.peak == 3
    assert len(pool_infos) == 100


def test_derives_pool_fields_from_object_content():
    port = FakeSuiRpcPort(objects={"0xp": pool_object("0xp", fee_rate="25")})
    use_case = GetPoolInfosUseCase(sui_rpc_port=port)

    [info] = asyncio.run(use_case.execute(["0xp"]))

    assert info.coin_x == "0x2::sui::SUI"
    assert info.coin_y == "0xde::usdc::USDC"
    assert info.lp_type.endswith("::pair::LP<0x2::sui::SUI, 0xde::usdc::USDC>")
    assert info.total_lp_supply == "2000000000"
    assert isinstance(info.reserve_x, ReserveBalance)
    assert info.reserve_x.balance == "4000000000"
    assert info.fee_rate == Decimal("0.0025")


def test_malformed_pool_object_fails_whole_batch():
    broken = SuiObject(object_id="0xbad", content={"fields": {"value": {"fields": {}}}})
    port = FakeSuiRpcPort(objects={"0xp": pool_object("0xp"), "0xbad": broken})
    use_case = GetPoolInfosUseCase(sui_rpc_port=port)

    with pytest.raises(MalformedTypeError):
        asyncio.run(use_case.execute(["0xp", "0xbad"]))


def test_non_numeric_fee_rate_is_reported_as_malformed():
    port = FakeSuiRpcPort(objects={"0xp": pool_object("0xp", fee_rate="abc")})
    use_case = GetPoolInfosUseCase(sui_rpc_port=port)

    with pytest.raises(MalformedTypeError, match="fee_rate"):
        asyncio.run(use_case.execute(["0xp"]))
