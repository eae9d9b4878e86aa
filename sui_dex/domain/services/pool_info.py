from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal, InvalidOperation
from typing import Any

from sui_dex.domain.entities.pool import DEFAULT_FEE_RATE, Pair, Pool, PoolInfo, ReserveBalance
from sui_dex.domain.entities.sui_object import SuiObject
from sui_dex.domain.exceptions import MalformedTypeError, PoolObjectMissingError
from sui_dex.domain.services.type_format import format_coin_type, get_lp_type, standardize_type


FEE_RATE_DENOMINATOR = Decimal("10000")


def _field(record: Any, *path: str) -> Any:
    current = record
    for index, key in enumerate(path):
        if not isinstance(current, Mapping) or key not in current:
            joined = ".".join(path[: index + 1])
            raise MalformedTypeError(f"Pool object is missing field '{joined}'.")
        current = current[key]
    return current


def _reserve(raw: Any) -> ReserveBalance:
    return ReserveBalance(
        type=str(_field(raw, "type")),
        balance=str(_field(raw, "fields", "balance")),
    )


def _fee_rate(raw: Any) -> Decimal:
    if raw in (None, "", 0):
        return DEFAULT_FEE_RATE
    try:
        rate = Decimal(str(raw))
    except InvalidOperation as exc:
        raise MalformedTypeError(f"Pool object has a non-numeric 'fee_rate': {raw!r}.") from exc
    if not rate.is_finite():
        raise MalformedTypeError(f"Pool object has a non-numeric 'fee_rate': {raw!r}.")
    return rate / FEE_RATE_DENOMINATOR


def pool_info_from_object(obj: SuiObject) -> PoolInfo:
    """Derive a PoolInfo from a pair object fetched with ``showContent``.

    The pool state lives under ``content.fields.value.fields``; coin types are
    read from the reserve wrappers and the LP type is rebuilt around them.
    """
    fields = _field(obj.content, "fields", "value", "fields")
    reserve_x = _reserve(_field(fields, "reserve_x"))
    reserve_y = _reserve(_field(fields, "reserve_y"))
    coin_x = format_coin_type(reserve_x.type)
    coin_y = format_coin_type(reserve_y.type)
    lp_supply = _field(fields, "lp_supply")

    return PoolInfo(
        object_id=obj.object_id,
        reserve_x=reserve_x,
        reserve_y=reserve_y,
        total_lp_supply=str(_field(lp_supply, "fields", "value")),
        lp_type=get_lp_type(_field(lp_supply, "type"), coin_x, coin_y),
        coin_x=coin_x,
        coin_y=coin_y,
        fee_rate=_fee_rate(fields.get("fee_rate")),
    )


def object_key(object_id: str) -> str:
    return (standardize_type(object_id) or "").lower()


def join_pairs_with_pool_infos(pairs: list[Pair], pool_infos: list[PoolInfo]) -> list[Pool]:
    by_id = {object_key(info.object_id): info for info in pool_infos}
    pools: list[Pool] = []
    for pair in pairs:
        info = by_id.get(object_key(pair.lp_object_id))
        if info is None:
            raise PoolObjectMissingError(f"Pool object not returned for pair: {pair.lp_object_id}")
        pools.append(Pool(pair=pair, info=info))
    return pools
