from __future__ import annotations

from decimal import Decimal, localcontext

from sui_dex.domain.entities.coin import CoinMetadata
from sui_dex.domain.entities.pool import PoolInfo, ReserveBalance


LP_DECIMAL = 9

_TEN = Decimal("10")
_MIN_PRECISION = 50


def _to_decimal(value: Decimal | int | float | str) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def _scaling_precision(value: Decimal, decimals: int) -> int:
    # exact result needs every digit of value plus the digits of 10**decimals
    return max(_MIN_PRECISION, len(value.as_tuple().digits) + abs(decimals) + 2)


def get_decimal_amount(amount: Decimal | int | float | str, decimals: int = LP_DECIMAL) -> str:
    value = _to_decimal(amount)
    with localcontext() as ctx:
        ctx.prec = _scaling_precision(value, decimals)
        scaled = value * (_TEN ** decimals)
        return format(scaled.normalize(), "f")


def get_balance_amount(amount: Decimal | int | float | str, decimals: int = LP_DECIMAL) -> Decimal:
    value = _to_decimal(amount)
    with localcontext() as ctx:
        ctx.prec = _scaling_precision(value, decimals)
        return value / (_TEN ** decimals)


def convert_amount_decimal(amount: Decimal | int | float | str, decimals: int) -> Decimal:
    return get_balance_amount(amount, decimals)


def reserve_amount(reserve: str | ReserveBalance) -> str:
    if isinstance(reserve, ReserveBalance):
        return reserve.balance
    return reserve


def calculate_receive_amount(
    pool_info: PoolInfo | None,
    coin_x: CoinMetadata,
    coin_y: CoinMetadata,
) -> tuple[Decimal, Decimal]:
    """Amount of each coin redeemable for one whole LP token."""
    if pool_info is None:
        return Decimal("0"), Decimal("0")

    total_supply = get_balance_amount(pool_info.total_lp_supply)
    if total_supply <= 0:
        raise ValueError("total_lp_supply must be positive.")
    lp_rate = Decimal("1") / total_supply
    amount_x = lp_rate * get_balance_amount(reserve_amount(pool_info.reserve_x), coin_x.decimals)
    amount_y = lp_rate * get_balance_amount(reserve_amount(pool_info.reserve_y), coin_y.decimals)
    return amount_x, amount_y
