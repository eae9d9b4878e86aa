from __future__ import annotations

import re

from sui_dex.domain.exceptions import MalformedTypeError


SUI_TYPE = "0x2::sui::SUI"
SUI_FULL_TYPE = "0x0000000000000000000000000000000000000000000000000000000000000002::sui::SUI"

OBJECT_ID_LENGTH = 64

_MOVE_OBJECT_ID_RE = re.compile(r"0x[0-9a-fA-F]{1,64}")
_COIN_TYPE_ARG_RE = re.compile(r"^0x2::coin::Coin<(.+)>$")


def sui_type_mini_normalize(type_: str) -> str:
    return SUI_TYPE if type_ == SUI_FULL_TYPE else type_


def remove_leading_zeros(hex_string: str) -> str:
    return re.sub(r"^0+", "", hex_string)


def strip_zeros(value: str) -> str:
    return value.lstrip("0")


def add_zeros_x(text: str) -> str:
    return text if text.startswith("0x") else f"0x{text}"


def standardize_type(type_: str | None) -> str | None:
    """Pad every address embedded in a Move type to the full 64 hex digits.

    The short native coin type is returned as is so callers comparing against
    ``SUI_TYPE`` keep working.
    """
    if type_ is None:
        return None
    if type_ == SUI_TYPE:
        return SUI_TYPE
    return _MOVE_OBJECT_ID_RE.sub(
        lambda match: f"0x{match.group(0)[2:].rjust(OBJECT_ID_LENGTH, '0')}",
        type_,
    )


def format_coin_type(type_: str) -> str:
    """Unwrap ``0x2::coin::Coin<T>`` and return ``T`` without address padding."""
    match = _COIN_TYPE_ARG_RE.match(type_ or "")
    if match is None:
        raise MalformedTypeError(f"Not a coin object type: {type_!r}")
    inner = match.group(1)
    return f"0x{strip_zeros(inner[2:])}"


def get_lp_type(lp_type: str | None, coin_x: str, coin_y: str) -> str:
    """Turn ``0x2::balance::Supply<pkg::pair::LP<A, B>>`` into ``pkg::pair::LP<coin_x, coin_y>``."""
    if not lp_type:
        return ""
    parts = lp_type.split("Supply")
    if len(parts) < 2:
        raise MalformedTypeError(f"Not a supply type: {lp_type!r}")
    supplied = parts[1][1:-1]
    return f"{supplied.split('<')[0]}<{coin_x}, {coin_y}>"
