from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any


_PRIMITIVE_TYPES = ("Address", "Bool", "U8", "U16", "U32", "U64", "U128", "U256")
_INTEGER_TYPES = ("U8", "U16", "U32", "U64", "U128", "U256")

# a full 32-byte address; short forms like 0x6 are object ids, not pure addresses
_SUI_ADDRESS_RE = re.compile(r"^(0x)?[0-9a-fA-F]{64}$")

# (address, module, name) after address normalization
_ASCII_STRING = ("0x1", "ascii", "String")
_UTF8_STRING = ("0x1", "string", "String")
_OBJECT_ID = ("0x2", "object", "ID")
_STD_OPTION = ("0x1", "option", "Option")


class PureTypeError(TypeError):
    pass


def _short_address(address: str) -> str:
    body = address[2:] if address.startswith("0x") else address
    return f"0x{body.lstrip('0') or '0'}"


def _is_struct(struct: Mapping[str, Any], expected: tuple[str, str, str]) -> bool:
    return (
        _short_address(str(struct.get("address", ""))),
        struct.get("module"),
        struct.get("name"),
    ) == expected


def _expect_integer(value: Any) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise PureTypeError(f"Expected an integer value, got {value!r}.")
    if isinstance(value, str) and not value.isdigit():
        raise PureTypeError(f"Expected an integer value, got {value!r}.")


def get_pure_serialization_type(normalized_type: Any, value: Any) -> str | None:
    """Return the pure serialization type for a Move parameter, or None for objects.

    ``normalized_type`` is a parameter entry of ``sui_getNormalizedMoveModule``.
    References, type parameters and arbitrary structs are passed as objects.
    """
    if isinstance(normalized_type, str):
        if normalized_type not in _PRIMITIVE_TYPES:
            raise PureTypeError(f"Unknown pure normalized type {normalized_type!r}.")
        if normalized_type in _INTEGER_TYPES:
            _expect_integer(value)
        elif normalized_type == "Bool":
            if value is not None and not isinstance(value, bool):
                raise PureTypeError(f"Expected a boolean value, got {value!r}.")
        elif normalized_type == "Address":
            if value is not None and not isinstance(value, str):
                raise PureTypeError(f"Expected an address string, got {value!r}.")
            if value and not _SUI_ADDRESS_RE.match(value):
                raise PureTypeError("Invalid Sui Address")
        return normalized_type.lower()

    if not isinstance(normalized_type, Mapping):
        return None

    if "Vector" in normalized_type:
        inner = normalized_type["Vector"]
        if inner == "U8" and (value is None or isinstance(value, str)):
            return "string"
        if value is not None and not isinstance(value, (list, tuple)):
            raise PureTypeError(f"Expected a list for vector type, got {value!r}.")
        inner_type = get_pure_serialization_type(inner, value[0] if value else None)
        if inner_type is None:
            return None
        return f"vector<{inner_type}>"

    struct = normalized_type.get("Struct")
    if isinstance(struct, Mapping):
        if _is_struct(struct, _ASCII_STRING):
            return "string"
        if _is_struct(struct, _UTF8_STRING):
            return "utf8string"
        if _is_struct(struct, _OBJECT_ID):
            return "address"
        if _is_struct(struct, _STD_OPTION):
            type_arguments = struct.get("typeArguments") or [None]
            return get_pure_serialization_type({"Vector": type_arguments[0]}, value)

    return None
