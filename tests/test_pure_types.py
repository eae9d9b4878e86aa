from __future__ import annotations

import pytest

from sui_dex.infrastructure.sui.pure_types import PureTypeError, get_pure_serialization_type


def _struct(address: str, module: str, name: str, type_arguments: list | None = None) -> dict:
    return {
        "Struct": {
            "address": address,
            "module": module,
            "name": name,
            "typeArguments": type_arguments or [],
        }
    }


@pytest.mark.parametrize(
    ("normalized_type", "value", "expected"),
    [
        ("U64", 100, "u64"),
        ("U128", "340282366920938463463374607431768211455", "u128"),
        ("Bool", True, "bool"),
        ("Address", "0x" + "6".rjust(64, "0"), "address"),
        ({"Vector": "U8"}, "hello", "string"),
        ({"Vector": "U64"}, [1, 2, 3], "vector<u64>"),
        (_struct("0x1", "ascii", "String"), "abc", "string"),
        (_struct("0x1", "string", "String"), "abc", "utf8string"),
        (_struct("0x0000000000000000000000000000000000000000000000000000000000000002", "object", "ID"), "0x5", "address"),
        (_struct("0x1", "option", "Option", ["U64"]), [7], "vector<u64>"),
    ],
)
def test_pure_parameters_resolve_to_serialization_type(normalized_type, value, expected):
    assert get_pure_serialization_type(normalized_type, value) == expected


@pytest.mark.parametrize(
    "normalized_type",
    [
        {"MutableReference": _struct("0xba153", "pair", "Container")},
        {"Reference": _struct("0x2", "clock", "Clock")},
        {"TypeParameter": 0},
        _struct("0x2", "coin", "Coin", [{"TypeParameter": 0}]),
    ],
)
def test_object_parameters_resolve_to_none(normalized_type):
    assert get_pure_serialization_type(normalized_type, "0xabc") is None


def test_unknown_primitive_type_is_rejected():
    with pytest.raises(PureTypeError):
        get_pure_serialization_type("Signer", "0x1")


def test_value_type_mismatch_is_rejected():
    with pytest.raises(PureTypeError):
        get_pure_serialization_type("Bool", "yes")
    with pytest.raises(PureTypeError):
        get_pure_serialization_type("Address", "not-an-address")
    with pytest.raises(PureTypeError):
        get_pure_serialization_type({"Vector": "U64"}, 5)


def test_vector_of_objects_resolves_to_none():
    coin = {"Struct": {"address": "0x2", "module": "coin", "name": "Coin", "typeArguments": []}}

    assert get_pure_serialization_type({"Vector": coin}, ["0x1", "0x2"]) is None


@pytest.mark.parametrize("value", ["0x6", "0xbeef", "0x" + "a" * 63, "0x" + "a" * 65])
def test_address_must_be_a_full_32_byte_address(value):
    with pytest.raises(PureTypeError, match="Invalid Sui Address"):
        get_pure_serialization_type("Address", value)
