# SPDX-License-Identifier: MIT
"""Tests for records embedding other records."""

from __future__ import annotations

from sample_records import (
    ComplexItem,
    Timestamp,
    get_test_complex_item,
    ts,
)

from stom import (
    NullBool,
    NullFloat,
    NullTime,
    Policy,
    Stom,
    convert_to_map,
    set_default,
    set_policy,
    set_tag,
)

META = {
    "tag": "metatag",
    "value": "valvalval",
    "add": {"foo": 12, "bar": NullBool(True, False)},
}

COMMON = {
    "id": 1,
    "name": "item_1",
    "number": 11,
    "created": Timestamp(10000),
    "updated": NullTime.of(ts(11000)),
    "discount": 111.0,
    "price": 1111.0,
    "reserved": NullBool.of(True),
    "rating": NullFloat.of(1.0),
    "visible": True,
    "base": "base",
    "meta": META,
}


def test_complex_item_default_policy() -> None:
    set_tag("db")
    set_default("DEFAULT")
    set_policy(Policy.USE_DEFAULT)

    expected = {
        **COMMON,
        "points": "DEFAULT",
        "basic_posted": "DEFAULT",
        "author": "DEFAULT",
    }
    assert convert_to_map(get_test_complex_item()) == expected


def test_complex_item_exclude_policy() -> None:
    set_tag("db")
    set_default("DEFAULT")
    set_policy(Policy.EXCLUDE)

    assert convert_to_map(get_test_complex_item()) == COMMON


def test_null_embedded_groups_add_no_placeholders() -> None:
    item = get_test_complex_item()
    item.basic = None
    converter = Stom(ComplexItem).set_default("DEFAULT")
    result = converter.to_map(item)
    assert "base" not in result
    assert "basic_posted" not in result


def test_null_parent_of_embedded_group() -> None:
    item = get_test_complex_item()
    assert item.basic is not None
    item.basic.parent = None
    result = Stom(ComplexItem).set_policy(Policy.EXCLUDE).to_map(item)
    assert "base" not in result
    assert result["id"] == 1


def test_converter_and_free_function_agree() -> None:
    set_default("DEFAULT")
    item = get_test_complex_item()
    converter = Stom(ComplexItem)
    assert converter.to_map(item) == convert_to_map(item)
