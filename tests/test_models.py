# SPDX-License-Identifier: MIT
"""Tests for tag markers, nullable wrappers and capability checks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated

import pytest
from sample_records import Metainfo, Timestamp

from stom import (
    Embedded,
    NullInt,
    NullString,
    Policy,
    Tag,
    ToMappable,
    ToMapper,
    ToMapperFunc,
    Valuer,
    Zeroable,
    scan,
)
from stom.capabilities import converts_itself, implements
from stom.tags import collect_tags


def test_tag_get_returns_empty_for_missing_name() -> None:
    tag = Tag(db="id")
    assert tag.get("db") == "id"
    assert tag.get("custom_tag") == ""


def test_tag_values_must_be_strings() -> None:
    with pytest.raises(TypeError):
        Tag(db=1)  # type: ignore[arg-type]


def test_tag_equality_depends_on_marker_kind() -> None:
    assert Tag(db="x") == Tag(db="x")
    assert Tag(db="x") != Embedded(db="x")
    assert hash(Tag(db="x", other="y")) == hash(Tag(other="y", db="x"))
    assert repr(Embedded(db="-")) == "Embedded(db='-')"


def test_collect_tags_annotated_wins_over_metadata() -> None:
    tags = collect_tags([Tag(db="title")], {"db": "name", "json": "n", 1: "x"})
    assert tags.get("db") == "title"
    assert tags.get("json") == "n"
    assert tags.embedded is False


def test_collect_tags_detects_embedded() -> None:
    tags = collect_tags(["doc", Embedded()], None)
    assert tags.embedded is True
    assert tags.get("db") == ""


def test_null_wrappers() -> None:
    assert NullInt.of(0).db_value() == 0
    assert NullInt().db_value() is None
    assert NullString("stale", False).db_value() is None
    assert NullInt.of(1) != NullString.of("1")


def test_capabilities_are_structural() -> None:
    assert implements(Timestamp(1), Zeroable)
    assert implements(NullInt.of(1), Valuer)
    assert implements(Metainfo("t", "v", NullInt(), False, {}), ToMappable)
    assert implements(ToMapperFunc(lambda obj: {}), ToMapper)
    assert not implements(Metainfo, ToMappable)
    assert not implements(5, Zeroable)


def test_policy_values() -> None:
    assert Policy("use_default") is Policy.USE_DEFAULT
    assert Policy("exclude") is Policy.EXCLUDE


@dataclass
class Leaf:
    a: Annotated[int, Tag(db="a")]
    b: Annotated[int, Tag(db="b")]


@dataclass
class Branch:
    b: Annotated[int, Tag(db="b")]
    leaf: Annotated[Leaf, Embedded()]


def test_table_locators_follow_extraction_order() -> None:
    table = scan(Branch, "db")
    assert table.locators() == {"b": (1, 1), "a": (1, 0)}
    assert table.keys() == ["b", "a"]
    assert len(table) == 3


def test_converts_itself_requires_argument_free_to_map() -> None:
    assert converts_itself(Metainfo("t", "v", NullInt(), False, {}))
    assert not converts_itself(ToMapperFunc(lambda obj: {}))
    assert not converts_itself(Metainfo)
    assert not converts_itself(Timestamp(1))
