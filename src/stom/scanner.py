# SPDX-License-Identifier: MIT
"""Annotation scanning for record types.

:func:`scan` walks a dataclass or pydantic model once and returns the
:class:`~stom.models.AnnotationTable` describing which fields map to which
output keys. Embedded records are scanned recursively so that any depth of
nesting flattens into one mapping.
"""

from __future__ import annotations

import dataclasses
import types
from operator import attrgetter
from typing import (
    Annotated,
    Any,
    Iterator,
    NamedTuple,
    Union,
    get_args,
    get_origin,
    get_type_hints,
)

import logfire
from pydantic import BaseModel

from .errors import NotARecordError, ScanError
from .models import AnnotationTable, FieldEntry, NestedEntry
from .tags import SKIP, FieldTags, collect_tags


class _FieldInfo(NamedTuple):
    index: int
    name: str
    annotation: Any
    tags: FieldTags


def is_record_type(typ: Any) -> bool:
    """Return ``True`` when ``typ`` is a dataclass or pydantic model class."""

    if not isinstance(typ, type):
        return False
    return dataclasses.is_dataclass(typ) or issubclass(typ, BaseModel)


def record_type_of(obj: Any) -> type:
    """Return the record class of instance ``obj``.

    Raises:
        NotARecordError: If ``obj`` is ``None`` or not a record instance.
    """

    if obj is None:
        raise NotARecordError("value is invalid: None")
    if isinstance(obj, type):
        raise NotARecordError(
            f"expected a record instance, got class {obj.__qualname__}"
        )
    typ = type(obj)
    if not is_record_type(typ):
        raise NotARecordError(f"provided value is not a record but {typ.__name__}")
    return typ


def _split_annotated(hint: Any) -> tuple[Any, list[Any]]:
    """Return the bare type of ``hint`` and its ``Annotated`` metadata."""

    markers: list[Any] = []
    while get_origin(hint) is Annotated:
        args = get_args(hint)
        hint = args[0]
        markers.extend(args[1:])
    return hint, markers


def _resolve_record(hint: Any) -> type | None:
    """Return the record class named by ``hint``, unwrapping ``Optional``."""

    hint, _ = _split_annotated(hint)
    if get_origin(hint) in (Union, types.UnionType):
        candidates = [arg for arg in get_args(hint) if arg is not type(None)]
        if len(candidates) != 1:
            return None
        return _resolve_record(candidates[0])
    return hint if is_record_type(hint) else None


def _dataclass_fields(record_type: type) -> Iterator[_FieldInfo]:
    try:
        hints = get_type_hints(record_type, include_extras=True)
    except (NameError, TypeError) as exc:
        raise ScanError(
            f"cannot resolve annotations of {record_type.__qualname__}: {exc}"
        ) from exc
    for index, fld in enumerate(dataclasses.fields(record_type)):
        annotation, markers = _split_annotated(hints.get(fld.name, fld.type))
        yield _FieldInfo(
            index, fld.name, annotation, collect_tags(markers, fld.metadata)
        )


def _model_fields(record_type: type[BaseModel]) -> Iterator[_FieldInfo]:
    for index, (name, info) in enumerate(record_type.model_fields.items()):
        yield _FieldInfo(index, name, info.annotation, collect_tags(info.metadata))


def iter_fields(record_type: type) -> Iterator[_FieldInfo]:
    """Yield the fields of ``record_type`` in declaration order."""

    if dataclasses.is_dataclass(record_type):
        return _dataclass_fields(record_type)
    return _model_fields(record_type)


def _scan(record_type: type, tag: str, seen: tuple[type, ...]) -> AnnotationTable:
    if record_type in seen:
        chain = " -> ".join(t.__qualname__ for t in (*seen, record_type))
        raise ScanError(f"embedding cycle detected: {chain}")

    simple: list[FieldEntry] = []
    nested: list[NestedEntry] = []
    for info in iter_fields(record_type):
        if info.name.startswith("_"):
            continue
        value = info.tags.get(tag)
        if info.tags.embedded:
            if value == SKIP:
                continue
            sub_type = _resolve_record(info.annotation)
            if sub_type is None:
                raise ScanError(
                    f"embedded field {record_type.__qualname__}.{info.name} "
                    f"is not a record type: {info.annotation!r}"
                )
            table = _scan(sub_type, tag, (*seen, record_type))
            nested.append(
                NestedEntry(info.index, info.name, table, attrgetter(info.name))
            )
            continue
        if value and value != SKIP:
            simple.append(
                FieldEntry(info.index, info.name, value, attrgetter(info.name))
            )

    return AnnotationTable(record_type, tag, tuple(simple), tuple(nested))


def scan(record_type: type, tag: str) -> AnnotationTable:
    """Return the annotation table of ``record_type`` for annotation ``tag``.

    Args:
        record_type: Dataclass or pydantic model class to scan.
        tag: Annotation name whose values become output keys.

    Returns:
        Immutable table of direct and embedded field entries.

    Raises:
        NotARecordError: If ``record_type`` is not a record class.
        ScanError: If an embedded field cannot be resolved to a record type or
            the embedding is cyclic.
    """

    if not is_record_type(record_type):
        raise NotARecordError(f"{record_type!r} is not a record type")
    with logfire.span(
        "stom.scan",
        attributes={"record_type": record_type.__qualname__, "tag": tag},
    ) as span:
        table = _scan(record_type, tag, ())
        span.set_attribute("keys", len(table))
        return table


__all__ = ["scan", "iter_fields", "is_record_type", "record_type_of"]
