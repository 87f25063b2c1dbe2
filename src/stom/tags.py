# SPDX-License-Identifier: MIT
"""Field annotation markers.

Fields declare their output keys with :class:`Tag` markers placed in
``typing.Annotated`` metadata::

    @dataclass
    class Item:
        id: Annotated[int, Tag(db="id", custom_tag="item_id")]
        parent: Annotated[Parent | None, Embedded()] = None

Dataclass fields may instead carry plain string tags in their field metadata,
e.g. ``field(metadata={"db": "id"})``. When both are present the ``Annotated``
marker wins for the same annotation name.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

SKIP = "-"
DEFAULT_TAG = "db"


class Tag:
    """Output keys of a field, one per annotation name."""

    def __init__(self, **values: str) -> None:
        for name, value in values.items():
            if not isinstance(value, str):
                raise TypeError(
                    f"tag {name!r} must be a string, got {type(value).__name__}"
                )
        self._values: dict[str, str] = dict(values)

    def get(self, name: str) -> str:
        """Return the key declared for ``name`` or an empty string."""

        return self._values.get(name, "")

    @property
    def values(self) -> Mapping[str, str]:
        return dict(self._values)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._values == other._values  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), tuple(sorted(self._values.items()))))

    def __repr__(self) -> str:
        args = ", ".join(f"{k}={v!r}" for k, v in self._values.items())
        return f"{type(self).__name__}({args})"


class Embedded(Tag):
    """Marks a field holding a record whose fields are flattened into the parent.

    ``Embedded(db="-")`` excludes the embedded record for the ``db`` tag.
    """


class FieldTags:
    """Resolved annotation data for a single record field."""

    def __init__(self, values: Mapping[str, str], embedded: bool) -> None:
        self._values = dict(values)
        self.embedded = embedded

    def get(self, name: str) -> str:
        return self._values.get(name, "")


def collect_tags(
    markers: Iterable[Any], field_metadata: Mapping[Any, Any] | None = None
) -> FieldTags:
    """Merge string metadata and :class:`Tag` markers into :class:`FieldTags`."""

    values: dict[str, str] = {}
    if field_metadata:
        values.update(
            (k, v)
            for k, v in field_metadata.items()
            if isinstance(k, str) and isinstance(v, str)
        )
    embedded = False
    for marker in markers:
        if isinstance(marker, Tag):
            values.update(marker.values)
            embedded = embedded or isinstance(marker, Embedded)
    return FieldTags(values, embedded)


__all__ = ["Tag", "Embedded", "FieldTags", "collect_tags", "SKIP", "DEFAULT_TAG"]
