# SPDX-License-Identifier: MIT
"""Data structures shared by the scanner, the extractor and the converters.

:class:`AnnotationTable` is the descriptor produced once per record type and
annotation name. It lists, in declaration order, the direct fields that map to
an output key and the embedded records whose own tables are flattened into the
parent mapping. Tables are immutable and safe to share between converters.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Policy(str, Enum):
    """What to do with empty field values."""

    # Write the configured default value, which may itself be ``None``.
    USE_DEFAULT = "use_default"

    # Leave the key out of the resulting mapping.
    EXCLUDE = "exclude"


@dataclass(frozen=True)
class FieldEntry:
    """A direct field mapped to an output key."""

    index: int
    name: str
    key: str
    accessor: Callable[[Any], Any] = field(compare=False, repr=False)

    def read(self, record: Any) -> Any:
        """Return the current value of this field on ``record``."""

        return self.accessor(record)


@dataclass(frozen=True)
class NestedEntry:
    """An embedded record flattened into its container."""

    index: int
    name: str
    table: "AnnotationTable"
    accessor: Callable[[Any], Any] = field(compare=False, repr=False)

    def read(self, record: Any) -> Any:
        return self.accessor(record)


@dataclass(frozen=True)
class AnnotationTable:
    """Output keys and field locations for one record type and tag."""

    record_type: type
    tag: str
    fields: tuple[FieldEntry, ...] = ()
    nested: tuple[NestedEntry, ...] = ()

    def locators(self) -> dict[str, tuple[int, ...]]:
        """Return every reachable output key mapped to its field position path.

        Keys are resolved in extraction order, so a key declared more than once
        points at the location whose value would be written last.
        """

        result: dict[str, tuple[int, ...]] = {}
        for entry in self.fields:
            result[entry.key] = (entry.index,)
        for nested in self.nested:
            for key, path in nested.table.locators().items():
                result[key] = (nested.index, *path)
        return result

    def keys(self) -> list[str]:
        """Return all transitively reachable output keys."""

        return list(self.locators())

    def __len__(self) -> int:
        return len(self.fields) + sum(len(n.table) for n in self.nested)


__all__ = ["Policy", "FieldEntry", "NestedEntry", "AnnotationTable"]
