# SPDX-License-Identifier: MIT
"""Nullable scalar wrappers carrying a validity flag.

These mirror the nullable column types database drivers expose. A wrapper
with ``valid=False`` is an empty value for conversion purposes; a valid one is
emitted unchanged so the data-access layer receives the wrapper itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Null(Generic[T]):
    """A value of type ``T`` that may be absent."""

    data: T | None = None
    valid: bool = False

    @classmethod
    def of(cls, data: T) -> "Null[T]":
        """Return a valid wrapper holding ``data``."""

        return cls(data, True)

    def db_value(self) -> T | None:
        return self.data if self.valid else None


class NullString(Null[str]):
    pass


class NullInt(Null[int]):
    pass


class NullFloat(Null[float]):
    pass


class NullBool(Null[bool]):
    pass


class NullTime(Null[datetime]):
    pass


__all__ = ["Null", "NullString", "NullInt", "NullFloat", "NullBool", "NullTime"]
