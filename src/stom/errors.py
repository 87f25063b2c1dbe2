# SPDX-License-Identifier: MIT
"""Exception types raised by the converters.

:class:`StomError` and its subclasses describe recoverable conversion
problems. :class:`ConstructionFault` is not a :class:`StomError`; it signals a
converter wired to something that is not a record at setup time.
"""

from __future__ import annotations


class StomError(Exception):
    """Base class for recoverable conversion errors."""


class NotARecordError(StomError, TypeError):
    """Raised when a value is neither a dataclass nor a pydantic model."""


class ScanError(StomError, TypeError):
    """Raised when a record type cannot be scanned for annotations."""


class TypeMismatchError(StomError, TypeError):
    """Raised when a converter receives a record of a foreign type."""

    def __init__(self, expected: type, actual: type) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"stom is set up to work with type {_qualname(expected)}, "
            f"but {_qualname(actual)} given"
        )


class ConstructionFault(TypeError):
    """Raised when a converter is created for something that is not a record."""


def _qualname(typ: type) -> str:
    """Return the dotted name of ``typ`` for error messages."""

    return f"{typ.__module__}.{typ.__qualname__}"


__all__ = [
    "StomError",
    "NotARecordError",
    "ScanError",
    "TypeMismatchError",
    "ConstructionFault",
]
