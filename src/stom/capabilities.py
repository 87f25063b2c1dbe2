# SPDX-License-Identifier: MIT
"""Capability protocols values and records may opt into.

The extractor checks these in a fixed order: :class:`Valuer`, then
:class:`Zeroable`, then :class:`ToMappable`.
"""

from __future__ import annotations

import inspect
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Zeroable(Protocol):
    """A value able to report that it is in its zero state."""

    def is_zero(self) -> bool: ...


@runtime_checkable
class ToMappable(Protocol):
    """A value that converts itself to a mapping, bypassing generic extraction."""

    def to_map(self) -> dict[str, Any]: ...


@runtime_checkable
class Valuer(Protocol):
    """A nullable wrapper exposing its database representation.

    ``db_value`` returns ``None`` when the wrapper holds no valid value.
    """

    def db_value(self) -> Any: ...


@runtime_checkable
class ToMapper(Protocol):
    """A service converting records to mappings."""

    def to_map(self, obj: Any) -> dict[str, Any]: ...


def implements(value: Any, capability: type) -> bool:
    """Return ``True`` when ``value`` is an instance providing ``capability``.

    Classes are never treated as providing a capability even though their
    unbound methods satisfy the structural check.
    """

    return not isinstance(value, type) and isinstance(value, capability)


def _callable_without_arguments(method: Any) -> bool:
    try:
        inspect.signature(method).bind()
    except TypeError:
        return False
    except ValueError:
        # No introspectable signature, e.g. some builtins.
        return True
    return True


def converts_itself(value: Any) -> bool:
    """Return ``True`` when ``value`` is :class:`ToMappable`.

    :class:`ToMappable` and :class:`ToMapper` share the ``to_map`` name, so the
    structural check alone would also accept converters. Only a ``to_map``
    callable without arguments counts as self-conversion.
    """

    return implements(value, ToMappable) and _callable_without_arguments(
        value.to_map
    )


__all__ = [
    "Zeroable",
    "ToMappable",
    "Valuer",
    "ToMapper",
    "implements",
    "converts_itself",
]
