# SPDX-License-Identifier: MIT
"""Value extraction and empty-value policy.

:func:`extract` reads the current field values of a record according to an
:class:`~stom.models.AnnotationTable` and assembles the flat output mapping.
Direct fields are written first in declaration order, followed by embedded
records; a key written twice keeps the last value.
"""

from __future__ import annotations

from typing import Any

import logfire

from .capabilities import Valuer, Zeroable, converts_itself, implements
from .models import AnnotationTable, Policy
from .utils import ErrorHandler, LoggingErrorHandler


class _Empty:
    """Sentinel type for empty field values."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "EMPTY"


EMPTY: Any = _Empty()


def _db_value(value: Any) -> Any:
    """Return ``value.db_value()``, treating a failing wrapper as holding nothing."""

    try:
        return value.db_value()
    except Exception as exc:
        logfire.debug(
            "Nullable value could not be read, treating it as empty",
            value_type=type(value).__qualname__,
            error=str(exc),
        )
        return None


def filter_value(value: Any) -> Any:
    """Return ``value`` prepared for output, or :data:`EMPTY`.

    ``None`` and values reporting an empty state become :data:`EMPTY`.
    Nullable wrappers holding a valid value are returned unchanged; a wrapper
    whose ``db_value()`` raises counts as empty. Values implementing
    :class:`~stom.capabilities.ToMappable` are replaced by the mapping they
    produce; any exception raised there propagates. Converters stored in a
    field are emitted as they are.
    """

    if value is None:
        return EMPTY
    if implements(value, Valuer):
        return EMPTY if _db_value(value) is None else value
    if implements(value, Zeroable):
        return EMPTY if value.is_zero() else value
    if converts_itself(value):
        return value.to_map()
    return value


def extract(
    record: Any,
    table: AnnotationTable,
    default: Any = None,
    policy: Policy = Policy.USE_DEFAULT,
    error_handler: ErrorHandler | None = None,
) -> dict[str, Any]:
    """Return the mapping of ``record`` described by ``table``.

    Args:
        record: Instance of ``table.record_type``.
        table: Annotation table produced by :func:`stom.scanner.scan`.
        default: Value written for empty fields under ``Policy.USE_DEFAULT``.
        policy: Handling of empty field values.
        error_handler: Receives failures of self-converting fields before they
            are re-raised.

    Returns:
        Flat mapping of output keys to values.
    """

    handler = error_handler or LoggingErrorHandler()
    result: dict[str, Any] = {}

    for entry in table.fields:
        try:
            value = filter_value(entry.read(record))
        except Exception as exc:
            handler.handle(
                f"Field {entry.name!r} failed to convert",
                exc,
                record_type=table.record_type.__qualname__,
                key=entry.key,
            )
            raise
        if value is not EMPTY:
            result[entry.key] = value
        elif policy is Policy.USE_DEFAULT:
            result[entry.key] = default

    for nested in table.nested:
        sub_record = nested.read(record)
        # A missing embedded record contributes no keys, not even defaults.
        if sub_record is None:
            continue
        result.update(extract(sub_record, nested.table, default, policy, handler))

    return result


__all__ = ["extract", "filter_value", "EMPTY"]
