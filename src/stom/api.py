# SPDX-License-Identifier: MIT
"""Module-level conversion using the process-wide defaults.

:func:`convert_to_map` rescans the record type on every call. Create a
:class:`~stom.mapper.Stom` when converting many records of one type.
"""

from __future__ import annotations

from typing import Any

from .capabilities import converts_itself
from .extractor import extract
from .models import Policy
from .runtime import MapperEnv, Settings
from .scanner import record_type_of, scan


def get_settings() -> Settings:
    """Return the current process-wide defaults."""

    return MapperEnv.instance().settings


def set_tag(tag: str) -> None:
    """Set the annotation name used by default."""

    MapperEnv.instance().update(tag=tag)


def set_default(default: Any) -> None:
    """Set the value written in place of empty values by default."""

    MapperEnv.instance().update(default_value=default)


def set_policy(policy: Policy | str) -> None:
    """Set the default policy for empty values.

    ``Policy.USE_DEFAULT`` writes the default value, ``Policy.EXCLUDE`` drops
    the key.
    """

    MapperEnv.instance().update(policy=Policy(policy))


def convert_to_map(obj: Any, settings: Settings | None = None) -> dict[str, Any]:
    """Convert ``obj`` to a mapping.

    Records implementing :class:`~stom.capabilities.ToMappable` convert
    themselves. Anything else is scanned with the active tag and extracted
    with the active policy and default value.

    Args:
        obj: Record instance to convert.
        settings: Configuration to use instead of the process defaults.

    Raises:
        NotARecordError: If ``obj`` is not a record instance.
    """

    if converts_itself(obj):
        return obj.to_map()

    active = settings if settings is not None else get_settings()
    table = scan(record_type_of(obj), active.tag)
    return extract(obj, table, active.default_value, active.policy)


__all__ = ["convert_to_map", "get_settings", "set_tag", "set_default", "set_policy"]
