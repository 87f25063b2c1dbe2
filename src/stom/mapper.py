# SPDX-License-Identifier: MIT
"""Converters bound to a single record type.

A :class:`Stom` scans its record type once per annotation name and reuses the
resulting table for every conversion::

    converter = Stom(Item).set_tag("db").set_policy(Policy.EXCLUDE)
    params = converter.to_map(item)

Converters are not synchronised. Do not reconfigure one while another thread
converts with it; use one converter per thread instead.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import logfire
from pydantic import TypeAdapter

from .errors import ConstructionFault, NotARecordError, TypeMismatchError
from .extractor import extract
from .models import AnnotationTable, Policy
from .runtime import MapperEnv, Settings
from .runtime.settings import TagName
from .scanner import is_record_type, record_type_of, scan
from .utils import ErrorHandler, LoggingErrorHandler

_TAG_NAME = TypeAdapter(TagName)


def _bound_type(sample: Any) -> type:
    """Return the record type ``sample`` stands for."""

    if isinstance(sample, type):
        if is_record_type(sample):
            return sample
        raise NotARecordError(f"provided value is not a record but {sample!r}")
    return record_type_of(sample)


class Stom:
    """Structure-to-map converter for one record type."""

    def __init__(
        self,
        sample: Any,
        settings: Settings | None = None,
        error_handler: ErrorHandler | None = None,
    ) -> None:
        """Create a converter for the type of ``sample``.

        Args:
            sample: Record instance or record class to bind to.
            settings: Initial tag, policy and default value. The process
                defaults held by :class:`~stom.runtime.MapperEnv` are used when
                omitted.
            error_handler: Receives conversion failures before they propagate.

        Raises:
            ConstructionFault: If ``sample`` is not a record or record class.
        """

        try:
            self._record_type = _bound_type(sample)
        except NotARecordError as exc:
            raise ConstructionFault(str(exc)) from exc

        if settings is None:
            settings = MapperEnv.instance().settings
        self._error_handler = error_handler or LoggingErrorHandler()
        self._policy = settings.policy
        self._default = settings.default_value
        self._tag = settings.tag
        self._table = scan(self._record_type, self._tag)
        logfire.debug(
            "Created converter",
            record_type=self._record_type.__qualname__,
            tag=self._tag,
            policy=self._policy.value,
        )

    @property
    def record_type(self) -> type:
        return self._record_type

    @property
    def tag(self) -> str:
        return self._tag

    @property
    def policy(self) -> Policy:
        return self._policy

    @property
    def default(self) -> Any:
        return self._default

    @property
    def table(self) -> AnnotationTable:
        """Return the annotation table for the current tag."""
        return self._table

    def set_tag(self, tag: str) -> "Stom":
        """Scan the bound type for ``tag``, replacing the previous table.

        Raises:
            pydantic.ValidationError: If ``tag`` is empty.
        """

        tag = _TAG_NAME.validate_python(tag)
        self._table = scan(self._record_type, tag)
        self._tag = tag
        logfire.debug(
            "Converter tag changed",
            record_type=self._record_type.__qualname__,
            tag=tag,
        )
        return self

    def set_default(self, default: Any) -> "Stom":
        """Use ``default`` in place of empty values under ``USE_DEFAULT``."""

        self._default = default
        return self

    def set_policy(self, policy: Policy | str) -> "Stom":
        """Set the handling of empty values."""

        self._policy = Policy(policy)
        return self

    def to_map(self, obj: Any) -> dict[str, Any]:
        """Convert ``obj`` to a mapping.

        Only instances of exactly the bound record type are accepted.

        Raises:
            NotARecordError: If ``obj`` is not a record instance.
            TypeMismatchError: If ``obj`` is a record of another type.
        """

        typ = record_type_of(obj)
        if typ is not self._record_type:
            exc = TypeMismatchError(self._record_type, typ)
            self._error_handler.handle(
                "Conversion rejected",
                exc,
                record_type=self._record_type.__qualname__,
            )
            raise exc
        return extract(
            obj, self._table, self._default, self._policy, self._error_handler
        )

    def __repr__(self) -> str:
        return (
            f"Stom({self._record_type.__qualname__}, tag={self._tag!r}, "
            f"policy={self._policy.value!r})"
        )


def must_new_stom(sample: Any, settings: Settings | None = None) -> Stom:
    """Return a converter for ``sample``; raises :class:`ConstructionFault`."""

    return Stom(sample, settings)


class ToMapperFunc:
    """Adapter exposing a plain conversion function as a ``ToMapper``.

    The adapter is not a record itself, so passing it where a record is
    expected raises :class:`~stom.errors.NotARecordError`.
    """

    __slots__ = ("func",)

    def __init__(self, func: Callable[[Any], dict[str, Any]]) -> None:
        self.func = func

    def to_map(self, obj: Any) -> dict[str, Any]:
        return self.func(obj)

    def __repr__(self) -> str:
        return f"ToMapperFunc({self.func!r})"


__all__ = ["Stom", "must_new_stom", "ToMapperFunc"]
