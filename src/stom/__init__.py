# SPDX-License-Identifier: MIT
"""Convert dataclasses and pydantic models to flat mappings.

Fields opt in with :class:`Tag` annotations naming their output key for one
or more annotation names; embedded records marked with :class:`Embedded` are
flattened into their container. Empty values are either replaced with a
default or dropped, depending on the :class:`Policy`.

Exports:
    Stom: Converter bound to one record type.
    convert_to_map: Convert using the process-wide defaults.
    Tag, Embedded: Field annotation markers.
    Policy: Empty-value handling.
"""

from .api import convert_to_map, get_settings, set_default, set_policy, set_tag
from .capabilities import ToMappable, ToMapper, Valuer, Zeroable
from .errors import (
    ConstructionFault,
    NotARecordError,
    ScanError,
    StomError,
    TypeMismatchError,
)
from .mapper import Stom, ToMapperFunc, must_new_stom
from .models import AnnotationTable, Policy
from .nulls import Null, NullBool, NullFloat, NullInt, NullString, NullTime
from .runtime import MapperEnv, Settings, load_settings
from .scanner import scan
from .tags import DEFAULT_TAG, SKIP, Embedded, Tag

__all__ = [
    "AnnotationTable",
    "ConstructionFault",
    "DEFAULT_TAG",
    "Embedded",
    "MapperEnv",
    "NotARecordError",
    "Null",
    "NullBool",
    "NullFloat",
    "NullInt",
    "NullString",
    "NullTime",
    "Policy",
    "SKIP",
    "ScanError",
    "Settings",
    "Stom",
    "StomError",
    "Tag",
    "ToMappable",
    "ToMapper",
    "ToMapperFunc",
    "TypeMismatchError",
    "Valuer",
    "Zeroable",
    "convert_to_map",
    "get_settings",
    "load_settings",
    "must_new_stom",
    "scan",
    "set_default",
    "set_policy",
    "set_tag",
]
