# SPDX-License-Identifier: MIT
"""Runtime package exposing the :class:`MapperEnv` singleton and settings."""

from .environment import MapperEnv
from .settings import Settings, load_settings

__all__ = ["MapperEnv", "Settings", "load_settings"]
