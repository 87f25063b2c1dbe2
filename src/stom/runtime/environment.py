# SPDX-License-Identifier: MIT
"""Runtime environment singleton holding process-wide converter defaults."""

from __future__ import annotations

from threading import Lock
from typing import Any

import logfire

from .settings import Settings, load_settings


class MapperEnv:
    """Thread-safe singleton storing the default :class:`Settings`.

    The settings object is immutable; updates replace it under a lock so
    readers always observe a consistent tag, policy and default value.
    """

    _instance: "MapperEnv" | None = None
    _lock = Lock()

    def __init__(self, settings: Settings) -> None:
        """Initialise the runtime environment."""
        self._settings = settings
        self._state_lock = Lock()
        logfire.debug("MapperEnv created", settings=repr(settings))

    @property
    def settings(self) -> Settings:
        """Return the current default settings."""
        with self._state_lock:
            return self._settings

    def update(self, **changes: Any) -> Settings:
        """Replace the default settings with ``changes`` applied.

        Values are validated by re-constructing the settings model.

        Returns:
            The new default settings.
        """
        with self._state_lock:
            current = {
                name: getattr(self._settings, name) for name in Settings.model_fields
            }
            data = {**current, **changes}
            self._settings = Settings.model_validate(data)
            return self._settings

    @classmethod
    def initialize(cls, settings: Settings | None = None) -> "MapperEnv":
        """Initialise and return the runtime environment.

        Args:
            settings: Validated settings. Loaded from the environment when
                omitted.

        Returns:
            The active :class:`MapperEnv` instance.
        """
        with logfire.span("mapper_env.initialize"):
            with cls._lock:
                logfire.info("Initialising mapper environment")
                cls._instance = cls(settings or load_settings())
                return cls._instance

    @classmethod
    def instance(cls) -> "MapperEnv":
        """Return the current runtime environment, initialising it on first use.

        Concurrent first calls create a single environment.
        """
        inst = cls._instance
        if inst is not None:
            return inst
        with logfire.span("mapper_env.initialize"):
            with cls._lock:
                if cls._instance is None:
                    logfire.info("Initialising mapper environment")
                    cls._instance = cls(load_settings())
                return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Discard the active environment so the next access reloads settings."""
        with logfire.span("mapper_env.reset"):
            with cls._lock:
                logfire.info("Resetting mapper environment")
                cls._instance = None


__all__ = ["MapperEnv"]
