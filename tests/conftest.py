# SPDX-License-Identifier: MIT
"""Test configuration for stom.

Keeps Logfire local and gives every test fresh process-wide defaults.
"""

from __future__ import annotations

import logfire
import pytest

from stom.runtime import MapperEnv, Settings

logfire.configure(send_to_logfire=False, console=False)

_STOM_VARS = ("STOM_TAG", "STOM_POLICY", "STOM_DEFAULT_VALUE", "STOM_LOGFIRE_TOKEN")


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    """Strip ``STOM_`` variables and reset the runtime environment."""

    for var in _STOM_VARS:
        monkeypatch.delenv(var, raising=False)
    MapperEnv.reset()
    yield
    MapperEnv.reset()


@pytest.fixture()
def settings() -> Settings:
    """Provide default settings independent of the environment."""

    return Settings.model_validate({})
