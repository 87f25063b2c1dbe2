# SPDX-License-Identifier: MIT
"""Converter configuration.

This module exposes :class:`Settings`, a ``pydantic-settings`` model holding
the annotation name, empty-value policy and default value a converter starts
with. Values come from an optional YAML file and from ``STOM_`` prefixed
environment variables; environment variables take precedence over the file.
Settings are immutable, derive variants with ``model_copy(update=...)``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any

from pydantic import Field, SecretStr, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..io_utils.loader import load_app_config
from ..models import Policy
from ..tags import DEFAULT_TAG

TagName = Annotated[str, Field(min_length=1)]


class Settings(BaseSettings):
    """Defaults applied to new converters and to the free-function API."""

    tag: TagName = Field(
        DEFAULT_TAG,
        description="Annotation name whose values become output keys.",
    )
    policy: Policy = Field(
        Policy.USE_DEFAULT, description="Handling of empty field values."
    )
    default_value: Any = Field(
        None, description="Value written for empty fields under use_default."
    )
    logfire_token: SecretStr | None = Field(
        None, description="Logfire API token used by init_logfire."
    )

    model_config = SettingsConfigDict(env_prefix="STOM_", extra="ignore", frozen=True)


def load_settings(config_path: Path | str | None = None) -> Settings:
    """Load and validate converter settings.

    Values from ``config_path`` are used where the environment (including a
    ``.env`` file in the working directory) does not provide one.

    Args:
        config_path: Optional path to a YAML configuration file.

    Returns:
        Settings: Fully validated configuration.

    Raises:
        FileNotFoundError: If ``config_path`` does not exist.
        RuntimeError: If configuration values are invalid.
    """

    file_values = load_app_config(config_path) if config_path else {}
    env_file_path = Path(".env")
    env_file = env_file_path if env_file_path.exists() else None
    try:
        from_env = Settings(_env_file=env_file)  # type: ignore[call-arg]
        overrides = {
            name: getattr(from_env, name) for name in from_env.model_fields_set
        }
        return Settings(
            **{**file_values, **overrides},
            _env_file=env_file,  # type: ignore[call-arg]
        )
    except ValidationError as exc:
        # Summarise validation issues so the caller receives clear feedback.
        details = "; ".join(
            f"{'.'.join(map(str, error['loc']))}: {error['msg']}"
            for error in exc.errors()
        )
        raise RuntimeError(f"Invalid configuration: {details}") from exc
