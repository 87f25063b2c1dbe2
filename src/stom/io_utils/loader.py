# SPDX-License-Identifier: MIT
"""Loading of the optional YAML configuration file."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import logfire
import yaml
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from ..models import Policy
from ..utils import ErrorHandler, LoggingErrorHandler


class AppConfig(BaseModel):
    """Converter defaults as written in a configuration file."""

    model_config = ConfigDict(extra="forbid")

    tag: str | None = Field(
        None, min_length=1, description="Annotation name scanned for output keys."
    )
    policy: Policy | None = Field(None, description="Handling of empty values.")
    default_value: Any = Field(
        None, description="Value substituted for empty fields."
    )


def _read_file(path: Path, handler: ErrorHandler) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        handler.handle(f"Configuration file not found: {path}")
        raise
    except OSError as exc:
        handler.handle(f"Error reading configuration file {path}", exc)
        raise RuntimeError(
            f"An error occurred while reading the configuration file: {exc}"
        ) from exc


def load_app_config(
    path: Path | str, error_handler: ErrorHandler | None = None
) -> dict[str, Any]:
    """Return the settings explicitly provided by the YAML file at ``path``.

    Only keys present in the file are returned so that callers can layer them
    under other configuration sources.

    Raises:
        FileNotFoundError: If the file does not exist.
        RuntimeError: If the file cannot be read, parsed or validated.
    """

    handler = error_handler or LoggingErrorHandler()
    path = Path(path)
    with logfire.span("fs.read_yaml", attributes={"path": str(path)}):
        text = _read_file(path, handler)
        try:
            raw = yaml.safe_load(text) or {}
            config = TypeAdapter(AppConfig).validate_python(raw)
        except (ValidationError, yaml.YAMLError, ValueError) as exc:
            handler.handle(f"Error reading YAML file {path}", exc)
            raise RuntimeError(
                f"An error occurred while reading the YAML file: {exc}"
            ) from exc
        return config.model_dump(exclude_unset=True)


__all__ = ["AppConfig", "load_app_config"]
