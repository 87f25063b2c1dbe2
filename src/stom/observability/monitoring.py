# SPDX-License-Identifier: MIT
"""Logfire setup for applications embedding the converters."""

from __future__ import annotations

from typing import Literal

import logfire

from ..runtime import MapperEnv, Settings

LogLevel = Literal["fatal", "error", "warn", "notice", "info", "debug", "trace"]


def _mask_token(value: str | None) -> str | None:
    """Return a masked representation of ``value`` for safe logging."""

    if not value:
        return None
    return f"{value[:4]}..."


def init_logfire(
    settings: Settings | None = None,
    min_log_level: LogLevel = "warn",
    service_name: str = "stom",
) -> None:
    """Configure Logfire and record the converter defaults in effect.

    The library never configures Logfire on import; applications call this
    once at start-up. The token comes from ``settings.logfire_token``
    (``STOM_LOGFIRE_TOKEN``); without one, telemetry stays local.

    Args:
        settings: Settings providing the token and the defaults to report.
            The process-wide defaults are used when omitted.
        min_log_level: Minimum level for console and telemetry output.
        service_name: Service name reported with every span.
    """

    active = settings if settings is not None else MapperEnv.instance().settings
    key = active.logfire_token.get_secret_value() if active.logfire_token else None
    logfire.debug("Configuring logfire", token=_mask_token(key))
    logfire.configure(
        token=key,
        send_to_logfire="if-token-present",
        service_name=service_name,
        console=logfire.ConsoleOptions(
            min_log_level=min_log_level,
            show_project_link=False,
        ),
        min_level=min_log_level,
    )
    instrument = getattr(logfire, "instrument_pydantic", None)
    if instrument:
        instrument()
    logfire.info(
        "stom telemetry configured",
        tag=active.tag,
        policy=active.policy.value,
        default_value=repr(active.default_value),
    )
