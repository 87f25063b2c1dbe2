"""Error reporting abstractions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

import logfire


class ErrorHandler(ABC):
    """Interface for reporting conversion errors before they propagate.

    Implementations must not raise; the caller re-raises the original error
    after reporting it.
    """

    @abstractmethod
    def handle(
        self, message: str, exc: Exception | None = None, **context: Any
    ) -> None:
        """Record ``message`` with optional ``exc`` and structured ``context``."""


class LoggingErrorHandler(ErrorHandler):
    """Error handler that logs via ``logfire``."""

    def handle(
        self, message: str, exc: Exception | None = None, **context: Any
    ) -> None:
        """Log an error message with optional exception context.

        Args:
            message: Description of the error to record.
            exc: Exception instance providing additional context.
            **context: Attributes attached to the log record, such as the
                record type or output key involved.
        """
        if exc:
            logfire.error(f"{message}: {exc}", **context)
        else:
            logfire.error(message, **context)
