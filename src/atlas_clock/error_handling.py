"""Error types and centralized error reporting for Atlas Clock."""

import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class AtlasClockError(Exception):
    """Base class for all Atlas Clock errors."""


class InvalidTimezoneError(AtlasClockError):
    """Raised when a timezone identifier cannot be resolved."""

    def __init__(self, zone: str) -> None:
        self.zone = zone
        super().__init__(f"Unknown timezone: {zone}")


class ConfigError(AtlasClockError):
    """Raised when the persisted clock list cannot be used."""


def report_error(
    exception: BaseException,
    component: str,
    context_name: Optional[str] = None,
    context_data: Optional[Dict[str, Any]] = None,
) -> None:
    """Report an error with its component and context.

    Args:
        exception: The exception that occurred
        component: Component where the error occurred
        context_name: Optional short name describing the failing operation
        context_data: Optional extra values to include in the log record
    """
    context = f"{component}:{context_name}" if context_name else component
    details = ""
    if context_data:
        details = " " + ", ".join(f"{k}={v!r}" for k, v in context_data.items())

    logger.error(
        f"[{context}] {type(exception).__name__}: {exception}{details}",
        exc_info=(type(exception), exception, exception.__traceback__),
    )
