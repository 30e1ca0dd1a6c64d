"""Threshold filtering and forwarding to the logging backend."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol

from .models import ClassifiedRecord, Module, Severity


class EventLogger(Protocol):
    """Leveled logger for one (module, category) pair."""

    def audit(self, message: str, *args: Any) -> None: ...

    def error(self, message: str, *args: Any) -> None: ...

    def warn(self, message: str, *args: Any) -> None: ...

    def info(self, message: str, *args: Any) -> None: ...

    def debug(self, message: str, *args: Any) -> None: ...

    def trace(self, message: str, *args: Any) -> None: ...


class LoggerFactory(Protocol):
    """Logging backend entry point."""

    def get_logger(self, module: Module | None, category: str) -> EventLogger:
        """Return the logger for records from `module` under `category`."""
        ...


def _method_for(logger: EventLogger, severity: Severity) -> Callable[..., None]:
    if severity is Severity.AUDIT:
        return logger.audit
    if severity is Severity.ERROR:
        return logger.error
    if severity is Severity.WARN:
        return logger.warn
    if severity is Severity.INFO:
        return logger.info
    if severity is Severity.DEBUG:
        return logger.debug
    if severity is Severity.TRACE:
        return logger.trace
    raise ValueError(f"No logger method for severity {severity.value}")


def dispatch(record: ClassifiedRecord, threshold: Severity, factory: LoggerFactory) -> bool:
    """Forward `record` if its severity passes `threshold`.

    Returns True when the record reached a logger. Backend errors propagate.
    """
    if threshold is Severity.DISABLED:
        return False
    if not threshold.enables(record.severity):
        return False

    logger = factory.get_logger(record.module, record.category)
    log = _method_for(logger, record.severity)
    if record.payload is None:
        log(record.message)
    else:
        log(record.message, record.payload)
    return True
