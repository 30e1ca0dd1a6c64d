"""Logging backend adapter for the standard `logging` module.

Categories become logger names and the originating module travels in the
record's `extra` data. TRACE and AUDIT are registered as extra level names.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any

from runtime_event_log.core.models import Module, Severity

TRACE = 5
AUDIT = 60

logging.addLevelName(TRACE, "TRACE")
logging.addLevelName(AUDIT, "AUDIT")

PYTHON_LEVELS: dict[Severity, int] = {
    Severity.TRACE: TRACE,
    Severity.DEBUG: logging.DEBUG,
    Severity.INFO: logging.INFO,
    Severity.WARN: logging.WARNING,
    Severity.ERROR: logging.ERROR,
    Severity.AUDIT: AUDIT,
}


def configure_logging() -> None:
    """Configure a reasonable default logging setup.

    The level comes from RUNTIME_EVENT_LOG_LOG_LEVEL (default INFO).
    """
    level_name = os.getenv("RUNTIME_EVENT_LOG_LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.INFO
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s [%(host_module)s]: %(message)s",
            defaults={"host_module": "-"},
        )
    )
    logging.basicConfig(level=level, handlers=[handler])


@dataclass(frozen=True, slots=True)
class StdlibEventLogger:
    """Leveled logger writing to one stdlib logger on behalf of one module."""

    logger: logging.Logger
    module: Module | None = None

    def _log(self, severity: Severity, message: str, args: tuple[Any, ...]) -> None:
        level = PYTHON_LEVELS[severity]
        if not self.logger.isEnabledFor(level):
            return
        payload = args[0] if args else None
        extra = {
            "host_module": str(self.module) if self.module is not None else "-",
            "payload": payload,
        }
        exc_info = payload if isinstance(payload, BaseException) else None
        # No args: the message is emitted verbatim, never %-formatted.
        self.logger.log(level, message, extra=extra, exc_info=exc_info)

    def audit(self, message: str, *args: Any) -> None:
        self._log(Severity.AUDIT, message, args)

    def error(self, message: str, *args: Any) -> None:
        self._log(Severity.ERROR, message, args)

    def warn(self, message: str, *args: Any) -> None:
        self._log(Severity.WARN, message, args)

    def info(self, message: str, *args: Any) -> None:
        self._log(Severity.INFO, message, args)

    def debug(self, message: str, *args: Any) -> None:
        self._log(Severity.DEBUG, message, args)

    def trace(self, message: str, *args: Any) -> None:
        self._log(Severity.TRACE, message, args)


@dataclass(frozen=True, slots=True)
class StdlibLoggerFactory:
    """Logger factory backed by `logging.getLogger(prefix + category)`."""

    prefix: str = ""

    def get_logger(self, module: Module | None, category: str) -> StdlibEventLogger:
        return StdlibEventLogger(logger=logging.getLogger(self.prefix + category), module=module)
