from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import pytest

from runtime_event_log.core.config import MappingPropertySource
from runtime_event_log.core.models import Module, Severity


@dataclass
class LoggedCall:
    severity: Severity
    module: Module | None
    category: str
    message: str
    args: tuple[Any, ...]


@dataclass
class RecordingLogger:
    calls: list[LoggedCall]
    module: Module | None
    category: str

    def _record(self, severity: Severity, message: str, args: tuple[Any, ...]) -> None:
        self.calls.append(LoggedCall(severity, self.module, self.category, message, args))

    def audit(self, message: str, *args: Any) -> None:
        self._record(Severity.AUDIT, message, args)

    def error(self, message: str, *args: Any) -> None:
        self._record(Severity.ERROR, message, args)

    def warn(self, message: str, *args: Any) -> None:
        self._record(Severity.WARN, message, args)

    def info(self, message: str, *args: Any) -> None:
        self._record(Severity.INFO, message, args)

    def debug(self, message: str, *args: Any) -> None:
        self._record(Severity.DEBUG, message, args)

    def trace(self, message: str, *args: Any) -> None:
        self._record(Severity.TRACE, message, args)


@dataclass
class RecordingLoggerFactory:
    calls: list[LoggedCall] = field(default_factory=list)

    def get_logger(self, module: Module | None, category: str) -> RecordingLogger:
        return RecordingLogger(self.calls, module, category)


@pytest.fixture
def factory() -> RecordingLoggerFactory:
    return RecordingLoggerFactory()


@pytest.fixture
def properties() -> Callable[..., MappingPropertySource]:
    def _make(**values: str) -> MappingPropertySource:
        return MappingPropertySource(
            {f"runtime_event_log.{key}": value for key, value in values.items()}
        )

    return _make


@pytest.fixture(autouse=True)
def _clear_threshold_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("RUNTIME_EVENT_LOG_FRAMEWORK_EVENTS_LOG_LEVEL", raising=False)
