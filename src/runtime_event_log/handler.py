"""Host event listener.

One handler is registered with the host for module, framework and service
events. Each event is classified and forwarded synchronously on the calling
thread; the threshold is resolved once and never changes.
"""

from __future__ import annotations

from runtime_event_log.core.classify import (
    classify,
    classify_framework_event,
    classify_module_event,
    classify_service_event,
)
from runtime_event_log.core.config import PropertySource, resolve_threshold
from runtime_event_log.core.dispatch import LoggerFactory, dispatch
from runtime_event_log.core.models import Event, FrameworkEvent, ModuleEvent, ServiceEvent, Severity


class FrameworkEventHandler:
    """Translate host lifecycle events into log records."""

    __slots__ = ("_factory", "_threshold")

    def __init__(self, factory: LoggerFactory, properties: PropertySource | None = None) -> None:
        self._factory = factory
        self._threshold = resolve_threshold(properties)

    @property
    def threshold(self) -> Severity:
        return self._threshold

    def module_changed(self, event: ModuleEvent) -> None:
        dispatch(classify_module_event(event), self._threshold, self._factory)

    def framework_event(self, event: FrameworkEvent) -> None:
        dispatch(classify_framework_event(event), self._threshold, self._factory)

    def service_changed(self, event: ServiceEvent) -> None:
        dispatch(classify_service_event(event), self._threshold, self._factory)

    def handle(self, event: Event) -> bool:
        """Classify and dispatch any event; return True if it was logged."""
        return dispatch(classify(event), self._threshold, self._factory)
