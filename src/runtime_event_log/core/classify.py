"""Event classification.

Each event kind maps its type code to a severity and a message. Unknown codes
never fail: they get a fallback message at the kind's default severity.
"""

from __future__ import annotations

from .models import (
    ClassifiedRecord,
    Event,
    FrameworkEvent,
    FrameworkEventType,
    ModuleEvent,
    ModuleEventType,
    ServiceEvent,
    ServiceEventType,
    Severity,
)

MODULE_CATEGORY = "Events.Module"
FRAMEWORK_CATEGORY = "Events.Framework"
SERVICE_CATEGORY = "Events.Service"

_MODULE_SYMBOLS: dict[int, str] = {
    ModuleEventType.INSTALLED: "INSTALLED",
    ModuleEventType.STARTED: "STARTED",
    ModuleEventType.STOPPED: "STOPPED",
    ModuleEventType.UPDATED: "UPDATED",
    ModuleEventType.UNINSTALLED: "UNINSTALLED",
    ModuleEventType.RESOLVED: "RESOLVED",
    ModuleEventType.UNRESOLVED: "UNRESOLVED",
    ModuleEventType.STARTING: "STARTING",
    ModuleEventType.STOPPING: "STOPPING",
}

_FRAMEWORK_SYMBOLS: dict[int, str] = {
    FrameworkEventType.ERROR: "ERROR",
    FrameworkEventType.INFO: "INFO",
    FrameworkEventType.PACKAGES_REFRESHED: "PACKAGES REFRESHED",
    FrameworkEventType.STARTED: "STARTED",
    FrameworkEventType.STARTLEVEL_CHANGED: "STARTLEVEL CHANGED",
    FrameworkEventType.WARNING: "WARNING",
}

_FRAMEWORK_SEVERITIES: dict[int, Severity] = {
    FrameworkEventType.ERROR: Severity.ERROR,
    FrameworkEventType.WARNING: Severity.WARN,
}

_SERVICE_SYMBOLS: dict[int, str] = {
    ServiceEventType.MODIFIED: "MODIFIED",
    ServiceEventType.REGISTERED: "REGISTERED",
    ServiceEventType.UNREGISTERING: "UNREGISTERING",
}

_SERVICE_SEVERITIES: dict[int, Severity] = {
    ServiceEventType.MODIFIED: Severity.DEBUG,
}


def classify_module_event(event: ModuleEvent) -> ClassifiedRecord:
    """Module events are always INFO, whatever the sub-type."""
    symbol = _MODULE_SYMBOLS.get(event.type)
    if symbol is None:
        message = f"BundleEvent [unknown: {event.type}]"
    else:
        message = f"BundleEvent {symbol}"
    # The module is logging context; its name is not added to the message.
    return ClassifiedRecord(
        severity=Severity.INFO,
        category=MODULE_CATEGORY,
        message=message,
        module=event.module,
    )


def classify_framework_event(event: FrameworkEvent) -> ClassifiedRecord:
    """Framework events are INFO except ERROR and WARNING codes."""
    symbol = _FRAMEWORK_SYMBOLS.get(event.type)
    if symbol is None:
        message = f"FrameworkEvent [unknown:{event.type}]"
    else:
        message = f"FrameworkEvent {symbol}"
    return ClassifiedRecord(
        severity=_FRAMEWORK_SEVERITIES.get(event.type, Severity.INFO),
        category=FRAMEWORK_CATEGORY,
        message=message,
        payload=event.error,
        module=event.module,
    )


def classify_service_event(event: ServiceEvent) -> ClassifiedRecord:
    """Service events are INFO except MODIFIED, which is DEBUG."""
    symbol = _SERVICE_SYMBOLS.get(event.type)
    if symbol is None:
        message = f"ServiceEvent [unknown:{event.type}]"
    else:
        message = f"ServiceEvent {symbol}"
    # Always suffixed with the reference, recognized code or not.
    message += f" - {event.reference}"
    return ClassifiedRecord(
        severity=_SERVICE_SEVERITIES.get(event.type, Severity.INFO),
        category=SERVICE_CATEGORY,
        message=message,
        payload=event.reference,
        module=event.module,
    )


def classify(event: Event) -> ClassifiedRecord:
    """Classify any host event."""
    if isinstance(event, ModuleEvent):
        return classify_module_event(event)
    if isinstance(event, FrameworkEvent):
        return classify_framework_event(event)
    if isinstance(event, ServiceEvent):
        return classify_service_event(event)
    raise TypeError(f"Unsupported event type: {type(event).__name__}")
