"""Core data models for host event logging."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any


class Severity(str, Enum):
    """Ordered severity levels plus the DISABLED sentinel."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"
    AUDIT = "AUDIT"
    DISABLED = "DISABLED"

    @property
    def rank(self) -> int:
        """Position in the severity order (DISABLED ranks above everything)."""
        return _RANKS[self]

    def enables(self, severity: Severity) -> bool:
        """Return True if a record at `severity` passes this threshold."""
        if self is Severity.DISABLED or severity is Severity.DISABLED:
            return False
        return severity.rank >= self.rank


_RANKS = {level: rank for rank, level in enumerate(Severity)}


class ModuleEventType(IntEnum):
    """Module lifecycle type codes as delivered by the host."""

    INSTALLED = 0x00000001
    STARTED = 0x00000002
    STOPPED = 0x00000004
    UPDATED = 0x00000008
    UNINSTALLED = 0x00000010
    RESOLVED = 0x00000020
    UNRESOLVED = 0x00000040
    STARTING = 0x00000080
    STOPPING = 0x00000100
    LAZY_ACTIVATION = 0x00000200


class FrameworkEventType(IntEnum):
    """Framework lifecycle/error type codes as delivered by the host."""

    STARTED = 0x00000001
    ERROR = 0x00000002
    PACKAGES_REFRESHED = 0x00000004
    STARTLEVEL_CHANGED = 0x00000008
    WARNING = 0x00000010
    INFO = 0x00000020
    STOPPED = 0x00000040
    STOPPED_UPDATE = 0x00000080
    STOPPED_BOOTCLASSPATH_MODIFIED = 0x00000100
    WAIT_TIMEDOUT = 0x00000200


class ServiceEventType(IntEnum):
    """Service registry type codes as delivered by the host."""

    REGISTERED = 0x00000001
    MODIFIED = 0x00000002
    UNREGISTERING = 0x00000004
    MODIFIED_ENDMATCH = 0x00000008


@dataclass(frozen=True, slots=True)
class Module:
    """Identity of a module installed in the host."""

    module_id: int
    symbolic_name: str
    version: str | None = None

    def __str__(self) -> str:
        return f"{self.symbolic_name} [{self.module_id}]"


@dataclass(frozen=True, slots=True)
class ServiceReference:
    """Opaque handle to a registered service."""

    service_id: int
    object_class: tuple[str, ...]
    module: Module | None = None  # None once the service is unregistered

    def __str__(self) -> str:
        return "[" + ", ".join(self.object_class) + "]"


@dataclass(frozen=True, slots=True)
class ModuleEvent:
    type: int
    module: Module | None = None


@dataclass(frozen=True, slots=True)
class FrameworkEvent:
    type: int
    module: Module | None = None
    error: BaseException | None = None


@dataclass(frozen=True, slots=True)
class ServiceEvent:
    type: int
    reference: ServiceReference

    @property
    def module(self) -> Module | None:
        """Module that registered the affected service."""
        return self.reference.module


Event = ModuleEvent | FrameworkEvent | ServiceEvent


@dataclass(frozen=True, slots=True)
class ClassifiedRecord:
    """Log record produced by the classifiers, ready for dispatch."""

    severity: Severity
    category: str
    message: str
    payload: Any | None = None  # exception or service reference
    module: Module | None = None  # logging context, never part of the message
