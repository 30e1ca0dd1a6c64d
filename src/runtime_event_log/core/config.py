"""Threshold configuration.

The threshold is looked up by key, first in a context-scoped source and then
in the process environment, and decoded into a Severity exactly once.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .levels import DEFAULT_THRESHOLD, parse_severity
from .models import Severity

logger = logging.getLogger(__name__)

FRAMEWORK_EVENTS_LOG_LEVEL_KEY = "runtime_event_log.framework_events_log_level"


class PropertySource(Protocol):
    """Key-value lookup for configuration properties."""

    def get_property(self, key: str) -> str | None:
        """Return the value for `key`, or None when absent."""
        ...


@dataclass(frozen=True, slots=True)
class MappingPropertySource:
    """Context-scoped properties held in a mapping."""

    properties: Mapping[str, str]

    def get_property(self, key: str) -> str | None:
        return self.properties.get(key)


@dataclass(frozen=True, slots=True)
class EnvironmentPropertySource:
    """Process-wide properties read from environment variables.

    `runtime_event_log.framework_events_log_level` is read from
    `RUNTIME_EVENT_LOG_FRAMEWORK_EVENTS_LOG_LEVEL`.
    """

    environ: Mapping[str, str] = field(default_factory=lambda: os.environ)

    @staticmethod
    def env_name(key: str) -> str:
        return key.upper().replace(".", "_")

    def get_property(self, key: str) -> str | None:
        return self.environ.get(self.env_name(key))


@dataclass(frozen=True, slots=True)
class ChainedPropertySource:
    """Try sources in order; the first non-empty value wins."""

    sources: Sequence[PropertySource]

    def get_property(self, key: str) -> str | None:
        for source in self.sources:
            value = source.get_property(key)
            if value:
                return value
        return None


def context_or_environment(context: Mapping[str, str] | None = None) -> PropertySource:
    """Context properties first, then the process environment."""
    if context is None:
        return EnvironmentPropertySource()
    return ChainedPropertySource(
        sources=[MappingPropertySource(context), EnvironmentPropertySource()]
    )


class EventLogSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    framework_events_log_level: Severity = DEFAULT_THRESHOLD

    @field_validator("framework_events_log_level", mode="before")
    @classmethod
    def _decode_level(cls, value: Any) -> Any:
        if isinstance(value, str) and not isinstance(value, Severity):
            return parse_severity(value)
        return value

    @classmethod
    def from_properties(cls, source: PropertySource) -> EventLogSettings:
        """Build settings from a property source, falling back to defaults."""
        raw = source.get_property(FRAMEWORK_EVENTS_LOG_LEVEL_KEY)
        if not raw:
            return cls()
        try:
            return cls(framework_events_log_level=raw)
        except ValidationError:
            logger.warning(
                "Invalid %s=%r; using %s",
                FRAMEWORK_EVENTS_LOG_LEVEL_KEY,
                raw,
                DEFAULT_THRESHOLD.value,
            )
            return cls()


def resolve_threshold(source: PropertySource | None = None) -> Severity:
    """Resolve the event logging threshold (environment only when no source is given)."""
    if source is None:
        source = EnvironmentPropertySource()
    settings = EventLogSettings.from_properties(source)
    logger.debug("Framework events log threshold: %s", settings.framework_events_log_level.value)
    return settings.framework_events_log_level
