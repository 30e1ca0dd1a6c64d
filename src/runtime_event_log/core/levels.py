"""Severity name decoding."""

from __future__ import annotations

from .models import Severity

DEFAULT_THRESHOLD = Severity.ERROR

# Names accepted in addition to the Severity members themselves.
_SYNONYMS: dict[str, Severity] = {
    "WARNING": Severity.WARN,
    "CRITICAL": Severity.ERROR,
    "FATAL": Severity.ERROR,
    "OFF": Severity.DISABLED,
    "NONE": Severity.DISABLED,
}


def parse_severity(value: str) -> Severity:
    """Decode a case-insensitive severity name, including legacy synonyms."""
    name = value.strip().upper()
    if name in _SYNONYMS:
        return _SYNONYMS[name]
    try:
        return Severity[name]
    except KeyError as e:
        valid = ", ".join([s.value for s in Severity] + list(_SYNONYMS))
        raise ValueError(f"Unknown severity '{value}'. Valid values: {valid}.") from e
