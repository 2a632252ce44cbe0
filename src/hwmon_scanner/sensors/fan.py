"""Fan sensors (``fan*`` attributes).

Fan speeds are already in RPM, so no scaling is applied.
"""

from __future__ import annotations

from dataclasses import dataclass

from .base import ALARM_BEEP_FIELDS, flag_fields, scaled_fields

_RPM = {"input": "current", "min": "minimum", "max": "maximum", "target": "target"}


@dataclass(frozen=True)
class FanSensor:
    """A sensor that detects fan speeds in rotations per minute."""

    name: str  # Instance prefix, e.g. "fan1"
    label: str = ""
    current: float = 0.0
    minimum: float = 0.0
    maximum: float = 0.0
    target: float = 0.0
    alarm: bool = False
    beep: bool = False

    @classmethod
    def from_raw(cls, name: str, raw: dict[str, str]) -> FanSensor:
        """Build a FanSensor from its raw attributes."""
        kwargs: dict[str, object] = {}
        kwargs.update(scaled_fields(name, raw, _RPM, 1.0))
        kwargs.update(flag_fields(raw, ALARM_BEEP_FIELDS))
        if "label" in raw:
            kwargs["label"] = raw["label"]
        return cls(name=name, **kwargs)
