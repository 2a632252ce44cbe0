"""Current sensors (``curr*`` attributes), reported in milliamperes."""

from __future__ import annotations

from dataclasses import dataclass

from .base import ALARM_BEEP_FIELDS, MILLI, flag_fields, scaled_fields

_SCALED = {"input": "current", "max": "maximum", "min": "minimum"}


@dataclass(frozen=True)
class CurrentSensor:
    """A sensor that detects current in amperes."""

    name: str  # Instance prefix, e.g. "curr1"
    label: str = ""
    current: float = 0.0
    maximum: float = 0.0
    minimum: float = 0.0
    alarm: bool = False
    beep: bool = False

    @classmethod
    def from_raw(cls, name: str, raw: dict[str, str]) -> CurrentSensor:
        """Build a CurrentSensor from its raw attributes."""
        kwargs: dict[str, object] = {}
        kwargs.update(scaled_fields(name, raw, _SCALED, MILLI))
        kwargs.update(flag_fields(raw, ALARM_BEEP_FIELDS))
        if "label" in raw:
            kwargs["label"] = raw["label"]
        return cls(name=name, **kwargs)
