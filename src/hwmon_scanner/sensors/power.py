"""Power sensors (``power*`` attributes).

Power values are exposed in microwatts and converted to watts.  The
averaging interval is exposed in milliseconds and converted to seconds.
"""

from __future__ import annotations

from dataclasses import dataclass

from .base import (
    ALARM_BEEP_FIELDS,
    MICRO,
    MILLI,
    flag_fields,
    scaled_fields,
)

_WATTS = {
    "input": "current",
    "average": "average",
    "max": "maximum",
    "crit": "critical",
    "cap": "cap",
}
_SECONDS = {"average_interval": "average_interval"}


@dataclass(frozen=True)
class PowerSensor:
    """A sensor that detects power draw in watts."""

    name: str  # Instance prefix, e.g. "power1"
    label: str = ""
    current: float = 0.0
    average: float = 0.0
    average_interval: float = 0.0  # Seconds
    maximum: float = 0.0
    critical: float = 0.0
    cap: float = 0.0
    alarm: bool = False
    beep: bool = False

    @classmethod
    def from_raw(cls, name: str, raw: dict[str, str]) -> PowerSensor:
        """Build a PowerSensor from its raw attributes."""
        kwargs: dict[str, object] = {}
        kwargs.update(scaled_fields(name, raw, _WATTS, MICRO))
        kwargs.update(scaled_fields(name, raw, _SECONDS, MILLI))
        kwargs.update(flag_fields(raw, ALARM_BEEP_FIELDS))
        if "label" in raw:
            kwargs["label"] = raw["label"]
        return cls(name=name, **kwargs)
