"""Temperature sensors (``temp*`` attributes).

Temperatures are exposed in millidegrees Celsius and converted to Celsius
floats.  The ``type`` attribute identifies the sensing technology.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .base import (
    ALARM_BEEP_FIELDS,
    MILLI,
    flag_fields,
    parse_int,
    scaled_fields,
)


class TemperatureSensorType(IntEnum):
    """Sensor technology codes reported by ``temp*_type``."""

    UNKNOWN = 0
    CPU_DIODE = 1  # CPU embedded diode
    TRANSISTOR_3904 = 2
    THERMAL_DIODE = 3
    THERMISTOR = 4
    AMD_AMDSI = 5
    INTEL_PECI = 6

    @classmethod
    def _missing_(cls, value: object) -> TemperatureSensorType:
        return cls.UNKNOWN


_SCALED = {
    "input": "current",
    "max": "high",
    "min": "low",
    "crit": "critical",
    "emergency": "emergency",
}
_FLAGS = {"crit_alarm": "critical_alarm", **ALARM_BEEP_FIELDS}


@dataclass(frozen=True)
class TemperatureSensor:
    """A sensor that detects temperatures in degrees Celsius."""

    name: str  # Instance prefix, e.g. "temp1"
    label: str = ""  # Contents of temp*_label, may be empty
    current: float = 0.0
    high: float = 0.0
    low: float = 0.0
    critical: float = 0.0
    emergency: float = 0.0
    critical_alarm: bool = False  # Past the critical threshold
    alarm: bool = False
    beep: bool = False
    type: TemperatureSensorType = TemperatureSensorType.UNKNOWN

    @classmethod
    def from_raw(cls, name: str, raw: dict[str, str]) -> TemperatureSensor:
        """Build a TemperatureSensor from its raw attributes.

        Raises:
            SensorParseError: If a numeric attribute is malformed.
        """
        kwargs: dict[str, object] = {}
        kwargs.update(scaled_fields(name, raw, _SCALED, MILLI))
        kwargs.update(flag_fields(raw, _FLAGS))
        if "label" in raw:
            kwargs["label"] = raw["label"]
        if "type" in raw:
            kwargs["type"] = TemperatureSensorType(parse_int(name, "type", raw["type"]))
        return cls(name=name, **kwargs)
