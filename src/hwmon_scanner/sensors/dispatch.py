"""Classify raw attribute prefixes and build typed sensors.

A prefix such as ``temp1`` or ``intrusion0`` is classified by its leading
alphabetic token.  Prefixes whose token is not in ``SENSOR_CLASSES`` are
dropped so that newer hwmon attribute families do not break a scan.
"""

from __future__ import annotations

import logging
import re
from typing import Union

from .current import CurrentSensor
from .fan import FanSensor
from .intrusion import IntrusionSensor
from .power import PowerSensor
from .temperature import TemperatureSensor
from .voltage import VoltageSensor

log = logging.getLogger(__name__)

Sensor = Union[
    TemperatureSensor,
    VoltageSensor,
    FanSensor,
    CurrentSensor,
    PowerSensor,
    IntrusionSensor,
]

# Mapping from prefix token to the sensor class that parses it.
SENSOR_CLASSES: dict[str, type[Sensor]] = {
    "temp": TemperatureSensor,
    "in": VoltageSensor,
    "fan": FanSensor,
    "curr": CurrentSensor,
    "power": PowerSensor,
    "intrusion": IntrusionSensor,
}

# Short names used when sensors are serialised.
SENSOR_KINDS: dict[type[Sensor], str] = {
    TemperatureSensor: "temperature",
    VoltageSensor: "voltage",
    FanSensor: "fan",
    CurrentSensor: "current",
    PowerSensor: "power",
    IntrusionSensor: "intrusion",
}

_TOKEN_RE = re.compile(r"[A-Za-z]+")


def classify(prefix: str) -> type[Sensor] | None:
    """Return the sensor class for *prefix*, or None if it is not a sensor."""
    match = _TOKEN_RE.match(prefix)
    if match is None:
        return None
    return SENSOR_CLASSES.get(match.group(0))


def parse_sensors(raw: dict[str, dict[str, str]]) -> list[Sensor]:
    """Parse every classifiable prefix of a raw attribute bag.

    Prefixes are processed in sorted order so the result is reproducible
    regardless of directory listing order.

    Raises:
        SensorParseError: If any recognised numeric attribute is malformed.
    """
    sensors: list[Sensor] = []
    for prefix in sorted(raw):
        sensor_cls = classify(prefix)
        if sensor_cls is None:
            log.debug("Ignoring unclassified attribute prefix %r", prefix)
            continue
        sensors.append(sensor_cls.from_raw(prefix, raw[prefix]))
    return sensors
