"""Scanned hardware monitoring devices."""

from __future__ import annotations

from dataclasses import dataclass, field

from .sensors.dispatch import Sensor


@dataclass(frozen=True)
class Device:
    """One hardware monitoring component and its sensors."""

    name: str  # Contents of the device's "name" file, empty if absent
    sensors: tuple[Sensor, ...] = field(default_factory=tuple)
