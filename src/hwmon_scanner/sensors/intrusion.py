"""Chassis intrusion detectors (``intrusion*`` attributes)."""

from __future__ import annotations

from dataclasses import dataclass

from .base import parse_bool


@dataclass(frozen=True)
class IntrusionSensor:
    """A sensor that detects that a computer case has been opened."""

    name: str  # Instance prefix, e.g. "intrusion0"
    alarm: bool = False

    @classmethod
    def from_raw(cls, name: str, raw: dict[str, str]) -> IntrusionSensor:
        """Build an IntrusionSensor from its raw attributes."""
        alarm = parse_bool(raw["alarm"]) if "alarm" in raw else False
        return cls(name=name, alarm=alarm)
