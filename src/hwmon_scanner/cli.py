"""Command-line interface for the hwmon scanner."""

from __future__ import annotations

import argparse
import json
import logging
import math
import sys
from dataclasses import asdict
from enum import Enum
from pathlib import Path
from typing import Any

from .config import ScannerConfig
from .device import Device
from .errors import ScanError
from .scanner import scan
from .sensors.current import CurrentSensor
from .sensors.dispatch import SENSOR_KINDS, Sensor
from .sensors.fan import FanSensor
from .sensors.intrusion import IntrusionSensor
from .sensors.power import PowerSensor
from .sensors.temperature import TemperatureSensor
from .sensors.voltage import VoltageSensor


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="hwmon-scanner",
        description="Print hardware monitoring sensors found in sysfs",
    )
    parser.add_argument(
        "--sysfs-root",
        type=Path,
        default=Path("/sys"),
        help="Mount point of the sysfs tree (default: /sys)",
    )
    parser.add_argument(
        "--skip-inaccessible",
        action="store_true",
        help="Skip devices whose directory cannot be read instead of failing",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print devices as a JSON array",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def sensor_to_dict(sensor: Sensor) -> dict[str, Any]:
    """Convert a sensor to a JSON-friendly dict with a ``kind`` key."""
    result: dict[str, Any] = {"kind": SENSOR_KINDS[type(sensor)]}
    for key, value in asdict(sensor).items():
        if isinstance(value, Enum):
            value = value.name.lower()
        elif isinstance(value, float) and not math.isfinite(value):
            # JSON has no NaN or Infinity
            value = None
        result[key] = value
    return result


def device_to_dict(device: Device) -> dict[str, Any]:
    """Convert a device to a JSON-friendly dict."""
    return {
        "name": device.name,
        "sensors": [sensor_to_dict(s) for s in device.sensors],
    }


def format_sensor(sensor: Sensor) -> str:
    """Render one sensor as a single human-readable line."""
    if isinstance(sensor, IntrusionSensor):
        return f"{sensor.name}: {'ALARM' if sensor.alarm else 'OK'}"

    label = sensor.label or sensor.name
    if isinstance(sensor, TemperatureSensor):
        line = (
            f"{label}: {sensor.current:+.1f} C "
            f"(high = {sensor.high:+.1f} C, crit = {sensor.critical:+.1f} C)"
        )
    elif isinstance(sensor, VoltageSensor):
        line = f"{label}: {sensor.current:.3f} V (max = {sensor.maximum:.3f} V)"
    elif isinstance(sensor, FanSensor):
        line = f"{label}: {sensor.current:.0f} RPM (min = {sensor.minimum:.0f} RPM)"
    elif isinstance(sensor, CurrentSensor):
        line = f"{label}: {sensor.current:.3f} A (max = {sensor.maximum:.3f} A)"
    elif isinstance(sensor, PowerSensor):
        line = f"{label}: {sensor.current:.2f} W (max = {sensor.maximum:.2f} W)"
    else:
        return f"{sensor.name}: unsupported sensor"

    if sensor.alarm:
        line += " ALARM"
    return line


def format_devices(devices: list[Device]) -> str:
    """Render devices as text blocks separated by blank lines."""
    blocks = []
    for device in devices:
        lines = [device.name or "(unnamed)"]
        lines.extend(f"  {format_sensor(s)}" for s in device.sensors)
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)


def main(argv: list[str] | None = None) -> None:
    """Entry point for the hwmon scanner CLI."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = ScannerConfig(
        sysfs_root=args.sysfs_root,
        skip_inaccessible_devices=args.skip_inaccessible,
    )
    try:
        devices = scan(config)
    except (ScanError, OSError) as e:
        print(f"Error: scan failed: {e}", file=sys.stderr)
        sys.exit(1)

    if args.json:
        data = [device_to_dict(d) for d in devices]
        print(json.dumps(data, indent=2, allow_nan=False))
    elif devices:
        print(format_devices(devices))
