"""Scan sysfs for hardware monitoring devices and their sensors.

Devices are found by expanding glob patterns that match each device's
``name`` file.  The directory holding that file is walked recursively and
every ``<prefix>_<suffix>`` attribute file is collected into a raw
attribute bag, which is then parsed into typed sensors.
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from .config import ScannerConfig
from .device import Device
from .filesystem import SystemFilesystem
from .sensors.dispatch import parse_sensors

if TYPE_CHECKING:
    from .filesystem import Filesystem

log = logging.getLogger(__name__)

# Control files that never hold sensor data.  Reading them can be slow,
# fail, or have side effects.
_SKIP_FILES: frozenset[str] = frozenset(
    {
        "async",
        "autosuspend_delay_ms",
        "control",
        "driver_override",
        "modalias",
        "uevent",
    }
)
_SKIP_PREFIX = "runtime_"


def should_skip(filename: str) -> bool:
    """Return True if *filename* should not be read during a walk."""
    return filename.startswith(_SKIP_PREFIX) or filename in _SKIP_FILES


class Scanner:
    """Scan for Devices so data can be read from their sensors."""

    def __init__(
        self,
        fs: Filesystem | None = None,
        config: ScannerConfig | None = None,
    ) -> None:
        self._fs = fs if fs is not None else SystemFilesystem()
        self._config = config if config is not None else ScannerConfig()

    def detect_device_paths(self) -> list[str]:
        """Expand the configured patterns into device ``name`` file paths.

        Returns:
            Matches in pattern order, then match order.

        Raises:
            PatternError: If a pattern is malformed.
        """
        paths: list[str] = []
        for pattern in self._config.expanded_patterns():
            matches = self._fs.expand(pattern)
            log.debug("Pattern %s matched %d path(s)", pattern, len(matches))
            paths.extend(matches)
        return paths

    def collect_raw(self, root: str) -> tuple[str, dict[str, dict[str, str]]]:
        """Walk *root* and gather the device name and raw attribute bag.

        Returns:
            A tuple of *(device_name, raw)* where *raw* maps sensor prefix
            to attribute suffix to trimmed value.

        Raises:
            OSError: If *root* cannot be walked.
        """
        name = ""
        raw: dict[str, dict[str, str]] = {}

        def visit(path: str, is_dir: bool, is_regular: bool) -> None:
            nonlocal name
            if is_dir or not is_regular:
                return

            filename = os.path.basename(path)
            if should_skip(filename):
                return

            if filename == "name":
                value = self._read_attribute(path)
                if value is not None:
                    name = value
                return

            # Sensor attributes are named "<prefix>_<suffix>", e.g. "temp1_input"
            prefix, sep, suffix = filename.partition("_")
            if not sep:
                return

            value = self._read_attribute(path)
            if value is not None:
                raw.setdefault(prefix, {})[suffix] = value

        self._fs.walk(root, visit)
        return name, raw

    def _read_attribute(self, path: str) -> str | None:
        """Read one attribute file, returning None if it is unreadable."""
        try:
            return self._fs.read_text(path)
        except OSError as e:
            log.debug("Cannot read %s: %s", path, e)
            return None

    def scan_device(self, name_path: str) -> Device:
        """Scan the device whose ``name`` file is at *name_path*.

        Raises:
            OSError: If the device directory cannot be walked.
            SensorParseError: If a sensor attribute is malformed.
        """
        root = os.path.dirname(name_path)
        name, raw = self.collect_raw(root)
        sensors = parse_sensors(raw)
        log.debug("Device %r at %s: %d sensor(s)", name, root, len(sensors))
        return Device(name=name, sensors=tuple(sensors))

    def scan(self) -> list[Device]:
        """Scan for devices and their sensors.

        Raises:
            PatternError: If a discovery pattern is malformed.
            OSError: If a device directory cannot be walked and
                ``skip_inaccessible_devices`` is not set.
            SensorParseError: If any sensor attribute is malformed.
        """
        devices: list[Device] = []
        for path in self.detect_device_paths():
            try:
                device = self.scan_device(path)
            except OSError as e:
                if not self._config.skip_inaccessible_devices:
                    raise
                log.warning("Skipping inaccessible device %s: %s", path, e)
                continue
            devices.append(device)
        return devices


def scan(config: ScannerConfig | None = None) -> list[Device]:
    """Scan the host's sysfs tree for devices and their sensors."""
    return Scanner(config=config).scan()
