"""Configuration for the hwmon scanner."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

# Locations below the sysfs root where hwmon devices expose a "name" file:
# platform devices, hwmon children of platform devices, virtual hwmon devices.
DEFAULT_DEVICE_PATTERNS: list[str] = [
    "devices/platform/*/name",
    "devices/platform/*/hwmon/hwmon*/name",
    "devices/virtual/hwmon/*/name",
]


@dataclass
class ScannerConfig:
    """Runtime configuration for a device scan."""

    # Mount point of the sysfs tree
    sysfs_root: Path = field(default_factory=lambda: Path("/sys"))

    # Glob patterns relative to sysfs_root, each matching a device "name" file
    device_patterns: list[str] = field(
        default_factory=lambda: list(DEFAULT_DEVICE_PATTERNS)
    )

    # Omit devices whose directory cannot be walked instead of failing the scan
    skip_inaccessible_devices: bool = False

    def __post_init__(self) -> None:
        self.sysfs_root = Path(self.sysfs_root)

    def expanded_patterns(self) -> list[str]:
        """Return the device patterns joined onto the sysfs root."""
        return [str(self.sysfs_root / p) for p in self.device_patterns]
