"""Exceptions raised while scanning for hwmon devices."""

from __future__ import annotations


class ScanError(Exception):
    """Base class for scan failures."""


class PatternError(ScanError, ValueError):
    """A device discovery pattern could not be expanded."""


class SensorParseError(ScanError, ValueError):
    """A sensor attribute held a value that is not a valid number."""

    def __init__(self, prefix: str, suffix: str, value: str) -> None:
        super().__init__(
            f"Invalid value {value!r} for attribute {prefix}_{suffix}"
        )
        self.prefix = prefix
        self.suffix = suffix
        self.value = value
