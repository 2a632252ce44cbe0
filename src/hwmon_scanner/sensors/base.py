"""Decoding helpers shared by the sensor parsers.

hwmon attributes are plain decimal strings in fixed-point units
(millidegrees, millivolts, microwatts, ...).  Booleans are ``0``/``1``.
"""

from __future__ import annotations

import re

from ..errors import SensorParseError

# Divisors from the raw sysfs fixed-point units to SI units.
MILLI = 1000.0
MICRO = 1_000_000.0

# ASCII decimal forms only; float() and int() also accept "_" separators
# and non-ASCII digits.
_NUMBER_RE = re.compile(
    r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?|[+-]?(inf(inity)?|nan)",
    re.IGNORECASE,
)
_INT_RE = re.compile(r"[+-]?[0-9]+")


def parse_number(prefix: str, suffix: str, value: str, scale: float = 1.0) -> float:
    """Parse a numeric attribute and divide it by *scale*.

    Raises:
        SensorParseError: If *value* is not a valid number.
    """
    if not _NUMBER_RE.fullmatch(value):
        raise SensorParseError(prefix, suffix, value)
    return float(value) / scale


def parse_int(prefix: str, suffix: str, value: str) -> int:
    """Parse an integer attribute such as an enumeration code.

    Raises:
        SensorParseError: If *value* is not a valid integer.
    """
    if not _INT_RE.fullmatch(value):
        raise SensorParseError(prefix, suffix, value)
    return int(value)


def parse_bool(value: str) -> bool:
    """Decode an alarm or beep flag: anything but ``"0"`` is set."""
    return value != "0"


def scaled_fields(
    prefix: str,
    raw: dict[str, str],
    fields: dict[str, str],
    scale: float,
) -> dict[str, float]:
    """Parse every numeric suffix of *raw* listed in *fields*.

    Args:
        prefix: Sensor instance prefix, used in error messages.
        raw: Suffix to raw value mapping for one sensor instance.
        fields: Mapping from attribute suffix to dataclass field name.
        scale: Divisor applied to every parsed value.

    Returns:
        Keyword arguments for the sensor dataclass.  Suffixes absent from
        *raw* are left out so the field keeps its default.
    """
    return {
        field: parse_number(prefix, suffix, raw[suffix], scale)
        for suffix, field in fields.items()
        if suffix in raw
    }


def flag_fields(raw: dict[str, str], fields: dict[str, str]) -> dict[str, bool]:
    """Decode every boolean suffix of *raw* listed in *fields*."""
    return {
        field: parse_bool(raw[suffix])
        for suffix, field in fields.items()
        if suffix in raw
    }


# Suffixes common to most sensor classes.
ALARM_BEEP_FIELDS: dict[str, str] = {"alarm": "alarm", "beep": "beep"}
