"""Tests for sensor classification and attribute decoding."""

from __future__ import annotations

import math

import pytest

from hwmon_scanner.errors import SensorParseError
from hwmon_scanner.sensors.base import parse_bool, parse_int, parse_number
from hwmon_scanner.sensors.current import CurrentSensor
from hwmon_scanner.sensors.dispatch import classify, parse_sensors
from hwmon_scanner.sensors.fan import FanSensor
from hwmon_scanner.sensors.intrusion import IntrusionSensor
from hwmon_scanner.sensors.power import PowerSensor
from hwmon_scanner.sensors.temperature import TemperatureSensor
from hwmon_scanner.sensors.voltage import VoltageSensor


class TestClassify:
    """Tests for classify()."""

    @pytest.mark.parametrize(
        ("prefix", "expected"),
        [
            ("temp1", TemperatureSensor),
            ("temp10", TemperatureSensor),
            ("in0", VoltageSensor),
            ("fan3", FanSensor),
            ("curr1", CurrentSensor),
            ("power2", PowerSensor),
            ("intrusion0", IntrusionSensor),
        ],
    )
    def test_known(self, prefix: str, expected: type) -> None:
        assert classify(prefix) is expected

    @pytest.mark.parametrize(
        "prefix", ["pwm1", "cpu0", "humidity1", "energy1", "int0", "1temp", ""]
    )
    def test_unknown(self, prefix: str) -> None:
        assert classify(prefix) is None


class TestParseSensors:
    """Tests for parse_sensors()."""

    def test_sorted_by_prefix(self) -> None:
        raw = {
            "temp1": {"input": "43000"},
            "intrusion0": {"alarm": "1"},
            "fan1": {"input": "1010"},
            "in0": {"input": "1200"},
        }
        names = [s.name for s in parse_sensors(raw)]
        assert names == ["fan1", "in0", "intrusion0", "temp1"]

    def test_unknown_prefix_dropped(self) -> None:
        raw = {"pwm1": {"enable": "2"}, "temp1": {"input": "40000"}}
        assert parse_sensors(raw) == [TemperatureSensor(name="temp1", current=40.0)]

    def test_empty(self) -> None:
        assert parse_sensors({}) == []

    def test_malformed_value_raises(self) -> None:
        raw = {"fan1": {"input": "1010"}, "temp1": {"input": "abc"}}
        with pytest.raises(SensorParseError):
            parse_sensors(raw)


class TestDecoding:
    """Tests for the shared attribute decoders."""

    @pytest.mark.parametrize(
        ("value", "expected"), [("0", False), ("1", True), ("2", True), ("yes", True)]
    )
    def test_parse_bool(self, value: str, expected: bool) -> None:
        assert parse_bool(value) is expected

    def test_parse_number_scale(self) -> None:
        assert parse_number("in0", "input", "3300", 1000.0) == pytest.approx(3.3)

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("-1.5", -1.5), ("+2", 2.0), (".5", 0.5), ("1e3", 1000.0), ("3.", 3.0)],
    )
    def test_parse_number_accepts(self, value: str, expected: float) -> None:
        assert parse_number("in0", "input", value) == expected

    def test_parse_number_non_finite(self) -> None:
        assert math.isnan(parse_number("temp1", "input", "nan"))
        assert parse_number("temp1", "input", "-Inf") == -math.inf

    @pytest.mark.parametrize(
        "value", ["4_0000", "４００００", "", "1e", "0x10", "1 2"]
    )
    def test_parse_number_rejects(self, value: str) -> None:
        with pytest.raises(SensorParseError):
            parse_number("temp1", "input", value)

    @pytest.mark.parametrize("value", ["0_4", "４", "4.0", "", "four"])
    def test_parse_int_rejects(self, value: str) -> None:
        with pytest.raises(SensorParseError):
            parse_int("temp1", "type", value)

    def test_parse_int_signed(self) -> None:
        assert parse_int("temp1", "type", "-1") == -1
        assert parse_int("temp1", "type", "+4") == 4

    def test_parse_sensors_rejects_digit_separators(self) -> None:
        with pytest.raises(SensorParseError, match="temp1_input"):
            parse_sensors({"temp1": {"input": "4_0000"}})

    def test_parse_number_error_message(self) -> None:
        with pytest.raises(SensorParseError, match=r"'abc'.*temp1_input"):
            parse_number("temp1", "input", "abc")
