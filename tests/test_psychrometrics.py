"""Unit tests for the psychrometric primitives."""

from __future__ import annotations

import math

import pytest

from models.errors import InvalidReadingError
from services.psychrometrics import (
    absolute_humidity,
    dew_point,
    round_for_display,
    saturated_vapor_pressure,
)

TEMPERATURES = [-39.5, -20.0, -5.0, 0.0, 5.0, 12.5, 20.0, 30.0, 42.0, 49.5]
HUMIDITIES = [1.0, 10.0, 25.0, 40.0, 55.0, 70.0, 85.0, 99.0, 100.0]


def test_saturated_vapor_pressure_at_reference_points() -> None:
    assert saturated_vapor_pressure(0.0) == pytest.approx(6.112)
    assert saturated_vapor_pressure(20.0) == pytest.approx(23.37, abs=0.01)


def test_absolute_humidity_known_values() -> None:
    assert absolute_humidity(22.0, 50.0) == pytest.approx(9.70, abs=0.02)
    assert absolute_humidity(5.0, 80.0) == pytest.approx(5.44, abs=0.02)
    assert absolute_humidity(20.0, 0.0) == 0.0


def test_dew_point_known_value() -> None:
    assert dew_point(22.0, 50.0) == pytest.approx(11.1, abs=0.05)


@pytest.mark.parametrize("humidity", HUMIDITIES)
def test_absolute_humidity_increases_with_temperature(humidity: float) -> None:
    values = [absolute_humidity(temperature, humidity) for temperature in TEMPERATURES]
    assert all(later > earlier for earlier, later in zip(values, values[1:]))


@pytest.mark.parametrize("temperature", TEMPERATURES)
def test_absolute_humidity_increases_with_relative_humidity(temperature: float) -> None:
    values = [absolute_humidity(temperature, humidity) for humidity in HUMIDITIES]
    assert all(later > earlier for earlier, later in zip(values, values[1:]))


@pytest.mark.parametrize("temperature", TEMPERATURES)
@pytest.mark.parametrize("humidity", HUMIDITIES[:-1])
def test_dew_point_below_temperature_when_unsaturated(temperature: float, humidity: float) -> None:
    assert dew_point(temperature, humidity) < temperature


@pytest.mark.parametrize("temperature", TEMPERATURES)
def test_dew_point_equals_temperature_at_saturation(temperature: float) -> None:
    assert dew_point(temperature, 100.0) == pytest.approx(temperature, abs=0.1)


@pytest.mark.parametrize("temperature", [-243.5, -61.0, 60.5, math.nan, math.inf])
def test_out_of_range_temperature_is_rejected(temperature: float) -> None:
    with pytest.raises(InvalidReadingError, match="Temperature"):
        saturated_vapor_pressure(temperature)
    with pytest.raises(InvalidReadingError):
        absolute_humidity(temperature, 50.0)
    with pytest.raises(InvalidReadingError):
        dew_point(temperature, 50.0)


@pytest.mark.parametrize("humidity", [-0.1, 100.1, math.nan])
def test_out_of_range_humidity_is_rejected(humidity: float) -> None:
    with pytest.raises(InvalidReadingError, match="Relative humidity"):
        absolute_humidity(20.0, humidity)
    with pytest.raises(InvalidReadingError, match="Relative humidity"):
        dew_point(20.0, humidity)


def test_dew_point_undefined_for_dry_air() -> None:
    with pytest.raises(InvalidReadingError, match="0% relative humidity"):
        dew_point(20.0, 0.0)


def test_invalid_input_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        absolute_humidity(20.0, 120.0)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (9.7011, 9.7),
        (0.25, 0.3),
        (-0.25, -0.2),
        (-0.26, -0.3),
        (6.349, 6.3),
        (0.0, 0.0),
    ],
)
def test_round_for_display_rounds_half_up(value: float, expected: float) -> None:
    assert round_for_display(value) == pytest.approx(expected)
