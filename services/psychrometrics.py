"""Psychrometric primitives: pure functions of temperature and relative humidity.

Values are returned at full precision; use :func:`round_for_display` at the
presentation boundary.
"""

from __future__ import annotations

import math

from models.errors import InvalidReadingError

# Magnus coefficients over water.
MAGNUS_A = 17.67
MAGNUS_B = 243.5  # °C
MAGNUS_E0 = 6.112  # hPa

WATER_VAPOR_GAS_CONSTANT = 461.5  # J/(kg·K)
KELVIN_OFFSET = 273.15

MIN_TEMPERATURE_C = -60.0
MAX_TEMPERATURE_C = 60.0

_SINGULARITY_EPSILON = 1e-9


def _check_temperature(temp_c: float) -> None:
    if not math.isfinite(temp_c) or not MIN_TEMPERATURE_C <= temp_c <= MAX_TEMPERATURE_C:
        raise InvalidReadingError(
            f"Temperature must be within {MIN_TEMPERATURE_C:g}..{MAX_TEMPERATURE_C:g} °C, "
            f"got {temp_c!r}."
        )


def _check_humidity(rh_pct: float) -> None:
    if not math.isfinite(rh_pct) or not 0 <= rh_pct <= 100:
        raise InvalidReadingError(
            f"Relative humidity must be within 0-100%, got {rh_pct!r}."
        )


def saturated_vapor_pressure(temp_c: float) -> float:
    """Saturation vapor pressure of water in hPa (Magnus formula)."""
    _check_temperature(temp_c)
    return MAGNUS_E0 * math.exp((MAGNUS_A * temp_c) / (temp_c + MAGNUS_B))


def absolute_humidity(temp_c: float, rh_pct: float) -> float:
    """Mass of water vapor per volume of air, in g/m³."""
    _check_humidity(rh_pct)
    vapor_pressure_hpa = (rh_pct / 100) * saturated_vapor_pressure(temp_c)
    kelvin = temp_c + KELVIN_OFFSET
    kg_per_m3 = (vapor_pressure_hpa * 100) / (WATER_VAPOR_GAS_CONSTANT * kelvin)
    return kg_per_m3 * 1000


def dew_point(temp_c: float, rh_pct: float) -> float:
    """Temperature in °C at which the air would reach saturation.

    Requires a strictly positive relative humidity: the inverse Magnus
    formula takes ``ln(RH/100)``.
    """
    _check_temperature(temp_c)
    _check_humidity(rh_pct)
    if rh_pct == 0:
        raise InvalidReadingError("Dew point is undefined at 0% relative humidity.")

    gamma = math.log(rh_pct / 100) + (MAGNUS_A * temp_c) / (MAGNUS_B + temp_c)
    denominator = MAGNUS_A - gamma
    if abs(denominator) < _SINGULARITY_EPSILON:
        raise InvalidReadingError(
            f"Dew point is undefined for {temp_c!r} °C at {rh_pct!r}% relative humidity."
        )
    return (MAGNUS_B * gamma) / denominator


def round_for_display(value: float) -> float:
    """Round to one decimal with halves going up, e.g. 0.25 -> 0.3, -0.25 -> -0.2."""
    return math.floor(value * 10 + 0.5) / 10
