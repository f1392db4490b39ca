"""Per-room window recommendation.

The policy is an ordered tuple of ``(guard, decide)`` pairs. Rules are tried
top to bottom and the first guard that holds produces the verdict, so a rule
higher in the list overrides every rule below it.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from models.errors import InvalidReadingError
from models.records import (
    Action,
    Priority,
    SensorReading,
    VentilationVerdict,
    VerdictDetails,
)
from services.psychrometrics import absolute_humidity, dew_point, round_for_display

DEFAULT_THRESHOLD_GM3 = 3.0
DEFAULT_ROOM_NAME = "Room"

HUMID_ROOM_RH = 65
DRY_ROOM_RH = 40
CONDENSATION_OUTDOOR_MAX_C = 10
HUMIDIFYING_OUTDOOR_MIN_C = 5
MEANINGFUL_GAP_GM3 = 1


@dataclass(frozen=True)
class _Conditions:
    indoor: SensorReading
    outdoor: SensorReading
    threshold: float
    gap: float
    dew_point_indoor: float
    details: VerdictDetails


@dataclass(frozen=True)
class _Decision:
    action: Action
    priority: Priority
    reason: str
    warning: Optional[str] = None


Guard = Callable[[_Conditions], bool]
Decide = Callable[[_Conditions], _Decision]


def _co2_too_high(c: _Conditions) -> bool:
    return c.indoor.has_co2_alarm


def _ventilate_co2(c: _Conditions) -> _Decision:
    return _Decision(Action.OPEN, Priority.HIGH, f"High CO₂ ({c.indoor.co2:.15g} ppm)")


def _gap_favorable(c: _Conditions) -> bool:
    return c.gap > c.threshold


def _ventilate_gap(c: _Conditions) -> _Decision:
    warning = None
    if (
        c.dew_point_indoor > c.outdoor.temperature
        and c.outdoor.temperature < CONDENSATION_OUTDOOR_MAX_C
    ):
        warning = (
            "Risk of condensation on cold surfaces "
            f"(dew point: {c.details.dew_point_indoor:g}°C)"
        )
    return _Decision(
        Action.OPEN,
        Priority.MEDIUM,
        f"Favorable difference: {c.details.humidity_difference:g} g/m³",
        warning,
    )


def _too_humid(c: _Conditions) -> bool:
    return c.indoor.humidity > HUMID_ROOM_RH


def _handle_humid(c: _Conditions) -> _Decision:
    if c.gap > MEANINGFUL_GAP_GM3:
        return _Decision(
            Action.OPEN,
            Priority.LOW,
            f"High humidity ({c.indoor.humidity:g}%), slight improvement possible",
        )
    return _Decision(
        Action.CLOSE, Priority.LOW, "High humidity but outside air also too humid"
    )


def _too_dry(c: _Conditions) -> bool:
    return c.indoor.humidity < DRY_ROOM_RH


def _handle_dry(c: _Conditions) -> _Decision:
    if c.gap < 0 and c.outdoor.temperature > HUMIDIFYING_OUTDOOR_MIN_C:
        return _Decision(Action.OPEN, Priority.LOW, "Air too dry, outside air can humidify")
    return _Decision(
        Action.CLOSE, Priority.LOW, "Air too dry but unfavorable outside conditions"
    )


def _always(_c: _Conditions) -> bool:
    return True


def _handle_normal(c: _Conditions) -> _Decision:
    if MEANINGFUL_GAP_GM3 < c.gap <= c.threshold:
        return _Decision(
            Action.WAIT,
            Priority.LOW,
            f"Gap too small to matter ({c.details.humidity_difference:g} g/m³)",
        )
    if c.gap <= 0:
        return _Decision(Action.CLOSE, Priority.LOW, "Outside more humid than inside")
    return _Decision(Action.CLOSE, Priority.LOW, "Conditions already optimal")


RULES: Tuple[Tuple[Guard, Decide], ...] = (
    (_co2_too_high, _ventilate_co2),
    (_gap_favorable, _ventilate_gap),
    (_too_humid, _handle_humid),
    (_too_dry, _handle_dry),
    (_always, _handle_normal),
)


def evaluate_room(
    indoor: SensorReading,
    outdoor: SensorReading,
    threshold: float = DEFAULT_THRESHOLD_GM3,
) -> VentilationVerdict:
    """Recommend opening or closing the windows of one room."""
    if not math.isfinite(threshold) or threshold < 0:
        raise InvalidReadingError(
            f"Humidity threshold must be a finite value >= 0 g/m³, got {threshold!r}."
        )

    indoor_ah = absolute_humidity(indoor.temperature, indoor.humidity)
    outdoor_ah = absolute_humidity(outdoor.temperature, outdoor.humidity)
    gap = indoor_ah - outdoor_ah
    dew_point_indoor = dew_point(indoor.temperature, indoor.humidity)

    conditions = _Conditions(
        indoor=indoor,
        outdoor=outdoor,
        threshold=threshold,
        gap=gap,
        dew_point_indoor=dew_point_indoor,
        details=VerdictDetails(
            indoor_absolute_humidity=round_for_display(indoor_ah),
            outdoor_absolute_humidity=round_for_display(outdoor_ah),
            dew_point_indoor=round_for_display(dew_point_indoor),
            humidity_difference=round_for_display(gap),
        ),
    )

    decision = next(decide(conditions) for guard, decide in RULES if guard(conditions))
    return VentilationVerdict(
        room_name=indoor.name or DEFAULT_ROOM_NAME,
        action=decision.action,
        reason=decision.reason,
        priority=decision.priority,
        details=conditions.details,
        warning=decision.warning,
    )
