"""Household-level ventilation advisory built from per-room evaluations."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Iterable, Optional

from models.errors import EmptyInputError
from models.records import HouseholdAdvisory, RoomAdvice, SensorReading
from services.evaluator import evaluate_room
from services.psychrometrics import absolute_humidity, round_for_display
from services.quality import assess_air_quality, co2_level
from services.selector import select_critical
from settings import get_settings


logger = logging.getLogger(__name__)


class HouseholdAdvisor:
    """Pure advisory component; the threshold is its only configuration."""

    def __init__(self, threshold: float) -> None:
        self.threshold = threshold

    def advise_room(self, indoor: SensorReading, outdoor: SensorReading) -> RoomAdvice:
        verdict = evaluate_room(indoor, outdoor, self.threshold)
        advice = RoomAdvice(
            reading=indoor,
            verdict=verdict,
            assessment=assess_air_quality(indoor),
            absolute_humidity=verdict.details.indoor_absolute_humidity,
            co2_level=co2_level(indoor.co2) if indoor.co2 is not None else None,
        )
        logger.debug(
            "Evaluated room",
            extra={
                "room": verdict.room_name,
                "action": verdict.action.value,
                "priority": verdict.priority.value,
            },
        )
        return advice

    def advise(
        self, indoor_readings: Iterable[SensorReading], outdoor: SensorReading
    ) -> HouseholdAdvisory:
        """Evaluate every room and headline the most critical one."""
        readings = tuple(indoor_readings)
        if not readings:
            raise EmptyInputError(
                "At least one indoor reading is required to build an advisory."
            )

        rooms = tuple(self.advise_room(reading, outdoor) for reading in readings)
        critical = select_critical(rooms)
        advisory = HouseholdAdvisory(
            rooms=rooms,
            critical=critical,
            outdoor=outdoor,
            outdoor_absolute_humidity=round_for_display(
                absolute_humidity(outdoor.temperature, outdoor.humidity)
            ),
        )
        logger.info(
            "Built household advisory",
            extra={
                "critical_room": critical.verdict.room_name,
                "action": advisory.verdict.action.value,
                "room_count": len(rooms),
                "threshold": self.threshold,
            },
        )
        return advisory


def build_household_advisory(
    indoor_readings: Iterable[SensorReading],
    outdoor: SensorReading,
    threshold: Optional[float] = None,
) -> HouseholdAdvisory:
    """Functional entry point; ``threshold=None`` uses the configured default."""
    if threshold is None:
        advisor = build_default_advisor()
    else:
        advisor = HouseholdAdvisor(threshold=threshold)
    return advisor.advise(indoor_readings, outdoor)


@lru_cache
def build_default_advisor(threshold: Optional[float] = None) -> HouseholdAdvisor:
    """Factory that wires the advisor with the configured threshold."""
    settings = get_settings()
    value = settings.humidity_threshold if threshold is None else threshold
    return HouseholdAdvisor(threshold=value)
