"""Domain models shared across services."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from models.errors import InvalidReadingError

CO2_ALARM_PPM = 1000


class Action(str, Enum):
    """What to do with the windows of a room."""

    OPEN = "OPEN"
    CLOSE = "CLOSE"
    WAIT = "WAIT"


class Priority(str, Enum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class Quality(str, Enum):
    """Air quality labels, declared from best to worst."""

    EXCELLENT = "EXCELLENT"
    GOOD = "GOOD"
    ACCEPTABLE = "ACCEPTABLE"
    POOR = "POOR"
    BAD = "BAD"

    @property
    def severity(self) -> int:
        return _QUALITY_ORDER.index(self)

    @property
    def color(self) -> str:
        return _QUALITY_COLORS[self]

    def worst(self, other: "Quality") -> "Quality":
        return other if other.severity > self.severity else self


_QUALITY_ORDER = tuple(Quality)

_QUALITY_COLORS = {
    Quality.EXCELLENT: "#00e400",
    Quality.GOOD: "#51d851",
    Quality.ACCEPTABLE: "#ffff00",
    Quality.POOR: "#ff7e00",
    Quality.BAD: "#ff0000",
}


class Co2Level(str, Enum):
    """Coarse CO₂ concentration band shown next to a room's ppm value."""

    EXCELLENT = "EXCELLENT"
    GOOD = "GOOD"
    AVERAGE = "AVERAGE"
    MEDIOCRE = "MEDIOCRE"
    BAD = "BAD"

    @property
    def color(self) -> str:
        return _CO2_LEVEL_COLORS[self]


_CO2_LEVEL_COLORS = {
    Co2Level.EXCELLENT: "#00e400",
    Co2Level.GOOD: "#51d851",
    Co2Level.AVERAGE: "#ffff00",
    Co2Level.MEDIOCRE: "#ff7e00",
    Co2Level.BAD: "#ff0000",
}


def _check_optional(field_name: str, value: Optional[float]) -> None:
    if value is None:
        return
    if not math.isfinite(value) or value < 0:
        raise InvalidReadingError(
            f"{field_name} must be a finite value >= 0 when measured, got {value!r}."
        )


@dataclass(frozen=True, slots=True)
class SensorReading:
    """One sensor module: a room or the outdoor station.

    ``co2``, ``pressure`` and ``noise`` are ``None`` when the module does not
    measure them; ``0`` is a real measurement.
    """

    temperature: float
    humidity: float
    name: str = ""
    co2: Optional[float] = None
    pressure: Optional[float] = None
    noise: Optional[float] = None

    def __post_init__(self) -> None:
        if not math.isfinite(self.temperature):
            raise InvalidReadingError(
                f"Temperature must be finite, got {self.temperature!r}."
            )
        if not math.isfinite(self.humidity) or not 0 <= self.humidity <= 100:
            raise InvalidReadingError(
                f"Relative humidity must be within 0-100%, got {self.humidity!r}."
            )
        _check_optional("CO2", self.co2)
        _check_optional("Pressure", self.pressure)
        _check_optional("Noise", self.noise)

    @property
    def has_co2_alarm(self) -> bool:
        return self.co2 is not None and self.co2 > CO2_ALARM_PPM


@dataclass(frozen=True, slots=True)
class VerdictDetails:
    """Psychrometric figures behind a verdict, rounded to one decimal."""

    indoor_absolute_humidity: float
    outdoor_absolute_humidity: float
    dew_point_indoor: float
    humidity_difference: float


@dataclass(frozen=True, slots=True)
class VentilationVerdict:
    room_name: str
    action: Action
    reason: str
    priority: Priority
    details: VerdictDetails
    warning: Optional[str] = None


@dataclass(frozen=True, slots=True)
class AirQualityAssessment:
    quality: Quality
    score: int
    issues: Tuple[str, ...] = ()

    @property
    def color(self) -> str:
        return self.quality.color


@dataclass(frozen=True, slots=True)
class RoomAdvice:
    """Everything the engine derived for one indoor reading."""

    reading: SensorReading
    verdict: VentilationVerdict
    assessment: AirQualityAssessment
    absolute_humidity: float
    co2_level: Optional[Co2Level] = None


@dataclass(frozen=True, slots=True)
class HouseholdAdvisory:
    """Per-room advice plus the critical room driving the headline."""

    rooms: Tuple[RoomAdvice, ...]
    critical: RoomAdvice
    outdoor: SensorReading
    outdoor_absolute_humidity: float

    @property
    def verdict(self) -> VentilationVerdict:
        return self.critical.verdict

    @property
    def assessment(self) -> AirQualityAssessment:
        return self.critical.assessment


@dataclass(frozen=True, slots=True)
class StationSnapshot:
    """Readings extracted from one weather-station refresh."""

    station_name: str
    indoor: Tuple[SensorReading, ...]
    outdoor: SensorReading
