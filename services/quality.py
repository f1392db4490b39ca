"""Air quality scoring for a single reading."""

from __future__ import annotations

from models.records import AirQualityAssessment, Co2Level, Quality, SensorReading

# (lower bound exclusive, quality, penalty, issue); highest band first.
_CO2_BANDS = (
    (2000, Quality.BAD, 40, "CO₂ very high"),
    (1500, Quality.POOR, 30, "CO₂ high"),
    (1000, Quality.ACCEPTABLE, 15, "CO₂ slightly high"),
)

_CO2_LEVELS = (
    (800, Co2Level.EXCELLENT),
    (1000, Co2Level.GOOD),
    (1500, Co2Level.AVERAGE),
    (2000, Co2Level.MEDIOCRE),
)


def assess_air_quality(reading: SensorReading) -> AirQualityAssessment:
    """Score a reading out of 100 and list what drags it down.

    CO₂, humidity and temperature are judged independently. The quality
    label only ever moves towards worse and the score never drops below 0.
    An unmeasured CO₂ value is left out of the scoring.
    """
    quality = Quality.GOOD
    score = 100
    issues: list[str] = []

    if reading.co2 is not None:
        for limit, band_quality, penalty, issue in _CO2_BANDS:
            if reading.co2 > limit:
                quality = quality.worst(band_quality)
                score -= penalty
                issues.append(issue)
                break

    humidity = reading.humidity
    if humidity < 30 or humidity > 70:
        quality = quality.worst(Quality.ACCEPTABLE)
        score -= 20
        issues.append("air too dry" if humidity < 30 else "air too humid")
    elif humidity < 40 or humidity > 60:
        quality = quality.worst(Quality.ACCEPTABLE)
        score -= 10

    temperature = reading.temperature
    if temperature < 18 or temperature > 26:
        quality = quality.worst(Quality.ACCEPTABLE)
        score -= 15
        issues.append("low temperature" if temperature < 18 else "high temperature")

    return AirQualityAssessment(quality=quality, score=max(0, score), issues=tuple(issues))


def co2_level(ppm: float) -> Co2Level:
    for upper, level in _CO2_LEVELS:
        if ppm < upper:
            return level
    return Co2Level.BAD
