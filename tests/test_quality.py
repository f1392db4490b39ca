from __future__ import annotations

import pytest

from models.records import Co2Level, Quality, SensorReading
from services.quality import assess_air_quality, co2_level


def _reading(temperature: float = 21.0, humidity: float = 50.0, co2: float | None = None) -> SensorReading:
    return SensorReading(temperature=temperature, humidity=humidity, co2=co2)


def test_comfortable_room_scores_full_marks() -> None:
    assessment = assess_air_quality(_reading(co2=600))

    assert assessment.quality is Quality.GOOD
    assert assessment.score == 100
    assert assessment.issues == ()
    assert assessment.color == "#51d851"


def test_every_axis_out_of_range_adds_up() -> None:
    assessment = assess_air_quality(_reading(temperature=30, humidity=80, co2=2500))

    assert assessment.quality is Quality.BAD
    assert assessment.score == 25
    assert assessment.issues == ("CO₂ very high", "air too humid", "high temperature")


@pytest.mark.parametrize(
    ("co2", "quality", "score", "issue"),
    [
        (2001, Quality.BAD, 60, "CO₂ very high"),
        (1800, Quality.POOR, 70, "CO₂ high"),
        (1200, Quality.ACCEPTABLE, 85, "CO₂ slightly high"),
    ],
)
def test_only_the_highest_co2_band_applies(
    co2: float, quality: Quality, score: int, issue: str
) -> None:
    assessment = assess_air_quality(_reading(co2=co2))

    assert assessment.quality is quality
    assert assessment.score == score
    assert assessment.issues == (issue,)


def test_co2_at_band_limits_is_not_penalised() -> None:
    assert assess_air_quality(_reading(co2=1000)).score == 100


def test_unmeasured_co2_is_ignored() -> None:
    assessment = assess_air_quality(_reading(co2=None))

    assert assessment.score == 100
    assert assessment.quality is Quality.GOOD


def test_zero_co2_is_a_real_measurement() -> None:
    assessment = assess_air_quality(_reading(co2=0))

    assert assessment.score == 100


@pytest.mark.parametrize(("humidity", "issue"), [(25.0, "air too dry"), (75.0, "air too humid")])
def test_severe_humidity_adds_issue(humidity: float, issue: str) -> None:
    assessment = assess_air_quality(_reading(humidity=humidity))

    assert assessment.quality is Quality.ACCEPTABLE
    assert assessment.score == 80
    assert assessment.issues == (issue,)


@pytest.mark.parametrize("humidity", [35.0, 65.0])
def test_mild_humidity_penalises_without_issue(humidity: float) -> None:
    assessment = assess_air_quality(_reading(humidity=humidity))

    assert assessment.quality is Quality.ACCEPTABLE
    assert assessment.score == 90
    assert assessment.issues == ()


@pytest.mark.parametrize(
    ("temperature", "issue"), [(16.0, "low temperature"), (27.5, "high temperature")]
)
def test_temperature_out_of_comfort_band(temperature: float, issue: str) -> None:
    assessment = assess_air_quality(_reading(temperature=temperature))

    assert assessment.quality is Quality.ACCEPTABLE
    assert assessment.score == 85
    assert assessment.issues == (issue,)


def test_quality_never_improves_after_co2_demotion() -> None:
    assessment = assess_air_quality(_reading(temperature=16, humidity=25, co2=1800))

    assert assessment.quality is Quality.POOR
    assert assessment.score == 35


def test_worst_reading_keeps_a_positive_score() -> None:
    assessment = assess_air_quality(_reading(temperature=-5, humidity=95, co2=5000))

    assert assessment.quality is Quality.BAD
    assert assessment.score == 25
    assert assessment.issues == ("CO₂ very high", "air too humid", "low temperature")


@pytest.mark.parametrize(
    ("ppm", "level"),
    [
        (400, Co2Level.EXCELLENT),
        (800, Co2Level.GOOD),
        (999, Co2Level.GOOD),
        (1000, Co2Level.AVERAGE),
        (1500, Co2Level.MEDIOCRE),
        (2000, Co2Level.BAD),
    ],
)
def test_co2_level_bands(ppm: float, level: Co2Level) -> None:
    assert co2_level(ppm) is level


def test_quality_ordering() -> None:
    assert Quality.GOOD.worst(Quality.BAD) is Quality.BAD
    assert Quality.POOR.worst(Quality.ACCEPTABLE) is Quality.POOR
    assert Quality.EXCELLENT.severity < Quality.BAD.severity
