"""Unit tests for the household advisory."""

from __future__ import annotations

import logging

import pytest

from models.errors import EmptyInputError, InvalidReadingError
from models.records import Action, Co2Level, Priority, Quality, SensorReading
from services.advisory import HouseholdAdvisor, build_default_advisor, build_household_advisory
from settings import get_settings

OUTDOOR = SensorReading(name="Garden", temperature=5.0, humidity=80.0)


@pytest.fixture(autouse=True)
def _fresh_advisor_cache():
    build_default_advisor.cache_clear()
    yield
    build_default_advisor.cache_clear()


def test_single_room_advisory_headlines_that_room() -> None:
    living = SensorReading(name="Living room", temperature=22.0, humidity=50.0, co2=400)

    advisory = build_household_advisory([living], OUTDOOR)

    assert len(advisory.rooms) == 1
    assert advisory.critical is advisory.rooms[0]
    assert advisory.verdict.room_name == "Living room"
    assert advisory.verdict.action is Action.OPEN
    assert advisory.verdict.priority is Priority.MEDIUM
    assert advisory.assessment.quality is Quality.GOOD
    assert advisory.outdoor_absolute_humidity == pytest.approx(5.4)
    assert advisory.rooms[0].absolute_humidity == pytest.approx(9.7)
    assert advisory.rooms[0].co2_level is Co2Level.EXCELLENT


def test_co2_room_drives_the_headline() -> None:
    rooms = [
        SensorReading(name="A", temperature=24.0, humidity=70.0, co2=700),
        SensorReading(name="B", temperature=21.0, humidity=45.0, co2=1600),
        SensorReading(name="C", temperature=19.0, humidity=60.0, co2=800),
    ]

    advisory = build_household_advisory(rooms, OUTDOOR)

    assert advisory.critical.reading.name == "B"
    assert advisory.verdict.action is Action.OPEN
    assert advisory.verdict.priority is Priority.HIGH
    assert advisory.assessment.quality is Quality.POOR
    assert "CO₂ high" in advisory.assessment.issues
    assert [room.reading.name for room in advisory.rooms] == ["A", "B", "C"]


def test_rooms_without_co2_have_no_co2_level() -> None:
    bedroom = SensorReading(name="Bedroom", temperature=20.0, humidity=50.0)

    advisory = build_household_advisory([bedroom], OUTDOOR)

    assert advisory.rooms[0].co2_level is None


def test_empty_indoor_list_is_rejected() -> None:
    with pytest.raises(EmptyInputError, match="indoor reading"):
        build_household_advisory([], OUTDOOR)


def test_explicit_threshold_overrides_configuration(monkeypatch) -> None:
    monkeypatch.setenv("VENTILATION_HUMIDITY_THRESHOLD", "10")
    room = SensorReading(temperature=22.0, humidity=50.0)

    get_settings.cache_clear()
    try:
        configured = build_household_advisory([room], OUTDOOR)
        explicit = build_household_advisory([room], OUTDOOR, threshold=3.0)
    finally:
        get_settings.cache_clear()

    assert configured.verdict.action is not Action.OPEN
    assert explicit.verdict.action is Action.OPEN


def test_invalid_threshold_propagates() -> None:
    room = SensorReading(temperature=22.0, humidity=50.0)

    with pytest.raises(InvalidReadingError):
        HouseholdAdvisor(threshold=-1.0).advise([room], OUTDOOR)


def test_advisory_is_repeatable() -> None:
    rooms = [
        SensorReading(name="A", temperature=22.0, humidity=55.0, co2=900),
        SensorReading(name="B", temperature=19.0, humidity=68.0),
    ]
    advisor = HouseholdAdvisor(threshold=3.0)

    assert advisor.advise(rooms, OUTDOOR) == advisor.advise(rooms, OUTDOOR)


def test_advisor_logs_critical_room(caplog) -> None:
    rooms = [
        SensorReading(name="Kitchen", temperature=23.0, humidity=60.0, co2=1300),
        SensorReading(name="Office", temperature=21.0, humidity=45.0),
    ]

    with caplog.at_level(logging.DEBUG, logger="services.advisory"):
        HouseholdAdvisor(threshold=3.0).advise(rooms, OUTDOOR)

    records = [record for record in caplog.records if record.name == "services.advisory"]
    assert any(getattr(record, "critical_room", None) == "Kitchen" for record in records)
    assert any(getattr(record, "room_count", None) == 2 for record in records)
    assert {getattr(record, "room", None) for record in records} >= {"Kitchen", "Office"}
