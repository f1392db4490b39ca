"""Selection of the room that drives the household recommendation."""

from __future__ import annotations

from functools import reduce
from typing import Sequence

from models.errors import EmptyInputError
from models.records import RoomAdvice


def _more_critical(current: RoomAdvice, candidate: RoomAdvice) -> RoomAdvice:
    current_alarm = current.reading.has_co2_alarm
    candidate_alarm = candidate.reading.has_co2_alarm
    if candidate_alarm and not current_alarm:
        return candidate
    if current_alarm and not candidate_alarm:
        return current

    current_gap = abs(current.verdict.details.humidity_difference)
    candidate_gap = abs(candidate.verdict.details.humidity_difference)
    # Strictly larger only: on a tie the earlier room stays.
    return candidate if candidate_gap > current_gap else current


def select_critical(rooms: Sequence[RoomAdvice]) -> RoomAdvice:
    """Fold the rooms left to right and return the most critical one.

    A CO₂ alarm (over 1000 ppm) outranks any humidity gap. Between rooms on
    the same side of that line, the larger absolute humidity difference wins.
    """
    if not rooms:
        raise EmptyInputError("Cannot select a critical room from an empty list of rooms.")
    return reduce(_more_critical, rooms)
