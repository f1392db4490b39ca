"""Errors raised by the advisory engine."""

from __future__ import annotations


class AdvisoryError(ValueError):
    """Base class for input problems the engine refuses to evaluate."""


class InvalidReadingError(AdvisoryError):
    """A reading or parameter lies outside the physically plausible domain."""


class EmptyInputError(AdvisoryError):
    """No indoor readings were supplied, so no room can be designated."""


class StationPayloadError(AdvisoryError):
    """A weather-station payload cannot be turned into readings."""
