"""Pydantic schemas for the HTTP API layer."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from models.records import (
    Action,
    AirQualityAssessment,
    Co2Level,
    HouseholdAdvisory,
    Priority,
    Quality,
    RoomAdvice,
    SensorReading,
    VentilationVerdict,
    VerdictDetails,
)


class ReadingIn(BaseModel):
    """One sensor module as submitted by a caller.

    Omit ``co2``, ``pressure`` or ``noise`` when the module does not measure
    them; ``0`` is treated as a real measurement.
    """

    name: str = ""
    temperature: float = Field(..., description="Air temperature in °C.")
    humidity: float = Field(..., description="Relative humidity in %.")
    co2: Optional[float] = Field(default=None, description="CO₂ concentration in ppm.")
    pressure: Optional[float] = Field(default=None, description="Pressure in hPa.")
    noise: Optional[float] = Field(default=None, description="Noise level in dB.")

    def to_domain(self) -> SensorReading:
        return SensorReading(
            name=self.name,
            temperature=self.temperature,
            humidity=self.humidity,
            co2=self.co2,
            pressure=self.pressure,
            noise=self.noise,
        )

    @classmethod
    def from_domain(cls, reading: SensorReading) -> "ReadingIn":
        return cls(
            name=reading.name,
            temperature=reading.temperature,
            humidity=reading.humidity,
            co2=reading.co2,
            pressure=reading.pressure,
            noise=reading.noise,
        )


class AdvisoryRequest(BaseModel):
    indoor: List[ReadingIn] = Field(default_factory=list)
    outdoor: ReadingIn
    threshold: Optional[float] = Field(
        default=None, description="Absolute humidity gap in g/m³ worth ventilating for."
    )


class RoomEvaluationRequest(BaseModel):
    indoor: ReadingIn
    outdoor: ReadingIn
    threshold: Optional[float] = None


class DetailsResponse(BaseModel):
    indoor_absolute_humidity: float
    outdoor_absolute_humidity: float
    dew_point_indoor: float
    humidity_difference: float

    @classmethod
    def from_domain(cls, details: VerdictDetails) -> "DetailsResponse":
        return cls(
            indoor_absolute_humidity=details.indoor_absolute_humidity,
            outdoor_absolute_humidity=details.outdoor_absolute_humidity,
            dew_point_indoor=details.dew_point_indoor,
            humidity_difference=details.humidity_difference,
        )


class VerdictResponse(BaseModel):
    """Window recommendation for one room."""

    room_name: str
    action: Action
    reason: str
    priority: Priority
    warning: Optional[str] = None
    details: DetailsResponse

    @classmethod
    def from_domain(cls, verdict: VentilationVerdict) -> "VerdictResponse":
        return cls(
            room_name=verdict.room_name,
            action=verdict.action,
            reason=verdict.reason,
            priority=verdict.priority,
            warning=verdict.warning,
            details=DetailsResponse.from_domain(verdict.details),
        )


class AssessmentResponse(BaseModel):
    quality: Quality
    color: str
    score: int = Field(..., ge=0, le=100)
    issues: List[str] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, assessment: AirQualityAssessment) -> "AssessmentResponse":
        return cls(
            quality=assessment.quality,
            color=assessment.color,
            score=assessment.score,
            issues=list(assessment.issues),
        )


class RoomAdviceResponse(BaseModel):
    reading: ReadingIn
    verdict: VerdictResponse
    assessment: AssessmentResponse
    absolute_humidity: float
    co2_level: Optional[Co2Level] = None
    critical: bool = False

    @classmethod
    def from_domain(cls, advice: RoomAdvice, critical: bool = False) -> "RoomAdviceResponse":
        return cls(
            reading=ReadingIn.from_domain(advice.reading),
            verdict=VerdictResponse.from_domain(advice.verdict),
            assessment=AssessmentResponse.from_domain(advice.assessment),
            absolute_humidity=advice.absolute_humidity,
            co2_level=advice.co2_level,
            critical=critical,
        )


class AdvisoryResponse(BaseModel):
    """Headline recommendation plus the per-room breakdown behind it."""

    verdict: VerdictResponse
    assessment: AssessmentResponse
    critical_room: str
    outdoor: ReadingIn
    outdoor_absolute_humidity: float
    rooms: List[RoomAdviceResponse] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, advisory: HouseholdAdvisory) -> "AdvisoryResponse":
        return cls(
            verdict=VerdictResponse.from_domain(advisory.verdict),
            assessment=AssessmentResponse.from_domain(advisory.assessment),
            critical_room=advisory.verdict.room_name,
            outdoor=ReadingIn.from_domain(advisory.outdoor),
            outdoor_absolute_humidity=advisory.outdoor_absolute_humidity,
            rooms=[
                RoomAdviceResponse.from_domain(room, critical=room is advisory.critical)
                for room in advisory.rooms
            ],
        )


class PsychrometricsResponse(BaseModel):
    temperature: float
    humidity: float
    saturated_vapor_pressure: float = Field(..., description="hPa")
    absolute_humidity: float = Field(..., description="g/m³")
    dew_point: float = Field(..., description="°C")
