"""HTTP route definitions for the service."""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status

from app.schemas import (
    AdvisoryRequest,
    AdvisoryResponse,
    AssessmentResponse,
    PsychrometricsResponse,
    ReadingIn,
    RoomEvaluationRequest,
    VerdictResponse,
)
from services.advisory import HouseholdAdvisor, build_default_advisor
from services.evaluator import evaluate_room
from services.psychrometrics import (
    absolute_humidity,
    dew_point,
    round_for_display,
    saturated_vapor_pressure,
)
from services.quality import assess_air_quality
from services.station import parse_station_payload

router = APIRouter()


def get_advisor() -> HouseholdAdvisor:
    return build_default_advisor()


def _bad_request(exc: ValueError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


def _advisor_for(advisor: HouseholdAdvisor, threshold: Optional[float]) -> HouseholdAdvisor:
    if threshold is None:
        return advisor
    return HouseholdAdvisor(threshold=threshold)


@router.post(
    "/advisory",
    response_model=AdvisoryResponse,
    summary="Evaluate every room and return the household recommendation.",
)
async def create_advisory(
    request: AdvisoryRequest,
    advisor: HouseholdAdvisor = Depends(get_advisor),
) -> AdvisoryResponse:
    try:
        indoor = [reading.to_domain() for reading in request.indoor]
        outdoor = request.outdoor.to_domain()
        advisory = _advisor_for(advisor, request.threshold).advise(indoor, outdoor)
    except ValueError as exc:
        raise _bad_request(exc) from exc
    return AdvisoryResponse.from_domain(advisory)


@router.post(
    "/advisory/station",
    response_model=AdvisoryResponse,
    summary="Build the household recommendation from a weather-station snapshot.",
)
async def create_station_advisory(
    payload: Dict[str, Any] = Body(..., description="Station data as returned by the provider."),
    threshold: Optional[float] = Query(default=None),
    advisor: HouseholdAdvisor = Depends(get_advisor),
) -> AdvisoryResponse:
    try:
        snapshot = parse_station_payload(payload)
        advisory = _advisor_for(advisor, threshold).advise(snapshot.indoor, snapshot.outdoor)
    except ValueError as exc:
        raise _bad_request(exc) from exc
    return AdvisoryResponse.from_domain(advisory)


@router.post(
    "/rooms/evaluate",
    response_model=VerdictResponse,
    summary="Recommend opening or closing the windows of a single room.",
)
async def evaluate_single_room(
    request: RoomEvaluationRequest,
    advisor: HouseholdAdvisor = Depends(get_advisor),
) -> VerdictResponse:
    threshold = advisor.threshold if request.threshold is None else request.threshold
    try:
        verdict = evaluate_room(request.indoor.to_domain(), request.outdoor.to_domain(), threshold)
    except ValueError as exc:
        raise _bad_request(exc) from exc
    return VerdictResponse.from_domain(verdict)


@router.post(
    "/air-quality",
    response_model=AssessmentResponse,
    summary="Score the air quality of one reading.",
)
async def assess_reading(reading: ReadingIn) -> AssessmentResponse:
    try:
        assessment = assess_air_quality(reading.to_domain())
    except ValueError as exc:
        raise _bad_request(exc) from exc
    return AssessmentResponse.from_domain(assessment)


@router.get(
    "/psychrometrics",
    response_model=PsychrometricsResponse,
    summary="Absolute humidity and dew point for a temperature and relative humidity.",
)
async def psychrometrics(
    temperature: float = Query(..., description="Air temperature in °C."),
    humidity: float = Query(..., description="Relative humidity in %."),
) -> PsychrometricsResponse:
    try:
        response = PsychrometricsResponse(
            temperature=temperature,
            humidity=humidity,
            saturated_vapor_pressure=round_for_display(saturated_vapor_pressure(temperature)),
            absolute_humidity=round_for_display(absolute_humidity(temperature, humidity)),
            dew_point=round_for_display(dew_point(temperature, humidity)),
        )
    except ValueError as exc:
        raise _bad_request(exc) from exc
    return response


@router.get(
    "/health",
    summary="Health check endpoint.",
    status_code=status.HTTP_200_OK,
)
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


@router.get(
    "/",
    summary="Root endpoint mirrors health information.",
    status_code=status.HTTP_200_OK,
)
async def root() -> dict[str, str]:
    return {"status": "ok", "detail": "See /health for service status."}
