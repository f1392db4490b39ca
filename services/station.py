"""Conversion of a weather-station snapshot into sensor readings.

The payload follows the ``getstationsdata`` shape: a ``body`` holding a list
of ``devices``, each device being the main indoor module with its satellite
``modules``. Only the first device is read.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Mapping, Optional

from models.errors import InvalidReadingError, StationPayloadError
from models.records import SensorReading, StationSnapshot
from services.psychrometrics import absolute_humidity, dew_point


logger = logging.getLogger(__name__)

OUTDOOR_MODULE = "NAModule1"
INDOOR_MODULES = frozenset({"NAModule2", "NAModule4"})

_DEFAULT_STATION_NAME = "Main station"
_DEFAULT_OUTDOOR_NAME = "Outdoor"
_DEFAULT_INDOOR_NAME = "Indoor module"


def _name(value: Any, default: str) -> str:
    return str(value) if value else default


def _optional_number(data: Mapping[str, Any], key: str) -> Optional[float]:
    value = data.get(key)
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _check_evaluable(reading: SensorReading, *, indoor: bool) -> None:
    # Indoor rooms also need a dew point, which is undefined at 0% RH.
    absolute_humidity(reading.temperature, reading.humidity)
    if indoor:
        dew_point(reading.temperature, reading.humidity)


def _reading_from(
    name: str,
    dashboard: Any,
    module_type: str,
    station: str,
    *,
    indoor: bool = True,
) -> Optional[SensorReading]:
    if not isinstance(dashboard, Mapping):
        logger.warning(
            "Skipping module without dashboard data",
            extra={"station": station, "room": name, "module_type": module_type},
        )
        return None

    temperature = _optional_number(dashboard, "Temperature")
    humidity = _optional_number(dashboard, "Humidity")
    if temperature is None or humidity is None:
        logger.warning(
            "Skipping module",
            extra={
                "station": station,
                "room": name,
                "module_type": module_type,
                "reason": "missing temperature or humidity",
            },
        )
        return None

    try:
        reading = SensorReading(
            name=name,
            temperature=temperature,
            humidity=humidity,
            co2=_optional_number(dashboard, "CO2"),
            pressure=_optional_number(dashboard, "Pressure"),
            noise=_optional_number(dashboard, "Noise"),
        )
        _check_evaluable(reading, indoor=indoor)
        return reading
    except InvalidReadingError as exc:
        logger.warning(
            "Skipping module",
            extra={
                "station": station,
                "room": name,
                "module_type": module_type,
                "reason": str(exc),
            },
        )
        return None


def parse_station_payload(payload: Mapping[str, Any]) -> StationSnapshot:
    """Extract indoor readings and the outdoor reading from a station payload.

    Accepts either the full API response or its ``body``. Modules lacking a
    temperature or humidity value, or reporting values the evaluator cannot
    work with, are skipped; measurements a module does not
    report (for instance pressure on satellite modules) stay ``None``.
    """
    body = payload.get("body", payload)
    devices = body.get("devices") if isinstance(body, Mapping) else None
    if not isinstance(devices, list) or not devices or not isinstance(devices[0], Mapping):
        raise StationPayloadError("No station data found")

    device = devices[0]
    station_name = _name(device.get("station_name"), _DEFAULT_STATION_NAME)
    main_name = _name(device.get("module_name"), station_name)

    indoor: list[SensorReading] = []
    main = _reading_from(main_name, device.get("dashboard_data"), "NAMain", station_name)
    if main is not None:
        indoor.append(main)

    outdoor: Optional[SensorReading] = None
    modules = device.get("modules")
    for module in modules if isinstance(modules, list) else ():
        if not isinstance(module, Mapping):
            continue
        module_type = module.get("type")
        if not isinstance(module_type, str):
            continue
        if module_type == OUTDOOR_MODULE:
            reading = _reading_from(
                _name(module.get("module_name"), _DEFAULT_OUTDOOR_NAME),
                module.get("dashboard_data"),
                module_type,
                station_name,
                indoor=False,
            )
            if reading is not None:
                outdoor = reading
        elif module_type in INDOOR_MODULES:
            reading = _reading_from(
                _name(module.get("module_name"), _DEFAULT_INDOOR_NAME),
                module.get("dashboard_data"),
                module_type,
                station_name,
            )
            if reading is not None:
                indoor.append(reading)

    if not indoor:
        raise StationPayloadError(f"Station {station_name!r} has no usable indoor module.")
    if outdoor is None:
        raise StationPayloadError(f"Station {station_name!r} has no usable outdoor module.")

    return StationSnapshot(station_name=station_name, indoor=tuple(indoor), outdoor=outdoor)
