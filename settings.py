from __future__ import annotations

import math
import os
from dataclasses import dataclass
from functools import lru_cache


_THRESHOLD_ENV = "VENTILATION_HUMIDITY_THRESHOLD"
_LOG_LEVEL_ENV = "LOG_LEVEL"

DEFAULT_HUMIDITY_THRESHOLD = 3.0


@dataclass(frozen=True)
class Settings:
    humidity_threshold: float
    log_level: str


def _read_threshold(default: float) -> float:
    value = os.getenv(_THRESHOLD_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    try:
        parsed = float(candidate)
    except ValueError:
        return default
    if not math.isfinite(parsed) or parsed < 0:
        return default
    return parsed


def _read_log_level(default: str) -> str:
    value = os.getenv(_LOG_LEVEL_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    return candidate.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings(
        humidity_threshold=_read_threshold(DEFAULT_HUMIDITY_THRESHOLD),
        log_level=_read_log_level("INFO"),
    )
