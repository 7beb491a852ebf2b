"""Utility modules for FuelTrack."""

from .number_extractor import NumberExtractor
from .fuel_form import (
    ASSIGNABLE_FIELDS,
    FuelLogDraft,
    normalize_fuel_log_data,
    validate_fuel_log_data,
)
from .timezone import (
    utc_now,
    ensure_utc,
    parse_iso_datetime,
)

__all__ = [
    'NumberExtractor',
    'ASSIGNABLE_FIELDS',
    'FuelLogDraft',
    'normalize_fuel_log_data',
    'validate_fuel_log_data',
    'utc_now',
    'ensure_utc',
    'parse_iso_datetime',
]
