"""
FuelTrack Calculation Module

Pure calculations over fuel log snapshots: fill-up ordering, distance,
mileage and history statistics.

Usage:
    from fueltrack.calculations import derive_history
    from fueltrack.calculations.constants import MILEAGE_PRECISION
"""

from .history import (
    calculate_history_stats,
    calculate_segment_distance,
    calculate_segment_mileage,
    derive_history,
)

from .constants import (
    MILEAGE_PRECISION,
    MIN_RECORDS_FOR_STATS,
    STATS_PRECISION,
)

__all__ = [
    "derive_history",
    "calculate_segment_distance",
    "calculate_segment_mileage",
    "calculate_history_stats",
    "MILEAGE_PRECISION",
    "STATS_PRECISION",
    "MIN_RECORDS_FOR_STATS",
]
