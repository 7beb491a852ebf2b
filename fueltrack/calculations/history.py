"""
Fill-up History Calculations

Turns an unordered snapshot of refueling records into an ordered history:
- Odometer ordering (newest fill-up first)
- Distance driven since the previous fill-up
- Mileage (distance per unit of fuel) for each fill-up
- Summary statistics across the history

Every call recomputes from the snapshot it is given. Data-entry anomalies
(odometer going backwards, zero or negative fuel) never raise; they produce
a mileage of 0.
"""

import math
import statistics as stats_module
from typing import Any, Dict, List, Optional

from .constants import (
    MILEAGE_PRECISION,
    MIN_RECORDS_FOR_STATS,
    STATS_PRECISION,
    TOTALS_PRECISION,
    UNKNOWN_ODOMETER_SORT_KEY,
)


def _as_number(value: Any) -> Optional[float]:
    """Coerce a stored field to a finite float, or None if it is unusable."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(number):
        return None
    return number


def _odometer_sort_key(record: dict) -> float:
    odometer = _as_number(record.get('odometer'))
    return UNKNOWN_ODOMETER_SORT_KEY if odometer is None else odometer


def calculate_segment_distance(current_odometer: Any, previous_odometer: Any) -> float:
    """
    Calculate distance driven between two fill-ups.

    Args:
        current_odometer: Odometer at the later fill-up
        previous_odometer: Odometer at the fill-up before it

    Returns:
        Odometer difference, or 0.0 if either reading is unusable

    Examples:
        >>> calculate_segment_distance(400, 250)
        150.0
        >>> calculate_segment_distance(400, None)
        0.0
    """
    current = _as_number(current_odometer)
    previous = _as_number(previous_odometer)
    if current is None or previous is None:
        return 0.0
    return current - previous


def calculate_segment_mileage(distance: Any, fuel_amount: Any) -> float:
    """
    Calculate mileage (distance per unit of fuel) for one fill-up.

    Args:
        distance: Distance driven since the previous fill-up
        fuel_amount: Fuel added at this fill-up

    Returns:
        Mileage rounded to 2 decimals, or 0.0 when distance or fuel is not positive

    Examples:
        >>> calculate_segment_mileage(150, 5)
        30.0
        >>> calculate_segment_mileage(-20, 5)  # Odometer went backwards
        0.0
        >>> calculate_segment_mileage(150, 0)
        0.0
    """
    distance = _as_number(distance)
    fuel_amount = _as_number(fuel_amount)
    if distance is None or fuel_amount is None:
        return 0.0
    if distance <= 0 or fuel_amount <= 0:
        return 0.0

    mileage = distance / fuel_amount
    # Overflows on denormal fuel amounts
    if not math.isfinite(mileage):
        return 0.0
    return round(mileage, MILEAGE_PRECISION)


def calculate_history_stats(history: List[dict]) -> Optional[Dict[str, Any]]:
    """
    Summarize an enriched history (newest fill-up first).

    Args:
        history: Records already ordered and enriched by derive_history()

    Returns:
        Dict with total_distance, avg_mileage, last_mileage, total_fuel,
        total_cost and fill_up_count. None if fewer than 2 records.
    """
    if len(history) < MIN_RECORDS_FOR_STATS:
        return None

    odometers = [_as_number(r.get('odometer')) for r in history]
    odometers = [o for o in odometers if o is not None]
    total_distance = odometers[0] - odometers[-1] if len(odometers) >= 2 else 0.0

    positive_mileages = [r['mileage'] for r in history if r['mileage'] > 0]
    if positive_mileages:
        avg_mileage = round(stats_module.mean(positive_mileages), STATS_PRECISION)
    else:
        avg_mileage = 0.0

    fuel_amounts = [_as_number(r.get('fuel_amount')) for r in history]
    prices = [_as_number(r.get('price')) for r in history]

    return {
        'total_distance': total_distance,
        'avg_mileage': avg_mileage,
        'last_mileage': round(history[0]['mileage'], STATS_PRECISION),
        'total_fuel': round(sum(f for f in fuel_amounts if f is not None and f > 0), TOTALS_PRECISION),
        'total_cost': round(sum(p for p in prices if p is not None and p >= 0), TOTALS_PRECISION),
        'fill_up_count': len(history),
    }


def derive_history(records: List[dict]) -> Dict[str, Any]:
    """
    Order fill-ups by odometer and derive distance, mileage and stats.

    Records are sorted by odometer descending so index 0 is the most recent
    fill-up. The sort is stable: records with equal odometers keep their input
    order, and records with a missing or unreadable odometer go last, also in
    input order. The last record has no predecessor, so its distance and
    mileage are 0.

    Args:
        records: Fuel log dicts with odometer, fuel_amount, price (and id,
            date, station carried through unchanged)

    Returns:
        {'history': [enriched record dicts], 'stats': dict or None}

    Examples:
        >>> result = derive_history([
        ...     {'id': 1, 'odometer': 100, 'fuel_amount': 5},
        ...     {'id': 2, 'odometer': 250, 'fuel_amount': 5},
        ...     {'id': 3, 'odometer': 400, 'fuel_amount': 5},
        ... ])
        >>> [r['mileage'] for r in result['history']]
        [30.0, 30.0, 0.0]
        >>> result['stats']['total_distance']
        300.0
    """
    ordered = sorted(records, key=_odometer_sort_key, reverse=True)

    history = []
    for index, record in enumerate(ordered):
        if index == len(ordered) - 1:
            distance, mileage = 0.0, 0.0
        else:
            previous = ordered[index + 1]
            distance = calculate_segment_distance(record.get('odometer'), previous.get('odometer'))
            mileage = calculate_segment_mileage(distance, record.get('fuel_amount'))

        history.append({**record, 'distance': distance, 'mileage': mileage})

    return {
        'history': history,
        'stats': calculate_history_stats(history),
    }
