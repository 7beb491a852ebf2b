"""
Fuel log form handling.

Validates submitted fuel log data and models the entry form that numeric
candidates from a receipt photo are assigned into.
"""

import math
from typing import Any, List, Optional, Tuple

from fueltrack.config import Config
from fueltrack.exceptions import RecordValidationError
from fueltrack.utils.timezone import parse_iso_datetime, utc_now

# Fields a recognized number can be copied into
ASSIGNABLE_FIELDS = ('odometer', 'fuel_amount', 'price')


def _numeric_limits():
    # (min, max, min_exclusive)
    return {
        'odometer': (0, Config.MAX_ODOMETER, False),
        'fuel_amount': (0, Config.MAX_FUEL_AMOUNT, True),
        'price': (0, Config.MAX_PRICE, False),
    }


def _parse_number(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (ValueError, TypeError, OverflowError):
        return None
    return number if math.isfinite(number) else None


def validate_fuel_log_data(data: dict) -> Tuple[bool, List[str]]:
    """
    Validate fuel log data.

    Returns (is_valid, errors) tuple.
    """
    errors = []

    for field, (min_val, max_val, min_exclusive) in _numeric_limits().items():
        value = data.get(field)
        if value is None or (isinstance(value, str) and not value.strip()):
            errors.append(f'{field} is required')
            continue

        num_val = _parse_number(value)
        if num_val is None:
            errors.append(f'{field} must be a valid number')
        elif min_exclusive and num_val <= min_val:
            errors.append(f'{field} must be greater than {min_val}')
        elif num_val < min_val or num_val > max_val:
            errors.append(f'{field} must be between {min_val} and {max_val}')

    if data.get('date') and parse_iso_datetime(data['date']) is None:
        errors.append('date must be an ISO-8601 timestamp')

    station = data.get('station')
    if station is not None and not isinstance(station, str):
        errors.append('station must be text')

    return len(errors) == 0, errors


def normalize_fuel_log_data(data: dict) -> dict:
    """
    Validate and convert submitted data into a storable fuel log record.

    Numbers are parsed to floats, a missing date becomes the current UTC
    time, and a missing station becomes an empty string.

    Raises:
        RecordValidationError: If any field fails validation
    """
    is_valid, errors = validate_fuel_log_data(data)
    if not is_valid:
        raise RecordValidationError('Validation failed', errors)

    date = parse_iso_datetime(data.get('date')) or utc_now()

    return {
        'date': date.isoformat(),
        'odometer': float(data['odometer']),
        'fuel_amount': float(data['fuel_amount']),
        'price': float(data['price']),
        'station': (data.get('station') or '').strip(),
    }


class FuelLogDraft:
    """
    Editable state of the fuel log entry form.

    The three numeric fields hold strings exactly as typed or assigned;
    parsing happens only in to_record(). A numeric candidate may be
    assigned to any of them, overwriting what was there, and the same
    candidate may be assigned to more than one field.
    """

    def __init__(self, date: Optional[str] = None, station: str = ''):
        self.date = date
        self.station = station
        self.odometer = ''
        self.fuel_amount = ''
        self.price = ''

    def assign(self, field: str, value: str) -> None:
        """Copy a candidate value into one of the numeric fields."""
        if field not in ASSIGNABLE_FIELDS:
            raise RecordValidationError(
                f'Cannot assign to {field}',
                [f'field must be one of {", ".join(ASSIGNABLE_FIELDS)}'],
            )
        setattr(self, field, str(value))

    def to_dict(self) -> dict:
        return {
            'date': self.date,
            'odometer': self.odometer,
            'fuel_amount': self.fuel_amount,
            'price': self.price,
            'station': self.station,
        }

    def to_record(self) -> dict:
        """Validate the draft and return a storable record dict."""
        return normalize_fuel_log_data(self.to_dict())
