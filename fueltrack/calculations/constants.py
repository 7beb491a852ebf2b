"""
Calculation Constants for FuelTrack

Centralized location for rounding precision and thresholds used by the
mileage calculations.
"""

# Rounding
MILEAGE_PRECISION = 2  # Decimal places for per-fill-up mileage
STATS_PRECISION = 1  # Decimal places for averaged / latest mileage in stats
TOTALS_PRECISION = 2  # Decimal places for summed fuel and cost

# Statistics
MIN_RECORDS_FOR_STATS = 2  # Fewer records than this yields no stats

# Sort key for records whose odometer is missing or unreadable
UNKNOWN_ODOMETER_SORT_KEY = float('-inf')
