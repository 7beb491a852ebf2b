"""FuelTrack - refueling log with mileage statistics and receipt number capture."""

__version__ = "1.0.0"
