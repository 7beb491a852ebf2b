"""
Custom exceptions for FuelTrack.

This module provides a hierarchy of exceptions for collaborator failures
(storage, text recognition) and rejected user input. Data anomalies inside
the mileage calculations are never raised; they are clamped instead.
"""


class FuelTrackError(Exception):
    """Base exception for all FuelTrack errors."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self):
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class DatabaseError(FuelTrackError):
    """Database operation failed."""

    pass


class RecordValidationError(FuelTrackError):
    """Submitted fuel log data failed form-level validation."""

    def __init__(self, message: str, errors: list = None):
        details = {}
        if errors:
            details['errors'] = errors
        super().__init__(message, details)
        self.errors = errors or []


class RecordNotFoundError(FuelTrackError):
    """No fuel log with the given id exists for the owner."""

    def __init__(self, message: str, log_id: int = None):
        details = {}
        if log_id is not None:
            details['log_id'] = log_id
        super().__init__(message, details)
        self.log_id = log_id


class TextRecognitionError(FuelTrackError):
    """The text recognition engine could not read the image."""

    def __init__(self, message: str, engine: str = None):
        details = {}
        if engine:
            details['engine'] = engine
        super().__init__(message, details)
        self.engine = engine


class ConfigurationError(FuelTrackError):
    """Invalid or missing configuration."""

    def __init__(self, message: str, config_key: str = None):
        details = {}
        if config_key:
            details['config_key'] = config_key
        super().__init__(message, details)
        self.config_key = config_key
