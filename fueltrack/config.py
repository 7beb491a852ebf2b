import os


class Config:
    """Application configuration from environment variables."""

    # Database
    DATABASE_URL = os.environ.get('DATABASE_URL', 'sqlite:///fueltrack.db')
    # Queries slower than this are logged as warnings
    SLOW_QUERY_THRESHOLD_MS = float(os.environ.get('SLOW_QUERY_THRESHOLD_MS', 500))

    # Flask
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-secret-key-change-in-production')
    FLASK_ENV = os.environ.get('FLASK_ENV', 'production')
    DEBUG = FLASK_ENV == 'development'

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # API Configuration
    FLASK_HOST = os.environ.get('FLASK_HOST', '0.0.0.0')
    FLASK_PORT = int(os.environ.get('FLASK_PORT', 8080))

    # Records are stored per owner; identity itself is handled upstream
    DEFAULT_OWNER_ID = os.environ.get('DEFAULT_OWNER_ID', 'default-owner')

    # Text recognition
    OCR_LANG = os.environ.get('OCR_LANG', 'eng')
    TESSERACT_CMD = os.environ.get('TESSERACT_CMD')
    MAX_IMAGE_BYTES = int(os.environ.get('MAX_IMAGE_BYTES', 10 * 1024 * 1024))

    # Validation Thresholds
    MAX_ODOMETER = float(os.environ.get('MAX_ODOMETER', 10_000_000))
    MAX_FUEL_AMOUNT = float(os.environ.get('MAX_FUEL_AMOUNT', 1000))
    MAX_PRICE = float(os.environ.get('MAX_PRICE', 1_000_000))
