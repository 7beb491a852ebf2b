"""
Pytest fixtures for FuelTrack tests.
"""

import os
from datetime import datetime, timedelta, timezone

import pytest

# Set DATABASE_URL BEFORE importing app to use SQLite for tests
os.environ['DATABASE_URL'] = 'sqlite:///:memory:'
os.environ['FLASK_TESTING'] = 'true'

from fueltrack.app import app as flask_app  # noqa: E402
from fueltrack.database import SessionLocal, engine  # noqa: E402
from fueltrack.models import Base  # noqa: E402


@pytest.fixture
def app():
    """Create application for testing."""
    Base.metadata.create_all(engine)

    yield flask_app

    SessionLocal.remove()
    Base.metadata.drop_all(engine)


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def db_session(app):
    """Provide a database session for tests."""
    session = SessionLocal()
    yield session
    session.rollback()
    SessionLocal.remove()


@pytest.fixture
def make_record():
    """Build a raw fuel log record dict."""
    counter = {'id': 0}
    base_date = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def _make(odometer, fuel_amount=5.0, price=500.0, **overrides):
        counter['id'] += 1
        record = {
            'id': counter['id'],
            'date': (base_date + timedelta(days=counter['id'])).isoformat(),
            'odometer': odometer,
            'fuel_amount': fuel_amount,
            'price': price,
            'station': '',
        }
        record.update(overrides)
        return record

    return _make


@pytest.fixture
def sample_fuel_log_data():
    """Valid POST body for a new fuel log."""
    return {
        'date': '2024-03-01T08:30:00+00:00',
        'odometer': 12500,
        'fuel_amount': 25.5,
        'price': 2550.75,
        'station': 'Shell MG Road',
    }
