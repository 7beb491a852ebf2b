from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Float, Integer, String, Text, create_engine
from sqlalchemy.orm import declarative_base

from fueltrack.utils.timezone import ensure_utc

Base = declarative_base()


def _utc_now():
    return datetime.now(timezone.utc)


class FuelLog(Base):
    """One refueling event as entered by the user. Never updated in place."""

    __tablename__ = 'fuel_logs'

    id = Column(Integer, primary_key=True)
    owner_id = Column(String(128), nullable=False, index=True)
    date = Column(DateTime(timezone=True), nullable=False)
    odometer = Column(Float, nullable=False)
    fuel_amount = Column(Float, nullable=False)
    price = Column(Float, nullable=False)
    station = Column(Text, default='')
    created_at = Column(DateTime(timezone=True), default=_utc_now)

    def to_dict(self):
        return {
            'id': self.id,
            'date': ensure_utc(self.date).isoformat() if self.date else None,
            'odometer': self.odometer,
            'fuel_amount': self.fuel_amount,
            'price': self.price,
            'station': self.station or '',
        }


def get_engine(database_url):
    """Create database engine."""
    return create_engine(database_url, pool_pre_ping=True)
