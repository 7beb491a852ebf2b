"""
Fuel Log Service

Stores fuel logs per owner and hands each full snapshot to the history
calculations. Derived values are never stored; every read re-derives them
from the complete record set.
"""

import logging
from typing import Dict, List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fueltrack.calculations import derive_history
from fueltrack.exceptions import DatabaseError, RecordNotFoundError
from fueltrack.models import FuelLog
from fueltrack.utils.fuel_form import normalize_fuel_log_data
from fueltrack.utils.timezone import parse_iso_datetime

logger = logging.getLogger(__name__)


def list_fuel_logs(db: Session, owner_id: str) -> List[Dict]:
    """Return every fuel log of the owner as plain record dicts."""
    try:
        logs = db.query(FuelLog).filter(FuelLog.owner_id == owner_id).order_by(FuelLog.id).all()
    except SQLAlchemyError as e:
        logger.error(f"Failed to list fuel logs for {owner_id}: {e}")
        raise DatabaseError('Failed to load fuel logs', {'owner_id': owner_id}) from e

    return [log.to_dict() for log in logs]


def add_fuel_log(db: Session, owner_id: str, data: dict) -> Dict:
    """
    Validate and store one fuel log.

    Raises:
        RecordValidationError: If the submitted data is invalid
        DatabaseError: If the insert fails
    """
    record = normalize_fuel_log_data(data)

    fuel_log = FuelLog(
        owner_id=owner_id,
        date=parse_iso_datetime(record['date']),
        odometer=record['odometer'],
        fuel_amount=record['fuel_amount'],
        price=record['price'],
        station=record['station'],
    )

    try:
        db.add(fuel_log)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to save fuel log for {owner_id}: {e}")
        raise DatabaseError('Failed to save fuel log', {'owner_id': owner_id}) from e

    logger.info(f"Added fuel log {fuel_log.id} for {owner_id} at odometer {fuel_log.odometer}")
    return fuel_log.to_dict()


def delete_fuel_log(db: Session, owner_id: str, log_id: int) -> None:
    """
    Delete one fuel log by id.

    Raises:
        RecordNotFoundError: If the owner has no fuel log with that id
        DatabaseError: If the delete fails
    """
    try:
        fuel_log = db.query(FuelLog).filter(
            FuelLog.id == log_id,
            FuelLog.owner_id == owner_id
        ).first()
    except SQLAlchemyError as e:
        logger.error(f"Failed to look up fuel log {log_id}: {e}")
        raise DatabaseError('Failed to load fuel log', {'log_id': log_id}) from e

    if fuel_log is None:
        raise RecordNotFoundError('Fuel log not found', log_id=log_id)

    try:
        db.delete(fuel_log)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to delete fuel log {log_id}: {e}")
        raise DatabaseError('Failed to delete fuel log', {'log_id': log_id}) from e

    logger.info(f"Deleted fuel log {log_id} for {owner_id}")


def get_fuel_history(db: Session, owner_id: str) -> Dict:
    """Load the owner's current snapshot and derive history and stats from it."""
    return derive_history(list_fuel_logs(db, owner_id))
