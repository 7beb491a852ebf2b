"""
Database session management for FuelTrack.

The engine and scoped session factory live here so routes and services can
import them without circular dependencies. Queries slower than
Config.SLOW_QUERY_THRESHOLD_MS are logged with the request that ran them.
"""

import logging
import time

from flask import g, has_request_context, request
from sqlalchemy import event
from sqlalchemy.orm import scoped_session, sessionmaker

from fueltrack.config import Config
from fueltrack.models import Base, get_engine

logger = logging.getLogger(__name__)

engine = get_engine(Config.DATABASE_URL)
SessionLocal = scoped_session(sessionmaker(bind=engine))

QUERY_LOG_LENGTH = 200


def _query_origin():
    if has_request_context():
        return f"{request.method} {request.path}"
    return "outside request"


@event.listens_for(engine, "before_cursor_execute")
def _start_query_timer(conn, cursor, statement, parameters, context, executemany):
    conn.info.setdefault("query_start_time", []).append(time.perf_counter())


@event.listens_for(engine, "after_cursor_execute")
def _log_slow_query(conn, cursor, statement, parameters, context, executemany):
    duration_ms = (time.perf_counter() - conn.info["query_start_time"].pop()) * 1000
    if duration_ms <= Config.SLOW_QUERY_THRESHOLD_MS:
        return

    if len(statement) > QUERY_LOG_LENGTH:
        statement = statement[:QUERY_LOG_LENGTH] + "..."
    logger.warning(
        f"Slow query ({_query_origin()}): {duration_ms:.2f}ms - {statement}",
        extra={"duration_ms": duration_ms},
    )


def get_db():
    """Return the session bound to the current app context, creating it on first use."""
    if "db" not in g:
        g.db = SessionLocal()
    return g.db


def close_db(exception=None):
    """Release the request's session at app context teardown."""
    if g.pop("db", None) is not None:
        SessionLocal.remove()


def init_app(app):
    """Create missing tables and register session teardown on the app."""
    Base.metadata.create_all(engine)
    app.teardown_appcontext(close_db)
