"""
Routes module for FuelTrack Flask blueprints.
"""

from fueltrack.routes.fuel import fuel_bp

__all__ = [
    "fuel_bp",
]


def register_blueprints(app):
    """Register all blueprints with the Flask app."""
    app.register_blueprint(fuel_bp, url_prefix="/api")
