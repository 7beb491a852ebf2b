"""
Fuel routes for FuelTrack.

Handles fuel log create/delete, the derived fuel history, and numeric
candidate extraction from receipt or meter photos.
"""

import logging

from flask import Blueprint, jsonify, request

from fueltrack.config import Config
from fueltrack.database import get_db
from fueltrack.exceptions import (
    ConfigurationError,
    DatabaseError,
    RecordNotFoundError,
    RecordValidationError,
    TextRecognitionError,
)
from fueltrack.extensions import RateLimits, limiter
from fueltrack.services import candidate_service, fuel_log_service
from fueltrack.utils.ocr import TesseractRecognizer

logger = logging.getLogger(__name__)

fuel_bp = Blueprint('fuel', __name__)


def get_owner_id():
    """Owner of the request's records; identity is established upstream."""
    return request.headers.get('X-Owner-Id') or Config.DEFAULT_OWNER_ID


def get_recognizer():
    return TesseractRecognizer()


@fuel_bp.route('/fuel/logs', methods=['GET'])
def get_fuel_logs():
    """
    Get the fuel history with derived distance, mileage and stats.

    Response:
        history: Fuel logs, highest odometer first, each with distance and mileage
        stats: total_distance, avg_mileage, last_mileage, ... or null if < 2 logs
    """
    try:
        result = fuel_log_service.get_fuel_history(get_db(), get_owner_id())
    except DatabaseError as e:
        return jsonify({'error': e.message}), 500

    return jsonify(result)


@fuel_bp.route('/fuel/logs', methods=['POST'])
@limiter.limit(RateLimits.WRITE_MODERATE)
def add_fuel_log():
    """
    Add a fuel log.

    Request body:
        odometer: Odometer reading
        fuel_amount: Fuel added
        price: Total cost
        date: Optional ISO datetime (defaults to now)
        station: Optional station name
    """
    data = request.get_json(silent=True)
    if not data or not isinstance(data, dict):
        return jsonify({'error': 'No data provided'}), 400

    owner_id = get_owner_id()
    try:
        record = fuel_log_service.add_fuel_log(get_db(), owner_id, data)
    except RecordValidationError as e:
        logger.warning(f"Rejected fuel log for {owner_id}: {e.errors}")
        return jsonify({'error': e.message, 'details': e.errors}), 400
    except DatabaseError as e:
        return jsonify({'error': e.message}), 500

    return jsonify(record), 201


@fuel_bp.route('/fuel/logs/<int:log_id>', methods=['DELETE'])
@limiter.limit(RateLimits.WRITE_MODERATE)
def delete_fuel_log(log_id):
    """Delete a fuel log."""
    try:
        fuel_log_service.delete_fuel_log(get_db(), get_owner_id(), log_id)
    except RecordNotFoundError:
        return jsonify({'error': 'Fuel log not found'}), 404
    except DatabaseError as e:
        return jsonify({'error': e.message}), 500

    return jsonify({'message': f'Fuel log {log_id} deleted successfully'})


@fuel_bp.route('/fuel/candidates', methods=['POST'])
@limiter.limit(RateLimits.EXPENSIVE)
def extract_candidates():
    """
    Extract numbers that can be assigned to the odometer, fuel_amount or price fields.

    Accepts either a multipart upload with an 'image' file, or a JSON body
    with already-recognized 'text'.

    Response:
        candidates: Numeric strings, largest value first (may be empty)
    """
    image = request.files.get('image')
    if image is not None:
        image_bytes = image.read()
        if len(image_bytes) > Config.MAX_IMAGE_BYTES:
            return jsonify({'error': 'Image too large'}), 413
        try:
            candidates = candidate_service.extract_candidates_from_image(image_bytes, get_recognizer())
        except TextRecognitionError as e:
            return jsonify({'error': e.message}), 502
        except ConfigurationError as e:
            logger.error(f"Text recognition unavailable: {e}")
            return jsonify({'error': 'Text recognition is not available'}), 503
        return jsonify({'candidates': candidates})

    data = request.get_json(silent=True)
    text = data.get('text') if isinstance(data, dict) else None
    if not isinstance(text, str):
        return jsonify({'error': 'Provide an image file or a text field'}), 400

    return jsonify({'candidates': candidate_service.extract_candidates_from_text(text)})
