"""
FuelTrack - Flask Application

Stores refueling logs, serves the derived mileage history, and extracts
assignable numbers from receipt / meter photos.
"""

import logging
import os

from flask import Flask, jsonify

from fueltrack import database
from fueltrack.config import Config
from fueltrack.extensions import limiter
from fueltrack.routes import register_blueprints

# Configure logging
logging.basicConfig(
    level=getattr(logging, Config.LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Initialize Flask app
app = Flask(__name__)
app.config.from_object(Config)
# Allow multipart overhead on top of the image itself
app.config['MAX_CONTENT_LENGTH'] = Config.MAX_IMAGE_BYTES + 64 * 1024

if os.environ.get('FLASK_TESTING'):
    app.config['TESTING'] = True
    app.config['RATELIMIT_ENABLED'] = False

limiter.init_app(app)
database.init_app(app)
register_blueprints(app)


@app.route('/health', methods=['GET'])
def health():
    """Liveness check."""
    return jsonify({'status': 'ok'})


if __name__ == '__main__':
    logger.info(f"Starting FuelTrack on {Config.FLASK_HOST}:{Config.FLASK_PORT}")
    app.run(host=Config.FLASK_HOST, port=Config.FLASK_PORT, debug=Config.DEBUG)
