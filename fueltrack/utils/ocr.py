"""Image to text recognition. Implement TextRecognizer for other engines (cloud OCR, etc.)."""

import io
import logging
from typing import Optional, Protocol

import pytesseract
from PIL import Image, UnidentifiedImageError

from fueltrack.config import Config
from fueltrack.exceptions import ConfigurationError, TextRecognitionError

logger = logging.getLogger(__name__)

# pytesseract keeps the binary path in a module global, so set it once here
if Config.TESSERACT_CMD:
    pytesseract.pytesseract.tesseract_cmd = Config.TESSERACT_CMD


class TextRecognizer(Protocol):
    """Recognize the text in a photographed meter or receipt."""

    def recognize(self, image_bytes: bytes) -> str:
        """Return the raw recognized text. Raise TextRecognitionError on failure."""
        ...


class TesseractRecognizer:
    """Run Tesseract on the image as uploaded. Language defaults from Config."""

    engine_name = 'tesseract'

    def __init__(self, lang: Optional[str] = None):
        self.lang = lang or Config.OCR_LANG

    def recognize(self, image_bytes: bytes) -> str:
        if not image_bytes:
            raise TextRecognitionError('Empty image', engine=self.engine_name)

        try:
            with Image.open(io.BytesIO(image_bytes)) as image:
                image.load()
                return pytesseract.image_to_string(image, lang=self.lang)
        except UnidentifiedImageError as e:
            raise TextRecognitionError('Unsupported image format', engine=self.engine_name) from e
        except Image.DecompressionBombError as e:
            raise TextRecognitionError('Image has too many pixels', engine=self.engine_name) from e
        except pytesseract.TesseractNotFoundError as e:
            raise ConfigurationError('Tesseract executable not found', config_key='TESSERACT_CMD') from e
        except (pytesseract.TesseractError, OSError) as e:
            logger.error(f"Tesseract recognition failed: {e}")
            raise TextRecognitionError(f'Text recognition failed: {e}', engine=self.engine_name) from e
