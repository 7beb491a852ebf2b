"""
Tests for the Tesseract recognizer and the candidate service.

Tesseract itself is mocked; these tests cover how its output and failures
are passed on.
"""

import io
from unittest.mock import MagicMock, patch

import pytest
import pytesseract
from PIL import Image

from fueltrack.exceptions import ConfigurationError, TextRecognitionError
from fueltrack.services.candidate_service import extract_candidates_from_image
from fueltrack.utils.ocr import TesseractRecognizer


@pytest.fixture
def png_bytes():
    """A small valid PNG image."""
    buffer = io.BytesIO()
    Image.new('RGB', (40, 20), color='white').save(buffer, format='PNG')
    return buffer.getvalue()


class TestTesseractRecognizer:
    """Tests for TesseractRecognizer.recognize."""

    def test_returns_recognized_text(self, png_bytes):
        with patch('fueltrack.utils.ocr.pytesseract.image_to_string', return_value='Odo 12,500') as mock_ocr:
            text = TesseractRecognizer(lang='eng').recognize(png_bytes)

        assert text == 'Odo 12,500'
        assert mock_ocr.call_args.kwargs['lang'] == 'eng'

    def test_lang_defaults_from_config(self):
        with patch('fueltrack.utils.ocr.Config.OCR_LANG', 'hin'):
            assert TesseractRecognizer().lang == 'hin'

    def test_empty_image(self):
        with pytest.raises(TextRecognitionError) as exc_info:
            TesseractRecognizer().recognize(b'')
        assert exc_info.value.engine == 'tesseract'

    def test_not_an_image(self):
        with pytest.raises(TextRecognitionError) as exc_info:
            TesseractRecognizer().recognize(b'definitely not an image')
        assert exc_info.value.message == 'Unsupported image format'

    def test_decompression_bomb(self, png_bytes):
        with patch(
            'fueltrack.utils.ocr.Image.open',
            side_effect=Image.DecompressionBombError('too many pixels'),
        ):
            with pytest.raises(TextRecognitionError) as exc_info:
                TesseractRecognizer().recognize(png_bytes)

        assert exc_info.value.message == 'Image has too many pixels'
        assert exc_info.value.engine == 'tesseract'

    def test_construction_leaves_tesseract_cmd_alone(self):
        before = pytesseract.pytesseract.tesseract_cmd
        with patch('fueltrack.utils.ocr.Config.TESSERACT_CMD', '/opt/elsewhere/tesseract'):
            TesseractRecognizer(lang='eng')

        assert pytesseract.pytesseract.tesseract_cmd == before

    def test_tesseract_error(self, png_bytes):
        with patch(
            'fueltrack.utils.ocr.pytesseract.image_to_string',
            side_effect=pytesseract.TesseractError(1, 'bad things'),
        ):
            with pytest.raises(TextRecognitionError):
                TesseractRecognizer().recognize(png_bytes)

    def test_tesseract_missing(self, png_bytes):
        with patch(
            'fueltrack.utils.ocr.pytesseract.image_to_string',
            side_effect=pytesseract.TesseractNotFoundError(),
        ):
            with pytest.raises(ConfigurationError) as exc_info:
                TesseractRecognizer().recognize(png_bytes)

        assert exc_info.value.config_key == 'TESSERACT_CMD'


class TestCandidateService:
    """Tests for extract_candidates_from_image."""

    def test_ranks_recognized_numbers(self):
        recognizer = MagicMock()
        recognizer.recognize.return_value = 'Odo: 12,500 km  Price: Rs 250.50  Fuel: 2.5L'

        assert extract_candidates_from_image(b'img', recognizer) == ['12500', '250.50', '2.5']

    def test_no_numbers(self):
        recognizer = MagicMock()
        recognizer.recognize.return_value = 'SHELL\nTHANK YOU'

        assert extract_candidates_from_image(b'img', recognizer) == []

    def test_recognition_failure_propagates(self):
        recognizer = MagicMock()
        recognizer.recognize.side_effect = TextRecognitionError('Text recognition failed')

        with pytest.raises(TextRecognitionError):
            extract_candidates_from_image(b'img', recognizer)
