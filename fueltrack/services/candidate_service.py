"""
Candidate Service

Reads a meter or receipt photo and returns the numbers on it, ranked for
assignment to the fuel log form.
"""

import logging
from typing import List

from fueltrack.utils.number_extractor import NumberExtractor
from fueltrack.utils.ocr import TextRecognizer

logger = logging.getLogger(__name__)


def extract_candidates_from_text(raw_text: str) -> List[str]:
    """Rank the numbers found in already-recognized text."""
    return NumberExtractor.extract(raw_text)


def extract_candidates_from_image(image_bytes: bytes, recognizer: TextRecognizer) -> List[str]:
    """
    Recognize text in an image and rank the numbers found in it.

    Recognition failures propagate unchanged (TextRecognitionError); an image
    with no usable numbers returns an empty list.
    """
    raw_text = recognizer.recognize(image_bytes)
    candidates = extract_candidates_from_text(raw_text)

    if candidates:
        logger.info(f"Found {len(candidates)} numeric candidates in image ({len(image_bytes)} bytes)")
    else:
        logger.info("No numeric candidates found in image")
    return candidates
