"""Pull candidate numbers out of recognized meter / receipt text."""

import logging
import math
import re
from typing import List, Optional

logger = logging.getLogger(__name__)


class NumberExtractor:
    """
    Extracts assignable numbers from raw recognized text.

    Receipts and pump displays mix labels, units and currency with the
    numbers we care about, e.g.:

        Odo: 12,500 km  Price: Rs 250.50  Fuel: 2.5L

    Every run of digits (with optional thousands commas and an optional
    decimal part) becomes a candidate. Commas are stripped, zero and
    unparseable values dropped, duplicates removed, and the rest ranked
    largest first: odometer readings and totals are usually the biggest
    numbers on the photo, fuel volume usually the smallest.
    """

    NUMBER_PATTERN = re.compile(r'[\d,]+(?:\.\d+)?', re.ASCII)

    @staticmethod
    def _normalize(match: str) -> str:
        return match.replace(',', '')

    @staticmethod
    def _parse(value: str) -> Optional[float]:
        try:
            number = float(value)
        except ValueError:
            return None
        if not math.isfinite(number) or number <= 0:
            return None
        return number

    @classmethod
    def extract(cls, raw_text: Optional[str]) -> List[str]:
        """
        Extract ranked, deduplicated numeric candidates.

        Args:
            raw_text: Text returned by the recognition engine

        Returns:
            Normalized numeric strings, largest value first. Empty list when
            the text has no usable numbers.

        Examples:
            >>> NumberExtractor.extract("Odo: 12,500 km  Price: Rs 250.50  Fuel: 2.5L")
            ['12500', '250.50', '2.5']
            >>> NumberExtractor.extract("no digits here")
            []
        """
        if not raw_text:
            return []

        # dict keeps first occurrence order for the stable sort below
        candidates = {}
        for match in cls.NUMBER_PATTERN.findall(raw_text):
            normalized = cls._normalize(match)
            if normalized in candidates:
                continue
            number = cls._parse(normalized)
            if number is None:
                continue
            candidates[normalized] = number

        ranked = sorted(candidates, key=candidates.get, reverse=True)
        logger.debug(f"Extracted {len(ranked)} numeric candidates from {len(raw_text)} chars")
        return ranked
