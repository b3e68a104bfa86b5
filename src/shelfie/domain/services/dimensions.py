"""Parsing of free-text product dimensions into physical item sizes.

Product-data APIs report book sizes as strings such as
``"9.2 x 6.1 x 1.3 inches"`` or ``"23,4 x 15,5 x 3,3 cm"`` with the three
numbers in no reliable order. Books are portrait and thin, so the smallest
number is taken as the spine and the larger of the remaining two as the
height.
"""

from __future__ import annotations

import re

from ..value_objects import PhysicalDimensions

__all__ = [
    "DimensionParseError",
    "MM_PER_UNIT",
    "parse_dimensions",
    "detect_unit",
]

MM_PER_UNIT: dict[str, float] = {
    "mm": 1.0,
    "cm": 10.0,
    "in": 25.4,
}

# Unitless values above this are read as centimetres, otherwise inches.
UNITLESS_CM_THRESHOLD = 15.0

# A leading minus counts only at the start of a word, so "20-13-2" is three
# sizes. Commas before exactly three digits group thousands.
_NUMBER_RE = re.compile(
    r"(?:(?<![^\s(])-)?(?:\d{1,3}(?:,\d{3})+(?![\d.,])|\d+(?:[.,]\d+)?)"
)
_THOUSANDS_RE = re.compile(r"-?\d{1,3}(?:,\d{3})+")
_MM_RE = re.compile(r"\bmm\b|millimet", re.IGNORECASE)
_CM_RE = re.compile(r"\bcm\b|centimet", re.IGNORECASE)
_IN_RE = re.compile(r"\binch(es)?\b|\bin\b|\"|''", re.IGNORECASE)


def _to_number(token: str) -> float:
    if _THOUSANDS_RE.fullmatch(token):
        return float(token.replace(",", ""))
    return float(token.replace(",", "."))


class DimensionParseError(ValueError):
    """Raised when a dimension string cannot be turned into three sizes."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Cannot parse dimensions {text!r}: {reason}")


def detect_unit(text: str, values: list[float]) -> str:
    """Determine the unit of a dimension string.

    Explicit units win; otherwise any value over 15 implies centimetres.

    Args:
        text: The raw dimension string.
        values: Numbers already extracted from ``text``.

    Returns:
        One of ``"mm"``, ``"cm"`` or ``"in"``.
    """
    if _MM_RE.search(text):
        return "mm"
    if _CM_RE.search(text):
        return "cm"
    if _IN_RE.search(text):
        return "in"
    if any(v > UNITLESS_CM_THRESHOLD for v in values):
        return "cm"
    return "in"


def parse_dimensions(text: str) -> PhysicalDimensions:
    """Parse a dimension string into millimetre sizes.

    Args:
        text: Free-text dimensions with at least three numbers.

    Returns:
        PhysicalDimensions in millimetres.

    Raises:
        DimensionParseError: If fewer than three numbers are present or any
            of them is zero or negative.

    Example:
        >>> parse_dimensions("13 x 20 x 2 cm").height
        200.0
    """
    values = [_to_number(m) for m in _NUMBER_RE.findall(text)]
    if len(values) < 3:
        raise DimensionParseError(text, "expected three numbers")
    values = values[:3]
    if any(v <= 0 for v in values):
        raise DimensionParseError(text, "dimensions must be positive")

    factor = MM_PER_UNIT[detect_unit(text, values)]
    spine, width, height = sorted(v * factor for v in values)
    return PhysicalDimensions(width=width, height=height, spine=spine)
