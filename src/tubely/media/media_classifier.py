"""Aspect ratio classification."""

from __future__ import annotations

from enum import StrEnum

from .media_errors import InvalidDimensionsError

RATIO_TOLERANCE = 0.1
LANDSCAPE_RATIO = 16 / 9
PORTRAIT_RATIO = 9 / 16


class Orientation(StrEnum):
    """Frame orientation; the value doubles as the storage key prefix."""

    LANDSCAPE = "landscape"
    PORTRAIT = "portrait"
    OTHER = "other"


def classify_aspect_ratio(width: float, height: float) -> Orientation:
    """Map ``width / height`` onto 16:9, 9:16 or other.

    The 16:9 comparison runs first, so it wins whenever both are in range.
    """
    if height <= 0 or width <= 0:
        raise InvalidDimensionsError(f"dimensions must be positive, got {width}x{height}")

    ratio = width / height
    if abs(ratio - LANDSCAPE_RATIO) < RATIO_TOLERANCE:
        return Orientation.LANDSCAPE
    if abs(ratio - PORTRAIT_RATIO) < RATIO_TOLERANCE:
        return Orientation.PORTRAIT
    return Orientation.OTHER
