"""
Data models and schemas.
"""

from .coordinates import (
    UTM_BANDS,
    DetectedFormat,
    GeographicCoordinate,
    Hemisphere,
    MGRSString,
    ParsedInput,
    UTMCoordinate,
    is_valid_coordinates,
)
from .results import ErrorInfo, Resolution

__all__ = [
    # Coordinates
    "UTM_BANDS",
    "DetectedFormat",
    "GeographicCoordinate",
    "Hemisphere",
    "MGRSString",
    "ParsedInput",
    "UTMCoordinate",
    "is_valid_coordinates",
    # Results
    "ErrorInfo",
    "Resolution",
]
