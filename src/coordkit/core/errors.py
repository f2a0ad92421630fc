"""
Custom exception hierarchy for coordkit.

This module defines the failure taxonomy shared by the classifier,
parsers and converters so callers can map every failure to a
localized, user-facing message.
"""

from typing import Any, Dict, List, Optional


class CoordkitException(Exception):
    """
    Base exception for all coordkit-specific errors.

    Attributes:
        error_code: String identifier for the error type
        message: User-friendly error message
        details: Technical details for logging/debugging
        suggestions: Optional list of resolution suggestions
    """

    def __init__(
        self,
        message: str,
        error_code: str,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize CoordkitException.

        Args:
            message: User-friendly error message
            error_code: String identifier for the error type
            details: Technical details for logging
            suggestions: List of suggestions for resolution
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.suggestions = suggestions or []

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to dictionary.

        Returns:
            Dictionary representation of the error
        """
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "suggestions": self.suggestions,
        }

    def __str__(self) -> str:
        """String representation of the exception."""
        return f"{self.error_code}: {self.message}"

    def __repr__(self) -> str:
        """Detailed string representation for debugging."""
        return (
            f"{self.__class__.__name__}("
            f"error_code='{self.error_code}', "
            f"message='{self.message}')"
        )


class MalformedInputError(CoordkitException):
    """
    Raised when a string does not match the grammar it was parsed under.

    Should not occur when classify and parse are called in sequence,
    but parsers raise it when called directly on the wrong notation.
    """

    def __init__(
        self,
        message: str,
        text: Optional[str] = None,
        expected_format: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize MalformedInputError.

        Args:
            message: User-friendly error message
            text: The input that failed to parse
            expected_format: Notation the input was parsed as
            details: Technical details about the failure
            suggestions: List of suggestions for fixing the input
        """
        error_details = details or {}
        if text is not None:
            error_details["text"] = text
        if expected_format:
            error_details["expected_format"] = expected_format

        super().__init__(
            message=message,
            error_code="MALFORMED_INPUT",
            details=error_details,
            suggestions=suggestions or ["Check the input format and try again"],
        )


class OutOfRangeError(CoordkitException):
    """
    Raised when a numeric value lies outside its geographic or UTM domain.

    Covers latitude outside ±90, longitude outside ±180, UTM zones
    outside 1-60, negative easting/northing and invalid precisions.
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Any = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize OutOfRangeError.

        Args:
            message: User-friendly error message
            field: Name of the out-of-range field
            value: The offending value
            details: Technical details about the failure
            suggestions: List of suggestions for resolution
        """
        error_details = details or {}
        if field:
            error_details["field"] = field
        if value is not None:
            error_details["value"] = value

        default_suggestions = [
            "Latitude must be between -90 and 90",
            "Longitude must be between -180 and 180",
            "UTM zone must be between 1 and 60",
        ]

        super().__init__(
            message=message,
            error_code="OUT_OF_RANGE",
            details=error_details,
            suggestions=suggestions or default_suggestions,
        )


class InvalidZoneFormatError(CoordkitException):
    """Raised when a UTM zone/band token cannot be decomposed."""

    def __init__(
        self,
        message: str,
        zone: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize InvalidZoneFormatError.

        Args:
            message: User-friendly error message
            zone: The zone token that could not be parsed
            details: Technical details about the failure
            suggestions: List of suggestions for resolution
        """
        error_details = details or {}
        if zone is not None:
            error_details["zone"] = zone

        default_suggestions = [
            "Write the zone as a number followed by a band letter, e.g. 33T",
            "Band letters run from C to X, without I and O",
        ]

        super().__init__(
            message=message,
            error_code="INVALID_ZONE_FORMAT",
            details=error_details,
            suggestions=suggestions or default_suggestions,
        )


class ProjectionError(CoordkitException):
    """
    Raised when the projection library fails to build or run a transform.
    """

    def __init__(
        self,
        message: str,
        zone_number: Optional[int] = None,
        hemisphere: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize ProjectionError.

        Args:
            message: User-friendly error message
            zone_number: UTM zone involved in the failure
            hemisphere: Hemisphere involved in the failure
            details: Technical details about the failure
            suggestions: List of suggestions for resolution
        """
        error_details = details or {}
        if zone_number is not None:
            error_details["zone_number"] = zone_number
        if hemisphere:
            error_details["hemisphere"] = hemisphere

        super().__init__(
            message=message,
            error_code="PROJECTION_ERROR",
            details=error_details,
            suggestions=suggestions or ["Ensure coordinates are in the expected format"],
        )
