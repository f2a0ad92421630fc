"""
Pydantic models for resolve-pipeline results.

A :class:`Resolution` carries either every notation of a resolved
coordinate or an :class:`ErrorInfo` describing why resolution failed.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from coordkit.core.errors import CoordkitException
from coordkit.models.coordinates import DetectedFormat, GeographicCoordinate


class ErrorInfo(BaseModel):
    """
    Machine-readable description of a failed resolution.

    Attributes:
        error_code: Error identifier (e.g. 'OUT_OF_RANGE')
        message: Error message
        details: Technical details about the failure
        suggestions: Actionable suggestions for fixing the input
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Error message")
    details: Dict[str, Any] = Field(default_factory=dict, description="Technical details")
    suggestions: List[str] = Field(default_factory=list, description="Resolution hints")

    @classmethod
    def from_exception(cls, exc: Exception) -> "ErrorInfo":
        """Build from a coordkit exception or a foreign (codec) exception."""
        if isinstance(exc, CoordkitException):
            return cls(**exc.to_dict())
        return cls(
            error_code="CODEC_ERROR",
            message=str(exc) or exc.__class__.__name__,
            details={"exception_type": exc.__class__.__name__},
        )


class Resolution(BaseModel):
    """
    A text input resolved into every supported notation.

    Attributes:
        input: The trimmed input text
        detected_format: Notation recognized by the classifier
        latitude: Latitude in decimal degrees
        longitude: Longitude in decimal degrees
        decimal: Decimal-degree string, e.g. "52.520000, 13.405000"
        dms: Degrees/minutes/seconds string
        utm: UTM string, e.g. "33T 500000 4649776"
        mgrs: Spaced MGRS string, e.g. "33T WG 00000 49776"
        error: Failure description, None on success
    """

    model_config = ConfigDict(frozen=True)

    input: str = Field(..., description="Trimmed input text")
    detected_format: DetectedFormat = Field(..., description="Recognized notation")
    latitude: Optional[float] = Field(None, ge=-90, le=90, description="Latitude (WGS84)")
    longitude: Optional[float] = Field(None, ge=-180, le=180, description="Longitude (WGS84)")
    decimal: Optional[str] = Field(None, description="Decimal degrees")
    dms: Optional[str] = Field(None, description="Degrees, minutes, seconds")
    utm: Optional[str] = Field(None, description="UTM coordinate")
    mgrs: Optional[str] = Field(None, description="MGRS grid reference")
    error: Optional[ErrorInfo] = Field(None, description="Failure description")

    @property
    def ok(self) -> bool:
        """True when a coordinate was resolved."""
        return self.error is None and self.latitude is not None

    @property
    def needs_geocoding(self) -> bool:
        """True for free-text input that only a geocoder can resolve."""
        return self.detected_format == DetectedFormat.ADDRESS

    @property
    def coordinate(self) -> Optional[GeographicCoordinate]:
        """The resolved coordinate, if any."""
        if self.latitude is None or self.longitude is None:
            return None
        return GeographicCoordinate(self.latitude, self.longitude)
