"""
Value types for geographic, UTM and MGRS coordinates.

All types are immutable and validated on construction, so a value that
exists is always inside its documented domain.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import NewType, Union

from coordkit.core.errors import InvalidZoneFormatError, OutOfRangeError

# Latitude band letters from 80°S northwards, I and O omitted
UTM_BANDS = "CDEFGHJKLMNPQRSTUVWX"

MGRSString = NewType("MGRSString", str)


class Hemisphere(str, Enum):
    """Hemisphere selecting the false northing of a UTM zone."""

    NORTH = "N"
    SOUTH = "S"

    @classmethod
    def from_latitude(cls, latitude: float) -> "Hemisphere":
        """Northern iff latitude >= 0 (the equator belongs to the north)."""
        return cls.NORTH if latitude >= 0 else cls.SOUTH

    @classmethod
    def from_band(cls, band: str) -> "Hemisphere":
        """Northern iff the band letter sorts at or after 'N'."""
        return cls.NORTH if band.upper() >= "N" else cls.SOUTH


class DetectedFormat(str, Enum):
    """Notation recognized by the classifier."""

    GEOGRAPHIC = "geographic"
    UTM = "utm"
    MGRS = "mgrs"
    ADDRESS = "address"
    UNKNOWN = "unknown"


def is_valid_coordinates(latitude: float, longitude: float) -> bool:
    """
    Check that a latitude/longitude pair is finite and in range.

    Args:
        latitude: Latitude in decimal degrees
        longitude: Longitude in decimal degrees

    Returns:
        True if both values are usable as a geographic coordinate
    """
    try:
        lat = float(latitude)
        lng = float(longitude)
    except (TypeError, ValueError):
        return False
    return (
        math.isfinite(lat)
        and math.isfinite(lng)
        and -90 <= lat <= 90
        and -180 <= lng <= 180
    )


@dataclass(frozen=True)
class GeographicCoordinate:
    """
    WGS84 latitude/longitude in decimal degrees.

    Attributes:
        latitude: Latitude in [-90, 90]
        longitude: Longitude in [-180, 180]
    """

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        """Validate ranges."""
        if not (isinstance(self.latitude, (int, float)) and math.isfinite(self.latitude)):
            raise OutOfRangeError(
                f"Latitude must be a finite number, got {self.latitude!r}",
                field="latitude",
                value=self.latitude,
            )
        if not (isinstance(self.longitude, (int, float)) and math.isfinite(self.longitude)):
            raise OutOfRangeError(
                f"Longitude must be a finite number, got {self.longitude!r}",
                field="longitude",
                value=self.longitude,
            )
        if not -90 <= self.latitude <= 90:
            raise OutOfRangeError(
                f"Latitude must be between -90 and 90, got {self.latitude}",
                field="latitude",
                value=self.latitude,
            )
        if not -180 <= self.longitude <= 180:
            raise OutOfRangeError(
                f"Longitude must be between -180 and 180, got {self.longitude}",
                field="longitude",
                value=self.longitude,
            )

    def to_tuple(self) -> tuple:
        """Convert to tuple (latitude, longitude)."""
        return (self.latitude, self.longitude)

    def format_decimal(self, places: int = 6) -> str:
        """Format as ``"lat, lng"`` with a fixed number of decimal places."""
        return f"{self.latitude:.{places}f}, {self.longitude:.{places}f}"

    def __str__(self) -> str:
        return self.format_decimal()


@dataclass(frozen=True)
class UTMCoordinate:
    """
    A position in one of the 60 UTM zones.

    Attributes:
        zone_number: UTM zone (1-60)
        latitude_band: Band letter C-X, without I and O
        easting: Easting in whole metres
        northing: Northing in whole metres
    """

    zone_number: int
    latitude_band: str
    easting: int
    northing: int

    def __post_init__(self) -> None:
        """Validate zone, band and offsets."""
        if not 1 <= self.zone_number <= 60:
            raise OutOfRangeError(
                f"UTM zone must be between 1 and 60, got {self.zone_number}",
                field="zone_number",
                value=self.zone_number,
            )
        if (
            not isinstance(self.latitude_band, str)
            or len(self.latitude_band) != 1
            or self.latitude_band not in UTM_BANDS
        ):
            raise InvalidZoneFormatError(
                f"Invalid latitude band {self.latitude_band!r}",
                zone=f"{self.zone_number}{self.latitude_band}",
            )
        if self.easting < 0:
            raise OutOfRangeError(
                f"Easting must be non-negative, got {self.easting}",
                field="easting",
                value=self.easting,
            )
        if self.northing < 0:
            raise OutOfRangeError(
                f"Northing must be non-negative, got {self.northing}",
                field="northing",
                value=self.northing,
            )

    @classmethod
    def from_designator(cls, zone: str, easting: int, northing: int) -> "UTMCoordinate":
        """
        Build a coordinate from a zone designator such as ``"33T"``.

        Raises:
            InvalidZoneFormatError: If the designator cannot be decomposed
            OutOfRangeError: If the zone number is outside 1-60
        """
        from coordkit.core.notation.parsers import parse_zone_designator

        zone_number, band = parse_zone_designator(zone)
        return cls(zone_number, band, int(easting), int(northing))

    @property
    def hemisphere(self) -> Hemisphere:
        """Hemisphere implied by the band letter."""
        return Hemisphere.from_band(self.latitude_band)

    @property
    def zone(self) -> str:
        """Zone designator, e.g. ``"33T"``."""
        return f"{self.zone_number}{self.latitude_band}"

    def to_dict(self) -> dict:
        """Convert to dictionary representation."""
        return {
            "zone_number": self.zone_number,
            "latitude_band": self.latitude_band,
            "easting": self.easting,
            "northing": self.northing,
        }

    def __str__(self) -> str:
        return f"{self.zone} {self.easting} {self.northing}"


ParsedInput = Union[GeographicCoordinate, UTMCoordinate, MGRSString]
