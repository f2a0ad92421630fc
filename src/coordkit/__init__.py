"""
coordkit - recognize, parse and convert geographic, UTM and MGRS coordinates.

This package classifies free-form location input, parses it into
canonical values and converts between decimal/DMS degrees, UTM and MGRS.
"""

__version__ = "0.1.0"

from coordkit.core.crs import (
    decimal_to_dms,
    format_dms,
    format_mgrs,
    geographic_to_mgrs,
    geographic_to_utm,
    latitude_band,
    mgrs_to_geographic,
    utm_to_geographic,
)
from coordkit.core.errors import (
    CoordkitException,
    InvalidZoneFormatError,
    MalformedInputError,
    OutOfRangeError,
    ProjectionError,
)
from coordkit.core.notation import (
    classify,
    parse_geographic,
    parse_input,
    parse_mgrs,
    parse_utm,
)
from coordkit.core.resolver import describe, resolve
from coordkit.models import (
    DetectedFormat,
    GeographicCoordinate,
    Hemisphere,
    MGRSString,
    Resolution,
    UTMCoordinate,
)

__all__ = [
    "__version__",
    # Conversion
    "decimal_to_dms",
    "format_dms",
    "format_mgrs",
    "geographic_to_mgrs",
    "geographic_to_utm",
    "latitude_band",
    "mgrs_to_geographic",
    "utm_to_geographic",
    # Errors
    "CoordkitException",
    "InvalidZoneFormatError",
    "MalformedInputError",
    "OutOfRangeError",
    "ProjectionError",
    # Notation
    "classify",
    "parse_geographic",
    "parse_input",
    "parse_mgrs",
    "parse_utm",
    # Pipeline
    "describe",
    "resolve",
    # Models
    "DetectedFormat",
    "GeographicCoordinate",
    "Hemisphere",
    "MGRSString",
    "Resolution",
    "UTMCoordinate",
]
