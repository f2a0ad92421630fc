"""
Coordinate conversion between geographic, UTM and MGRS notations.

Geographic <-> UTM goes through the projection registry; geographic <->
MGRS is delegated to the ``mgrs`` grid-reference codec. Errors raised by
the codec are not wrapped.
"""

import logging
import re
from re import Pattern
from typing import Optional, Tuple, Union

import mgrs

from coordkit.core.crs.projection import project_to_geographic, project_to_utm
from coordkit.core.crs.utm import detect_utm_zone, latitude_band
from coordkit.core.errors import MalformedInputError, OutOfRangeError
from coordkit.models.coordinates import (
    GeographicCoordinate,
    MGRSString,
    ParsedInput,
    UTMCoordinate,
)

logger = logging.getLogger(__name__)

DEFAULT_MGRS_PRECISION = 5

# Codec output: 32UMV1234567890, or UPS references without a zone number
COMPACT_MGRS_PATTERN: Pattern[str] = re.compile(
    r"^(\d{0,2})([A-Z])([A-Z]{2})(\d*)$", re.IGNORECASE
)


def geographic_to_utm(
    coord: GeographicCoordinate,
    zone_number: Optional[int] = None,
) -> UTMCoordinate:
    """
    Convert a geographic coordinate to UTM.

    The zone is derived from the longitude unless ``zone_number`` forces
    a neighbouring zone. Easting and northing are rounded to whole metres.

    Args:
        coord: WGS84 coordinate
        zone_number: Optional zone to project into instead of the natural one

    Returns:
        UTM coordinate

    Raises:
        OutOfRangeError: If the zone is invalid or the result has negative offsets
        ProjectionError: If the projection fails
    """
    zone, hemisphere = detect_utm_zone(coord.longitude, coord.latitude)
    if zone_number is not None and zone_number != zone:
        logger.debug("Projecting into zone %s instead of natural zone %s", zone_number, zone)
        zone = zone_number

    easting, northing = project_to_utm(coord.latitude, coord.longitude, zone, hemisphere)

    return UTMCoordinate(
        zone_number=zone,
        latitude_band=latitude_band(coord.latitude),
        easting=int(round(easting)),
        northing=int(round(northing)),
    )


def utm_to_geographic(
    utm: Union[UTMCoordinate, str],
    easting: Optional[int] = None,
    northing: Optional[int] = None,
) -> GeographicCoordinate:
    """
    Convert a UTM coordinate to geographic.

    The hemisphere comes from the band letter: bands N and above are
    northern. Accepts either a :class:`UTMCoordinate` or a zone designator
    such as ``"33T"`` together with easting and northing.

    Raises:
        InvalidZoneFormatError: If the zone designator cannot be decomposed
        MalformedInputError: If a designator is given without easting/northing
        OutOfRangeError: If the zone or the resulting position is out of range
        ProjectionError: If the projection fails
    """
    if isinstance(utm, str):
        if easting is None or northing is None:
            raise MalformedInputError(
                "Easting and northing are required with a zone designator",
                text=utm,
                expected_format="utm",
            )
        utm = UTMCoordinate.from_designator(utm, easting, northing)

    latitude, longitude = project_to_geographic(
        utm.zone_number, utm.hemisphere, utm.easting, utm.northing
    )
    return GeographicCoordinate(latitude, longitude)


def _check_precision(precision: int) -> None:
    if not 0 <= precision <= 5:
        raise OutOfRangeError(
            f"MGRS precision must be between 0 and 5, got {precision}",
            field="precision",
            value=precision,
            suggestions=["Use 5 for 1 m, 4 for 10 m, 3 for 100 m precision"],
        )


def geographic_to_mgrs(
    coord: GeographicCoordinate,
    precision: int = DEFAULT_MGRS_PRECISION,
) -> MGRSString:
    """
    Encode a geographic coordinate as a compact MGRS reference.

    Args:
        coord: WGS84 coordinate
        precision: Digits per easting/northing; 5 is 1 m, 1 is 10 km

    Returns:
        MGRS reference without spaces, e.g. ``"33TWG0000049776"``

    Raises:
        OutOfRangeError: If precision is outside 0-5
    """
    _check_precision(precision)
    reference = mgrs.MGRS().toMGRS(
        coord.latitude, coord.longitude, MGRSPrecision=precision
    )
    if isinstance(reference, bytes):
        reference = reference.decode("ascii")
    return MGRSString(reference)


def mgrs_to_geographic(reference: str) -> GeographicCoordinate:
    """
    Decode an MGRS reference to a geographic coordinate.

    Whitespace is removed and letters uppercased before decoding; the
    reference is otherwise handed to the codec as is. The position is the
    south-west corner of the referenced grid square.
    """
    compact = "".join(reference.split()).upper()
    latitude, longitude = mgrs.MGRS().toLatLon(compact)
    return GeographicCoordinate(float(latitude), float(longitude))


def format_mgrs(reference: str) -> str:
    """
    Split a compact MGRS reference into its space-separated fields.

    ``"32UMV1234567890"`` becomes ``"32U MV 12345 67890"``.

    Raises:
        MalformedInputError: If the reference is not a compact MGRS string
    """
    compact = "".join(reference.split())
    match = COMPACT_MGRS_PATTERN.match(compact)
    if not match or len(match.group(4)) % 2:
        raise MalformedInputError(
            f"Not a compact MGRS reference: {reference!r}",
            text=reference,
            expected_format="mgrs",
        )

    zone, band, square, digits = match.groups()
    parts = [f"{zone}{band}", square]
    if digits:
        half = len(digits) // 2
        parts.extend([digits[:half], digits[half:]])
    return " ".join(parts).upper()


def to_geographic(parsed: ParsedInput) -> GeographicCoordinate:
    """Convert any parsed input to a geographic coordinate."""
    if isinstance(parsed, GeographicCoordinate):
        return parsed
    if isinstance(parsed, UTMCoordinate):
        return utm_to_geographic(parsed)
    if isinstance(parsed, str):
        return mgrs_to_geographic(parsed)
    raise TypeError(f"Cannot convert {type(parsed).__name__} to a geographic coordinate")


def dms_to_decimal(
    degrees: float,
    minutes: float = 0,
    seconds: float = 0.0,
    hemisphere: str = "N",
) -> float:
    """
    Convert degrees, minutes and seconds to signed decimal degrees.

    The value is negated for the S and W hemispheres.

    Raises:
        OutOfRangeError: If minutes or seconds are not below 60
        MalformedInputError: If the hemisphere letter is not one of NSEW
    """
    if not 0 <= minutes < 60:
        raise OutOfRangeError(
            f"Minutes must be between 0 and 60, got {minutes}",
            field="minutes",
            value=minutes,
        )
    if not 0 <= seconds < 60:
        raise OutOfRangeError(
            f"Seconds must be between 0 and 60, got {seconds}",
            field="seconds",
            value=seconds,
        )

    hemisphere = hemisphere.upper()
    if hemisphere not in ("N", "S", "E", "W"):
        raise MalformedInputError(f"Unknown hemisphere letter {hemisphere!r}")

    value = degrees + minutes / 60 + seconds / 3600
    return -value if hemisphere in ("S", "W") else value


def _to_dms(value: float, positive: str, negative: str) -> str:
    absolute = abs(value)
    degrees = int(absolute)
    minutes_float = (absolute - degrees) * 60
    minutes = int(minutes_float)
    seconds = round((minutes_float - minutes) * 60, 1)

    # 59.96" rounds to 60.0"
    if seconds >= 60:
        seconds = 0.0
        minutes += 1
    if minutes >= 60:
        minutes = 0
        degrees += 1

    direction = positive if value >= 0 else negative
    return f"{degrees}°{minutes}'{seconds:.1f}\"{direction}"


def decimal_to_dms(latitude: float, longitude: float) -> Tuple[str, str]:
    """
    Format a latitude/longitude pair as degrees, minutes and seconds.

    Args:
        latitude: Latitude in decimal degrees
        longitude: Longitude in decimal degrees

    Returns:
        Tuple of (latitude, longitude) strings, e.g.
        ``('52°31\\'12.0"N', '13°24\\'18.0"E')``

    Raises:
        OutOfRangeError: If the coordinates are out of range
    """
    coord = GeographicCoordinate(latitude, longitude)
    return (
        _to_dms(coord.latitude, "N", "S"),
        _to_dms(coord.longitude, "E", "W"),
    )


def format_dms(latitude: float, longitude: float) -> str:
    """Format a coordinate as a single DMS string, latitude first."""
    return ", ".join(decimal_to_dms(latitude, longitude))
