"""
Parsers turning classified input text into coordinate values.

Every parser accepts only its own notation and raises
:class:`MalformedInputError` for anything else, so calling one on the
wrong format fails loudly instead of producing a wrong position.
"""

from re import Match
from typing import Callable, Dict, Optional, Tuple

from coordkit.core.crs.converter import dms_to_decimal
from coordkit.core.errors import (
    InvalidZoneFormatError,
    MalformedInputError,
    OutOfRangeError,
)
from coordkit.core.notation.classifier import classify
from coordkit.core.notation.grammars import (
    DECIMAL_PAIR_PATTERNS,
    DMS_PAIR_PATTERN,
    EUROPEAN_PAIR_PATTERN,
    MGRS_PATTERN,
    UTM_PATTERNS,
    ZONE_DESIGNATOR_PATTERN,
)
from coordkit.models.coordinates import (
    UTM_BANDS,
    DetectedFormat,
    GeographicCoordinate,
    MGRSString,
    ParsedInput,
    UTMCoordinate,
)


def _normalize(text: str, expected_format: str) -> str:
    if not isinstance(text, str):
        raise MalformedInputError(
            f"Expected text input, got {type(text).__name__}",
            expected_format=expected_format,
        )
    return text.strip()


def parse_zone_designator(zone: str) -> Tuple[int, str]:
    """
    Split a zone designator such as ``"33T"`` into number and band.

    Args:
        zone: Zone number followed by a band letter

    Returns:
        Tuple of (zone_number, band_letter), band uppercased

    Raises:
        InvalidZoneFormatError: If the token is not number+band or the band
            letter is not a UTM band
        OutOfRangeError: If the zone number is outside 1-60
    """
    match = ZONE_DESIGNATOR_PATTERN.match(zone.strip()) if isinstance(zone, str) else None
    if not match:
        raise InvalidZoneFormatError(f"Invalid UTM zone format: {zone!r}", zone=str(zone))

    zone_number = int(match.group(1))
    band = match.group(2).upper()

    if band not in UTM_BANDS:
        raise InvalidZoneFormatError(f"Invalid latitude band {band!r}", zone=zone)
    if not 1 <= zone_number <= 60:
        raise OutOfRangeError(
            f"UTM zone must be between 1 and 60, got {zone_number}",
            field="zone_number",
            value=zone_number,
        )
    return zone_number, band


def _dms_component(match: Match[str], offset: int) -> Tuple[float, str]:
    degrees, minutes, seconds, hemisphere = match.group(
        offset + 1, offset + 2, offset + 3, offset + 4
    )
    hemisphere = hemisphere.upper()
    value = dms_to_decimal(
        int(degrees),
        int(minutes),
        float(seconds) if seconds else 0.0,
        hemisphere,
    )
    return value, hemisphere


def _parse_dms(match: Match[str], text: str) -> GeographicCoordinate:
    first, first_hemisphere = _dms_component(match, 0)
    second, second_hemisphere = _dms_component(match, 4)

    if first_hemisphere in "NS" and second_hemisphere in "EW":
        return GeographicCoordinate(first, second)
    # Longitude written first, e.g. 13°24'18"E 52°31'12"N
    if first_hemisphere in "EW" and second_hemisphere in "NS":
        return GeographicCoordinate(second, first)

    raise MalformedInputError(
        "DMS coordinates need one N/S and one E/W component",
        text=text,
        expected_format=DetectedFormat.GEOGRAPHIC.value,
    )


def parse_geographic(text: str) -> GeographicCoordinate:
    """
    Parse a geographic coordinate pair.

    Decimal pairs separated by comma or whitespace (optionally labelled)
    are tried first, then the European comma-decimal pair, then DMS.
    Decimal values are taken in the order given: latitude, longitude.

    Args:
        text: Input classified as geographic

    Returns:
        The parsed coordinate

    Raises:
        MalformedInputError: If no geographic grammar matches
        OutOfRangeError: If latitude, longitude, minutes or seconds are out of range
    """
    value = _normalize(text, DetectedFormat.GEOGRAPHIC.value)

    for pattern in DECIMAL_PAIR_PATTERNS:
        match = pattern.match(value)
        if match:
            return GeographicCoordinate(float(match.group(1)), float(match.group(2)))

    match = EUROPEAN_PAIR_PATTERN.match(value)
    if match:
        return GeographicCoordinate(
            float(match.group(1).replace(",", ".")),
            float(match.group(2).replace(",", ".")),
        )

    match = DMS_PAIR_PATTERN.match(value)
    if match:
        return _parse_dms(match, value)

    raise MalformedInputError(
        f"Not a geographic coordinate: {value!r}",
        text=value,
        expected_format=DetectedFormat.GEOGRAPHIC.value,
        suggestions=[
            'Use decimal degrees, e.g. "52.5200, 13.4050"',
            "Or degrees/minutes/seconds, e.g. 52°31'12\"N 13°24'18\"E",
        ],
    )


def parse_utm(text: str) -> UTMCoordinate:
    """
    Parse a UTM coordinate such as ``"33T 500000 4649776"``.

    Args:
        text: Input classified as UTM

    Returns:
        The parsed coordinate

    Raises:
        MalformedInputError: If no UTM grammar matches
        OutOfRangeError: If the zone number is outside 1-60
        InvalidZoneFormatError: If the band letter is not a UTM band
    """
    value = _normalize(text, DetectedFormat.UTM.value)

    for pattern in UTM_PATTERNS:
        match = pattern.match(value)
        if match:
            zone_number, band = parse_zone_designator(match.group(1) + match.group(2))
            return UTMCoordinate(
                zone_number=zone_number,
                latitude_band=band,
                easting=int(match.group(3)),
                northing=int(match.group(4)),
            )

    raise MalformedInputError(
        f"Not a UTM coordinate: {value!r}",
        text=value,
        expected_format=DetectedFormat.UTM.value,
        suggestions=['Use zone, band, easting and northing, e.g. "33T 500000 4649776"'],
    )


def parse_mgrs(text: str) -> MGRSString:
    """
    Check an MGRS reference and compact it for the grid-reference codec.

    The fields are not decoded here. The reference is only checked against
    the MGRS grammar, the zone padded to two digits and whitespace removed,
    e.g. ``"4Q FJ 123 678"`` becomes ``"04QFJ123678"``.

    Raises:
        MalformedInputError: If the grammar does not match or easting and
            northing have different numbers of digits
        OutOfRangeError: If the zone number is outside 1-60
        InvalidZoneFormatError: If the band letter is not a UTM band
    """
    value = _normalize(text, DetectedFormat.MGRS.value)

    match = MGRS_PATTERN.match(value)
    if not match:
        raise MalformedInputError(
            f"Not an MGRS reference: {value!r}",
            text=value,
            expected_format=DetectedFormat.MGRS.value,
            suggestions=['Use zone, square and digits, e.g. "32U MV 12345 67890"'],
        )

    zone, band, square, easting, northing = match.groups()
    if len(easting) != len(northing):
        raise MalformedInputError(
            "Easting and northing must have the same number of digits",
            text=value,
            expected_format=DetectedFormat.MGRS.value,
        )

    zone_number, band = parse_zone_designator(zone + band)
    return MGRSString(f"{zone_number:02d}{band}{square.upper()}{easting}{northing}")


_PARSERS: Dict[DetectedFormat, Callable[[str], ParsedInput]] = {
    DetectedFormat.GEOGRAPHIC: parse_geographic,
    DetectedFormat.UTM: parse_utm,
    DetectedFormat.MGRS: parse_mgrs,
}


def parse_input(text: str, detected: Optional[DetectedFormat] = None) -> ParsedInput:
    """
    Parse input with the parser for its (given or detected) format.

    Args:
        text: Raw user input
        detected: Format from an earlier :func:`classify` call, if any

    Returns:
        GeographicCoordinate, UTMCoordinate or MGRSString

    Raises:
        MalformedInputError: For address or unrecognized input, or when
            the text does not match its format's grammar
    """
    if detected is None:
        detected = classify(text)

    parser = _PARSERS.get(DetectedFormat(detected))
    if parser is None:
        raise MalformedInputError(
            f"Input recognized as {DetectedFormat(detected).value} is not a coordinate",
            text=text if isinstance(text, str) else None,
            expected_format=DetectedFormat(detected).value,
        )
    return parser(text)
