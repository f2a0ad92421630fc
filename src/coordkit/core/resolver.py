"""
One-call resolution of user input into every supported notation.

:func:`resolve` chains classification, parsing and conversion and
reports failures through :attr:`Resolution.error` instead of raising, so
interactive callers can show a message for every keystroke.
"""

import logging
from typing import Any, Dict, Optional

from coordkit.core.config import settings
from coordkit.core.crs.converter import (
    format_dms,
    format_mgrs,
    geographic_to_mgrs,
    geographic_to_utm,
    to_geographic,
)
from coordkit.core.errors import CoordkitException, OutOfRangeError
from coordkit.core.notation.classifier import classify
from coordkit.core.notation.parsers import parse_input
from coordkit.models.coordinates import DetectedFormat, GeographicCoordinate
from coordkit.models.results import ErrorInfo, Resolution

logger = logging.getLogger(__name__)

# Same bound as Settings.decimal_places
MAX_DECIMAL_PLACES = 12


def _check_decimal_places(decimal_places: int) -> None:
    if not 0 <= decimal_places <= MAX_DECIMAL_PLACES:
        raise OutOfRangeError(
            f"Decimal places must be between 0 and {MAX_DECIMAL_PLACES}, got {decimal_places}",
            field="decimal_places",
            value=decimal_places,
            suggestions=["Use 6 decimal places for roughly 0.1 m"],
        )


def _notations(
    coord: GeographicCoordinate,
    mgrs_precision: int,
    decimal_places: int,
    mgrs_reference: Optional[str] = None,
) -> Dict[str, Any]:
    """Render a coordinate in every notation; UTM and MGRS may fail near the poles."""
    fields: Dict[str, Any] = {
        "latitude": coord.latitude,
        "longitude": coord.longitude,
        "decimal": coord.format_decimal(decimal_places),
        "dms": format_dms(coord.latitude, coord.longitude),
    }
    error: Optional[ErrorInfo] = None

    try:
        fields["utm"] = str(geographic_to_utm(coord))
    except CoordkitException as e:
        logger.debug("No UTM notation for %s: %s", coord, e)
        error = ErrorInfo.from_exception(e)

    if mgrs_reference is not None:
        fields["mgrs"] = mgrs_reference
    else:
        try:
            fields["mgrs"] = format_mgrs(geographic_to_mgrs(coord, mgrs_precision))
        except Exception as e:
            logger.debug("No MGRS notation for %s: %s", coord, e)
            error = error or ErrorInfo.from_exception(e)

    fields["error"] = error
    return fields


def describe(
    coord: GeographicCoordinate,
    mgrs_precision: Optional[int] = None,
    decimal_places: Optional[int] = None,
) -> Resolution:
    """
    Express a known coordinate in every notation.

    Used for positions that did not come from text input, such as a
    geocoder result or the centre of a map view. Never raises.

    Args:
        coord: WGS84 coordinate
        mgrs_precision: MGRS digits, defaults to ``settings.mgrs_precision``
        decimal_places: Decimal places, defaults to ``settings.decimal_places``

    Returns:
        Resolution with detected_format set to geographic
    """
    if mgrs_precision is None:
        mgrs_precision = settings.mgrs_precision
    if decimal_places is None:
        decimal_places = settings.decimal_places

    try:
        _check_decimal_places(decimal_places)
    except OutOfRangeError as e:
        return Resolution(
            input=coord.format_decimal(),
            detected_format=DetectedFormat.GEOGRAPHIC,
            latitude=coord.latitude,
            longitude=coord.longitude,
            error=ErrorInfo.from_exception(e),
        )

    return Resolution(
        input=coord.format_decimal(decimal_places),
        detected_format=DetectedFormat.GEOGRAPHIC,
        **_notations(coord, mgrs_precision, decimal_places),
    )


def resolve(
    text: str,
    mgrs_precision: Optional[int] = None,
    decimal_places: Optional[int] = None,
) -> Resolution:
    """
    Classify, parse and convert a piece of user input.

    Never raises. Address input comes back with ``needs_geocoding`` set and
    no coordinate; unrecognized input, invalid options and parse or
    conversion failures come back with ``error`` set. MGRS input is
    echoed in its spaced form rather than re-encoded, since decoding
    yields the south-west corner of the referenced square.

    Args:
        text: Raw user input
        mgrs_precision: MGRS digits, defaults to ``settings.mgrs_precision``
        decimal_places: Decimal places, defaults to ``settings.decimal_places``

    Returns:
        Resolution describing the input
    """
    if mgrs_precision is None:
        mgrs_precision = settings.mgrs_precision
    if decimal_places is None:
        decimal_places = settings.decimal_places

    value = text.strip() if isinstance(text, str) else ""
    detected = classify(value)

    if detected == DetectedFormat.ADDRESS:
        return Resolution(input=value, detected_format=detected)

    if detected == DetectedFormat.UNKNOWN:
        return Resolution(
            input=value,
            detected_format=detected,
            error=ErrorInfo(
                error_code="UNRECOGNIZED_FORMAT",
                message="Input format not recognized",
                suggestions=[
                    'Enter coordinates such as "52.5200, 13.4050"',
                    "Or an address with at least two characters",
                ],
            ),
        )

    # Codec failures arrive as foreign exception types
    try:
        _check_decimal_places(decimal_places)
        parsed = parse_input(value, detected)
        coord = to_geographic(parsed)
        reference = format_mgrs(parsed) if detected == DetectedFormat.MGRS else None
    except Exception as e:
        logger.debug("Failed to resolve %r as %s: %s", value, detected.value, e)
        return Resolution(
            input=value,
            detected_format=detected,
            error=ErrorInfo.from_exception(e),
        )

    return Resolution(
        input=value,
        detected_format=detected,
        **_notations(coord, mgrs_precision, decimal_places, mgrs_reference=reference),
    )
