"""
UTM zone and latitude band utilities.
"""

import math
from typing import Tuple

from coordkit.core.errors import OutOfRangeError
from coordkit.models.coordinates import UTM_BANDS, Hemisphere


def detect_utm_zone(longitude: float, latitude: float) -> Tuple[int, Hemisphere]:
    """
    Detect the UTM zone for given WGS84 coordinates.

    Zones are numbered from 1 to 60, each covering 6 degrees of longitude
    starting at 180°W. The Norway and Svalbard exceptions are not applied;
    the zone follows the regular 6° grid everywhere.

    Args:
        longitude: Longitude in decimal degrees (-180 to 180)
        latitude: Latitude in decimal degrees (-90 to 90)

    Returns:
        Tuple of (zone_number, hemisphere)

    Raises:
        OutOfRangeError: If coordinates are out of valid range
    """
    if not -180 <= longitude <= 180:
        raise OutOfRangeError(
            f"Longitude must be between -180 and 180, got {longitude}",
            field="longitude",
            value=longitude,
        )
    if not -90 <= latitude <= 90:
        raise OutOfRangeError(
            f"Latitude must be between -90 and 90, got {latitude}",
            field="latitude",
            value=latitude,
        )

    zone_number = math.floor((longitude + 180) / 6) + 1

    # 180° is the same meridian as -180°
    if zone_number > 60:
        zone_number = 1

    return zone_number, Hemisphere.from_latitude(latitude)


def latitude_band(latitude: float) -> str:
    """
    Get the UTM latitude band letter for a latitude.

    Bands are 8° tall from C (80°S-72°S) to X, with X stretched to cover
    72°N-84°N. Latitudes outside the UTM domain are clamped: anything at
    or above 84°N is X and anything below 80°S is C, so callers working
    near the poles always get a letter back.

    Args:
        latitude: Latitude in decimal degrees

    Returns:
        Band letter (C-X, without I and O)
    """
    index = math.floor((latitude + 80) / 8)
    return UTM_BANDS[min(max(index, 0), len(UTM_BANDS) - 1)]
