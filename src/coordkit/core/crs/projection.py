"""
UTM projection registry.

This module owns the parameter table for the 120 UTM projections (60 zones,
north and south variants) and delegates the transverse Mercator math to
pyproj. Transformers are built once per zone/hemisphere and reused.
"""

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import List, Tuple, Union

import numpy as np
from pyproj import CRS, Transformer

from coordkit.core.errors import OutOfRangeError, ProjectionError
from coordkit.models.coordinates import Hemisphere

logger = logging.getLogger(__name__)

WGS84 = "EPSG:4326"

UTM_SCALE_FACTOR = 0.9996
UTM_FALSE_EASTING = 500_000.0
UTM_SOUTH_FALSE_NORTHING = 10_000_000.0

ArrayLike = Union[List[float], np.ndarray]


@dataclass(frozen=True)
class ZoneDefinition:
    """
    Projection parameters for one UTM zone and hemisphere.

    Attributes:
        zone_number: UTM zone number (1-60)
        hemisphere: Hemisphere selecting the false northing
        central_meridian: Longitude of the zone's central meridian
        false_easting: False easting in metres
        false_northing: False northing in metres
        scale_factor: Scale factor on the central meridian
    """

    zone_number: int
    hemisphere: Hemisphere
    central_meridian: float
    false_easting: float = UTM_FALSE_EASTING
    false_northing: float = 0.0
    scale_factor: float = UTM_SCALE_FACTOR

    @property
    def epsg(self) -> int:
        """Equivalent EPSG code (WGS 84 / UTM zone NN{N,S})."""
        base = 32600 if self.hemisphere == Hemisphere.NORTH else 32700
        return base + self.zone_number

    @property
    def name(self) -> str:
        """Human-readable name."""
        return f"WGS 84 / UTM zone {self.zone_number}{self.hemisphere.value}"

    def to_proj4(self) -> str:
        """PROJ string for this zone's transverse Mercator projection."""
        return (
            f"+proj=tmerc +lat_0=0 +lon_0={self.central_meridian:g} "
            f"+k={self.scale_factor} +x_0={self.false_easting:.0f} "
            f"+y_0={self.false_northing:.0f} +datum=WGS84 +units=m +no_defs"
        )


def _check_zone(zone_number: int) -> None:
    if not 1 <= zone_number <= 60:
        raise OutOfRangeError(
            f"UTM zone must be between 1 and 60, got {zone_number}",
            field="zone_number",
            value=zone_number,
        )


def calculate_utm_central_meridian(zone_number: int) -> float:
    """
    Calculate the central meridian for a UTM zone.

    Args:
        zone_number: UTM zone number (1-60)

    Returns:
        Central meridian in decimal degrees

    Raises:
        OutOfRangeError: If zone_number is out of valid range
    """
    _check_zone(zone_number)
    # Zone 1 starts at -180°, each zone is 6° wide
    return -180.0 + (zone_number - 1) * 6 + 3


@lru_cache(maxsize=None)
def get_zone_definition(zone_number: int, hemisphere: Hemisphere) -> ZoneDefinition:
    """
    Look up the projection parameters for a zone and hemisphere.

    Args:
        zone_number: UTM zone number (1-60)
        hemisphere: Northern or southern variant

    Returns:
        ZoneDefinition for the zone

    Raises:
        OutOfRangeError: If zone_number is out of valid range
    """
    hemisphere = Hemisphere(hemisphere)
    return ZoneDefinition(
        zone_number=zone_number,
        hemisphere=hemisphere,
        central_meridian=calculate_utm_central_meridian(zone_number),
        false_northing=(
            UTM_SOUTH_FALSE_NORTHING if hemisphere == Hemisphere.SOUTH else 0.0
        ),
    )


@lru_cache(maxsize=None)
def _transformers(zone_number: int, hemisphere: Hemisphere) -> Tuple[Transformer, Transformer]:
    """Forward (WGS84 -> UTM) and inverse transformers, always lon/lat order."""
    definition = get_zone_definition(zone_number, hemisphere)
    try:
        utm_crs = CRS.from_proj4(definition.to_proj4())
        forward = Transformer.from_crs(WGS84, utm_crs, always_xy=True)
        inverse = Transformer.from_crs(utm_crs, WGS84, always_xy=True)
    except Exception as e:
        raise ProjectionError(
            f"Failed to create transformer: {e}",
            zone_number=zone_number,
            hemisphere=definition.hemisphere.value,
        )
    logger.debug("Created transformers for %s", definition.name)
    return forward, inverse


def project_to_utm(
    latitude: float,
    longitude: float,
    zone_number: int,
    hemisphere: Hemisphere,
) -> Tuple[float, float]:
    """
    Project a WGS84 position into a UTM zone.

    Args:
        latitude: Latitude in decimal degrees
        longitude: Longitude in decimal degrees
        zone_number: Target UTM zone (1-60)
        hemisphere: Target hemisphere variant

    Returns:
        Tuple of (easting, northing) in metres

    Raises:
        OutOfRangeError: If zone_number is out of valid range
        ProjectionError: If the projection fails
    """
    forward, _ = _transformers(zone_number, Hemisphere(hemisphere))
    try:
        easting, northing = forward.transform(longitude, latitude, errcheck=True)
    except Exception as e:
        raise ProjectionError(
            f"Projection to UTM failed: {e}",
            zone_number=zone_number,
            hemisphere=Hemisphere(hemisphere).value,
        )
    return float(easting), float(northing)


def project_to_geographic(
    zone_number: int,
    hemisphere: Hemisphere,
    easting: float,
    northing: float,
) -> Tuple[float, float]:
    """
    Unproject a UTM position back to WGS84.

    Args:
        zone_number: Source UTM zone (1-60)
        hemisphere: Source hemisphere variant
        easting: Easting in metres
        northing: Northing in metres

    Returns:
        Tuple of (latitude, longitude) in decimal degrees

    Raises:
        OutOfRangeError: If zone_number is out of valid range
        ProjectionError: If the projection fails
    """
    _, inverse = _transformers(zone_number, Hemisphere(hemisphere))
    try:
        longitude, latitude = inverse.transform(easting, northing, errcheck=True)
    except Exception as e:
        raise ProjectionError(
            f"Projection to geographic failed: {e}",
            zone_number=zone_number,
            hemisphere=Hemisphere(hemisphere).value,
        )
    return float(latitude), float(longitude)


def project_batch_to_utm(
    latitudes: ArrayLike,
    longitudes: ArrayLike,
    zone_number: int,
    hemisphere: Hemisphere,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Project many WGS84 positions into one UTM zone.

    Args:
        latitudes: Array of latitudes
        longitudes: Array of longitudes
        zone_number: Target UTM zone (1-60)
        hemisphere: Target hemisphere variant

    Returns:
        Tuple of (eastings, northings) arrays

    Raises:
        ProjectionError: If the arrays differ in length or projection fails
    """
    lat_arr = np.asarray(latitudes, dtype=float)
    lon_arr = np.asarray(longitudes, dtype=float)
    if lat_arr.shape != lon_arr.shape:
        raise ProjectionError("latitudes and longitudes must have same length")

    forward, _ = _transformers(zone_number, Hemisphere(hemisphere))
    try:
        eastings, northings = forward.transform(lon_arr, lat_arr, errcheck=True)
    except Exception as e:
        raise ProjectionError(
            f"Batch projection to UTM failed: {e}",
            zone_number=zone_number,
            hemisphere=Hemisphere(hemisphere).value,
        )
    return np.asarray(eastings), np.asarray(northings)


def project_batch_to_geographic(
    zone_number: int,
    hemisphere: Hemisphere,
    eastings: ArrayLike,
    northings: ArrayLike,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Unproject many positions from one UTM zone back to WGS84.

    Returns:
        Tuple of (latitudes, longitudes) arrays

    Raises:
        ProjectionError: If the arrays differ in length or projection fails
    """
    e_arr = np.asarray(eastings, dtype=float)
    n_arr = np.asarray(northings, dtype=float)
    if e_arr.shape != n_arr.shape:
        raise ProjectionError("eastings and northings must have same length")

    _, inverse = _transformers(zone_number, Hemisphere(hemisphere))
    try:
        longitudes, latitudes = inverse.transform(e_arr, n_arr, errcheck=True)
    except Exception as e:
        raise ProjectionError(
            f"Batch projection to geographic failed: {e}",
            zone_number=zone_number,
            hemisphere=Hemisphere(hemisphere).value,
        )
    return np.asarray(latitudes), np.asarray(longitudes)
