"""
Coordinate Reference System (CRS) module.

This module provides:
- The UTM projection registry (zone parameters, pyproj transformers)
- UTM zone detection and latitude bands
- Conversion between geographic, UTM and MGRS coordinates
- Decimal/DMS formatting
"""

from coordkit.core.crs.converter import (
    DEFAULT_MGRS_PRECISION,
    decimal_to_dms,
    dms_to_decimal,
    format_dms,
    format_mgrs,
    geographic_to_mgrs,
    geographic_to_utm,
    mgrs_to_geographic,
    to_geographic,
    utm_to_geographic,
)
from coordkit.core.crs.projection import (
    ZoneDefinition,
    calculate_utm_central_meridian,
    get_zone_definition,
    project_batch_to_geographic,
    project_batch_to_utm,
    project_to_geographic,
    project_to_utm,
)
from coordkit.core.crs.utm import detect_utm_zone, latitude_band

__all__ = [
    # Converter
    "DEFAULT_MGRS_PRECISION",
    "decimal_to_dms",
    "dms_to_decimal",
    "format_dms",
    "format_mgrs",
    "geographic_to_mgrs",
    "geographic_to_utm",
    "mgrs_to_geographic",
    "to_geographic",
    "utm_to_geographic",
    # Projection registry
    "ZoneDefinition",
    "calculate_utm_central_meridian",
    "get_zone_definition",
    "project_batch_to_geographic",
    "project_batch_to_utm",
    "project_to_geographic",
    "project_to_utm",
    # UTM utilities
    "detect_utm_zone",
    "latitude_band",
]
