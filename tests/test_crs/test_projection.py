"""
Tests for the UTM projection registry.
"""

import numpy as np
import pytest
from pyproj import Transformer

from coordkit.core.crs import projection
from coordkit.core.errors import OutOfRangeError, ProjectionError
from coordkit.models.coordinates import Hemisphere


class TestZoneDefinition:
    """Tests for zone parameter lookup."""

    def test_northern_zone(self) -> None:
        """Test parameters for a northern zone."""
        definition = projection.get_zone_definition(33, Hemisphere.NORTH)

        assert definition.zone_number == 33
        assert definition.central_meridian == 15.0
        assert definition.false_easting == 500_000.0
        assert definition.false_northing == 0.0
        assert definition.scale_factor == 0.9996
        assert definition.epsg == 32633
        assert definition.name == "WGS 84 / UTM zone 33N"

    def test_southern_zone(self) -> None:
        """Test parameters for a southern zone."""
        definition = projection.get_zone_definition(56, Hemisphere.SOUTH)

        assert definition.central_meridian == 153.0
        assert definition.false_northing == 10_000_000.0
        assert definition.epsg == 32756

    def test_hemisphere_accepts_letter(self) -> None:
        """Test that a plain hemisphere letter is accepted."""
        definition = projection.get_zone_definition(1, "S")
        assert definition.hemisphere == Hemisphere.SOUTH

    def test_definitions_are_cached(self) -> None:
        """Test that repeated lookups return the same object."""
        first = projection.get_zone_definition(12, Hemisphere.NORTH)
        second = projection.get_zone_definition(12, Hemisphere.NORTH)
        assert first is second

    def test_proj4_string(self) -> None:
        """Test the generated PROJ string."""
        proj4 = projection.get_zone_definition(33, Hemisphere.SOUTH).to_proj4()

        assert "+proj=tmerc" in proj4
        assert "+lon_0=15" in proj4
        assert "+k=0.9996" in proj4
        assert "+y_0=10000000" in proj4

    @pytest.mark.parametrize("zone", [0, 61, -3])
    def test_invalid_zone(self, zone: int) -> None:
        """Test error handling for invalid zone numbers."""
        with pytest.raises(OutOfRangeError, match="UTM zone must be between"):
            projection.get_zone_definition(zone, Hemisphere.NORTH)

    def test_central_meridian(self) -> None:
        """Test central meridians at both ends of the zone range."""
        assert projection.calculate_utm_central_meridian(1) == -177.0
        assert projection.calculate_utm_central_meridian(31) == 3.0
        assert projection.calculate_utm_central_meridian(60) == 177.0


class TestProjection:
    """Tests for forward and inverse projection."""

    def test_project_to_utm_reference_point(self) -> None:
        """Test the 42°N 15°E reference point on a central meridian."""
        easting, northing = projection.project_to_utm(42.0, 15.0, 33, Hemisphere.NORTH)

        assert abs(easting - 500_000.0) < 0.01
        assert abs(northing - 4_649_776.0) < 1.0

    def test_project_to_geographic_reference_point(self) -> None:
        """Test unprojecting the reference point."""
        lat, lon = projection.project_to_geographic(33, Hemisphere.NORTH, 500_000, 4_649_776)

        assert abs(lat - 42.0) < 1e-5
        assert abs(lon - 15.0) < 1e-9

    def test_project_southern_hemisphere(self) -> None:
        """Test projection of Sydney into zone 56 south."""
        easting, northing = projection.project_to_utm(-33.8688, 151.2093, 56, Hemisphere.SOUTH)

        assert 330_000 < easting < 340_000
        assert 6_240_000 < northing < 6_260_000

    def test_matches_epsg_definition(self) -> None:
        """Test that the parameter table reproduces EPSG:32633."""
        reference = Transformer.from_crs("EPSG:4326", "EPSG:32633", always_xy=True)
        expected_e, expected_n = reference.transform(13.405, 52.52)

        easting, northing = projection.project_to_utm(52.52, 13.405, 33, Hemisphere.NORTH)

        assert abs(easting - expected_e) < 1e-3
        assert abs(northing - expected_n) < 1e-3

    def test_roundtrip(self) -> None:
        """Test round-trip accuracy through a zone."""
        easting, northing = projection.project_to_utm(-22.9068, -43.1729, 23, Hemisphere.SOUTH)
        lat, lon = projection.project_to_geographic(23, Hemisphere.SOUTH, easting, northing)

        assert abs(lat - -22.9068) < 1e-9
        assert abs(lon - -43.1729) < 1e-9

    def test_invalid_zone(self) -> None:
        """Test that projection rejects invalid zones."""
        with pytest.raises(OutOfRangeError):
            projection.project_to_utm(42.0, 15.0, 61, Hemisphere.NORTH)


class TestBatchProjection:
    """Tests for batch projection."""

    def test_batch_to_utm(self) -> None:
        """Test projecting several points along a central meridian."""
        eastings, northings = projection.project_batch_to_utm(
            [40.0, 42.0, 44.0], [15.0, 15.0, 15.0], 33, Hemisphere.NORTH
        )

        assert isinstance(eastings, np.ndarray)
        assert len(eastings) == 3
        assert np.allclose(eastings, 500_000.0, atol=0.01)
        assert northings[0] < northings[1] < northings[2]

    def test_batch_roundtrip(self) -> None:
        """Test batch round-trip accuracy."""
        lats = np.array([42.0, 43.5, 41.25])
        lons = np.array([14.0, 15.5, 16.75])

        eastings, northings = projection.project_batch_to_utm(lats, lons, 33, Hemisphere.NORTH)
        lats_back, lons_back = projection.project_batch_to_geographic(
            33, Hemisphere.NORTH, eastings, northings
        )

        assert np.allclose(lats, lats_back, atol=1e-9)
        assert np.allclose(lons, lons_back, atol=1e-9)

    def test_batch_mismatched_lengths(self) -> None:
        """Test error handling for mismatched arrays."""
        with pytest.raises(ProjectionError, match="same length"):
            projection.project_batch_to_utm([42.0, 43.0], [15.0], 33, Hemisphere.NORTH)
