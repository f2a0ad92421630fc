"""
Tests for the geographic, UTM and MGRS parsers.
"""

import pytest

from coordkit.core.errors import (
    InvalidZoneFormatError,
    MalformedInputError,
    OutOfRangeError,
)
from coordkit.core.notation import (
    parse_geographic,
    parse_input,
    parse_mgrs,
    parse_utm,
    parse_zone_designator,
)
from coordkit.models.coordinates import (
    DetectedFormat,
    GeographicCoordinate,
    UTMCoordinate,
)

BERLIN = GeographicCoordinate(52.52, 13.405)


def _close(a: GeographicCoordinate, b: GeographicCoordinate, tol: float = 1e-9) -> bool:
    return abs(a.latitude - b.latitude) < tol and abs(a.longitude - b.longitude) < tol


class TestParseGeographicDecimal:
    """Tests for decimal-degree pairs."""

    @pytest.mark.parametrize(
        "text",
        [
            "52.52, 13.405",
            "52.5200, 13.4050",
            "52.52,13.405",
            "52.52 13.405",
            "  52.52 ,  13.405  ",
            "lat: 52.52, lng: 13.405",
            "latitude 52.52 longitude 13.405",
            "LAT:52.52 LONG:13.405",
            "GPS: 52.52, 13.405",
            "gps 52.52 13.405",
            "52,52; 13,405",
            "52,52, 13,405",
        ],
    )
    def test_berlin_variants(self, text: str) -> None:
        """Test that every decimal notation of Berlin parses identically."""
        assert parse_geographic(text) == BERLIN

    def test_negative_values(self) -> None:
        """Test signed decimal degrees."""
        result = parse_geographic("-33.8688, -70.5")
        assert result == GeographicCoordinate(-33.8688, -70.5)

    def test_cjk_labels(self) -> None:
        """Test Japanese labelled pairs."""
        result = parse_geographic("緯度: 35.6812, 経度: 139.7671")
        assert result == GeographicCoordinate(35.6812, 139.7671)

    def test_values_are_not_swapped(self) -> None:
        """Test that values are always read as latitude, longitude."""
        result = parse_geographic("10.5, 120.0")

        assert result.latitude == 10.5
        assert result.longitude == 120.0

    def test_latitude_out_of_range(self) -> None:
        """Test that a longitude-first pair is rejected instead of swapped."""
        with pytest.raises(OutOfRangeError, match="Latitude"):
            parse_geographic("120.0, 10.5")

    def test_longitude_out_of_range(self) -> None:
        """Test error handling for longitude beyond 180."""
        with pytest.raises(OutOfRangeError, match="Longitude"):
            parse_geographic("52.52, 181.0")


class TestParseGeographicDMS:
    """Tests for degrees/minutes/seconds pairs."""

    def test_berlin(self) -> None:
        """Test a DMS pair with seconds."""
        result = parse_geographic("52°31'12.0\"N 13°24'18.0\"E")
        assert _close(result, BERLIN)

    def test_south_west(self) -> None:
        """Test that S and W produce negative values."""
        result = parse_geographic("33°52'7.68\"S, 70°30'0\"W")

        assert abs(result.latitude - -33.8688) < 1e-9
        assert abs(result.longitude - -70.5) < 1e-9

    def test_without_seconds(self) -> None:
        """Test a DMS pair without seconds."""
        result = parse_geographic("52°30'N 13°24'E")

        assert abs(result.latitude - 52.5) < 1e-9
        assert abs(result.longitude - 13.4) < 1e-9

    def test_lowercase_hemispheres(self) -> None:
        """Test that hemisphere letters are case-insensitive."""
        result = parse_geographic("52°31'12\"n 13°24'18\"e")
        assert _close(result, BERLIN)

    def test_longitude_first(self) -> None:
        """Test that hemisphere letters decide which value is the latitude."""
        result = parse_geographic("13°24'18\"E 52°31'12\"N")
        assert _close(result, BERLIN)

    def test_same_axis_twice(self) -> None:
        """Test error handling for two latitude components."""
        with pytest.raises(MalformedInputError, match="N/S"):
            parse_geographic("52°31'12\"N 13°24'18\"N")

    def test_minutes_out_of_range(self) -> None:
        """Test error handling for 60 minutes."""
        with pytest.raises(OutOfRangeError, match="Minutes"):
            parse_geographic("52°60'0\"N 13°24'18\"E")

    def test_seconds_out_of_range(self) -> None:
        """Test error handling for 60 seconds."""
        with pytest.raises(OutOfRangeError, match="Seconds"):
            parse_geographic("52°31'60\"N 13°24'18\"E")

    def test_degrees_out_of_range(self) -> None:
        """Test error handling for latitude beyond 90."""
        with pytest.raises(OutOfRangeError):
            parse_geographic("91°0'0\"N 13°24'18\"E")


class TestParseGeographicErrors:
    """Tests for input that is not geographic."""

    @pytest.mark.parametrize("text", ["Berlin", "33T 500000 4649776", "", "52.52"])
    def test_malformed(self, text: str) -> None:
        """Test that non-geographic input is rejected."""
        with pytest.raises(MalformedInputError) as exc_info:
            parse_geographic(text)

        assert exc_info.value.error_code == "MALFORMED_INPUT"
        assert exc_info.value.details["expected_format"] == "geographic"

    def test_non_string(self) -> None:
        """Test that non-string input is rejected."""
        with pytest.raises(MalformedInputError, match="Expected text input"):
            parse_geographic(None)


class TestParseZoneDesignator:
    """Tests for zone designator decomposition."""

    def test_valid(self) -> None:
        """Test decomposing valid designators."""
        assert parse_zone_designator("33T") == (33, "T")
        assert parse_zone_designator("4q") == (4, "Q")
        assert parse_zone_designator(" 60X ") == (60, "X")

    @pytest.mark.parametrize("zone", ["33", "T33", "333T", "33TT", "", "33I", "33O", "33A"])
    def test_invalid_format(self, zone: str) -> None:
        """Test error handling for malformed tokens and bad bands."""
        with pytest.raises(InvalidZoneFormatError):
            parse_zone_designator(zone)

    @pytest.mark.parametrize("zone", ["0T", "61T", "99N"])
    def test_zone_out_of_range(self, zone: str) -> None:
        """Test error handling for zone numbers outside 1-60."""
        with pytest.raises(OutOfRangeError, match="UTM zone"):
            parse_zone_designator(zone)


class TestParseUTM:
    """Tests for UTM parsing."""

    @pytest.mark.parametrize(
        "text",
        [
            "33T 500000 4649776",
            "33t 500000 4649776",
            "zone: 33T 500000 4649776",
            "UTM 33T 500000 4649776",
            "33T E: 500000 N: 4649776",
            "33T E500000 N4649776",
        ],
    )
    def test_variants(self, text: str) -> None:
        """Test every UTM notation yields the same coordinate."""
        assert parse_utm(text) == UTMCoordinate(33, "T", 500_000, 4_649_776)

    def test_southern_band(self) -> None:
        """Test a southern band letter."""
        result = parse_utm("56H 334369 6250948")

        assert result.zone_number == 56
        assert result.latitude_band == "H"
        assert result.hemisphere.value == "S"

    def test_zone_out_of_range(self) -> None:
        """Test error handling for zone 61."""
        with pytest.raises(OutOfRangeError):
            parse_utm("61T 500000 4649776")

    def test_invalid_band(self) -> None:
        """Test error handling for band I."""
        with pytest.raises(InvalidZoneFormatError):
            parse_utm("33I 500000 4649776")

    def test_malformed(self) -> None:
        """Test error handling for a missing northing."""
        with pytest.raises(MalformedInputError):
            parse_utm("33T 500000")


class TestParseMGRS:
    """Tests for MGRS grammar checking and compaction."""

    def test_compacts(self) -> None:
        """Test whitespace removal."""
        assert parse_mgrs("32U MV 12345 67890") == "32UMV1234567890"

    def test_pads_zone_and_uppercases(self) -> None:
        """Test zone padding and case normalization."""
        assert parse_mgrs("4q fj 123 678") == "04QFJ123678"

    def test_unequal_digit_groups(self) -> None:
        """Test error handling for unequal easting/northing digits."""
        with pytest.raises(MalformedInputError, match="same number of digits"):
            parse_mgrs("32U MV 123 45678")

    def test_invalid_band(self) -> None:
        """Test error handling for a band outside C-X."""
        with pytest.raises(InvalidZoneFormatError):
            parse_mgrs("32A MV 12345 67890")

    def test_zone_out_of_range(self) -> None:
        """Test error handling for zone 61."""
        with pytest.raises(OutOfRangeError):
            parse_mgrs("61U MV 1 2")

    def test_malformed(self) -> None:
        """Test error handling for a compact reference."""
        with pytest.raises(MalformedInputError):
            parse_mgrs("32UMV1234567890")


class TestParseInput:
    """Tests for format dispatch."""

    def test_dispatch(self) -> None:
        """Test each coordinate format reaches its parser."""
        assert parse_input("52.52, 13.405") == BERLIN
        assert parse_input("33T 500000 4649776") == UTMCoordinate(33, "T", 500_000, 4_649_776)
        assert parse_input("32U MV 12345 67890") == "32UMV1234567890"

    def test_explicit_format(self) -> None:
        """Test passing a previously detected format."""
        assert parse_input("52.52, 13.405", DetectedFormat.GEOGRAPHIC) == BERLIN
        assert parse_input("52.52, 13.405", "geographic") == BERLIN

    def test_wrong_format_fails(self) -> None:
        """Test that a parser never accepts another format."""
        with pytest.raises(MalformedInputError):
            parse_input("33T 500000 4649776", DetectedFormat.GEOGRAPHIC)

    @pytest.mark.parametrize("text", ["Berlin", "", "x"])
    def test_not_a_coordinate(self, text: str) -> None:
        """Test error handling for address and unknown input."""
        with pytest.raises(MalformedInputError, match="not a coordinate"):
            parse_input(text)
