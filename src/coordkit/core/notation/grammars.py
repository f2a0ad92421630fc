"""
Regular-expression grammars for every supported coordinate notation.

Each pattern is anchored and matched against trimmed input. The
classifier walks :data:`FORMAT_GRAMMARS` in order; parsers use the
individual patterns to extract fields.
"""

import re
from re import Pattern
from typing import List, Tuple

from coordkit.models.coordinates import DetectedFormat

# Signed decimal number; "52", "52." and "52.52" are all accepted
_DECIMAL = r"-?\d+\.?\d*"
# Decimal with a comma as decimal mark, e.g. "52,52"
_COMMA_DECIMAL = r"-?\d+,\d+"

# --- MGRS -------------------------------------------------------------------

# 32U MV 12345 67890
MGRS_PATTERN: Pattern[str] = re.compile(
    r"^(\d{1,2})([A-Z])\s+([A-Z]{2})\s+(\d{1,5})\s+(\d{1,5})$", re.IGNORECASE
)

# --- Geographic -------------------------------------------------------------

# 52.5200, 13.4050
COMMA_PAIR_PATTERN: Pattern[str] = re.compile(
    rf"^({_DECIMAL})\s*,\s*({_DECIMAL})$"
)

# 52.5200 13.4050
SPACE_PAIR_PATTERN: Pattern[str] = re.compile(rf"^({_DECIMAL})\s+({_DECIMAL})$")

# lat: 52.52, lng: 13.405  /  latitude 52.52 longitude 13.405
LABELED_PAIR_PATTERN: Pattern[str] = re.compile(
    rf"^lat(?:itude)?\s*:?\s*({_DECIMAL})\s*,?\s*"
    rf"l(?:ng|on(?:g(?:itude)?)?)\s*:?\s*({_DECIMAL})$",
    re.IGNORECASE,
)

# GPS: 52.52, 13.405
GPS_PAIR_PATTERN: Pattern[str] = re.compile(
    rf"^gps\s*:?\s*({_DECIMAL})(?:\s*,\s*|\s+)({_DECIMAL})$", re.IGNORECASE
)

# 緯度: 35.68, 経度: 139.76 (Japanese) / 纬度 / 经度 (Chinese)
CJK_PAIR_PATTERN: Pattern[str] = re.compile(
    rf"^[緯纬]度\s*[:：]?\s*({_DECIMAL})\s*[,，、]?\s*"
    rf"[経经]度\s*[:：]?\s*({_DECIMAL})$"
)

# 52,52; 13,405  /  52,52, 13,405
EUROPEAN_PAIR_PATTERN: Pattern[str] = re.compile(
    rf"^({_COMMA_DECIMAL})\s*[,;]\s*({_COMMA_DECIMAL})$"
)

# 52°31'12.0"N 13°24'18.0"E
_DMS_COMPONENT = (
    r"(\d+)\s*[°º]\s*"
    r"(\d+)(?:\s|['′’])*"
    r"((?:\d+(?:\.\d*)?)?)(?:\s|[\"″”])*"
    r"([NSEW])"
)
DMS_PAIR_PATTERN: Pattern[str] = re.compile(
    rf"^{_DMS_COMPONENT}\s*[,;]?\s*{_DMS_COMPONENT}$", re.IGNORECASE
)

# Field-separator pairs come before the comma-decimal pair so that
# "52.52,13.40" is never read as European notation.
DECIMAL_PAIR_PATTERNS: Tuple[Pattern[str], ...] = (
    COMMA_PAIR_PATTERN,
    SPACE_PAIR_PATTERN,
    LABELED_PAIR_PATTERN,
    GPS_PAIR_PATTERN,
    CJK_PAIR_PATTERN,
)

GEOGRAPHIC_PATTERNS: Tuple[Pattern[str], ...] = DECIMAL_PAIR_PATTERNS + (
    EUROPEAN_PAIR_PATTERN,
    DMS_PAIR_PATTERN,
)

# --- UTM --------------------------------------------------------------------

_UTM_BODY = r"(\d{1,2})([A-Z])\s+(\d{5,7})\s+(\d{6,8})"

UTM_PATTERNS: Tuple[Pattern[str], ...] = (
    # 33T 500000 4649776
    re.compile(rf"^{_UTM_BODY}$", re.IGNORECASE),
    # zone: 33T 500000 4649776  /  UTM 33T 500000 4649776
    re.compile(rf"^(?:zone|utm)\s*:?\s*{_UTM_BODY}$", re.IGNORECASE),
    # 33T E: 500000 N: 4649776
    re.compile(
        r"^(\d{1,2})([A-Z])\s+E\s*:?\s*(\d{5,7})\s+N\s*:?\s*(\d{6,8})$",
        re.IGNORECASE,
    ),
)

# --- Zone designators -------------------------------------------------------

ZONE_DESIGNATOR_PATTERN: Pattern[str] = re.compile(r"^(\d{1,2})([A-Z])$", re.IGNORECASE)

# --- Classification order ---------------------------------------------------

# MGRS first: it shares the zone+band prefix with UTM and only differs by
# the two-letter square identifier.
FORMAT_GRAMMARS: List[Tuple[DetectedFormat, Pattern[str]]] = (
    [(DetectedFormat.MGRS, MGRS_PATTERN)]
    + [(DetectedFormat.GEOGRAPHIC, pattern) for pattern in GEOGRAPHIC_PATTERNS]
    + [(DetectedFormat.UTM, pattern) for pattern in UTM_PATTERNS]
)
