"""
Input format classification.
"""

from coordkit.core.notation.grammars import FORMAT_GRAMMARS
from coordkit.models.coordinates import DetectedFormat

# Shortest free text worth handing to a geocoder
ADDRESS_MIN_LENGTH = 2


def classify(text: str) -> DetectedFormat:
    """
    Decide which notation an input string is written in.

    Grammars are tried in priority order (MGRS, geographic, UTM); text
    matching none of them is treated as an address when it has at least
    two characters. Never raises.

    Args:
        text: Raw user input

    Returns:
        The detected format
    """
    if not isinstance(text, str):
        return DetectedFormat.UNKNOWN

    value = text.strip()
    if not value:
        return DetectedFormat.UNKNOWN

    for detected, pattern in FORMAT_GRAMMARS:
        if pattern.match(value):
            return detected

    if len(value) >= ADDRESS_MIN_LENGTH:
        return DetectedFormat.ADDRESS
    return DetectedFormat.UNKNOWN
