"""
Notation recognition and parsing.

Grammars are kept as an ordered data table; the classifier walks the
table and the parsers extract fields with the same patterns.
"""

from coordkit.core.notation.classifier import ADDRESS_MIN_LENGTH, classify
from coordkit.core.notation.grammars import FORMAT_GRAMMARS
from coordkit.core.notation.parsers import (
    parse_geographic,
    parse_input,
    parse_mgrs,
    parse_utm,
    parse_zone_designator,
)

__all__ = [
    "ADDRESS_MIN_LENGTH",
    "FORMAT_GRAMMARS",
    "classify",
    "parse_geographic",
    "parse_input",
    "parse_mgrs",
    "parse_utm",
    "parse_zone_designator",
]
