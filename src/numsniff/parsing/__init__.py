"""Separator-agnostic parsing: numeric text whose decimal sign is unknown.

- Functions NEVER raise for malformed text - errors are returned in tuple
- Only a bad NumericStyle argument raises (programming error)

The same raw string may use '.' or ',' as decimal sign and the other as
grouping sign. A separator scan chooses one of two conventions, then the text
is validated and converted under it.

Public API:
    Parsing Functions:
        parse_float32 - Returns tuple[float | None, tuple[NumericParseError, ...]]
        parse_float64 - Returns tuple[float | None, tuple[NumericParseError, ...]]
        parse_decimal - Returns tuple[Decimal | None, tuple[NumericParseError, ...]]
        try_parse_float32 - Returns tuple[bool, float]
        try_parse_float64 - Returns tuple[bool, float]
        try_parse_decimal - Returns tuple[bool, Decimal]

    Separator Analysis:
        scan_separators - Count '.' and ',' and their last positions
        choose_convention - Decide the convention for a scan
        detect_convention - scan_separators + choose_convention

    Type Guards:
        is_valid_decimal - TypeIs guard for finite Decimal
        is_valid_number - TypeIs guard for finite float
        is_valid_float32 - TypeIs guard for finite float held exactly by binary32

Example:
    >>> from numsniff.parsing import try_parse_float64
    >>> try_parse_float64("1.943.100,84")
    (True, 1943100.84)
    >>> try_parse_float64("15,019.33")
    (True, 15019.33)

Python 3.13+. Zero external dependencies.
"""

from .guards import is_valid_decimal, is_valid_float32, is_valid_number
from .numbers import (
    parse_decimal,
    parse_float32,
    parse_float64,
    try_parse_decimal,
    try_parse_float32,
    try_parse_float64,
)
from .scanner import ScanResult, scan_separators
from .selector import choose_convention, detect_convention
from .style import NumericLiteral, read_numeric_literal

__all__ = [
    # Separator analysis
    "NumericLiteral",
    "ScanResult",
    "choose_convention",
    "detect_convention",
    "read_numeric_literal",
    "scan_separators",
    # Type guards
    "is_valid_decimal",
    "is_valid_float32",
    "is_valid_number",
    # Parsing functions
    "parse_decimal",
    "parse_float32",
    "parse_float64",
    "try_parse_decimal",
    "try_parse_float32",
    "try_parse_float64",
]
