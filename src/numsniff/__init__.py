"""numsniff - parse numbers whose decimal and grouping separators are unknown.

Numeric text from users and loosely formatted telemetry mixes European
("1.943.100,84") and Anglo-American ("1,943,100.84") formats without locale
metadata. numsniff counts the '.' and ',' in the text, decides which one is
the decimal sign, and parses the text under that convention.

Public API:
    try_parse_float32 / try_parse_float64 / try_parse_decimal - (success, value)
    parse_float32 / parse_float64 / parse_decimal - (value | None, errors)
    NumericStyle - Accepted textual forms (default NumericStyle.NUMBER)
    SeparatorConvention - INVARIANT ('.' decimal) or ALTERNATE (',' decimal)
    scan_separators / choose_convention / detect_convention - The heuristic itself

Exceptions:
    NumsniffError - Base exception class
    NumericParseError - Returned (not raised) reason a parse failed

Submodules:
    numsniff.parsing - Scanner, selector, numeric-style filter and parsers
    numsniff.diagnostics - Error codes, templates and formatter
    numsniff.locale_utils - Babel-backed locale to convention lookup (optional)
"""

from .diagnostics import NumericParseError, NumsniffError
from .enums import NumericStyle, SeparatorConvention
from .parsing import (
    ScanResult,
    choose_convention,
    detect_convention,
    parse_decimal,
    parse_float32,
    parse_float64,
    scan_separators,
    try_parse_decimal,
    try_parse_float32,
    try_parse_float64,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("numsniff")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "NumericParseError",
    "NumericStyle",
    "NumsniffError",
    "ScanResult",
    "SeparatorConvention",
    "__version__",
    "choose_convention",
    "detect_convention",
    "parse_decimal",
    "parse_float32",
    "parse_float64",
    "scan_separators",
    "try_parse_decimal",
    "try_parse_float32",
    "try_parse_float64",
]
