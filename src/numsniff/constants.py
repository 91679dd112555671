"""Shared constants for numsniff.

This module provides centralized configuration constants used across the
parsing and diagnostics packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Characters: The literal character sets the numeric-style filter accepts
- Exact decimal limits: Precision and scale bounds for parse_decimal()
- Reference locales: CLDR locales whose symbols match the two conventions
- Defaults: Values returned by try_parse_*() on failure

Python 3.13+. Zero external dependencies.
"""

from decimal import Decimal

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Characters
    "POINT",
    "COMMA",
    "DIGITS",
    "WHITESPACE",
    "PLUS_SIGN",
    "MINUS_SIGN",
    "OPEN_PAREN",
    "CLOSE_PAREN",
    # Exact decimal limits
    "MAX_DECIMAL_COEFFICIENT",
    "MAX_DECIMAL_DIGITS",
    "MAX_DECIMAL_SCALE",
    # Reference locales
    "INVARIANT_REFERENCE_LOCALE",
    "ALTERNATE_REFERENCE_LOCALE",
    # Defaults
    "DEFAULT_FLOAT",
    "DEFAULT_DECIMAL",
]

# ============================================================================
# CHARACTERS
# ============================================================================

# The only two characters the separator scanner looks at.
POINT: str = "."
COMMA: str = ","

# ASCII digits only. str.isdigit() would also accept Arabic-Indic,
# Devanagari, fullwidth and superscript digits.
DIGITS: frozenset[str] = frozenset("0123456789")

# Whitespace accepted around a number: HT, LF, VT, FF, CR and SPACE.
# Matches the set used by .NET NumberStyles, which the separator heuristic
# was originally written against.
WHITESPACE: frozenset[str] = frozenset("\t\n\v\f\r ")

PLUS_SIGN: str = "+"
MINUS_SIGN: str = "-"
OPEN_PAREN: str = "("
CLOSE_PAREN: str = ")"

# ============================================================================
# EXACT DECIMAL LIMITS
# ============================================================================
#
# parse_decimal() produces decimal.Decimal, which is unbounded. The bounds
# below are those of the 96-bit decimal type the heuristic was designed for,
# so inputs accepted here are accepted by every system exchanging the same
# telemetry. A literal beyond either bound FAILS; it is never rounded.
#
# ============================================================================

# Largest coefficient (all significant digits, decimal sign removed).
MAX_DECIMAL_COEFFICIENT: int = 2**96 - 1

# len(str(MAX_DECIMAL_COEFFICIENT)). Checked before int() conversion so
# huge literals never hit the int max_str_digits limit.
MAX_DECIMAL_DIGITS: int = 29

# Largest number of fractional digits (trailing zeros included).
MAX_DECIMAL_SCALE: int = 28

# ============================================================================
# REFERENCE LOCALES
# ============================================================================

# CLDR locales whose decimal/group symbols match each convention.
INVARIANT_REFERENCE_LOCALE: str = "en_US"
ALTERNATE_REFERENCE_LOCALE: str = "de_DE"

# ============================================================================
# DEFAULTS
# ============================================================================

DEFAULT_FLOAT: float = 0.0
DEFAULT_DECIMAL: Decimal = Decimal(0)
