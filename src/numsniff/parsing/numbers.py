"""Separator-agnostic number parsing.

- parse_float32() / parse_float64() return tuple[float | None, tuple[NumericParseError, ...]]
- parse_decimal() returns tuple[Decimal | None, tuple[NumericParseError, ...]]
- try_parse_*() return tuple[bool, value] with the type's zero on failure
- Parse errors are returned, never raised

All six functions share one dispatch: blank check, separator scan,
convention choice, numeric-style filter. The adapters differ only in how the
canonical literal becomes a value.

Numeric semantics:
    float64: correctly rounded binary64 (round half to even).
    float32: correctly rounded binary32, returned as a Python float. Rounding
        through binary64 first can land exactly on a binary32 tie; such ties
        are re-resolved against the exact decimal value.
    decimal: exact. Coefficient up to 2**96 - 1, scale up to 28. Larger
        literals fail instead of being rounded.

BE CAREFUL: a number with a single group sign and no decimal sign ("1,234"
meant as one thousand two hundred thirty-four) is read as a decimal number
(1.234). Parse with a known locale if that input is expected.

Thread-safe. No global state.

Python 3.13+. Zero external dependencies.
"""

import logging
import math
import struct
from collections.abc import Callable
from decimal import Decimal
from fractions import Fraction

from numsniff.constants import (
    DEFAULT_DECIMAL,
    DEFAULT_FLOAT,
    MAX_DECIMAL_COEFFICIENT,
    MAX_DECIMAL_DIGITS,
    MAX_DECIMAL_SCALE,
)
from numsniff.diagnostics import (
    Diagnostic,
    ErrorCategory,
    ErrorTemplate,
    FrozenErrorContext,
    NumericParseError,
)
from numsniff.enums import NumericStyle

from .scanner import scan_separators
from .selector import choose_convention
from .style import NumericLiteral, check_style, read_numeric_literal

__all__ = [
    "parse_decimal",
    "parse_float32",
    "parse_float64",
    "try_parse_decimal",
    "try_parse_float32",
    "try_parse_float64",
]

logger = logging.getLogger(__name__)

type _Converter[T] = Callable[[NumericLiteral, str, str], tuple[T | None, Diagnostic | None]]

_BINARY32 = struct.Struct("<f")
_BINARY32_BITS = struct.Struct("<I")
_BINARY32_MAX = float.fromhex("0x1.fffffep+127")
# Halfway between the largest binary32 and 2**128; ties round to infinity.
_BINARY32_OVERFLOW = Fraction(2**128 - 2**103)


def _parse[T](
    value: object,
    style: NumericStyle,
    parse_type: str,
    convert: _Converter[T],
) -> tuple[T | None, tuple[NumericParseError, ...]]:
    """Shared dispatch for all numeric types."""
    style = check_style(style)

    if value is None or (isinstance(value, str) and (not value or value.isspace())):
        diagnostic = ErrorTemplate.input_blank()
        context = FrozenErrorContext(input_value=value or "", parse_type=parse_type)
        return None, (NumericParseError(diagnostic, ErrorCategory.INPUT, context=context),)

    if not isinstance(value, str):
        diagnostic = ErrorTemplate.input_not_string(type(value).__name__)
        context = FrozenErrorContext(input_value=repr(value), parse_type=parse_type)
        return None, (NumericParseError(diagnostic, ErrorCategory.INPUT, context=context),)

    scan = scan_separators(value)
    convention = choose_convention(scan)
    logger.debug("Reading %r as %s (%s)", value, convention, scan)

    context = FrozenErrorContext(
        input_value=value,
        convention=convention.value,
        parse_type=parse_type,
    )

    literal, diagnostic = read_numeric_literal(value, convention, style)
    if literal is None:
        assert diagnostic is not None  # Type narrowing: filter rejected the text
        logger.debug("Rejected %r: %s", value, diagnostic.code.name)
        return None, (NumericParseError(diagnostic, ErrorCategory.PARSE, context=context),)

    result, diagnostic = convert(literal, value, convention.value)
    if result is None:
        assert diagnostic is not None  # Type narrowing: conversion failed
        logger.debug("Rejected %r: %s", value, diagnostic.code.name)
        return None, (NumericParseError(diagnostic, ErrorCategory.RANGE, context=context),)

    return result, ()


# ============================================================================
# CONVERTERS
# ============================================================================


def _to_float64(
    literal: NumericLiteral, value: str, convention: str
) -> tuple[float | None, Diagnostic | None]:
    """Correctly rounded binary64; overflow to infinity fails."""
    result = float(literal.canonical())
    if math.isinf(result):
        return None, ErrorTemplate.out_of_range(value, "float64", convention)
    return result, None


def _to_float32(
    literal: NumericLiteral, value: str, convention: str
) -> tuple[float | None, Diagnostic | None]:
    """Correctly rounded binary32; overflow past the rounding threshold fails."""
    result = _round_binary32(literal.canonical())
    if result is None:
        return None, ErrorTemplate.out_of_range(value, "float32", convention)
    return result, None


def _to_decimal(
    literal: NumericLiteral, value: str, convention: str
) -> tuple[Decimal | None, Diagnostic | None]:
    """Exact decimal within the coefficient and scale bounds."""
    digits = literal.significant_digits
    if (
        literal.scale > MAX_DECIMAL_SCALE
        or len(digits) > MAX_DECIMAL_DIGITS
        or (digits and int(digits) > MAX_DECIMAL_COEFFICIENT)
    ):
        diagnostic = ErrorTemplate.precision_exceeded(
            value, len(digits), literal.scale, convention
        )
        return None, diagnostic
    return Decimal(literal.canonical()), None


def _round_binary32(literal: str) -> float | None:
    """Round a canonical decimal literal to the nearest binary32.

    Returns:
        The binary32 value as a float, or None on overflow
    """
    nearest = float(literal)

    if abs(nearest) > _BINARY32_MAX:
        if math.isinf(nearest) or abs(_exact(literal)) >= _BINARY32_OVERFLOW:
            return None
        return math.copysign(_BINARY32_MAX, nearest)

    single: float = _BINARY32.unpack(_BINARY32.pack(nearest))[0]
    if single == nearest:
        return single

    # Only a binary64 result sitting exactly on a binary32 midpoint can
    # have been double-rounded the wrong way.
    other = _binary32_step(single, away_from_zero=abs(nearest) > abs(single))
    midpoint = (Fraction(single) + Fraction(other)) / 2
    if Fraction(nearest) != midpoint:
        return single

    exact = _exact(literal)
    if exact == midpoint:
        return single
    low, high = sorted((single, other))
    return low if exact < midpoint else high


def _exact(literal: str) -> Fraction:
    """Exact rational value of a canonical literal of any length.

    Fraction(str) is bound by the int string conversion limit; Decimal is not.
    """
    return Fraction(Decimal(literal))


def _binary32_step(single: float, *, away_from_zero: bool) -> float:
    """Adjacent binary32 value in magnitude direction."""
    bits: int = _BINARY32_BITS.unpack(_BINARY32.pack(single))[0]
    bits += 1 if away_from_zero else -1
    result: float = _BINARY32.unpack(_BINARY32_BITS.pack(bits))[0]
    return result


# ============================================================================
# PUBLIC API
# ============================================================================


def parse_float32(
    value: str | None,
    style: NumericStyle = NumericStyle.NUMBER,
) -> tuple[float | None, tuple[NumericParseError, ...]]:
    """Parse text with unknown separators to a binary32 value.

    Args:
        value: Numeric text (e.g., "1.943.100,84" or "15,019.33")
        style: Accepted textual forms (default NumericStyle.NUMBER)

    Returns:
        Tuple of (result, errors):
        - result: Parsed value (exactly representable as binary32), or None
        - errors: Tuple of NumericParseError (empty tuple on success)

    Raises:
        TypeError: If style is not a NumericStyle
        ValueError: If style has undefined bits

    Example:
        >>> parse_float32("0,1")
        (0.10000000149011612, ())
    """
    return _parse(value, style, "float32", _to_float32)


def parse_float64(
    value: str | None,
    style: NumericStyle = NumericStyle.NUMBER,
) -> tuple[float | None, tuple[NumericParseError, ...]]:
    """Parse text with unknown separators to a binary64 float.

    Args:
        value: Numeric text (e.g., "1.943.100,84" or "15,019.33")
        style: Accepted textual forms (default NumericStyle.NUMBER)

    Returns:
        Tuple of (result, errors):
        - result: Parsed float, or None if parsing failed
        - errors: Tuple of NumericParseError (empty tuple on success)

    Raises:
        TypeError: If style is not a NumericStyle
        ValueError: If style has undefined bits

    Examples:
        >>> parse_float64("1.943.100,84")
        (1943100.84, ())
        >>> parse_float64("21,500,000")
        (21500000.0, ())
        >>> result, errors = parse_float64("9392gk381")
        >>> result is None, errors[0].diagnostic.code.name
        (True, 'INVALID_CHARACTER')
    """
    return _parse(value, style, "float64", _to_float64)


def parse_decimal(
    value: str | None,
    style: NumericStyle = NumericStyle.NUMBER,
) -> tuple[Decimal | None, tuple[NumericParseError, ...]]:
    """Parse text with unknown separators to an exact Decimal.

    Use this for amounts where float precision loss would cause rounding
    errors. The literal's digits and scale are preserved: "15,0" parses to
    Decimal("15.0"), not Decimal("15").

    Args:
        value: Numeric text (e.g., "1.943.100,84" or "15,019.33")
        style: Accepted textual forms (default NumericStyle.NUMBER)

    Returns:
        Tuple of (result, errors):
        - result: Parsed Decimal, or None if parsing failed
        - errors: Tuple of NumericParseError (empty tuple on success)

    Raises:
        TypeError: If style is not a NumericStyle
        ValueError: If style has undefined bits

    Example:
        >>> parse_decimal("000,7832")
        (Decimal('0.7832'), ())
    """
    return _parse(value, style, "decimal", _to_decimal)


def try_parse_float32(
    value: str | None,
    style: NumericStyle = NumericStyle.NUMBER,
) -> tuple[bool, float]:
    """Parse to binary32, reporting only success and value.

    Returns:
        (True, value) on success, (False, 0.0) on failure
    """
    result, _ = parse_float32(value, style)
    if result is None:
        return False, DEFAULT_FLOAT
    return True, result


def try_parse_float64(
    value: str | None,
    style: NumericStyle = NumericStyle.NUMBER,
) -> tuple[bool, float]:
    """Parse to binary64, reporting only success and value.

    Returns:
        (True, value) on success, (False, 0.0) on failure
    """
    result, _ = parse_float64(value, style)
    if result is None:
        return False, DEFAULT_FLOAT
    return True, result


def try_parse_decimal(
    value: str | None,
    style: NumericStyle = NumericStyle.NUMBER,
) -> tuple[bool, Decimal]:
    """Parse to an exact Decimal, reporting only success and value.

    Returns:
        (True, value) on success, (False, Decimal(0)) on failure
    """
    result, _ = parse_decimal(value, style)
    if result is None:
        return False, DEFAULT_DECIMAL
    return True, result
