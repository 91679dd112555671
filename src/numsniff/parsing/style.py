"""Numeric-style filter: validates text under a convention and a NumericStyle.

The filter is shared by all numeric parsers. It walks the text once, checks
whitespace, sign, decimal sign and digit grouping against the style, and
reduces accepted text to a NumericLiteral whose canonical form uses '.' as
the decimal sign and carries no grouping. The parsers convert only that
canonical form, so conversion never depends on the convention.

Grouping is strict: a leading group of one to three digits, then groups of
exactly three digits, and only before the decimal sign.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from numsniff.constants import (
    CLOSE_PAREN,
    DIGITS,
    MINUS_SIGN,
    OPEN_PAREN,
    PLUS_SIGN,
    WHITESPACE,
)
from numsniff.diagnostics import Diagnostic, ErrorTemplate
from numsniff.enums import NumericStyle, SeparatorConvention

__all__ = ["NumericLiteral", "check_style", "read_numeric_literal"]

_SIGNS = frozenset((PLUS_SIGN, MINUS_SIGN))
_KNOWN_STYLE_BITS = NumericStyle.NUMBER | NumericStyle.ALLOW_PARENTHESES
_GROUP_SIZE = 3


@dataclass(frozen=True, slots=True)
class NumericLiteral:
    """Sign and digits of an accepted number, separators removed.

    Attributes:
        negative: True for a '-' sign or enclosing parentheses
        integer_digits: Digits before the decimal sign (may be empty: ".5")
        fraction_digits: Digits after the decimal sign (may be empty: "5.")
    """

    negative: bool
    integer_digits: str
    fraction_digits: str

    @property
    def scale(self) -> int:
        """Number of fractional digits, trailing zeros included."""
        return len(self.fraction_digits)

    @property
    def significant_digits(self) -> str:
        """All digits with leading zeros removed (empty for zero)."""
        return (self.integer_digits + self.fraction_digits).lstrip("0")

    def canonical(self) -> str:
        """ASCII literal with '.' as decimal sign, e.g. '-1943100.84'."""
        sign = MINUS_SIGN if self.negative else ""
        integer = self.integer_digits or "0"
        if self.fraction_digits:
            return f"{sign}{integer}.{self.fraction_digits}"
        return f"{sign}{integer}"


def check_style(style: NumericStyle) -> NumericStyle:
    """Validate a caller-supplied style.

    A bad style is a programming error, not bad input, so it raises.

    Args:
        style: NumericStyle (plain int masks are accepted)

    Returns:
        The style as a NumericStyle

    Raises:
        TypeError: If style is None or not an int
        ValueError: If style has bits no NumericStyle flag defines
    """
    if isinstance(style, bool) or not isinstance(style, int):
        msg = f"style must be a NumericStyle, got {type(style).__name__}"
        raise TypeError(msg)
    unknown = int(style) & ~int(_KNOWN_STYLE_BITS)
    if unknown:
        msg = f"style contains undefined NumericStyle bits: {unknown:#x}"
        raise ValueError(msg)
    return NumericStyle(style)


def read_numeric_literal(
    text: str,
    convention: SeparatorConvention,
    style: NumericStyle,
) -> tuple[NumericLiteral | None, Diagnostic | None]:
    """Validate text and extract its sign and digits.

    Args:
        text: Raw numeric text
        convention: Convention assigning the decimal and group signs
        style: Accepted textual forms

    Returns:
        Tuple of (literal, diagnostic):
        - literal: NumericLiteral, or None if the text was rejected
        - diagnostic: Reason for rejection, or None on success

    Example:
        >>> literal, diagnostic = read_numeric_literal(
        ...     " 1.943.100,84 ", SeparatorConvention.ALTERNATE, NumericStyle.NUMBER
        ... )
        >>> literal.canonical()
        '1943100.84'
    """
    conv = convention.value
    start = 0
    end = len(text)

    while start < end and text[start] in WHITESPACE:
        start += 1
    if start > 0 and NumericStyle.ALLOW_LEADING_WHITE not in style:
        return None, ErrorTemplate.whitespace_not_allowed(text, 0, conv)

    while end > start and text[end - 1] in WHITESPACE:
        end -= 1
    if end < len(text) and start < end and NumericStyle.ALLOW_TRAILING_WHITE not in style:
        return None, ErrorTemplate.whitespace_not_allowed(text, end, conv)

    negative = False

    if start < end and text[start] == OPEN_PAREN:
        if NumericStyle.ALLOW_PARENTHESES not in style:
            return None, ErrorTemplate.parentheses_not_allowed(text, start, conv)
        if end - start < 2 or text[end - 1] != CLOSE_PAREN:
            return None, ErrorTemplate.parentheses_unbalanced(text, start, conv)
        negative = True
        start += 1
        end -= 1
    else:
        signed = False
        if start < end and text[start] in _SIGNS:
            if NumericStyle.ALLOW_LEADING_SIGN not in style:
                return None, ErrorTemplate.sign_not_allowed(text, start, conv)
            negative = text[start] == MINUS_SIGN
            signed = True
            start += 1
            # A leading sign must touch the digits: "- 5" is rejected.
            if start < end and text[start] in WHITESPACE:
                return None, ErrorTemplate.whitespace_not_allowed(text, start, conv)
        if start < end and text[end - 1] in _SIGNS:
            if signed or NumericStyle.ALLOW_TRAILING_SIGN not in style:
                return None, ErrorTemplate.sign_not_allowed(text, end - 1, conv)
            negative = text[end - 1] == MINUS_SIGN
            end -= 1
            # Trailing whitespace may also sit before a trailing sign: "5 -".
            sign_at = end
            while end > start and text[end - 1] in WHITESPACE:
                end -= 1
            if end < sign_at and NumericStyle.ALLOW_TRAILING_WHITE not in style:
                return None, ErrorTemplate.whitespace_not_allowed(text, end, conv)

    return _read_digits(text, start, end, negative, convention, style)


def _read_digits(
    text: str,
    start: int,
    end: int,
    negative: bool,
    convention: SeparatorConvention,
    style: NumericStyle,
) -> tuple[NumericLiteral | None, Diagnostic | None]:
    """Read digits, decimal sign and group signs from text[start:end]."""
    conv = convention.value
    decimal_sign = convention.decimal_sign
    group_sign = convention.group_sign

    integer: list[str] = []
    fraction: list[str] = []
    in_fraction = False
    grouped = False
    last_group_at = -1
    run = 0  # digits since the last group sign

    for index in range(start, end):
        char = text[index]
        if char in DIGITS:
            if in_fraction:
                fraction.append(char)
            else:
                integer.append(char)
                run += 1
        elif char == decimal_sign:
            if NumericStyle.ALLOW_DECIMAL_POINT not in style:
                return None, ErrorTemplate.decimal_sign_not_allowed(text, index, conv)
            if in_fraction:
                return None, ErrorTemplate.decimal_sign_repeated(text, index, conv)
            if grouped and run != _GROUP_SIZE:
                return None, ErrorTemplate.grouping_malformed(text, index, conv)
            in_fraction = True
        elif char == group_sign:
            if NumericStyle.ALLOW_THOUSANDS not in style:
                return None, ErrorTemplate.grouping_not_allowed(text, index, conv)
            if in_fraction or not _group_complete(run, grouped):
                return None, ErrorTemplate.grouping_malformed(text, index, conv)
            grouped = True
            last_group_at = index
            run = 0
        elif char in _SIGNS:
            return None, ErrorTemplate.sign_not_allowed(text, index, conv)
        elif char in (OPEN_PAREN, CLOSE_PAREN):
            if NumericStyle.ALLOW_PARENTHESES not in style:
                return None, ErrorTemplate.parentheses_not_allowed(text, index, conv)
            return None, ErrorTemplate.parentheses_unbalanced(text, index, conv)
        else:
            return None, ErrorTemplate.invalid_character(text, index, conv)

    if grouped and not in_fraction and run != _GROUP_SIZE:
        return None, ErrorTemplate.grouping_malformed(text, last_group_at, conv)

    if not integer and not fraction:
        return None, ErrorTemplate.no_digits(text, conv)

    literal = NumericLiteral(
        negative=negative,
        integer_digits="".join(integer),
        fraction_digits="".join(fraction),
    )
    return literal, None


def _group_complete(run: int, grouped: bool) -> bool:
    """Whether the digits before a group sign form a valid group."""
    if grouped:
        return run == _GROUP_SIZE
    return 1 <= run <= _GROUP_SIZE
