"""Enumerations for numsniff type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion and IntFlag for
combinable style options.

Python 3.13+.
"""

from enum import IntFlag, StrEnum

from .constants import (
    ALTERNATE_REFERENCE_LOCALE,
    COMMA,
    INVARIANT_REFERENCE_LOCALE,
    POINT,
)

__all__ = [
    "NumericStyle",
    "SeparatorConvention",
]


class SeparatorConvention(StrEnum):
    """Assignment of '.' and ',' to the decimal-sign and grouping-sign roles.

    StrEnum provides automatic string conversion: str(SeparatorConvention.INVARIANT) == "invariant"

    The two conventions are fixed constant data. Nothing about them is
    configurable or mutated at runtime.
    """

    INVARIANT = "invariant"
    """Decimal sign '.', grouping sign ',': 1,943,100.84"""

    ALTERNATE = "alternate"
    """Decimal sign ',', grouping sign '.': 1.943.100,84"""

    @property
    def decimal_sign(self) -> str:
        """Character separating the integer and fractional parts."""
        return POINT if self is SeparatorConvention.INVARIANT else COMMA

    @property
    def group_sign(self) -> str:
        """Character separating digit groups in the integer part."""
        return COMMA if self is SeparatorConvention.INVARIANT else POINT

    @property
    def reference_locale(self) -> str:
        """CLDR locale code whose number symbols match this convention."""
        if self is SeparatorConvention.INVARIANT:
            return INVARIANT_REFERENCE_LOCALE
        return ALTERNATE_REFERENCE_LOCALE


class NumericStyle(IntFlag):
    """Textual forms accepted by the numeric parsers.

    Flag values mirror System.Globalization.NumberStyles so that style masks
    stored by systems exchanging the same data keep their meaning. Styles
    that have no counterpart here (exponent, currency symbol, hex) are not
    supported.

    The style never influences which convention is chosen; it only decides
    whether the text is accepted under that convention.

    Example:
        >>> style = NumericStyle.NUMBER & ~NumericStyle.ALLOW_THOUSANDS
        >>> NumericStyle.ALLOW_THOUSANDS in style
        False
    """

    NONE = 0
    ALLOW_LEADING_WHITE = 0x0001
    ALLOW_TRAILING_WHITE = 0x0002
    ALLOW_LEADING_SIGN = 0x0004
    ALLOW_TRAILING_SIGN = 0x0008
    ALLOW_PARENTHESES = 0x0010
    ALLOW_DECIMAL_POINT = 0x0020
    ALLOW_THOUSANDS = 0x0040

    INTEGER = ALLOW_LEADING_WHITE | ALLOW_TRAILING_WHITE | ALLOW_LEADING_SIGN
    FLOAT = INTEGER | ALLOW_DECIMAL_POINT
    NUMBER = INTEGER | ALLOW_TRAILING_SIGN | ALLOW_DECIMAL_POINT | ALLOW_THOUSANDS
