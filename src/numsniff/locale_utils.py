"""Locale bridge: map a known locale onto one of the two separator conventions.

The parsers never need a locale. When a caller does know the locale of its
data, convention_for_locale() tells it which convention CLDR assigns, so it
can check the heuristic's choice or bypass the heuristic for inputs it
cannot disambiguate (a single group sign and no decimal sign).

Requires the optional Babel dependency; raises BabelImportError without it.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING

from .core.babel_compat import get_cldr_lookup
from .diagnostics import ErrorCategory, ErrorTemplate, FrozenErrorContext, NumericParseError
from .enums import SeparatorConvention

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "convention_for_locale",
    "get_babel_locale",
    "normalize_locale",
]

logger = logging.getLogger(__name__)


def normalize_locale(locale_code: str) -> str:
    """Convert a BCP 47 code to the POSIX form Babel expects.

    Example:
        >>> normalize_locale("de-DE")
        'de_DE'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Parse a locale code into a cached Babel Locale.

    Args:
        locale_code: Locale code (BCP 47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        BabelImportError: If Babel is not installed
        babel.core.UnknownLocaleError: If CLDR has no data for the locale
        ValueError: If the code is not a locale identifier
    """
    lookup = get_cldr_lookup("get_babel_locale")
    return lookup.locale_class.parse(normalize_locale(locale_code))


def convention_for_locale(
    locale_code: str,
) -> tuple[SeparatorConvention | None, tuple[NumericParseError, ...]]:
    """Find the separator convention CLDR assigns to a locale.

    Args:
        locale_code: BCP 47 or POSIX locale identifier

    Returns:
        Tuple of (result, errors):
        - result: Matching SeparatorConvention, or None if the locale is
          unknown or uses other symbols (e.g., fr_FR groups with a space)
        - errors: Tuple of NumericParseError (empty tuple on success)

    Raises:
        BabelImportError: If Babel is not installed

    Examples:
        >>> convention_for_locale("it-IT")
        (<SeparatorConvention.ALTERNATE: 'alternate'>, ())
        >>> convention_for_locale("en_GB")
        (<SeparatorConvention.INVARIANT: 'invariant'>, ())
    """
    lookup = get_cldr_lookup("convention_for_locale")
    context = FrozenErrorContext(locale_code=locale_code, parse_type="locale")

    try:
        locale = get_babel_locale(locale_code)
    except (lookup.unknown_locale_error, ValueError, TypeError):
        logger.debug("Unknown locale %r", locale_code)
        diagnostic = ErrorTemplate.locale_unknown(locale_code)
        return None, (NumericParseError(diagnostic, ErrorCategory.LOCALE, context=context),)

    decimal_symbol = lookup.numbers.get_decimal_symbol(locale)
    group_symbol = lookup.numbers.get_group_symbol(locale)

    for convention in SeparatorConvention:
        if (decimal_symbol, group_symbol) == (convention.decimal_sign, convention.group_sign):
            return convention, ()

    logger.debug(
        "Locale %r uses decimal %r and group %r", locale_code, decimal_symbol, group_symbol
    )
    diagnostic = ErrorTemplate.locale_convention_unsupported(
        locale_code, decimal_symbol, group_symbol
    )
    return None, (NumericParseError(diagnostic, ErrorCategory.LOCALE, context=context),)
