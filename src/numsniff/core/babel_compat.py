"""Optional Babel dependency for the locale bridge.

numsniff installs in two modes:
    - Parser-only: `pip install numsniff` (no external dependencies)
    - Locale bridge: `pip install numsniff[babel]` (CLDR symbol lookup)

The parsers never import Babel. The locale bridge reaches Babel only through
get_cldr_lookup(), which fails with BabelImportError when Babel is missing, so
every Babel-backed entry point reports the same install hint.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "BabelImportError",
    "BabelNumbersProtocol",
    "CldrLookup",
    "get_cldr_lookup",
    "is_babel_available",
    "require_babel",
]


class BabelNumbersProtocol(Protocol):
    """The two babel.numbers lookups the locale bridge needs."""

    def get_decimal_symbol(
        self,
        locale: Locale | str | None = None,
        *,
        numbering_system: str = "latn",
    ) -> str:
        """CLDR decimal sign of a locale."""
        ...

    def get_group_symbol(
        self,
        locale: Locale | str | None = None,
        *,
        numbering_system: str = "latn",
    ) -> str:
        """CLDR grouping sign of a locale."""
        ...


class BabelImportError(ImportError):
    """A locale-bridge feature was used without Babel installed.

    Attributes:
        feature: Name of the feature that needed Babel
    """

    def __init__(self, feature: str) -> None:
        message = (
            f"{feature} requires Babel for CLDR number symbols. "
            "Install with: pip install numsniff[babel]"
        )
        super().__init__(message)
        self.feature = feature


@lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    """Try importing Babel once."""
    try:
        import babel  # noqa: F401, PLC0415  # pylint: disable=unused-import
    except ImportError:
        return False
    return True


def is_babel_available() -> bool:
    """Whether the optional Babel dependency can be imported."""
    return _check_babel_available()


def require_babel(feature: str) -> None:
    """Fail fast when Babel is missing.

    Args:
        feature: Name reported in the error message

    Raises:
        BabelImportError: If Babel is not installed
    """
    if not _check_babel_available():
        raise BabelImportError(feature)


@dataclass(frozen=True, slots=True)
class CldrLookup:
    """Babel entry points used to map a locale onto a convention.

    Attributes:
        locale_class: babel.Locale, for parsing locale identifiers
        unknown_locale_error: babel.core.UnknownLocaleError
        numbers: babel.numbers, for decimal and group symbols
    """

    locale_class: type[Locale]
    unknown_locale_error: type[Exception]
    numbers: BabelNumbersProtocol


def get_cldr_lookup(feature: str = "CLDR symbol lookup") -> CldrLookup:
    """Import the Babel pieces the locale bridge uses.

    Args:
        feature: Name reported if Babel is missing

    Returns:
        CldrLookup bound to the installed Babel

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel(feature)
    from babel import Locale, numbers  # noqa: PLC0415
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    return CldrLookup(
        locale_class=Locale,
        unknown_locale_error=UnknownLocaleError,
        numbers=numbers,
    )
