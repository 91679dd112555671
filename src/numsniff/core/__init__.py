"""Core utilities shared by the parsing and locale layers.

Exports:
    BabelImportError: Raised when a Babel-backed feature is used without Babel
    is_babel_available: Whether the optional Babel dependency is installed
    require_babel: Fail-fast guard for Babel-backed features

Python 3.13+.
"""

from .babel_compat import BabelImportError, is_babel_available, require_babel

__all__ = ["BabelImportError", "is_babel_available", "require_babel"]
