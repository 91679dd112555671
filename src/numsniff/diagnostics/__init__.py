"""Diagnostic system for numsniff errors.

Provides structured error diagnostics with codes, spans and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory, FrozenErrorContext, SourceSpan
from .errors import NumericParseError, NumsniffError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCategory",
    "ErrorTemplate",
    "FrozenErrorContext",
    "NumericParseError",
    "NumsniffError",
    "OutputFormat",
    "SourceSpan",
]
