"""Codes and records that describe why a numeric string was rejected.

Every failure carries a DiagnosticCode, an optional SourceSpan pointing at the
offending character, and a hint. Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
    "FrozenErrorContext",
    "SourceSpan",
]


class ErrorCategory(StrEnum):
    """Coarse class of a NumericParseError.

    A StrEnum, so log records and JSON output carry "input", "range" and so
    on as plain strings.

    Categories:
        INPUT: Absent, empty, whitespace-only or non-string input
        PARSE: Text rejected under the chosen convention and style
        RANGE: Value outside the target type's range or precision
        LOCALE: Locale lookup failure (unknown or unsupported locale)
    """

    INPUT = "input"
    PARSE = "parse"
    RANGE = "range"
    LOCALE = "locale"


@dataclass(frozen=True, slots=True)
class FrozenErrorContext:
    """What was being parsed when an error occurred.

    Attributes:
        input_value: String that failed to parse (empty if not applicable)
        convention: Separator convention chosen for the input (empty if the
            scanner never ran)
        parse_type: Target type ('float32', 'float64', 'decimal', 'locale')
        locale_code: Locale looked up (locale bridge only)
    """

    input_value: str = ""
    convention: str = ""
    parse_type: str = ""
    locale_code: str = ""


class DiagnosticCode(Enum):
    """Stable numeric identifiers for every failure.

    Ranges:
        1000-1999: Input errors (nothing to parse)
        2000-2999: Parse errors (text rejected under convention and style)
        3000-3999: Range errors (target type cannot hold the value)
        4000-4999: Locale errors (locale bridge)
    """

    # Input errors (1000-1999)
    INPUT_BLANK = 1001
    INPUT_NOT_STRING = 1002

    # Parse errors (2000-2999)
    INVALID_CHARACTER = 2001
    WHITESPACE_NOT_ALLOWED = 2002
    SIGN_NOT_ALLOWED = 2003
    PARENTHESES_NOT_ALLOWED = 2004
    PARENTHESES_UNBALANCED = 2005
    DECIMAL_SIGN_NOT_ALLOWED = 2006
    DECIMAL_SIGN_REPEATED = 2007
    GROUPING_NOT_ALLOWED = 2008
    GROUPING_MALFORMED = 2009
    NO_DIGITS = 2010

    # Range errors (3000-3999)
    OUT_OF_RANGE = 3001
    PRECISION_EXCEEDED = 3002

    # Locale errors (4000-4999)
    LOCALE_UNKNOWN = 4001
    LOCALE_CONVENTION_UNSUPPORTED = 4002


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Characters of the input a diagnostic points at.

    Numeric input is a single line, so a span is just a half-open range of
    character offsets (code points, not bytes).

    Attributes:
        start: Offset of the first character (0-indexed)
        end: Offset past the last character
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Reject negative or reversed ranges.

        Raises:
            ValueError: If start < 0 or end < start
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) is before start ({self.start})"
            raise ValueError(msg)

    @property
    def column(self) -> int:
        """1-indexed column of the first character."""
        return self.start + 1

    @classmethod
    def at(cls, position: int) -> "SourceSpan":
        """Span covering the single character at ``position``."""
        return cls(start=position, end=position + 1)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One reason a string was rejected, readable by people and by tools.

    Attributes:
        code: DiagnosticCode identifying the failure
        message: Sentence naming the problem and the input
        span: Location of the offending character (None if not applicable)
        hint: How to make the input acceptable
        convention: Convention the text was read under (None if not applicable)
        severity: "error" for every parse failure
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    convention: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """The message alone."""
        return self.message

    def format_error(self) -> str:
        """Render with the default (RUST) DiagnosticFormatter.

        Example output:
            error[GROUPING_MALFORMED]: Malformed digit grouping at position 4 in '1,23.5'
              --> column 5
              = convention: invariant
              = help: The first group has one to three digits, every later group ...
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
