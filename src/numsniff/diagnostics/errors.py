"""Error types returned (not raised) by the parse functions.

Each error keeps the Diagnostic it was built from, when there is one, so
callers can render it with DiagnosticFormatter or branch on its code.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, ErrorCategory, FrozenErrorContext

__all__ = ["NumericParseError", "NumsniffError"]


class NumsniffError(Exception):
    """Root of the numsniff error types.

    str(error) is the RUST rendering of the diagnostic, or the plain message
    for errors built from text.

    Attributes:
        diagnostic: Diagnostic behind the error, None for plain messages
    """

    def __init__(self, message: str | Diagnostic) -> None:
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class NumericParseError(NumsniffError):
    """Reason a numeric text could not be parsed.

    Parse functions RETURN these inside their error tuple instead of raising
    them. Malformed input is an expected outcome, not a fault.

    Attributes:
        category: Coarse error category
        context: Frozen input/convention/type context

    Example:
        >>> value, errors = parse_float64("9392gk381")
        >>> if errors:
        ...     print(errors[0].parse_type, errors[0].input_value)
        float64 9392gk381
    """

    def __init__(
        self,
        message: str | Diagnostic,
        category: ErrorCategory,
        *,
        context: FrozenErrorContext | None = None,
    ) -> None:
        super().__init__(message)
        self.category = category
        self.context = context if context is not None else FrozenErrorContext()

    @property
    def input_value(self) -> str:
        """The text that failed to parse."""
        return self.context.input_value

    @property
    def convention(self) -> str:
        """Convention the text was read under ('' if never scanned)."""
        return self.context.convention

    @property
    def parse_type(self) -> str:
        """Target type of the failed parse."""
        return self.context.parse_type
