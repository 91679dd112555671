"""Diagnostic factories for every rejection the parsers and locale bridge report.

Messages quote the input with repr() so invisible characters show up in logs.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]


def _at(
    code: DiagnosticCode,
    message: str,
    position: int,
    hint: str,
    convention: str,
) -> Diagnostic:
    """Diagnostic pointing at one character of the input."""
    return Diagnostic(
        code=code,
        message=message,
        span=SourceSpan.at(position),
        hint=hint,
        convention=convention,
    )


class ErrorTemplate:
    """Builds a Diagnostic for each DiagnosticCode.

    Callers never format diagnostic text themselves, so the wording of each
    failure lives in exactly one place and tests can compare against it.
    Positional parse errors take (value, position, convention), where
    position indexes the offending character of value.
    """

    # Input errors (1000-1999)

    @staticmethod
    def input_blank() -> Diagnostic:
        """None, empty, or whitespace-only input."""
        return Diagnostic(
            code=DiagnosticCode.INPUT_BLANK,
            message="Input is empty or contains only whitespace",
            hint="Reject blank values before parsing, or treat them as missing",
        )

    @staticmethod
    def input_not_string(type_name: str) -> Diagnostic:
        """Input of a type other than str (type_name is its __name__)."""
        return Diagnostic(
            code=DiagnosticCode.INPUT_NOT_STRING,
            message=f"Expected text, got {type_name}",
            hint="Only str input is parsed; convert bytes with .decode() first",
        )

    # Parse errors (2000-2999)

    @staticmethod
    def invalid_character(value: str, position: int, convention: str) -> Diagnostic:
        return _at(
            DiagnosticCode.INVALID_CHARACTER,
            f"Unexpected character {value[position]!r} at position {position} in {value!r}",
            position,
            "Only ASCII digits, '.', ',', a sign and surrounding whitespace are accepted",
            convention,
        )

    @staticmethod
    def whitespace_not_allowed(value: str, position: int, convention: str) -> Diagnostic:
        return _at(
            DiagnosticCode.WHITESPACE_NOT_ALLOWED,
            f"Whitespace at position {position} in {value!r} is not allowed by the style",
            position,
            "Strip the text or add ALLOW_LEADING_WHITE / ALLOW_TRAILING_WHITE",
            convention,
        )

    @staticmethod
    def sign_not_allowed(value: str, position: int, convention: str) -> Diagnostic:
        """Sign the style forbids, or a second sign in the same literal."""
        return _at(
            DiagnosticCode.SIGN_NOT_ALLOWED,
            f"Sign {value[position]!r} at position {position} in {value!r} is not allowed",
            position,
            "Use a single leading sign, or add ALLOW_LEADING_SIGN / ALLOW_TRAILING_SIGN",
            convention,
        )

    @staticmethod
    def parentheses_not_allowed(value: str, position: int, convention: str) -> Diagnostic:
        return _at(
            DiagnosticCode.PARENTHESES_NOT_ALLOWED,
            f"Parenthesis at position {position} in {value!r} is not allowed by the style",
            position,
            "Add ALLOW_PARENTHESES to accept accounting negatives like '(23,66)'",
            convention,
        )

    @staticmethod
    def parentheses_unbalanced(value: str, position: int, convention: str) -> Diagnostic:
        """Parenthesis without a partner, or one that does not enclose the number.

        The position is the stray parenthesis, or the opening one when the
        text does not end with its partner.
        """
        return _at(
            DiagnosticCode.PARENTHESES_UNBALANCED,
            f"Unbalanced parenthesis at position {position} in {value!r}",
            position,
            "A negative in parentheses must enclose the whole number",
            convention,
        )

    @staticmethod
    def decimal_sign_not_allowed(value: str, position: int, convention: str) -> Diagnostic:
        return _at(
            DiagnosticCode.DECIMAL_SIGN_NOT_ALLOWED,
            f"Decimal sign at position {position} in {value!r} is not allowed by the style",
            position,
            "Add ALLOW_DECIMAL_POINT to accept fractional values",
            convention,
        )

    @staticmethod
    def decimal_sign_repeated(value: str, position: int, convention: str) -> Diagnostic:
        """Second decimal sign (position is the second one)."""
        return _at(
            DiagnosticCode.DECIMAL_SIGN_REPEATED,
            f"Second decimal sign at position {position} in {value!r}",
            position,
            "A number has at most one decimal sign",
            convention,
        )

    @staticmethod
    def grouping_not_allowed(value: str, position: int, convention: str) -> Diagnostic:
        return _at(
            DiagnosticCode.GROUPING_NOT_ALLOWED,
            f"Group sign at position {position} in {value!r} is not allowed by the style",
            position,
            "Add ALLOW_THOUSANDS to accept grouped digits",
            convention,
        )

    @staticmethod
    def grouping_malformed(value: str, position: int, convention: str) -> Diagnostic:
        """Group sign that does not close a well-formed digit group.

        Args:
            value: The input text
            position: Index of the separator that closes the bad group (the
                last group sign when the final group is short)
            convention: Convention the text was read under
        """
        return _at(
            DiagnosticCode.GROUPING_MALFORMED,
            f"Malformed digit grouping at position {position} in {value!r}",
            position,
            "The first group has one to three digits, every later group exactly "
            "three, and no group sign follows the decimal sign",
            convention,
        )

    @staticmethod
    def no_digits(value: str, convention: str) -> Diagnostic:
        return Diagnostic(
            code=DiagnosticCode.NO_DIGITS,
            message=f"No digits in {value!r}",
            hint="A number needs at least one digit",
            convention=convention,
        )

    # Range errors (3000-3999)

    @staticmethod
    def out_of_range(value: str, parse_type: str, convention: str) -> Diagnostic:
        """Magnitude a binary float type cannot hold ('float32' or 'float64')."""
        return Diagnostic(
            code=DiagnosticCode.OUT_OF_RANGE,
            message=f"Value {value!r} is outside the range of {parse_type}",
            hint="Use parse_float64() or parse_decimal() for larger magnitudes",
            convention=convention,
        )

    @staticmethod
    def precision_exceeded(
        value: str,
        digits: int,
        scale: int,
        convention: str,
    ) -> Diagnostic:
        """Literal needs a larger coefficient or scale than an exact decimal holds.

        Args:
            value: The input text
            digits: Digits in the coefficient, leading zeros excluded
            scale: Digits after the decimal sign, trailing zeros included
            convention: Convention the text was read under
        """
        msg = (
            f"Value {value!r} has {digits} significant digit(s) and scale {scale}, "
            "exceeding the exact decimal bounds"
        )
        return Diagnostic(
            code=DiagnosticCode.PRECISION_EXCEEDED,
            message=msg,
            hint=(
                "Exact decimals hold a coefficient up to 2**96 - 1 "
                "and at most 28 fractional digits"
            ),
            convention=convention,
        )

    # Locale errors (4000-4999)

    @staticmethod
    def locale_unknown(locale_code: str) -> Diagnostic:
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNKNOWN,
            message=f"Unknown locale '{locale_code}'",
            hint="Use BCP 47 or POSIX locale codes (e.g., 'en_US', 'de-DE')",
        )

    @staticmethod
    def locale_convention_unsupported(
        locale_code: str,
        decimal_symbol: str,
        group_symbol: str,
    ) -> Diagnostic:
        """Locale whose CLDR decimal/group pair matches neither convention."""
        msg = (
            f"Locale '{locale_code}' uses decimal {decimal_symbol!r} and group "
            f"{group_symbol!r}, which match no supported convention"
        )
        return Diagnostic(
            code=DiagnosticCode.LOCALE_CONVENTION_UNSUPPORTED,
            message=msg,
            hint="Only '.'/',' and ','/'.' decimal/group pairs are supported",
        )
