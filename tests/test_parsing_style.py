"""Tests for the numeric-style filter.

read_numeric_literal() is exercised directly with an explicit convention so
each rejection rule can be reached independently of the selector.
"""

from __future__ import annotations

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from numsniff.diagnostics import DiagnosticCode
from numsniff.enums import NumericStyle, SeparatorConvention
from numsniff.parsing import NumericLiteral, read_numeric_literal
from numsniff.parsing.style import check_style

from tests.strategies import whitespace

INVARIANT = SeparatorConvention.INVARIANT
ALTERNATE = SeparatorConvention.ALTERNATE
NUMBER = NumericStyle.NUMBER


def _code(
    text: str,
    convention: SeparatorConvention = INVARIANT,
    style: NumericStyle = NUMBER,
) -> DiagnosticCode:
    """Diagnostic code for a rejected text."""
    literal, diagnostic = read_numeric_literal(text, convention, style)
    assert literal is None
    assert diagnostic is not None
    return diagnostic.code


class TestNumericLiteral:
    """Test NumericLiteral helpers."""

    def test_canonical_with_fraction(self) -> None:
        """Canonical form uses '.' and no grouping."""
        literal = NumericLiteral(negative=True, integer_digits="1943100", fraction_digits="84")
        assert literal.canonical() == "-1943100.84"

    def test_canonical_empty_integer(self) -> None:
        """An empty integer part becomes '0'."""
        literal = NumericLiteral(negative=False, integer_digits="", fraction_digits="5")
        assert literal.canonical() == "0.5"

    def test_canonical_without_fraction(self) -> None:
        """No fraction means no decimal sign."""
        literal = NumericLiteral(negative=False, integer_digits="15", fraction_digits="")
        assert literal.canonical() == "15"

    def test_scale_counts_trailing_zeros(self) -> None:
        """Scale is the number of fractional digits."""
        literal = NumericLiteral(negative=False, integer_digits="15", fraction_digits="000")
        assert literal.scale == 3

    def test_significant_digits(self) -> None:
        """Leading zeros are not significant."""
        literal = NumericLiteral(negative=False, integer_digits="000", fraction_digits="7832")
        assert literal.significant_digits == "7832"
        zero = NumericLiteral(negative=False, integer_digits="0", fraction_digits="00")
        assert zero.significant_digits == ""


class TestAccepted:
    """Texts the default style accepts."""

    @pytest.mark.parametrize(
        ("text", "convention", "canonical"),
        [
            ("1,943,100.84", INVARIANT, "1943100.84"),
            ("1.943.100,84", ALTERNATE, "1943100.84"),
            (" \t-15,0\n", ALTERNATE, "-15.0"),
            ("+7", INVARIANT, "7"),
            ("7-", INVARIANT, "-7"),
            ("7+", INVARIANT, "7"),
            ("123,456", INVARIANT, "123456"),
            ("1,234.", INVARIANT, "1234"),
            (".5", INVARIANT, "0.5"),
            ("000,7832", ALTERNATE, "000.7832"),
        ],
    )
    def test_accepted(self, text: str, convention: SeparatorConvention, canonical: str) -> None:
        """Accepted text reduces to its canonical literal."""
        literal, diagnostic = read_numeric_literal(text, convention, NUMBER)
        assert diagnostic is None
        assert literal is not None
        assert literal.canonical() == canonical

    def test_parentheses_mark_negative(self) -> None:
        """'(x)' is negative under ALLOW_PARENTHESES."""
        style = NUMBER | NumericStyle.ALLOW_PARENTHESES
        literal, _ = read_numeric_literal(" (23,66) ", ALTERNATE, style)
        assert literal == NumericLiteral(negative=True, integer_digits="23", fraction_digits="66")


class TestWhitespace:
    """Leading and trailing whitespace rules."""

    def test_leading_rejected(self) -> None:
        """Leading whitespace needs ALLOW_LEADING_WHITE."""
        style = NumericStyle.ALLOW_TRAILING_WHITE
        assert _code(" 5", style=style) is DiagnosticCode.WHITESPACE_NOT_ALLOWED

    def test_trailing_rejected(self) -> None:
        """Trailing whitespace needs ALLOW_TRAILING_WHITE."""
        style = NumericStyle.ALLOW_LEADING_WHITE
        _, diagnostic = read_numeric_literal("5 ", INVARIANT, style)
        assert diagnostic is not None
        assert diagnostic.code is DiagnosticCode.WHITESPACE_NOT_ALLOWED
        assert diagnostic.span is not None
        assert diagnostic.span.start == 1

    def test_inner_whitespace_rejected(self) -> None:
        """Whitespace between digits is never accepted."""
        assert _code("1 000") is DiagnosticCode.INVALID_CHARACTER

    def test_non_breaking_space_rejected(self) -> None:
        """Only ASCII whitespace counts as padding."""
        assert _code("\u00a05") is DiagnosticCode.INVALID_CHARACTER

    @given(lead=whitespace, trail=whitespace)
    def test_padding_accepted(self, lead: str, trail: str) -> None:
        """Any ASCII padding is stripped under NUMBER."""
        event(f"padded={bool(lead or trail)}")
        literal, _ = read_numeric_literal(f"{lead}42{trail}", INVARIANT, NUMBER)
        assert literal is not None
        assert literal.canonical() == "42"


class TestSigns:
    """Sign placement rules."""

    def test_leading_sign_not_allowed(self) -> None:
        """Leading sign needs ALLOW_LEADING_SIGN."""
        assert _code("-5", style=NumericStyle.NONE) is DiagnosticCode.SIGN_NOT_ALLOWED

    def test_trailing_sign_not_allowed(self) -> None:
        """Trailing sign needs ALLOW_TRAILING_SIGN."""
        assert _code("5-", style=NumericStyle.FLOAT) is DiagnosticCode.SIGN_NOT_ALLOWED

    def test_two_signs_rejected(self) -> None:
        """A number has at most one sign."""
        assert _code("-5-") is DiagnosticCode.SIGN_NOT_ALLOWED
        assert _code("--5") is DiagnosticCode.SIGN_NOT_ALLOWED

    def test_whitespace_before_trailing_sign(self) -> None:
        """Trailing whitespace may separate the digits from a trailing sign."""
        literal, _ = read_numeric_literal("5 \t- ", INVARIANT, NUMBER)
        assert literal is not None
        assert literal.canonical() == "-5"

    def test_whitespace_before_trailing_sign_needs_trailing_white(self) -> None:
        """Without ALLOW_TRAILING_WHITE the gap is rejected at its position."""
        style = NumericStyle.ALLOW_TRAILING_SIGN
        _, diagnostic = read_numeric_literal("5 -", INVARIANT, style)
        assert diagnostic is not None
        assert diagnostic.code is DiagnosticCode.WHITESPACE_NOT_ALLOWED
        assert diagnostic.span is not None
        assert diagnostic.span.start == 1

    @pytest.mark.parametrize("text", ["- 5", "+\t5", " - 1.5 "])
    def test_whitespace_after_leading_sign_rejected(self, text: str) -> None:
        """A leading sign must be followed directly by the number."""
        assert _code(text) is DiagnosticCode.WHITESPACE_NOT_ALLOWED

    def test_inner_sign_rejected(self) -> None:
        """A sign between digits is rejected at its position."""
        _, diagnostic = read_numeric_literal("1-2", INVARIANT, NUMBER)
        assert diagnostic is not None
        assert diagnostic.code is DiagnosticCode.SIGN_NOT_ALLOWED
        assert diagnostic.span is not None
        assert diagnostic.span.start == 1


class TestParentheses:
    """Parenthesised negatives."""

    def test_not_allowed_by_default(self) -> None:
        """NUMBER does not include ALLOW_PARENTHESES."""
        assert _code("(5)") is DiagnosticCode.PARENTHESES_NOT_ALLOWED
        assert _code("5)") is DiagnosticCode.PARENTHESES_NOT_ALLOWED

    @pytest.mark.parametrize("text", ["(5", "5)", "(", "(5))", "((5)"])
    def test_unbalanced(self, text: str) -> None:
        """Parentheses must enclose the whole number exactly once."""
        style = NUMBER | NumericStyle.ALLOW_PARENTHESES
        assert _code(text, style=style) is DiagnosticCode.PARENTHESES_UNBALANCED

    def test_sign_inside_parentheses_rejected(self) -> None:
        """'(-5)' is not a double negative."""
        style = NUMBER | NumericStyle.ALLOW_PARENTHESES
        assert _code("(-5)", style=style) is DiagnosticCode.SIGN_NOT_ALLOWED


class TestDecimalSign:
    """Decimal sign rules."""

    def test_not_allowed(self) -> None:
        """Decimal sign needs ALLOW_DECIMAL_POINT."""
        assert _code("1.5", style=NumericStyle.INTEGER) is DiagnosticCode.DECIMAL_SIGN_NOT_ALLOWED

    def test_repeated(self) -> None:
        """A second decimal sign is rejected."""
        assert _code("1,5,6", ALTERNATE) is DiagnosticCode.DECIMAL_SIGN_REPEATED
        assert _code("1.234,5,6", ALTERNATE) is DiagnosticCode.DECIMAL_SIGN_REPEATED

    def test_wrong_separator_is_group_sign(self) -> None:
        """Under ALTERNATE a '.' is a group sign, not a decimal sign."""
        assert _code("1.5", ALTERNATE) is DiagnosticCode.GROUPING_MALFORMED


class TestGrouping:
    """Digit grouping rules."""

    def test_not_allowed(self) -> None:
        """Group sign needs ALLOW_THOUSANDS."""
        assert _code("1,000", style=NumericStyle.FLOAT) is DiagnosticCode.GROUPING_NOT_ALLOWED

    @pytest.mark.parametrize(
        "text",
        [
            ",123",  # empty leading group
            "1234,567",  # leading group too long
            "1,23",  # short trailing group
            "1,2345",  # long trailing group
            "1,23.5",  # short group before the decimal sign
            "1,,234",  # empty group
            "1.5,000",  # group sign after the decimal sign
        ],
    )
    def test_malformed(self, text: str) -> None:
        """Groups must be 1-3 digits, then exactly 3, before the decimal sign."""
        assert _code(text) is DiagnosticCode.GROUPING_MALFORMED

    def test_malformed_position(self) -> None:
        """Position points at the separator ending the bad group."""
        _, diagnostic = read_numeric_literal("1,23.5", INVARIANT, NUMBER)
        assert diagnostic is not None
        assert diagnostic.span is not None
        assert diagnostic.span.start == 4


class TestOtherRejections:
    """Characters and shapes outside the grammar."""

    @pytest.mark.parametrize("text", ["1e5", "0x1F", "NaN", "Infinity", "\u0661\u0662", "12a"])
    def test_invalid_character(self, text: str) -> None:
        """Exponents, hex, special values and non-ASCII digits are rejected."""
        assert _code(text) is DiagnosticCode.INVALID_CHARACTER

    @pytest.mark.parametrize("text", ["-", "+", ".", "-.", " - "])
    def test_no_digits(self, text: str) -> None:
        """Text without digits is rejected."""
        assert _code(text) is DiagnosticCode.NO_DIGITS

    def test_invalid_character_message(self) -> None:
        """Message names the character, its position and the text."""
        _, diagnostic = read_numeric_literal("9392gk381", INVARIANT, NUMBER)
        assert diagnostic is not None
        assert diagnostic.message == "Unexpected character 'g' at position 4 in '9392gk381'"
        assert diagnostic.convention == "invariant"


class TestCheckStyle:
    """Test check_style() validation."""

    def test_returns_numeric_style(self) -> None:
        """Plain ints are converted to NumericStyle."""
        assert check_style(0x6F) == NumericStyle.NUMBER  # type: ignore[arg-type]
        assert isinstance(check_style(0x6F), NumericStyle)  # type: ignore[arg-type]

    def test_all_defined_bits_accepted(self) -> None:
        """Every defined flag combination is valid."""
        full = NumericStyle.NUMBER | NumericStyle.ALLOW_PARENTHESES
        assert check_style(full) == full

    def test_bool_rejected(self) -> None:
        """bool is an int subclass but not a style."""
        with pytest.raises(TypeError):
            check_style(True)  # type: ignore[arg-type]

    @given(bits=st.integers(min_value=0x80, max_value=2**16))
    def test_undefined_bits_rejected(self, bits: int) -> None:
        """Any bit above ALLOW_THOUSANDS is rejected."""
        with pytest.raises(ValueError, match="undefined"):
            check_style(bits)  # type: ignore[arg-type]
