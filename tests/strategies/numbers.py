"""Hypothesis strategies for separator-agnostic number parsing.

Generates numeric text in both separator conventions together with the
Decimal value it denotes. Every generated text is one the heuristic can
disambiguate; the single-group-sign case the heuristic misreads has its own
strategy.

Usage:
    from tests.strategies.numbers import formatted_numbers, lone_group_sign_numbers

Event-Emitting Strategies (HypoFuzz-Optimized):
    - formatted_numbers: Emits convention and shape events
    - lone_group_sign_numbers: Emits convention events

Python 3.13+.
"""

from __future__ import annotations

from decimal import Decimal

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite

from numsniff import SeparatorConvention

__all__ = [
    "conventions",
    "formatted_numbers",
    "group_digits",
    "lone_group_sign_numbers",
    "non_numeric_text",
    "whitespace",
]

conventions = st.sampled_from(list(SeparatorConvention))

whitespace = st.text(alphabet="\t\n\v\f\r ", max_size=3)

# Text that can never parse: at least one letter, no digits.
non_numeric_text = st.text(
    alphabet=st.characters(whitelist_categories=["L"]),
    min_size=1,
    max_size=20,
)


def group_digits(digits: str, group_sign: str) -> str:
    """Insert group_sign every three digits from the right."""
    head = len(digits) % 3 or 3
    groups = [digits[:head]] + [digits[i : i + 3] for i in range(head, len(digits), 3)]
    return group_sign.join(groups)


@composite
def formatted_numbers(draw: st.DrawFn) -> tuple[str, Decimal, SeparatorConvention]:
    """Generate (text, expected value, convention) the heuristic reads correctly.

    Shapes:
    - plain: digits only, optionally with a fraction
    - grouped_fraction: grouping plus decimal sign (both separators present)
    - grouped_multi: two or more group signs, no fraction
    """
    convention = draw(conventions)
    shape = draw(st.sampled_from(["plain", "grouped_fraction", "grouped_multi"]))
    negative = draw(st.booleans())

    match shape:
        case "plain":
            integer = draw(st.integers(min_value=0, max_value=10**12))
            fraction = draw(st.text(alphabet="0123456789", max_size=6))
            int_text = str(integer)
        case "grouped_fraction":
            integer = draw(st.integers(min_value=1_000, max_value=10**15))
            fraction = draw(st.text(alphabet="0123456789", min_size=1, max_size=6))
            int_text = group_digits(str(integer), convention.group_sign)
        case _:
            integer = draw(st.integers(min_value=1_000_000, max_value=10**15))
            fraction = ""
            int_text = group_digits(str(integer), convention.group_sign)

    text = int_text
    if fraction:
        text = f"{int_text}{convention.decimal_sign}{fraction}"
    if negative:
        text = f"-{text}"

    expected = Decimal(f"{'-' if negative else ''}{integer}.{fraction or '0'}")
    event(f"convention={convention}")
    event(f"shape={shape}")
    return text, expected, convention


@composite
def lone_group_sign_numbers(draw: st.DrawFn) -> tuple[str, Decimal, SeparatorConvention]:
    """Generate integers with exactly one group sign and no decimal sign.

    Returns:
        (text, intended integer value, convention the text was written in)
    """
    convention = draw(conventions)
    integer = draw(st.integers(min_value=1_000, max_value=999_999))
    text = group_digits(str(integer), convention.group_sign)
    event(f"convention={convention}")
    return text, Decimal(integer), convention
