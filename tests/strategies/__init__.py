"""Hypothesis strategies for numsniff property-based testing.

Strategies are organized by domain:

- numbers: Numeric text in both separator conventions

Usage:
    from tests.strategies import formatted_numbers, non_numeric_text
"""

from .numbers import (
    conventions,
    formatted_numbers,
    group_digits,
    lone_group_sign_numbers,
    non_numeric_text,
    whitespace,
)

__all__ = [
    "conventions",
    "formatted_numbers",
    "group_digits",
    "lone_group_sign_numbers",
    "non_numeric_text",
    "whitespace",
]
