"""TypeIs guards for parse results.

parse_*() return (value | None, errors). A guard on the value alone narrows
it for mypy, so callers can write

    result, _ = parse_decimal(text)
    if is_valid_decimal(result):
        total += result

without checking the error tuple first. Every guard rejects None.

Python 3.13+ with TypeIs support (PEP 742).
"""

import math
import struct
from decimal import Decimal
from typing import TypeIs

__all__ = [
    "is_valid_decimal",
    "is_valid_float32",
    "is_valid_number",
]

_BINARY32 = struct.Struct("<f")


def is_valid_decimal(value: Decimal | None) -> TypeIs[Decimal]:
    """True for a finite Decimal (not None, NaN or infinity)."""
    return value is not None and value.is_finite()


def is_valid_number(value: float | None) -> TypeIs[float]:
    """True for a finite float from parse_float32() or parse_float64()."""
    return value is not None and math.isfinite(value)


def is_valid_float32(value: float | None) -> TypeIs[float]:
    """True for a finite float that binary32 holds exactly.

    Every successful parse_float32() result passes. A parse_float64() result
    passes only if narrowing it to binary32 would lose nothing.

    Example:
        >>> is_valid_float32(0.5)
        True
        >>> is_valid_float32(0.1)
        False
    """
    if not is_valid_number(value) or abs(value) > float.fromhex("0x1.fffffep+127"):
        return False
    narrowed: float = _BINARY32.unpack(_BINARY32.pack(value))[0]
    return narrowed == value
