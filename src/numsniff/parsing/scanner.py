"""Separator scanner: counts '.' and ',' and remembers where each last occurs.

The scan is the only input to the convention selector. Every other character
is ignored here; whether it is acceptable is decided later by the
numeric-style filter.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from numsniff.constants import COMMA, POINT
from numsniff.enums import SeparatorConvention

__all__ = ["ScanResult", "scan_separators"]


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Occurrence counts and last positions of the two separator candidates.

    Attributes:
        comma_count: Number of ',' characters
        last_comma_index: Index of the rightmost ',' (-1 if none)
        point_count: Number of '.' characters
        last_point_index: Index of the rightmost '.' (-1 if none)
    """

    comma_count: int
    last_comma_index: int
    point_count: int
    last_point_index: int

    def __post_init__(self) -> None:
        """Validate count/index consistency.

        Raises:
            ValueError: If a count is negative, or a count and its index
                disagree about whether the separator occurs.
        """
        for name, count, index in (
            ("comma", self.comma_count, self.last_comma_index),
            ("point", self.point_count, self.last_point_index),
        ):
            if count < 0:
                msg = f"ScanResult.{name}_count must be >= 0, got {count}"
                raise ValueError(msg)
            if (count == 0) != (index == -1):
                msg = (
                    f"ScanResult.last_{name}_index ({index}) "
                    f"inconsistent with {name}_count ({count})"
                )
                raise ValueError(msg)
            if index < -1:
                msg = f"ScanResult.last_{name}_index must be >= -1, got {index}"
                raise ValueError(msg)

    def choose_convention(self) -> SeparatorConvention:
        """Convention this scan selects. See selector.choose_convention()."""
        from .selector import choose_convention  # noqa: PLC0415 - circular

        return choose_convention(self)


def scan_separators(text: str) -> ScanResult:
    """Scan text once for '.' and ','.

    Total function: any string, including the empty one, produces a result.

    Args:
        text: Text to scan

    Returns:
        ScanResult with counts and rightmost indices

    Example:
        >>> scan_separators("1.943.100,84")
        ScanResult(comma_count=1, last_comma_index=9, point_count=2, last_point_index=5)
        >>> scan_separators("")
        ScanResult(comma_count=0, last_comma_index=-1, point_count=0, last_point_index=-1)
    """
    comma_count = 0
    point_count = 0
    last_comma_index = -1
    last_point_index = -1

    for index, char in enumerate(text):
        if char == COMMA:
            comma_count += 1
            last_comma_index = index
        elif char == POINT:
            point_count += 1
            last_point_index = index

    return ScanResult(
        comma_count=comma_count,
        last_comma_index=last_comma_index,
        point_count=point_count,
        last_point_index=last_point_index,
    )
