"""Convention selector: decides which separator is the decimal sign.

The decision table is evaluated in a fixed order; the three cases are not
independent, so reordering them changes results.

1. No comma: zero or one point means '.' is decimal (INVARIANT); two or
   more points can only be group signs (ALTERNATE).
2. No point: one comma is decimal (ALTERNATE); two or more commas can only
   be group signs (INVARIANT).
3. Both: the rightmost separator is the decimal sign, because no group sign
   ever follows the decimal sign.

Known limitation: a number with exactly one group sign and
no fractional part ("1,234" meaning one thousand two hundred thirty-four) is
indistinguishable from a number with one decimal sign and is always read as
the latter. Callers who know the locale should not use this heuristic for
such input.

Python 3.13+. Zero external dependencies.
"""

from numsniff.enums import SeparatorConvention

from .scanner import ScanResult, scan_separators

__all__ = ["choose_convention", "detect_convention"]


def choose_convention(scan: ScanResult) -> SeparatorConvention:
    """Map a separator scan to a convention.

    Args:
        scan: Result of scan_separators()

    Returns:
        SeparatorConvention.INVARIANT or SeparatorConvention.ALTERNATE

    Example:
        >>> choose_convention(scan_separators("21,500,000"))
        <SeparatorConvention.INVARIANT: 'invariant'>
        >>> choose_convention(scan_separators("000,7832"))
        <SeparatorConvention.ALTERNATE: 'alternate'>
    """
    if scan.comma_count == 0:
        if scan.point_count <= 1:
            return SeparatorConvention.INVARIANT
        return SeparatorConvention.ALTERNATE

    if scan.point_count == 0:
        if scan.comma_count == 1:
            return SeparatorConvention.ALTERNATE
        return SeparatorConvention.INVARIANT

    if scan.last_comma_index > scan.last_point_index:
        return SeparatorConvention.ALTERNATE
    return SeparatorConvention.INVARIANT


def detect_convention(text: str) -> SeparatorConvention:
    """Scan text and choose its convention in one call.

    Args:
        text: Numeric text

    Returns:
        Convention the parsers would use for this text
    """
    return choose_convention(scan_separators(text))
