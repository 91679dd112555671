"""Tests for the convention selector decision table."""

from __future__ import annotations

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from numsniff.enums import SeparatorConvention
from numsniff.parsing import ScanResult, choose_convention, detect_convention, scan_separators

INVARIANT = SeparatorConvention.INVARIANT
ALTERNATE = SeparatorConvention.ALTERNATE


class TestNoComma:
    """Case 1: no comma in the text."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("15", INVARIANT),
            ("15.0", INVARIANT),
            ("482.392.923", ALTERNATE),
            ("239.482.392.923", ALTERNATE),
            ("1..2", ALTERNATE),
        ],
    )
    def test_point_count_decides(self, text: str, expected: SeparatorConvention) -> None:
        """Zero or one point is INVARIANT, two or more ALTERNATE."""
        assert detect_convention(text) is expected


class TestNoPoint:
    """Case 2: commas but no point."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("15,0", ALTERNATE),
            ("000,7832", ALTERNATE),
            ("-0,499", ALTERNATE),
            ("21,500,000", INVARIANT),
            ("1,,2", INVARIANT),
        ],
    )
    def test_comma_count_decides(self, text: str, expected: SeparatorConvention) -> None:
        """One comma is ALTERNATE, two or more INVARIANT."""
        assert detect_convention(text) is expected


class TestBothPresent:
    """Case 3: both separators present."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("15,019.33", INVARIANT),
            ("1.943.100,84", ALTERNATE),
            ("1,2.3,4", ALTERNATE),
            ("1.2,3.4", INVARIANT),
        ],
    )
    def test_rightmost_separator_is_decimal(
        self, text: str, expected: SeparatorConvention
    ) -> None:
        """The separator appearing last decides the convention."""
        assert detect_convention(text) is expected


class TestKnownLimitation:
    """A lone group sign is always read as a decimal sign."""

    def test_lone_comma_read_as_decimal(self) -> None:
        """'1,234' meant as an integer still selects ALTERNATE."""
        assert detect_convention("1,234") is ALTERNATE

    def test_lone_point_read_as_decimal(self) -> None:
        """'1.234' meant as an integer still selects INVARIANT."""
        assert detect_convention("1.234") is INVARIANT


class TestChooseConventionHypothesis:
    """Property-based tests for choose_convention()."""

    @given(
        comma_count=st.integers(min_value=0, max_value=5),
        point_count=st.integers(min_value=0, max_value=5),
        data=st.data(),
    )
    def test_decision_table(self, comma_count: int, point_count: int, data: st.DataObject) -> None:
        """Selector agrees with the three-case table for any consistent scan."""
        comma_index = data.draw(st.integers(0, 50)) if comma_count else -1
        point_index = -1
        if point_count:
            point_index = data.draw(st.integers(0, 50).filter(lambda i: i != comma_index))
        scan = ScanResult(comma_count, comma_index, point_count, point_index)

        result = choose_convention(scan)

        if comma_count == 0:
            event("case=no_comma")
            assert result is (INVARIANT if point_count <= 1 else ALTERNATE)
        elif point_count == 0:
            event("case=no_point")
            assert result is (ALTERNATE if comma_count == 1 else INVARIANT)
        else:
            event("case=both")
            assert result is (ALTERNATE if comma_index > point_index else INVARIANT)

    @given(text=st.text(alphabet="0123456789.,", max_size=30))
    def test_deterministic(self, text: str) -> None:
        """The same text always yields the same convention."""
        assert choose_convention(scan_separators(text)) is choose_convention(
            scan_separators(text)
        )
