"""Tests for two-digit year resolution."""

from __future__ import annotations

from datetime import UTC

import pytest
from hypothesis import given

from chronofmt import ISO, Instant, formatter
from chronofmt.parsing import current_pivot_year, resolve_two_digit_year

from tests.strategies import pivot_years, two_digit_years


class TestResolveTwoDigitYear:
    """The window is the hundred years ending at the pivot."""

    @pytest.mark.parametrize(
        ("two_digit", "expected"),
        [(49, 2049), (50, 2050), (51, 1951), (0, 2000), (99, 1999)],
    )
    def test_pivot_2050(self, two_digit: int, expected: int) -> None:
        """Pivot 2050 covers 1951 through 2050."""
        assert resolve_two_digit_year(two_digit, 2050) == expected

    def test_pivot_on_century(self) -> None:
        """Pivot 2000 covers 1901 through 2000."""
        assert resolve_two_digit_year(0, 2000) == 2000
        assert resolve_two_digit_year(1, 2000) == 1901

    @given(two_digit=two_digit_years, pivot=pivot_years)
    def test_result_in_window(self, two_digit: int, pivot: int) -> None:
        """PROPERTY: the year ends in the digits and lies in [pivot-99, pivot]."""
        year = resolve_two_digit_year(two_digit, pivot)

        assert year % 100 == two_digit
        assert pivot - 99 <= year <= pivot


class TestFormatterPivot:
    """yy parsing through formatters."""

    @pytest.mark.parametrize(
        ("text", "year"),
        [("11/03/49", 2049), ("11/03/50", 2050), ("11/03/51", 1951)],
    )
    def test_explicit_pivot(self, text: str, year: int) -> None:
        """with_pivot_year fixes the window."""
        fmt = formatter("dd/MM/yy").with_pivot_year(2050)

        assert fmt.parse(text) == Instant.of(year, 3, 11)

    def test_more_digits_are_taken_literally(self) -> None:
        """yy reading four digits is a full year, not pivoted."""
        fmt = formatter("dd/MM/yy").with_pivot_year(2050)

        assert fmt.parse("11/03/1851") == Instant.of(1851, 3, 11)

    def test_default_pivot_is_current_year(self) -> None:
        """Without a pivot, '00' lands within the last hundred years."""
        this_year = current_pivot_year(ISO, UTC)
        parsed = formatter("yy").parse("00").to_datetime().year

        assert this_year - 99 <= parsed <= this_year
        assert parsed % 100 == 0

    def test_print_then_parse(self) -> None:
        """Two-digit years round-trip inside the window."""
        fmt = formatter("yy-MM-dd").with_pivot_year(2050)
        instant = Instant.of(1999, 12, 31)

        assert fmt.parse(fmt.print(instant)) == instant
