"""Tests for the pattern letter directive table."""

from __future__ import annotations

import string

import pytest

from chronofmt.constants import MAX_FRACTION_DIGITS, MAX_YEAR_DIGITS
from chronofmt.enums import FieldKind, RenderMode
from chronofmt.pattern import LETTER_FIELDS, directive_for


class TestNumericDirectives:
    """Plain numbers, years and fractions."""

    @pytest.mark.parametrize(
        ("letter", "kind", "max_digits"),
        [
            ("d", FieldKind.DAY_OF_MONTH, 2),
            ("H", FieldKind.HOUR_OF_DAY, 2),
            ("D", FieldKind.DAY_OF_YEAR, 3),
            ("e", FieldKind.DAY_OF_WEEK, 1),
            ("w", FieldKind.WEEK_OF_WEEKYEAR, 2),
        ],
    )
    def test_number_limits(self, letter: str, kind: FieldKind, max_digits: int) -> None:
        """Single letters pad to one digit and read up to the field maximum."""
        directive = directive_for(letter, 1)

        assert directive is not None
        assert directive.kind is kind
        assert directive.mode is RenderMode.NUMBER
        assert directive.min_digits == 1
        assert directive.max_digits == max_digits

    def test_repeated_letter_sets_padding(self) -> None:
        """dd pads to two digits."""
        directive = directive_for("d", 2)

        assert directive is not None
        assert directive.min_digits == 2

    def test_long_run_raises_digit_limit(self) -> None:
        """A run longer than the field maximum widens the greedy limit."""
        directive = directive_for("d", 4)

        assert directive is not None
        assert directive.max_digits == 4

    def test_two_digit_year(self) -> None:
        """yy is the pivot-resolved two-digit year."""
        directive = directive_for("y", 2)

        assert directive is not None
        assert directive.mode is RenderMode.TWO_DIGIT_YEAR
        assert directive.signed

    @pytest.mark.parametrize("letter", ["y", "Y", "x"])
    def test_full_years(self, letter: str) -> None:
        """yyyy, YYYY and xxxx are signed years."""
        directive = directive_for(letter, 4)

        assert directive is not None
        assert directive.mode is RenderMode.YEAR
        assert directive.min_digits == 4
        assert directive.max_digits == MAX_YEAR_DIGITS
        assert directive.signed

    def test_fraction(self) -> None:
        """S runs are fractions accepting up to nanosecond digits."""
        directive = directive_for("S", 3)

        assert directive is not None
        assert directive.mode is RenderMode.FRACTION
        assert directive.max_digits == MAX_FRACTION_DIGITS
        assert directive.is_numeric


class TestTextDirectives:
    """Month, weekday, era and AM/PM names."""

    @pytest.mark.parametrize(
        ("count", "mode"),
        [
            (1, RenderMode.NUMBER),
            (2, RenderMode.NUMBER),
            (3, RenderMode.SHORT_TEXT),
            (4, RenderMode.LONG_TEXT),
        ],
    )
    def test_month_forms(self, count: int, mode: RenderMode) -> None:
        """M/MM are numbers, MMM abbreviated, MMMM full."""
        directive = directive_for("M", count)

        assert directive is not None
        assert directive.mode is mode

    @pytest.mark.parametrize(
        ("count", "mode"), [(3, RenderMode.SHORT_TEXT), (4, RenderMode.LONG_TEXT)]
    )
    def test_weekday_forms(self, count: int, mode: RenderMode) -> None:
        """EEE abbreviated, EEEE full."""
        directive = directive_for("E", count)

        assert directive is not None
        assert directive.kind is FieldKind.DAY_OF_WEEK
        assert directive.mode is mode
        assert not directive.is_numeric


class TestZoneDirectives:
    """Offsets, zone identifiers and zone names."""

    @pytest.mark.parametrize(
        ("letter", "count", "mode", "zulu"),
        [
            ("Z", 1, RenderMode.OFFSET, False),
            ("Z", 2, RenderMode.OFFSET_COLON, False),
            ("Z", 3, RenderMode.ZONE_ID, False),
            ("X", 1, RenderMode.OFFSET, True),
            ("X", 2, RenderMode.OFFSET, True),
            ("X", 3, RenderMode.OFFSET_COLON, True),
        ],
    )
    def test_offset_forms(self, letter: str, count: int, mode: RenderMode, zulu: bool) -> None:
        """Z and X select offset style by run length; X prints Z for UTC."""
        directive = directive_for(letter, count)

        assert directive is not None
        assert directive.mode is mode
        assert directive.zulu is zulu
        assert directive.parsable

    @pytest.mark.parametrize(
        ("count", "mode"), [(1, RenderMode.ZONE_NAME_SHORT), (4, RenderMode.ZONE_NAME_LONG)]
    )
    def test_zone_names_are_print_only(self, count: int, mode: RenderMode) -> None:
        """z renders zone names but cannot be parsed."""
        directive = directive_for("z", count)

        assert directive is not None
        assert directive.mode is mode
        assert not directive.parsable


class TestUnknownLetters:
    """Letters outside the table."""

    def test_unassigned_letters_have_no_directive(self) -> None:
        """Every ASCII letter not in the table resolves to None."""
        for letter in string.ascii_letters:
            if letter in LETTER_FIELDS:
                continue
            assert directive_for(letter, 1) is None, letter

    def test_table_covers_all_field_kinds_but_zone_id(self) -> None:
        """Every field kind except ZONE_ID (reached through ZZZ) has a letter."""
        covered = set(LETTER_FIELDS.values())

        assert set(FieldKind) - covered == {FieldKind.ZONE_ID}
