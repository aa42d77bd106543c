"""Tests for best-effort parsing against the registry."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from chronofmt import ChronoFormatError, Instant, NoMatchError, formatters, parse_any, try_parse_any
from chronofmt.registry import list_registry

from tests.strategies import millisecond_instants


class TestParseAny:
    """First parse-capable entry in name order wins."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("2010-03-11", Instant.of(2010, 3, 11)),
            ("20100311", Instant.of(2010, 3, 11)),
            ("2010-03-11T14:05:09.042Z", Instant.of(2010, 3, 11, 14, 5, 9, 42)),
            ("2010-070", Instant.of(2010, 3, 11)),
            ("2010-W10-4", Instant.of(2010, 3, 11)),
            ("Thu, 11 Mar 2010 14:05:09 +0000", Instant.of(2010, 3, 11, 14, 5, 9)),
        ],
    )
    def test_known_layouts(self, text: str, expected: Instant) -> None:
        """Common layouts resolve without naming a formatter."""
        assert parse_any(text) == expected

    def test_first_match_in_name_order(self) -> None:
        """The winner is the first accepting entry by name."""
        text = "2010-03-11"
        first = next(
            entry.name
            for entry in list_registry()
            if entry.can_parse and _accepts(entry.name, text)
        )

        assert first == "date"
        assert parse_any(text) == formatters[first].parse(text)

    def test_no_match(self) -> None:
        """Unparseable text raises NoMatchError and nothing else."""
        with pytest.raises(NoMatchError) as exc_info:
            parse_any("not a date")

        assert exc_info.value.text == "not a date"
        assert "not a date" in str(exc_info.value)

    def test_empty_text(self) -> None:
        """The empty string matches nothing."""
        with pytest.raises(NoMatchError):
            parse_any("")

    @given(text=st.text(max_size=40))
    def test_failure_containment(self, text: str) -> None:
        """PROPERTY: parse_any returns an Instant or raises NoMatchError only."""
        try:
            result = parse_any(text)
        except NoMatchError:
            return
        assert isinstance(result, Instant)

    @given(instant=millisecond_instants)
    def test_deterministic(self, instant: Instant) -> None:
        """PROPERTY: the same text always resolves to the same instant."""
        text = formatters["date-time"].print(instant)

        first = parse_any(text)
        assert parse_any(text) == first
        assert first == instant


class TestTryParseAny:
    """Non-raising variant."""

    def test_success(self) -> None:
        """Success returns the instant and no errors."""
        assert try_parse_any("2010-03-11") == (Instant.of(2010, 3, 11), ())

    def test_failure(self) -> None:
        """Failure returns None and one NoMatchError."""
        instant, errors = try_parse_any("not a date")

        assert instant is None
        assert len(errors) == 1
        assert isinstance(errors[0], NoMatchError)


def _accepts(name: str, text: str) -> bool:
    try:
        formatters[name].parse(text)
    except ChronoFormatError:
        return False
    return True
