"""Tests for Instant."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest
from hypothesis import given

from chronofmt import Instant
from chronofmt.runtime import EPOCH

from tests.strategies import millisecond_instants


class TestInstant:
    """Construction, conversion and ordering."""

    def test_epoch(self) -> None:
        """Instant(0) is 1970-01-01T00:00:00Z."""
        assert Instant(0).to_datetime() == EPOCH
        assert str(Instant(0)) == "1970-01-01T00:00:00.000Z"

    def test_of(self) -> None:
        """Wall-clock components in UTC."""
        assert Instant.of(2010, 3, 11).epoch_millis == 1_268_265_600_000
        assert Instant.of(2010, 3, 11, 14, 5, 9, 42).epoch_millis % 1000 == 42

    def test_of_in_zone(self) -> None:
        """Components are read in the given zone."""
        riga = Instant.of(2010, 3, 11, 2, zone=ZoneInfo("Europe/Riga"))

        assert riga == Instant.of(2010, 3, 11)

    def test_from_datetime_truncates(self) -> None:
        """Microseconds below a millisecond are dropped."""
        value = datetime(2010, 3, 11, 0, 0, 0, 42_999, tzinfo=UTC)

        assert Instant.from_datetime(value) == Instant.of(2010, 3, 11, millisecond=42)

    def test_from_datetime_before_epoch_floors(self) -> None:
        """Truncation goes towards the past before 1970 too."""
        value = EPOCH - timedelta(microseconds=1)

        assert Instant.from_datetime(value).epoch_millis == -1

    def test_naive_rejected(self) -> None:
        """Naive datetimes are refused."""
        with pytest.raises(ValueError, match="timezone-aware"):
            Instant.from_datetime(datetime(2010, 3, 11))  # noqa: DTZ001

    def test_to_datetime_in_zone(self) -> None:
        """Conversion expresses the instant in the zone."""
        local = Instant.of(2010, 3, 11).to_datetime(timezone(timedelta(hours=-5)))

        assert (local.day, local.hour) == (10, 19)

    def test_ordering_and_hash(self) -> None:
        """Instants sort by time and key dicts."""
        early, late = Instant(1), Instant(2)

        assert early < late
        assert sorted([late, early]) == [early, late]
        assert {early: "a"}[Instant(1)] == "a"

    def test_now_is_recent(self) -> None:
        """now() reads the system clock."""
        assert Instant.now() > Instant.of(2020)

    @given(instant=millisecond_instants)
    def test_datetime_round_trip(self, instant: Instant) -> None:
        """PROPERTY: to_datetime and from_datetime are inverses."""
        assert Instant.from_datetime(instant.to_datetime()) == instant
