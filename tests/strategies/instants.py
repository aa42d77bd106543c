"""Hypothesis strategies for instants and zones.

Instants stay within years 1900-2100 so every zone in the sample set has
well-defined rules and every built-in layout prints a four-digit year.

Usage:
    from hypothesis import given
    from tests.strategies.instants import instants, zone_ids

    @given(instant=instants, zone=zone_ids)
    def test_zone_round_trip(instant, zone):
        ...
"""

from __future__ import annotations

from datetime import UTC, timedelta, timezone, tzinfo
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite

from chronofmt import Instant

if TYPE_CHECKING:
    from hypothesis.strategies import SearchStrategy

# ============================================================================
# INSTANTS
# ============================================================================

_MIN_MILLIS = Instant.of(1900).epoch_millis
_MAX_MILLIS = Instant.of(2100, 12, 31, 23, 59, 59, 999).epoch_millis

# Any millisecond in the supported window.
millisecond_instants: SearchStrategy[Instant] = st.integers(
    min_value=_MIN_MILLIS, max_value=_MAX_MILLIS
).map(Instant)

# Whole-second instants: layouts without milliseconds round-trip these exactly.
instants: SearchStrategy[Instant] = st.integers(
    min_value=_MIN_MILLIS // 1000, max_value=_MAX_MILLIS // 1000
).map(lambda seconds: Instant(seconds * 1000))


@composite
def instant_by_boundary(draw: st.DrawFn) -> Instant:
    """Generate an instant with event emission for its calendar boundary.

    Events emitted:
    - instant_boundary={year_start|year_end|leap_day|week_53|normal}
    """
    boundary = draw(st.sampled_from(["year_start", "year_end", "leap_day", "week_53", "normal"]))
    year = draw(st.integers(min_value=1901, max_value=2099))

    match boundary:
        case "year_start":
            result = Instant.of(year, 1, 1)
        case "year_end":
            result = Instant.of(year, 12, 31, 23, 59, 59, 999)
        case "leap_day":
            leap_year = draw(st.sampled_from([1904, 1960, 2000, 2004, 2020, 2024, 2096]))
            result = Instant.of(leap_year, 2, 29, 12)
        case "week_53":
            # ISO years with 53 weeks
            long_year = draw(st.sampled_from([2004, 2009, 2015, 2020, 2026]))
            result = Instant.of(long_year, 12, 31)
        case _:
            result = draw(millisecond_instants)

    event(f"instant_boundary={boundary}")
    return result


# ============================================================================
# ZONES
# ============================================================================

_SAMPLE_ZONE_IDS = [
    "UTC",
    "Europe/Riga",
    "Europe/London",
    "America/New_York",
    "America/Sao_Paulo",
    "Asia/Kolkata",
    "Asia/Kathmandu",
    "Australia/Lord_Howe",
    "Pacific/Chatham",
]

zone_ids: SearchStrategy[str] = st.sampled_from(_SAMPLE_ZONE_IDS)

# Whole-minute offsets within +/-23:59.
_MAX_OFFSET_MINUTES = 23 * 60 + 59

fixed_offsets: SearchStrategy[tzinfo] = st.integers(
    min_value=-_MAX_OFFSET_MINUTES, max_value=_MAX_OFFSET_MINUTES
).map(
    lambda minutes: UTC if minutes == 0 else timezone(timedelta(minutes=minutes))
)


@composite
def zone_by_kind(draw: st.DrawFn) -> tzinfo:
    """Generate a zone with event emission for its kind.

    Events emitted:
    - zone_kind={utc|fixed|region}
    """
    kind = draw(st.sampled_from(["utc", "fixed", "region"]))
    match kind:
        case "utc":
            zone: tzinfo = UTC
        case "fixed":
            zone = draw(fixed_offsets)
        case _:
            zone = ZoneInfo(draw(zone_ids))
    event(f"zone_kind={kind}")
    return zone


# ============================================================================
# TWO-DIGIT YEARS
# ============================================================================

two_digit_years: SearchStrategy[int] = st.integers(min_value=0, max_value=99)

pivot_years: SearchStrategy[int] = st.integers(min_value=100, max_value=9000)
