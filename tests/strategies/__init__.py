"""Hypothesis strategies for chronofmt property-based testing.

Strategies are organized by domain:

- instants: Instants, calendar boundary instants, zones and two-digit years

Usage:
    from tests.strategies import instants, instant_by_boundary
    from tests.strategies.instants import zone_ids, fixed_offsets

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - instant_by_boundary, zone_by_kind
"""

from .instants import (
    fixed_offsets,
    instant_by_boundary,
    instants,
    millisecond_instants,
    pivot_years,
    two_digit_years,
    zone_by_kind,
    zone_ids,
)

__all__ = [
    "fixed_offsets",
    "instant_by_boundary",
    "instants",
    "millisecond_instants",
    "pivot_years",
    "two_digit_years",
    "zone_by_kind",
    "zone_ids",
]
