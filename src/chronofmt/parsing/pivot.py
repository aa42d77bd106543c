"""Two-digit year resolution.

A two-digit year names the year inside a PIVOT_WINDOW-wide window that
ends at the pivot year: with pivot 2050, "49" is 2049, "50" is 2050 and
"51" is 1951.

Python 3.13+. Zero external dependencies.
"""

from datetime import tzinfo

from chronofmt.constants import PIVOT_WINDOW
from chronofmt.runtime import Chronology, Instant

__all__ = ["current_pivot_year", "resolve_two_digit_year"]


def resolve_two_digit_year(two_digit: int, pivot_year: int) -> int:
    """Year ending in ``two_digit`` within [pivot_year - 99, pivot_year].

    Args:
        two_digit: Parsed value 0-99
        pivot_year: Latest year the result may take

    Example:
        >>> resolve_two_digit_year(49, 2050)
        2049
        >>> resolve_two_digit_year(51, 2050)
        1951
    """
    low = pivot_year - PIVOT_WINDOW + 1
    year = low - low % 100 + two_digit
    if year < low:
        year += 100
    return year


def current_pivot_year(chronology: Chronology, zone: tzinfo) -> int:
    """Pivot used when a formatter sets none: the current year."""
    return chronology.fields_of(Instant.now(), zone).year
