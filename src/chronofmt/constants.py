"""Shared constants for chronofmt.

This module provides centralized configuration constants used across the
pattern, runtime and parsing packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Pattern syntax: Escape and optional-section characters
- Defaults: Locale, pivot window
- Numeric limits: Digits accepted per numeric field
- Cache limits: Memory bounds for caching subsystems
- Input limits: DoS prevention via size constraints

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Pattern syntax
    "QUOTE",
    "SECTION_OPEN",
    "SECTION_CLOSE",
    # Defaults
    "DEFAULT_LOCALE",
    "PIVOT_WINDOW",
    # Numeric limits
    "MAX_YEAR_DIGITS",
    "MAX_FRACTION_DIGITS",
    "MILLIS_DIGITS",
    "MILLIS_PER_SECOND",
    # Cache limits
    "PATTERN_CACHE_SIZE",
    "MAX_LOCALE_CACHE_SIZE",
    # Input limits
    "MAX_PATTERN_LENGTH",
    # Display
    "SHOW_FORMATTERS_NAME_WIDTH",
]

# ============================================================================
# PATTERN SYNTAX
# ============================================================================

# Starts and ends a quoted literal run; doubled it stands for itself.
QUOTE = "'"

# Optional sections make a plan parse-only.
SECTION_OPEN = "["
SECTION_CLOSE = "]"

# ============================================================================
# DEFAULTS
# ============================================================================

DEFAULT_LOCALE = "en_US"

# Two-digit years resolve into [pivot - PIVOT_WINDOW + 1, pivot].
PIVOT_WINDOW = 100

# ============================================================================
# NUMERIC LIMITS
# ============================================================================

# Year-like fields accept a sign and up to this many digits when not
# adjacent to another numeric field.
MAX_YEAR_DIGITS = 9

# Fractions may carry nanosecond precision on input; digits beyond
# MILLIS_DIGITS are truncated since instants have millisecond resolution.
MAX_FRACTION_DIGITS = 9
MILLIS_DIGITS = 3

MILLIS_PER_SECOND = 1000

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Compiled plans keyed by pattern string (in-process only).
PATTERN_CACHE_SIZE = 512

# Locale name tables keyed by normalized locale code.
MAX_LOCALE_CACHE_SIZE = 128

# ============================================================================
# INPUT LIMITS
# ============================================================================

MAX_PATTERN_LENGTH = 1024

# ============================================================================
# DISPLAY
# ============================================================================

SHOW_FORMATTERS_NAME_WIDTH = 40
