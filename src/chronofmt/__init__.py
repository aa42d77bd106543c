"""chronofmt - pattern-driven date-time formatting and parsing.

Formats instants as text and parses text back into instants, using either a
built-in catalog of ISO-8601 and RFC 822 layouts or user-defined patterns.
Text whose layout is unknown can be resolved against the whole catalog.

Public API:
    formatter - Formatter for a pattern string, bound to a zone (UTC default)
    Formatter - Immutable plan + zone + locale + chronology + pivot year
    unparse / print_instant - Render an instant with a formatter
    parse - Parse text with a formatter
    parse_any - Parse text with the first matching built-in layout
    try_parse / try_parse_any - Non-raising variants returning (result, errors)
    with_zone / with_locale / with_chronology / with_pivot_year - Formatter copies
    formatters, parsers, printers - Built-in registry views
    show_formatters - Print every built-in printer with a sample
    Instant - Millisecond point on the UTC timeline

Exceptions:
    ChronoFormatError - Base exception class
    PatternError - Malformed pattern
    ParseError / TrailingInputError - Text does not match the plan
    InvalidFieldsError - Parsed fields name no valid instant
    NoMatchError - No built-in layout matched
    UnsupportedOperationError - Printing a parse-only or parsing a print-only plan

Submodules:
    chronofmt.pattern - Pattern compiler and directive table
    chronofmt.runtime - Instants, zones, chronologies, printer
    chronofmt.parsing - Parse engine and two-digit year pivot
    chronofmt.registry - Built-in formatter catalog
    chronofmt.diagnostics - Error types, codes and formatting
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import (
    ChronoFormatError,
    InvalidFieldsError,
    NoMatchError,
    ParseError,
    PatternError,
    TrailingInputError,
    UnsupportedOperationError,
)
from .formatter import (
    Formatter,
    formatter,
    parse,
    print_instant,
    try_parse,
    unparse,
    with_chronology,
    with_locale,
    with_pivot_year,
    with_zone,
)
from .pattern import compile_pattern
from .registry import formatters, list_registry, parsers, printers, show_formatters
from .resolver import parse_any, try_parse_any
from .runtime import BUDDHIST, ISO, UTC, BuddhistChronology, Chronology, Instant, IsoChronology

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("chronofmt")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BUDDHIST",
    "ISO",
    "UTC",
    "BuddhistChronology",
    "ChronoFormatError",
    "Chronology",
    "Formatter",
    "Instant",
    "InvalidFieldsError",
    "IsoChronology",
    "NoMatchError",
    "ParseError",
    "PatternError",
    "TrailingInputError",
    "UnsupportedOperationError",
    "__version__",
    "compile_pattern",
    "formatter",
    "formatters",
    "list_registry",
    "parse",
    "parse_any",
    "parsers",
    "print_instant",
    "printers",
    "show_formatters",
    "try_parse",
    "try_parse_any",
    "unparse",
    "with_chronology",
    "with_locale",
    "with_pivot_year",
    "with_zone",
]
