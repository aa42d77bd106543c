"""Parsing: text to calendar fields to instants."""

from .engine import ParsedFields, parse_fields, parse_plan, parse_prefix
from .pivot import current_pivot_year, resolve_two_digit_year

__all__ = [
    "ParsedFields",
    "current_pivot_year",
    "parse_fields",
    "parse_plan",
    "parse_prefix",
    "resolve_two_digit_year",
]
