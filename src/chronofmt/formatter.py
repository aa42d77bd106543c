"""Formatter: an immutable bundle of plan, zone, locale, chronology and pivot.

Formatters are values. Every ``with_*`` call returns a new Formatter and
leaves the original untouched, so one formatter can be shared freely across
threads and call sites.

Module-level functions mirror the methods for callers who prefer a
functional style:

    >>> fmt = formatter("yyyy-MM-dd")
    >>> unparse(fmt, Instant.of(2010, 3, 11))
    '2010-03-11'
    >>> parse(fmt, "2010-03-11") == Instant.of(2010, 3, 11)
    True

Python 3.13+. Uses Babel for locale data.
"""

from dataclasses import dataclass, field, replace
from datetime import tzinfo

from babel import Locale

from chronofmt.diagnostics import ChronoFormatError
from chronofmt.locale_utils import resolve_locale
from chronofmt.parsing import ParsedFields, parse_fields, parse_plan, parse_prefix
from chronofmt.pattern import CompiledPlan, compile_pattern
from chronofmt.runtime import ISO, UTC, Chronology, Instant, render, resolve_zone, zone_id

__all__ = [
    "Formatter",
    "formatter",
    "parse",
    "print_instant",
    "try_parse",
    "unparse",
    "with_chronology",
    "with_locale",
    "with_pivot_year",
    "with_zone",
]


def _default_locale() -> Locale:
    return resolve_locale(None)


@dataclass(frozen=True, slots=True)
class Formatter:
    """Compiled plan plus everything needed to print and parse with it.

    Attributes:
        plan: Compiled pattern
        zone: Zone for printing and for resolving zone-less text (UTC default)
        locale: Babel locale for text fields (en_US default)
        chronology: Calendar system (ISO default)
        pivot_year: Two-digit year pivot; None means the current year
        name: Registry name, or None for ad-hoc formatters

    Two formatters are interchangeable exactly when they compare equal.
    """

    plan: CompiledPlan
    zone: tzinfo = UTC
    locale: Locale = field(default_factory=_default_locale)
    chronology: Chronology = ISO
    pivot_year: int | None = None
    name: str | None = None

    @property
    def label(self) -> str:
        """Registry name if any, else the pattern."""
        return self.name if self.name is not None else self.plan.pattern

    @property
    def can_print(self) -> bool:
        """True if print() can render this plan."""
        return self.plan.can_print

    @property
    def can_parse(self) -> bool:
        """True if parse() can read this plan."""
        return self.plan.can_parse

    def with_zone(self, zone: tzinfo | str | None) -> "Formatter":
        """Copy bound to ``zone`` (tzinfo or IANA identifier).

        Raises:
            ValueError: If the identifier is unknown
        """
        return replace(self, zone=resolve_zone(zone))

    def with_locale(self, locale: Locale | str | None) -> "Formatter":
        """Copy bound to ``locale`` (Babel Locale or locale code).

        Raises:
            ValueError: If the locale code is unknown
        """
        return replace(self, locale=resolve_locale(locale))

    def with_chronology(self, chronology: Chronology) -> "Formatter":
        """Copy using ``chronology`` for field decomposition and resolution."""
        return replace(self, chronology=chronology)

    def with_pivot_year(self, pivot_year: int | None) -> "Formatter":
        """Copy resolving two-digit years against ``pivot_year``."""
        return replace(self, pivot_year=pivot_year)

    def print(self, instant: Instant) -> str:
        """Render ``instant`` as text.

        Raises:
            UnsupportedOperationError: If the plan is parse-only
        """
        return render(self.plan, instant, self.zone, self.locale, self.chronology)

    def parse(self, text: str) -> Instant:
        """Parse the whole of ``text``.

        Raises:
            UnsupportedOperationError: If the plan has print-only directives
            ParseError: If the text does not match
            InvalidFieldsError: If the matched fields name no valid instant
        """
        return parse_plan(
            self.plan,
            text,
            zone=self.zone,
            locale=self.locale,
            chronology=self.chronology,
            pivot_year=self.pivot_year,
        )

    def parse_fields(self, text: str, *, partial: bool = False) -> ParsedFields:
        """Match ``text`` and return the raw fields, without resolving them."""
        return parse_fields(
            self.plan,
            text,
            locale=self.locale,
            chronology=self.chronology,
            zone=self.zone,
            pivot_year=self.pivot_year,
            partial=partial,
        )

    def parse_prefix(self, text: str) -> tuple[Instant, int]:
        """Parse a leading match of ``text``.

        Returns:
            Tuple of (instant, number of characters consumed)
        """
        return parse_prefix(
            self.plan,
            text,
            zone=self.zone,
            locale=self.locale,
            chronology=self.chronology,
            pivot_year=self.pivot_year,
        )

    def __repr__(self) -> str:
        return (
            f"Formatter({self.label!r}, zone={zone_id(self.zone)!r}, "
            f"locale={str(self.locale)!r}, chronology={self.chronology.name!r})"
        )


def formatter(pattern: str, zone: tzinfo | str | None = None) -> Formatter:
    """Formatter for ``pattern`` bound to ``zone`` (UTC when omitted).

    Raises:
        PatternError: If the pattern is malformed
        ValueError: If the zone identifier is unknown
    """
    return Formatter(plan=compile_pattern(pattern), zone=resolve_zone(zone))


def unparse(fmt: Formatter, instant: Instant) -> str:
    """Render ``instant`` with ``fmt``."""
    return fmt.print(instant)


print_instant = unparse


def parse(fmt: Formatter, text: str) -> Instant:
    """Parse ``text`` with ``fmt``."""
    return fmt.parse(text)


def try_parse(fmt: Formatter, text: str) -> tuple[Instant | None, tuple[ChronoFormatError, ...]]:
    """Parse without raising.

    Returns:
        Tuple of (instant, ()) on success or (None, (error,)) on failure

    Example:
        >>> instant, errors = try_parse(formatter("yyyy"), "20x0")
        >>> instant is None, type(errors[0]).__name__
        (True, 'TrailingInputError')
    """
    try:
        return fmt.parse(text), ()
    except ChronoFormatError as e:
        return None, (e,)


def with_zone(fmt: Formatter, zone: tzinfo | str | None) -> Formatter:
    """Functional form of Formatter.with_zone."""
    return fmt.with_zone(zone)


def with_locale(fmt: Formatter, locale: Locale | str | None) -> Formatter:
    """Functional form of Formatter.with_locale."""
    return fmt.with_locale(locale)


def with_chronology(fmt: Formatter, chronology: Chronology) -> Formatter:
    """Functional form of Formatter.with_chronology."""
    return fmt.with_chronology(chronology)


def with_pivot_year(fmt: Formatter, pivot_year: int | None) -> Formatter:
    """Functional form of Formatter.with_pivot_year."""
    return fmt.with_pivot_year(pivot_year)
