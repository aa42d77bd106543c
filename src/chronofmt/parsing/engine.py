"""Parse engine: reads text through a compiled plan.

Parsing runs in two phases:

1. Matching walks the plan over the text with an immutable Cursor,
   collecting field values. Optional sections are tried on a copy of the
   collected fields and rolled back on mismatch; a Choice tries every
   alternative and keeps the one that consumed the most input.
2. Resolution hands the collected fields to the chronology, which builds
   the instant (or raises InvalidFieldsError).

A zone offset or zone identifier found in the text overrides the
formatter's zone for resolution.

Python 3.13+.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import tzinfo
from types import MappingProxyType

from babel import Locale

from chronofmt.constants import MILLIS_DIGITS
from chronofmt.diagnostics import (
    Diagnostic,
    ErrorTemplate,
    ParseError,
    TrailingInputError,
    UnsupportedOperationError,
)
from chronofmt.enums import FieldKind, RenderMode
from chronofmt.pattern import (
    Choice,
    CompiledPlan,
    FieldDirective,
    Instruction,
    Literal,
    OptionalSection,
)
from chronofmt.runtime import Chronology, Instant, LocaleNames, locale_names
from chronofmt.runtime.locale_names import NameCandidates, candidates_for, match_name
from chronofmt.runtime.zones import fixed_offset_zone, match_zone_id, resolve_zone
from chronofmt.syntax import Cursor

from .pivot import current_pivot_year, resolve_two_digit_year

__all__ = ["ParsedFields", "parse_fields", "parse_plan", "parse_prefix"]

logger = logging.getLogger(__name__)

_SIGNS = ("+", "-")
_TWO_DIGITS = 2
_MAX_OFFSET_HOURS = 23
_MAX_OFFSET_MINUTES = 59


@dataclass(frozen=True, slots=True)
class ParsedFields:
    """Fields matched from text, before calendar resolution.

    Attributes:
        values: Field values keyed by kind (fractions in milliseconds,
            offsets in seconds)
        zone: Zone named by the text, or None if it carried none
        end: Offset just past the matched text
    """

    values: Mapping[FieldKind, int]
    zone: tzinfo | None
    end: int


@dataclass(slots=True)
class _Bucket:
    """Mutable field accumulator; copied before speculative matching."""

    values: dict[FieldKind, int] = field(default_factory=dict)
    zone: tzinfo | None = None

    def copy(self) -> "_Bucket":
        return _Bucket(dict(self.values), self.zone)

    def adopt(self, other: "_Bucket") -> None:
        self.values = other.values
        self.zone = other.zone


@dataclass(frozen=True, slots=True)
class _Context:
    text: str
    names: LocaleNames
    locale: Locale
    chronology: Chronology
    zone: tzinfo
    pivot_year: int | None

    def fail(self, diagnostic: Diagnostic, position: int) -> ParseError:
        return ParseError(
            diagnostic, text=self.text, position=position, expected=diagnostic.expected
        )

    def effective_pivot(self) -> int:
        if self.pivot_year is not None:
            return self.pivot_year
        return current_pivot_year(self.chronology, self.zone)


# ============================================================================
# FIELD MATCHERS
# ============================================================================


def _parse_number(
    directive: FieldDirective, cursor: Cursor, ctx: _Context, bucket: _Bucket
) -> Cursor:
    sign = ""
    if directive.signed and not directive.fixed_width and cursor.peek() in _SIGNS:
        sign = cursor.current
        cursor = cursor.advance()

    if directive.fixed_width:
        count = cursor.count_digits(directive.count)
        if count < directive.count:
            diagnostic = ErrorTemplate.number_expected(
                ctx.text, cursor.pos, str(directive.kind), f"{directive.count} digits"
            )
            raise ctx.fail(diagnostic, cursor.pos)
    else:
        count = cursor.count_digits(directive.max_digits)
        if count == 0:
            diagnostic = ErrorTemplate.number_expected(
                ctx.text, cursor.pos, str(directive.kind), "digits"
            )
            raise ctx.fail(diagnostic, cursor.pos)

    digits = cursor.slice_ahead(count)
    match directive.mode:
        case RenderMode.FRACTION:
            value = int(digits[:MILLIS_DIGITS].ljust(MILLIS_DIGITS, "0"))
        case RenderMode.TWO_DIGIT_YEAR if count == _TWO_DIGITS and not sign:
            value = resolve_two_digit_year(int(digits), ctx.effective_pivot())
        case _:
            value = int(digits)

    bucket.values[directive.kind] = -value if sign == "-" else value
    return cursor.advance(count)


def _text_candidates(directive: FieldDirective, ctx: _Context) -> NameCandidates:
    match directive.kind:
        case FieldKind.MONTH_OF_YEAR:
            return ctx.names.month_candidates
        case FieldKind.DAY_OF_WEEK:
            return ctx.names.weekday_candidates
        case FieldKind.HALFDAY_OF_DAY:
            return ctx.names.meridiem_candidates
        case _:
            return candidates_for(
                ctx.chronology.era_names(ctx.locale, long=False),
                ctx.chronology.era_names(ctx.locale, long=True),
            )


def _parse_text(
    directive: FieldDirective, cursor: Cursor, ctx: _Context, bucket: _Bucket
) -> Cursor:
    candidates = _text_candidates(directive, ctx)
    hit = match_name(ctx.text, cursor.pos, candidates)
    if hit is None:
        diagnostic = ErrorTemplate.text_unknown(
            ctx.text, cursor.pos, str(directive.kind), tuple(name for name, _ in candidates)
        )
        raise ctx.fail(diagnostic, cursor.pos)
    value, length = hit
    bucket.values[directive.kind] = value
    return cursor.advance(length)


def _read_two_digits(cursor: Cursor) -> int | None:
    if cursor.count_digits(_TWO_DIGITS) < _TWO_DIGITS:
        return None
    return int(cursor.slice_ahead(_TWO_DIGITS))


def _parse_offset(cursor: Cursor, ctx: _Context, bucket: _Bucket) -> Cursor:
    """Read Z, +HH, +HHMM or +HH:MM."""
    start = cursor.pos
    after_zulu = cursor.expect("Z")
    if after_zulu is not None:
        offset_seconds = 0
        cursor = after_zulu
    else:
        if cursor.peek() not in _SIGNS:
            raise ctx.fail(ErrorTemplate.offset_invalid(ctx.text, start), start)
        negative = cursor.current == "-"
        cursor = cursor.advance()

        hours = _read_two_digits(cursor)
        if hours is None or hours > _MAX_OFFSET_HOURS:
            raise ctx.fail(ErrorTemplate.offset_invalid(ctx.text, start), start)
        cursor = cursor.advance(2)

        minutes = 0
        after_colon = cursor.expect(":")
        probe = after_colon or cursor
        read = _read_two_digits(probe)
        if read is not None:
            minutes = read
            cursor = probe.advance(2)
        elif after_colon is not None:
            raise ctx.fail(ErrorTemplate.offset_invalid(ctx.text, start), start)
        if minutes > _MAX_OFFSET_MINUTES:
            raise ctx.fail(ErrorTemplate.offset_invalid(ctx.text, start), start)

        offset_seconds = (hours * 3600 + minutes * 60) * (-1 if negative else 1)

    bucket.values[FieldKind.ZONE_OFFSET] = offset_seconds
    bucket.zone = fixed_offset_zone(offset_seconds)
    return cursor


def _parse_zone_id(cursor: Cursor, ctx: _Context, bucket: _Bucket) -> Cursor:
    matched = match_zone_id(ctx.text, cursor.pos)
    if matched is not None:
        bucket.zone = resolve_zone(matched)
        return cursor.advance(len(matched))
    # Fixed-offset zones print their offset as the identifier
    if cursor.peek() in _SIGNS:
        return _parse_offset(cursor, ctx, bucket)
    raise ctx.fail(ErrorTemplate.zone_unknown(ctx.text, cursor.pos), cursor.pos)


def _parse_field(
    directive: FieldDirective, cursor: Cursor, ctx: _Context, bucket: _Bucket
) -> Cursor:
    if directive.is_numeric:
        return _parse_number(directive, cursor, ctx, bucket)
    match directive.mode:
        case RenderMode.SHORT_TEXT | RenderMode.LONG_TEXT:
            return _parse_text(directive, cursor, ctx, bucket)
        case RenderMode.OFFSET | RenderMode.OFFSET_COLON:
            return _parse_offset(cursor, ctx, bucket)
        case RenderMode.ZONE_ID:
            return _parse_zone_id(cursor, ctx, bucket)
        case _:
            # Zone names are rejected before matching starts
            diagnostic = ErrorTemplate.parsing_unsupported(ctx.text, directive.letter)
            raise UnsupportedOperationError(diagnostic)


# ============================================================================
# SEQUENCE MATCHING
# ============================================================================


def _parse_choice(
    alternatives: tuple[tuple[Instruction, ...], ...],
    cursor: Cursor,
    ctx: _Context,
    bucket: _Bucket,
) -> Cursor:
    best: tuple[Cursor, _Bucket] | None = None
    furthest_failure: ParseError | None = None
    for alternative in alternatives:
        trial = bucket.copy()
        try:
            end = _parse_sequence(alternative, cursor, ctx, trial)
        except ParseError as e:
            if furthest_failure is None or e.position > furthest_failure.position:
                furthest_failure = e
            continue
        if best is None or end.pos > best[0].pos:
            best = (end, trial)

    if best is None:
        if furthest_failure is None:
            msg = "Choice needs at least one alternative"
            raise ValueError(msg)
        raise furthest_failure
    end, winner = best
    bucket.adopt(winner)
    return end


def _parse_sequence(
    instructions: tuple[Instruction, ...], cursor: Cursor, ctx: _Context, bucket: _Bucket
) -> Cursor:
    for instruction in instructions:
        match instruction:
            case Literal(text=literal):
                after = cursor.expect_text(literal)
                if after is None:
                    diagnostic = ErrorTemplate.literal_mismatch(ctx.text, cursor.pos, literal)
                    raise ctx.fail(diagnostic, cursor.pos)
                cursor = after
            case FieldDirective():
                cursor = _parse_field(instruction, cursor, ctx, bucket)
            case OptionalSection(instructions=inner):
                trial = bucket.copy()
                try:
                    after = _parse_sequence(inner, cursor, ctx, trial)
                except ParseError:
                    continue
                bucket.adopt(trial)
                cursor = after
            case Choice(alternatives=alternatives):
                cursor = _parse_choice(alternatives, cursor, ctx, bucket)
    return cursor


# ============================================================================
# PUBLIC API
# ============================================================================


def parse_fields(
    plan: CompiledPlan,
    text: str,
    *,
    locale: Locale,
    chronology: Chronology,
    zone: tzinfo,
    pivot_year: int | None = None,
    partial: bool = False,
) -> ParsedFields:
    """Match ``text`` against ``plan`` without resolving an instant.

    Args:
        plan: Parse-capable compiled plan
        text: Input text
        locale: Locale for text fields
        chronology: Calendar system (era names, default pivot)
        zone: Zone used to compute the default pivot year
        pivot_year: Two-digit year pivot; None means the current year
        partial: Accept a match that stops before the end of ``text``

    Returns:
        ParsedFields

    Raises:
        UnsupportedOperationError: If the plan contains print-only directives
        ParseError: If the text does not match
        TrailingInputError: If input remains and ``partial`` is False
    """
    blocked = plan.print_only_letters()
    if blocked:
        diagnostic = ErrorTemplate.parsing_unsupported(plan.pattern, blocked[0])
        raise UnsupportedOperationError(diagnostic)

    ctx = _Context(
        text=text,
        names=locale_names(locale),
        locale=locale,
        chronology=chronology,
        zone=zone,
        pivot_year=pivot_year,
    )
    bucket = _Bucket()
    end = _parse_sequence(plan.instructions, Cursor(text, 0), ctx, bucket)

    if not partial and not end.is_eof:
        diagnostic = ErrorTemplate.trailing_input(text, end.pos)
        raise TrailingInputError(diagnostic, text=text, position=end.pos)

    return ParsedFields(values=MappingProxyType(bucket.values), zone=bucket.zone, end=end.pos)


def parse_prefix(
    plan: CompiledPlan,
    text: str,
    *,
    zone: tzinfo,
    locale: Locale,
    chronology: Chronology,
    pivot_year: int | None = None,
) -> tuple[Instant, int]:
    """Parse a leading match of ``text``.

    Returns:
        Tuple of (instant, offset just past the matched text)

    Raises:
        UnsupportedOperationError, ParseError, InvalidFieldsError
    """
    parsed = parse_fields(
        plan,
        text,
        locale=locale,
        chronology=chronology,
        zone=zone,
        pivot_year=pivot_year,
        partial=True,
    )
    instant = chronology.instant_of(parsed.values, parsed.zone or zone)
    return instant, parsed.end


def parse_plan(
    plan: CompiledPlan,
    text: str,
    *,
    zone: tzinfo,
    locale: Locale,
    chronology: Chronology,
    pivot_year: int | None = None,
) -> Instant:
    """Parse the whole of ``text`` into an instant.

    Unspecified fields take their epoch values (1970-01-01T00:00:00.000).
    A zone found in the text takes precedence over ``zone``.

    Raises:
        UnsupportedOperationError: If the plan contains print-only directives
        ParseError: If the text does not match (TrailingInputError for leftovers)
        InvalidFieldsError: If the fields name no valid instant
    """
    parsed = parse_fields(
        plan, text, locale=locale, chronology=chronology, zone=zone, pivot_year=pivot_year
    )
    instant = chronology.instant_of(parsed.values, parsed.zone or zone)
    logger.debug("Parsed %r with pattern %r: %s", text, plan.pattern, instant)
    return instant
