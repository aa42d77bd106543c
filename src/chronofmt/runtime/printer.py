"""Printer: renders an instant through a compiled plan.

Rendering walks the plan once, emitting literals verbatim and asking the
chronology for field values. It never fails for a printable plan and an
instant inside the chronology's range.

Python 3.13+. Uses Babel for zone names.
"""

from datetime import tzinfo
from typing import assert_never

from babel import Locale
from babel import dates as babel_dates

from chronofmt.constants import MILLIS_DIGITS
from chronofmt.diagnostics import ErrorTemplate, UnsupportedOperationError
from chronofmt.enums import FieldKind, RenderMode
from chronofmt.pattern import CompiledPlan, FieldDirective, Literal

from .chronology import Chronology, DateTimeFields
from .instant import Instant
from .locale_names import LocaleNames, locale_names
from .zones import format_offset, zone_id

__all__ = ["render"]

_ZONE_NAME_PATTERNS = {
    RenderMode.ZONE_NAME_SHORT: "z",
    RenderMode.ZONE_NAME_LONG: "zzzz",
}


def _render_number(directive: FieldDirective, value: int) -> str:
    digits = str(abs(value)).zfill(directive.min_digits)
    return f"-{digits}" if value < 0 else digits


def _render_fraction(directive: FieldDirective, millis: int) -> str:
    digits = f"{millis:0{MILLIS_DIGITS}d}"
    if directive.count <= MILLIS_DIGITS:
        return digits[: directive.count]
    return digits.ljust(directive.count, "0")


def _render_text(
    directive: FieldDirective,
    fields: DateTimeFields,
    names: LocaleNames,
    chronology: Chronology,
    locale: Locale,
) -> str:
    long = directive.mode is RenderMode.LONG_TEXT
    match directive.kind:
        case FieldKind.MONTH_OF_YEAR:
            return names.month(fields.month_of_year, long=long)
        case FieldKind.DAY_OF_WEEK:
            return names.weekday(fields.day_of_week, long=long)
        case FieldKind.HALFDAY_OF_DAY:
            return names.meridiem(fields.value(FieldKind.HALFDAY_OF_DAY))
        case _:
            return chronology.era_names(locale, long=long)[fields.era]


def _render_zone_name(directive: FieldDirective, fields: DateTimeFields, locale: Locale) -> str:
    return str(
        babel_dates.format_datetime(
            fields.local, format=_ZONE_NAME_PATTERNS[directive.mode], locale=locale
        )
    )


def _render_field(
    directive: FieldDirective,
    fields: DateTimeFields,
    zone: tzinfo,
    locale: Locale,
    chronology: Chronology,
) -> str:
    match directive.mode:
        case RenderMode.NUMBER | RenderMode.YEAR:
            return _render_number(directive, fields.value(directive.kind))
        case RenderMode.TWO_DIGIT_YEAR:
            return f"{fields.value(directive.kind) % 100:02d}"
        case RenderMode.FRACTION:
            return _render_fraction(directive, fields.millis_of_second)
        case RenderMode.SHORT_TEXT | RenderMode.LONG_TEXT:
            return _render_text(directive, fields, locale_names(locale), chronology, locale)
        case RenderMode.OFFSET | RenderMode.OFFSET_COLON:
            colon = directive.mode is RenderMode.OFFSET_COLON
            return format_offset(fields.offset_seconds, colon=colon, zulu=directive.zulu)
        case RenderMode.ZONE_ID:
            return zone_id(zone)
        case RenderMode.ZONE_NAME_SHORT | RenderMode.ZONE_NAME_LONG:
            return _render_zone_name(directive, fields, locale)
        case _ as unreachable:
            assert_never(unreachable)


def render(
    plan: CompiledPlan,
    instant: Instant,
    zone: tzinfo,
    locale: Locale,
    chronology: Chronology,
) -> str:
    """Render ``instant`` through ``plan``.

    Args:
        plan: Compiled plan without optional sections or alternatives
        instant: Instant to render
        zone: Zone whose wall-clock fields are shown
        locale: Locale for text fields
        chronology: Calendar system providing field values

    Returns:
        Rendered text

    Raises:
        UnsupportedOperationError: If the plan is parse-only
    """
    if not plan.can_print:
        raise UnsupportedOperationError(ErrorTemplate.printing_unsupported(plan.pattern))

    fields = chronology.fields_of(instant, zone)
    parts: list[str] = []
    for instruction in plan.instructions:
        match instruction:
            case Literal(text=text):
                parts.append(text)
            case FieldDirective():
                parts.append(_render_field(instruction, fields, zone, locale, chronology))
    return "".join(parts)
