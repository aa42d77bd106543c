"""Calendar systems: field decomposition and field resolution.

A Chronology converts between instants and calendar fields in a zone. The
printer asks it for the fields of an instant; the parser hands it whatever
fields the text supplied and gets an instant back (or InvalidFieldsError).

Built-in chronologies:
    IsoChronology      - Proleptic Gregorian with ISO-8601 week rules
    BuddhistChronology - Gregorian rules, years counted from 543 BC (era BE)

Both delegate calendar arithmetic to the standard library's datetime, so
the supported year range is datetime's (1-9999 in ISO terms).

Python 3.13+. Uses Babel for era names.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, UTC, date, datetime, timedelta, tzinfo
from typing import ClassVar, Protocol

from babel import Locale

from chronofmt.constants import MILLIS_PER_SECOND
from chronofmt.diagnostics import ErrorTemplate, InvalidFieldsError
from chronofmt.enums import FieldKind

from .instant import Instant
from .locale_names import locale_names
from .zones import zone_id

__all__ = [
    "BUDDHIST",
    "ISO",
    "BuddhistChronology",
    "Chronology",
    "DateTimeFields",
    "IsoChronology",
]

_HOURS_PER_HALFDAY = 12
_EPOCH_YEAR = 1970

# Inclusive ranges checked before any calendar arithmetic.
_RANGES: dict[FieldKind, tuple[int, int]] = {
    FieldKind.ERA: (0, 1),
    FieldKind.MONTH_OF_YEAR: (1, 12),
    FieldKind.DAY_OF_MONTH: (1, 31),
    FieldKind.DAY_OF_YEAR: (1, 366),
    FieldKind.WEEK_OF_WEEKYEAR: (1, 53),
    FieldKind.DAY_OF_WEEK: (1, 7),
    FieldKind.HALFDAY_OF_DAY: (0, 1),
    FieldKind.HOUR_OF_HALFDAY: (0, 11),
    FieldKind.CLOCKHOUR_OF_HALFDAY: (1, 12),
    FieldKind.HOUR_OF_DAY: (0, 23),
    FieldKind.CLOCKHOUR_OF_DAY: (1, 24),
    FieldKind.MINUTE_OF_HOUR: (0, 59),
    FieldKind.SECOND_OF_MINUTE: (0, 59),
    FieldKind.FRACTION_OF_SECOND: (0, MILLIS_PER_SECOND - 1),
}

_YEAR_KINDS = (FieldKind.YEAR, FieldKind.YEAR_OF_ERA, FieldKind.WEEKYEAR)


@dataclass(frozen=True, slots=True)
class DateTimeFields:
    """Calendar fields of one instant in one zone.

    Attribute names match FieldKind values, so ``value()`` can look most
    fields up by name. ``local`` is the aware wall-clock datetime, kept for
    zone-name rendering.
    """

    era: int
    year: int
    year_of_era: int
    weekyear: int
    week_of_weekyear: int
    day_of_week: int
    day_of_year: int
    month_of_year: int
    day_of_month: int
    hour_of_day: int
    minute_of_hour: int
    second_of_minute: int
    millis_of_second: int
    offset_seconds: int
    local: datetime

    def value(self, kind: FieldKind) -> int:
        """Numeric value of a field, deriving 12-hour and clock-hour forms."""
        match kind:
            case FieldKind.HALFDAY_OF_DAY:
                return self.hour_of_day // _HOURS_PER_HALFDAY
            case FieldKind.HOUR_OF_HALFDAY:
                return self.hour_of_day % _HOURS_PER_HALFDAY
            case FieldKind.CLOCKHOUR_OF_HALFDAY:
                return self.hour_of_day % _HOURS_PER_HALFDAY or _HOURS_PER_HALFDAY
            case FieldKind.CLOCKHOUR_OF_DAY:
                return self.hour_of_day or 2 * _HOURS_PER_HALFDAY
            case FieldKind.FRACTION_OF_SECOND:
                return self.millis_of_second
            case FieldKind.ZONE_OFFSET:
                return self.offset_seconds
            case FieldKind.ZONE_NAME | FieldKind.ZONE_ID:
                msg = f"{kind} has no numeric value"
                raise ValueError(msg)
            case _:
                return int(getattr(self, kind.value))


class Chronology(Protocol):
    """Calendar system consulted by formatters.

    Implementations must be immutable and hashable; formatters compare them
    by value.
    """

    @property
    def name(self) -> str:
        """Display name ("ISO", "Buddhist")."""
        ...

    def fields_of(self, instant: Instant, zone: tzinfo) -> DateTimeFields:
        """Decompose an instant into calendar fields in ``zone``."""
        ...

    def instant_of(self, fields: Mapping[FieldKind, int], zone: tzinfo) -> Instant:
        """Resolve parsed fields to an instant; unspecified fields take epoch values.

        Raises:
            InvalidFieldsError: If the fields name no valid instant
        """
        ...

    def era_names(self, locale: Locale, *, long: bool) -> Mapping[int, str]:
        """Era display names keyed by era value."""
        ...


def _invalid(fields: Mapping[FieldKind, int], reason: str) -> InvalidFieldsError:
    named = {str(kind): value for kind, value in fields.items()}
    return InvalidFieldsError(ErrorTemplate.fields_invalid(named, reason), fields=named)


def _check_ranges(fields: Mapping[FieldKind, int]) -> None:
    named = {str(kind): value for kind, value in fields.items()}
    for kind, value in fields.items():
        bounds = _RANGES.get(kind)
        if bounds is None:
            continue
        low, high = bounds
        if not low <= value <= high:
            diagnostic = ErrorTemplate.field_out_of_range(str(kind), value, low, high)
            raise InvalidFieldsError(diagnostic, fields=named)


def _inconsistent(fields: Mapping[FieldKind, int], first: str, second: str) -> InvalidFieldsError:
    named = {str(kind): value for kind, value in fields.items()}
    return InvalidFieldsError(ErrorTemplate.fields_inconsistent(first, second), fields=named)


def _resolve_year(fields: Mapping[FieldKind, int]) -> int:
    era = fields.get(FieldKind.ERA)
    if FieldKind.YEAR in fields:
        year = fields[FieldKind.YEAR]
        if era is not None and era != (1 if year >= 1 else 0):
            raise _inconsistent(fields, f"era={era}", f"year={year}")
        return year
    if FieldKind.YEAR_OF_ERA in fields:
        year_of_era = fields[FieldKind.YEAR_OF_ERA]
        return year_of_era if era in (None, 1) else 1 - year_of_era
    return _EPOCH_YEAR


def _resolve_date(fields: Mapping[FieldKind, int]) -> date:
    year = _resolve_year(fields)
    if not MINYEAR <= year <= MAXYEAR:
        diagnostic = ErrorTemplate.field_out_of_range("year", year, MINYEAR, MAXYEAR)
        raise InvalidFieldsError(diagnostic, fields={str(k): v for k, v in fields.items()})

    try:
        if FieldKind.WEEKYEAR in fields or FieldKind.WEEK_OF_WEEKYEAR in fields:
            weekyear = fields.get(FieldKind.WEEKYEAR, year)
            week = fields.get(FieldKind.WEEK_OF_WEEKYEAR, 1)
            day_of_week = fields.get(FieldKind.DAY_OF_WEEK, 1)
            resolved = date.fromisocalendar(weekyear, week, day_of_week)
        elif FieldKind.DAY_OF_YEAR in fields:
            day_of_year = fields[FieldKind.DAY_OF_YEAR]
            resolved = date(year, 1, 1) + timedelta(days=day_of_year - 1)
            if resolved.year != year:
                raise _invalid(fields, f"year {year} has no day {day_of_year}")
        else:
            month = fields.get(FieldKind.MONTH_OF_YEAR, 1)
            day = fields.get(FieldKind.DAY_OF_MONTH, 1)
            resolved = date(year, month, day)
    except (ValueError, OverflowError) as e:
        raise _invalid(fields, str(e)) from None

    for kind, actual in (
        (FieldKind.YEAR, resolved.year),
        (FieldKind.MONTH_OF_YEAR, resolved.month),
        (FieldKind.DAY_OF_MONTH, resolved.day),
        (FieldKind.DAY_OF_WEEK, resolved.isoweekday()),
    ):
        if kind in fields and fields[kind] != actual:
            raise _inconsistent(fields, f"{kind}={fields[kind]}", f"date {resolved.isoformat()}")
    return resolved


def _resolve_hour(fields: Mapping[FieldKind, int]) -> int:
    halfday = fields.get(FieldKind.HALFDAY_OF_DAY)
    if FieldKind.HOUR_OF_DAY in fields:
        hour = fields[FieldKind.HOUR_OF_DAY]
    elif FieldKind.CLOCKHOUR_OF_DAY in fields:
        hour = fields[FieldKind.CLOCKHOUR_OF_DAY] % (2 * _HOURS_PER_HALFDAY)
    else:
        if FieldKind.HOUR_OF_HALFDAY in fields:
            hour_of_halfday = fields[FieldKind.HOUR_OF_HALFDAY]
        else:
            hour_of_halfday = fields.get(FieldKind.CLOCKHOUR_OF_HALFDAY, 0) % _HOURS_PER_HALFDAY
        return hour_of_halfday + _HOURS_PER_HALFDAY * (halfday or 0)

    if halfday is not None and hour // _HOURS_PER_HALFDAY != halfday:
        raise _inconsistent(fields, f"halfday_of_day={halfday}", f"hour {hour}")
    return hour


@dataclass(frozen=True, slots=True)
class IsoChronology:
    """Proleptic Gregorian calendar with ISO-8601 weeks (Monday first).

    Example:
        >>> from datetime import UTC
        >>> ISO.fields_of(Instant.of(2010, 3, 11), UTC).week_of_weekyear
        10
    """

    year_offset: ClassVar[int] = 0

    @property
    def name(self) -> str:
        return "ISO"

    def era_names(self, locale: Locale, *, long: bool) -> Mapping[int, str]:
        names = locale_names(locale)
        return names.eras_long if long else names.eras_short

    def fields_of(self, instant: Instant, zone: tzinfo) -> DateTimeFields:
        local = instant.to_datetime(zone)
        iso_year, iso_week, iso_weekday = local.isocalendar()
        offset = local.utcoffset() or timedelta(0)
        shift = self.year_offset
        return DateTimeFields(
            era=1,
            year=local.year + shift,
            year_of_era=local.year + shift,
            weekyear=iso_year + shift,
            week_of_weekyear=iso_week,
            day_of_week=iso_weekday,
            day_of_year=local.timetuple().tm_yday,
            month_of_year=local.month,
            day_of_month=local.day,
            hour_of_day=local.hour,
            minute_of_hour=local.minute,
            second_of_minute=local.second,
            millis_of_second=local.microsecond // 1000,
            offset_seconds=int(offset.total_seconds()),
            local=local,
        )

    def instant_of(self, fields: Mapping[FieldKind, int], zone: tzinfo) -> Instant:
        _check_ranges(fields)
        shifted = dict(fields)
        for kind in _YEAR_KINDS:
            if kind in shifted:
                shifted[kind] -= self.year_offset

        resolved = _resolve_date(shifted)
        local = datetime(
            resolved.year,
            resolved.month,
            resolved.day,
            _resolve_hour(fields),
            fields.get(FieldKind.MINUTE_OF_HOUR, 0),
            fields.get(FieldKind.SECOND_OF_MINUTE, 0),
            fields.get(FieldKind.FRACTION_OF_SECOND, 0) * 1000,
        )

        aware = local.replace(tzinfo=zone)
        try:
            round_trip = aware.astimezone(UTC).astimezone(zone).replace(tzinfo=None)
        except OverflowError as e:
            raise _invalid(fields, str(e)) from None
        if round_trip != local:
            diagnostic = ErrorTemplate.local_time_gap(local.isoformat(), zone_id(zone))
            raise InvalidFieldsError(
                diagnostic, fields={str(k): v for k, v in fields.items()}
            )
        return Instant.from_datetime(aware)


@dataclass(frozen=True, slots=True)
class BuddhistChronology(IsoChronology):
    """Thai solar calendar: Gregorian months and weeks, year = ISO year + 543.

    Example:
        >>> from datetime import UTC
        >>> BUDDHIST.fields_of(Instant.of(2010, 3, 11), UTC).year
        2553
    """

    year_offset: ClassVar[int] = 543

    @property
    def name(self) -> str:
        return "Buddhist"

    def era_names(self, locale: Locale, *, long: bool) -> Mapping[int, str]:
        return {1: "BE"}


ISO = IsoChronology()
BUDDHIST = BuddhistChronology()
