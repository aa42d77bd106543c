"""Enumerations for chronofmt type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class FieldKind(StrEnum):
    """Semantic field a pattern letter stands for.

    StrEnum provides automatic string conversion: str(FieldKind.YEAR) == "year"
    """

    ERA = "era"
    YEAR = "year"
    YEAR_OF_ERA = "year_of_era"
    WEEKYEAR = "weekyear"
    WEEK_OF_WEEKYEAR = "week_of_weekyear"
    DAY_OF_WEEK = "day_of_week"
    DAY_OF_YEAR = "day_of_year"
    MONTH_OF_YEAR = "month_of_year"
    DAY_OF_MONTH = "day_of_month"
    HALFDAY_OF_DAY = "halfday_of_day"
    HOUR_OF_HALFDAY = "hour_of_halfday"
    CLOCKHOUR_OF_HALFDAY = "clockhour_of_halfday"
    HOUR_OF_DAY = "hour_of_day"
    CLOCKHOUR_OF_DAY = "clockhour_of_day"
    MINUTE_OF_HOUR = "minute_of_hour"
    SECOND_OF_MINUTE = "second_of_minute"
    FRACTION_OF_SECOND = "fraction_of_second"
    ZONE_NAME = "zone_name"
    ZONE_OFFSET = "zone_offset"
    ZONE_ID = "zone_id"


class RenderMode(StrEnum):
    """How a field directive renders and parses its value.

    StrEnum provides automatic string conversion: str(RenderMode.NUMBER) == "number"
    """

    NUMBER = "number"
    """Zero-padded decimal number: dd -> 05"""

    YEAR = "year"
    """Signed, zero-padded year: yyyy -> 2010"""

    TWO_DIGIT_YEAR = "two_digit_year"
    """Year modulo 100 on output, pivot-resolved on input: yy -> 10"""

    FRACTION = "fraction"
    """Leading digits of the second fraction: SSS -> 042"""

    SHORT_TEXT = "short_text"
    """Abbreviated locale name: MMM -> Mar"""

    LONG_TEXT = "long_text"
    """Full locale name: MMMM -> March"""

    OFFSET = "offset"
    """Offset without colon: Z -> +0800"""

    OFFSET_COLON = "offset_colon"
    """Offset with colon: ZZ -> +08:00"""

    ZONE_ID = "zone_id"
    """Zone identifier: ZZZ -> Europe/Riga"""

    ZONE_NAME_SHORT = "zone_name_short"
    """Abbreviated zone name (print only): z -> EET"""

    ZONE_NAME_LONG = "zone_name_long"
    """Full zone name (print only): zzzz -> Eastern European Standard Time"""


__all__ = [
    "FieldKind",
    "RenderMode",
]
