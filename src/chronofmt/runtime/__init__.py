"""Runtime: instants, zones, chronologies, locale names and the printer."""

from .chronology import (
    BUDDHIST,
    ISO,
    BuddhistChronology,
    Chronology,
    DateTimeFields,
    IsoChronology,
)
from .instant import EPOCH, Instant
from .locale_names import LocaleNames, locale_names
from .printer import render
from .zones import UTC, fixed_offset_zone, format_offset, resolve_zone, zone_id

__all__ = [
    "BUDDHIST",
    "EPOCH",
    "ISO",
    "UTC",
    "BuddhistChronology",
    "Chronology",
    "DateTimeFields",
    "Instant",
    "IsoChronology",
    "LocaleNames",
    "fixed_offset_zone",
    "format_offset",
    "locale_names",
    "render",
    "resolve_zone",
    "zone_id",
]
