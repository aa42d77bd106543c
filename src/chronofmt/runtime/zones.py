"""Time zone resolution and offset rendering.

Zones are plain ``datetime.tzinfo`` objects. Identifiers resolve through
zoneinfo (IANA database); fixed offsets parsed from text become
``datetime.timezone`` instances. Locale-specific zone names are Babel's
business and live in the printer.

Python 3.13+. Zero external dependencies.
"""

import functools
import zoneinfo
from datetime import UTC, timedelta, timezone, tzinfo

from chronofmt.diagnostics import ErrorTemplate

__all__ = [
    "UTC",
    "fixed_offset_zone",
    "format_offset",
    "known_zone_ids",
    "match_zone_id",
    "resolve_zone",
    "zone_id",
]

_UTC_ALIASES = frozenset({"UTC", "Z"})

_SECONDS_PER_MINUTE = 60


def resolve_zone(value: tzinfo | str | None) -> tzinfo:
    """Coerce a formatter zone argument to a tzinfo.

    Args:
        value: tzinfo, IANA identifier, or None for UTC

    Returns:
        tzinfo

    Raises:
        ValueError: If the identifier is not in the time zone database

    Example:
        >>> resolve_zone(None) is UTC
        True
        >>> zone_id(resolve_zone("Europe/Riga"))
        'Europe/Riga'
    """
    if value is None:
        return UTC
    if isinstance(value, tzinfo):
        return value
    if value in _UTC_ALIASES:
        return UTC
    try:
        return zoneinfo.ZoneInfo(value)
    except (zoneinfo.ZoneInfoNotFoundError, ValueError):
        raise ValueError(ErrorTemplate.zone_id_unknown(value).message) from None


def fixed_offset_zone(offset_seconds: int) -> tzinfo:
    """Zone with a constant offset; zero offset is UTC itself."""
    if offset_seconds == 0:
        return UTC
    return timezone(timedelta(seconds=offset_seconds))


def format_offset(offset_seconds: int, *, colon: bool, zulu: bool = False) -> str:
    """Render an offset as +HHMM or +HH:MM.

    Args:
        offset_seconds: Offset east of UTC
        colon: Separate hours and minutes with ':'
        zulu: Render a zero offset as "Z"

    Example:
        >>> format_offset(8 * 3600, colon=True)
        '+08:00'
        >>> format_offset(-(5 * 3600 + 30 * 60), colon=False)
        '-0530'
        >>> format_offset(0, colon=True, zulu=True)
        'Z'
    """
    if offset_seconds == 0 and zulu:
        return "Z"
    sign = "-" if offset_seconds < 0 else "+"
    minutes = abs(offset_seconds) // _SECONDS_PER_MINUTE
    hours, minutes = divmod(minutes, 60)
    separator = ":" if colon else ""
    return f"{sign}{hours:02d}{separator}{minutes:02d}"


def zone_id(zone: tzinfo) -> str:
    """Stable identifier for a zone: IANA key, "UTC", or its offset.

    Example:
        >>> zone_id(UTC)
        'UTC'
        >>> zone_id(fixed_offset_zone(-3 * 3600))
        '-03:00'
    """
    if zone is UTC:
        return "UTC"
    key = getattr(zone, "key", None) or getattr(zone, "zone", None)
    if isinstance(key, str):
        return key
    if isinstance(zone, timezone):
        offset = zone.utcoffset(None)
        return format_offset(int(offset.total_seconds()), colon=True, zulu=False)
    return str(zone)


@functools.cache
def known_zone_ids() -> frozenset[str]:
    """Every identifier the zone database offers, plus "UTC"."""
    return frozenset(zoneinfo.available_timezones()) | {"UTC"}


@functools.cache
def _longest_zone_id() -> int:
    return max(len(zone) for zone in known_zone_ids())


def _is_zone_id_char(char: str) -> bool:
    return char.isascii() and (char.isalnum() or char in "_/+-")


def match_zone_id(text: str, position: int) -> str | None:
    """Longest zone identifier that starts at ``position``.

    Example:
        >>> match_zone_id("America/New_York rest", 0)
        'America/New_York'
        >>> match_zone_id("Nowhere", 0) is None
        True
    """
    end = position
    limit = min(len(text), position + _longest_zone_id())
    while end < limit and _is_zone_id_char(text[end]):
        end += 1
    zones = known_zone_ids()
    for stop in range(end, position, -1):
        candidate = text[position:stop]
        if candidate in zones:
            return candidate
    return None
