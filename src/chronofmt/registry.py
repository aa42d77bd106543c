"""Built-in formatter registry.

A static catalog of named formatters: the ISO-8601 family (calendar, ordinal
and week dates; basic and extended notation; with and without milliseconds)
plus RFC 822. Every entry is bound to UTC.

Entries whose name ends in "-parser" (and the local-* and date-opt-time
entries) are parse-only: they accept several layouts at once through optional
sections and alternatives, so there is no single layout to print.

The registry is built once at import and exposed read-only:

    >>> formatters["basic-date"].print(Instant.of(2010, 3, 11))
    '20100311'
    >>> "date-opt-time" in parsers
    True

Python 3.13+.
"""

import logging
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import tzinfo
from types import MappingProxyType
from typing import TextIO

from chronofmt.constants import SHOW_FORMATTERS_NAME_WIDTH
from chronofmt.formatter import Formatter
from chronofmt.pattern import compile_choice
from chronofmt.runtime import UTC, Instant

__all__ = [
    "RegistryEntry",
    "formatters",
    "get_entry",
    "list_registry",
    "parsers",
    "printers",
    "show_formatters",
]

logger = logging.getLogger(__name__)

# Date elements accepted by the date parsers: calendar, week and ordinal dates.
_DATE_ELEMENTS = ("yyyy[-MM[-dd]]", "xxxx-'W'ww[-e]", "yyyy-DDD")

_TIME_ELEMENT = "HH[:mm[:ss[.SSS]]]"
_OPTIONAL_TIME = f"['T'{_TIME_ELEMENT}[XXX]]"
_OPTIONAL_LOCAL_TIME = f"['T'{_TIME_ELEMENT}]"


def _each_date(suffix: str) -> tuple[str, ...]:
    return tuple(element + suffix for element in _DATE_ELEMENTS)


# name -> pattern, or alternatives for parse-only entries
_LAYOUTS: dict[str, str | tuple[str, ...]] = {
    "basic-date": "yyyyMMdd",
    "basic-date-time": "yyyyMMdd'T'HHmmss.SSSXX",
    "basic-date-time-no-ms": "yyyyMMdd'T'HHmmssXX",
    "basic-ordinal-date": "yyyyDDD",
    "basic-ordinal-date-time": "yyyyDDD'T'HHmmss.SSSXX",
    "basic-ordinal-date-time-no-ms": "yyyyDDD'T'HHmmssXX",
    "basic-time": "HHmmss.SSSXX",
    "basic-time-no-ms": "HHmmssXX",
    "basic-t-time": "'T'HHmmss.SSSXX",
    "basic-t-time-no-ms": "'T'HHmmssXX",
    "basic-week-date": "xxxx'W'wwe",
    "basic-week-date-time": "xxxx'W'wwe'T'HHmmss.SSSXX",
    "basic-week-date-time-no-ms": "xxxx'W'wwe'T'HHmmssXX",
    "date": "yyyy-MM-dd",
    "date-element-parser": _DATE_ELEMENTS,
    "date-hour": "yyyy-MM-dd'T'HH",
    "date-hour-minute": "yyyy-MM-dd'T'HH:mm",
    "date-hour-minute-second": "yyyy-MM-dd'T'HH:mm:ss",
    "date-hour-minute-second-fraction": "yyyy-MM-dd'T'HH:mm:ss.SSS",
    "date-hour-minute-second-ms": "yyyy-MM-dd'T'HH:mm:ss.SSS",
    "date-opt-time": _each_date(_OPTIONAL_TIME),
    "date-parser": _each_date("['T'XXX]"),
    "date-time": "yyyy-MM-dd'T'HH:mm:ss.SSSXXX",
    "date-time-no-ms": "yyyy-MM-dd'T'HH:mm:ssXXX",
    "date-time-parser": (*_each_date(_OPTIONAL_TIME), f"'T'{_TIME_ELEMENT}[XXX]"),
    "hour": "HH",
    "hour-minute": "HH:mm",
    "hour-minute-second": "HH:mm:ss",
    "hour-minute-second-fraction": "HH:mm:ss.SSS",
    "hour-minute-second-ms": "HH:mm:ss.SSS",
    "local-date-opt-time": _each_date(_OPTIONAL_LOCAL_TIME),
    "local-date": _DATE_ELEMENTS,
    "local-time": (_TIME_ELEMENT,),
    "ordinal-date": "yyyy-DDD",
    "ordinal-date-time": "yyyy-DDD'T'HH:mm:ss.SSSXXX",
    "ordinal-date-time-no-ms": "yyyy-DDD'T'HH:mm:ssXXX",
    "time": "HH:mm:ss.SSSXXX",
    "time-element-parser": (_TIME_ELEMENT,),
    "time-no-ms": "HH:mm:ssXXX",
    "time-parser": (f"['T']{_TIME_ELEMENT}[XXX]",),
    "t-time": "'T'HH:mm:ss.SSSXXX",
    "t-time-no-ms": "'T'HH:mm:ssXXX",
    "week-date": "xxxx-'W'ww-e",
    "week-date-time": "xxxx-'W'ww-e'T'HH:mm:ss.SSSXXX",
    "week-date-time-no-ms": "xxxx-'W'ww-e'T'HH:mm:ssXXX",
    "weekyear": "xxxx",
    "weekyear-week": "xxxx-'W'ww",
    "weekyear-week-day": "xxxx-'W'ww-e",
    "year": "yyyy",
    "year-month": "yyyy-MM",
    "year-month-day": "yyyy-MM-dd",
    "rfc822": "EEE, dd MMM yyyy HH:mm:ss Z",
}


@dataclass(frozen=True, slots=True)
class RegistryEntry:
    """A named built-in formatter and what it can do."""

    name: str
    formatter: Formatter
    can_parse: bool
    can_print: bool


def _build() -> Mapping[str, RegistryEntry]:
    entries: dict[str, RegistryEntry] = {}
    for name in sorted(_LAYOUTS):
        layout = _LAYOUTS[name]
        patterns = (layout,) if isinstance(layout, str) else layout
        fmt = Formatter(plan=compile_choice(patterns), zone=UTC, name=name)
        entries[name] = RegistryEntry(
            name=name, formatter=fmt, can_parse=fmt.can_parse, can_print=fmt.can_print
        )
    logger.debug("Built formatter registry with %d entries", len(entries))
    return MappingProxyType(entries)


_REGISTRY = _build()

formatters: Mapping[str, Formatter] = MappingProxyType(
    {name: entry.formatter for name, entry in _REGISTRY.items()}
)

parsers: tuple[str, ...] = tuple(name for name, entry in _REGISTRY.items() if not entry.can_print)

printers: tuple[str, ...] = tuple(name for name, entry in _REGISTRY.items() if entry.can_print)


def list_registry() -> tuple[RegistryEntry, ...]:
    """All entries, ordered by name."""
    return tuple(_REGISTRY.values())


def get_entry(name: str) -> RegistryEntry:
    """Entry for ``name``.

    Raises:
        KeyError: If no built-in formatter has that name
    """
    return _REGISTRY[name]


def show_formatters(
    instant: Instant | None = None,
    stream: TextIO | None = None,
    zone: tzinfo | str | None = None,
) -> None:
    """Write every printable formatter's name and a sample rendering.

    Args:
        instant: Instant to render (default: now)
        stream: Output stream (default: sys.stdout)
        zone: Zone to render in instead of UTC (tzinfo or IANA identifier)

    Raises:
        ValueError: If the zone identifier is unknown
    """
    sample = Instant.now() if instant is None else instant
    out = sys.stdout if stream is None else stream
    for name in printers:
        fmt = formatters[name] if zone is None else formatters[name].with_zone(zone)
        rendered = fmt.print(sample)
        out.write(f"{name:<{SHOW_FORMATTERS_NAME_WIDTH}}{rendered}\n")
