"""Locale name tables for text fields.

Month, weekday, AM/PM and era names come from Babel's CLDR data. Tables are
built once per locale and cached; parsing matches names case-insensitively
with the longest candidate winning, so "June" is never read as "Jun" + "e".

Python 3.13+. Uses Babel for CLDR data.
"""

import functools
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import TypeAlias

from babel import Locale

from chronofmt.constants import MAX_LOCALE_CACHE_SIZE
from chronofmt.locale_utils import get_babel_locale

__all__ = [
    "LocaleNames",
    "NameCandidates",
    "candidates_for",
    "locale_names",
    "match_name",
]

# (name, field value) pairs, longest name first.
NameCandidates: TypeAlias = tuple[tuple[str, int], ...]

_WIDTHS = ("abbreviated", "wide")
_CONTEXTS = ("format", "stand-alone")


def _candidates(pairs: Iterable[tuple[str, int]]) -> NameCandidates:
    unique: dict[str, int] = {}
    for name, value in pairs:
        if name:
            unique.setdefault(name.casefold(), value)
    ordered = sorted(unique.items(), key=lambda item: (-len(item[0]), item[0]))
    return tuple(ordered)


def _context_names(data: Mapping[str, Mapping[str, Mapping[int, str]]]) -> list[tuple[str, int]]:
    pairs: list[tuple[str, int]] = []
    for context in _CONTEXTS:
        for width in _WIDTHS:
            try:
                table = data[context][width]
            except KeyError:
                continue
            pairs.extend((name, key) for key, name in table.items())
    return pairs


@dataclass(frozen=True, slots=True)
class LocaleNames:
    """CLDR names for one locale.

    Sequences are indexed from zero: months_short[0] is January,
    weekdays_short[0] is Monday.
    """

    locale_code: str
    months_short: tuple[str, ...]
    months_long: tuple[str, ...]
    weekdays_short: tuple[str, ...]
    weekdays_long: tuple[str, ...]
    meridiems: tuple[str, str]
    eras_short: Mapping[int, str]
    eras_long: Mapping[int, str]
    month_candidates: NameCandidates
    weekday_candidates: NameCandidates
    meridiem_candidates: NameCandidates

    def month(self, month: int, *, long: bool) -> str:
        """Name of month 1-12."""
        return (self.months_long if long else self.months_short)[month - 1]

    def weekday(self, day_of_week: int, *, long: bool) -> str:
        """Name of ISO weekday 1-7 (Monday=1)."""
        return (self.weekdays_long if long else self.weekdays_short)[day_of_week - 1]

    def meridiem(self, halfday: int) -> str:
        """AM (0) or PM (1) marker."""
        return self.meridiems[halfday]


def _meridiems(locale: Locale) -> tuple[str, str]:
    try:
        periods = locale.day_periods["format"]["abbreviated"]
        return periods["am"], periods["pm"]
    except KeyError:
        return locale.periods["am"], locale.periods["pm"]


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _build(locale_code: str) -> LocaleNames:
    locale = get_babel_locale(locale_code)
    months = locale.months["format"]
    days = locale.days["format"]
    am, pm = _meridiems(locale)
    eras_short = dict(locale.eras["abbreviated"].items())
    eras_long = dict(locale.eras["wide"].items())

    # Babel numbers weekdays Monday=0; ISO numbers them Monday=1.
    weekday_pairs = [(name, key + 1) for name, key in _context_names(locale.days)]

    return LocaleNames(
        locale_code=locale_code,
        months_short=tuple(months["abbreviated"][m] for m in range(1, 13)),
        months_long=tuple(months["wide"][m] for m in range(1, 13)),
        weekdays_short=tuple(days["abbreviated"][d] for d in range(7)),
        weekdays_long=tuple(days["wide"][d] for d in range(7)),
        meridiems=(am, pm),
        eras_short=eras_short,
        eras_long=eras_long,
        month_candidates=_candidates(_context_names(locale.months)),
        weekday_candidates=_candidates(weekday_pairs),
        meridiem_candidates=_candidates([(am, 0), (pm, 1)]),
    )


def locale_names(locale: Locale) -> LocaleNames:
    """Cached name tables for a Babel locale.

    Example:
        >>> from babel import Locale
        >>> locale_names(Locale.parse("en_US")).month(3, long=False)
        'Mar'
    """
    return _build(str(locale))


def candidates_for(*tables: Mapping[int, str]) -> NameCandidates:
    """Candidate list for ad-hoc value-to-name tables (e.g. chronology eras)."""
    return _candidates((name, value) for table in tables for value, name in table.items())


def match_name(text: str, position: int, candidates: NameCandidates) -> tuple[int, int] | None:
    """Longest case-insensitive name match at ``position``.

    Args:
        text: Input being parsed
        position: Offset to match at
        candidates: Casefolded (name, value) pairs, longest first

    Returns:
        Tuple of (field value, matched length in ``text``), or None

    Example:
        >>> match_name("june 5", 0, (("june", 6), ("jun", 6)))
        (6, 4)
        >>> match_name("İyun 2010", 0, (("i̇yun", 6),))
        (6, 4)
    """
    if not candidates:
        return None
    longest = max(len(name) for name, _ in candidates)

    # Casefolding can change length ("İ" folds to two characters), so fold
    # the text once and map folded lengths back to source lengths.
    folded = ""
    source_length: dict[int, int] = {0: 0}
    for consumed, char in enumerate(text[position:], start=1):
        folded += char.casefold()
        source_length.setdefault(len(folded), consumed)
        if len(folded) >= longest:
            break

    for name, value in candidates:
        length = source_length.get(len(name))
        if length is not None and folded.startswith(name):
            return value, length
    return None
