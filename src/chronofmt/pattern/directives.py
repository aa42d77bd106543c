"""Field directive table.

Maps each pattern letter and run length to a FieldDirective: the calendar
field it stands for, how it renders, and how many digits it accepts.

    Letter  Field                 Notes
    G       era                   text: 1-3 abbreviated, 4+ full
    y       year                  yy: two-digit (pivot), else signed year
    Y       year of era           as y
    x       ISO weekyear          as y
    w       ISO week of weekyear  number
    e       day of week           number, Monday=1
    E       day of week           text: 1-3 abbreviated, 4+ full
    D       day of year           number, up to 3 digits
    M       month of year         1-2 number, 3 abbreviated, 4+ full
    d       day of month          number
    a       halfday of day        text (AM/PM)
    K       hour of halfday       0-11
    h       clockhour of halfday  1-12
    H       hour of day           0-23
    k       clockhour of day      1-24
    m       minute of hour        number
    s       second of minute      number
    S       fraction of second    leading digits, millisecond precision
    z       zone name             print only: 1-3 short, 4+ long
    Z       zone offset / id      Z: +HHMM, ZZ: +HH:MM, ZZZ+: zone id
    X       zone offset, Z=zero   X/XX: +HHMM, XXX+: +HH:MM

Any other ASCII letter is reserved and rejected by the compiler.

Python 3.13+. Zero external dependencies.
"""

from chronofmt.constants import MAX_FRACTION_DIGITS, MAX_YEAR_DIGITS
from chronofmt.enums import FieldKind, RenderMode

from .plan import FieldDirective

__all__ = ["LETTER_FIELDS", "directive_for", "is_reserved_letter"]

LETTER_FIELDS: dict[str, FieldKind] = {
    "G": FieldKind.ERA,
    "y": FieldKind.YEAR,
    "Y": FieldKind.YEAR_OF_ERA,
    "x": FieldKind.WEEKYEAR,
    "w": FieldKind.WEEK_OF_WEEKYEAR,
    "e": FieldKind.DAY_OF_WEEK,
    "E": FieldKind.DAY_OF_WEEK,
    "D": FieldKind.DAY_OF_YEAR,
    "M": FieldKind.MONTH_OF_YEAR,
    "d": FieldKind.DAY_OF_MONTH,
    "a": FieldKind.HALFDAY_OF_DAY,
    "K": FieldKind.HOUR_OF_HALFDAY,
    "h": FieldKind.CLOCKHOUR_OF_HALFDAY,
    "H": FieldKind.HOUR_OF_DAY,
    "k": FieldKind.CLOCKHOUR_OF_DAY,
    "m": FieldKind.MINUTE_OF_HOUR,
    "s": FieldKind.SECOND_OF_MINUTE,
    "S": FieldKind.FRACTION_OF_SECOND,
    "z": FieldKind.ZONE_NAME,
    "Z": FieldKind.ZONE_OFFSET,
    "X": FieldKind.ZONE_OFFSET,
}

# Greedy digit limits for plain numeric fields.
_NUMBER_MAX_DIGITS: dict[str, int] = {
    "w": 2,
    "e": 1,
    "D": 3,
    "M": 2,
    "d": 2,
    "K": 2,
    "h": 2,
    "H": 2,
    "k": 2,
    "m": 2,
    "s": 2,
}

_YEAR_LETTERS = frozenset("yYx")

# Letters with a full-name form at four or more repetitions.
_LONG_TEXT_THRESHOLD = 4

# M and X switch form at three repetitions (MMM names, XXX colon offsets).
_MONTH_TEXT_THRESHOLD = 3

_TWO_DIGIT_YEAR_COUNT = 2


def is_reserved_letter(char: str) -> bool:
    """ASCII letters are pattern syntax even when they have no directive."""
    return char.isascii() and char.isalpha()


def _number(letter: str, count: int, kind: FieldKind) -> FieldDirective:
    return FieldDirective(
        letter=letter,
        count=count,
        kind=kind,
        mode=RenderMode.NUMBER,
        min_digits=count,
        max_digits=max(count, _NUMBER_MAX_DIGITS[letter]),
    )


def _text(letter: str, count: int, kind: FieldKind) -> FieldDirective:
    mode = RenderMode.LONG_TEXT if count >= _LONG_TEXT_THRESHOLD else RenderMode.SHORT_TEXT
    return FieldDirective(letter=letter, count=count, kind=kind, mode=mode)


def _year(letter: str, count: int, kind: FieldKind) -> FieldDirective:
    if count == _TWO_DIGIT_YEAR_COUNT:
        return FieldDirective(
            letter=letter,
            count=count,
            kind=kind,
            mode=RenderMode.TWO_DIGIT_YEAR,
            min_digits=2,
            max_digits=MAX_YEAR_DIGITS,
            signed=True,
        )
    return FieldDirective(
        letter=letter,
        count=count,
        kind=kind,
        mode=RenderMode.YEAR,
        min_digits=count,
        max_digits=max(count, MAX_YEAR_DIGITS),
        signed=True,
    )


def _zone(letter: str, count: int) -> FieldDirective:
    match letter, count:
        case "z", _:
            mode = (
                RenderMode.ZONE_NAME_LONG
                if count >= _LONG_TEXT_THRESHOLD
                else RenderMode.ZONE_NAME_SHORT
            )
            return FieldDirective(
                letter=letter, count=count, kind=FieldKind.ZONE_NAME, mode=mode, parsable=False
            )
        case "Z", 1:
            return FieldDirective(
                letter=letter, count=count, kind=FieldKind.ZONE_OFFSET, mode=RenderMode.OFFSET
            )
        case "Z", 2:
            return FieldDirective(
                letter=letter,
                count=count,
                kind=FieldKind.ZONE_OFFSET,
                mode=RenderMode.OFFSET_COLON,
            )
        case "Z", _:
            return FieldDirective(
                letter=letter, count=count, kind=FieldKind.ZONE_ID, mode=RenderMode.ZONE_ID
            )
        case _:
            # X: ISO offsets print "Z" for UTC
            mode = RenderMode.OFFSET if count < _MONTH_TEXT_THRESHOLD else RenderMode.OFFSET_COLON
            return FieldDirective(
                letter=letter, count=count, kind=FieldKind.ZONE_OFFSET, mode=mode, zulu=True
            )


def directive_for(letter: str, count: int) -> FieldDirective | None:
    """Resolve a run of ``count`` copies of ``letter`` to a directive.

    Args:
        letter: Pattern letter
        count: Run length (>= 1)

    Returns:
        FieldDirective, or None if the letter has no directive

    Example:
        >>> directive_for("M", 3).mode
        <RenderMode.SHORT_TEXT: 'short_text'>
        >>> directive_for("q", 1) is None
        True
    """
    kind = LETTER_FIELDS.get(letter)
    if kind is None:
        return None

    if letter in _YEAR_LETTERS:
        return _year(letter, count, kind)

    match letter:
        case "G" | "E" | "a":
            return _text(letter, count, kind)
        case "M":
            if count >= _MONTH_TEXT_THRESHOLD:
                return _text(letter, count, kind)
            return _number(letter, count, kind)
        case "S":
            return FieldDirective(
                letter=letter,
                count=count,
                kind=kind,
                mode=RenderMode.FRACTION,
                min_digits=count,
                max_digits=max(count, MAX_FRACTION_DIGITS),
            )
        case "z" | "Z" | "X":
            return _zone(letter, count)
        case _:
            return _number(letter, count, kind)
