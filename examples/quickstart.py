"""Quickstart example for chronofmt.

This example demonstrates printing and parsing with custom patterns, the
built-in catalog and best-effort parsing.

Note: Examples print results directly for brevity. In production, catch
ChronoFormatError (or use the try_* variants) and report bad input.
"""

from chronofmt import (
    BUDDHIST,
    ChronoFormatError,
    Instant,
    formatter,
    formatters,
    parse_any,
    try_parse,
)

instant = Instant.of(2010, 3, 11, 14, 5, 9, 42)

# Example 1: Custom pattern
print("=" * 50)
print("Example 1: Custom Pattern")
print("=" * 50)

fmt = formatter("yyyy-MM-dd HH:mm")
print(fmt.print(instant))
# Output: 2010-03-11 14:05

print(fmt.parse("2010-03-11 14:05"))
# Output: 2010-03-11T14:05:00.000Z

# Example 2: Zones and locales
print("\n" + "=" * 50)
print("Example 2: Zones and Locales")
print("=" * 50)

riga = formatter("EEEE d MMMM yyyy HH:mm ZZ", "Europe/Riga")
print(riga.print(instant))
# Output: Thursday 11 March 2010 16:05 +02:00

print(riga.with_locale("fr_FR").print(instant))
# Output: jeudi 11 mars 2010 16:05 +02:00

# Example 3: Built-in catalog
print("\n" + "=" * 50)
print("Example 3: Built-in Formatters")
print("=" * 50)

for name in ("basic-date-time", "week-date", "ordinal-date", "rfc822"):
    print(f"{name:<20}{formatters[name].print(instant)}")

# Example 4: Optional sections and two-digit years
print("\n" + "=" * 50)
print("Example 4: Optional Sections and Pivot Years")
print("=" * 50)

flexible = formatter("yyyy-MM-dd['T'HH:mm]")
print(flexible.parse("2010-03-11"))
print(flexible.parse("2010-03-11T14:05"))

short_years = formatter("dd/MM/yy").with_pivot_year(2050)
print(short_years.parse("11/03/51"))
# Output: 1951-03-11T00:00:00.000Z

# Example 5: Other calendars
print("\n" + "=" * 50)
print("Example 5: Buddhist Chronology")
print("=" * 50)

print(formatter("yyyy G").with_chronology(BUDDHIST).print(instant))
# Output: 2553 BE

# Example 6: Best-effort parsing and errors
print("\n" + "=" * 50)
print("Example 6: Unknown Layouts and Errors")
print("=" * 50)

print(parse_any("2010-W10-4"))
# Output: 2010-03-11T00:00:00.000Z

result, errors = try_parse(formatter("yyyy-MM-dd"), "2010/03/11")
print(result)
for error in errors:
    print(error.format_error())

try:
    formatter("yyyy-MM-dd").parse("2010-02-30")
except ChronoFormatError as e:
    print(f"{type(e).__name__}: {e}")
