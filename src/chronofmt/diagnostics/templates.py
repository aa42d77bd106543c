"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]


def _span(position: int, length: int = 1) -> SourceSpan:
    return SourceSpan(start=position, end=position + length)


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and consistent and documents every error case
    in one place.
    """

    # =========================================================================
    # PATTERN ERRORS (1000-1999)
    # =========================================================================

    @staticmethod
    def unknown_pattern_letter(pattern: str, position: int, letter: str) -> Diagnostic:
        """Pattern contains a letter with no field directive.

        Args:
            pattern: The pattern being compiled
            position: Offset of the letter run
            letter: The unrecognized letter

        Returns:
            Diagnostic for PATTERN_UNKNOWN_LETTER
        """
        msg = f"Illegal pattern component '{letter}' at position {position}"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_UNKNOWN_LETTER,
            message=msg,
            span=_span(position),
            hint="Quote literal letters with single quotes, e.g. 'T'",
            source=pattern,
        )

    @staticmethod
    def unterminated_quote(pattern: str, position: int) -> Diagnostic:
        """Quoted literal run has no closing quote.

        Args:
            pattern: The pattern being compiled
            position: Offset of the opening quote

        Returns:
            Diagnostic for PATTERN_UNTERMINATED_QUOTE
        """
        msg = f"Unterminated quote starting at position {position}"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_UNTERMINATED_QUOTE,
            message=msg,
            span=SourceSpan(start=position, end=len(pattern)),
            hint="Close the literal with ' or write '' for a literal quote",
            source=pattern,
            expected=("'",),
        )

    @staticmethod
    def unbalanced_section(pattern: str, position: int, bracket: str) -> Diagnostic:
        """Optional section bracket without its partner.

        Args:
            pattern: The pattern being compiled
            position: Offset of the offending bracket
            bracket: The bracket character found ('[' or ']')

        Returns:
            Diagnostic for PATTERN_UNBALANCED_SECTION
        """
        partner = "]" if bracket == "[" else "["
        msg = f"Unbalanced optional section '{bracket}' at position {position}"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_UNBALANCED_SECTION,
            message=msg,
            span=_span(position),
            hint="Quote literal brackets, e.g. '['",
            source=pattern,
            expected=(partner,),
        )

    @staticmethod
    def empty_section(pattern: str, position: int) -> Diagnostic:
        """Optional section with nothing inside.

        Args:
            pattern: The pattern being compiled
            position: Offset of the opening bracket

        Returns:
            Diagnostic for PATTERN_EMPTY_SECTION
        """
        msg = f"Empty optional section at position {position}"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_EMPTY_SECTION,
            message=msg,
            span=_span(position, 2),
            source=pattern,
        )

    @staticmethod
    def pattern_too_long(length: int, max_length: int) -> Diagnostic:
        """Pattern exceeds the compile size limit.

        Args:
            length: Actual pattern length
            max_length: Configured maximum

        Returns:
            Diagnostic for PATTERN_TOO_LONG
        """
        msg = f"Pattern length {length} exceeds maximum of {max_length} characters"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_TOO_LONG,
            message=msg,
        )

    # =========================================================================
    # PARSE ERRORS (2000-2999)
    # =========================================================================

    @staticmethod
    def literal_mismatch(text: str, position: int, literal: str) -> Diagnostic:
        """Literal text of the plan not found at the cursor.

        Args:
            text: The input being parsed
            position: Cursor offset
            literal: The literal the plan expected

        Returns:
            Diagnostic for PARSE_LITERAL_MISMATCH
        """
        msg = f"Expected '{literal}' at position {position}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_LITERAL_MISMATCH,
            message=msg,
            span=_span(position, len(literal)),
            source=text,
            expected=(literal,),
        )

    @staticmethod
    def number_expected(text: str, position: int, field: str, digits: str) -> Diagnostic:
        """Numeric field has no (or too few) digits at the cursor.

        Args:
            text: The input being parsed
            position: Cursor offset
            field: Name of the field being parsed
            digits: Human description of the digits wanted (e.g. "2 digits")

        Returns:
            Diagnostic for PARSE_NUMBER_EXPECTED
        """
        msg = f"Expected {digits} for {field} at position {position}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_NUMBER_EXPECTED,
            message=msg,
            span=_span(position),
            source=text,
            expected=(field,),
        )

    @staticmethod
    def text_unknown(
        text: str, position: int, field: str, candidates: tuple[str, ...]
    ) -> Diagnostic:
        """No locale name matches at the cursor.

        Args:
            text: The input being parsed
            position: Cursor offset
            field: Name of the text field being parsed
            candidates: Names that would have been accepted

        Returns:
            Diagnostic for PARSE_TEXT_UNKNOWN
        """
        msg = f"Unrecognized {field} text at position {position}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_TEXT_UNKNOWN,
            message=msg,
            span=_span(position),
            hint="Text fields match locale names case-insensitively",
            source=text,
            expected=candidates,
        )

    @staticmethod
    def offset_invalid(text: str, position: int) -> Diagnostic:
        """Zone offset is malformed.

        Args:
            text: The input being parsed
            position: Cursor offset

        Returns:
            Diagnostic for PARSE_OFFSET_INVALID
        """
        msg = f"Invalid zone offset at position {position}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_OFFSET_INVALID,
            message=msg,
            span=_span(position),
            hint="Offsets look like Z, +08, +0800 or +08:00",
            source=text,
            expected=("Z", "+HH:MM"),
        )

    @staticmethod
    def zone_unknown(text: str, position: int) -> Diagnostic:
        """No zone identifier matches at the cursor.

        Args:
            text: The input being parsed
            position: Cursor offset

        Returns:
            Diagnostic for PARSE_ZONE_UNKNOWN
        """
        msg = f"Unknown zone identifier at position {position}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_ZONE_UNKNOWN,
            message=msg,
            span=_span(position),
            hint="Zone identifiers are IANA names such as Europe/Riga or UTC",
            source=text,
        )

    @staticmethod
    def trailing_input(text: str, position: int) -> Diagnostic:
        """Plan finished before the input did.

        Args:
            text: The input being parsed
            position: Offset of the first unconsumed character

        Returns:
            Diagnostic for PARSE_TRAILING_INPUT
        """
        msg = f"Unexpected trailing input at position {position}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_TRAILING_INPUT,
            message=msg,
            span=SourceSpan(start=position, end=len(text)),
            hint="Use parse_prefix() to accept a leading match",
            source=text,
        )

    # =========================================================================
    # FIELD RESOLUTION ERRORS (3000-3999)
    # =========================================================================

    @staticmethod
    def fields_invalid(fields: Mapping[str, int], reason: str) -> Diagnostic:
        """Parsed fields do not form a valid instant.

        Args:
            fields: The parsed field values by field name
            reason: Why the combination was rejected

        Returns:
            Diagnostic for FIELDS_INVALID
        """
        rendered = ", ".join(f"{name}={value}" for name, value in fields.items())
        msg = f"Invalid field combination ({rendered}): {reason}"
        return Diagnostic(
            code=DiagnosticCode.FIELDS_INVALID,
            message=msg,
        )

    @staticmethod
    def field_out_of_range(field: str, value: int, low: int, high: int) -> Diagnostic:
        """Single field value outside its legal range.

        Args:
            field: Field name
            value: Parsed value
            low: Inclusive lower bound
            high: Inclusive upper bound

        Returns:
            Diagnostic for FIELDS_OUT_OF_RANGE
        """
        msg = f"Value {value} for {field} must be in the range [{low},{high}]"
        return Diagnostic(
            code=DiagnosticCode.FIELDS_OUT_OF_RANGE,
            message=msg,
        )

    @staticmethod
    def fields_inconsistent(first: str, second: str) -> Diagnostic:
        """Two parsed fields contradict each other.

        Args:
            first: Description of the first field and value
            second: Description of the conflicting field and value

        Returns:
            Diagnostic for FIELDS_INCONSISTENT
        """
        msg = f"Parsed {first} contradicts {second}"
        return Diagnostic(
            code=DiagnosticCode.FIELDS_INCONSISTENT,
            message=msg,
        )

    @staticmethod
    def local_time_gap(local: str, zone: str) -> Diagnostic:
        """Local time does not exist in the zone (daylight saving gap).

        Args:
            local: ISO rendering of the local date-time
            zone: Zone identifier

        Returns:
            Diagnostic for FIELDS_LOCAL_TIME_GAP
        """
        msg = f"Local time {local} does not exist in zone {zone}"
        return Diagnostic(
            code=DiagnosticCode.FIELDS_LOCAL_TIME_GAP,
            message=msg,
            hint="The zone skips this wall-clock time (daylight saving transition)",
        )

    # =========================================================================
    # RESOLUTION ERRORS (4000-4999)
    # =========================================================================

    @staticmethod
    def no_match(text: str) -> Diagnostic:
        """Best-effort resolution found no matching layout.

        Args:
            text: The input that matched nothing

        Returns:
            Diagnostic for RESOLVE_NO_MATCH
        """
        msg = f"No built-in layout matches '{text}'"
        return Diagnostic(
            code=DiagnosticCode.RESOLVE_NO_MATCH,
            message=msg,
            hint="Parse with an explicit formatter for a detailed error",
        )

    # =========================================================================
    # UNSUPPORTED OPERATIONS (5000-5999)
    # =========================================================================

    @staticmethod
    def printing_unsupported(name: str) -> Diagnostic:
        """Plan cannot be printed (optional sections or alternatives).

        Args:
            name: Formatter name or pattern

        Returns:
            Diagnostic for PRINT_UNSUPPORTED
        """
        msg = f"Printing not supported by '{name}'"
        return Diagnostic(
            code=DiagnosticCode.PRINT_UNSUPPORTED,
            message=msg,
            hint="Optional sections make the printed layout ambiguous",
        )

    @staticmethod
    def parsing_unsupported(name: str, letter: str) -> Diagnostic:
        """Plan contains a print-only directive.

        Args:
            name: Formatter name or pattern
            letter: The print-only pattern letter

        Returns:
            Diagnostic for PARSE_UNSUPPORTED
        """
        msg = f"Parsing not supported by '{name}': '{letter}' is print-only"
        return Diagnostic(
            code=DiagnosticCode.PARSE_UNSUPPORTED,
            message=msg,
            hint="Use Z or X offsets instead of zone names for parsing",
        )

    @staticmethod
    def locale_unknown(locale_code: str, reason: str) -> Diagnostic:
        """Locale code not known to Babel.

        Args:
            locale_code: The rejected code
            reason: Babel's explanation

        Returns:
            Diagnostic for LOCALE_UNKNOWN
        """
        msg = f"Unknown locale identifier '{locale_code}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNKNOWN,
            message=msg,
        )

    @staticmethod
    def zone_id_unknown(zone_id: str) -> Diagnostic:
        """Zone identifier not in the time zone database.

        Args:
            zone_id: The rejected identifier

        Returns:
            Diagnostic for ZONE_UNKNOWN
        """
        msg = f"Unknown time zone '{zone_id}'"
        return Diagnostic(
            code=DiagnosticCode.ZONE_UNKNOWN,
            message=msg,
        )
