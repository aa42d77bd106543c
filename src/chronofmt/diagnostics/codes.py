"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
    "SourceSpan",
]


class ErrorCategory(StrEnum):
    """Error categorization for chronofmt exceptions.

    Categories:
        PATTERN: Malformed pattern string (compile time)
        PARSE: Text does not match a compiled plan
        FIELDS: Parsed fields do not form a valid instant
        RESOLVE: Best-effort resolution exhausted every layout
        UNSUPPORTED: Operation not available for a plan (print or parse)
    """

    PATTERN = "pattern"
    PARSE = "parse"
    FIELDS = "fields"
    RESOLVE = "resolve"
    UNSUPPORTED = "unsupported"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Pattern errors (compile time)
        2000-2999: Parse errors (text vs. plan mismatch)
        3000-3999: Field resolution errors
        4000-4999: Best-effort resolution errors
        5000-5999: Unsupported operations and bad arguments
    """

    # Pattern errors (1000-1999)
    PATTERN_UNKNOWN_LETTER = 1001
    PATTERN_UNTERMINATED_QUOTE = 1002
    PATTERN_UNBALANCED_SECTION = 1003
    PATTERN_TOO_LONG = 1004
    PATTERN_EMPTY_SECTION = 1005

    # Parse errors (2000-2999)
    PARSE_LITERAL_MISMATCH = 2001
    PARSE_NUMBER_EXPECTED = 2002
    PARSE_TEXT_UNKNOWN = 2003
    PARSE_OFFSET_INVALID = 2004
    PARSE_ZONE_UNKNOWN = 2005
    PARSE_TRAILING_INPUT = 2006

    # Field resolution errors (3000-3999)
    FIELDS_INVALID = 3001
    FIELDS_OUT_OF_RANGE = 3002
    FIELDS_INCONSISTENT = 3003
    FIELDS_LOCAL_TIME_GAP = 3004

    # Resolution errors (4000-4999)
    RESOLVE_NO_MATCH = 4001

    # Unsupported operations (5000-5999)
    PRINT_UNSUPPORTED = 5001
    PARSE_UNSUPPORTED = 5002
    LOCALE_UNKNOWN = 5003
    ZONE_UNKNOWN = 5004


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Location inside a pattern or input text.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative or end precedes start.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)

    @property
    def column(self) -> int:
        """1-indexed column of the span start (inputs are single-line)."""
        return self.start + 1


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Carries everything a caller needs
    to explain a failure without re-parsing the exception message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Location in the pattern or input (None when not positional)
        hint: Suggestion for fixing the error
        source: The pattern or input text the span refers to
        expected: What the engine was looking for at the span
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    source: str | None = None
    expected: tuple[str, ...] = ()

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[PARSE_LITERAL_MISMATCH]: Expected '-' at position 4
              --> column 5
               | 2010/03/11
               |     ^
              = expected: '-'

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
