"""chronofmt exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping

from .codes import Diagnostic, ErrorCategory

__all__ = [
    "ChronoFormatError",
    "InvalidFieldsError",
    "NoMatchError",
    "ParseError",
    "PatternError",
    "TrailingInputError",
    "UnsupportedOperationError",
]


class ChronoFormatError(Exception):
    """Base exception for all chronofmt errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    category: ErrorCategory = ErrorCategory.PARSE

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize ChronoFormatError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)

    def format_error(self) -> str:
        """Render the diagnostic (or plain message) for humans."""
        if self.diagnostic is None:
            return str(self)
        return self.diagnostic.format_error()


class PatternError(ChronoFormatError):
    """Malformed pattern string.

    Compilation is all-or-nothing: no partial plan is ever produced.

    Attributes:
        pattern: The pattern that failed to compile
        position: Offset of the offending character
        character: The offending character ('' when not positional)
    """

    category = ErrorCategory.PATTERN

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        pattern: str = "",
        position: int = 0,
        character: str = "",
    ) -> None:
        super().__init__(message)
        self.pattern = pattern
        self.position = position
        self.character = character


class ParseError(ChronoFormatError):
    """Text does not match a compiled plan.

    Recoverable by the caller; the best-effort resolver swallows it while
    trying alternative layouts.

    Attributes:
        text: The input that failed to parse
        position: Offset where matching failed
        expected: What the plan expected at that offset
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        text: str = "",
        position: int = 0,
        expected: tuple[str, ...] = (),
    ) -> None:
        super().__init__(message)
        self.text = text
        self.position = position
        self.expected = expected


class TrailingInputError(ParseError):
    """Plan matched a prefix of the text but input remained.

    ``position`` is the offset of the first unconsumed character.
    """

    @property
    def remainder(self) -> str:
        """The unconsumed suffix."""
        return self.text[self.position :]


class InvalidFieldsError(ChronoFormatError):
    """Parsed fields are syntactically fine but form no valid instant.

    Example: day 31 in a 30-day month, or hour 24.

    Attributes:
        fields: Parsed field values keyed by field name
    """

    category = ErrorCategory.FIELDS

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        fields: Mapping[str, int] | None = None,
    ) -> None:
        super().__init__(message)
        self.fields: dict[str, int] = dict(fields or {})


class NoMatchError(ChronoFormatError):
    """Best-effort resolution exhausted every parse-capable layout.

    Carries no per-candidate detail; parse with an explicit formatter
    for diagnostics.

    Attributes:
        text: The input that matched nothing
    """

    category = ErrorCategory.RESOLVE

    def __init__(self, message: str | Diagnostic, *, text: str = "") -> None:
        super().__init__(message)
        self.text = text


class UnsupportedOperationError(ChronoFormatError):
    """Formatter cannot perform the requested direction.

    Raised when printing with a parse-only plan, or parsing with a plan that
    contains print-only directives.
    """

    category = ErrorCategory.UNSUPPORTED
