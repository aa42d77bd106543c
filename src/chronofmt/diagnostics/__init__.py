"""Diagnostic system for chronofmt errors.

Provides structured error diagnostics with codes, spans, hints and expected
tokens. Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory, SourceSpan
from .errors import (
    ChronoFormatError,
    InvalidFieldsError,
    NoMatchError,
    ParseError,
    PatternError,
    TrailingInputError,
    UnsupportedOperationError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "ChronoFormatError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCategory",
    "ErrorTemplate",
    "InvalidFieldsError",
    "NoMatchError",
    "OutputFormat",
    "ParseError",
    "PatternError",
    "SourceSpan",
    "TrailingInputError",
    "UnsupportedOperationError",
]
