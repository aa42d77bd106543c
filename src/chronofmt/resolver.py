"""Best-effort parsing against the built-in registry.

When the layout of a piece of text is unknown, ``parse_any`` tries every
parse-capable built-in formatter in lexicographic name order and returns the
first instant produced. The order is fixed, so the same text always resolves
the same way.

Per-candidate failures are expected and discarded; exhaustion raises
NoMatchError without candidate detail. Parse with an explicit formatter for
a diagnostic.

Python 3.13+.
"""

import logging

from chronofmt.diagnostics import (
    ChronoFormatError,
    ErrorTemplate,
    InvalidFieldsError,
    NoMatchError,
    ParseError,
)
from chronofmt.registry import list_registry
from chronofmt.runtime import Instant

__all__ = ["parse_any", "try_parse_any"]

logger = logging.getLogger(__name__)


def parse_any(text: str) -> Instant:
    """Parse ``text`` with the first built-in formatter that accepts it.

    Raises:
        NoMatchError: If no parse-capable built-in accepts the text

    Example:
        >>> str(parse_any("2010-03-11"))
        '2010-03-11T00:00:00.000Z'
    """
    for entry in list_registry():
        if not entry.can_parse:
            continue
        try:
            return entry.formatter.parse(text)
        except (ParseError, InvalidFieldsError) as e:
            logger.debug("Layout %s rejected %r: %s", entry.name, text, e)
    raise NoMatchError(ErrorTemplate.no_match(text), text=text)


def try_parse_any(text: str) -> tuple[Instant | None, tuple[ChronoFormatError, ...]]:
    """parse_any without raising.

    Returns:
        Tuple of (instant, ()) on success or (None, (NoMatchError,)) on failure
    """
    try:
        return parse_any(text), ()
    except NoMatchError as e:
        return None, (e,)
