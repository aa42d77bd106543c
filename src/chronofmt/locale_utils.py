"""Locale utilities for BCP-47 to POSIX conversion.

Centralizes locale normalization and Babel Locale construction used by
formatters and the locale name tables. Provides canonical locale handling so
cache keys and lookups are consistent.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging

from babel import Locale, UnknownLocaleError

from chronofmt.constants import DEFAULT_LOCALE, MAX_LOCALE_CACHE_SIZE
from chronofmt.diagnostics import ErrorTemplate

__all__ = [
    "get_babel_locale",
    "normalize_locale",
    "resolve_locale",
]

logger = logging.getLogger(__name__)


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    return Locale.parse(normalize_locale(locale_code))


def resolve_locale(value: Locale | str | None) -> Locale:
    """Coerce a formatter locale argument to a Babel Locale.

    Strict: unknown codes raise instead of falling back to DEFAULT_LOCALE.

    Args:
        value: Babel Locale, locale code, or None for DEFAULT_LOCALE

    Returns:
        Babel Locale

    Raises:
        ValueError: If the code is unknown or malformed
    """
    if isinstance(value, Locale):
        return value
    code = DEFAULT_LOCALE if value is None else value
    try:
        return get_babel_locale(code)
    except (UnknownLocaleError, ValueError) as e:
        logger.debug("Rejected locale code %r: %s", code, e)
        raise ValueError(ErrorTemplate.locale_unknown(code, str(e)).message) from None
