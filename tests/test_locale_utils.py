"""Tests for locale normalization and resolution.

Covers normalize_locale, get_babel_locale and resolve_locale.

Python 3.13+.
"""

from __future__ import annotations

import pytest
from babel import Locale
from hypothesis import event, given
from hypothesis import strategies as st

from chronofmt.locale_utils import get_babel_locale, normalize_locale, resolve_locale


class TestNormalizeLocale:
    """BCP-47 to POSIX conversion."""

    @pytest.mark.parametrize(
        ("code", "expected"),
        [("en-US", "en_US"), ("pt-BR", "pt_BR"), ("en", "en"), ("lv_LV", "lv_LV")],
    )
    def test_hyphens_become_underscores(self, code: str, expected: str) -> None:
        """Hyphens are replaced; everything else is kept."""
        assert normalize_locale(code) == expected

    @given(code=st.text(alphabet="abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ-_"))
    def test_never_contains_hyphen(self, code: str) -> None:
        """PROPERTY: normalized codes contain no hyphen and keep their length."""
        normalized = normalize_locale(code)
        event(f"had_hyphen={'-' in code}")

        assert "-" not in normalized
        assert len(normalized) == len(code)


class TestGetBabelLocale:
    """Cached Babel Locale construction."""

    def test_both_notations(self) -> None:
        """BCP-47 and POSIX codes give the same locale."""
        assert get_babel_locale("de-DE") == get_babel_locale("de_DE")

    def test_cached(self) -> None:
        """Repeated lookups return the same object."""
        assert get_babel_locale("fr_FR") is get_babel_locale("fr_FR")


class TestResolveLocale:
    """Formatter locale arguments."""

    def test_none_is_default(self) -> None:
        """None resolves to en_US."""
        assert str(resolve_locale(None)) == "en_US"

    def test_locale_passes_through(self) -> None:
        """Locale objects are returned unchanged."""
        locale = Locale.parse("ja_JP")

        assert resolve_locale(locale) is locale

    def test_code(self) -> None:
        """Codes in either notation resolve."""
        assert resolve_locale("lv-LV") == Locale.parse("lv_LV")

    @pytest.mark.parametrize("code", ["xx_NOWHERE", "", "not a locale"])
    def test_unknown_raises(self, code: str) -> None:
        """Unknown or malformed codes raise ValueError."""
        with pytest.raises(ValueError, match="Unknown locale identifier"):
            resolve_locale(code)
