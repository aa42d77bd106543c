"""Concurrent access tests.

Formatters, registry entries and the cached plan and locale tables are shared
freely between threads. These tests run printing, parsing and best-effort
resolution from a thread pool and check that:
- Every thread sees the single-threaded result
- Cached compile_pattern plans and locale_names tables are shared objects
- Shared objects are never modified by concurrent use

Structure:
    - TestConcurrentFormatterBasic: Essential tests (run in every CI build)
    - TestConcurrentCaches: Cache identity and immutability under contention
    - TestConcurrentIntensive: Property-based tests (fuzz-marked)
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Any

import pytest
from babel import Locale
from hypothesis import given, settings
from hypothesis import strategies as st

from chronofmt import Instant, NoMatchError, formatter, formatters, parse_any
from chronofmt.pattern import compile_pattern
from chronofmt.runtime.locale_names import locale_names

from tests.strategies import millisecond_instants

_WORKERS = 10

_SAMPLES = [Instant.of(2010, 3, 11, 14, 5, 9, 42), Instant.of(1999, 12, 31, 23, 59, 59, 999)]

_ANY_TEXTS = [
    "2010-03-11",
    "20100311",
    "2010-070",
    "2010-W10-4",
    "2010-03-11T14:05:09.042Z",
    "Thu, 11 Mar 2010 14:05:09 +0000",
]


def _run_all(tasks: list[Any], work: Callable[[Any], Any]) -> list[Any]:
    """Run ``work(task)`` for every task on a shared pool, in submission order."""
    with ThreadPoolExecutor(max_workers=_WORKERS) as executor:
        futures = [executor.submit(work, task) for task in tasks]
        for future in as_completed(futures):
            future.result()  # Raise any exceptions
        return [future.result() for future in futures]


# =============================================================================
# Essential Concurrency Tests (Run in every CI build)
# =============================================================================


class TestConcurrentFormatterBasic:
    """Shared formatters give every thread the single-threaded answer."""

    def test_registry_print_and_parse(self) -> None:
        """date-time prints and parses identically from many threads."""
        fmt = formatters["date-time"]
        expected = {instant: fmt.print(instant) for instant in _SAMPLES}

        def round_trip(instant: Instant) -> tuple[Instant, str, Instant]:
            text = fmt.print(instant)
            return instant, text, fmt.parse(text)

        results = _run_all(_SAMPLES * 25, round_trip)

        assert len(results) == 50
        for instant, text, parsed in results:
            assert text == expected[instant]
            assert parsed == instant

    def test_parse_any(self) -> None:
        """Best-effort resolution is deterministic under contention."""
        expected = {text: parse_any(text) for text in _ANY_TEXTS}

        results = _run_all(_ANY_TEXTS * 10, lambda text: (text, parse_any(text)))

        for text, instant in results:
            assert instant == expected[text]

    def test_parse_any_failures(self) -> None:
        """Rejections raise in every thread without disturbing other threads."""
        failures: list[str] = []
        lock = threading.Lock()

        def attempt(text: str) -> None:
            try:
                parse_any(text)
            except NoMatchError as e:
                with lock:
                    failures.append(e.text or "")

        _run_all(["not a date", "2010-03-11"] * 10, attempt)

        assert failures == ["not a date"] * 10

    def test_mixed_operations(self) -> None:
        """Printing, parsing and resolution interleave on one pool."""
        fmt = formatters["date-time"]
        sample = _SAMPLES[0]
        text = fmt.print(sample)

        tasks = ["print", "parse", "any"] * 20

        def run(task: str) -> object:
            match task:
                case "print":
                    return fmt.print(sample)
                case "parse":
                    return fmt.parse(text)
                case _:
                    return parse_any(text)

        results = _run_all(tasks, run)

        for task, result in zip(tasks, results, strict=True):
            assert result == (text if task == "print" else sample)

    def test_derived_formatters(self) -> None:
        """with_zone and with_locale copies never leak into the shared original."""
        fmt = formatter("EEEE d MMMM yyyy HH:mm")
        before = fmt.print(_SAMPLES[0])
        locales = ["fr_FR", "de_DE", "lv_LV", "ja_JP", "en_US"] * 6

        def derive(code: str) -> str:
            return fmt.with_zone("Europe/Riga").with_locale(code).print(_SAMPLES[0])

        results = _run_all(locales, derive)

        expected = {code: derive(code) for code in set(locales)}
        assert results == [expected[code] for code in locales]
        assert fmt.print(_SAMPLES[0]) == before
        assert str(fmt.locale) == "en_US"


# =============================================================================
# Cache identity and immutability
# =============================================================================


class TestConcurrentCaches:
    """lru_cache-backed plans and name tables under contention."""

    def test_compile_pattern_shared(self) -> None:
        """Concurrent compiles of one pattern yield one shared, unchanged plan."""
        pattern = "yyyy-MM-dd'T'HH:mm:ss.SSSZZ"
        reference = compile_pattern(pattern)
        snapshot = (reference.instructions, reference.pattern)

        plans = _run_all([pattern] * 50, compile_pattern)

        assert all(plan is reference for plan in plans)
        assert (reference.instructions, reference.pattern) == snapshot

    def test_registry_plan_untouched(self) -> None:
        """Using a registry entry from many threads leaves its plan as it was."""
        fmt = formatters["date-time"]
        plan = fmt.plan
        snapshot = plan.instructions

        _run_all(_SAMPLES * 25, lambda instant: fmt.parse(fmt.print(instant)))

        assert formatters["date-time"] is fmt
        assert fmt.plan is plan
        assert plan.instructions == snapshot

    def test_locale_names_shared(self) -> None:
        """Concurrent lookups return one cached, unchanged name table."""
        locale = Locale.parse("fr_FR")
        reference = locale_names(locale)
        months = reference.months_long
        candidates = reference.month_candidates

        tables = _run_all([locale] * 50, locale_names)

        assert all(table is reference for table in tables)
        assert reference.months_long == months
        assert reference.month_candidates == candidates


# =============================================================================
# Property-based concurrency (fuzz-marked)
# =============================================================================


@pytest.mark.fuzz
class TestConcurrentIntensive:
    """Random instants across threads."""

    @given(instants=st.lists(millisecond_instants, min_size=1, max_size=20))
    @settings(deadline=None)
    def test_print_parse_matches_serial(self, instants: list[Instant]) -> None:
        """PROPERTY: threaded round trips equal serial ones."""
        fmt = formatters["date-time"]
        serial = [fmt.parse(fmt.print(instant)) for instant in instants]

        threaded = _run_all(instants, lambda instant: fmt.parse(fmt.print(instant)))

        assert threaded == serial
