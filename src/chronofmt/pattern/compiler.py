"""Pattern compiler.

Turns a pattern string into a CompiledPlan. Compilation is pure and
all-or-nothing: a malformed pattern raises PatternError and no partial plan
escapes.

Pattern syntax:
    - Runs of one ASCII letter are field directives (see directives.py)
    - Text between single quotes is literal; '' is a literal quote
    - [ ... ] encloses an optional section (parse only, may nest)
    - Every other character is literal

Plans are cached per pattern string, so repeated compilation is a dict lookup.

Python 3.13+. Zero external dependencies.
"""

import functools
import logging
from collections.abc import Sequence
from dataclasses import replace

from chronofmt.constants import (
    MAX_PATTERN_LENGTH,
    PATTERN_CACHE_SIZE,
    QUOTE,
    SECTION_CLOSE,
    SECTION_OPEN,
)
from chronofmt.diagnostics import ErrorTemplate, PatternError
from chronofmt.syntax import Cursor

from .directives import directive_for, is_reserved_letter
from .plan import CompiledPlan, FieldDirective, Instruction, Literal, OptionalSection

__all__ = ["compile_choice", "compile_pattern"]

logger = logging.getLogger(__name__)


def _starts_numeric(instruction: Instruction | None) -> bool:
    match instruction:
        case FieldDirective():
            return instruction.is_numeric
        case OptionalSection(instructions=inner):
            return bool(inner) and _starts_numeric(inner[0])
        case _:
            return False


def _seal(items: list[Instruction]) -> tuple[Instruction, ...]:
    """Freeze an instruction list, marking numeric fields that abut a number.

    Without a delimiter the parser cannot tell where ``yyyy`` ends in
    ``20100311``, so such fields read exactly their pattern width.
    """
    sealed: list[Instruction] = []
    for index, item in enumerate(items):
        following = items[index + 1] if index + 1 < len(items) else None
        if isinstance(item, FieldDirective) and item.is_numeric and _starts_numeric(following):
            item = replace(item, fixed_width=True)
        sealed.append(item)
    return tuple(sealed)


def _read_quoted(pattern: str, cursor: Cursor) -> tuple[str, Cursor]:
    """Read a quoted literal starting at the opening quote.

    Returns:
        Tuple of (literal text, cursor after the closing quote)

    Raises:
        PatternError: If the closing quote is missing
    """
    start = cursor.pos
    cursor = cursor.advance()
    chars: list[str] = []
    while not cursor.is_eof:
        if cursor.current == QUOTE:
            if cursor.peek(1) == QUOTE:
                chars.append(QUOTE)
                cursor = cursor.advance(2)
                continue
            return "".join(chars), cursor.advance()
        chars.append(cursor.current)
        cursor = cursor.advance()
    diagnostic = ErrorTemplate.unterminated_quote(pattern, start)
    raise PatternError(diagnostic, pattern=pattern, position=start, character=QUOTE)


@functools.lru_cache(maxsize=PATTERN_CACHE_SIZE)
def compile_pattern(pattern: str) -> CompiledPlan:
    """Compile a pattern string into an immutable plan.

    Args:
        pattern: Pattern such as "yyyy-MM-dd'T'HH:mm:ss.SSSZZ"

    Returns:
        CompiledPlan (cached; equal patterns share one plan)

    Raises:
        PatternError: On an unknown letter, an unterminated quote,
            unbalanced or empty optional sections, or an oversized pattern

    Example:
        >>> plan = compile_pattern("yyyy-MM-dd")
        >>> [type(i).__name__ for i in plan.instructions]
        ['FieldDirective', 'Literal', 'FieldDirective', 'Literal', 'FieldDirective']
    """
    if len(pattern) > MAX_PATTERN_LENGTH:
        diagnostic = ErrorTemplate.pattern_too_long(len(pattern), MAX_PATTERN_LENGTH)
        raise PatternError(diagnostic, pattern=pattern)

    # Each frame: (instructions so far, offset of the opening bracket)
    stack: list[tuple[list[Instruction], int]] = [([], -1)]
    pending: list[str] = []

    def flush() -> None:
        if pending:
            stack[-1][0].append(Literal("".join(pending)))
            pending.clear()

    cursor = Cursor(pattern, 0)
    while not cursor.is_eof:
        char = cursor.current

        if char == QUOTE:
            if cursor.peek(1) == QUOTE:
                pending.append(QUOTE)
                cursor = cursor.advance(2)
            else:
                text, cursor = _read_quoted(pattern, cursor)
                pending.append(text)
        elif char == SECTION_OPEN:
            flush()
            stack.append(([], cursor.pos))
            cursor = cursor.advance()
        elif char == SECTION_CLOSE:
            if len(stack) == 1:
                diagnostic = ErrorTemplate.unbalanced_section(pattern, cursor.pos, char)
                raise PatternError(diagnostic, pattern=pattern, position=cursor.pos, character=char)
            flush()
            items, opened_at = stack.pop()
            if not items:
                diagnostic = ErrorTemplate.empty_section(pattern, opened_at)
                raise PatternError(diagnostic, pattern=pattern, position=opened_at, character=char)
            stack[-1][0].append(OptionalSection(_seal(items)))
            cursor = cursor.advance()
        elif is_reserved_letter(char):
            count = cursor.count_run(char)
            directive = directive_for(char, count)
            if directive is None:
                diagnostic = ErrorTemplate.unknown_pattern_letter(pattern, cursor.pos, char)
                raise PatternError(diagnostic, pattern=pattern, position=cursor.pos, character=char)
            flush()
            stack[-1][0].append(directive)
            cursor = cursor.advance(count)
        else:
            pending.append(char)
            cursor = cursor.advance()

    if len(stack) > 1:
        opened_at = stack[-1][1]
        diagnostic = ErrorTemplate.unbalanced_section(pattern, opened_at, SECTION_OPEN)
        raise PatternError(
            diagnostic, pattern=pattern, position=opened_at, character=SECTION_OPEN
        )
    flush()

    plan = CompiledPlan(instructions=_seal(stack[0][0]), pattern=pattern)
    logger.debug("Compiled pattern %r into %d instructions", pattern, len(plan.instructions))
    return plan


def compile_choice(patterns: Sequence[str]) -> CompiledPlan:
    """Compile alternative patterns into one parse-only plan.

    The parser tries every alternative and keeps the longest match, so
    ``("yyyy-MM-dd", "yyyy-DDD")`` reads both calendar and ordinal dates.

    Args:
        patterns: One or more patterns

    Returns:
        CompiledPlan; a single pattern compiles exactly as compile_pattern

    Raises:
        PatternError: If any alternative is malformed
        ValueError: If no pattern is given
    """
    if not patterns:
        msg = "compile_choice() needs at least one pattern"
        raise ValueError(msg)
    return CompiledPlan.choice(tuple(compile_pattern(pattern) for pattern in patterns))
