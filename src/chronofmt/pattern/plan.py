"""Compiled plan instruction types.

A CompiledPlan is the executable form of a pattern string: an ordered tuple
of instructions that the printer and the parser walk front to back.

Instruction types:
    Literal         - Text emitted/matched verbatim
    FieldDirective  - One calendar field with its rendering mode and widths
    OptionalSection - Instructions the parser may skip (pattern: [...])
    Choice          - Alternative instruction sequences; the parser keeps the
                      one that consumes the most input

Plans are frozen dataclasses: compiling the same pattern twice yields equal
plans, and a plan never changes after compilation.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TypeAlias

from chronofmt.enums import FieldKind, RenderMode

__all__ = [
    "Choice",
    "CompiledPlan",
    "FieldDirective",
    "Instruction",
    "Literal",
    "OptionalSection",
]

_NUMERIC_MODES = frozenset(
    {RenderMode.NUMBER, RenderMode.YEAR, RenderMode.TWO_DIGIT_YEAR, RenderMode.FRACTION}
)


@dataclass(frozen=True, slots=True)
class Literal:
    """Verbatim text."""

    text: str


@dataclass(frozen=True, slots=True)
class FieldDirective:
    """A run of identical pattern letters, resolved against the directive table.

    Attributes:
        letter: Pattern letter ("y", "M", ...)
        count: Run length in the pattern
        kind: Calendar field the letter stands for
        mode: Rendering/parsing mode selected by the run length
        min_digits: Zero-padding width when printing numbers
        max_digits: Greedy digit limit when parsing numbers
        fixed_width: Parse exactly ``count`` digits (set when the next
            instruction is numeric too, e.g. ``yyyyMMdd``)
        signed: Accept a leading sign when parsing (years)
        zulu: Print "Z" instead of a zero offset
        parsable: The parser can read this directive back
    """

    letter: str
    count: int
    kind: FieldKind
    mode: RenderMode
    min_digits: int = 0
    max_digits: int = 0
    fixed_width: bool = False
    signed: bool = False
    zulu: bool = False
    parsable: bool = True

    @property
    def is_numeric(self) -> bool:
        """True for directives rendered and parsed as digits."""
        return self.mode in _NUMERIC_MODES


@dataclass(frozen=True, slots=True)
class OptionalSection:
    """Instructions the parser tries and rolls back on mismatch."""

    instructions: tuple["Instruction", ...]


@dataclass(frozen=True, slots=True)
class Choice:
    """Alternative instruction sequences (longest successful match wins)."""

    alternatives: tuple[tuple["Instruction", ...], ...]


Instruction: TypeAlias = Literal | FieldDirective | OptionalSection | Choice


def _walk(instructions: tuple[Instruction, ...]) -> Iterator[FieldDirective]:
    for instruction in instructions:
        match instruction:
            case FieldDirective():
                yield instruction
            case OptionalSection(instructions=inner):
                yield from _walk(inner)
            case Choice(alternatives=alternatives):
                for alternative in alternatives:
                    yield from _walk(alternative)
            case Literal():
                pass


@dataclass(frozen=True, slots=True)
class CompiledPlan:
    """Ordered, immutable instruction sequence compiled from a pattern.

    Attributes:
        instructions: Top-level instruction sequence
        pattern: Source pattern (alternatives joined with " | ")
    """

    instructions: tuple[Instruction, ...]
    pattern: str

    def directives(self) -> Iterator[FieldDirective]:
        """Yield every field directive, descending into sections and choices."""
        return _walk(self.instructions)

    @property
    def can_print(self) -> bool:
        """Printing needs a single unambiguous layout: no sections or choices."""
        return not any(
            isinstance(instruction, OptionalSection | Choice) for instruction in self.instructions
        )

    @property
    def can_parse(self) -> bool:
        """Parsing needs every directive, at any depth, to be parsable."""
        return all(directive.parsable for directive in self.directives())

    def print_only_letters(self) -> tuple[str, ...]:
        """Pattern letters that block parsing, in plan order."""
        return tuple(d.letter for d in self.directives() if not d.parsable)

    @classmethod
    def choice(cls, plans: tuple["CompiledPlan", ...]) -> "CompiledPlan":
        """Combine plans into one whose parser picks the longest match."""
        if len(plans) == 1:
            return plans[0]
        return cls(
            instructions=(Choice(tuple(plan.instructions for plan in plans)),),
            pattern=" | ".join(plan.pattern for plan in plans),
        )
