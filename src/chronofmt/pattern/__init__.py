"""Pattern compilation: pattern strings to immutable instruction plans."""

from .compiler import compile_choice, compile_pattern
from .directives import LETTER_FIELDS, directive_for
from .plan import (
    Choice,
    CompiledPlan,
    FieldDirective,
    Instruction,
    Literal,
    OptionalSection,
)

__all__ = [
    "LETTER_FIELDS",
    "Choice",
    "CompiledPlan",
    "FieldDirective",
    "Instruction",
    "Literal",
    "OptionalSection",
    "compile_choice",
    "compile_pattern",
    "directive_for",
]
