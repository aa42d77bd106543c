"""Immutable cursor infrastructure for pattern and text scanning.

Implements the immutable cursor pattern shared by the pattern compiler and the
text parser. Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor, so a backtracking parser can keep
      the old one around and restart from it for free
"""

from dataclasses import dataclass

__all__ = ["Cursor"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("2010-03", 0)
        >>> cursor.current
        '2'
        >>> cursor.advance(4).current
        '-'
        >>> cursor.pos  # Original unchanged (immutability)
        0
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """Check if at end of input."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            msg = f"Unexpected EOF at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Returns:
            Character at position + offset, or None if beyond EOF
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped at EOF)."""
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_ahead(self, n: int) -> str:
        """Get next n characters without advancing cursor.

        Example:
            >>> Cursor("hello", 0).slice_ahead(10)  # More than available
            'hello'
        """
        return self.source[self.pos : self.pos + n]

    def expect(self, char: str) -> "Cursor | None":
        """Consume character if it matches expected, return None otherwise.

        Example:
            >>> Cursor("T12", 0).expect("T").pos
            1
            >>> Cursor("T12", 0).expect("x") is None
            True
        """
        if not self.is_eof and self.current == char:
            return self.advance()
        return None

    def expect_text(self, text: str) -> "Cursor | None":
        """Consume text if the source continues with it verbatim.

        Example:
            >>> Cursor("2010-03", 4).expect_text("-").pos
            5
        """
        if self.source.startswith(text, self.pos):
            return self.advance(len(text))
        return None

    def count_run(self, char: str) -> int:
        """Length of the run of ``char`` starting at the cursor.

        Example:
            >>> Cursor("yyyy-MM", 0).count_run("y")
            4
        """
        end = self.pos
        while end < len(self.source) and self.source[end] == char:
            end += 1
        return end - self.pos

    def count_digits(self, limit: int) -> int:
        """Number of consecutive ASCII digits at the cursor, at most ``limit``.

        Only ASCII digits count: ``str.isdigit`` would also accept
        superscripts and other scripts' digits, which int() then rejects
        or misreads.
        """
        end = self.pos
        stop = min(len(self.source), self.pos + limit)
        while end < stop and "0" <= self.source[end] <= "9":
            end += 1
        return end - self.pos
