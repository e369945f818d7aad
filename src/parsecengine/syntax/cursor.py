"""Immutable cursor and parse outcome types.

Implements the immutable cursor pattern every combinator is built on.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is a frozen view over shared source text: a half-open range
      [pos, end) into a string that is never copied or mutated
    - Every advance() returns a NEW cursor (prevents infinite loops)
    - A parse outcome is a value: Ok(cursor, ast) or Error(cursor, message)
    - Failure never advances: an Error carries the cursor the failing
      combinator was invoked with
    - Line:column computed on-demand (O(n) only for errors)

Line Ending Support:
    Line:column uses \\n as the line delimiter. CRLF input reports correct
    lines because the \\n is still present. CR-only input does not.

Pattern Reference:
    - Haskell Parsec
    - Elixir NimbleParsec
    - Rust nom parser combinator library
"""

from collections.abc import Callable
from dataclasses import dataclass, field

from parsecengine.diagnostics import ErrorTemplate, ParseFailedError
from parsecengine.syntax.ast import AST

__all__ = [
    "Cursor",
    "Error",
    "Ok",
    "ParseOutcome",
    "Parser",
]

# Longest remaining-text preview shown by Cursor.__repr__.
_REPR_PREVIEW_LEN: int = 24


@dataclass(frozen=True, slots=True, init=False, repr=False)
class Cursor:
    """Immutable input position over shared source text.

    Key Design Decisions:
        1. Frozen dataclass - Immutability enforced by Python
        2. Slots - Memory efficiency, cursors are created per character
        3. Half-open range - pos advances, end never moves, so any cursor
           derived from another is a suffix of it
        4. EOF is a property - Not a return value
        5. current raises - No None handling needed

    Example:
        >>> cursor = Cursor("hello")
        >>> cursor.current
        'h'
        >>> new_cursor = cursor.advance()
        >>> new_cursor.text
        'ello'
        >>> cursor.text  # Original unchanged (immutability)
        'hello'
        >>> Cursor("hello world", 0, 5).text  # Sub-range view
        'hello'
        >>> Cursor("hi", 2).is_eof
        True
    """

    source: str
    pos: int
    end: int

    def __init__(self, source: str, pos: int = 0, end: int | None = None) -> None:
        """Create a cursor over source[pos:end].

        Args:
            source: Backing text (shared, never copied)
            pos: Start offset of the unconsumed range (default: 0)
            end: End offset, exclusive (default: len(source))

        Raises:
            ValueError: If the range is outside 0 <= pos <= end <= len(source)
        """
        length = len(source)
        if end is None:
            end = length
        if not 0 <= pos <= end <= length:
            raise ValueError(ErrorTemplate.cursor_out_of_range(pos, end, length))
        object.__setattr__(self, "source", source)
        object.__setattr__(self, "pos", pos)
        object.__setattr__(self, "end", end)

    def __repr__(self) -> str:
        remaining = self.text
        if len(remaining) > _REPR_PREVIEW_LEN:
            remaining = remaining[:_REPR_PREVIEW_LEN] + "..."
        return f"Cursor(pos={self.pos}, end={self.end}, text={remaining!r})"

    def __len__(self) -> int:
        """Number of unconsumed characters."""
        return self.end - self.pos

    @property
    def is_eof(self) -> bool:
        """Check if the range is exhausted.

        Use this in while loops: `while not cursor.is_eof:`
        """
        return self.pos >= self.end

    @property
    def current(self) -> str:
        """Get current character.

        Returns:
            Character at pos

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            raise EOFError(ErrorTemplate.unexpected_eof(self.pos))
        return self.source[self.pos]

    @property
    def text(self) -> str:
        """Remaining (unconsumed) text.

        Allocates a new string; prefer startswith()/current in hot paths.
        """
        return self.source[self.pos : self.end]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Args:
            offset: Offset from current position (0 = current, 1 = next)

        Returns:
            Character at pos + offset, or None if beyond the range end
        """
        target_pos = self.pos + offset
        if target_pos >= self.end:
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions.

        Clamped to the range end, so advancing never escapes the view.

        Example:
            >>> cursor = Cursor("hello")
            >>> cursor.advance(2).pos
            2
            >>> cursor.advance(99).is_eof
            True
        """
        return Cursor(self.source, min(self.pos + count, self.end), self.end)

    def startswith(self, prefix: str) -> bool:
        """Check whether the remaining range starts with prefix.

        No slicing: delegates to str.startswith with bounds.
        """
        return self.source.startswith(prefix, self.pos, self.end)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos.

        Typical use: keep the start cursor, advance a copy, then
        start_cursor.slice_to(advanced.pos) for the matched text.

        Example:
            >>> start = Cursor("hello world")
            >>> cursor = start
            >>> while not cursor.is_eof and cursor.current != " ":
            ...     cursor = cursor.advance()
            >>> start.slice_to(cursor.pos)
            'hello'
        """
        return self.source[self.pos : end_pos]

    def is_suffix_of(self, other: "Cursor") -> bool:
        """Check whether this cursor is a (possibly equal) suffix of other.

        True when both view the same source, share the same end, and this
        cursor starts at or after other.
        """
        same_source = self.source is other.source or self.source == other.source
        return same_source and self.end == other.end and self.pos >= other.pos

    def compute_line_col(self) -> tuple[int, int]:
        """Compute line and column for current position.

        Relative to the whole backing source, not the sub-range.

        Returns:
            (line, column) tuple (1-indexed, like text editors)

        Example:
            >>> Cursor("line1\\nline2", 8).compute_line_col()
            (2, 3)
        """
        line = self.source.count("\n", 0, self.pos) + 1
        last_newline = self.source.rfind("\n", 0, self.pos)
        col = self.pos - last_newline if last_newline >= 0 else self.pos + 1
        return (line, col)


@dataclass(frozen=True, slots=True)
class Ok:
    """Successful parse outcome.

    Attributes:
        cursor: Remaining input (a suffix of the cursor the parser was given)
        ast: Produced node, or None when the match deliberately contributes
             nothing to the tree (ignore, optional miss)

    Example:
        >>> outcome = Ok(Cursor("abc", 1))
        >>> outcome.remaining
        'bc'
        >>> bool(outcome)
        True
    """

    cursor: Cursor
    ast: AST | None = None

    def __bool__(self) -> bool:
        return True

    @property
    def remaining(self) -> str:
        """Unconsumed text after this success."""
        return self.cursor.text

    def unwrap(self) -> "Ok":
        """Return self (mirrors Error.unwrap())."""
        return self


@dataclass(frozen=True, slots=True)
class Error:
    """Failed parse outcome.

    Design:
        - cursor is the position the failing combinator was INVOKED with,
          not where the innermost mismatch happened
        - message is a short combinator-named string for debugging
        - first failure along a branch is final; no aggregation

    Example:
        >>> error = Error(Cursor("hello\\nworld", 7), "concat")
        >>> error.format_error()
        '2:2: concat'
        >>> bool(error)
        False
    """

    cursor: Cursor
    message: str = field(default="")

    def __bool__(self) -> bool:
        return False

    @property
    def remaining(self) -> str:
        """Text at (and after) the failure position."""
        return self.cursor.text

    def unwrap(self) -> Ok:
        """Raise ParseFailedError carrying this outcome."""
        raise ParseFailedError(self)

    def format_error(self) -> str:
        """Format error with line:column.

        Returns:
            "line:col: message"
        """
        line, col = self.cursor.compute_line_col()
        return f"{line}:{col}: {self.message}"

    def format_with_context(self, context_lines: int = 2) -> str:
        """Format error with source context and pointer.

        Shows the surrounding lines and a caret under the failure position.

        Args:
            context_lines: Number of lines to show before/after the error

        Returns:
            Multi-line formatted error with context

        Example:
            >>> error = Error(Cursor("id: 7\\nname 9", 11), "char")
            >>> print(error.format_with_context())
            2:6: char
            <BLANKLINE>
               1 | id: 7
               2 | name 9
                        ^
        """
        line, col = self.cursor.compute_line_col()
        lines = self.cursor.source.split("\n")

        result_lines = [self.format_error(), ""]

        start_line = max(1, line - context_lines)
        end_line = min(len(lines), line + context_lines)

        for i in range(start_line, end_line + 1):
            line_num_str = f"{i:4} | "
            result_lines.append(line_num_str + lines[i - 1])
            if i == line:
                result_lines.append(" " * (len(line_num_str) + col - 1) + "^")

        return "\n".join(result_lines)


type ParseOutcome = Ok | Error

# A parser is a pure function from an input position to an outcome.
type Parser = Callable[[Cursor], ParseOutcome]
