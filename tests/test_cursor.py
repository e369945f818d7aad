"""Tests for cursor infrastructure and parse outcomes.

Validates the immutable cursor (half-open view over shared text) and the
Ok/Error outcome values.
"""

from __future__ import annotations

import pytest

from parsecengine.diagnostics import ParseFailedError
from parsecengine.syntax.ast import Value
from parsecengine.syntax.cursor import Cursor, Error, Ok

# ============================================================================
# CURSOR CONSTRUCTION
# ============================================================================


class TestCursorConstruction:
    """Test cursor creation and range validation."""

    def test_defaults_cover_whole_source(self) -> None:
        """Default range is the whole source."""
        cursor = Cursor("hello")

        assert cursor.pos == 0
        assert cursor.end == 5
        assert cursor.text == "hello"

    def test_sub_range(self) -> None:
        """Explicit pos/end select a sub-range without copying the source."""
        source = "hello world"
        cursor = Cursor(source, 6, 11)

        assert cursor.text == "world"
        assert cursor.source is source

    def test_end_before_source_end(self) -> None:
        """end narrows the view; text beyond it is invisible."""
        cursor = Cursor("hello world", 0, 5)

        assert cursor.text == "hello"
        assert len(cursor) == 5

    @pytest.mark.parametrize(
        ("pos", "end"),
        [(-1, None), (6, None), (3, 2), (0, 6)],
    )
    def test_invalid_range_rejected(self, pos: int, end: int | None) -> None:
        """Ranges outside 0 <= pos <= end <= len(source) raise ValueError."""
        with pytest.raises(ValueError, match="invalid for source of length 5"):
            Cursor("hello", pos, end)

    def test_cursor_immutability(self) -> None:
        """Cursor is immutable (frozen dataclass)."""
        cursor = Cursor("hello")

        with pytest.raises(AttributeError):
            cursor.pos = 5  # type: ignore[misc]

    def test_equality_and_hash(self) -> None:
        """Cursors compare by source and range."""
        assert Cursor("abc", 1) == Cursor("abc", 1, 3)
        assert hash(Cursor("abc", 1)) == hash(Cursor("abc", 1, 3))
        assert Cursor("abc", 1) != Cursor("abc", 2)

    def test_repr_truncates_long_text(self) -> None:
        """repr shows a bounded preview of the remaining text."""
        cursor = Cursor("x" * 100)

        assert "..." in repr(cursor)
        assert repr(Cursor("ab", 1)) == "Cursor(pos=1, end=2, text='b')"


# ============================================================================
# CHARACTER ACCESS
# ============================================================================


class TestCursorAccess:
    """Test EOF detection, current, peek."""

    def test_is_eof(self) -> None:
        """is_eof is True only when the range is exhausted."""
        assert not Cursor("hi").is_eof
        assert Cursor("hi", 2).is_eof
        assert Cursor("").is_eof
        assert Cursor("hello", 2, 2).is_eof

    def test_current(self) -> None:
        """current returns the character at pos."""
        assert Cursor("hello", 2).current == "l"

    def test_current_raises_eof_error(self) -> None:
        """Accessing current at EOF raises EOFError."""
        with pytest.raises(EOFError, match="Unexpected EOF at position 5"):
            _ = Cursor("hello", 5).current

    def test_current_respects_end(self) -> None:
        """current does not read past the range end."""
        with pytest.raises(EOFError):
            _ = Cursor("hello", 3, 3).current

    def test_peek(self) -> None:
        """peek looks ahead without advancing and stops at end."""
        cursor = Cursor("hello", 0, 3)

        assert cursor.peek() == "h"
        assert cursor.peek(2) == "l"
        assert cursor.peek(3) is None
        assert cursor.pos == 0


# ============================================================================
# ADVANCING
# ============================================================================


class TestCursorAdvance:
    """Test advance(), startswith(), slice_to(), is_suffix_of()."""

    def test_advance_returns_new_cursor(self) -> None:
        """advance() leaves the original untouched."""
        cursor = Cursor("hello")
        advanced = cursor.advance(2)

        assert cursor.pos == 0
        assert advanced.pos == 2
        assert advanced.text == "llo"

    def test_advance_clamps_to_end(self) -> None:
        """advance() never escapes the range."""
        cursor = Cursor("hello world", 0, 5)

        assert cursor.advance(100).pos == 5
        assert cursor.advance(100).end == 5

    def test_startswith(self) -> None:
        """startswith() checks the remaining range only."""
        cursor = Cursor("hello world", 6, 9)

        assert cursor.startswith("wor")
        assert not cursor.startswith("world")
        assert cursor.startswith("")

    def test_slice_to(self) -> None:
        """slice_to() extracts matched text between two cursors."""
        start = Cursor("hello world")
        cursor = start
        while not cursor.is_eof and cursor.current != " ":
            cursor = cursor.advance()

        assert start.slice_to(cursor.pos) == "hello"

    def test_is_suffix_of(self) -> None:
        """A cursor is a suffix of any earlier cursor over the same range."""
        cursor = Cursor("hello")

        assert cursor.advance(2).is_suffix_of(cursor)
        assert cursor.is_suffix_of(cursor)
        assert not cursor.is_suffix_of(cursor.advance(2))
        assert not Cursor("hello", 2, 4).is_suffix_of(cursor)
        assert not Cursor("world").is_suffix_of(cursor)


# ============================================================================
# LINE/COLUMN
# ============================================================================


class TestLineColumn:
    """Test Cursor.compute_line_col."""

    def test_compute_line_col(self) -> None:
        """Line and column are 1-based over the whole source."""
        source = "line1\nline2\nline3"

        assert Cursor(source, 0).compute_line_col() == (1, 1)
        assert Cursor(source, 6).compute_line_col() == (2, 1)
        assert Cursor(source, 8).compute_line_col() == (2, 3)

    def test_crlf_counts_one_line(self) -> None:
        """CRLF ends one line; the column restarts after the LF."""
        source = "ab\r\ncd"

        assert Cursor(source, 4).compute_line_col() == (2, 1)
        assert Cursor(source, 5).compute_line_col() == (2, 2)

    def test_empty_source(self) -> None:
        """Empty source is line 1, column 1."""
        assert Cursor("").compute_line_col() == (1, 1)


# ============================================================================
# OUTCOMES
# ============================================================================


class TestOutcomes:
    """Test Ok and Error values."""

    def test_ok_truthy_and_remaining(self) -> None:
        """Ok is truthy and exposes the remaining text."""
        outcome = Ok(Cursor("abc", 1), Value("a"))

        assert outcome
        assert outcome.remaining == "bc"
        assert outcome.unwrap() is outcome

    def test_ok_absent_ast_defaults_to_none(self) -> None:
        """Ok without an AST carries None, not an empty list."""
        assert Ok(Cursor("abc")).ast is None

    def test_error_falsy_and_remaining(self) -> None:
        """Error is falsy and exposes the text at the failure position."""
        error = Error(Cursor("abc", 1), "char")

        assert not error
        assert error.remaining == "bc"
        assert error.message == "char"

    def test_error_unwrap_raises(self) -> None:
        """unwrap() on an Error raises ParseFailedError carrying it."""
        error = Error(Cursor("hello\nworld", 7), "concat")

        with pytest.raises(ParseFailedError, match="2:2: concat") as exc_info:
            error.unwrap()
        assert exc_info.value.error is error

    def test_format_error(self) -> None:
        """format_error() prefixes line:col."""
        assert Error(Cursor("hello\nworld", 7), "tag").format_error() == "2:2: tag"

    def test_format_with_context(self) -> None:
        """format_with_context() shows the line and a caret under the column."""
        error = Error(Cursor("id: 7\nname 9", 11), "char")

        lines = error.format_with_context().split("\n")

        assert lines[0] == "2:6: char"
        assert lines[2] == "   1 | id: 7"
        assert lines[3] == "   2 | name 9"
        assert lines[4] == " " * 12 + "^"

    def test_outcomes_are_immutable(self) -> None:
        """Outcomes are frozen."""
        outcome = Ok(Cursor("a"))

        with pytest.raises(AttributeError):
            outcome.ast = Value("a")  # type: ignore[misc]

    def test_outcomes_pattern_match(self) -> None:
        """Outcomes destructure with match statements."""
        match Ok(Cursor("ab", 1), Value("a")):
            case Ok(cursor=rest, ast=Value(text=text)):
                assert rest.text == "b"
                assert text == "a"
            case _:
                pytest.fail("Ok did not match")
