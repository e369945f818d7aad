"""Convenience parsers built purely from the primitives and combinators.

Whitespace flavors:
    ws()      one or more of space, tab, LF, CR
    iws()     one or more in-line whitespace (space, tab), never a newline
    ws_char() / iws_char()   exactly one of the above

Tokens:
    integer()        run of decimal digits (any script, category Nd)
    alpha_string()   run of letters (categories L*, M*)
    letter()         one letter

Lines:
    line_end()   one line terminator; CRLF counts as one
    line()       text up to a terminator, swallowing the terminator
"""

from parsecengine.combinators.primitives import (
    literal,
    match_char_in,
    match_while_in,
    match_while_not_in,
)
from parsecengine.combinators.shaping import ignore
from parsecengine.combinators.structure import choose, concat
from parsecengine.constants import CRLF
from parsecengine.syntax.charset import (
    DECIMAL_DIGITS,
    INLINE_WHITESPACE,
    LETTERS,
    LINE_TERMINATORS,
    WHITESPACE,
)
from parsecengine.syntax.cursor import Parser

__all__ = [
    "alpha_string",
    "integer",
    "iws",
    "iws_char",
    "letter",
    "line",
    "line_end",
    "ws",
    "ws_char",
]


def integer() -> Parser:
    """Match a run of decimal digits.

    Example:
        >>> integer()(Cursor("123abc")).remaining
        'abc'
    """
    return match_while_in(DECIMAL_DIGITS)


def alpha_string() -> Parser:
    """Match a run of letters."""
    return match_while_in(LETTERS)


def letter() -> Parser:
    """Match a single letter."""
    return match_char_in(LETTERS)


def ws() -> Parser:
    """Match one or more whitespace characters, newlines included."""
    return match_while_in(WHITESPACE)


def iws() -> Parser:
    """Match one or more in-line whitespace characters (space, tab)."""
    return match_while_in(INLINE_WHITESPACE)


def ws_char() -> Parser:
    """Match a single whitespace character, newlines included."""
    return match_char_in(WHITESPACE)


def iws_char() -> Parser:
    """Match a single in-line whitespace character."""
    return match_char_in(INLINE_WHITESPACE)


def line_end() -> Parser:
    """Match one line terminator: CRLF, LF, or CR.

    CRLF is tried first so a Windows line ending is consumed whole.
    """
    return choose([literal(CRLF), match_char_in(LINE_TERMINATORS)])


def line() -> Parser:
    """Match the rest of a line and swallow its terminator.

    The line must hold at least one character, and a terminator must follow;
    a final line without a terminator does not match. The AST is a List
    holding the line's text, the terminator is ignored.

    Example:
        >>> line()(Cursor("there is the line\\nline 2")).remaining
        'line 2'
    """
    return concat([match_while_not_in(LINE_TERMINATORS), ignore(line_end())])
