"""Primitive matchers.

The only parsers that inspect input directly. Everything else in the
library composes these.

    literal(s)               exact string
    match_while(pred)        maximal run, one or more characters
    match_char(pred)         exactly one character
    *_in / *_not_in          the same, driven by a character class

Every primitive returns Error(cursor, ...) with the cursor it was given
when it does not match, so it never consumes on failure.

Character-class arguments accept a CharClass or a plain string of member
characters; strings are turned into a CharClass once, at construction.
"""

from collections.abc import Callable

from parsecengine.diagnostics import ErrorTemplate
from parsecengine.syntax.ast import Value
from parsecengine.syntax.charset import CharSpec, as_char_class
from parsecengine.syntax.cursor import Cursor, Error, Ok, ParseOutcome, Parser

__all__ = [
    "literal",
    "match_char",
    "match_char_in",
    "match_char_not_in",
    "match_while",
    "match_while_in",
    "match_while_not_in",
]

type CharPredicate = Callable[[str], bool]


def literal(s: str) -> Parser:
    """Match the exact string s.

    Consumes len(s) characters and produces Value(s). An empty literal
    always succeeds without consuming.

    Example:
        >>> outcome = literal("hello")(Cursor("helloworld"))
        >>> outcome.remaining, outcome.ast
        ('world', Value(text='hello'))
        >>> literal("hello")(Cursor("hellloworld")).message
        'string("hello")'
    """
    length = len(s)
    failure = ErrorTemplate.literal_mismatch(s)

    def parse_literal(cursor: Cursor) -> ParseOutcome:
        if cursor.startswith(s):
            return Ok(cursor.advance(length), Value(s))
        return Error(cursor, failure)

    return parse_literal


def match_while(predicate: CharPredicate) -> Parser:
    """Match a maximal run of characters satisfying predicate.

    At least one character must match; callers needing zero-or-more wrap
    the result in optional().

    Args:
        predicate: Called with each single-character string

    Returns:
        Parser producing Value(run)
    """

    def parse_while(cursor: Cursor) -> ParseOutcome:
        if cursor.is_eof or not predicate(cursor.current):
            return Error(cursor, ErrorTemplate.string_while())

        start = cursor
        cursor = cursor.advance()
        while not cursor.is_eof and predicate(cursor.current):
            cursor = cursor.advance()

        return Ok(cursor, Value(start.slice_to(cursor.pos)))

    return parse_while


def match_char(predicate: CharPredicate) -> Parser:
    """Match exactly one character satisfying predicate.

    Fails at end of input or on mismatch.
    """

    def parse_char(cursor: Cursor) -> ParseOutcome:
        if cursor.is_eof:
            return Error(cursor, ErrorTemplate.char_mismatch())
        char = cursor.current
        if not predicate(char):
            return Error(cursor, ErrorTemplate.char_mismatch())
        return Ok(cursor.advance(), Value(char))

    return parse_char


def match_char_in(chars: CharSpec) -> Parser:
    """Match one character that belongs to chars.

    Example:
        >>> match_char_in("%-/")(Cursor("/%//")).remaining
        '%//'
    """
    char_class = as_char_class(chars)
    return match_char(lambda char: char in char_class)


def match_char_not_in(chars: CharSpec) -> Parser:
    """Match one character that does not belong to chars."""
    char_class = as_char_class(chars)
    return match_char(lambda char: char not in char_class)


def match_while_in(chars: CharSpec) -> Parser:
    """Match a run of one or more characters belonging to chars.

    Example:
        >>> match_while_in("%+-")(Cursor("+-%in")).remaining
        'in'
    """
    char_class = as_char_class(chars)
    return match_while(lambda char: char in char_class)


def match_while_not_in(chars: CharSpec) -> Parser:
    """Match a run of one or more characters NOT belonging to chars.

    Example:
        >>> match_while_not_in(" ")(Cursor("two words")).remaining
        ' words'
    """
    char_class = as_char_class(chars)
    return match_while(lambda char: char not in char_class)
