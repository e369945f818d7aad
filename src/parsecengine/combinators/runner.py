"""Entry points for invoking a parser on text.

Parsers themselves take a Cursor. These helpers accept plain strings as
well, enforce the input size limit, and log outcomes:

    run(parser, source)     return the outcome (Ok or Error)
    parse(parser, source)   require full consumption; return the AST or raise

Security:
    eventually() is quadratic in the worst case, so unbounded input is
    rejected up front (see MAX_SOURCE_SIZE).
"""

import logging

from parsecengine.constants import MAX_SOURCE_SIZE
from parsecengine.diagnostics import (
    ErrorTemplate,
    IncompleteParseError,
    InputTooLargeError,
    ParseFailedError,
)
from parsecengine.syntax.ast import AST
from parsecengine.syntax.cursor import Cursor, Error, ParseOutcome, Parser

__all__ = ["parse", "run"]

logger = logging.getLogger(__name__)


def _as_cursor(source: str | Cursor, max_source_size: int | None) -> Cursor:
    """Coerce input to a Cursor and enforce the size limit."""
    if isinstance(source, Cursor):
        cursor = source
    elif isinstance(source, str):
        cursor = Cursor(source)
    else:
        raise TypeError(ErrorTemplate.invalid_input(source))

    if max_source_size is not None and max_source_size < 0:
        raise ValueError(ErrorTemplate.invalid_source_limit(max_source_size))
    if max_source_size and len(cursor) > max_source_size:
        raise InputTooLargeError(len(cursor), max_source_size)
    return cursor


def run(
    parser: Parser,
    source: str | Cursor,
    *,
    max_source_size: int | None = MAX_SOURCE_SIZE,
) -> ParseOutcome:
    """Invoke parser on source and return its outcome.

    Args:
        parser: Parser to invoke
        source: Full text, or a Cursor over a sub-range of it
        max_source_size: Maximum input length in characters
                         (default: MAX_SOURCE_SIZE; 0 or None disables)

    Returns:
        Ok or Error. Parse failure is not an exception.

    Raises:
        InputTooLargeError: If the input exceeds max_source_size
        TypeError: If source is neither str nor Cursor
        ValueError: If max_source_size is negative

    Example:
        >>> outcome = run(literal("id:"), "id:bob")
        >>> outcome.remaining
        'bob'
    """
    cursor = _as_cursor(source, max_source_size)
    outcome = parser(cursor)

    if isinstance(outcome, Error):
        logger.debug("Parse failed: %s", outcome.format_error())
    else:
        logger.debug(
            "Parse succeeded: consumed %d of %d character(s)",
            outcome.cursor.pos - cursor.pos,
            len(cursor),
        )
    return outcome


def parse(
    parser: Parser,
    source: str | Cursor,
    *,
    max_source_size: int | None = MAX_SOURCE_SIZE,
) -> AST | None:
    """Invoke parser on source, requiring the whole input to be consumed.

    Args:
        parser: Parser to invoke
        source: Full text, or a Cursor over a sub-range of it
        max_source_size: Maximum input length in characters

    Returns:
        The produced AST (None if the parser deliberately produced nothing)

    Raises:
        ParseFailedError: If the parser failed
        IncompleteParseError: If the parser succeeded with input left over
        InputTooLargeError: If the input exceeds max_source_size

    Example:
        >>> parse(tag("name", alpha_string()), "bob")
        Tag(label='name', child=Value(text='bob'))
    """
    outcome = run(parser, source, max_source_size=max_source_size)
    if isinstance(outcome, Error):
        raise ParseFailedError(outcome)
    if not outcome.cursor.is_eof:
        raise IncompleteParseError(outcome)
    return outcome.ast
