"""Structural combinators.

Compose child parsers without inspecting input themselves:

    concat(parsers)        all, in order
    choose(parsers)        first success, in order
    times(min, parser)     min mandatory matches, then greedy
    optional(parser)       never fails
    eventually(parser)     skip characters until parser matches

Failure Contract:
    A failing combinator reports the cursor it was invoked with, never an
    intermediate one, so no partial consumption leaks out. Children are
    assumed to honor the same contract, which is why choose() needs no
    explicit rewind between alternatives.

Output Contract:
    Children that succeed with ast=None contribute nothing: they are
    skipped when building a List, never inserted as placeholders.
"""

import logging
from collections.abc import Iterable

from parsecengine.combinators.validation_helpers import require_parser, require_parsers
from parsecengine.diagnostics import ErrorTemplate
from parsecengine.syntax.ast import AST, List
from parsecengine.syntax.cursor import Cursor, Error, Ok, ParseOutcome, Parser

__all__ = ["choose", "concat", "eventually", "optional", "times"]

logger = logging.getLogger(__name__)


def concat(parsers: Iterable[Parser]) -> Parser:
    """Run every parser in order; all must succeed.

    Args:
        parsers: Children, applied to the progressively advancing cursor

    Returns:
        Parser producing List of the children's non-absent ASTs. An empty
        sequence succeeds without consuming, producing List(()).

    Example:
        >>> p = concat([literal("("), ws(), literal(")")])
        >>> p(Cursor("(  \\n ) end")).remaining
        ' end'
        >>> p(Cursor("(  \\n  end")).message
        'concat'
    """
    children = require_parsers(parsers)

    def parse_concat(cursor: Cursor) -> ParseOutcome:
        current = cursor
        items: list[AST] = []
        for child in children:
            match child(current):
                case Ok(cursor=rest, ast=ast):
                    current = rest
                    if ast is not None:
                        items.append(ast)
                case Error():
                    return Error(cursor, ErrorTemplate.concat_failed())
        return Ok(current, List(tuple(items)))

    return parse_concat


def choose(parsers: Iterable[Parser]) -> Parser:
    """Ordered choice: try each parser on the same cursor, first success wins.

    The winning outcome is returned verbatim. Later alternatives are never
    tried once one succeeds, even if they would consume more.

    Example:
        >>> p = choose([literal("a"), literal("ab")])
        >>> p(Cursor("ab")).remaining
        'b'
    """
    alternatives = require_parsers(parsers)

    def parse_choose(cursor: Cursor) -> ParseOutcome:
        for alternative in alternatives:
            outcome = alternative(cursor)
            if isinstance(outcome, Ok):
                return outcome
        return Error(cursor, ErrorTemplate.choose_failed())

    return parse_choose


def times(min: int, parser: Parser) -> Parser:  # noqa: A002 - mirrors times(min=...) call sites
    """Match parser at least min times, then as many more times as possible.

    Two phases:
        1. Mandatory: exactly min matches; any failure fails the whole
           combinator at the original cursor. Skipped when min <= 0.
        2. Greedy: keep matching until the parser fails. The failing attempt
           is discarded and never propagated. A match that consumes nothing
           also ends this phase (and is discarded), since repeating it could
           never fail.

    Returns:
        Parser producing List of every non-absent AST from both phases

    Example:
        >>> p = times(2, literal("%"))
        >>> p(Cursor("%%%--")).remaining
        '--'
        >>> p(Cursor("%--")).message
        'times'
    """
    child = require_parser(parser)

    def parse_times(cursor: Cursor) -> ParseOutcome:
        current = cursor
        items: list[AST] = []

        for _ in range(min):
            match child(current):
                case Ok(cursor=rest, ast=ast):
                    current = rest
                    if ast is not None:
                        items.append(ast)
                case Error():
                    return Error(cursor, ErrorTemplate.times_failed())

        while True:
            outcome = child(current)
            if not isinstance(outcome, Ok) or outcome.cursor.pos == current.pos:
                break
            current = outcome.cursor
            if outcome.ast is not None:
                items.append(outcome.ast)

        return Ok(current, List(tuple(items)))

    return parse_times


def optional(parser: Parser) -> Parser:
    """Match parser if possible; succeed regardless.

    On child failure, succeeds with the cursor reported by the failed child
    (which, by the failure contract, is the original cursor) and ast=None.

    Example:
        >>> p = optional(literal("%"))
        >>> p(Cursor("---")).remaining, p(Cursor("---")).ast
        ('---', None)
        >>> p(Cursor("%--")).remaining
        '--'
    """
    child = require_parser(parser)

    def parse_optional(cursor: Cursor) -> ParseOutcome:
        outcome = child(cursor)
        if isinstance(outcome, Ok):
            return outcome
        return Ok(outcome.cursor, None)

    return parse_optional


def eventually(parser: Parser) -> Parser:
    """Skip one character at a time until parser succeeds.

    The parser is tried at the original cursor, then after dropping one
    character, then two, and so on. The first success is returned verbatim,
    so the skipped prefix contributes nothing to the AST. Once the remaining
    input is empty the combinator fails at the ORIGINAL cursor; the parser
    is not attempted at the exhausted position.

    Performance:
        O(n * cost(parser)), so O(n^2) for a linear parser. Intended for
        coarse skipping over unsupported syntax, not for hot-path grammars.

    Example:
        >>> p = eventually(literal("begin"))
        >>> p(Cursor("    begin{}")).remaining
        '{}'
        >>> p(Cursor("    begi{}")).message
        'eventually'
    """
    child = require_parser(parser)

    def parse_eventually(cursor: Cursor) -> ParseOutcome:
        current = cursor
        outcome = child(current)
        while isinstance(outcome, Error):
            current = current.advance()
            if current.is_eof:
                logger.debug(
                    "eventually: no match in %d character(s) from position %d",
                    len(cursor),
                    cursor.pos,
                )
                return Error(cursor, ErrorTemplate.eventually_failed())
            outcome = child(current)

        if current.pos != cursor.pos:
            logger.debug(
                "eventually: skipped %d character(s) from position %d",
                current.pos - cursor.pos,
                cursor.pos,
            )
        return outcome

    return parse_eventually
