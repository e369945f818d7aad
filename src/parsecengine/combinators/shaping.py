"""AST-shaping combinators.

Post-process a child parser's output without changing what it consumes:

    ignore(parser)         keep the match, drop its AST
    tag(label, parser)     label the child's AST

Both fail at the original cursor when the child fails.
"""

from parsecengine.combinators.validation_helpers import require_parser
from parsecengine.diagnostics import ErrorTemplate
from parsecengine.syntax.ast import AST, Tag, Value, is_value_list
from parsecengine.syntax.cursor import Cursor, Error, Ok, ParseOutcome, Parser

__all__ = ["ignore", "label_ast", "tag"]


def ignore(parser: Parser) -> Parser:
    """Require parser to match but contribute nothing to the AST.

    Useful for punctuation and keywords that must be present but carry no
    information afterwards.

    Example:
        >>> p = concat([ignore(literal("(")), literal(")")])
        >>> p(Cursor("()")).ast
        List(items=(Value(text=')'),))
    """
    child = require_parser(parser)

    def parse_ignore(cursor: Cursor) -> ParseOutcome:
        outcome = child(cursor)
        if isinstance(outcome, Ok):
            return Ok(outcome.cursor, None)
        return Error(cursor, ErrorTemplate.ignore_failed())

    return parse_ignore


def label_ast(label: str, ast: AST | None) -> AST | None:
    """Apply tag() labeling rules to an already-built AST.

    Rules:
        - None stays None: the label is dropped silently. Tagging an
          ignore()d parser therefore yields nothing at all; wrap the content
          so it produces output if a labeled node is always required.
        - A List made only of Value nodes (including the empty List) is
          collapsed into one Value holding their concatenated text.
        - Anything else is wrapped as-is.

    Example:
        >>> label_ast("x", List((Value("a"), Value("b"))))
        Tag(label='x', child=Value(text='ab'))
        >>> label_ast("x", None) is None
        True
    """
    if ast is None:
        return None
    if is_value_list(ast):
        return Tag(label, Value("".join(item.text for item in ast.items)))  # type: ignore[union-attr]  # is_value_list checked every item
    return Tag(label, ast)


def tag(label: str, parser: Parser) -> Parser:
    """Label the output of parser.

    See label_ast() for how the child's AST is shaped. A labeled run of
    single characters comes out as one string:

    Example:
        >>> p = tag("x", concat([literal("a"), literal("b")]))
        >>> p(Cursor("ab")).ast
        Tag(label='x', child=Value(text='ab'))
    """
    child = require_parser(parser)

    def parse_tag(cursor: Cursor) -> ParseOutcome:
        outcome = child(cursor)
        if isinstance(outcome, Ok):
            return Ok(outcome.cursor, label_ast(label, outcome.ast))
        return Error(cursor, ErrorTemplate.tag_failed())

    return parse_tag
