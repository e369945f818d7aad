"""ParsecEngine - a small parser-combinator engine.

Build parsers by nesting combinator calls, then invoke them on text. Each
parser either consumes a prefix and produces an AST fragment, or fails with
a diagnostic, leaving the input position unchanged.

Example:
    >>> from parsecengine import alpha_string, concat, ignore, literal, run, tag
    >>> header = tag("name", concat([ignore(literal("id:")), alpha_string()]))
    >>> outcome = run(header, "id:bob rest")
    >>> outcome.remaining, outcome.ast
    (' rest', Tag(label='name', child=Value(text='bob')))

Public API:
    Combinators - literal, match_while, match_char, match_char_in, concat,
                  choose, times, optional, eventually, tag, ignore, ...
    Derived parsers - integer, alpha_string, letter, ws, iws, line, ...
    run / parse - Entry points accepting plain strings
    Cursor, Ok, Error - Input position and parse outcomes
    Value, List, Tag - AST variants

Exceptions:
    ParsecError - Base exception class
    ParseFailedError - parse() on a failing parser
    IncompleteParseError - parse() with unconsumed input
    InputTooLargeError - Input exceeds max_source_size

Submodules:
    parsecengine.syntax - Cursor, outcomes, AST, character classes, visitors
    parsecengine.combinators - Parser constructors and entry points
    parsecengine.diagnostics - Exceptions and message templates
"""

from .combinators import (
    alpha_string,
    choose,
    concat,
    eventually,
    ignore,
    integer,
    iws,
    iws_char,
    label_ast,
    letter,
    line,
    line_end,
    literal,
    match_char,
    match_char_in,
    match_char_not_in,
    match_while,
    match_while_in,
    match_while_not_in,
    optional,
    parse,
    run,
    tag,
    times,
    ws,
    ws_char,
)
from .diagnostics import (
    IncompleteParseError,
    InputTooLargeError,
    ParsecError,
    ParseFailedError,
)
from .syntax import (
    AST,
    CharClass,
    Cursor,
    Error,
    List,
    Ok,
    ParseOutcome,
    Parser,
    Tag,
    Value,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("parsecengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Model
    "AST",
    "CharClass",
    "Cursor",
    "Error",
    "List",
    "Ok",
    "ParseOutcome",
    "Parser",
    "Tag",
    "Value",
    # Primitives
    "literal",
    "match_char",
    "match_char_in",
    "match_char_not_in",
    "match_while",
    "match_while_in",
    "match_while_not_in",
    # Structure
    "choose",
    "concat",
    "eventually",
    "optional",
    "times",
    # Shaping
    "ignore",
    "label_ast",
    "tag",
    # Derived
    "alpha_string",
    "integer",
    "iws",
    "iws_char",
    "letter",
    "line",
    "line_end",
    "ws",
    "ws_char",
    # Entry points
    "parse",
    "run",
    # Exceptions
    "IncompleteParseError",
    "InputTooLargeError",
    "ParseFailedError",
    "ParsecError",
    "__version__",
]
