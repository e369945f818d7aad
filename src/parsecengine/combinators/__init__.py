"""Parser combinators.

Each function here is a constructor: it takes literals, predicates,
character classes, or child parsers and returns a new parser without
running anything. Parsing happens only when the returned parser is called
with a Cursor (or handed to run()/parse()).

Module Organization:
- primitives.py: Matchers that read input (literal, character runs, single characters)
- structure.py: concat, choose, times, optional, eventually
- shaping.py: tag and ignore
- derived.py: Whitespace, integer, alpha_string, line, built from the above
- runner.py: run() and parse() entry points
"""

from parsecengine.combinators.derived import (
    alpha_string,
    integer,
    iws,
    iws_char,
    letter,
    line,
    line_end,
    ws,
    ws_char,
)
from parsecengine.combinators.primitives import (
    literal,
    match_char,
    match_char_in,
    match_char_not_in,
    match_while,
    match_while_in,
    match_while_not_in,
)
from parsecengine.combinators.runner import parse, run
from parsecengine.combinators.shaping import ignore, label_ast, tag
from parsecengine.combinators.structure import choose, concat, eventually, optional, times

__all__ = [
    "alpha_string",
    "choose",
    "concat",
    "eventually",
    "ignore",
    "integer",
    "iws",
    "iws_char",
    "label_ast",
    "letter",
    "line",
    "line_end",
    "literal",
    "match_char",
    "match_char_in",
    "match_char_not_in",
    "match_while",
    "match_while_in",
    "match_while_not_in",
    "optional",
    "parse",
    "run",
    "tag",
    "times",
    "ws",
    "ws_char",
]
