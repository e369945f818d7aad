"""Result and AST model.

Provides the cursor (input position), parse outcomes, the three-variant
AST, character classes, and tree traversal/serialization. The combinators
in parsecengine.combinators are built on this package and nothing here
depends on them.

Python 3.13+.
"""

from .ast import AST, List, Tag, Value, is_value_list
from .charset import (
    ALPHANUMERICS,
    DECIMAL_DIGITS,
    INLINE_WHITESPACE,
    LETTERS,
    LINE_TERMINATORS,
    WHITESPACE,
    CharClass,
    CharSpec,
    as_char_class,
)
from .cursor import Cursor, Error, Ok, ParseOutcome, Parser
from .serializer import dump, from_data, to_data
from .visitor import ASTTransformer, ASTVisitor

__all__ = [
    "ALPHANUMERICS",
    "AST",
    "ASTTransformer",
    "ASTVisitor",
    "CharClass",
    "CharSpec",
    "Cursor",
    "DECIMAL_DIGITS",
    "Error",
    "INLINE_WHITESPACE",
    "LETTERS",
    "LINE_TERMINATORS",
    "List",
    "Ok",
    "ParseOutcome",
    "Parser",
    "Tag",
    "Value",
    "WHITESPACE",
    "as_char_class",
    "dump",
    "from_data",
    "is_value_list",
    "to_data",
]
