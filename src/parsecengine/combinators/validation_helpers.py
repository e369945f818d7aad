"""Shared argument checks for combinator constructors.

Combinators validate their arguments once, when the grammar is built, so
that a mistake surfaces at construction time instead of deep inside a
parse.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable

from parsecengine.diagnostics import ErrorTemplate
from parsecengine.syntax.cursor import Parser

__all__ = ["require_parser", "require_parsers"]


def require_parser(parser: object) -> Parser:
    """Return parser unchanged if it is callable.

    Raises:
        TypeError: If parser is not callable
    """
    if not callable(parser):
        raise TypeError(ErrorTemplate.invalid_parser(parser))
    return parser  # type: ignore[return-value]  # callable() narrows to Callable[..., object]


def require_parsers(parsers: Iterable[object]) -> tuple[Parser, ...]:
    """Freeze a parser sequence into a tuple, checking each element.

    The tuple is captured by the combinator's closure, so later mutation of
    the caller's list cannot change a built grammar.

    Raises:
        TypeError: If any element is not callable
    """
    return tuple(require_parser(parser) for parser in parsers)
