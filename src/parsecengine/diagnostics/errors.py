"""ParsecEngine exception hierarchy.

Parse failure inside the engine is a value (the Error outcome), never an
exception. Exceptions are reserved for the API boundary (run/parse) and for
misuse such as oversized input or runaway AST depth.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .templates import ErrorTemplate

if TYPE_CHECKING:
    from parsecengine.syntax.cursor import Error, Ok

__all__ = [
    "IncompleteParseError",
    "InputTooLargeError",
    "ParseFailedError",
    "ParsecError",
]


class ParsecError(Exception):
    """Base exception for all ParsecEngine errors."""


class ParseFailedError(ParsecError):
    """A parser returned an Error outcome where success was required.

    Attributes:
        error: The Error outcome (cursor at failure and message)
    """

    def __init__(self, error: Error) -> None:
        """Initialize ParseFailedError.

        Args:
            error: The failing outcome
        """
        super().__init__(ErrorTemplate.parse_failed(error.format_error()))
        self.error = error


class IncompleteParseError(ParsecError):
    """A parser succeeded but did not consume the whole input.

    Attributes:
        outcome: The Ok outcome; outcome.cursor marks the unconsumed input
    """

    def __init__(self, outcome: Ok) -> None:
        """Initialize IncompleteParseError.

        Args:
            outcome: The successful but partial outcome
        """
        line, col = outcome.cursor.compute_line_col()
        super().__init__(ErrorTemplate.incomplete_parse(line, col, len(outcome.cursor)))
        self.outcome = outcome


class InputTooLargeError(ParsecError):
    """Input exceeds the configured maximum source size.

    Attributes:
        size: Length of the rejected input
        limit: The limit that was exceeded
    """

    def __init__(self, size: int, limit: int) -> None:
        super().__init__(ErrorTemplate.input_too_large(size, limit))
        self.size = size
        self.limit = limit
