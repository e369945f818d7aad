"""Diagnostic system for ParsecEngine.

Provides the exception hierarchy and the centralized message templates
shared by combinators, the cursor, and the run/parse entry points.

Python 3.13+. Zero external dependencies.
"""

from .errors import (
    IncompleteParseError,
    InputTooLargeError,
    ParsecError,
    ParseFailedError,
)
from .templates import ErrorTemplate

__all__ = [
    "ErrorTemplate",
    "IncompleteParseError",
    "InputTooLargeError",
    "ParseFailedError",
    "ParsecError",
]
