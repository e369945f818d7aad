"""Hypothesis strategies for ParsecEngine property-based testing.

Strategies are organized by domain:

- parsers: input text, cursors, and randomly composed parser trees

Usage:
    from tests.strategies import parser_inputs, parsers
    from tests.strategies.parsers import cursors, primitive_parsers
"""

from .parsers import (
    PARSER_ALPHABET,
    cursors,
    parser_inputs,
    parsers,
    primitive_parsers,
    tag_labels,
)

__all__ = [
    "PARSER_ALPHABET",
    "cursors",
    "parser_inputs",
    "parsers",
    "primitive_parsers",
    "tag_labels",
]
