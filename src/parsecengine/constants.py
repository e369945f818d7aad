"""Shared constants for ParsecEngine.

This module provides centralized configuration constants used across
the syntax and combinator packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Depth limits: Recursion protection for AST traversal and serialization
- Input limits: Size constraints checked at the run() entry point
- Character strings: Raw material for the predefined character classes

Every limit is a default only. Entry points accept keyword overrides
(max_depth=, max_source_size=); nothing here is mutated at runtime.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    # Input limits
    "MAX_SOURCE_SIZE",
    # Character strings
    "WHITESPACE_CHARS",
    "INLINE_WHITESPACE_CHARS",
    "LINE_TERMINATOR_CHARS",
    "CRLF",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================
#
# Parsing itself never recurses on AST depth: combinators build trees
# bottom-up from their children's results. The limit applies to consumers
# walking a finished tree (ASTVisitor, ASTTransformer, to_data, dump), which
# are recursive and can be handed programmatically constructed trees of
# arbitrary depth.

# Maximum AST nesting depth for traversal and serialization.
MAX_DEPTH: int = 100

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum source length (characters) accepted by run() and parse().
# 10 MiB of text comfortably covers hand-written grammars' inputs while
# bounding the quadratic worst case of eventually().
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# CHARACTER STRINGS
# ============================================================================

# Whitespace including line terminators (space, tab, LF, CR).
WHITESPACE_CHARS: str = " \t\n\r"

# In-line whitespace (space, tab). Never crosses a line.
INLINE_WHITESPACE_CHARS: str = " \t"

# Single-character line terminators.
LINE_TERMINATOR_CHARS: str = "\n\r"

# Windows line ending, consumed as one terminator by line_end().
CRLF: str = "\r\n"
