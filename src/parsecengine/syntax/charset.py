"""Immutable character classes.

A CharClass classifies single code points. Membership is either explicit
(the character is in a fixed set) or by Unicode general category, looked up
with unicodedata. Classes are built once at grammar-construction time and
shared freely afterwards.

Category matching accepts a full two-letter category ("Nd") or a major
class letter ("L" covers Lu, Ll, Lt, Lm, Lo).

Python 3.13+. Zero external dependencies.
"""

import unicodedata
from dataclasses import dataclass

from parsecengine.constants import (
    INLINE_WHITESPACE_CHARS,
    LINE_TERMINATOR_CHARS,
    WHITESPACE_CHARS,
)
from parsecengine.diagnostics import ErrorTemplate

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    "CharClass",
    "CharSpec",
    "as_char_class",
    # Predefined classes
    "LETTERS",
    "DECIMAL_DIGITS",
    "ALPHANUMERICS",
    "WHITESPACE",
    "INLINE_WHITESPACE",
    "LINE_TERMINATORS",
]


@dataclass(frozen=True, slots=True)
class CharClass:
    """Immutable set of characters.

    Attributes:
        chars: Explicit members
        categories: Unicode general categories ("Nd") or major classes ("L")

    Example:
        >>> "%" in CharClass.of("%-/")
        True
        >>> "7" in DECIMAL_DIGITS
        True
        >>> "é" in LETTERS
        True
        >>> "x" in (DECIMAL_DIGITS | CharClass.of("x"))
        True
    """

    chars: frozenset[str] = frozenset()
    categories: frozenset[str] = frozenset()

    @classmethod
    def of(cls, chars: str) -> "CharClass":
        """Build a class from the characters of a string.

        Raises:
            ValueError: If chars is empty
        """
        if not chars:
            raise ValueError(ErrorTemplate.empty_character_class())
        return cls(chars=frozenset(chars))

    @classmethod
    def from_categories(cls, *categories: str) -> "CharClass":
        """Build a class from Unicode general categories."""
        return cls(categories=frozenset(categories))

    def __contains__(self, char: object) -> bool:
        if not isinstance(char, str) or len(char) != 1:
            return False
        if char in self.chars:
            return True
        if not self.categories:
            return False
        category = unicodedata.category(char)
        return category in self.categories or category[0] in self.categories

    def __or__(self, other: "CharClass") -> "CharClass":
        return CharClass(
            chars=self.chars | other.chars,
            categories=self.categories | other.categories,
        )


# A character-class argument: a CharClass, or a string of member characters.
type CharSpec = CharClass | str


def as_char_class(chars: CharSpec) -> CharClass:
    """Normalize a character-class argument.

    Args:
        chars: CharClass (returned as-is) or string of member characters

    Returns:
        CharClass

    Raises:
        ValueError: If chars is an empty string
        TypeError: If chars is neither str nor CharClass
    """
    if isinstance(chars, CharClass):
        return chars
    if isinstance(chars, str):
        return CharClass.of(chars)
    raise TypeError(ErrorTemplate.invalid_char_spec(chars))


# Letters and combining marks (general categories L*, M*).
LETTERS: CharClass = CharClass.from_categories("L", "M")

# Decimal digits in any script (general category Nd).
DECIMAL_DIGITS: CharClass = CharClass.from_categories("Nd")

# Letters, marks, and numbers (general categories L*, M*, N*).
ALPHANUMERICS: CharClass = CharClass.from_categories("L", "M", "N")

WHITESPACE: CharClass = CharClass.of(WHITESPACE_CHARS)

INLINE_WHITESPACE: CharClass = CharClass.of(INLINE_WHITESPACE_CHARS)

LINE_TERMINATORS: CharClass = CharClass.of(LINE_TERMINATOR_CHARS)
