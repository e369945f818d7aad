"""AST (Abstract Syntax Tree) node definitions.

Parsers build a recursive, tagged tree with exactly three variants:

    Value(text)           leaf holding a contiguous matched fragment
    List(items)           unlabeled ordered grouping (concat, times)
    Tag(label, child)     single labeled child (tag)

Consumers pattern-match on the variants; they are not meant to be
subclassed. Absent output (a suppressed or skipped match) is modeled as
None at the outcome level, never as an empty List: List(()) is a real,
empty group.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import TypeIs

__all__ = ["AST", "List", "Tag", "Value", "is_value_list"]


@dataclass(frozen=True, slots=True)
class Value:
    """Leaf node: a contiguous fragment of the input.

    Example:
        literal("def") on "def f" yields Value("def")
    """

    text: str

    @staticmethod
    def guard(node: object) -> TypeIs["Value"]:
        """Type guard for Value."""
        return isinstance(node, Value)


@dataclass(frozen=True, slots=True)
class List:
    """Unlabeled ordered grouping of child nodes.

    Produced by concat() and times(). Children that produced no output are
    omitted, never inserted as placeholders.

    Attributes:
        items: Child nodes in match order (tuple for immutability)
    """

    items: tuple["AST", ...] = ()

    @staticmethod
    def guard(node: object) -> TypeIs["List"]:
        """Type guard for List."""
        return isinstance(node, List)


@dataclass(frozen=True, slots=True)
class Tag:
    """Labeled node wrapping exactly one child.

    Produced by tag(). A child List made only of Value leaves is collapsed
    into a single Value before wrapping, so identifier-like rules yield one
    string per label.

    Attributes:
        label: Caller-chosen label
        child: The wrapped node
    """

    label: str
    child: "AST"

    @staticmethod
    def guard(node: object) -> TypeIs["Tag"]:
        """Type guard for Tag."""
        return isinstance(node, Tag)


type AST = Value | List | Tag


def is_value_list(node: object) -> TypeIs[List]:
    """Check whether node is a List whose every item is a Value.

    The empty List qualifies (vacuously).

    Example:
        >>> is_value_list(List((Value("a"), Value("b"))))
        True
        >>> is_value_list(List((Value("a"), List(()))))
        False
        >>> is_value_list(List(()))
        True
    """
    return List.guard(node) and all(Value.guard(item) for item in node.items)
