"""Convert parse trees to plain data and text.

Useful for:
- Handing results to JSON/YAML tooling (to_data / from_data)
- Debug output and test expectations (dump)

Plain data form:
    Value("bob")                      -> "bob"
    List((Value("a"), Value("b")))    -> ["a", "b"]
    Tag("name", Value("bob"))         -> {"name": "bob"}

Text form (dump), one S-expression per node:
    Value("bob")                      -> "bob"
    List((Value("a"), Value("b")))    -> (list "a" "b")
    Tag("name", Value("bob"))         -> (tag "name" "bob")

Python 3.13+.
"""

import json

from parsecengine.constants import MAX_DEPTH
from parsecengine.core.depth_guard import DepthGuard
from parsecengine.diagnostics import ErrorTemplate

from .ast import AST, List, Tag, Value
from .visitor import ASTVisitor

__all__ = ["dump", "from_data", "to_data"]

type ASTData = str | list["ASTData"] | dict[str, "ASTData"]


class _DataSerializer(ASTVisitor[ASTData]):
    """Visitor producing the plain data form."""

    def visit_Value(self, node: Value) -> ASTData:
        return node.text

    def visit_List(self, node: List) -> ASTData:
        with self._depth_guard:
            return [self.visit(item) for item in node.items]

    def visit_Tag(self, node: Tag) -> ASTData:
        with self._depth_guard:
            return {node.label: self.visit(node.child)}


class _TextSerializer(ASTVisitor[str]):
    """Visitor producing the S-expression text form."""

    def visit_Value(self, node: Value) -> str:
        return json.dumps(node.text, ensure_ascii=False)

    def visit_List(self, node: List) -> str:
        with self._depth_guard:
            parts = ["list", *(self.visit(item) for item in node.items)]
        return "(" + " ".join(parts) + ")"

    def visit_Tag(self, node: Tag) -> str:
        with self._depth_guard:
            child = self.visit(node.child)
        return f"(tag {json.dumps(node.label, ensure_ascii=False)} {child})"


def to_data(node: AST, *, max_depth: int | None = None) -> ASTData:
    """Convert an AST to JSON-compatible plain data.

    Args:
        node: Tree to convert
        max_depth: Maximum nesting depth (default: MAX_DEPTH)

    Returns:
        str, list, or single-key dict, nested

    Raises:
        DepthLimitExceededError: If the tree nests deeper than max_depth

    Example:
        >>> to_data(Tag("name", List((Value("a"), Value("b")))))
        {'name': ['a', 'b']}
    """
    return _DataSerializer(max_depth=max_depth).visit(node)


def from_data(data: object, *, max_depth: int | None = None) -> AST:
    """Rebuild an AST from the plain data form produced by to_data().

    Args:
        data: str, list, or single-key dict, nested (e.g. from json.loads)
        max_depth: Maximum nesting depth (default: MAX_DEPTH)

    Raises:
        TypeError: If data is not str, list, or a single-key dict with a
                   str key
        DepthLimitExceededError: If data nests deeper than max_depth

    Example:
        >>> from_data({"name": ["a", "b"]})
        Tag(label='name', child=List(items=(Value(text='a'), Value(text='b'))))
    """
    guard = DepthGuard(max_depth=max_depth if max_depth is not None else MAX_DEPTH)
    return _build_node(data, guard)


def _build_node(data: object, guard: DepthGuard) -> AST:
    """Rebuild one node; List and Tag levels count against guard."""
    match data:
        case str():
            return Value(data)
        case list():
            with guard:
                return List(tuple(_build_node(item, guard) for item in data))
        case dict() if len(data) == 1:
            ((label, child),) = data.items()
            if isinstance(label, str):
                with guard:
                    return Tag(label, _build_node(child, guard))
    raise TypeError(ErrorTemplate.unknown_ast_data(data))


def dump(node: AST | None, *, max_depth: int | None = None) -> str:
    """Render an AST as compact S-expression text.

    Absent output (None) renders as "nil".

    Example:
        >>> dump(Tag("name", Value("bob")))
        '(tag "name" "bob")'
        >>> dump(List(()))
        '(list)'
    """
    if node is None:
        return "nil"
    return _TextSerializer(max_depth=max_depth).visit(node)
