"""Visitor pattern for AST traversal.

Lets grammar authors walk and rewrite parse trees without touching the node
classes.

NOTE: This module follows Python stdlib ast.NodeVisitor naming convention.
Methods are named visit_NodeName (visit_Value, visit_List, visit_Tag) rather
than snake_case.

Type Parameters:
- ASTVisitor[T] is generic over return type T
- ASTVisitor (no type param) defaults to T=AST
- ASTTransformer uses extended return type: AST | None | list[AST]

Python 3.13+.
"""

from collections.abc import Callable
from dataclasses import replace
from typing import ClassVar

from parsecengine.constants import MAX_DEPTH
from parsecengine.core.depth_guard import DepthGuard

from .ast import AST, List, Tag

__all__ = ["ASTTransformer", "ASTVisitor"]

type TransformerResult = AST | None | list[AST]


class ASTVisitor[T = AST]:
    """Base visitor for traversing a parse tree.

    Follows stdlib ast.NodeVisitor convention: generic_visit() traverses
    all children. Override visit_Value / visit_List / visit_Tag to add
    behavior, calling generic_visit() to keep descending.

    Example:
        >>> class CollectLabels(ASTVisitor):
        ...     def __init__(self):
        ...         super().__init__()
        ...         self.labels = []
        ...
        ...     def visit_Tag(self, node: Tag) -> AST:
        ...         self.labels.append(node.label)
        ...         return self.generic_visit(node)
        ...
        >>> visitor = CollectLabels()
        >>> _ = visitor.visit(Tag("function", List((Tag("name", Value("f")),))))
        >>> visitor.labels
        ['function', 'name']
    """

    __slots__ = ("_depth_guard", "_instance_dispatch_cache")

    # Method names only, built once per class via __init_subclass__
    _class_visit_methods: ClassVar[dict[str, str]] = {}

    def __init_subclass__(cls, **kwargs: object) -> None:
        """Build class-level dispatch table when subclass is defined."""
        super().__init_subclass__(**kwargs)
        cls._class_visit_methods = {}
        for name in dir(cls):
            if name.startswith("visit_") and name != "visit":
                cls._class_visit_methods[name[6:]] = name

    def __init__(self, *, max_depth: int | None = None) -> None:
        """Initialize visitor with depth guard and dispatch cache.

        Subclasses MUST call super().__init__().

        Args:
            max_depth: Maximum traversal depth (default: MAX_DEPTH)
        """
        effective_max_depth = max_depth if max_depth is not None else MAX_DEPTH
        self._depth_guard = DepthGuard(max_depth=effective_max_depth)
        self._instance_dispatch_cache: dict[type, Callable[[AST], T]] = {}

    def visit(self, node: AST) -> T:
        """Visit a node, dispatching to visit_<NodeType> or generic_visit."""
        node_type = type(node)

        if node_type in self._instance_dispatch_cache:
            return self._instance_dispatch_cache[node_type](node)

        method_name = self._class_visit_methods.get(node_type.__name__)
        method = getattr(self, method_name) if method_name else self.generic_visit

        self._instance_dispatch_cache[node_type] = method
        return method(node)  # type: ignore[no-any-return]  # getattr returns Any

    def generic_visit(self, node: AST) -> T:
        """Default visitor: traverse children with depth protection.

        Returns:
            The node itself (identity)

        Raises:
            DepthLimitExceededError: If traversal depth exceeds max_depth
        """
        with self._depth_guard:
            match node:
                case List(items=items):
                    for item in items:
                        self.visit(item)
                case Tag(child=child):
                    self.visit(child)
                case _:
                    pass  # Value is a leaf

        return node  # type: ignore[return-value]  # T defaults to AST


class ASTTransformer(ASTVisitor[TransformerResult]):
    """AST transformer producing a rewritten tree.

    Nodes are frozen, so every change builds new nodes via
    dataclasses.replace(). Each visit method can return:
    - A node (replaces the original)
    - None (removes it from its parent)
    - A list of nodes (spliced into the parent List)

    Inside a Tag, a removed child removes the Tag as well, mirroring how
    tag() drops its label when the wrapped parser produced nothing. A list
    returned for a Tag child is wrapped in a List.

    Example - drop all whitespace leaves:
        >>> class StripBlank(ASTTransformer):
        ...     def visit_Value(self, node: Value) -> Value | None:
        ...         return None if node.text.isspace() else node
        ...
        >>> StripBlank().transform(List((Value("a"), Value(" "), Value("b"))))
        List(items=(Value(text='a'), Value(text='b')))
    """

    def transform(self, node: AST) -> TransformerResult:
        """Transform an AST node or tree (main entry point)."""
        return self.visit(node)

    def generic_visit(self, node: AST) -> TransformerResult:
        """Transform node children (default behavior with depth protection).

        Raises:
            DepthLimitExceededError: If traversal depth exceeds max_depth
        """
        with self._depth_guard:
            match node:
                case List(items=items):
                    return replace(node, items=self._transform_items(items))
                case Tag(child=child):
                    match self.visit(child):
                        case None:
                            return None
                        case list() as expanded:
                            return replace(node, child=List(tuple(expanded)))
                        case transformed:
                            return replace(node, child=transformed)
                case _:
                    return node

    def _transform_items(self, nodes: tuple[AST, ...]) -> tuple[AST, ...]:
        """Transform a tuple of nodes, dropping removals and splicing expansions."""
        result: list[AST] = []
        for node in nodes:
            match self.visit(node):
                case None:
                    continue
                case list() as expanded:
                    result.extend(expanded)
                case transformed:
                    result.append(transformed)
        return tuple(result)
