"""Quickstart Example - Building a Grammar From Combinators.

Demonstrates the core workflow of ParsecEngine:

1. Match a labeled field
2. Build a function-header grammar from small parts
3. Report failures with line/column context
4. Walk the resulting tree with a visitor
5. Convert trees to plain data and S-expression text

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from parsecengine import Parser


def _function_header() -> Parser:
    """Grammar for: def name(param, param, ...)"""
    from parsecengine import alpha_string, concat, ignore, iws, literal, optional, tag, times

    param = tag("param", alpha_string())
    separator = ignore(concat([literal(","), optional(iws())]))
    param_list = concat([param, times(0, concat([separator, param]))])
    return tag(
        "function",
        concat([
            ignore(literal("def")),
            ignore(iws()),
            tag("name", alpha_string()),
            ignore(literal("(")),
            optional(tag("params", param_list)),
            ignore(literal(")")),
        ]),
    )


def example_1_labeled_field() -> None:
    """Parse a keyword-prefixed identifier."""
    from parsecengine import alpha_string, concat, ignore, literal, run, tag

    print("=" * 60)
    print("Example 1: Labeled Field")
    print("=" * 60)

    parser = tag("name", concat([ignore(literal("id:")), alpha_string()]))
    outcome = run(parser, "id:bob rest")

    print(f"AST: {outcome.ast if outcome else None}")
    print(f"Remaining: {outcome.remaining!r}")
    print()


def example_2_function_header() -> None:
    """Parse a def-style header that must consume the whole input."""
    from parsecengine import parse
    from parsecengine.syntax.serializer import dump

    print("=" * 60)
    print("Example 2: Function Header")
    print("=" * 60)

    ast = parse(_function_header(), "def myFunction(paramOne, paramTwo, paramThree)")
    print(dump(ast))
    print()


def example_3_failures() -> None:
    """Show how a failure is reported."""
    from parsecengine import Cursor, Error, ParseFailedError, parse, run

    print("=" * 60)
    print("Example 3: Failures")
    print("=" * 60)

    source = "def ok(a)\ndef broken(a, b"
    outcome = run(_function_header(), Cursor(source, 10))
    if isinstance(outcome, Error):
        print(outcome.format_with_context())

    try:
        parse(_function_header(), "def f(")
    except ParseFailedError as e:
        print(f"ParseFailedError: {e}")
    print()


def example_4_visitor() -> None:
    """Collect parameter names with a visitor."""
    from parsecengine import Tag, Value, parse
    from parsecengine.syntax.visitor import ASTVisitor

    print("=" * 60)
    print("Example 4: Visitor Pattern")
    print("=" * 60)

    class ParamCollector(ASTVisitor):
        """Collect every param label's text."""

        def __init__(self) -> None:
            super().__init__()
            self.names: list[str] = []

        def visit_Tag(self, node: Tag) -> Tag:
            if node.label == "param" and isinstance(node.child, Value):
                self.names.append(node.child.text)
            self.generic_visit(node)
            return node

    ast = parse(_function_header(), "def area(width, height)")
    collector = ParamCollector()
    if ast is not None:
        collector.visit(ast)

    print(f"Parameters: {collector.names}")
    print()


def example_5_plain_data() -> None:
    """Convert a tree to JSON-compatible data and back."""
    import json

    from parsecengine import parse
    from parsecengine.syntax.serializer import from_data, to_data

    print("=" * 60)
    print("Example 5: Plain Data")
    print("=" * 60)

    ast = parse(_function_header(), "def f(x)")
    if ast is not None:
        data = to_data(ast)
        print(json.dumps(data))
        print(f"Rebuilt equal: {from_data(data) == ast}")
    print()


def main() -> None:
    """Run all quickstart examples."""
    print()
    print("ParsecEngine Quickstart")
    print()

    example_1_labeled_field()
    example_2_function_header()
    example_3_failures()
    example_4_visitor()
    example_5_plain_data()

    print("=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    main()
