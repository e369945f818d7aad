"""Tests for AST-shaping combinators: ignore, tag, label_ast."""

from __future__ import annotations

from parsecengine import (
    Cursor,
    Error,
    List,
    Ok,
    Tag,
    Value,
    alpha_string,
    concat,
    ignore,
    label_ast,
    literal,
    match_char_in,
    optional,
    tag,
    times,
)

# ============================================================================
# IGNORE
# ============================================================================


class TestIgnore:
    """ignore keeps the match and drops the output."""

    def test_match_produces_nothing(self) -> None:
        outcome = ignore(literal("def"))(Cursor("def f"))

        assert isinstance(outcome, Ok)
        assert outcome.remaining == " f"
        assert outcome.ast is None

    def test_failure(self) -> None:
        cursor = Cursor("class")
        outcome = ignore(literal("def"))(cursor)

        assert isinstance(outcome, Error)
        assert outcome.cursor == cursor
        assert outcome.message == "ignore"

    def test_inside_concat(self) -> None:
        outcome = concat([ignore(literal("(")), literal(")")])(Cursor("()"))

        assert isinstance(outcome, Ok)
        assert outcome.ast == List((Value(")"),))


# ============================================================================
# TAG
# ============================================================================


class TestTag:
    """tag labels the child's output."""

    def test_wraps_value(self) -> None:
        outcome = tag("name", literal("name:"))(Cursor("name: John"))

        assert isinstance(outcome, Ok)
        assert outcome.remaining == " John"
        assert outcome.ast == Tag("name", Value("name:"))

    def test_flattens_value_list(self) -> None:
        """A run of single characters comes out as one string."""
        parser = tag("digits", times(1, match_char_in("0123456789")))
        outcome = parser(Cursor("2024-10"))

        assert isinstance(outcome, Ok)
        assert outcome.remaining == "-10"
        assert outcome.ast == Tag("digits", Value("2024"))

    def test_flattens_concat_of_values(self) -> None:
        outcome = tag("x", concat([literal("a"), literal("b")]))(Cursor("ab"))

        assert isinstance(outcome, Ok)
        assert outcome.ast == Tag("x", Value("ab"))

    def test_keeps_nested_structure(self) -> None:
        """A List holding anything but Values is wrapped unchanged."""
        inner = tag("name", alpha_string())
        parser = tag("pair", concat([inner, literal("="), inner]))
        outcome = parser(Cursor("a=b"))

        assert isinstance(outcome, Ok)
        assert outcome.ast == Tag(
            "pair",
            List((Tag("name", Value("a")), Value("="), Tag("name", Value("b")))),
        )

    def test_empty_list_collapses_to_empty_value(self) -> None:
        outcome = tag("x", times(0, literal("a")))(Cursor("b"))

        assert isinstance(outcome, Ok)
        assert outcome.ast == Tag("x", Value(""))

    def test_absent_child_drops_label(self) -> None:
        """Tagging a parser that produced nothing yields nothing."""
        outcome = tag("x", ignore(literal("a")))(Cursor("ab"))

        assert isinstance(outcome, Ok)
        assert outcome.remaining == "b"
        assert outcome.ast is None

    def test_absent_optional_drops_label(self) -> None:
        outcome = tag("sign", optional(literal("-")))(Cursor("1"))

        assert isinstance(outcome, Ok)
        assert outcome.ast is None

    def test_failure(self) -> None:
        cursor = Cursor("John")
        outcome = tag("name", literal("name:"))(cursor)

        assert isinstance(outcome, Error)
        assert outcome.cursor == cursor
        assert outcome.message == "tag"

    def test_tag_of_tag(self) -> None:
        outcome = tag("outer", tag("inner", literal("a")))(Cursor("a"))

        assert isinstance(outcome, Ok)
        assert outcome.ast == Tag("outer", Tag("inner", Value("a")))


# ============================================================================
# LABEL_AST
# ============================================================================


class TestLabelAst:
    """label_ast applies the tag() rules to a finished AST."""

    def test_none(self) -> None:
        assert label_ast("x", None) is None

    def test_value(self) -> None:
        assert label_ast("x", Value("a")) == Tag("x", Value("a"))

    def test_value_list(self) -> None:
        node = List((Value("a"), Value("b"), Value("c")))

        assert label_ast("x", node) == Tag("x", Value("abc"))

    def test_mixed_list(self) -> None:
        node = List((Value("a"), List(())))

        assert label_ast("x", node) == Tag("x", node)
