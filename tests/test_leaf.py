"""Tests for the built-in leaf printer."""

import pytest

from alinea.doc import EMPTY, concat, literalline, text
from alinea.errors import NodeShapeError
from alinea.layout import print_leaf, quote_value
from alinea.location import SourceLocation
from alinea.nodes import Attribute, AttributeKind, Comment, Doctype, Element, Fragment, Text
from alinea.printer import print_doc

LOC = SourceLocation.unknown()


def render(node: object) -> str:
    return print_doc(print_leaf(node))  # type: ignore[arg-type]


class TestAttributes:
    def test_quoted(self) -> None:
        assert render(Attribute("id", "main")) == 'id="main"'

    def test_empty_value(self) -> None:
        assert render(Attribute("alt", "")) == 'alt=""'

    def test_boolean(self) -> None:
        assert render(Attribute("disabled", kind=AttributeKind.BOOLEAN)) == "disabled"

    def test_expression(self) -> None:
        attr = Attribute("onClick", "() => go()", kind=AttributeKind.EXPRESSION)
        assert render(attr) == "onClick={() => go()}"

    def test_multiline_value_becomes_literal_breaks(self) -> None:
        doc = print_leaf(Attribute("style", "a: 1;\n   b: 2;"))
        assert doc == concat(text('style="a: 1;'), literalline, text('   b: 2;"'))

    def test_nameless_attribute(self) -> None:
        with pytest.raises(NodeShapeError):
            print_leaf(Attribute(""))


class TestQuoteValue:
    @pytest.mark.parametrize(
        ("value", "quoted"),
        [
            ("plain", '"plain"'),
            ("it's", '"it\'s"'),
            ('say "hi"', "'say \"hi\"'"),
            ("it's \"x\"", '"it\'s &quot;x&quot;"'),
        ],
    )
    def test_quote_choice(self, value: str, quoted: str) -> None:
        assert quote_value(value) == quoted


class TestNodes:
    def test_text_collapsed(self) -> None:
        assert render(Text(location=LOC, content="  a \n\t b  ")) == "a b"

    def test_whitespace_text_is_empty(self) -> None:
        assert print_leaf(Text(location=LOC, content=" \n ")) == EMPTY

    def test_comment(self) -> None:
        assert render(Comment(location=LOC, content=" hi ")) == "<!-- hi -->"

    def test_multiline_comment_dedents_following_lines(self) -> None:
        comment = Comment(location=LOC, content=" first\n      a\n        b\n    ")
        assert render(comment) == "<!-- first\n  a\n    b\n-->"

    def test_doctype(self) -> None:
        assert render(Doctype(location=LOC, content="DOCTYPE   html")) == "<!DOCTYPE html>"

    @pytest.mark.parametrize(
        "node",
        [
            Element(location=LOC, tag_name="div"),
            Fragment(location=LOC),
        ],
    )
    def test_no_leaf_rendering(self, node: object) -> None:
        with pytest.raises(NodeShapeError, match="No leaf rendering"):
            print_leaf(node)  # type: ignore[arg-type]
