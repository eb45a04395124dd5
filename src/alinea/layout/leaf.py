"""Built-in leaf printer.

Renders attributes and non-element nodes into layout documents:

- BOOLEAN attribute: ``disabled``
- QUOTED attribute: ``name="value"`` (single quotes when the value holds
  a double quote and no single quote)
- EXPRESSION attribute: ``name={value}``
- Text: whitespace collapsed to single spaces
- Comment: ``<!--...-->``, line structure kept
- Doctype: ``<!DOCTYPE html>``

Text never carries a line break, so multi-line content is split into Text
parts. Attribute values are opaque: their lines are joined by literal
breaks, which return to column 0, so a value reads back exactly as written
at any nesting depth. Comments are joined by hard breaks; lines after the
first are dedented as a block so their relative indentation survives
reformatting under a different nesting depth.

"""

from __future__ import annotations

import textwrap

from alinea.doc import EMPTY, Doc, hardline, join, literalline, text
from alinea.errors import NodeShapeError
from alinea.nodes import Attribute, AttributeKind, Comment, Doctype, Node, Text
from alinea.utils.text import collapse_whitespace


def print_leaf(node: Node | Attribute) -> Doc:
    """Build the layout document for an attribute or non-element node.

    Args:
        node: Attribute, Text, Comment or Doctype

    Returns:
        Layout document

    Raises:
        NodeShapeError: For node types without a leaf rendering
    """
    match node:
        case Attribute():
            return _print_attribute(node)
        case Text(content=content):
            collapsed = collapse_whitespace(content)
            return text(collapsed) if collapsed else EMPTY
        case Comment(content=content):
            return _lines("<!--" + content + "-->")
        case Doctype(content=content):
            return text(f"<!{collapse_whitespace(content)}>")
        case _:
            raise NodeShapeError(f"No leaf rendering for {type(node).__name__}")


def _print_attribute(attr: Attribute) -> Doc:
    if not attr.name:
        raise NodeShapeError("Attribute without a name")
    match attr.kind:
        case AttributeKind.BOOLEAN:
            return text(attr.name)
        case AttributeKind.EXPRESSION:
            return _verbatim(f"{attr.name}={{{attr.value or ''}}}")
        case _:
            return _verbatim(f"{attr.name}={quote_value(attr.value or '')}")


def quote_value(value: str) -> str:
    """Quote an attribute value, preferring double quotes.

    Single quotes are used when the value holds a double quote but no single
    quote. When it holds both, double quotes are escaped as &quot;.

    Example:
        >>> print(quote_value("a"))
        "a"
    """
    if '"' not in value:
        return f'"{value}"'
    if "'" not in value:
        return f"'{value}'"
    return '"' + value.replace('"', "&quot;") + '"'


def _verbatim(content: str) -> Doc:
    lines = content.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    return join(literalline, [text(line) for line in lines])


def _lines(content: str) -> Doc:
    lines = content.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    if len(lines) == 1:
        return text(lines[0])
    rest = textwrap.dedent("\n".join(lines[1:])).split("\n")
    return join(hardline, [text(lines[0].rstrip()), *(text(line.rstrip()) for line in rest)])


__all__ = ["print_leaf", "quote_value"]
