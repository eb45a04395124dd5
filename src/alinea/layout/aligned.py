"""Attribute alignment layout.

For an element with more than one attribute the first attribute stays on
the tag line and every following attribute starts a new line at the column
of the first one::

    <img src="s"
         alt="a" />

The alignment offset is ``len(tag_name) + 2`` (one column for ``<`` and one
for the space after the tag name), written as literal spaces after each
hard break, so it holds relative to whatever indentation the element sits
at. The offset is a plain character count; wide characters get no special
treatment.

The attribute breaks are hard, so the surrounding group always breaks. It is
still a group so that layout documents inside attribute values keep making
their own fit decisions.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from alinea.config import BracketPlacement
from alinea.doc import EMPTY, Doc, concat, group, hardline, indent, spaces, text
from alinea.nodes import Element

if TYPE_CHECKING:
    from alinea.layout.tree import TreePrinter


def alignment_column(element: Element) -> int:
    """Column offset of attributes 2..N relative to the element's indentation."""
    return len(element.tag_name) + 2


def print_aligned_element(element: Element, printer: TreePrinter) -> Doc:
    """Build the aligned layout document for a multi-attribute element.

    Args:
        element: Element with at least two attributes
        printer: Tree printer supplying config, attribute and child documents

    Returns:
        Group containing the whole element
    """
    tag = element.tag_name
    column = alignment_column(element)
    first, *rest = (printer.print_attribute(attr) for attr in element.attributes)

    parts: list[Doc] = [text("<"), text(tag), text(" "), first]
    for attribute in rest:
        parts.extend((hardline, spaces(column), attribute))

    parts.append(_terminator(element, column, printer.config.bracket_placement))

    if not element.self_closing:
        body = printer.print_children(element)
        if body != EMPTY:
            parts.extend((indent(concat(hardline, body), printer.config.indent_width), hardline))
        parts.append(text(f"</{tag}>"))

    return group(concat(*parts))


def _terminator(element: Element, column: int, placement: BracketPlacement) -> Doc:
    bracket = "/>" if element.self_closing else ">"
    match placement:
        case BracketPlacement.ALIGNED:
            return concat(hardline, spaces(column), bracket)
        case BracketPlacement.HARDLINE:
            return concat(hardline, bracket)
        case _:
            return text(" />" if element.self_closing else ">")


__all__ = ["alignment_column", "print_aligned_element"]
