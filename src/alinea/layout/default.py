"""Default layout for elements and fragments.

This is the baseline layout: every element when attribute alignment is off,
and every element with zero or one attribute when it is on.

Shapes:
- Open tag: ``group("<tag", indent(line attr ...), softline ">")``. Flat it
  is ``<tag a="1" b="2">``; broken, each attribute gets its own line one
  indentation level in and ``>`` returns to the element's column.
- Element with children: ``group(open, indent(softline child sep child
  ...), softline "</tag>")``. The separator is a line (a space when flat)
  where the source had whitespace between the siblings and a softline
  (nothing when flat) between touching tags. Text touching a tag gets no
  separator at all.
- Raw-text elements (script, style, pre, textarea) keep their content's
  line structure and always break.
- Fragment: top-level nodes separated by hard breaks, except text touching
  a tag.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from alinea.doc import EMPTY, Doc, concat, group, hardline, indent, line, softline, text
from alinea.lexer import RAW_TEXT_TAGS
from alinea.nodes import Element, Fragment

if TYPE_CHECKING:
    from alinea.layout.tree import TreePrinter


def print_open_tag(element: Element, printer: TreePrinter) -> Doc:
    """Build the opening tag, including the `/>` of self-closing elements."""
    tag = element.tag_name
    if not element.attributes:
        return text(f"<{tag} />" if element.self_closing else f"<{tag}>")

    attributes = [concat(line, printer.print_attribute(attr)) for attr in element.attributes]
    end = concat(line, "/>") if element.self_closing else concat(softline, ">")
    return group(concat("<", tag, indent(concat(*attributes), printer.config.indent_width), end))


def print_element(element: Element, printer: TreePrinter) -> Doc:
    """Build the default layout document for an element."""
    open_tag = print_open_tag(element, printer)
    if element.self_closing:
        return open_tag

    close_tag = f"</{element.tag_name}>"
    width = printer.config.indent_width
    if element.tag_name.lower() in RAW_TEXT_TAGS:
        body = printer.print_children(element)
        if body == EMPTY:
            return concat(open_tag, close_tag)
        return concat(open_tag, indent(concat(hardline, body), width), hardline, close_tag)

    body = printer.print_children(element, spaced=line, adjacent=softline)
    if body == EMPTY:
        return concat(open_tag, close_tag)

    return group(
        concat(
            open_tag,
            indent(concat(softline, body), width),
            softline,
            close_tag,
        )
    )


def print_fragment(fragment: Fragment, printer: TreePrinter) -> Doc:
    """Build the layout document for a parse root."""
    return printer.join_nodes(fragment.children, spaced=hardline, adjacent=hardline)


__all__ = ["print_element", "print_fragment", "print_open_tag"]
