"""Typed markup tree nodes for Alinea.

All nodes are frozen dataclasses with slots, so trees are immutable, safe to
share across threads, and work naturally with match statements.

Node Hierarchy:
Node (base)
├── Fragment   (root returned by the parser)
├── Element    (tag with ordered attributes and children)
├── Text       (character data)
├── Comment    (<!-- ... -->)
└── Doctype    (<!DOCTYPE ...>)

Attribute is not a Node: it only ever appears inside Element.attributes.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from alinea.location import SourceLocation


class AttributeKind(Enum):
    """How an attribute's value was written in the source."""

    BOOLEAN = "boolean"  # disabled
    QUOTED = "quoted"  # id="a", id='a', id=a
    EXPRESSION = "expression"  # onClick={handler}


@dataclass(frozen=True, slots=True)
class Attribute:
    """A single attribute of an element.

    The value excludes quotes and braces. BOOLEAN attributes have no value.

    """

    name: str
    value: str | None = None
    kind: AttributeKind = AttributeKind.QUOTED
    location: SourceLocation | None = None


# =============================================================================
# Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all markup nodes."""

    location: SourceLocation


@dataclass(frozen=True, slots=True)
class Element(Node):
    """Markup element.

    Attribute order is significant and preserved. An element with
    self_closing=True is expected to have no children; the printer does not
    enforce this.

    """

    tag_name: str
    attributes: tuple[Attribute, ...] = ()
    children: tuple[Node, ...] = ()
    self_closing: bool = False


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Character data between tags."""

    content: str


@dataclass(frozen=True, slots=True)
class Comment(Node):
    """Comment. Content is everything between <!-- and -->."""

    content: str


@dataclass(frozen=True, slots=True)
class Doctype(Node):
    """Document type declaration. Content follows '<!' (e.g. 'DOCTYPE html')."""

    content: str


@dataclass(frozen=True, slots=True)
class Fragment(Node):
    """Root of a parsed source: a sequence of top-level nodes."""

    children: tuple[Node, ...] = ()


__all__ = [
    "Attribute",
    "AttributeKind",
    "Comment",
    "Doctype",
    "Element",
    "Fragment",
    "Node",
    "Text",
]
