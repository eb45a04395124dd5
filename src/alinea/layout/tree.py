"""Tree printer: walks a markup tree and builds one layout document.

Dispatch is a single match over node types with an explicit default branch:

- Fragment -> default fragment layout
- Element with more than one attribute, alignment on -> aligned layout
- any other Element -> default element layout
- everything else -> leaf printer

Thread Safety:
TreePrinter holds only immutable configuration and a callable. Instances
can be shared between threads.

"""

from __future__ import annotations

from collections.abc import Sequence

from alinea.config import DEFAULT_CONFIG, FormatConfig
from alinea.doc import EMPTY, Doc, concat, hardline, join, text
from alinea.errors import NodeShapeError
from alinea.layout.aligned import print_aligned_element
from alinea.layout.default import print_element, print_fragment
from alinea.layout.leaf import print_leaf as default_print_leaf
from alinea.layout.protocol import LeafPrinter
from alinea.lexer import RAW_TEXT_TAGS
from alinea.nodes import Attribute, Element, Fragment, Node, Text
from alinea.utils.logger import get_logger
from alinea.utils.text import verbatim_lines

logger = get_logger(__name__)


class TreePrinter:
    """Build layout documents for markup trees.

    Usage:
        >>> from alinea.parser import Parser
        >>> from alinea.printer import print_doc
        >>> tree = Parser('<img src="s" alt="a" />').parse()
        >>> print(print_doc(TreePrinter().print(tree)))
        <img src="s"
             alt="a" />

    """

    __slots__ = ("_config", "_print_leaf")

    def __init__(
        self,
        config: FormatConfig | None = None,
        *,
        print_leaf: LeafPrinter | None = None,
    ) -> None:
        """Initialize tree printer.

        Args:
            config: Formatting configuration (defaults to FormatConfig())
            print_leaf: Leaf printer for attributes and non-element nodes
                (defaults to the built-in print_leaf)
        """
        self._config = config or DEFAULT_CONFIG
        self._print_leaf = print_leaf or default_print_leaf

    @property
    def config(self) -> FormatConfig:
        """Configuration this printer was created with."""
        return self._config

    def print(self, node: Node) -> Doc:
        """Build the layout document for a node and its subtree.

        Args:
            node: Any markup node

        Returns:
            Layout document

        Raises:
            NodeShapeError: For elements without a tag name
        """
        match node:
            case Fragment():
                return print_fragment(node, self)
            case Element(tag_name=""):
                raise NodeShapeError(f"Element without a tag name at {node.location}")
            case Element() if self._config.align_attributes and len(node.attributes) > 1:
                logger.debug(
                    "Aligning %d attributes of <%s>", len(node.attributes), node.tag_name
                )
                return print_aligned_element(node, self)
            case Element():
                return print_element(node, self)
            case _:
                return self._print_leaf(node)

    def print_attribute(self, attribute: Attribute) -> Doc:
        """Build the layout document for one attribute via the leaf printer."""
        return self._print_leaf(attribute)

    def print_children(
        self,
        element: Element,
        *,
        spaced: Doc = hardline,
        adjacent: Doc = hardline,
    ) -> Doc:
        """Build one layout document for an element's children.

        Text inside raw-text elements keeps its line structure instead of
        going through the leaf printer, and every child starts on its own
        line. Other children are joined with join_nodes().
        """
        if element.tag_name.lower() not in RAW_TEXT_TAGS:
            return self.join_nodes(element.children, spaced=spaced, adjacent=adjacent)

        docs: list[Doc] = []
        for child in element.children:
            if isinstance(child, Text):
                doc = join(hardline, [text(line) for line in verbatim_lines(child.content)])
            else:
                doc = self.print(child)
            if doc != EMPTY:
                docs.append(doc)
        return join(hardline, docs)

    def join_nodes(self, nodes: Sequence[Node], *, spaced: Doc, adjacent: Doc) -> Doc:
        """Print sibling nodes with separators that follow the source whitespace.

        Siblings with whitespace between them in the source are separated by
        `spaced`. Siblings that touch are separated by `adjacent`, except
        where text touches a tag: `a<b>x</b>` stays glued, so no whitespace
        appears where the source had none. Whitespace-only
        text and children that print as nothing are left out.

        Args:
            nodes: Sibling nodes in source order
            spaced: Separator for siblings with whitespace between them
            adjacent: Separator for touching siblings that are not text

        Returns:
            Layout document (EMPTY if nothing prints)
        """
        parts: list[Doc] = []
        gap = False
        previous_text = False
        for node in nodes:
            is_text = isinstance(node, Text)
            if is_text:
                content = node.content
                if not content.strip():
                    gap = True
                    continue
                leading, trailing = content[0].isspace(), content[-1].isspace()
            else:
                leading = trailing = False

            doc = self.print(node)
            if doc == EMPTY:
                continue
            if parts:
                if gap or leading:
                    parts.append(spaced)
                elif not (is_text or previous_text):
                    parts.append(adjacent)
            parts.append(doc)
            gap = trailing
            previous_text = is_text
        return concat(*parts)


__all__ = ["TreePrinter"]
