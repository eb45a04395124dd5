"""LeafPrinter protocol: the pluggable "print one node" callback.

TreePrinter builds the structure of elements itself and asks a leaf printer
for everything else: attribute text, character data, comments, doctypes.
The built-in ``print_leaf`` is the reference implementation.

Example:
    from alinea.doc import text
    from alinea.layout import TreePrinter, print_leaf
    from alinea.nodes import Attribute

    def upper_attributes(node):
        if isinstance(node, Attribute):
            return text(node.name.upper())
        return print_leaf(node)

    printer = TreePrinter(print_leaf=upper_attributes)

"""

from typing import Protocol

from alinea.doc import Doc
from alinea.nodes import Attribute, Node


class LeafPrinter(Protocol):
    """Protocol for leaf printers.

    Implementations turn one attribute or non-element node into a layout
    document. Exceptions they raise propagate unchanged to the caller of
    the formatting entry point.

    """

    def __call__(self, node: Node | Attribute, /) -> Doc:
        """Build the layout document for a single leaf.

        Args:
            node: Attribute, Text, Comment or Doctype to print.

        Returns:
            Layout document for the leaf.

        """
        ...
