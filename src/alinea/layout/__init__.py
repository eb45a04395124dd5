"""Alinea tree layout.

Turns markup trees into layout documents.

Available pieces:
- TreePrinter: node dispatch (aligned, default, leaf)
- print_aligned_element: attribute alignment layout
- print_element / print_fragment: default layout
- print_leaf: built-in leaf printer
- LeafPrinter: protocol for custom leaf printers

"""

from alinea.layout.aligned import alignment_column, print_aligned_element
from alinea.layout.default import print_element, print_fragment, print_open_tag
from alinea.layout.leaf import print_leaf, quote_value
from alinea.layout.protocol import LeafPrinter
from alinea.layout.tree import TreePrinter

__all__ = [
    "LeafPrinter",
    "TreePrinter",
    "alignment_column",
    "print_aligned_element",
    "print_element",
    "print_fragment",
    "print_leaf",
    "print_open_tag",
    "quote_value",
]
