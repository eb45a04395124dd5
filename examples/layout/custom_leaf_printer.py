"""Swap the leaf printer: sort class names while keeping the aligned layout."""

from alinea import Formatter, parse
from alinea.doc import Doc, text
from alinea.layout import print_leaf, quote_value
from alinea.nodes import Attribute, Node


def sorted_classes(node: Node | Attribute) -> Doc:
    if isinstance(node, Attribute) and node.name == "class" and node.value:
        return text(f"class={quote_value(' '.join(sorted(node.value.split())))}")
    return print_leaf(node)


fmt = Formatter(print_leaf=sorted_classes)
tree = parse('<button id="ok" class="primary btn large" disabled>OK</button>')
print(fmt.format_tree(tree), end="")
