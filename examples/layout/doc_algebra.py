"""Build a layout document by hand and render it at two widths."""

from alinea import concat, group, indent, join, line, print_doc, softline, text

items = [text(f"item{i}") for i in range(6)]
doc = group(concat("[", indent(concat(softline, join(concat(",", line), items)), 4), softline, "]"))

print(print_doc(doc, print_width=80))
print(print_doc(doc, print_width=20))
