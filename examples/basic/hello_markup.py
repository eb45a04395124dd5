"""Format markup in 3 lines, zero config, zero deps."""

from alinea import format_markup

html = format_markup('<img src="cat.png" alt="A cat" width="120" />')
print(html, end="")
