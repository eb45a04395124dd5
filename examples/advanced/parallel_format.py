"""Free-threading safe: format 1000 snippets in parallel with one formatter."""

from concurrent.futures import ThreadPoolExecutor

from alinea import Formatter, FormatConfig

snippets = [f'<li id="item-{i}" class="row" data-index="{i}">Item {i}</li>' for i in range(1000)]
fmt = Formatter(FormatConfig(print_width=100))

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(fmt, snippets))

print(f"Formatted {len(results)} snippets in parallel")
print(results[0], end="")
