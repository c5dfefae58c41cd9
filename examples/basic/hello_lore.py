"""Parse and render Lore in 3 lines with zero config."""

from lore import parse, render

doc = parse("+ search\n  ddg = https://duckduckgo.com")
html = render(doc)
print(html)
