"""Typed tree: outline of domains and a list of every link target."""

from pathlib import Path

from lore import parse
from lore.nodes import Link
from lore.renderers import HtmlRenderer
from lore.visitor import BaseVisitor


class LinkCollector(BaseVisitor[None]):
    """Collect (key, target) for every link, in source order."""

    def __init__(self) -> None:
        self.links: list[tuple[str, str]] = []

    def visit_link(self, node: Link) -> None:
        self.links.append((node.key, node.target))


source = (Path(__file__).parent.parent / "bookmarks.lore").read_text(encoding="utf-8")
doc = parse(source, source_file="bookmarks.lore")

renderer = HtmlRenderer()
renderer.render(doc)

print(f"Outline ({doc.depth()} levels deep):")
for info in renderer.get_domains():
    print(f"{'  ' * (info.depth - 1)}+ {info.label}  #{info.slug}")

collector = LinkCollector()
collector.visit(doc)

print("\nLinks:")
for key, target in collector.links:
    print(f"  {key} -> {target}")
