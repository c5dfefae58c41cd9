"""Reformat messy Lore into canonical form, then prune empty domains."""

from lore import parse
from lore.nodes import Domain, Node
from lore.renderers import LoreRenderer
from lore.visitor import transform

messy = """
+     tools
        grep   =   https://www.gnu.org/software/grep/
        +   [ to sort ]
+ [ empty for now ]
"""


def drop_empty(node: Node) -> Node | None:
    if isinstance(node, Domain) and not node.children:
        return None
    return node


doc = transform(parse(messy), drop_empty)
print(LoreRenderer().render(doc), end="")
