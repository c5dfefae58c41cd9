"""Cache a parsed tree to disk as JSON round-trip."""

from lore import parse
from lore.serialization import from_json, to_json

doc = parse("+ cached\n  [ this tree can be serialized and restored ]")

json_str = to_json(doc)
restored = from_json(json_str)

print("Original == restored:", doc == restored)
print("JSON length:", len(json_str), "chars")
