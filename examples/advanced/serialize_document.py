"""Cache classified output to disk as a JSON round-trip."""

from spanlex import classify
from spanlex.serialization import from_json, to_json

doc = classify("export default function App(): Element {\n  return null;\n}")

json_str = to_json(doc)
restored = from_json(json_str)

print("Original == restored:", doc == restored)
print("JSON length:", len(json_str), "chars")
