"""Document serialization: JSON round-trip for classified output.

Converts Span, Line and Document nodes to/from JSON-compatible dicts. Useful
for caching highlighted snippets at build time or shipping them to a
client-side renderer.

All output is deterministic (sorted keys) for cache-key stability.

Example:
    from spanlex import classify
    from spanlex.serialization import to_json, from_json

    doc = classify("const x = 1")
    restored = from_json(to_json(doc))
    assert doc == restored

Thread Safety:
    All functions are pure; safe to call from any thread.

"""

import json
from typing import Any

from spanlex.errors import SerializationError
from spanlex.nodes import Document, Line
from spanlex.tokens import Category, Span

_NODE_TYPES: dict[str, type] = {
    "Document": Document,
    "Line": Line,
    "Span": Span,
}


def to_dict(node: Document | Line | Span) -> dict[str, Any]:
    """Convert a node to a JSON-compatible dict.

    Every dict carries a ``_type`` key naming the node class. Categories are
    stored by enum name.

    Raises:
        SerializationError: ``node`` is not a Document, Line or Span.
    """
    if isinstance(node, Span):
        return {"_type": "Span", "text": node.text, "category": node.category.name}
    if isinstance(node, Line):
        return {
            "_type": "Line",
            "lineno": node.lineno,
            "spans": [to_dict(span) for span in node.spans],
        }
    if isinstance(node, Document):
        return {"_type": "Document", "lines": [to_dict(line) for line in node.lines]}
    raise SerializationError(f"Cannot serialize {type(node).__name__}")


def from_dict(data: dict[str, Any]) -> Document | Line | Span:
    """Reconstruct a node from a dict produced by :func:`to_dict`.

    Raises:
        SerializationError: Unknown ``_type``, unknown category name,
            missing fields, or fields of the wrong type.
    """
    if not isinstance(data, dict):
        raise SerializationError(f"Expected an object, got {type(data).__name__}")
    node_type = data.get("_type")
    if node_type not in _NODE_TYPES:
        raise SerializationError(f"Unknown node type: {node_type!r}")

    if node_type == "Span":
        return Span(
            text=_field(data, node_type, "text", str),
            category=_category(_field(data, node_type, "category", str)),
        )
    if node_type == "Line":
        return Line(
            spans=tuple(
                _expect(from_dict(s), Span) for s in _field(data, node_type, "spans", list)
            ),
            lineno=_field(data, node_type, "lineno", int),
        )
    return Document(
        lines=tuple(
            _expect(from_dict(ln), Line) for ln in _field(data, node_type, "lines", list)
        )
    )


def to_json(node: Document | Line | Span, *, indent: int | None = None) -> str:
    """Serialize a node to a JSON string (sorted keys)."""
    return json.dumps(to_dict(node), sort_keys=True, indent=indent, ensure_ascii=False)


def from_json(payload: str) -> Document | Line | Span:
    """Deserialize a node from a JSON string produced by :func:`to_json`.

    Raises:
        SerializationError: Invalid JSON or an invalid node structure.
    """
    try:
        data = json.loads(payload)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Invalid JSON: {e}") from e
    return from_dict(data)


def _category(name: str) -> Category:
    try:
        return Category[name]
    except KeyError:
        raise SerializationError(f"Unknown category: {name!r}") from None


def _expect(node: Any, node_class: type) -> Any:
    if not isinstance(node, node_class):
        raise SerializationError(
            f"Expected {node_class.__name__}, got {type(node).__name__}"
        )
    return node


def _field(data: dict[str, Any], node_type: str, name: str, field_type: type) -> Any:
    """Fetch ``data[name]`` and check its JSON type."""
    if name not in data:
        raise SerializationError(f"{node_type} is missing field {name!r}")
    value = data[name]
    # bool is an int subclass but never a valid lineno
    if not isinstance(value, field_type) or isinstance(value, bool):
        raise SerializationError(
            f"{node_type}.{name} must be {field_type.__name__}, got {type(value).__name__}"
        )
    return value
