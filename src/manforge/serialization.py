"""Tree serialization for manforge nodes.

Converts node trees to/from JSON-compatible dicts and produces an indented
label dump for debugging. Useful for:
- Comparing parse results in tests
- Inspecting what the parser built from a doc comment

All output is deterministic (sorted keys).

Example:
    from manforge import parse_text
    from manforge.serialization import dump, to_json, from_json

    root = parse_text("- *bold* item")
    print(dump(root))
    assert from_json(to_json(root)) == root

"""

import json
from typing import Any

from manforge.nodes import Node, NodeKind


def to_dict(node: Node) -> dict[str, Any]:
    """Convert a node and its descendants to a JSON-compatible dict.

    ``_type`` carries the node label; ``text`` and ``children`` are only
    present when non-empty.
    """
    result: dict[str, Any] = {"_type": node.kind.label}
    if node.text:
        result["text"] = node.text
    if node.children:
        result["children"] = [to_dict(child) for child in node.children]
    return result


def from_dict(data: dict[str, Any]) -> Node:
    """Rebuild a node tree from a dict, restoring parent links.

    Raises:
        ValueError: If ``_type`` is missing or unknown.
    """
    label = data.get("_type")
    if label is None:
        msg = "Missing '_type' field in serialized node"
        raise ValueError(msg)

    node = Node(NodeKind.from_label(label), data.get("text", ""))
    for child in data.get("children", ()):
        node.add_child(from_dict(child))
    return node


def to_json(node: Node, *, indent: int | None = None) -> str:
    """Serialize a tree to a JSON string."""
    return json.dumps(to_dict(node), sort_keys=True, indent=indent)


def from_json(data: str) -> Node:
    """Deserialize a tree from a JSON string produced by to_json."""
    raw = json.loads(data)
    if not isinstance(raw, dict):
        msg = f"Expected a JSON object, got {type(raw).__name__}"
        raise ValueError(msg)
    return from_dict(raw)


def dump(node: Node, *, indent: str = "  ") -> str:
    """Render a tree as one line per node, indented by depth.

    Example:
        >>> from manforge.nodes import Node, NodeKind
        >>> root = Node(NodeKind.GROUP)
        >>> _ = root.add_child(Node(NodeKind.TEXT, "hi"))
        >>> print(dump(root))
        Group
          Text 'hi'
    """
    lines: list[str] = []
    _dump_into(node, 0, indent, lines)
    return "\n".join(lines)


def _dump_into(node: Node, depth: int, indent: str, lines: list[str]) -> None:
    line = indent * depth + node.kind.label
    if node.text:
        line += f" {node.text!r}"
    lines.append(line)
    for child in node.children:
        _dump_into(child, depth + 1, indent, lines)
