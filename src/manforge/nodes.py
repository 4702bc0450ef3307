"""Document tree nodes for manforge.

The parser builds a general n-ary tree of Node objects. Unlike token
objects, nodes are mutable while the parser attaches children; once
``Parser.parse`` returns, the tree is treated as read-only.

Node Kinds:
GROUP           indentation scope, emits nothing itself (root is a GROUP)
BLOCK           run of block-quoted lines
SECTION         section heading
TEXT            plain text
TEXT_BOLD       bold span
TEXT_UNDERLINE  underlined span
LIST            list, contains LIST_ITEM children only
LIST_ITEM       list item; nested GROUPs continue the item
SPACE           separator inserted between adjacent text nodes
BREAK           paragraph break from an empty line

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum, auto


class NodeKind(Enum):
    """Closed set of node kinds."""

    GROUP = auto()
    BLOCK = auto()
    SECTION = auto()
    TEXT = auto()
    TEXT_BOLD = auto()
    TEXT_UNDERLINE = auto()
    LIST = auto()
    LIST_ITEM = auto()
    SPACE = auto()
    BREAK = auto()

    @property
    def label(self) -> str:
        """Human-readable label used in debug output."""
        match self:
            case NodeKind.GROUP:
                return "Group"
            case NodeKind.BLOCK:
                return "Block"
            case NodeKind.SECTION:
                return "Section"
            case NodeKind.TEXT:
                return "Text"
            case NodeKind.TEXT_BOLD:
                return "TextBold"
            case NodeKind.TEXT_UNDERLINE:
                return "TextUnderline"
            case NodeKind.LIST:
                return "List"
            case NodeKind.LIST_ITEM:
                return "ListItem"
            case NodeKind.SPACE:
                return "Space"
            case NodeKind.BREAK:
                return "Break"

    @classmethod
    def from_label(cls, label: str) -> NodeKind:
        """Inverse of ``label``.

        Raises:
            ValueError: Unknown label
        """
        for kind in cls:
            if kind.label == label:
                return kind
        raise ValueError(f"Unknown node label: {label!r}")


TEXT_KINDS = frozenset({NodeKind.TEXT, NodeKind.TEXT_BOLD, NodeKind.TEXT_UNDERLINE})


@dataclass(slots=True, eq=True)
class Node:
    """A node in the document tree.

    Attributes:
        kind: Node kind
        text: Payload text (empty for structural nodes)
        parent: Back-reference to the parent; None for the root. Not part of
            equality or repr, so deep comparison walks children only.
        children: Child nodes in document order

    """

    kind: NodeKind
    text: str = ""
    parent: Node | None = field(default=None, compare=False, repr=False)
    children: list[Node] = field(default_factory=list)

    def add_child(self, child: Node) -> Node:
        """Attach child as the last child of this node and return it."""
        child.parent = self
        self.children.append(child)
        return child

    def last_node(self) -> Node:
        """Return the last child, or this node when it has no children."""
        if self.children:
            return self.children[-1]
        return self

    @property
    def is_text_node(self) -> bool:
        """Whether this node carries visible text (plain, bold or underlined)."""
        return self.kind in TEXT_KINDS

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def depth(self) -> int:
        """Number of ancestors between this node and the root."""
        depth = 0
        node = self.parent
        while node is not None:
            depth += 1
            node = node.parent
        return depth

    def walk(self) -> Iterator[Node]:
        """Yield this node and all descendants in pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def __str__(self) -> str:
        return self.kind.label


def new_root() -> Node:
    """Create an empty root GROUP."""
    return Node(NodeKind.GROUP)
