"""Tree building helpers for the manforge parser.

Provides the mixin that owns the insertion point (``_current``) and the
one-shot pending action applied to the next inserted node.
"""

from __future__ import annotations

from enum import Enum, auto

from manforge.nodes import Node, NodeKind


class PendingAction(Enum):
    """Action applied to the next node inserted into the tree."""

    NONE = auto()
    SPACE_BEFORE_TEXT = auto()  # insert a SPACE if the next node carries text


class TreeBuildingMixin:
    """Mixin providing node insertion and group open/close.

    Required Host Attributes:
        - _root: Node
        - _current: Node
        - _pending: PendingAction

    """

    _root: Node
    _current: Node
    _pending: PendingAction

    def _add_node(self, kind: NodeKind, text: str = "") -> Node:
        """Append a new node under the current node and return it.

        Fires and clears the pending action first.
        """
        node = Node(kind, text)
        pending = self._pending
        if pending is not PendingAction.NONE:
            self._pending = PendingAction.NONE
            if pending is PendingAction.SPACE_BEFORE_TEXT and node.is_text_node:
                self._current.add_child(Node(NodeKind.SPACE))
        return self._current.add_child(node)

    def _open(self, kind: NodeKind, text: str = "") -> Node:
        """Append a new node and make it the insertion point."""
        self._current = self._add_node(kind, text)
        return self._current

    def _open_group(self) -> None:
        """Open a new indentation group."""
        self._open(NodeKind.GROUP)

    def _close_group(self) -> None:
        """Close the innermost group, including any list, item or block inside it.

        Walks up to the nearest GROUP, then one level above it. At the root
        this is a no-op.
        """
        node = self._current
        while node.parent is not None and node.kind is not NodeKind.GROUP:
            node = node.parent
        if node.parent is not None:
            node = node.parent
        self._current = node

    def _close_all_groups(self) -> None:
        """Close everything up to the root."""
        self._current = self._root

    def _arm_space_hook(self) -> None:
        """Arm the space hook when the insertion point ends with text."""
        if self._current.last_node().is_text_node:
            self._pending = PendingAction.SPACE_BEFORE_TEXT

    def _clear_pending(self) -> None:
        self._pending = PendingAction.NONE
