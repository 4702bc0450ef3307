"""Tests for the document tree node type."""

import pytest

from manforge.nodes import TEXT_KINDS, Node, NodeKind, new_root


class TestNodeKind:
    @pytest.mark.parametrize(
        ("kind", "label"),
        [
            (NodeKind.GROUP, "Group"),
            (NodeKind.BLOCK, "Block"),
            (NodeKind.SECTION, "Section"),
            (NodeKind.TEXT, "Text"),
            (NodeKind.TEXT_BOLD, "TextBold"),
            (NodeKind.TEXT_UNDERLINE, "TextUnderline"),
            (NodeKind.LIST, "List"),
            (NodeKind.LIST_ITEM, "ListItem"),
            (NodeKind.SPACE, "Space"),
            (NodeKind.BREAK, "Break"),
        ],
    )
    def test_label_round_trip(self, kind: NodeKind, label: str) -> None:
        assert kind.label == label
        assert NodeKind.from_label(label) is kind

    def test_unknown_label(self) -> None:
        with pytest.raises(ValueError, match="Unknown node label"):
            NodeKind.from_label("Paragraph")

    def test_text_kinds(self) -> None:
        assert TEXT_KINDS == {NodeKind.TEXT, NodeKind.TEXT_BOLD, NodeKind.TEXT_UNDERLINE}


class TestNode:
    def test_new_root(self) -> None:
        root = new_root()
        assert root.kind is NodeKind.GROUP
        assert root.is_root
        assert root.children == []

    def test_add_child_links_parent(self) -> None:
        root = new_root()
        child = root.add_child(Node(NodeKind.TEXT, "a"))
        assert child.parent is root
        assert root.children == [child]
        assert not child.is_root
        assert child.depth == 1

    def test_last_node(self) -> None:
        root = new_root()
        assert root.last_node() is root
        root.add_child(Node(NodeKind.TEXT, "a"))
        last = root.add_child(Node(NodeKind.BREAK))
        assert root.last_node() is last

    @pytest.mark.parametrize("kind", list(NodeKind))
    def test_is_text_node(self, kind: NodeKind) -> None:
        assert Node(kind).is_text_node == (kind in TEXT_KINDS)

    def test_equality_ignores_parent(self) -> None:
        a = new_root()
        a.add_child(Node(NodeKind.TEXT, "x"))
        b = Node(NodeKind.GROUP, children=[Node(NodeKind.TEXT, "x")])
        assert a == b

    def test_equality_compares_children(self) -> None:
        a = Node(NodeKind.GROUP, children=[Node(NodeKind.TEXT, "x")])
        b = Node(NodeKind.GROUP, children=[Node(NodeKind.TEXT, "y")])
        assert a != b

    def test_repr_omits_parent(self) -> None:
        root = new_root()
        child = root.add_child(Node(NodeKind.TEXT, "x"))
        assert "parent" not in repr(child)

    def test_walk_pre_order(self) -> None:
        root = new_root()
        group = root.add_child(Node(NodeKind.GROUP))
        group.add_child(Node(NodeKind.TEXT, "a"))
        root.add_child(Node(NodeKind.TEXT, "b"))
        assert [(n.kind.label, n.text) for n in root.walk()] == [
            ("Group", ""),
            ("Group", ""),
            ("Text", "a"),
            ("Text", "b"),
        ]

    def test_str_is_label(self) -> None:
        assert str(Node(NodeKind.TEXT_BOLD, "x")) == "TextBold"
