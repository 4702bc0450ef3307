"""Tree walk dispatching nodes to a Renderer.

Visits the tree in document order. Structural nodes (GROUP, BLOCK, LIST,
LIST_ITEM) emit no text of their own but may trigger indentation or list
formatting before and after their children.
"""

from __future__ import annotations

from typing import BinaryIO

from manforge.nodes import Node, NodeKind
from manforge.renderers.protocol import Renderer, Writer


def render(renderer: Renderer, node: Node) -> None:
    """Render node and its descendants.

    The root GROUP is transparent; nested GROUPs indent their children.

    Args:
        renderer: Target renderer
        node: Tree (usually the root returned by the parser)
    """
    if node.kind is NodeKind.GROUP and node.is_root:
        _render_children(renderer, node)
        return
    _render_node(renderer, node)


def _render_children(renderer: Renderer, node: Node) -> None:
    for child in node.children:
        _render_node(renderer, child)


def _render_node(renderer: Renderer, node: Node) -> None:
    match node.kind:
        case NodeKind.GROUP:
            if not node.children:
                return
            renderer.indent()
            _render_children(renderer, node)
            renderer.dedent()
        case NodeKind.SECTION:
            renderer.section(node.text)
        case NodeKind.TEXT:
            renderer.text(node.text)
        case NodeKind.TEXT_BOLD:
            renderer.text_bold(node.text)
        case NodeKind.TEXT_UNDERLINE:
            renderer.text_underline(node.text)
        case NodeKind.SPACE:
            renderer.space()
        case NodeKind.BREAK:
            renderer.paragraph_break()
        case NodeKind.LIST:
            _render_children(renderer, node)
            renderer.end_list()
        case NodeKind.LIST_ITEM:
            renderer.list_item(node.text)
            # A continuation line shares the output line with the item text.
            if node.children and node.children[0].is_text_node:
                renderer.space()
            _render_children(renderer, node)
        case NodeKind.BLOCK:
            _render_block(renderer, node)


def _render_block(renderer: Renderer, node: Node) -> None:
    """Render block-quoted lines, one output line per quoted line.

    Each quoted line is a single TEXT child, so two adjacent TEXT children
    mark a line boundary. Lazily continued lines are joined by a SPACE and
    stay on the same output line.
    """
    renderer.indent()
    previous: Node | None = None
    for child in node.children:
        if (
            previous is not None
            and previous.kind is NodeKind.TEXT
            and child.kind is NodeKind.TEXT
        ):
            renderer.line_break()
        _render_node(renderer, child)
        previous = child
    renderer.line_break()
    renderer.dedent()


def save(writer: Writer, stream: BinaryIO) -> None:
    """Write a writer's accumulated document to a binary stream.

    Errors raised by the stream propagate unchanged.
    """
    writer.save(stream)
