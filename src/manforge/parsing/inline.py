"""Inline token consumption for the manforge parser."""

from __future__ import annotations

from manforge.nodes import Node, NodeKind
from manforge.parsing.line_group import LineGroup
from manforge.tokens import TokenType

# Delimiter token -> node kind of the span it encloses
SPAN_KINDS: dict[TokenType, NodeKind] = {
    TokenType.BOLD: NodeKind.TEXT_BOLD,
    TokenType.UNDERLINE: NodeKind.TEXT_UNDERLINE,
}


class InlineParsingMixin:
    """Mixin draining the inline tokens of one line into the tree."""

    def _add_node(self, kind: NodeKind, text: str = "") -> Node:
        """Append a node under the insertion point. Implemented by TreeBuildingMixin."""
        raise NotImplementedError

    def _close_all_groups(self) -> None:
        """Reset the insertion point to the root. Implemented by TreeBuildingMixin."""
        raise NotImplementedError

    def _consume_inline(self, group: LineGroup, *, markers_as_text: bool = False) -> None:
        """Consume the remaining tokens of a line.

        A delimiter only produces a node when it is followed by exactly
        (TEXT, same delimiter); otherwise it is dropped.

        Args:
            group: Line whose cursor sits on the first inline token
            markers_as_text: Turn LIST_ITEM and BLOCK_ITEM payloads into TEXT
                nodes instead of ignoring them
        """
        while (token := group.next()) is not None:
            match token.type:
                case TokenType.SECTION:
                    self._close_all_groups()
                    self._add_node(NodeKind.SECTION, token.text)
                case TokenType.TEXT:
                    self._add_node(NodeKind.TEXT, token.text)
                case TokenType.BOLD | TokenType.UNDERLINE:
                    if group.lookahead(TokenType.TEXT, token.type):
                        text, _ = group.next(), group.next()
                        self._add_node(SPAN_KINDS[token.type], text.text)
                case TokenType.LIST_ITEM | TokenType.BLOCK_ITEM if markers_as_text:
                    self._add_node(NodeKind.TEXT, token.text)
                case _:
                    pass
