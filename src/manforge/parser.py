"""Indentation-driven parser producing the document tree.

Consumes the token stream line by line and builds a Node tree. Nesting is
driven only by indentation changes between lines; there are no explicit
close markers.

Architecture:
The parser uses a mixin-based design for separation of concerns:
- `TreeBuildingMixin`: insertion point, group open/close, pending action
- `InlineParsingMixin`: text, section and bold/underline span tokens

Thread Safety:
Parser instances carry per-call state (`_current`, `_pending`) and are not
thread-safe. Use one parser per document.

"""

from __future__ import annotations

from collections.abc import Sequence

from manforge.nodes import Node, NodeKind, new_root
from manforge.parsing import InlineParsingMixin, LineGroup, TreeBuildingMixin, split_lines
from manforge.parsing.tree import PendingAction
from manforge.tokens import Token, TokenType
from manforge.utils.logger import get_logger

logger = get_logger(__name__)


class Parser(
    TreeBuildingMixin,
    InlineParsingMixin,
):
    """Single-pass parser for tokenized documentation markup.

    Usage:
            >>> from manforge.lexer import tokenize
            >>> root = Parser().parse(tokenize("- first\\n- second"))
            >>> [child.kind.label for child in root.children]
        ['List']

    Thread Safety:
        Not thread-safe. State is reset at the start of each call, so an
        instance may be reused sequentially.

    """

    __slots__ = ("_root", "_current", "_pending")

    def __init__(self) -> None:
        self._reset()

    def _reset(self) -> None:
        self._root = new_root()
        self._current = self._root
        self._pending = PendingAction.NONE

    @property
    def root(self) -> Node:
        """Root of the most recently built tree."""
        return self._root

    def parse(self, tokens: Sequence[Token]) -> Node:
        """Parse a multi-line token stream into a tree.

        Args:
            tokens: Tokens as produced by the tokenizer

        Returns:
            Root GROUP node
        """
        self._reset()
        groups = split_lines(tokens)

        last_level = 0
        for index, group in enumerate(groups):
            # An empty line closes all opened levels.
            if group.is_empty and index > 0:
                self._close_all_groups()
                self._add_node(NodeKind.BREAK)
                continue

            self._apply_indent(group.level - last_level)

            if group.lookahead(TokenType.BLOCK_ITEM):
                self._parse_block_item(group)

            if group.lookahead(TokenType.LIST_ITEM):
                self._parse_list_item(group)

            self._arm_space_hook()
            self._consume_inline(group)
            self._clear_pending()

            last_level = group.level

        logger.debug(
            "Parsed %d lines into %d top-level nodes", len(groups), len(self._root.children)
        )
        return self._root

    def parse_part(self, tokens: Sequence[Token]) -> Node:
        """Parse a short token stream known to be one logical unit.

        Indentation is ignored; list and block markers contribute their text.
        Used for option descriptions.

        Args:
            tokens: Tokens of the text, possibly spanning several lines

        Returns:
            Root GROUP node
        """
        self._reset()
        for group in split_lines(tokens):
            if group.is_empty:
                continue
            self._arm_space_hook()
            self._consume_inline(group, markers_as_text=True)
            self._clear_pending()
        return self._root

    # =========================================================================
    # Line-level steps
    # =========================================================================

    def _apply_indent(self, level_diff: int) -> None:
        """Open or close one group per unit of indentation change."""
        for _ in range(level_diff):
            self._open_group()
        for _ in range(-level_diff):
            self._close_group()

    def _parse_block_item(self, group: LineGroup) -> None:
        item = group.next()
        if self._current.kind is not NodeKind.BLOCK:
            self._open(NodeKind.BLOCK)
        self._add_node(NodeKind.TEXT, item.text)

    def _parse_list_item(self, group: LineGroup) -> None:
        """Attach a list item, reusing the enclosing list when there is one."""
        item = group.next()
        match self._current.kind:
            case NodeKind.LIST_ITEM:
                # Sibling item: step back out to the list.
                self._current = self._current.parent
            case NodeKind.LIST:
                pass
            case _:
                self._open(NodeKind.LIST)
        self._open(NodeKind.LIST_ITEM, item.text)


def parse(tokens: Sequence[Token]) -> Node:
    """Parse tokens with a fresh parser."""
    return Parser().parse(tokens)


def parse_part(tokens: Sequence[Token]) -> Node:
    """Parse a one-unit token stream with a fresh parser."""
    return Parser().parse_part(tokens)
