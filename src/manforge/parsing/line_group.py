"""Line grouping for the manforge parser.

Splits the flat token stream back into lines. Each LineGroup carries the
line's indentation level and a cursor the parser advances while consuming
the line's tokens.
"""

from __future__ import annotations

from collections.abc import Sequence

from manforge.errors import OutOfRangeError
from manforge.tokens import Token, TokenType


class LineGroup:
    """Tokens of one line with its indentation level and a cursor.

    Attributes:
        tokens: Body tokens of the line (indentation and EOL stripped)
        level: Number of leading INDENT tokens on the source line

    """

    __slots__ = ("tokens", "level", "_pos")

    def __init__(self, tokens: Sequence[Token], level: int = 0) -> None:
        self.tokens: tuple[Token, ...] = tuple(tokens)
        self.level = level
        self._pos = 0

    @classmethod
    def from_tokens(cls, tokens: Sequence[Token], start: int = 0) -> tuple[LineGroup, int]:
        """Extract the line group starting at tokens[start].

        Args:
            tokens: Full token stream
            start: Index of the first token of the line

        Returns:
            (group, consumed) where consumed counts indentation tokens, body
            tokens and the terminating EOL when present.

        Raises:
            OutOfRangeError: start lies beyond the end of tokens
        """
        if start < 0 or start > len(tokens):
            raise OutOfRangeError(
                f"line start {start} outside token stream of length {len(tokens)}"
            )

        pos = start
        while pos < len(tokens) and tokens[pos].type is TokenType.INDENT:
            pos += 1
        level = pos - start

        body_start = pos
        while pos < len(tokens) and tokens[pos].type is not TokenType.EOL:
            pos += 1
        body = tokens[body_start:pos]

        if pos < len(tokens):
            pos += 1  # the EOL itself
        return cls(body, level), pos - start

    # =========================================================================
    # Cursor
    # =========================================================================

    def remaining(self) -> tuple[Token, ...]:
        """Tokens from the cursor onward."""
        return self.tokens[self._pos :]

    def next(self) -> Token | None:
        """Return the token at the cursor and advance, or None when exhausted."""
        if self._pos >= len(self.tokens):
            return None
        token = self.tokens[self._pos]
        self._pos += 1
        return token

    def lookahead(self, *types: TokenType) -> bool:
        """Check whether the next len(types) tokens match types, without consuming."""
        ahead = self.tokens[self._pos : self._pos + len(types)]
        if len(ahead) != len(types):
            return False
        return all(token.type is kind for token, kind in zip(ahead, types, strict=True))

    @property
    def is_empty(self) -> bool:
        """Whether the line had no body tokens."""
        return not self.tokens

    def __len__(self) -> int:
        return len(self.tokens)

    def __repr__(self) -> str:
        return f"LineGroup(level={self.level}, tokens={list(self.tokens)!r}, pos={self._pos})"


def split_lines(tokens: Sequence[Token]) -> list[LineGroup]:
    """Split a token stream into line groups.

    Zero tokens yield zero groups.

    Example:
        >>> from manforge.tokens import TokenType, tokens_of
        >>> groups = split_lines(tokens_of(TokenType.INDENT, (TokenType.TEXT, "a"), TokenType.EOL))
        >>> groups[0].level
        1
    """
    groups: list[LineGroup] = []
    pos = 0
    while pos < len(tokens):
        group, consumed = LineGroup.from_tokens(tokens, pos)
        groups.append(group)
        pos += consumed
    return groups
