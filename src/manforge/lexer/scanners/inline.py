"""Inline content scanner mixin.

Splits a line's content into TEXT runs and single-character BOLD/UNDERLINE
delimiters. Delimiters are emitted one by one; pairing them is left to the
parser.
"""

from manforge.tokens import Token, TokenType

INLINE_DELIMITERS: dict[str, TokenType] = {
    "*": TokenType.BOLD,
    "_": TokenType.UNDERLINE,
}


class InlineScannerMixin:
    """Mixin scanning inline text and delimiters."""

    _tokens: list[Token]

    def _make_token(self, token_type: TokenType, text: str, col: int) -> Token:
        """Create token on the current line. Implemented by Tokenizer."""
        raise NotImplementedError

    def _char_at(self, text: str, pos: int) -> str:
        """Bounds-checked character access. Implemented by Tokenizer."""
        raise NotImplementedError

    def _escaped_char(self, text: str, pos: int, start: int, is_last: bool) -> str:
        """Resolve the escape at text[pos]. Implemented by Tokenizer."""
        raise NotImplementedError

    def _scan_inline(self, content: str, content_start: int, is_last: bool) -> None:
        """Emit TEXT and delimiter tokens for inline content.

        Args:
            content: Line content with indentation stripped
            content_start: Index of content within the line (0-indexed)
            is_last: Whether this is the final line of input
        """
        run: list[str] = []
        run_col = content_start + 1
        pos = 0
        content_len = len(content)

        while pos < content_len:
            char = self._char_at(content, pos)

            if char in INLINE_DELIMITERS and self._is_delimiter(content, pos):
                if run:
                    self._tokens.append(self._make_token(TokenType.TEXT, "".join(run), run_col))
                    run = []
                self._tokens.append(
                    self._make_token(INLINE_DELIMITERS[char], "", content_start + pos + 1)
                )
                pos += 1
                continue

            if not run:
                run_col = content_start + pos + 1
            if char == "\\":
                run.append(self._escaped_char(content, pos, content_start, is_last))
                pos += 2
            else:
                run.append(char)
                pos += 1

        if run:
            self._tokens.append(self._make_token(TokenType.TEXT, "".join(run), run_col))

    def _is_delimiter(self, content: str, pos: int) -> bool:
        """Check whether the delimiter character at pos sits on a word boundary.

        A delimiter opens a span when followed by non-space and not preceded
        by a letter or digit; it closes one when preceded by non-space and not
        followed by a letter or digit. ``snake_case`` and ``2 * 3`` stay text.
        """
        prev = content[pos - 1] if pos > 0 else ""
        nxt = content[pos + 1] if pos + 1 < len(content) else ""
        opens = bool(nxt) and not nxt.isspace() and not prev.isalnum()
        closes = bool(prev) and not prev.isspace() and not nxt.isalnum()
        return opens or closes
