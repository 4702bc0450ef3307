"""Line marker classifier mixin (section, list item, block item)."""

from manforge.errors import MalformedSyntaxError
from manforge.tokens import Token, TokenType

# Marker character -> (token type, name used in error messages)
LINE_MARKERS: dict[str, tuple[TokenType, str]] = {
    "#": (TokenType.SECTION, "section"),
    "-": (TokenType.LIST_ITEM, "list item"),
    ">": (TokenType.BLOCK_ITEM, "block item"),
}


class MarkerClassifierMixin:
    """Mixin providing line marker classification."""

    _lineno: int
    _source_name: str | None

    def _make_token(self, token_type: TokenType, text: str, col: int) -> Token:
        """Create token on the current line. Implemented by Tokenizer."""
        raise NotImplementedError

    def _unescape(self, text: str, start: int, is_last: bool) -> str:
        """Resolve backslash escapes. Implemented by Tokenizer."""
        raise NotImplementedError

    def _try_classify_marker(
        self, content: str, content_start: int, is_last: bool
    ) -> Token | None:
        """Try to classify content as a marker line.

        A marker is one of ``#``, ``-`` or ``>`` followed by whitespace; the
        rest of the line is the token payload. ``-v`` or ``#include`` are
        not markers and fall through to inline scanning.

        Args:
            content: Line content with indentation and trailing space stripped
            content_start: Index of content within the line (0-indexed)
            is_last: Whether this is the final line of input

        Returns:
            Token if the line is a marker line, None otherwise.

        Raises:
            MalformedSyntaxError: Marker without payload text
        """
        if not content or content[0] not in LINE_MARKERS:
            return None
        if len(content) > 1 and content[1] not in " \t":
            return None

        token_type, name = LINE_MARKERS[content[0]]
        rest = content[1:]
        offset = content_start + 1 + (len(rest) - len(rest.lstrip()))
        payload = self._unescape(rest.strip(), offset, is_last)
        if not payload:
            raise MalformedSyntaxError(
                f"{name} marker without text",
                self._lineno,
                content_start + 1,
                self._source_name,
            )
        return self._make_token(token_type, payload, content_start + 1)
