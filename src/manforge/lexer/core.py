"""Line-oriented tokenizer for lightly marked-up documentation text.

Scans one line at a time: measure indentation, classify a leading marker,
otherwise scan inline content. Every line is terminated by an EOL token,
so the parser can regroup the flat stream into lines.

Thread Safety:
Tokenizer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from manforge.config import get_parse_config
from manforge.errors import EndOfInputError, MalformedSyntaxError, OutOfRangeError
from manforge.lexer.classifiers import IndentClassifierMixin, MarkerClassifierMixin
from manforge.lexer.scanners import InlineScannerMixin
from manforge.tokens import Token, TokenType
from manforge.utils.logger import get_logger

logger = get_logger(__name__)

# Characters that may follow a backslash.
ESCAPABLE = frozenset("\\*_#->")


def _split_lines(source: str) -> list[str]:
    """Split source into lines; a final newline does not open another line."""
    if not source:
        return []
    lines = source.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class Tokenizer(
    # Classifiers (pure logic on one line)
    IndentClassifierMixin,
    MarkerClassifierMixin,
    # Scanners
    InlineScannerMixin,
):
    """Tokenizer for documentation markup.

    Usage:
            >>> Tokenizer("# Name\\n    hello *world*").tokenize()
        [Token(SECTION, 'Name'), Token(EOL), Token(INDENT), Token(TEXT, 'hello '),
         Token(BOLD), Token(TEXT, 'world'), Token(BOLD), Token(EOL)]

    Thread Safety:
        Tokenizer instances are single-use. Create one per source string.

    """

    __slots__ = (
        "_source",
        "_source_name",
        "_indent_width",
        "_indent_char",  # First indentation character seen ("" until then)
        "_lines",
        "_lineno",
        "_tokens",
    )

    def __init__(
        self,
        source: str,
        source_name: str | None = None,
        indent_width: int | None = None,
    ) -> None:
        """Initialize tokenizer with source text.

        Args:
            source: Markup text
            source_name: Optional name for error messages (defaults to config)
            indent_width: Spaces per indentation unit (defaults to config)
        """
        config = get_parse_config()
        self._source = source
        self._source_name = source_name if source_name is not None else config.source_name
        self._indent_width = indent_width if indent_width is not None else config.indent_width
        self._indent_char = ""
        self._lines = _split_lines(source)
        self._lineno = 0
        self._tokens: list[Token] = []

    def tokenize(self) -> list[Token]:
        """Tokenize source into a flat token list.

        The list is only returned once the whole source has been scanned;
        on error nothing is returned.

        Raises:
            MalformedSyntaxError: Unrecognized lexical form
            IndentMismatchError: Inconsistent indentation
            EndOfInputError: Construct left incomplete at end of input
        """
        self._tokens = []
        self._indent_char = ""
        last = len(self._lines) - 1
        for index, line in enumerate(self._lines):
            self._lineno = index + 1
            self._scan_line(line, is_last=index == last)

        logger.debug(
            "Tokenized %d lines into %d tokens", len(self._lines), len(self._tokens)
        )
        return self._tokens

    def _scan_line(self, line: str, *, is_last: bool) -> None:
        """Emit the tokens of one line, EOL included."""
        if not line.strip():
            self._emit(TokenType.EOL, col=len(line) + 1)
            return

        level, content_start = self._classify_indent(line)
        for _ in range(level):
            self._emit(TokenType.INDENT, col=1)

        content = line[content_start:].rstrip()
        marker = self._try_classify_marker(content, content_start, is_last)
        if marker is not None:
            self._tokens.append(marker)
        else:
            self._scan_inline(content, content_start, is_last)

        self._emit(TokenType.EOL, col=len(line) + 1)

    # =========================================================================
    # Helpers shared with the mixins
    # =========================================================================

    def _char_at(self, text: str, pos: int) -> str:
        """Return text[pos], refusing out-of-bounds reads."""
        if pos < 0 or pos >= len(text):
            raise OutOfRangeError(
                f"character index {pos} outside line of length {len(text)}",
                self._lineno,
                pos + 1,
                self._source_name,
            )
        return text[pos]

    def _escaped_char(self, text: str, pos: int, start: int, is_last: bool) -> str:
        """Resolve the backslash escape at text[pos].

        Args:
            text: Text containing the escape
            pos: Index of the backslash within text
            start: Index of text within the line (for error columns)
            is_last: Whether this is the final line of input

        Raises:
            EndOfInputError: Backslash ends the final line
            MalformedSyntaxError: Backslash ends another line, or escapes a
                character that needs no escaping
        """
        col = start + pos + 1
        if pos + 1 >= len(text):
            if is_last:
                raise EndOfInputError(
                    "input ends inside an escape sequence", self._lineno, col, self._source_name
                )
            raise MalformedSyntaxError(
                "line ends inside an escape sequence", self._lineno, col, self._source_name
            )
        char = self._char_at(text, pos + 1)
        if char not in ESCAPABLE:
            raise MalformedSyntaxError(
                f"unknown escape sequence '\\{char}'", self._lineno, col, self._source_name
            )
        return char

    def _unescape(self, text: str, start: int, is_last: bool) -> str:
        """Return text with all backslash escapes resolved."""
        if "\\" not in text:
            return text
        result: list[str] = []
        pos = 0
        while pos < len(text):
            char = self._char_at(text, pos)
            if char == "\\":
                result.append(self._escaped_char(text, pos, start, is_last))
                pos += 2
            else:
                result.append(char)
                pos += 1
        return "".join(result)

    def _make_token(self, token_type: TokenType, text: str, col: int) -> Token:
        """Create a token on the current line."""
        return Token(token_type, text, self._lineno, col)

    def _emit(self, token_type: TokenType, text: str = "", *, col: int) -> None:
        self._tokens.append(self._make_token(token_type, text, col))


def tokenize(source: str, *, source_name: str | None = None) -> list[Token]:
    """Tokenize markup text using the active configuration.

    Example:
        >>> tokenize("- item")
        [Token(LIST_ITEM, 'item'), Token(EOL)]
    """
    return Tokenizer(source, source_name).tokenize()
