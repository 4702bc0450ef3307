"""Token and TokenType definitions for the manforge tokenizer.

The tokenizer produces a flat stream of Token objects, one logical line at
a time, each line terminated by an EOL token. The parser regroups the stream
into lines before building the node tree.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from dataclasses import dataclass, field
from enum import Enum, auto


class TokenType(Enum):
    """Token types produced by the tokenizer.

    Organized by category:
    - Line structure (INDENT, EOL)
    - Line markers carrying the rest of the line as payload
    - Inline content and delimiters

    """

    # Line structure
    INDENT = auto()  # one indentation unit
    EOL = auto()

    # Line markers
    SECTION = auto()  # # Heading
    LIST_ITEM = auto()  # - item
    BLOCK_ITEM = auto()  # > quoted line

    # Inline content
    TEXT = auto()
    BOLD = auto()  # *
    UNDERLINE = auto()  # _


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the tokenizer.

    Attributes:
        type: The token type (from TokenType enum)
        text: Payload text; empty for structural tokens and delimiters
        lineno: Line number in the source (1-indexed, 0 when synthesized)
        col: Column offset in the source (1-indexed, 0 when synthesized)

    Source coordinates are excluded from comparison so a hand-built token
    stream compares equal to a tokenized one.

    """

    type: TokenType
    text: str = ""
    lineno: int = field(default=0, compare=False)
    col: int = field(default=0, compare=False)

    def is_(self, *types: TokenType) -> bool:
        """Return True if this token has one of the given types."""
        return self.type in types

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        if not self.text:
            return f"Token({self.type.name})"
        val = self.text
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r})"


def tokens_of(*pairs: TokenType | tuple[TokenType, str]) -> list[Token]:
    """Build a token list from bare types or (type, text) pairs.

    Used by callers that synthesize token streams instead of tokenizing text,
    e.g. a verbatim option description.

    Example:
        >>> tokens_of(TokenType.INDENT, (TokenType.TEXT, "hi"), TokenType.EOL)
        [Token(INDENT), Token(TEXT, 'hi'), Token(EOL)]
    """
    result: list[Token] = []
    for pair in pairs:
        if isinstance(pair, TokenType):
            result.append(Token(pair))
        else:
            result.append(Token(pair[0], pair[1]))
    return result
