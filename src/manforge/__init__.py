"""
manforge: manual pages from lightly marked-up documentation text

Turns doc comments and option usage strings into a document tree, then
renders the tree as troff (man) or plain text. Zero runtime dependencies.

Quick Start:
    >>> from manforge import parse_text, render_text
    >>> root = parse_text("# Usage\\n- *fast* mode")
    >>> [child.kind.label for child in root.children]
    ['Section', 'List']
    >>> print(render_text("hello *world*"), end="")
    hello \\fBworld\\fR

Whole pages:
    >>> from manforge import CommandDoc, Option, render_manpage
    >>> page = render_manpage(CommandDoc("greet", doc="greet - say hello",
    ...                                  options=(Option("loud", usage="Shout"),)))

Markup:
    # Section      - list item      > quoted line
    *bold*         _underline_      \\* escapes a marker character
    Indentation (one tab or four spaces per level) nests content.
"""

from manforge.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from manforge.errors import (
    EndOfInputError,
    IndentMismatchError,
    MalformedSyntaxError,
    ManforgeError,
    OutOfRangeError,
    ParseError,
    RenderError,
)
from manforge.lexer import Tokenizer, tokenize
from manforge.manpage import CommandDoc, ManPageBuilder, Option, render_manpage
from manforge.nodes import Node, NodeKind
from manforge.parser import Parser, parse, parse_part
from manforge.renderers import (
    PlainRenderer,
    PlainWriter,
    Renderer,
    TroffRenderer,
    TroffWriter,
    Writer,
    create_output,
    render,
    save,
)
from manforge.serialization import dump, from_dict, from_json, to_dict, to_json
from manforge.tokens import Token, TokenType

__version__ = "0.1.0"


def parse_text(source: str, *, source_name: str | None = None) -> Node:
    """Tokenize and parse markup text into a tree.

    Args:
        source: Markup text
        source_name: Optional name reported in error locations

    Returns:
        Root GROUP node

    Raises:
        ParseError: Tokenizing failed; no tree is returned
    """
    return Parser().parse(Tokenizer(source, source_name).tokenize())


def render_text(source: str, output_format: str = "troff") -> str:
    """Render markup text as a document body (no title header).

    Raises:
        ParseError: Tokenizing failed
        RenderError: Unknown output format
    """
    root = parse_text(source)
    renderer, writer = create_output(output_format)
    render(renderer, root)
    return writer.build()


__all__ = [
    "__version__",
    # High-level
    "parse_text",
    "render_text",
    "render_manpage",
    "CommandDoc",
    "ManPageBuilder",
    "Option",
    # Tokenizer
    "Token",
    "TokenType",
    "Tokenizer",
    "tokenize",
    # Parser
    "Node",
    "NodeKind",
    "Parser",
    "parse",
    "parse_part",
    # Renderers
    "PlainRenderer",
    "PlainWriter",
    "Renderer",
    "TroffRenderer",
    "TroffWriter",
    "Writer",
    "create_output",
    "render",
    "save",
    # Serialization
    "dump",
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
    # Configuration (ContextVar-based)
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Errors
    "EndOfInputError",
    "IndentMismatchError",
    "MalformedSyntaxError",
    "ManforgeError",
    "OutOfRangeError",
    "ParseError",
    "RenderError",
]
