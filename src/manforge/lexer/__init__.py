"""Line-oriented tokenizer for manforge markup.

Architecture:
lexer/
├── __init__.py          # Re-exports Tokenizer, tokenize
├── core.py              # Tokenizer class (mixin composition + escapes)
├── classifiers/         # Per-line classification mixins
│   ├── indent.py        # Indentation units
│   └── marker.py        # Section, list item and block item markers
└── scanners/
    └── inline.py        # Text runs and bold/underline delimiters

Markup:
    # Section            section heading
    - item               list item
    > line               block-quoted line
    *bold* _underline_   inline spans
    \\*                  escapes one of \\ * _ # - >

Indentation is one tab or ``indent_width`` spaces per level.

Usage:
    >>> from manforge.lexer import tokenize
    >>> tokenize("# Name")
    [Token(SECTION, 'Name'), Token(EOL)]

"""

from manforge.lexer.core import Tokenizer, tokenize

__all__ = ["Tokenizer", "tokenize"]
