"""Exception classes for manforge.

Tokenizer and parser failures are reported as ParseError subclasses, one per
error kind. Callers catch ParseError to decide a fallback; the library never
guesses one itself.
"""

from __future__ import annotations


class ManforgeError(Exception):
    """Base exception for all manforge errors.

    Subclass this for specific error categories.
    """

    pass


class ParseError(ManforgeError):
    """Error while tokenizing or parsing markup.

    Raised when the tokenizer encounters invalid or unexpected input.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Name of the source the text came from (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class MalformedSyntaxError(ParseError):
    """Unrecognized lexical form, e.g. an unknown escape or an empty marker."""


class IndentMismatchError(ParseError):
    """Indentation is not a whole number of units, or mixes tabs and spaces."""


class EndOfInputError(ParseError):
    """A construct was left incomplete when the input ran out."""


class OutOfRangeError(ParseError):
    """Internal bounds violation.

    Never raised for any input text; seeing it means a tokenizer or line
    grouping defect.
    """


class RenderError(ManforgeError):
    """Error while setting up or driving a renderer.

    Raised for unknown output formats.
    """

    pass
