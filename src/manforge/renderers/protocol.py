"""Renderer and Writer protocols: the pluggable output-format interface.

A Renderer receives abstract formatting calls from the tree walk. A Writer
is the format-specific sink a renderer delegates to: it accumulates a title,
a date and the formatted body, escapes what the format needs escaped and
serializes everything on save.

Renderer and Writer are swapped together to add an output format; the
tokenizer and parser never see either.

Example:
    from manforge.renderers import TroffRenderer, TroffWriter, render

    writer = TroffWriter()
    render(TroffRenderer(writer), root)
    writer.save(stream)

"""

from __future__ import annotations

from datetime import date
from typing import BinaryIO, Protocol, runtime_checkable


@runtime_checkable
class Renderer(Protocol):
    """Capability set the tree walk dispatches to."""

    def section(self, title: str) -> None:
        """Begin a section with the given heading."""
        ...

    def text(self, content: str) -> None: ...

    def text_bold(self, content: str) -> None: ...

    def text_underline(self, content: str) -> None: ...

    def space(self) -> None:
        """Separate two adjacent pieces of text."""
        ...

    def paragraph_break(self) -> None: ...

    def line_break(self) -> None:
        """End the current output line without starting a new paragraph."""
        ...

    def indent(self) -> None: ...

    def dedent(self) -> None: ...

    def list_item(self, content: str) -> None:
        """Start a list item whose first line is content."""
        ...

    def end_list(self) -> None: ...


@runtime_checkable
class Writer(Protocol):
    """Format-specific accumulator and serializer."""

    def write_title(self, title: str, section: int = 1) -> None: ...

    def write_date(self, value: date | str) -> None: ...

    def write_section(self, title: str) -> None: ...

    def write_text(self, content: str) -> None: ...

    def write_bold(self, content: str) -> None: ...

    def write_underline(self, content: str) -> None: ...

    def write_space(self) -> None: ...

    def write_paragraph(self) -> None: ...

    def write_line_break(self) -> None: ...

    def write_indent(self) -> None: ...

    def write_dedent(self) -> None: ...

    def write_list_item(self, content: str, bullet: str) -> None: ...

    def write_end_list(self) -> None: ...

    def build(self) -> str:
        """Return the serialized document."""
        ...

    def save(self, stream: BinaryIO) -> None:
        """Write the serialized document to a binary stream.

        Errors raised by the stream propagate unchanged.
        """
        ...
