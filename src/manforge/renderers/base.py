"""Base renderer forwarding formatting calls to a Writer."""

from __future__ import annotations

from typing import ClassVar

from manforge.renderers.protocol import Writer


class WriterRenderer:
    """Renderer that forwards every operation to a Writer.

    Subclasses choose presentation (heading case, list bullet, which spans
    keep their markup); the writer owns escaping and serialization.

    """

    __slots__ = ("writer",)

    bullet: ClassVar[str] = "-"

    def __init__(self, writer: Writer) -> None:
        self.writer = writer

    def section(self, title: str) -> None:
        self.writer.write_section(title.upper())

    def text(self, content: str) -> None:
        self.writer.write_text(content)

    def text_bold(self, content: str) -> None:
        self.writer.write_bold(content)

    def text_underline(self, content: str) -> None:
        self.writer.write_underline(content)

    def space(self) -> None:
        self.writer.write_space()

    def paragraph_break(self) -> None:
        self.writer.write_paragraph()

    def line_break(self) -> None:
        self.writer.write_line_break()

    def indent(self) -> None:
        self.writer.write_indent()

    def dedent(self) -> None:
        self.writer.write_dedent()

    def list_item(self, content: str) -> None:
        self.writer.write_list_item(content, self.bullet)

    def end_list(self) -> None:
        self.writer.write_end_list()
