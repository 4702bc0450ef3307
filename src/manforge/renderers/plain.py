"""Plain text writer and renderer.

Produces a terminal-style page with no markup:

    NAME(1)

    SECTION
        body text
            indented text
        - list item

    2024-01-31
"""

from __future__ import annotations

from datetime import date
from typing import BinaryIO

from manforge.linebuilder import LineBuilder
from manforge.renderers.base import WriterRenderer

INDENT = "    "


class PlainWriter:
    """Accumulate a page as plain text."""

    __slots__ = ("_title", "_section", "_date", "_body", "_depth", "_in_section")

    def __init__(self) -> None:
        self._title = ""
        self._section = 1
        self._date = ""
        self._body = LineBuilder()
        self._depth = 0
        self._in_section = False

    def write_title(self, title: str, section: int = 1) -> None:
        self._title = title
        self._section = section

    def write_date(self, value: date | str) -> None:
        if isinstance(value, date):
            value = value.isoformat()[:10]
        self._date = value

    def _prefix(self) -> str:
        return INDENT * (self._depth + (1 if self._in_section else 0))

    def _blank_line(self) -> None:
        self._body.end_line()
        if self._body and self._body.last_line != "":
            self._body.append_line("")

    def write_section(self, title: str) -> None:
        self._blank_line()
        self._depth = 0
        self._in_section = True
        self._body.append_line(title)

    def write_text(self, content: str) -> None:
        if self._body.at_line_start:
            self._body.append(self._prefix())
            content = content.lstrip()
        self._body.append(content)

    def write_bold(self, content: str) -> None:
        self.write_text(content)

    def write_underline(self, content: str) -> None:
        self.write_text(content)

    def write_space(self) -> None:
        if not self._body.at_line_start:
            self._body.append(" ")

    def write_paragraph(self) -> None:
        self._blank_line()

    def write_line_break(self) -> None:
        self._body.end_line()

    def write_indent(self) -> None:
        self._body.end_line()
        self._depth += 1

    def write_dedent(self) -> None:
        self._body.end_line()
        if self._depth:
            self._depth -= 1

    def write_list_item(self, content: str, bullet: str) -> None:
        self._body.end_line()
        self._body.append(f"{self._prefix()}{bullet} {content}")

    def write_end_list(self) -> None:
        self._body.end_line()

    def build(self) -> str:
        """Return the complete page."""
        page = LineBuilder()
        if self._title:
            page.append_line(f"{self._title.upper()}({self._section})")
            page.append_line("")
        page.append(self._body.build().rstrip("\n"))
        page.end_line()
        if self._date:
            page.append_line("")
            page.append_line(self._date)
        return page.build()

    def save(self, stream: BinaryIO) -> None:
        stream.write(self.build().encode("utf-8"))


class PlainRenderer(WriterRenderer):
    """Renderer producing plain text through a PlainWriter."""

    __slots__ = ()

    bullet = "-"
