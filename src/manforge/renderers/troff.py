"""troff (man macro package) writer and renderer.

Output conventions:
    .TH "NAME" "1" "2024-01-31"    title header
    .SH "SECTION"                  section heading
    \\fBbold\\fR  \\fIunderline\\fR  inline spans
    .PP                            paragraph break
    .br                            line break
    .RS / .RE                      indentation
    .IP \\(bu 2                    list item

Inline content is accumulated on the open text line; requests always start
a line of their own.
"""

from __future__ import annotations

from datetime import date
from typing import BinaryIO

from manforge.linebuilder import LineBuilder
from manforge.renderers.base import WriterRenderer
from manforge.utils.text import escape_troff, escape_troff_arg, guard_control_line

DATE_FORMAT = "%Y-%m-%d"

# Requests that already begin a new paragraph; a .PP right after them is noise.
_PARAGRAPH_REQUESTS = (".PP", ".SH", ".IP", ".TH")


class TroffWriter:
    """Accumulate a manual page in troff source form."""

    __slots__ = ("_title", "_section", "_date", "_body", "_depth")

    def __init__(self) -> None:
        self._title = ""
        self._section = 1
        self._date = ""
        self._body = LineBuilder()
        self._depth = 0  # open .RS requests

    # =========================================================================
    # Header
    # =========================================================================

    def write_title(self, title: str, section: int = 1) -> None:
        self._title = title
        self._section = section

    def write_date(self, value: date | str) -> None:
        if isinstance(value, date):
            value = value.strftime(DATE_FORMAT)
        self._date = value

    # =========================================================================
    # Body
    # =========================================================================

    def _request(self, name: str, *args: str) -> None:
        """Start a request line, finishing any open text line."""
        line = name
        if args:
            line += " " + " ".join(args)
        self._body.append_line(line)

    def _append_text(self, fragment: str) -> None:
        if self._body.at_line_start:
            fragment = guard_control_line(fragment)
        self._body.append(fragment)

    def write_section(self, title: str) -> None:
        self._request(".SH", f'"{escape_troff_arg(title)}"')

    def write_text(self, content: str) -> None:
        self._append_text(escape_troff(content))

    def write_bold(self, content: str) -> None:
        self._append_text(f"\\fB{escape_troff(content)}\\fR")

    def write_underline(self, content: str) -> None:
        self._append_text(f"\\fI{escape_troff(content)}\\fR")

    def write_space(self) -> None:
        # Text lines are joined with a space in fill mode.
        if not self._body.at_line_start:
            self._body.append(" ")

    def write_paragraph(self) -> None:
        self._body.end_line()
        last = self._body.last_line
        if last is not None and last.startswith(_PARAGRAPH_REQUESTS):
            return
        self._request(".PP")

    def write_line_break(self) -> None:
        self._request(".br")

    def write_indent(self) -> None:
        self._depth += 1
        self._request(".RS")

    def write_dedent(self) -> None:
        if self._depth == 0:
            return
        self._depth -= 1
        self._request(".RE")

    def write_list_item(self, content: str, bullet: str) -> None:
        self._request(".IP", bullet, "2")
        self._append_text(escape_troff(content))

    def write_end_list(self) -> None:
        self.write_paragraph()

    # =========================================================================
    # Serialization
    # =========================================================================

    def build(self) -> str:
        """Return the complete troff document."""
        header = LineBuilder()
        if self._title:
            header.append_line(
                f'.TH "{escape_troff_arg(self._title.upper())}" "{self._section}" '
                f'"{escape_troff_arg(self._date)}"'
            )
        return header.build() + self._body.build()

    def save(self, stream: BinaryIO) -> None:
        stream.write(self.build().encode("utf-8"))


class TroffRenderer(WriterRenderer):
    """Renderer producing man(7) markup through a TroffWriter."""

    __slots__ = ()

    bullet = "\\(bu"
