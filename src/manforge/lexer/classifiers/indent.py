"""Indentation classifier mixin."""

from manforge.errors import IndentMismatchError

_INDENT_NAMES = {" ": "spaces", "\t": "tabs"}


class IndentClassifierMixin:
    """Mixin measuring the indentation level of a line.

    A tab is one unit; otherwise `_indent_width` spaces make one unit.
    The first indented line fixes the indentation character for the rest of
    the document.

    """

    _indent_width: int
    _indent_char: str
    _lineno: int
    _source_name: str | None

    def _classify_indent(self, line: str) -> tuple[int, int]:
        """Return (level, content_start_index) for a non-blank line.

        Raises:
            IndentMismatchError: Mixed characters or a partial unit
        """
        pos = 0
        while pos < len(line) and line[pos] in " \t":
            pos += 1
        if pos == 0:
            return 0, 0

        leading = line[:pos]
        if " " in leading and "\t" in leading:
            raise IndentMismatchError(
                "indentation mixes tabs and spaces",
                self._lineno,
                1,
                self._source_name,
            )

        char = leading[0]
        if self._indent_char and char != self._indent_char:
            raise IndentMismatchError(
                f"line is indented with {_INDENT_NAMES[char]} but earlier lines "
                f"use {_INDENT_NAMES[self._indent_char]}",
                self._lineno,
                1,
                self._source_name,
            )
        self._indent_char = char

        if char == "\t":
            return pos, pos

        if pos % self._indent_width:
            raise IndentMismatchError(
                f"indentation of {pos} spaces is not a multiple of {self._indent_width}",
                self._lineno,
                pos + 1,
                self._source_name,
            )
        return pos // self._indent_width, pos
