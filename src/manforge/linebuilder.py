"""LineBuilder for O(n) accumulation of line-oriented output.

Formats like troff distinguish control lines from text lines, so writers
need to know whether they are at the start of a line. LineBuilder keeps the
fragments of the open line separately from the finished lines and joins
everything once at the end.

Thread Safety:
LineBuilder instances are local to one writer. No shared mutable state.

"""

from __future__ import annotations


class LineBuilder:
    """Line-aware string accumulator.

    Usage:
            >>> lb = LineBuilder()
            >>> _ = lb.append("Hello").append(" world")
            >>> _ = lb.append_line(".br")
            >>> _ = lb.append("next")
            >>> lb.build()
            'Hello world\\n.br\\nnext\\n'

    """

    __slots__ = ("_lines", "_fragments")

    def __init__(self) -> None:
        """Initialize empty LineBuilder."""
        self._lines: list[str] = []
        self._fragments: list[str] = []

    @property
    def at_line_start(self) -> bool:
        """True when nothing has been appended to the open line."""
        return not self._fragments

    @property
    def last_line(self) -> str | None:
        """The last finished line, or None."""
        return self._lines[-1] if self._lines else None

    def append(self, s: str) -> LineBuilder:
        """Append a fragment to the open line.

        Args:
            s: Fragment (empty strings are skipped)

        Returns:
            self for method chaining
        """
        if s:
            self._fragments.append(s)
        return self

    def end_line(self) -> LineBuilder:
        """Finish the open line, if any."""
        if self._fragments:
            self._lines.append("".join(self._fragments))
            self._fragments.clear()
        return self

    def append_line(self, s: str = "") -> LineBuilder:
        """Finish the open line, then add s as a complete line of its own."""
        self.end_line()
        self._lines.append(s)
        return self

    def build(self) -> str:
        """Join all lines into the final string, newline-terminated."""
        lines = list(self._lines)
        if self._fragments:
            lines.append("".join(self._fragments))
        if not lines:
            return ""
        return "\n".join(lines) + "\n"

    def __len__(self) -> int:
        """Return number of lines, counting an open line."""
        return len(self._lines) + (1 if self._fragments else 0)

    def __bool__(self) -> bool:
        return bool(self._lines or self._fragments)
