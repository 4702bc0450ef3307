"""Text escaping utilities for manforge output formats.

Example:
    >>> from manforge.utils.text import escape_troff
    >>> escape_troff("--verbose")
    '\\\\-\\\\-verbose'
"""

from __future__ import annotations

# Order matters: backslash first so later replacements are not re-escaped.
_TROFF_ESCAPES: tuple[tuple[str, str], ...] = (
    ("\\", "\\e"),
    ("-", "\\-"),
)

# Characters that turn a line into a troff control line.
TROFF_CONTROL_CHARS = (".", "'")


def escape_troff(text: str) -> str:
    """Escape characters that troff would interpret in running text.

    Backslashes become ``\\e`` and hyphens become ``\\-`` so option names
    render as minus signs and copy-paste correctly.

    Args:
        text: Raw text

    Returns:
        Text safe to place inside a troff text line.
    """
    if not text:
        return ""
    for raw, escaped in _TROFF_ESCAPES:
        text = text.replace(raw, escaped)
    return text


def escape_troff_arg(text: str) -> str:
    """Escape text for use as a double-quoted troff macro argument.

    Example:
        >>> escape_troff_arg('say "hi"')
        'say \\\\(dqhi\\\\(dq'
    """
    return escape_troff(text).replace('"', "\\(dq")


def guard_control_line(line: str) -> str:
    """Prefix a zero-width escape when a text line would read as a request."""
    if line.startswith(TROFF_CONTROL_CHARS):
        return "\\&" + line
    return line
