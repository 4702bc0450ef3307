"""manforge renderers.

A renderer translates the tree walk into formatting calls; the writer it
wraps accumulates and serializes the formatted document.

Available Formats:
- troff: TroffRenderer + TroffWriter (man pages)
- plain: PlainRenderer + PlainWriter (terminal text)

Thread Safety:
Writers accumulate per-document state. Use one renderer/writer pair per
document.

"""

from __future__ import annotations

from collections.abc import Callable

from manforge.errors import RenderError
from manforge.renderers.base import WriterRenderer
from manforge.renderers.plain import PlainRenderer, PlainWriter
from manforge.renderers.protocol import Renderer, Writer
from manforge.renderers.troff import TroffRenderer, TroffWriter
from manforge.renderers.walker import render, save

# Output format name -> (writer factory, renderer factory)
FORMATS: dict[str, tuple[Callable[[], Writer], Callable[[Writer], Renderer]]] = {
    "troff": (TroffWriter, TroffRenderer),
    "plain": (PlainWriter, PlainRenderer),
}


def create_output(output_format: str) -> tuple[Renderer, Writer]:
    """Create a fresh (renderer, writer) pair for an output format.

    Raises:
        RenderError: Unknown format name
    """
    try:
        writer_factory, renderer_factory = FORMATS[output_format]
    except KeyError:
        available = ", ".join(sorted(FORMATS))
        raise RenderError(
            f"Unknown output format {output_format!r}. Available: {available}"
        ) from None
    writer = writer_factory()
    return renderer_factory(writer), writer


__all__ = [
    "FORMATS",
    "PlainRenderer",
    "PlainWriter",
    "Renderer",
    "TroffRenderer",
    "TroffWriter",
    "Writer",
    "WriterRenderer",
    "create_output",
    "render",
    "save",
]
