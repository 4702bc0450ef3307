"""Line classifiers for the manforge tokenizer.

Each classifier is a mixin that inspects a single line without emitting
anything itself.
"""

from manforge.lexer.classifiers.indent import IndentClassifierMixin
from manforge.lexer.classifiers.marker import LINE_MARKERS, MarkerClassifierMixin

__all__ = [
    "IndentClassifierMixin",
    "LINE_MARKERS",
    "MarkerClassifierMixin",
]
