"""Parsing building blocks for manforge.

- `LineGroup`, `split_lines`: regroup the token stream into lines
- `TreeBuildingMixin`: insertion point and group open/close
- `InlineParsingMixin`: inline token consumption
"""

from manforge.parsing.inline import InlineParsingMixin
from manforge.parsing.line_group import LineGroup, split_lines
from manforge.parsing.tree import PendingAction, TreeBuildingMixin

__all__ = [
    "InlineParsingMixin",
    "LineGroup",
    "PendingAction",
    "TreeBuildingMixin",
    "split_lines",
]
