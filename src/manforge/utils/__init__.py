"""Utility modules for manforge.

Provides:
- text: escape_troff, escape_troff_arg for troff output
- logger: get_logger for logging
"""

from manforge.utils.logger import get_logger
from manforge.utils.text import escape_troff, escape_troff_arg, guard_control_line

__all__ = [
    "escape_troff",
    "escape_troff_arg",
    "get_logger",
    "guard_control_line",
]
