"""Content scanners for the manforge tokenizer."""

from manforge.lexer.scanners.inline import INLINE_DELIMITERS, InlineScannerMixin

__all__ = ["INLINE_DELIMITERS", "InlineScannerMixin"]
