"""ContextVar-based parse configuration for manforge.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is set once per document build, read by the tokenizer and the
manual page builder.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from manforge.config import ParseConfig, parse_config_context

    with parse_config_context(ParseConfig(indent_width=2)):
        tokens = tokenize(text)

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Attributes:
        indent_width: Number of spaces forming one indentation unit (a tab
            is always one unit)
        plain_text: Treat documentation strings as plain text instead of markup
        source_name: Optional name reported in error locations

    """

    indent_width: int = 4
    plain_text: bool = False
    source_name: str | None = None

    def __post_init__(self) -> None:
        if self.indent_width < 1:
            raise ValueError(f"indent_width must be >= 1, got {self.indent_width}")

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ParseConfig":
        """Create ParseConfig from dictionary.

        Only includes keys that are valid ParseConfig fields; unknown keys
        are ignored.

        Example:
            >>> ParseConfig.from_dict({"indent_width": 2, "other": 1}).indent_width
            2

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "manforge_parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (thread-local)."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for current context.

    Only affects the current thread's context.
    """
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to default configuration."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with parse_config_context(ParseConfig(plain_text=True)):
        ...     get_parse_config().plain_text
        True

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]
