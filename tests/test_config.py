"""Tests for ContextVar-based parse configuration.

Validates thread isolation, context manager behavior, and how the
tokenizer and page builder read the active config.
"""

from collections.abc import Iterator
from threading import Thread

import pytest

from manforge import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
    tokenize,
)
from manforge.errors import IndentMismatchError


@pytest.fixture(autouse=True)
def _default_config() -> Iterator[None]:
    reset_parse_config()
    yield
    reset_parse_config()


class TestParseConfigDataclass:
    """Test ParseConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = ParseConfig()
        assert config.indent_width == 4
        assert config.plain_text is False
        assert config.source_name is None

    def test_immutability(self) -> None:
        config = ParseConfig()
        with pytest.raises(AttributeError):
            config.indent_width = 2  # type: ignore[misc]

    @pytest.mark.parametrize("width", [0, -4])
    def test_invalid_indent_width(self, width: int) -> None:
        with pytest.raises(ValueError, match="indent_width must be >= 1"):
            ParseConfig(indent_width=width)

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = ParseConfig.from_dict({"indent_width": 2, "plain_text": True, "colour": "red"})
        assert config == ParseConfig(indent_width=2, plain_text=True)

    def test_from_dict_empty(self) -> None:
        assert ParseConfig.from_dict({}) == ParseConfig()


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def test_default(self) -> None:
        assert get_parse_config() == ParseConfig()

    def test_set_and_reset(self) -> None:
        set_parse_config(ParseConfig(indent_width=2))
        assert get_parse_config().indent_width == 2
        reset_parse_config()
        assert get_parse_config().indent_width == 4

    def test_context_manager_restores(self) -> None:
        outer = ParseConfig(source_name="outer")
        set_parse_config(outer)
        with parse_config_context(ParseConfig(source_name="inner")):
            assert get_parse_config().source_name == "inner"
        assert get_parse_config() is outer

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with parse_config_context(ParseConfig(plain_text=True)):
                raise RuntimeError("boom")
        assert get_parse_config().plain_text is False


class TestThreadIsolation:
    def test_threads_do_not_share_config(self) -> None:
        seen: dict[str, int] = {}

        def worker() -> None:
            seen["before"] = get_parse_config().indent_width
            set_parse_config(ParseConfig(indent_width=8))
            seen["after"] = get_parse_config().indent_width

        set_parse_config(ParseConfig(indent_width=2))
        thread = Thread(target=worker)
        thread.start()
        thread.join()

        assert seen == {"before": 4, "after": 8}
        assert get_parse_config().indent_width == 2


class TestTokenizerReadsConfig:
    def test_indent_width(self) -> None:
        with parse_config_context(ParseConfig(indent_width=2)):
            assert len(tokenize("  a")) == 3
        with pytest.raises(IndentMismatchError):
            tokenize("  a")

    def test_source_name(self) -> None:
        with parse_config_context(ParseConfig(source_name="greet")):
            with pytest.raises(IndentMismatchError, match="^greet:1:3 "):
                tokenize("  a")
