"""Tests for the line-oriented tokenizer."""

import pytest

from manforge.config import ParseConfig, parse_config_context
from manforge.errors import (
    EndOfInputError,
    IndentMismatchError,
    MalformedSyntaxError,
    ParseError,
)
from manforge.lexer import Tokenizer, tokenize
from manforge.tokens import Token, TokenType, tokens_of

T = TokenType


class TestLineStructure:
    """Every line ends in EOL; indentation becomes INDENT tokens."""

    def test_empty_source(self) -> None:
        assert tokenize("") == []

    def test_single_line(self) -> None:
        assert tokenize("hello") == tokens_of((T.TEXT, "hello"), T.EOL)

    def test_trailing_newline_adds_no_line(self) -> None:
        assert tokenize("hello\n") == tokens_of((T.TEXT, "hello"), T.EOL)

    def test_empty_line_is_bare_eol(self) -> None:
        assert tokenize("a\n\nb") == tokens_of(
            (T.TEXT, "a"), T.EOL, T.EOL, (T.TEXT, "b"), T.EOL
        )

    def test_whitespace_only_line_is_empty(self) -> None:
        """Odd whitespace on a blank line is not an indentation error."""
        assert tokenize("a\n   \nb") == tokens_of(
            (T.TEXT, "a"), T.EOL, T.EOL, (T.TEXT, "b"), T.EOL
        )

    def test_crlf_line_endings(self) -> None:
        assert tokenize("a\r\nb\r\n") == tokens_of((T.TEXT, "a"), T.EOL, (T.TEXT, "b"), T.EOL)

    def test_space_indentation(self) -> None:
        assert tokenize("    one\n        two") == tokens_of(
            T.INDENT, (T.TEXT, "one"), T.EOL, T.INDENT, T.INDENT, (T.TEXT, "two"), T.EOL
        )

    def test_tab_indentation(self) -> None:
        assert tokenize("\t\tdeep") == tokens_of(T.INDENT, T.INDENT, (T.TEXT, "deep"), T.EOL)

    def test_trailing_whitespace_dropped(self) -> None:
        assert tokenize("text   ") == tokens_of((T.TEXT, "text"), T.EOL)

    def test_indent_width_from_config(self) -> None:
        with parse_config_context(ParseConfig(indent_width=2)):
            tokens = tokenize("  a\n    b")
        assert tokens == tokens_of(
            T.INDENT, (T.TEXT, "a"), T.EOL, T.INDENT, T.INDENT, (T.TEXT, "b"), T.EOL
        )

    def test_indent_width_argument_overrides_config(self) -> None:
        tokens = Tokenizer("   a", indent_width=3).tokenize()
        assert tokens == tokens_of(T.INDENT, (T.TEXT, "a"), T.EOL)


class TestMarkers:
    """Section, list item and block item markers."""

    def test_section(self) -> None:
        assert tokenize("# Description") == tokens_of((T.SECTION, "Description"), T.EOL)

    def test_list_item(self) -> None:
        assert tokenize("- first item") == tokens_of((T.LIST_ITEM, "first item"), T.EOL)

    def test_block_item(self) -> None:
        assert tokenize("> quoted") == tokens_of((T.BLOCK_ITEM, "quoted"), T.EOL)

    def test_indented_list_item(self) -> None:
        assert tokenize("    - nested") == tokens_of(T.INDENT, (T.LIST_ITEM, "nested"), T.EOL)

    def test_payload_is_literal(self) -> None:
        """Marker payloads are not scanned for inline delimiters."""
        assert tokenize("- *fast* mode") == tokens_of((T.LIST_ITEM, "*fast* mode"), T.EOL)

    def test_payload_escapes_resolved(self) -> None:
        assert tokenize("# A \\* B") == tokens_of((T.SECTION, "A * B"), T.EOL)

    @pytest.mark.parametrize("source", ["-v enables verbose output", "#include", ">>> prompt"])
    def test_marker_without_space_is_text(self, source: str) -> None:
        assert tokenize(source) == tokens_of((T.TEXT, source), T.EOL)

    @pytest.mark.parametrize("source", ["#", "-", ">", "-   "])
    def test_marker_without_text_is_malformed(self, source: str) -> None:
        with pytest.raises(MalformedSyntaxError, match="marker without text"):
            tokenize(source)


class TestInline:
    """Text runs and single-character delimiters."""

    def test_bold_delimiters_emitted_individually(self) -> None:
        assert tokenize("a *b* c") == tokens_of(
            (T.TEXT, "a "), T.BOLD, (T.TEXT, "b"), T.BOLD, (T.TEXT, " c"), T.EOL
        )

    def test_underline_delimiters(self) -> None:
        assert tokenize("_path_") == tokens_of(
            T.UNDERLINE, (T.TEXT, "path"), T.UNDERLINE, T.EOL
        )

    def test_double_delimiters(self) -> None:
        assert tokenize("**x**") == tokens_of(
            T.BOLD, T.BOLD, (T.TEXT, "x"), T.BOLD, T.BOLD, T.EOL
        )

    def test_unmatched_delimiter_still_emitted(self) -> None:
        assert tokenize("*word") == tokens_of(T.BOLD, (T.TEXT, "word"), T.EOL)

    @pytest.mark.parametrize("source", ["snake_case_name", "2 * 3", "a _ b"])
    def test_intraword_and_isolated_delimiters_are_text(self, source: str) -> None:
        assert tokenize(source) == tokens_of((T.TEXT, source), T.EOL)

    def test_escaped_delimiters(self) -> None:
        assert tokenize("\\*not bold\\*") == tokens_of((T.TEXT, "*not bold*"), T.EOL)

    def test_escaped_marker(self) -> None:
        assert tokenize("\\- not a list") == tokens_of((T.TEXT, "- not a list"), T.EOL)

    def test_escaped_backslash(self) -> None:
        assert tokenize("C:\\\\dir") == tokens_of((T.TEXT, "C:\\dir"), T.EOL)


class TestErrors:
    """Each error kind with its location."""

    def test_unknown_escape(self) -> None:
        with pytest.raises(MalformedSyntaxError, match="unknown escape"):
            tokenize("a \\q")

    def test_escape_at_end_of_input(self) -> None:
        with pytest.raises(EndOfInputError):
            tokenize("first\nsecond\\")

    def test_escape_at_end_of_inner_line(self) -> None:
        with pytest.raises(MalformedSyntaxError, match="line ends"):
            tokenize("first\\\nsecond")

    def test_marker_payload_escape_at_end_of_input(self) -> None:
        with pytest.raises(EndOfInputError):
            tokenize("- item \\")

    def test_partial_indent_unit(self) -> None:
        with pytest.raises(IndentMismatchError, match="not a multiple of 4"):
            tokenize("  two spaces")

    def test_mixed_indent_on_one_line(self) -> None:
        with pytest.raises(IndentMismatchError, match="mixes tabs and spaces"):
            tokenize("\t    mixed")

    def test_mixed_indent_across_lines(self) -> None:
        with pytest.raises(IndentMismatchError, match="earlier lines use tabs"):
            tokenize("\ta\n    b")

    def test_error_location(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            tokenize("ok\nbad \\q")
        err = exc_info.value
        assert err.lineno == 2
        assert err.col_offset == 5
        assert "2:5" in str(err)

    def test_source_name_in_message(self) -> None:
        with pytest.raises(ParseError, match="greet.py:1:3"):
            tokenize("  x", source_name="greet.py")

    def test_source_name_from_config(self) -> None:
        with parse_config_context(ParseConfig(source_name="doc")):
            with pytest.raises(ParseError) as exc_info:
                tokenize("\\q")
        assert exc_info.value.source_file == "doc"


class TestCoordinates:
    """Tokens remember where they came from, without affecting equality."""

    def test_columns(self) -> None:
        tokens = tokenize("a *b*")
        assert [(t.type, t.col) for t in tokens[:3]] == [
            (T.TEXT, 1),
            (T.BOLD, 3),
            (T.TEXT, 4),
        ]

    def test_line_numbers(self) -> None:
        tokens = tokenize("a\n\nb")
        assert [t.lineno for t in tokens] == [1, 1, 2, 3, 3]

    def test_equality_ignores_coordinates(self) -> None:
        assert Token(T.TEXT, "a", 3, 7) == Token(T.TEXT, "a")

    def test_tokenizer_is_repeatable(self) -> None:
        tokenizer = Tokenizer("# A\n    b")
        assert tokenizer.tokenize() == tokenizer.tokenize()
