"""Tests for manforge utility modules."""

import logging


class TestEscapeTroff:
    """Tests for troff escaping."""

    def test_hyphens(self) -> None:
        from manforge.utils.text import escape_troff

        assert escape_troff("--verbose") == "\\-\\-verbose"

    def test_backslash_first(self) -> None:
        from manforge.utils.text import escape_troff

        assert escape_troff("a\\-b") == "a\\e\\-b"

    def test_empty_string(self) -> None:
        from manforge.utils.text import escape_troff

        assert escape_troff("") == ""

    def test_plain_text_unchanged(self) -> None:
        from manforge.utils.text import escape_troff

        assert escape_troff("hello world") == "hello world"

    def test_argument_quotes(self) -> None:
        from manforge.utils.text import escape_troff_arg

        assert escape_troff_arg('say "hi"') == "say \\(dqhi\\(dq"


class TestGuardControlLine:
    def test_period(self) -> None:
        from manforge.utils.text import guard_control_line

        assert guard_control_line(".TH") == "\\&.TH"

    def test_apostrophe(self) -> None:
        from manforge.utils.text import guard_control_line

        assert guard_control_line("'quoted") == "\\&'quoted"

    def test_ordinary_line(self) -> None:
        from manforge.utils.text import guard_control_line

        assert guard_control_line("a.b") == "a.b"


class TestGetLogger:
    def test_prefix_added(self) -> None:
        from manforge.utils.logger import get_logger

        assert get_logger("mymodule").name == "manforge.mymodule"

    def test_prefix_not_doubled(self) -> None:
        from manforge.utils.logger import get_logger

        assert get_logger("manforge.lexer.core").name == "manforge.lexer.core"
        assert get_logger("manforge").name == "manforge"

    def test_returns_stdlib_logger(self) -> None:
        from manforge.utils.logger import get_logger

        assert isinstance(get_logger("x"), logging.Logger)

    def test_tokenizer_logs_at_debug(self, caplog) -> None:
        from manforge import tokenize

        with caplog.at_level(logging.DEBUG, logger="manforge"):
            tokenize("a\nb")
        assert "Tokenized 2 lines into 4 tokens" in caplog.text
