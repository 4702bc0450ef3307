"""Manual page assembly.

Builds a complete page (title, date, Name, Synopsis and Options sections)
from a command's documentation string and option descriptions. Where those
strings come from (source files, argument parsers) is up to the caller.

Example:
    >>> from manforge.manpage import CommandDoc, Option, render_manpage
    >>> page = render_manpage(CommandDoc(
    ...     name="greet",
    ...     doc="greet - say hello",
    ...     options=(Option("loud", short="l", usage="Shout the *greeting*"),),
    ... ))
    >>> page.splitlines()[0]
    '.TH "GREET" "1" ""'

"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import BinaryIO

from manforge.config import get_parse_config
from manforge.errors import ParseError
from manforge.lexer import Tokenizer
from manforge.parser import Parser
from manforge.renderers import create_output, render, save
from manforge.tokens import Token, TokenType, tokens_of
from manforge.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Option:
    """A command-line option as documented on the page.

    Attributes:
        name: Long option name without dashes
        short: Single-letter alias without dash (optional)
        type: Value type name; "bool" options take no value
        usage: Short usage string
        doc: Longer description; preferred over usage when present

    """

    name: str
    short: str = ""
    type: str = "bool"
    usage: str = ""
    doc: str = ""

    @property
    def flags(self) -> str:
        """Option spelling, e.g. ``-v, --verbose``."""
        if self.short:
            return f"-{self.short}, --{self.name}"
        return f"--{self.name}"

    @property
    def metavar(self) -> str:
        """Value placeholder such as ``<string>``; empty for bool options."""
        if self.type.lower() == "bool":
            return ""
        return f"<{self.type.lower()}>"

    @property
    def description(self) -> str:
        return self.doc or self.usage


@dataclass(frozen=True, slots=True)
class CommandDoc:
    """Everything needed to write one manual page."""

    name: str
    doc: str = ""
    options: tuple[Option, ...] = ()
    date: date | None = None
    section: int = 1


def _collapse(text: str) -> str:
    return " ".join(text.split())


class ManPageBuilder:
    """Assemble a manual page with one renderer/writer pair.

    Usage:
        builder = ManPageBuilder("troff")
        builder.load(command)
        with open("greet.1", "wb") as stream:
            builder.save(stream)

    Thread Safety:
        Builders accumulate per-page state. Use one builder per page.

    """

    __slots__ = ("output_format", "renderer", "writer", "_parser")

    def __init__(self, output_format: str = "troff") -> None:
        """Create a builder.

        Raises:
            RenderError: Unknown output format
        """
        self.output_format = output_format
        self.renderer, self.writer = create_output(output_format)
        self._parser = Parser()

    def load(self, command: CommandDoc) -> None:
        """Write the whole page for command."""
        self.writer.write_title(command.name, command.section)
        if command.date is not None:
            self.writer.write_date(command.date)
        self._feed_documentation(command)
        self._feed_synopsis(command)
        self._feed_options(command)

    def _feed_documentation(self, command: CommandDoc) -> None:
        self.renderer.section("Name")
        if get_parse_config().plain_text:
            self.renderer.text(_collapse(command.doc))
            return

        try:
            tokens = Tokenizer(command.doc, source_name=command.name).tokenize()
        except ParseError as e:
            # Nothing has been written for the doc yet; fall back to verbatim.
            logger.warning("Rendering documentation of %r verbatim: %s", command.name, e)
            self.renderer.text(_collapse(command.doc))
            return

        render(self.renderer, self._parser.parse(tokens))

    def _feed_synopsis(self, command: CommandDoc) -> None:
        self.renderer.section("Synopsis")
        self.renderer.text(command.name)
        if command.options:
            self.renderer.space()
            self.renderer.text_underline("[option...]")
        self.renderer.space()
        self.renderer.text_underline("[argument...]")
        self.renderer.paragraph_break()

    def _feed_options(self, command: CommandDoc) -> None:
        if not command.options:
            return

        self.renderer.section("Options")
        for option in command.options:
            try:
                tokens = self._option_tokens(option)
            except ParseError as e:
                # Nothing has been written for this option yet, so skip it.
                logger.warning("Skipping option %s of %r: %s", option.flags, command.name, e)
                continue

            self.renderer.text_bold(option.flags)
            if option.metavar:
                self.renderer.space()
                self.renderer.text(option.metavar)
            if tokens:
                self.renderer.indent()
                render(self.renderer, self._parser.parse_part(tokens))
                self.renderer.dedent()
            self.renderer.paragraph_break()

    def _option_tokens(self, option: Option) -> list[Token]:
        text = option.description
        if not text.strip():
            return []
        if get_parse_config().plain_text:
            return tokens_of(TokenType.INDENT, (TokenType.TEXT, _collapse(text)), TokenType.EOL)
        return Tokenizer(text, source_name=option.flags).tokenize()

    def build(self) -> str:
        """Return the rendered page."""
        return self.writer.build()

    def save(self, stream: BinaryIO) -> None:
        """Write the rendered page to a binary stream.

        Errors raised by the stream propagate unchanged.
        """
        save(self.writer, stream)


def render_manpage(command: CommandDoc, output_format: str = "troff") -> str:
    """Build a page for command and return it as text."""
    builder = ManPageBuilder(output_format)
    builder.load(command)
    return builder.build()
