"""Block assembler producing a typed AST.

Consumes the token stream from Lexer and builds immutable block nodes,
scanning headings, paragraphs and footnote bodies for inlines as it goes.

Architecture:
The parser uses a mixin-based design for separation of concerns:
- `TokenNavigationMixin`: Token stream traversal
- `InlineParsingMixin`: Inline content (emphasis, links, code, math)
- `BlockParsingMixin`: Block-level content (paragraphs, quotes, code blocks)

Thread Safety:
- Parser produces immutable AST (frozen dataclasses)
- Configuration is read from ContextVar (thread-local)
- Safe to share AST across threads

"""

from __future__ import annotations

from quire.config import ParseConfig, get_parse_config
from quire.diagnostics import DiagnosticSink
from quire.footnotes import FootnoteTable
from quire.lexer import Lexer
from quire.nodes import Block
from quire.parsing import (
    BlockParsingMixin,
    InlineParsingMixin,
    TokenNavigationMixin,
)
from quire.tokens import Token


class Parser(
    TokenNavigationMixin,
    InlineParsingMixin,
    BlockParsingMixin,
):
    """Single-pass block assembler with one token of lookahead.

    Footnote definitions are registered into a FootnoteTable instead of
    being returned as blocks. Block quote content is parsed by a sub-parser
    that shares the table and the diagnostics sink, so definitions and
    diagnostics from any depth end up in one place.

    Usage:
            >>> parser = Parser("# Hello\\n\\nWorld")
            >>> blocks = parser.parse()
            >>> blocks[0]
        Heading(level=1, children=(Text(content='Hello'),), ...)

    Thread Safety:
        Parser instances are single-use and not thread-safe. Create one per
        parse operation. Configuration is read from ContextVar (thread-local).
        The resulting AST is immutable and thread-safe.

    """

    __slots__ = (
        "_source",
        "_tokens",
        "_tokens_len",
        "_pos",
        "_current",
        "_source_file",
        "_first_lineno",
        # Document-wide state, shared with sub-parsers
        "_footnotes",
        "_sink",
    )

    def __init__(
        self,
        source: str,
        source_file: str | None = None,
        *,
        first_lineno: int = 1,
        footnotes: FootnoteTable | None = None,
        sink: DiagnosticSink | None = None,
    ) -> None:
        """Initialize parser with source text.

        Configuration is read from ContextVar, not passed as parameters.
        Use set_parse_config() or parse_config_context() before creating
        a Parser if you need non-default configuration.

        Args:
            source: Markdown source text
            source_file: Optional source file path for locations
            first_lineno: Line number of the first source line
            footnotes: Footnote table to register into (a new one by default)
            sink: Diagnostics sink (a new one by default)

        """
        self._source = source
        self._source_file = source_file
        self._first_lineno = first_lineno
        self._tokens: list[Token] = []
        self._tokens_len = 0
        self._pos = 0
        self._current: Token | None = None

        self._sink = sink if sink is not None else DiagnosticSink()
        self._footnotes = footnotes if footnotes is not None else FootnoteTable(self._sink)

    @property
    def _config(self) -> ParseConfig:
        """Get current parse configuration (thread-local)."""
        return get_parse_config()

    @property
    def footnotes(self) -> FootnoteTable:
        """Definitions registered so far."""
        return self._footnotes

    @property
    def sink(self) -> DiagnosticSink:
        """Diagnostics recorded so far."""
        return self._sink

    def parse(self) -> tuple[Block, ...]:
        """Parse source into AST blocks.

        Returns:
            Tuple of Block nodes (footnote definitions excluded)

        Thread Safety:
            Returns immutable AST (frozen dataclasses).
        """
        lexer = Lexer(self._source, self._source_file, first_lineno=self._first_lineno)
        self._tokens = list(lexer.tokenize())
        self._tokens_len = len(self._tokens)
        self._pos = 0
        self._current = self._tokens[0] if self._tokens else None

        blocks: list[Block] = []
        while not self._at_end():
            block = self._parse_block()
            if block is not None:
                blocks.append(block)

        return tuple(blocks)

    def _parse_nested_content(self, content: str, first_lineno: int) -> tuple[Block, ...]:
        """Parse nested content as blocks (for block quotes).

        Creates a sub-parser to handle nested block-level content.
        Configuration is inherited via ContextVar; footnotes and diagnostics
        are shared so they stay document-wide.

        Args:
            content: The text to parse as blocks
            first_lineno: Outer line number of the first line of content

        Returns:
            Tuple of Block nodes

        """
        if not content.strip():
            return ()

        sub_parser = Parser(
            content,
            self._source_file,
            first_lineno=first_lineno,
            footnotes=self._footnotes,
            sink=self._sink,
        )
        return sub_parser.parse()
