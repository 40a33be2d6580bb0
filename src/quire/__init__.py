"""
Quire: a small Markdown-like parser for blog posts.

Turns post source into an immutable, typed document tree with a resolved
footnote table. Code, math and raw HTML pass through verbatim; HTML
comments are stripped before anything else sees them. Zero runtime
dependencies.

Quick Start:
    >>> from quire import parse
    >>> result = parse("# Hello\\n\\nA claim.[^1]\\n\\n[^1]: The source.")
    >>> result.document.children[0].level
    1
    >>> result.ok
    True

    >>> # Or use the high-level Markdown class with your own renderer
    >>> from quire import Markdown
    >>> md = Markdown(renderer=my_renderer)
    >>> html = md("# Hello *World*")

Syntax summary:
    # Heading            (only after a blank line or at the start)
    >> quote             (two or more >; the count is the quote width)
    ```lang ... ```      (verbatim code)
    \\[ ... \\]            (verbatim display math), $x$ inline math
    *bold* _italic_ `code` [text](url) ![alt](src){30}
    [^label] / [^label]: footnote reference / definition
"""

from collections.abc import Iterable

from quire.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from quire.diagnostics import Diagnostic, DiagnosticKind, DiagnosticSink
from quire.errors import ConfigError, InvalidInputError, QuireError
from quire.footnotes import FootnoteTable, resolve_footnotes
from quire.lexer import Lexer
from quire.location import SourceLocation
from quire.nodes import (
    Block,
    BlockQuote,
    CodeBlock,
    CodeSpan,
    Document,
    Emphasis,
    EscapedLiteral,
    FootnoteDefinition,
    FootnoteReference,
    Heading,
    HtmlBlock,
    Image,
    Inline,
    Link,
    MathBlock,
    MathSpan,
    Paragraph,
    Text,
)
from quire.parser import Parser
from quire.renderers.protocol import DocumentRenderer
from quire.result import ParseResult
from quire.serialization import from_dict, from_json, to_dict, to_json
from quire.tokens import Token, TokenType
from quire.utils.logger import get_logger
from quire.visitor import BaseVisitor, transform

__version__ = "0.1.0"

logger = get_logger(__name__)


def _check_source(source: object, source_file: str | None) -> str:
    if source is None:
        raise InvalidInputError("source must be a string, got None", source_file)
    if not isinstance(source, str):
        raise InvalidInputError(
            f"source must be a string, got {type(source).__name__}", source_file
        )
    return source


def _parse_document(source: str, source_file: str | None) -> ParseResult:
    """Run both passes under the config already set in this context."""
    sink = DiagnosticSink()
    table = FootnoteTable(sink)
    parser = Parser(source, source_file, footnotes=table, sink=sink)
    blocks = parser.parse()

    resolve_footnotes(blocks, table, sink)

    doc = Document(
        location=SourceLocation(lineno=1, col_offset=1, source_file=source_file),
        children=blocks,
        footnotes=table.definitions(),
    )
    if sink.diagnostics:
        logger.debug("%s: %d diagnostic(s)", source_file or "<string>", len(sink))
    return ParseResult(document=doc, diagnostics=sink.freeze())


def parse(
    source: str,
    *,
    source_file: str | None = None,
    config: ParseConfig | None = None,
) -> ParseResult:
    """Parse post source into a Document plus diagnostics.

    Args:
        source: Post source text
        source_file: Optional source file path for locations and messages
        config: Parse configuration. When omitted, the configuration active
            in the current context is used (the defaults unless a caller
            set one with parse_config_context()).

    Returns:
        ParseResult with the Document and any diagnostics

    Raises:
        InvalidInputError: If source is None or not a string

    Example:
        >>> result = parse("See [^a].\\n\\n[^a]: Here.")
        >>> result.document.footnote("a").children[0].content
        'Here.'
    """
    source = _check_source(source, source_file)
    with parse_config_context(config if config is not None else get_parse_config()):
        return _parse_document(source, source_file)


class Markdown:
    """High-level processor combining the parser with a caller's renderer.

    Usage:
        >>> md = Markdown(renderer=my_renderer, footnote_continuation=True)
        >>> output = md("# Hello *World*")

        >>> # Access the tree
        >>> result = md.parse("# Heading")
        >>> result.document.children[0].level
        1

    Thread Safety:
        Uses ContextVar for thread-local configuration. Safe to use multiple
        Markdown instances concurrently from different threads.

    """

    __slots__ = ("_config", "_renderer")

    def __init__(
        self,
        renderer: DocumentRenderer | None = None,
        *,
        duplicate_footnotes: str = "last",
        footnote_continuation: bool = False,
        preserve_escapes: bool = False,
        image_attribute_key: str = "width",
    ) -> None:
        """Initialize Markdown processor.

        Args:
            renderer: Object with ``render(document) -> str``. Needed only
                for render() and calling the instance.
            duplicate_footnotes: "last" or "first"
            footnote_continuation: Append indented lines to footnote bodies
            preserve_escapes: Keep backslash escapes as EscapedLiteral nodes
            image_attribute_key: Attribute name for ``{token}`` after images

        Raises:
            ConfigError: If an option value is invalid
        """
        self._renderer = renderer

        # Build immutable config once (thread-safe, reused across calls)
        self._config = ParseConfig(
            duplicate_footnotes=duplicate_footnotes,  # type: ignore[arg-type]
            footnote_continuation=footnote_continuation,
            preserve_escapes=preserve_escapes,
            image_attribute_key=image_attribute_key,
        )

    @property
    def config(self) -> ParseConfig:
        return self._config

    def __call__(self, source: str) -> str:
        """Parse and render in one call."""
        return self.render(self.parse(source).document)

    def parse(self, source: str, *, source_file: str | None = None) -> ParseResult:
        """Parse source into a ParseResult using this instance's config."""
        return parse(source, source_file=source_file, config=self._config)

    def parse_many(
        self,
        sources: Iterable[str],
        *,
        source_file: str | None = None,
    ) -> list[ParseResult]:
        """Parse multiple sources.

        Sets config once, parses all, restores once.

        Example:
            >>> md = Markdown()
            >>> results = md.parse_many(["# Post 1", "# Post 2"])
        """
        with parse_config_context(self._config):
            return [
                _parse_document(_check_source(source, source_file), source_file)
                for source in sources
            ]

    def render(self, document: Document) -> str:
        """Render a parsed document with the configured renderer.

        Raises:
            QuireError: If no renderer was given
        """
        if self._renderer is None:
            raise QuireError("Markdown.render() needs a renderer; pass renderer=...")
        return self._renderer.render(document)


__all__ = [
    # Main API
    "parse",
    "Markdown",
    "ParseResult",
    # Configuration
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Errors and diagnostics
    "QuireError",
    "InvalidInputError",
    "ConfigError",
    "Diagnostic",
    "DiagnosticKind",
    "DiagnosticSink",
    # Low-level
    "Lexer",
    "Parser",
    "Token",
    "TokenType",
    "SourceLocation",
    "FootnoteTable",
    "resolve_footnotes",
    # Nodes
    "Block",
    "Inline",
    "Document",
    "Heading",
    "Paragraph",
    "CodeBlock",
    "MathBlock",
    "HtmlBlock",
    "BlockQuote",
    "FootnoteDefinition",
    "Text",
    "Emphasis",
    "CodeSpan",
    "MathSpan",
    "Link",
    "Image",
    "FootnoteReference",
    "EscapedLiteral",
    # Tree utilities
    "BaseVisitor",
    "transform",
    "DocumentRenderer",
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
]
