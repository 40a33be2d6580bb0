"""Line-classifying state-machine lexer.

Reads the source one line at a time, classifies the line, then commits.
Position only ever moves forward, so tokenizing is O(n) in the source size.

No regex in the hot path.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from quire.lexer.classifiers import (
    CommentClassifierMixin,
    FenceClassifierMixin,
    FootnoteClassifierMixin,
    HeadingClassifierMixin,
    HtmlClassifierMixin,
    MathClassifierMixin,
    QuoteClassifierMixin,
)
from quire.lexer.modes import LexerMode
from quire.lexer.scanners import (
    BlockScannerMixin,
    FenceScannerMixin,
    HtmlScannerMixin,
    MathScannerMixin,
)
from quire.tokens import Token, TokenType
from quire.utils.logger import get_logger

logger = get_logger(__name__)


class Lexer(
    # Classifiers (pure logic on one line)
    HeadingClassifierMixin,
    FenceClassifierMixin,
    MathClassifierMixin,
    HtmlClassifierMixin,
    QuoteClassifierMixin,
    FootnoteClassifierMixin,
    CommentClassifierMixin,
    # Scanners (mode-specific scanning logic)
    BlockScannerMixin,
    FenceScannerMixin,
    MathScannerMixin,
    HtmlScannerMixin,
):
    """State-machine line classifier.

    Each step:
    1. Read the next line (find the newline, commit past it)
    2. Strip HTML comments when the mode allows it
    3. Classify what is left and emit tokens

    Besides the mode, the lexer keeps one line of lookbehind: whether the
    previous line was blank and whether a paragraph is currently open.
    Those two flags implement the heading guard and lazy continuation.

    Usage:
            >>> lexer = Lexer("# Hello\\n\\nWorld")
            >>> for token in lexer.tokenize():
            ...     print(token)
        Token(ATX_HEADING, 'Hello', 1)
        Token(BLANK_LINE, '', 2)
        Token(PARAGRAPH_LINE, 'World', 3)
        Token(EOF, '', 3)

    """

    __slots__ = (
        "_source",
        "_source_len",
        "_pos",
        "_lineno",
        "_mode",
        "_source_file",
        # Fence state
        "_fence_char",
        "_fence_count",
        # Lookbehind
        "_previous_line_blank",
        "_paragraph_open",
        # Comment state (spans lines)
        "_in_comment",
    )

    def __init__(
        self,
        source: str,
        source_file: str | None = None,
        *,
        first_lineno: int = 1,
    ) -> None:
        """Initialize lexer with source text.

        Args:
            source: Markdown source text
            source_file: Optional source file path for locations
            first_lineno: Line number of the first line; block quote
                sub-lexers pass the line the quote starts on
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._lineno = first_lineno
        self._mode = LexerMode.BLOCK
        self._source_file = source_file

        self._fence_char: str = ""
        self._fence_count: int = 0

        # Start of document (or of the enclosing block) behaves like a blank line
        self._previous_line_blank: bool = True
        self._paragraph_open: bool = False

        self._in_comment: bool = False

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into token stream.

        Yields:
            Token objects one at a time, ending with exactly one EOF

        Complexity: O(n) where n = len(source)
        """
        while self._pos < self._source_len:
            yield from self._dispatch_mode()

        if self._in_comment:
            logger.debug("Unterminated HTML comment discarded to end of input")
        if self._mode in (LexerMode.CODE_FENCE, LexerMode.MATH_BLOCK):
            logger.debug("Input ended inside %s; closing implicitly", self._mode.name)

        yield self._make_token(TokenType.EOF, "", max(self._lineno - 1, 1))

    def _dispatch_mode(self) -> Iterator[Token]:
        """Dispatch to appropriate scanner based on current mode."""
        if self._mode == LexerMode.BLOCK:
            yield from self._scan_block()
        elif self._mode == LexerMode.CODE_FENCE:
            yield from self._scan_code_fence_content()
        elif self._mode == LexerMode.MATH_BLOCK:
            yield from self._scan_math_block_content()
        elif self._mode == LexerMode.HTML_BLOCK:
            yield from self._scan_html_block_content()

    # =========================================================================
    # Line navigation helpers
    # =========================================================================

    def _read_line(self) -> tuple[str, int]:
        """Read the current line and commit past its newline.

        A trailing carriage return belongs to the line boundary and is
        dropped.

        Returns:
            (line, lineno) for the line just read.
        """
        start = self._pos
        end = self._source.find("\n", start)
        if end == -1:
            end = self._source_len
            self._pos = end
        else:
            self._pos = end + 1

        lineno = self._lineno
        self._lineno += 1

        line = self._source[start:end]
        if line.endswith("\r"):
            line = line[:-1]
        return line, lineno

    def _calc_indent(self, line: str) -> tuple[int, int]:
        """Calculate indent level and content start position.

        Spaces count as 1, tabs expand to next multiple of 4.

        Args:
            line: Line content

        Returns:
            (indent_spaces, content_start_index)
        """
        indent = 0
        pos = 0
        line_len = len(line)
        while pos < line_len:
            char = line[pos]
            if char == " ":
                indent += 1
                pos += 1
            elif char == "\t":
                indent += 4 - (indent % 4)
                pos += 1
            else:
                break
        return indent, pos

    # =========================================================================
    # Token creation
    # =========================================================================

    def _make_token(
        self,
        token_type: TokenType,
        value: str,
        lineno: int,
        *,
        line_indent: int = 0,
        depth: int = 0,
        label: str | None = None,
    ) -> Token:
        """Create a Token for the given line."""
        return Token(
            type=token_type,
            value=value,
            _lineno=lineno,
            line_indent=line_indent,
            depth=depth,
            label=label,
            _source_file=self._source_file,
        )

    def _track(self, token: Token) -> Token:
        """Update the one-line lookbehind for a token emitted in block mode."""
        if token.type == TokenType.BLANK_LINE:
            self._previous_line_blank = True
            self._paragraph_open = False
        elif token.type == TokenType.PARAGRAPH_LINE:
            self._previous_line_blank = False
            self._paragraph_open = True
        else:
            self._previous_line_blank = False
            self._paragraph_open = False
        return token
