"""Block mode scanner mixin."""

from __future__ import annotations

from collections.abc import Generator, Iterator

from quire.lexer.modes import (
    FENCE_CHARS,
    MATH_OPEN,
    MAX_BLOCK_INDENT,
    MIN_QUOTE_MARKERS,
    QUOTE_MARKER,
)
from quire.tokens import Token, TokenType


class BlockScannerMixin:
    """Mixin providing block mode scanning logic.

    Scans for block-level elements one line at a time:
    1. Read the line and commit past it (always advances)
    2. Strip HTML comments (quote lines are left to the quote's sub-lexer)
    3. Classify what is left (pure logic plus the one-line lookbehind)

    """

    # These will be set by the Lexer class or other mixins
    _paragraph_open: bool
    _in_comment: bool

    def _read_line(self) -> tuple[str, int]:
        """Read the current line. Implemented by Lexer."""
        raise NotImplementedError

    def _calc_indent(self, line: str) -> tuple[int, int]:
        """Calculate indent level and content start position."""
        raise NotImplementedError

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
        """Create a token. Implemented by Lexer."""
        raise NotImplementedError

    def _track(self, token: Token) -> Token:
        """Update the lookbehind. Implemented by Lexer."""
        raise NotImplementedError

    # Classifier methods (provided by classifier mixins)
    def _strip_comments(self, line: str, lineno: int) -> Generator[Token, None, str | None]:
        raise NotImplementedError

    def _try_classify_atx_heading(
        self, content: str, lineno: int, indent: int = 0
    ) -> Token | None:
        raise NotImplementedError

    def _try_classify_fence_start(
        self, content: str, lineno: int, indent: int = 0
    ) -> Token | None:
        raise NotImplementedError

    def _try_classify_math_block_start(
        self, content: str, lineno: int, indent: int = 0
    ) -> list[Token] | None:
        raise NotImplementedError

    def _try_classify_html_block_start(
        self, content: str, lineno: int, full_line: str, indent: int = 0
    ) -> Token | None:
        raise NotImplementedError

    def _try_classify_block_quote(
        self, content: str, lineno: int, indent: int = 0
    ) -> Token | None:
        raise NotImplementedError

    def _try_classify_footnote_def(
        self, content: str, lineno: int, indent: int = 0
    ) -> Token | None:
        raise NotImplementedError

    def _scan_block(self) -> Iterator[Token]:
        """Scan one line in block mode."""
        line, lineno = self._read_line()

        if self._is_quote_line(line):
            # Comments are left to the quote's sub-lexer, which knows
            # whether the line sits in a quoted fence or math block
            text = line
        else:
            stripped = yield from self._strip_comments(line, lineno)
            if stripped is None:
                # Comment-only line: markers only, lookbehind unchanged
                return
            text = stripped

        for token in self._classify_line(text, lineno):
            yield self._track(token)

    def _is_quote_line(self, line: str) -> bool:
        """True when the raw line will classify as a block quote marker."""
        if self._in_comment or self._paragraph_open:
            return False
        indent, content_start = self._calc_indent(line)
        if indent > MAX_BLOCK_INDENT:
            return False
        return line.startswith(QUOTE_MARKER * MIN_QUOTE_MARKERS, content_start)

    def _classify_line(self, line: str, lineno: int) -> Iterator[Token]:
        """Classify a line (comment-free unless it is a quote line).

        Order matters: blank, lazy continuation, heading, fence, math,
        HTML, quote, footnote definition, paragraph.
        """
        indent, content_start = self._calc_indent(line)
        content = line[content_start:]

        if not content or content.isspace():
            yield self._make_token(TokenType.BLANK_LINE, "", lineno)
            return

        # An open paragraph swallows every non-blank line. Deep indent
        # never starts a block either.
        if self._paragraph_open or indent > MAX_BLOCK_INDENT:
            yield self._make_token(
                TokenType.PARAGRAPH_LINE, content.rstrip(), lineno, line_indent=indent
            )
            return

        first = content[0]

        if first == "#":
            token = self._try_classify_atx_heading(content, lineno, indent)
            if token is not None:
                yield token
                return

        if first in FENCE_CHARS:
            token = self._try_classify_fence_start(content, lineno, indent)
            if token is not None:
                yield token
                return

        if content.startswith(MATH_OPEN):
            math_tokens = self._try_classify_math_block_start(content, lineno, indent)
            if math_tokens is not None:
                yield from math_tokens
                return

        if first == "<":
            token = self._try_classify_html_block_start(content, lineno, line, indent)
            if token is not None:
                yield token
                return

        if first == QUOTE_MARKER:
            token = self._try_classify_block_quote(content, lineno, indent)
            if token is not None:
                yield token
                return

        if first == "[":
            token = self._try_classify_footnote_def(content, lineno, indent)
            if token is not None:
                yield token
                return

        yield self._make_token(
            TokenType.PARAGRAPH_LINE, content.rstrip(), lineno, line_indent=indent
        )
