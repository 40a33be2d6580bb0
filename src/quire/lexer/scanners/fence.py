"""Fenced code mode scanner mixin."""

from collections.abc import Iterator

from quire.lexer.modes import LexerMode
from quire.tokens import Token, TokenType


class FenceScannerMixin:
    """Mixin providing fenced code mode scanning logic.

    Scans content inside fenced code blocks, detecting the closing fence.
    Content lines are verbatim: no comment stripping, no classification.

    """

    # These will be set by the Lexer class
    _mode: LexerMode
    _fence_char: str
    _fence_count: int

    def _read_line(self) -> tuple[str, int]:
        """Read the current line. Implemented by Lexer."""
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

    def _is_closing_fence(self, line: str) -> bool:
        """Check if line is a closing fence. Implemented by FenceClassifierMixin."""
        raise NotImplementedError

    def _scan_code_fence_content(self) -> Iterator[Token]:
        """Scan one line inside a fenced code block.

        Yields:
            FENCE_CONTENT for a regular line, or FENCE_END when the closing
            fence is found.
        """
        line, lineno = self._read_line()

        if self._is_closing_fence(line):
            self._mode = LexerMode.BLOCK
            fence_char = self._fence_char
            self._fence_char = ""
            self._fence_count = 0
            yield self._track(self._make_token(TokenType.FENCE_END, fence_char * 3, lineno))
            return

        yield self._make_token(TokenType.FENCE_CONTENT, line, lineno)
