"""Display math mode scanner mixin."""

from collections.abc import Iterator

from quire.lexer.modes import LexerMode
from quire.tokens import Token, TokenType


class MathScannerMixin:
    """Mixin providing math block mode scanning logic."""

    _mode: LexerMode

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

    def _is_math_block_close(self, line: str) -> bool:
        """Implemented by MathClassifierMixin."""
        raise NotImplementedError

    def _scan_math_block_content(self) -> Iterator[Token]:
        """Scan one line inside a math block, verbatim until \\]."""
        line, lineno = self._read_line()

        if self._is_math_block_close(line):
            self._mode = LexerMode.BLOCK
            yield self._track(self._make_token(TokenType.MATH_BLOCK_END, "", lineno))
            return

        yield self._make_token(TokenType.MATH_BLOCK_CONTENT, line, lineno)
