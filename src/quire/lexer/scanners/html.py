"""HTML block mode scanner mixin."""

from collections.abc import Generator, Iterator

from quire.lexer.modes import LexerMode
from quire.tokens import Token, TokenType


class HtmlScannerMixin:
    """Mixin providing HTML block mode scanning logic.

    HTML blocks end at the first blank line. A line that only looks empty
    because a comment was removed from it does not end the block.

    """

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

    def _strip_comments(self, line: str, lineno: int) -> Generator[Token, None, str | None]:
        """Implemented by CommentClassifierMixin."""
        raise NotImplementedError

    def _scan_html_block_content(self) -> Iterator[Token]:
        """Scan one line inside an HTML block."""
        line, lineno = self._read_line()

        text = yield from self._strip_comments(line, lineno)
        if text is None:
            return

        if not text.strip():
            self._mode = LexerMode.BLOCK
            yield self._track(self._make_token(TokenType.BLANK_LINE, "", lineno))
            return

        yield self._make_token(TokenType.HTML_BLOCK_LINE, text, lineno)
