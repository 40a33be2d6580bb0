"""HTML comment stripping mixin.

Comments are removed before any other classification. They may start
mid-line and run over several lines. Only payload-free COMMENT_START and
COMMENT_END marker tokens are emitted; the commented text never reaches a
token value.
"""

from collections.abc import Generator

from quire.lexer.modes import COMMENT_CLOSE, COMMENT_OPEN
from quire.tokens import Token, TokenType


class CommentClassifierMixin:
    """Mixin providing HTML comment removal."""

    _in_comment: bool

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

    def _strip_comments(self, line: str, lineno: int) -> Generator[Token, None, str | None]:
        """Remove comment text from a line.

        Yields COMMENT_START/COMMENT_END markers as comments open and close.

        Returns:
            The visible remainder of the line, or None when the line holds
            nothing but comment text (such a line is neither blank nor
            content and leaves the lookbehind untouched).
        """
        if not self._in_comment and COMMENT_OPEN not in line:
            return line

        pieces: list[str] = []
        pos = 0
        while True:
            if self._in_comment:
                end = line.find(COMMENT_CLOSE, pos)
                if end == -1:
                    break
                self._in_comment = False
                yield self._make_token(TokenType.COMMENT_END, "", lineno)
                pos = end + len(COMMENT_CLOSE)
            else:
                start = line.find(COMMENT_OPEN, pos)
                if start == -1:
                    pieces.append(line[pos:])
                    break
                pieces.append(line[pos:start])
                self._in_comment = True
                yield self._make_token(TokenType.COMMENT_START, "", lineno)
                pos = start + len(COMMENT_OPEN)

        visible = "".join(pieces)
        if not visible.strip():
            return None
        return visible
