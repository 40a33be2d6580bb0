"""Display math block classifier mixin."""

from quire.lexer.modes import MATH_CLOSE, MATH_OPEN, LexerMode
from quire.tokens import Token, TokenType


class MathClassifierMixin:
    """Mixin providing \\[ ... \\] math block classification."""

    _mode: LexerMode

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

    def _try_classify_math_block_start(
        self, content: str, lineno: int, indent: int = 0
    ) -> list[Token] | None:
        """Try to classify content as the start of a math block.

        ``\\[`` opens a math block that runs until a line starting with
        ``\\]``. Text after ``\\[`` on the opening line is the first line of
        the math content. ``\\[ x \\]`` on one line is a complete block.

        Returns:
            Tokens to emit, or None if the line is not a math opener.
        """
        if not content.startswith(MATH_OPEN):
            return None

        rest = content[len(MATH_OPEN) :]
        closed = rest.rstrip()
        if closed.endswith(MATH_CLOSE):
            return [
                self._make_token(
                    TokenType.MATH_BLOCK_START,
                    closed[: -len(MATH_CLOSE)],
                    lineno,
                    line_indent=indent,
                ),
                self._make_token(TokenType.MATH_BLOCK_END, "", lineno, line_indent=indent),
            ]

        self._mode = LexerMode.MATH_BLOCK
        return [self._make_token(TokenType.MATH_BLOCK_START, rest, lineno, line_indent=indent)]

    def _is_math_block_close(self, line: str) -> bool:
        """A line starting with \\] (after optional spaces) ends the block."""
        return line.lstrip().startswith(MATH_CLOSE)
