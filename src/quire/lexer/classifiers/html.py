"""HTML block classifier mixin.

An HTML block starts on a line beginning with ``<`` followed by a tag-like
token: a letter (opening tag) or ``/`` and a letter (closing tag). No HTML
is parsed or validated; the block runs until a blank line or the end of
the input and is copied through unchanged.
"""

from quire.lexer.modes import LexerMode
from quire.tokens import Token, TokenType


def is_html_block_start(content: str) -> bool:
    """Check the tag-like heuristic on a line with indentation removed."""
    if len(content) < 2 or content[0] != "<":
        return False
    if content[1].isascii() and content[1].isalpha():
        return True
    return (
        content[1] == "/"
        and len(content) > 2
        and content[2].isascii()
        and content[2].isalpha()
    )


class HtmlClassifierMixin:
    """Mixin providing HTML block start classification."""

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

    def _try_classify_html_block_start(
        self, content: str, lineno: int, full_line: str, indent: int = 0
    ) -> Token | None:
        """Try to classify a line as the start of an HTML block.

        Args:
            content: Line content with leading whitespace stripped
            lineno: Line number
            full_line: The whole line, kept verbatim as the token value
            indent: Number of leading spaces

        Returns:
            HTML_BLOCK_START token, or None. Switches to HTML_BLOCK mode.
        """
        if not is_html_block_start(content):
            return None

        self._mode = LexerMode.HTML_BLOCK
        return self._make_token(TokenType.HTML_BLOCK_START, full_line, lineno, line_indent=indent)
