"""Block quote classifier mixin."""

from quire.lexer.modes import MIN_QUOTE_MARKERS, QUOTE_MARKER
from quire.tokens import Token, TokenType


def count_quote_markers(content: str) -> int:
    """Length of the leading run of > characters."""
    count = 0
    while count < len(content) and content[count] == QUOTE_MARKER:
        count += 1
    return count


class QuoteClassifierMixin:
    """Mixin providing block quote classification.

    Only a run of two or more ``>`` is a quote marker. A single ``>`` is
    ordinary paragraph text and keeps the marker as a literal character.

    """

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

    def _try_classify_block_quote(
        self, content: str, lineno: int, indent: int = 0
    ) -> Token | None:
        """Classify block quote marker.

        Args:
            content: Content starting with >
            lineno: Line number
            indent: Number of leading spaces

        Returns:
            BLOCK_QUOTE_MARKER token whose depth is the marker count and
            whose value is the rest of the line (one separating space
            removed), or None for a single >.
        """
        markers = count_quote_markers(content)
        if markers < MIN_QUOTE_MARKERS:
            return None

        remaining = content[markers:]
        if remaining.startswith((" ", "\t")):
            remaining = remaining[1:]

        return self._make_token(
            TokenType.BLOCK_QUOTE_MARKER,
            remaining,
            lineno,
            line_indent=indent,
            depth=markers,
        )
