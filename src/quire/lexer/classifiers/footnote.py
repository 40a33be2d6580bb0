"""Footnote definition classifier mixin."""

from __future__ import annotations

from quire.lexer.modes import FOOTNOTE_DEF_CLOSE, FOOTNOTE_DEF_OPEN
from quire.tokens import Token, TokenType


def is_valid_footnote_label(label: str) -> bool:
    """Labels are non-empty and contain no ] or whitespace."""
    return bool(label) and "]" not in label and not any(c.isspace() for c in label)


class FootnoteClassifierMixin:
    """Mixin providing footnote definition classification."""

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

    def _try_classify_footnote_def(
        self, content: str, lineno: int, indent: int = 0
    ) -> Token | None:
        """Try to classify content as footnote definition.

        Format: [^label]: content

        Args:
            content: Line content with leading whitespace stripped
            lineno: Line number
            indent: Number of leading spaces (for line_indent)

        Returns:
            FOOTNOTE_DEF token if valid (label on the token, body as the
            value), None otherwise.
        """
        if not content.startswith(FOOTNOTE_DEF_OPEN):
            return None

        bracket_end = content.find(FOOTNOTE_DEF_CLOSE)
        if bracket_end == -1:
            return None

        label = content[len(FOOTNOTE_DEF_OPEN) : bracket_end]
        if not is_valid_footnote_label(label):
            return None

        body = content[bracket_end + len(FOOTNOTE_DEF_CLOSE) :].strip()
        return self._make_token(
            TokenType.FOOTNOTE_DEF, body, lineno, line_indent=indent, label=label
        )
