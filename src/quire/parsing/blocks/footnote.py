"""Footnote parsing for the Quire parser.

Handles footnote definition parsing. Definitions never appear in the block
sequence: they go straight into the parse's FootnoteTable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from quire.config import get_parse_config
from quire.nodes import FootnoteDefinition, Inline
from quire.tokens import TokenType

if TYPE_CHECKING:
    from quire.footnotes import FootnoteTable
    from quire.tokens import Token


class FootnoteParsingMixin:
    """Mixin for footnote definition parsing.

    Required Host Attributes:
        - _current: Token | None
        - _footnotes: FootnoteTable

    Required Host Methods:
        - _at_end() -> bool
        - _advance() -> Token | None
        - _parse_inline(text, location) -> tuple[Inline, ...]

    """

    _current: Token | None
    _footnotes: FootnoteTable

    def _at_end(self) -> bool:
        """Check if at end of token stream. Implemented by TokenNavigationMixin."""
        raise NotImplementedError

    def _advance(self) -> Token | None:
        """Advance to next token. Implemented by TokenNavigationMixin."""
        raise NotImplementedError

    def _parse_inline(self, text: str, location: object) -> tuple[Inline, ...]:
        """Parse inline content. Implemented by InlineParsingMixin."""
        raise NotImplementedError

    def _parse_footnote_def(self) -> None:
        """Parse a footnote definition and register it.

        Format: [^label]: content

        With ``footnote_continuation`` enabled, indented paragraph lines that
        directly follow the definition are appended to its body.
        """
        token = self._current
        assert token is not None and token.type == TokenType.FOOTNOTE_DEF
        assert token.label is not None
        self._advance()

        lines = [token.value]
        last = token
        if get_parse_config().footnote_continuation:
            while not self._at_end():
                tok = self._current
                assert tok is not None
                if tok.type != TokenType.PARAGRAPH_LINE or tok.line_indent == 0:
                    break
                lines.append(tok.value)
                last = tok
                self._advance()

        location = token.location.span_to(last.location)
        body = "\n".join(line for line in lines if line)
        self._footnotes.register(
            FootnoteDefinition(
                location=location,
                label=token.label,
                children=self._parse_inline(body, location),
            )
        )
