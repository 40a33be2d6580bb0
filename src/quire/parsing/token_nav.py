"""Token navigation utilities for the Quire parser.

Provides mixin for token stream navigation and basic parsing operations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from quire.tokens import Token, TokenType

if TYPE_CHECKING:
    from collections.abc import Sequence

# Payload-free markers the assembler steps over
SKIPPABLE: frozenset[TokenType] = frozenset({TokenType.COMMENT_START, TokenType.COMMENT_END})


class TokenNavigationMixin:
    """Mixin providing token stream navigation methods.

    Required Host Attributes:
        - _tokens: Sequence[Token]
        - _tokens_len: int (cached len(_tokens) for hot loops)
        - _pos: int
        - _current: Token | None

    """

    _tokens: Sequence[Token]
    _tokens_len: int
    _pos: int
    _current: Token | None

    def _at_end(self) -> bool:
        """Check if at end of token stream."""
        return self._current is None or self._current.type == TokenType.EOF

    def _advance(self) -> Token | None:
        """Advance to next token and return it."""
        self._pos += 1
        if self._pos < self._tokens_len:
            self._current = self._tokens[self._pos]
        else:
            self._current = None
        return self._current

    def _skip_comment_markers(self) -> None:
        """Step over COMMENT_START/COMMENT_END markers."""
        while self._current is not None and self._current.type in SKIPPABLE:
            self._advance()

    def _current_is(self, *types: TokenType) -> bool:
        """Check the current token type, looking through comment markers."""
        self._skip_comment_markers()
        return self._current is not None and self._current.type in types
