"""Block quote parsing for the Quire parser.

A quote of width n is a run of lines opening with n or more ``>``. Lines
at exactly width n contribute their text; deeper lines keep their own
markers so the sub-parser sees them as a nested quote. Consecutive lines
at the same width form one segment and each segment is parsed separately,
so a change of width always starts a new block.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from quire.lexer.modes import QUOTE_MARKER
from quire.nodes import Block, BlockQuote
from quire.tokens import TokenType

if TYPE_CHECKING:
    from quire.tokens import Token


class QuoteParsingMixin:
    """Mixin for block quote parsing.

    Required Host Attributes:
        - _current: Token | None

    Required Host Methods:
        - _advance() -> Token | None
        - _current_is(*types) -> bool
        - _parse_nested_content(content, first_lineno) -> tuple[Block, ...]

    """

    def _parse_block_quote(self) -> BlockQuote:
        """Parse a block quote whose width is set by its first line."""
        start = self._current
        assert start is not None and start.type == TokenType.BLOCK_QUOTE_MARKER
        level = start.depth

        last = start
        children: list[Block] = []
        # (is_nested, first_lineno, lines)
        segment: tuple[bool, int, list[str]] | None = None

        while self._current_is(TokenType.BLOCK_QUOTE_MARKER):
            token = self._current
            assert token is not None
            if token.depth < level:
                break

            nested = token.depth > level
            line = (
                f"{QUOTE_MARKER * token.depth} {token.value}" if nested else token.value
            )
            if segment is None or segment[0] != nested:
                if segment is not None:
                    children.extend(self._parse_segment(segment))
                segment = (nested, token.lineno, [line])
            else:
                segment[2].append(line)

            last = token
            self._advance()

        if segment is not None:
            children.extend(self._parse_segment(segment))

        return BlockQuote(
            location=start.location.span_to(last.location),
            level=level,
            children=tuple(children),
        )

    def _parse_segment(self, segment: tuple[bool, int, list[str]]) -> tuple[Block, ...]:
        _, first_lineno, lines = segment
        return self._parse_nested_content("\n".join(lines), first_lineno)
