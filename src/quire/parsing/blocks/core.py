"""Core block parsing for the Quire parser.

Provides block dispatch and the leaf blocks (headings, paragraphs, code,
math, HTML).
"""

from __future__ import annotations

from quire.nodes import (
    Block,
    CodeBlock,
    Heading,
    HtmlBlock,
    MathBlock,
    Paragraph,
)
from quire.tokens import TokenType
from quire.utils.logger import get_logger

logger = get_logger(__name__)


class BlockParsingCoreMixin:
    """Core block parsing methods.

    Required Host Attributes:
        - _tokens: list[Token]
        - _pos: int
        - _current: Token | None

    Required Host Methods:
        - _at_end() -> bool
        - _advance() -> Token | None
        - _current_is(*types) -> bool
        - _skip_comment_markers() -> None
        - _parse_inline(text, location) -> tuple[Inline, ...]
        - _parse_block_quote() -> BlockQuote
        - _parse_footnote_def() -> None

    """

    # Required host attributes (documented, not declared, to avoid override conflicts)
    # _tokens: list[Token]
    # _pos: int
    # _current: Token | None

    def _parse_block(self) -> Block | None:
        """Parse a single block element.

        Returns None for tokens that produce no block (blank lines, comment
        markers, footnote definitions).
        """
        if self._at_end():
            return None

        token = self._current
        assert token is not None

        match token.type:
            case TokenType.BLANK_LINE | TokenType.COMMENT_START | TokenType.COMMENT_END:
                self._advance()
                return None

            case TokenType.ATX_HEADING:
                return self._parse_atx_heading()

            case TokenType.FENCE_START:
                return self._parse_fenced_code()

            case TokenType.MATH_BLOCK_START:
                return self._parse_math_block()

            case TokenType.HTML_BLOCK_START:
                return self._parse_html_block()

            case TokenType.BLOCK_QUOTE_MARKER:
                return self._parse_block_quote()

            case TokenType.FOOTNOTE_DEF:
                self._parse_footnote_def()
                return None

            case TokenType.PARAGRAPH_LINE:
                return self._parse_paragraph()

            case _:
                # Content tokens are consumed by their block; a stray one is skipped
                self._advance()
                return None

    def _parse_atx_heading(self) -> Heading:
        """Parse ATX heading. Level comes from the token depth."""
        token = self._current
        assert token is not None and token.type == TokenType.ATX_HEADING
        self._advance()

        children = self._parse_inline(token.value, token.location)
        return Heading(location=token.location, level=token.depth, children=children)  # type: ignore[arg-type]

    def _parse_paragraph(self) -> Paragraph:
        """Merge consecutive paragraph lines into one paragraph.

        Comment markers between lines do not end the paragraph. The lines
        are joined with newlines and scanned for inlines as one unit.
        """
        start = self._current
        assert start is not None
        last = start
        lines: list[str] = []

        while self._current_is(TokenType.PARAGRAPH_LINE):
            last = self._current
            assert last is not None
            lines.append(last.value)
            self._advance()

        location = start.location.span_to(last.location)
        children = self._parse_inline("\n".join(lines), location)
        return Paragraph(location=location, children=children)

    def _parse_fenced_code(self) -> CodeBlock:
        """Collect verbatim fence lines up to the closing fence or end of input."""
        start = self._current
        assert start is not None and start.type == TokenType.FENCE_START
        self._advance()

        last = start
        lines: list[str] = []
        while self._current is not None and self._current.type == TokenType.FENCE_CONTENT:
            last = self._current
            lines.append(last.value)
            self._advance()

        if self._current is not None and self._current.type == TokenType.FENCE_END:
            last = self._current
            self._advance()
        else:
            logger.debug("Fenced code opened at line %d closed at end of input", start.lineno)

        return CodeBlock(
            location=start.location.span_to(last.location),
            info=start.label,
            lines=tuple(lines),
        )

    def _parse_math_block(self) -> MathBlock:
        """Collect verbatim math lines up to \\] or end of input.

        Text after the opening \\[ is the first line of content when it is
        not blank.
        """
        start = self._current
        assert start is not None and start.type == TokenType.MATH_BLOCK_START
        self._advance()

        last = start
        lines: list[str] = [start.value] if start.value.strip() else []
        while self._current is not None and self._current.type == TokenType.MATH_BLOCK_CONTENT:
            last = self._current
            lines.append(last.value)
            self._advance()

        if self._current is not None and self._current.type == TokenType.MATH_BLOCK_END:
            last = self._current
            self._advance()
        else:
            logger.debug("Math block opened at line %d closed at end of input", start.lineno)

        return MathBlock(
            location=start.location.span_to(last.location),
            content="\n".join(lines),
        )

    def _parse_html_block(self) -> HtmlBlock:
        """Collect HTML lines. Comment markers inside the block are dropped."""
        start = self._current
        assert start is not None and start.type == TokenType.HTML_BLOCK_START
        self._advance()

        last = start
        lines: list[str] = [start.value]
        while self._current_is(TokenType.HTML_BLOCK_LINE):
            last = self._current
            assert last is not None
            lines.append(last.value)
            self._advance()

        return HtmlBlock(location=start.location.span_to(last.location), lines=tuple(lines))
