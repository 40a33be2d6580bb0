"""Verbatim inline constructs: escapes, code spans and math spans.

Code and math spans are copied through without any further inline parsing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from quire.config import get_parse_config
from quire.nodes import CodeSpan, EscapedLiteral, MathSpan
from quire.parsing.charsets import ASCII_PUNCTUATION
from quire.parsing.inline.tokens import NodeToken, TextToken

if TYPE_CHECKING:
    from quire.location import SourceLocation
    from quire.parsing.inline.tokens import InlineToken


class SpecialInlineMixin:
    """Mixin for escapes, code spans and math spans.

    Each ``_scan_*`` method is called with ``text[pos]`` on its trigger
    character and returns (token, new_pos).

    """

    def _scan_escape(
        self, text: str, pos: int, location: SourceLocation
    ) -> tuple[InlineToken, int]:
        """Backslash escape.

        ``\\`` before ASCII punctuation yields that character literally;
        before anything else (or at the end) the backslash itself is text.
        """
        next_pos = pos + 1
        if next_pos < len(text) and text[next_pos] in ASCII_PUNCTUATION:
            char = text[next_pos]
            if get_parse_config().preserve_escapes:
                return NodeToken(EscapedLiteral(location=location, char=char)), pos + 2
            return TextToken(char), pos + 2
        return TextToken("\\"), next_pos

    def _scan_code_span(
        self, text: str, pos: int, location: SourceLocation
    ) -> tuple[InlineToken, int]:
        """Code span: a run of n backticks closed by a run of exactly n.

        An unclosed run is literal text.
        """
        text_len = len(text)
        count = 0
        while pos < text_len and text[pos] == "`":
            count += 1
            pos += 1

        close_pos = self._find_code_span_close(text, pos, count)
        if close_pos == -1:
            return TextToken("`" * count), pos
        return NodeToken(CodeSpan(location=location, code=text[pos:close_pos])), close_pos + count

    def _find_code_span_close(self, text: str, start: int, backtick_count: int) -> int:
        """Find closing backticks for code span."""
        pos = start
        text_len = len(text)
        while True:
            idx = text.find("`", pos)
            if idx == -1:
                return -1
            count = 0
            check_pos = idx
            while check_pos < text_len and text[check_pos] == "`":
                count += 1
                check_pos += 1
            if count == backtick_count:
                return idx
            pos = check_pos

    def _scan_math_span(
        self, text: str, pos: int, location: SourceLocation
    ) -> tuple[InlineToken, int]:
        """Inline math: ``$`` to the next ``$``, non-empty.

        Empty or unclosed math leaves a literal ``$``.
        """
        close_pos = text.find("$", pos + 1)
        if close_pos == -1 or close_pos == pos + 1:
            return TextToken("$"), pos + 1
        return (
            NodeToken(MathSpan(location=location, content=text[pos + 1 : close_pos])),
            close_pos + 1,
        )
