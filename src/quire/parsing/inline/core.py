"""Core inline parsing for the Quire parser.

Provides the main inline tokenization and AST building logic.

Inline parsing runs in three phases:
1. Tokenize the text into TextToken, DelimiterToken and NodeToken. At each
   position the constructs are tried in a fixed order: escape, code span,
   math span, image, link, footnote reference, emphasis, text.
2. Pair emphasis delimiters.
3. Build the node tuple, turning unpaired delimiters back into text and
   merging adjacent text.

Thread Safety:
All methods are stateless or use instance-local state only.
Safe for concurrent use when each parser instance is used by one thread.

"""

from __future__ import annotations

from quire.location import SourceLocation
from quire.nodes import Emphasis, Inline, Text
from quire.parsing.charsets import EMPHASIS_CHARS, INLINE_SPECIAL
from quire.parsing.inline.emphasis import classify_delimiter
from quire.parsing.inline.tokens import (
    DelimiterToken,
    InlineToken,
    NodeToken,
    TextToken,
)


def _location_at(text: str, pos: int, location: SourceLocation) -> SourceLocation:
    """Location of text[pos], given the location of text[0]."""
    newlines = text.count("\n", 0, pos)
    if newlines == 0:
        return location
    return SourceLocation(
        lineno=location.lineno + newlines,
        col_offset=1,
        source_file=location.source_file,
    )


class InlineParsingCoreMixin:
    """Core inline parsing methods.

    Required Host Methods (from other mixins):
        - _scan_escape / _scan_code_span / _scan_math_span
        - _try_parse_image / _try_parse_link / _try_parse_footnote_ref
        - _match_delimiters(tokens) -> dict[int, int]

    """

    def _parse_inline(self, text: str, location: SourceLocation) -> tuple[Inline, ...]:
        """Parse inline content into a tuple of inline nodes."""
        if not text:
            return ()

        tokens = self._tokenize_inline(text, location)
        matches = self._match_delimiters(tokens)
        return self._build_inline_ast(tokens, matches, 0, len(tokens), location)

    def _tokenize_inline(self, text: str, location: SourceLocation) -> list[InlineToken]:
        """Tokenize inline content into typed token objects."""
        tokens: list[InlineToken] = []
        pos = 0
        text_len = len(text)
        tokens_append = tokens.append

        while pos < text_len:
            char = text[pos]

            if char == "\\":
                token, pos = self._scan_escape(text, pos, _location_at(text, pos, location))
                tokens_append(token)
                continue

            if char == "`":
                token, pos = self._scan_code_span(text, pos, _location_at(text, pos, location))
                tokens_append(token)
                continue

            if char == "$":
                token, pos = self._scan_math_span(text, pos, _location_at(text, pos, location))
                tokens_append(token)
                continue

            if char == "!":
                if pos + 1 < text_len and text[pos + 1] == "[":
                    img_result = self._try_parse_image(
                        text, pos, _location_at(text, pos, location)
                    )
                    if img_result:
                        node, pos = img_result
                        tokens_append(NodeToken(node))
                        continue
                tokens_append(TextToken("!"))
                pos += 1
                continue

            if char == "[":
                here = _location_at(text, pos, location)
                link_result = self._try_parse_link(text, pos, here)
                if link_result:
                    node, pos = link_result
                    tokens_append(NodeToken(node))
                    continue
                if pos + 1 < text_len and text[pos + 1] == "^":
                    fn_result = self._try_parse_footnote_ref(text, pos, here)
                    if fn_result:
                        node, pos = fn_result
                        tokens_append(NodeToken(node))
                        continue
                tokens_append(TextToken("["))
                pos += 1
                continue

            if char in EMPHASIS_CHARS:
                delim_start = pos
                while pos < text_len and text[pos] == char:
                    pos += 1
                before = text[delim_start - 1] if delim_start > 0 else ""
                after = text[pos] if pos < text_len else ""
                can_open, can_close = classify_delimiter(char, before, after)
                tokens_append(
                    DelimiterToken(
                        char=char,  # type: ignore[arg-type]
                        run_length=pos - delim_start,
                        can_open=can_open,
                        can_close=can_close,
                    )
                )
                continue

            # Regular text - accumulate using frozenset lookup (O(1) per char)
            text_start = pos
            while pos < text_len and text[pos] not in INLINE_SPECIAL:
                pos += 1
            tokens_append(TextToken(text[text_start:pos]))

        return tokens

    def _build_inline_ast(
        self,
        tokens: list[InlineToken],
        matches: dict[int, int],
        start: int,
        end: int,
        location: SourceLocation,
    ) -> tuple[Inline, ...]:
        """Build nodes for tokens[start:end].

        Matched delimiter pairs become Emphasis around the tokens between
        them; unmatched delimiters become text.
        """
        result: list[Inline] = []
        pending_text: list[str] = []

        def flush_text() -> None:
            if pending_text:
                result.append(Text(location=location, content="".join(pending_text)))
                pending_text.clear()

        idx = start
        while idx < end:
            token = tokens[idx]
            match token:
                case TextToken(content=content):
                    pending_text.append(content)
                    idx += 1

                case DelimiterToken() if idx in matches:
                    closer = matches[idx]
                    flush_text()
                    result.append(
                        Emphasis(
                            location=location,
                            kind="bold" if token.char == "*" else "italic",
                            children=self._build_inline_ast(
                                tokens, matches, idx + 1, closer, location
                            ),
                        )
                    )
                    idx = closer + 1

                case DelimiterToken():
                    pending_text.append(token.literal)
                    idx += 1

                case NodeToken(node=node):
                    flush_text()
                    result.append(node)
                    idx += 1

        flush_text()
        return tuple(result)
