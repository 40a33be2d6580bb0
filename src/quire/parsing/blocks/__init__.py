"""Block parsing subsystem for the Quire parser.

Provides mixins for parsing block-level content:
- Headings, paragraphs
- Fenced code, display math and raw HTML (verbatim)
- Block quotes
- Footnote definitions

Architecture:
Block parsing is split into logical modules:
- core: Block dispatch and leaf blocks
- quote: Block quotes via a nested sub-parser
- footnote: Footnote definition parsing

"""

from quire.parsing.blocks.core import BlockParsingCoreMixin
from quire.parsing.blocks.footnote import FootnoteParsingMixin
from quire.parsing.blocks.quote import QuoteParsingMixin


class BlockParsingMixin(
    BlockParsingCoreMixin,
    QuoteParsingMixin,
    FootnoteParsingMixin,
):
    """Combined block parsing mixin.

    Combines all block parsing functionality into a single mixin
    that can be inherited by the Parser class.

    Required Host Attributes:
        - _tokens: list[Token]
        - _pos: int
        - _current: Token | None
        - _footnotes: FootnoteTable

    Required Host Methods:
        - _at_end() -> bool
        - _advance() -> Token | None
        - _parse_inline(text, location) -> tuple[Inline, ...]
        - _parse_nested_content(content, first_lineno) -> tuple[Block, ...]

    """


__all__ = [
    "BlockParsingMixin",
    "BlockParsingCoreMixin",
    "FootnoteParsingMixin",
    "QuoteParsingMixin",
]
