"""Parsing subsystem for the Quire parser.

Provides mixin classes for modular parsing functionality:
- `TokenNavigationMixin`: Token stream traversal
- `InlineParsingMixin`: Inline content (emphasis, links, code, math)
- `BlockParsingMixin`: Block-level content (paragraphs, quotes, code blocks)

Example:
    >>> from quire.parsing import (
    ...     TokenNavigationMixin,
    ...     InlineParsingMixin,
    ...     BlockParsingMixin,
    ... )
    >>> class Parser(TokenNavigationMixin, InlineParsingMixin, BlockParsingMixin):
    ...     pass

"""

from quire.parsing.blocks import BlockParsingMixin
from quire.parsing.inline import InlineParsingMixin
from quire.parsing.token_nav import TokenNavigationMixin

__all__ = [
    "TokenNavigationMixin",
    "InlineParsingMixin",
    "BlockParsingMixin",
]
