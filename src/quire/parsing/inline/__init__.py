"""Inline parsing subsystem for the Quire parser.

Provides mixins for parsing inline content:
- Escapes, code spans, math spans (special)
- Links, images, footnote references (links)
- Emphasis delimiter pairing (emphasis)

"""

from quire.parsing.inline.core import InlineParsingCoreMixin
from quire.parsing.inline.emphasis import EmphasisMixin
from quire.parsing.inline.links import LinkParsingMixin
from quire.parsing.inline.special import SpecialInlineMixin


class InlineParsingMixin(
    InlineParsingCoreMixin,
    SpecialInlineMixin,
    LinkParsingMixin,
    EmphasisMixin,
):
    """Combined inline parsing mixin.

    Combines all inline parsing functionality into a single mixin
    that can be inherited by the Parser class.

    Configuration is read from the ParseConfig ContextVar
    (preserve_escapes, image_attribute_key).

    """


__all__ = [
    "EmphasisMixin",
    "InlineParsingCoreMixin",
    "InlineParsingMixin",
    "LinkParsingMixin",
    "SpecialInlineMixin",
]
