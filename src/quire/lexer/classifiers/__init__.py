"""Line classifiers for the Quire lexer.

Each classifier is a mixin that provides classification logic for
a specific block type. Classifiers look at one line (plus the lexer's
one-line lookbehind) and decide whether it matches their pattern.
"""

from quire.lexer.classifiers.comment import (
    CommentClassifierMixin,
)
from quire.lexer.classifiers.fence import (
    FenceClassifierMixin,
)
from quire.lexer.classifiers.footnote import (
    FootnoteClassifierMixin,
)
from quire.lexer.classifiers.heading import (
    HeadingClassifierMixin,
)
from quire.lexer.classifiers.html import (
    HtmlClassifierMixin,
)
from quire.lexer.classifiers.math import (
    MathClassifierMixin,
)
from quire.lexer.classifiers.quote import (
    QuoteClassifierMixin,
)

__all__ = [
    "CommentClassifierMixin",
    "FenceClassifierMixin",
    "FootnoteClassifierMixin",
    "HeadingClassifierMixin",
    "HtmlClassifierMixin",
    "MathClassifierMixin",
    "QuoteClassifierMixin",
]
