"""Lexer operating modes and constants.

This module defines the finite state machine modes for the lexer
and the marker constants shared by the classifiers.
"""

from __future__ import annotations

from enum import Enum, auto


class LexerMode(Enum):
    """Lexer operating modes.

    The lexer switches between modes based on context:
    - BLOCK: Between blocks, classifying lines
    - CODE_FENCE: Inside a fenced code block (verbatim)
    - MATH_BLOCK: Inside a \\[ ... \\] display math block (verbatim)
    - HTML_BLOCK: Inside a raw HTML block, until a blank line

    """

    BLOCK = auto()
    CODE_FENCE = auto()
    MATH_BLOCK = auto()
    HTML_BLOCK = auto()


FENCE_CHARS = frozenset("`~")
MIN_FENCE_LENGTH = 3

MAX_HEADING_LEVEL = 6

# A single > is literal text; two or more open a quote
QUOTE_MARKER = ">"
MIN_QUOTE_MARKERS = 2

MATH_OPEN = "\\["
MATH_CLOSE = "\\]"

COMMENT_OPEN = "<!--"
COMMENT_CLOSE = "-->"

FOOTNOTE_DEF_OPEN = "[^"
FOOTNOTE_DEF_CLOSE = "]:"

# Lines indented past this never start a block
MAX_BLOCK_INDENT = 3
