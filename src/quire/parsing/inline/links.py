"""Link, image and footnote reference parsing for the Quire parser.

Syntax:
- Link: ``[text](target)``; text is parsed recursively and may contain
  nested brackets.
- Image: ``![alt](target)`` optionally followed by ``{token}``, where a
  bare token becomes the configured image attribute (``{30}`` is a width).
- Footnote reference: ``[^label]`` not followed by ``:``.

Backslash escapes are processed in targets.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from quire.config import get_parse_config
from quire.lexer.classifiers.footnote import is_valid_footnote_label
from quire.nodes import FootnoteReference, Image, Inline, Link

if TYPE_CHECKING:
    from quire.location import SourceLocation


# Pattern to find backslash escapes
_ESCAPE_PATTERN = re.compile(r"\\([!\"#$%&'()*+,\-./:;<=>?@\[\\\]^_`{|}~])")

# A bare attribute token after an image: {30}, {50%}, {wide}
_IMAGE_ATTRIBUTE_PATTERN = re.compile(r"[A-Za-z0-9.%_-]+")


def _process_escapes(text: str) -> str:
    """Replace backslash escapes with the literal character."""
    return _ESCAPE_PATTERN.sub(r"\1", text)


def _find_closing_bracket(text: str, pos: int) -> int:
    """Find the ] matching the [ at pos, honoring nesting and escapes.

    Returns:
        Index of the matching ], or -1.
    """
    depth = 0
    text_len = len(text)
    while pos < text_len:
        char = text[pos]
        if char == "\\":
            pos += 2
            continue
        if char == "[":
            depth += 1
        elif char == "]":
            depth -= 1
            if depth == 0:
                return pos
        pos += 1
    return -1


def _parse_target(text: str, pos: int) -> tuple[str, int] | None:
    """Parse ``(target)`` starting at the opening paren.

    Parentheses inside the target must balance.

    Returns:
        (target, position after the closing paren) or None
    """
    if pos >= len(text) or text[pos] != "(":
        return None

    depth = 0
    start = pos + 1
    text_len = len(text)
    while pos < text_len:
        char = text[pos]
        if char == "\\":
            pos += 2
            continue
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == 0:
                return _process_escapes(text[start:pos].strip()), pos + 1
        pos += 1
    return None


def _parse_image_attribute(text: str, pos: int) -> tuple[str, int] | None:
    """Parse a ``{token}`` directly after an image.

    Returns:
        (token, position after the closing brace) or None when there is no
        brace group or the group holds anything but a bare token.
    """
    if pos >= len(text) or text[pos] != "{":
        return None
    close = text.find("}", pos + 1)
    if close == -1:
        return None
    value = text[pos + 1 : close]
    if not _IMAGE_ATTRIBUTE_PATTERN.fullmatch(value):
        return None
    return value, close + 1


class LinkParsingMixin:
    """Mixin for links, images and footnote references.

    Each ``_try_parse_*`` method is called with ``text[pos]`` on the
    construct's first character and returns (node, new_pos) or None when
    the text at pos is not that construct.

    Required Host Methods:
        - _parse_inline(text, location) -> tuple[Inline, ...]

    """

    def _try_parse_image(
        self, text: str, pos: int, location: SourceLocation
    ) -> tuple[Image, int] | None:
        """Parse ``![alt](target){token}``."""
        bracket_close = _find_closing_bracket(text, pos + 1)
        if bracket_close == -1:
            return None

        target_result = _parse_target(text, bracket_close + 1)
        if target_result is None:
            return None
        target, new_pos = target_result

        attributes: tuple[tuple[str, str], ...] = ()
        attribute = _parse_image_attribute(text, new_pos)
        if attribute is not None:
            value, new_pos = attribute
            attributes = ((get_parse_config().image_attribute_key, value),)

        alt = _process_escapes(text[pos + 2 : bracket_close])
        return Image(location=location, alt=alt, target=target, attributes=attributes), new_pos

    def _try_parse_link(
        self, text: str, pos: int, location: SourceLocation
    ) -> tuple[Link, int] | None:
        """Parse ``[text](target)``. The link text is scanned for inlines."""
        bracket_close = _find_closing_bracket(text, pos)
        if bracket_close == -1:
            return None

        target_result = _parse_target(text, bracket_close + 1)
        if target_result is None:
            return None
        target, new_pos = target_result

        children = self._parse_inline(text[pos + 1 : bracket_close], location)
        return Link(location=location, target=target, children=children), new_pos

    def _try_parse_footnote_ref(
        self, text: str, pos: int, location: SourceLocation
    ) -> tuple[FootnoteReference, int] | None:
        """Parse ``[^label]``.

        Followed by ``:`` the text is a definition marker, not a reference,
        and stays literal.
        """
        close = text.find("]", pos + 2)
        if close == -1:
            return None

        label = text[pos + 2 : close]
        if not is_valid_footnote_label(label):
            return None
        if close + 1 < len(text) and text[close + 1] == ":":
            return None

        return FootnoteReference(location=location, label=label), close + 1

    def _parse_inline(self, text: str, location: SourceLocation) -> tuple[Inline, ...]:
        """Parse inline content. Implemented by InlineParsingCoreMixin."""
        raise NotImplementedError
