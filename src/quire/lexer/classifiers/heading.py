"""ATX heading classifier mixin."""

from quire.lexer.modes import MAX_HEADING_LEVEL
from quire.tokens import Token, TokenType


class HeadingClassifierMixin:
    """Mixin providing ATX heading classification."""

    _previous_line_blank: bool

    def _make_token(
        self,
        token_type: TokenType,
        value: str,
        lineno: int,
        *,
        line_indent: int = 0,
        depth: int = 0,
        label: str | None = None,
    ) -> Token:
        """Create a token. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_atx_heading(
        self, content: str, lineno: int, indent: int = 0
    ) -> Token | None:
        """Try to classify content as ATX heading.

        ATX headings are 1-6 # characters followed by space, tab or end of
        line. A heading only starts after a blank line or at the start of
        the document (or enclosing quote); anywhere else the line is
        paragraph text.

        A trailing run of # is removed if preceded by space.

        Args:
            content: Line content with leading whitespace stripped
            lineno: Line number
            indent: Number of leading spaces (for line_indent)

        Returns:
            Token if valid heading, None otherwise. Token value is the
            heading text; token depth is the level.
        """
        if not self._previous_line_blank:
            return None

        level = 0
        pos = 0
        content_len = len(content)
        while pos < content_len and content[pos] == "#":
            level += 1
            pos += 1

        if level == 0 or level > MAX_HEADING_LEVEL:
            return None

        # Must be followed by space, tab, or end
        if pos < content_len and content[pos] not in " \t":
            return None

        heading_content = content[pos:].strip()

        # Remove trailing # sequence (if preceded by space)
        if heading_content.endswith("#"):
            trailing_start = len(heading_content)
            while trailing_start > 0 and heading_content[trailing_start - 1] == "#":
                trailing_start -= 1
            if trailing_start == 0:
                heading_content = ""
            elif heading_content[trailing_start - 1] in " \t":
                heading_content = heading_content[: trailing_start - 1].rstrip()

        return self._make_token(
            TokenType.ATX_HEADING, heading_content, lineno, line_indent=indent, depth=level
        )
