"""Fenced code block classifier mixin."""

from quire.lexer.modes import FENCE_CHARS, MAX_BLOCK_INDENT, MIN_FENCE_LENGTH, LexerMode
from quire.tokens import Token, TokenType


class FenceClassifierMixin:
    """Mixin providing fenced code block classification."""

    # These will be set by the Lexer class
    _fence_char: str
    _fence_count: int
    _mode: LexerMode

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

    def _try_classify_fence_start(
        self, content: str, lineno: int, indent: int = 0
    ) -> Token | None:
        """Try to classify content as fenced code start.

        Fenced code blocks start with 3+ backticks or tildes.
        Backtick fences cannot have backticks in the info string.

        Args:
            content: Line content with leading whitespace stripped
            lineno: Line number
            indent: Number of leading spaces

        Returns:
            FENCE_START token (label = info string or None) if valid,
            None otherwise. Switches the lexer to CODE_FENCE mode.
        """
        if not content:
            return None

        fence_char = content[0]
        if fence_char not in FENCE_CHARS:
            return None

        count = 0
        pos = 0
        while pos < len(content) and content[pos] == fence_char:
            count += 1
            pos += 1

        if count < MIN_FENCE_LENGTH:
            return None

        info = content[pos:].strip()

        if fence_char == "`" and "`" in info:
            return None

        self._fence_char = fence_char
        self._fence_count = count
        self._mode = LexerMode.CODE_FENCE

        return self._make_token(
            TokenType.FENCE_START,
            info,
            lineno,
            line_indent=indent,
            depth=count,
            label=info or None,
        )

    def _is_closing_fence(self, line: str) -> bool:
        """Check if line closes the current fence.

        A closing fence uses the opening character, is at least as long as
        the opening fence, has at most three spaces of indent and nothing
        but whitespace after it.
        """
        stripped = line.lstrip(" ")
        if len(line) - len(stripped) > MAX_BLOCK_INDENT:
            return False

        if not stripped or stripped[0] != self._fence_char:
            return False

        count = 0
        fence_pos = 0
        while fence_pos < len(stripped) and stripped[fence_pos] == self._fence_char:
            count += 1
            fence_pos += 1

        if count < self._fence_count:
            return False

        return stripped[fence_pos:].strip() == ""
