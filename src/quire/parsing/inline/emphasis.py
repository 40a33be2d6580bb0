"""Emphasis delimiter matching.

Rules:
- ``*`` is bold, ``_`` is italic.
- A run opens when followed by non-space and closes when preceded by
  non-space. An ``_`` between two alphanumerics does neither.
- A closer matches the nearest open run with the same character and the
  same length. Runs still open between the two are abandoned and stay
  literal text, as does anything open at the end of the block.

Thread Safety:
Matching state lives in a per-call dict; no shared mutable state.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from quire.parsing.charsets import is_whitespace
from quire.parsing.inline.tokens import DelimiterToken

if TYPE_CHECKING:
    from quire.parsing.inline.tokens import InlineToken


def classify_delimiter(char: str, before: str, after: str) -> tuple[bool, bool]:
    """Return (can_open, can_close) for a delimiter run.

    Args:
        char: Delimiter character
        before: Character before the run ("" at the start)
        after: Character after the run ("" at the end)
    """
    if char == "_" and before.isalnum() and after.isalnum():
        return False, False
    return not is_whitespace(after), not is_whitespace(before)


class EmphasisMixin:
    """Mixin for pairing emphasis delimiter runs."""

    def _match_delimiters(self, tokens: list[InlineToken]) -> dict[int, int]:
        """Pair opener and closer runs.

        Returns:
            Mapping of opener index to closer index. Delimiter tokens that
            are not in the mapping (as key or value) render as text.
        """
        matches: dict[int, int] = {}
        stack: list[int] = []

        for idx, token in enumerate(tokens):
            if not isinstance(token, DelimiterToken):
                continue

            if token.can_close:
                opener_at = self._find_opener(tokens, stack, token)
                if opener_at is not None:
                    matches[stack[opener_at]] = idx
                    # Openers above the match never close
                    del stack[opener_at:]
                    continue

            if token.can_open:
                stack.append(idx)

        return matches

    def _find_opener(
        self, tokens: list[InlineToken], stack: list[int], closer: DelimiterToken
    ) -> int | None:
        """Position in the stack of the nearest opener matching closer."""
        for stack_pos in range(len(stack) - 1, -1, -1):
            opener = tokens[stack[stack_pos]]
            assert isinstance(opener, DelimiterToken)
            if opener.char == closer.char and opener.run_length == closer.run_length:
                return stack_pos
        return None
