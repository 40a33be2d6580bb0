"""Typed inline tokens for the Quire parser.

Uses NamedTuples for inline token representation, providing:
- Immutability by default (match state is tracked outside the tokens)
- Tuple unpacking support
- Lower memory footprint than dicts or dataclasses

Thread Safety:
All tokens are immutable and safe to share across threads.

Usage:
    match token:
        case DelimiterToken(char="*", run_length=n):
            print(f"Asterisk run of {n}")

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal, NamedTuple, TypeAlias

if TYPE_CHECKING:
    from quire.nodes import Inline

DelimiterChar: TypeAlias = Literal["*", "_"]


class DelimiterToken(NamedTuple):
    """Emphasis delimiter run.

    Attributes:
        char: The delimiter character ("*" or "_").
        run_length: Number of consecutive delimiter characters.
        can_open: Whether this run can open emphasis.
        can_close: Whether this run can close emphasis.

    """

    char: DelimiterChar
    run_length: int
    can_open: bool
    can_close: bool

    @property
    def literal(self) -> str:
        """The run as plain text (used when it stays unmatched)."""
        return self.char * self.run_length


class TextToken(NamedTuple):
    """Plain text token."""

    content: str


class NodeToken(NamedTuple):
    """A fully parsed inline node (code span, math, link, image, ...)."""

    node: Inline


InlineToken: TypeAlias = DelimiterToken | TextToken | NodeToken
