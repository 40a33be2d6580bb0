"""Token and TokenType definitions for the Quire line classifier.

The lexer classifies the source one line at a time and produces a stream of
Token objects that the block assembler consumes. Each Token has a type,
a string value and the line it came from.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

Performance Note:
Token stores raw coordinates and lazily creates SourceLocation on demand.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from quire.location import SourceLocation


class TokenType(Enum):
    """Line classifications produced by the lexer.

    Organized by category:
    - Document structure (EOF, BLANK_LINE)
    - Block starts (headings, fences, math, HTML, quotes, footnotes)
    - Verbatim content lines emitted while inside a fence/math/HTML block
    - Comment markers (payload-free)

    """

    # Document structure
    EOF = auto()
    BLANK_LINE = auto()

    # Headings
    ATX_HEADING = auto()  # # Heading

    # Fenced code
    FENCE_START = auto()  # ```lang
    FENCE_CONTENT = auto()
    FENCE_END = auto()

    # Display math
    MATH_BLOCK_START = auto()  # \[
    MATH_BLOCK_CONTENT = auto()
    MATH_BLOCK_END = auto()  # \]

    # Raw HTML
    HTML_BLOCK_START = auto()  # <tag ...
    HTML_BLOCK_LINE = auto()

    # Quotes
    BLOCK_QUOTE_MARKER = auto()  # >> (two or more)

    # Comments: markers only, the comment text is never carried
    COMMENT_START = auto()  # <!--
    COMMENT_END = auto()  # -->

    # Footnotes
    FOOTNOTE_DEF = auto()  # [^label]: body

    # Paragraph text
    PARAGRAPH_LINE = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """A classified source line.

    Attributes:
        type: The token type (from TokenType enum)
        value: Payload of the line. For block starts this is the content
            after the marker; for verbatim lines it is the line unchanged.
        _lineno: Line number in the outermost document (1-indexed)
        line_indent: Leading spaces of the line (tabs expand to 4)
        depth: Heading level or number of quote markers, 0 otherwise
        label: Fence info string or footnote label, None otherwise
        _source_file: Optional source file path

    """

    type: TokenType
    value: str
    _lineno: int
    line_indent: int = 0
    depth: int = 0
    label: str | None = None
    _source_file: str | None = None
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        from quire.location import SourceLocation

        loc = SourceLocation(
            lineno=self._lineno,
            col_offset=self.line_indent + 1,
            source_file=self._source_file,
        )
        object.__setattr__(self, "_location_cache", loc)
        return loc

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self._lineno})"

    @property
    def lineno(self) -> int:
        """Line number (convenience accessor)."""
        return self._lineno
