"""Typed AST nodes for Quire.

All AST nodes are frozen dataclasses with slots for:
- Type safety: IDE autocomplete, catch errors at dev time
- Immutability: a parsed Document never changes after construction
- Pattern matching: Python 3.10+ match statements work naturally

Node Hierarchy:
Node (base)
├── Block (block-level elements)
│   ├── Document
│   ├── Heading
│   ├── Paragraph
│   ├── CodeBlock
│   ├── MathBlock
│   ├── HtmlBlock
│   ├── BlockQuote
│   └── FootnoteDefinition
└── Inline (inline elements)
    ├── Text
    ├── Emphasis
    ├── CodeSpan
    ├── MathSpan
    ├── Link
    ├── Image
    ├── FootnoteReference
    └── EscapedLiteral

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, TypeAlias

from quire.location import SourceLocation

# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all AST nodes.

    All nodes track their source location for diagnostics and debugging.

    """

    location: SourceLocation


# =============================================================================
# Inline Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Plain text content.

    Line breaks inside a paragraph are kept as ``\\n`` in the content.

    """

    content: str


@dataclass(frozen=True, slots=True)
class Emphasis(Node):
    """Bold or italic text.

    Markdown: *bold* or _italic_

    """

    kind: Literal["bold", "italic"]
    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class CodeSpan(Node):
    """Inline code, copied verbatim.

    Markdown: `code`

    """

    code: str


@dataclass(frozen=True, slots=True)
class MathSpan(Node):
    """Inline math expression, copied verbatim.

    Markdown: $E = mc^2$

    """

    content: str


@dataclass(frozen=True, slots=True)
class Link(Node):
    """Hyperlink.

    Markdown: [text](target)

    """

    target: str
    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Image(Node):
    """Image with optional attributes.

    Markdown: ![alt](target) or ![alt](target){30}

    Attributes are stored as ordered (key, value) pairs so the node stays
    hashable; use ``attribute_map`` for dict access.

    """

    alt: str
    target: str
    attributes: tuple[tuple[str, str], ...] = ()

    @property
    def attribute_map(self) -> dict[str, str]:
        """Attributes as a new dict."""
        return dict(self.attributes)


@dataclass(frozen=True, slots=True)
class FootnoteReference(Node):
    """Footnote reference.

    Markdown: [^1] or [^note]

    Holds only the label; the definition lives in Document.footnotes.

    """

    label: str


@dataclass(frozen=True, slots=True)
class EscapedLiteral(Node):
    """A backslash-escaped punctuation character.

    Markdown: \\*

    Only produced when ParseConfig.preserve_escapes is set; otherwise the
    character is folded into the surrounding Text.

    """

    char: str


# Type alias for inline elements
Inline: TypeAlias = (
    Text
    | Emphasis
    | CodeSpan
    | MathSpan
    | Link
    | Image
    | FootnoteReference
    | EscapedLiteral
)


# =============================================================================
# Block Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Heading(Node):
    """ATX heading.

    Markdown: # Heading

    """

    level: Literal[1, 2, 3, 4, 5, 6]
    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Paragraph(Node):
    """Paragraph block.

    Markdown: Text separated by blank lines

    """

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class CodeBlock(Node):
    """Fenced code block.

    Markdown: ```lang ... ```

    The lines are the source lines between the fences, byte-identical.
    The info string is stored but never interpreted.

    """

    info: str | None
    lines: tuple[str, ...]

    @property
    def code(self) -> str:
        """Code content joined with newlines."""
        return "\n".join(self.lines)

    @property
    def language(self) -> str | None:
        """First word of the info string, if any."""
        if not self.info:
            return None
        return self.info.split()[0]


@dataclass(frozen=True, slots=True)
class MathBlock(Node):
    """Display math, copied verbatim.

    Markdown:
        \\[
        E = mc^2
        \\]

    """

    content: str


@dataclass(frozen=True, slots=True)
class HtmlBlock(Node):
    """Raw HTML block, passed through unchanged.

    HTML comments are removed by the lexer before the lines get here.

    """

    lines: tuple[str, ...]

    @property
    def html(self) -> str:
        """HTML content joined with newlines."""
        return "\n".join(self.lines)


@dataclass(frozen=True, slots=True)
class BlockQuote(Node):
    """Block quote.

    Markdown: >> quoted text

    ``level`` is the number of ``>`` markers (always two or more).

    """

    level: int
    children: tuple[Block, ...]


@dataclass(frozen=True, slots=True)
class FootnoteDefinition(Node):
    """Footnote definition.

    Markdown: [^1]: Footnote content here.

    Never appears in Document.children; collected into Document.footnotes.

    """

    label: str
    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Document(Node):
    """Root document node.

    Contains all top-level blocks plus the resolved footnote table, in
    first-definition order.

    """

    children: tuple[Block, ...]
    footnotes: tuple[FootnoteDefinition, ...] = ()

    def footnote(self, label: str) -> FootnoteDefinition | None:
        """Look up a footnote definition by label."""
        for definition in self.footnotes:
            if definition.label == label:
                return definition
        return None

    @property
    def footnote_map(self) -> dict[str, tuple[Inline, ...]]:
        """Footnote table as label -> inline content."""
        return {definition.label: definition.children for definition in self.footnotes}


# Type alias for block elements
Block: TypeAlias = (
    Heading
    | Paragraph
    | CodeBlock
    | MathBlock
    | HtmlBlock
    | BlockQuote
    | FootnoteDefinition
)
