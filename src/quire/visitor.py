"""AST Visitor and Transformer for Quire.

Provides a base visitor class with match-based dispatch and an immutable
transform function for rewriting frozen ASTs.

Example: collect all images

    class ImageCollector(BaseVisitor[None]):
        def __init__(self) -> None:
            self.images: list[Image] = []

        def visit_image(self, node: Image) -> None:
            self.images.append(node)

    collector = ImageCollector()
    collector.visit(result.document)

Example: shift heading levels

    def shift_headings(node: Node) -> Node:
        if isinstance(node, Heading):
            return dataclasses.replace(node, level=min(node.level + 1, 6))
        return node

    new_doc = transform(doc, shift_headings)

Walking a Document visits its blocks first, then its footnote definitions.

Thread Safety:
    Visitors may accumulate mutable state; create one per thread. The
    transform function is pure and safe to call from any thread.

"""

import dataclasses
from collections.abc import Callable
from typing import Generic, TypeVar

from quire.nodes import (
    BlockQuote,
    CodeBlock,
    CodeSpan,
    Document,
    Emphasis,
    EscapedLiteral,
    FootnoteDefinition,
    FootnoteReference,
    Heading,
    HtmlBlock,
    Image,
    Link,
    MathBlock,
    MathSpan,
    Node,
    Paragraph,
    Text,
)


T = TypeVar("T")


class BaseVisitor(Generic[T]):
    """Base AST visitor with match-based dispatch.

    Subclass and override ``visit_*`` methods for node types you care about.
    Unhandled node types fall through to ``visit_default``. Children are
    walked automatically after the ``visit_*`` call.

    Type parameter ``T`` is the return type of visit methods (use ``None``
    for side-effect-only visitors).

    """

    def visit(self, node: Node) -> T:
        """Dispatch to the appropriate ``visit_*`` method.

        Walks children automatically after the visit method returns.

        """
        result = self._dispatch(node)
        self._walk_children(node)
        return result

    def visit_default(self, node: Node) -> T:
        """Called for node types without a specific ``visit_*`` method."""
        return None  # type: ignore[return-value]

    # -- Block visitors --------------------------------------------------------

    def visit_document(self, node: Document) -> T:
        return self.visit_default(node)

    def visit_heading(self, node: Heading) -> T:
        return self.visit_default(node)

    def visit_paragraph(self, node: Paragraph) -> T:
        return self.visit_default(node)

    def visit_code_block(self, node: CodeBlock) -> T:
        return self.visit_default(node)

    def visit_math_block(self, node: MathBlock) -> T:
        return self.visit_default(node)

    def visit_html_block(self, node: HtmlBlock) -> T:
        return self.visit_default(node)

    def visit_block_quote(self, node: BlockQuote) -> T:
        return self.visit_default(node)

    def visit_footnote_definition(self, node: FootnoteDefinition) -> T:
        return self.visit_default(node)

    # -- Inline visitors -------------------------------------------------------

    def visit_text(self, node: Text) -> T:
        return self.visit_default(node)

    def visit_emphasis(self, node: Emphasis) -> T:
        return self.visit_default(node)

    def visit_code_span(self, node: CodeSpan) -> T:
        return self.visit_default(node)

    def visit_math_span(self, node: MathSpan) -> T:
        return self.visit_default(node)

    def visit_link(self, node: Link) -> T:
        return self.visit_default(node)

    def visit_image(self, node: Image) -> T:
        return self.visit_default(node)

    def visit_footnote_reference(self, node: FootnoteReference) -> T:
        return self.visit_default(node)

    def visit_escaped_literal(self, node: EscapedLiteral) -> T:
        return self.visit_default(node)

    # -- Internal dispatch -----------------------------------------------------

    def _dispatch(self, node: Node) -> T:
        """Match-based dispatch to visit_* methods."""
        match node:
            case Document():
                return self.visit_document(node)
            case Heading():
                return self.visit_heading(node)
            case Paragraph():
                return self.visit_paragraph(node)
            case CodeBlock():
                return self.visit_code_block(node)
            case MathBlock():
                return self.visit_math_block(node)
            case HtmlBlock():
                return self.visit_html_block(node)
            case BlockQuote():
                return self.visit_block_quote(node)
            case FootnoteDefinition():
                return self.visit_footnote_definition(node)
            case Text():
                return self.visit_text(node)
            case Emphasis():
                return self.visit_emphasis(node)
            case CodeSpan():
                return self.visit_code_span(node)
            case MathSpan():
                return self.visit_math_span(node)
            case Link():
                return self.visit_link(node)
            case Image():
                return self.visit_image(node)
            case FootnoteReference():
                return self.visit_footnote_reference(node)
            case EscapedLiteral():
                return self.visit_escaped_literal(node)
            case _:
                return self.visit_default(node)

    def _walk_children(self, node: Node) -> None:
        """Recursively visit child nodes."""
        match node:
            case Document(children=children, footnotes=footnotes):
                for child in children:
                    self.visit(child)
                for definition in footnotes:
                    self.visit(definition)
            case (
                Heading(children=children)
                | Paragraph(children=children)
                | BlockQuote(children=children)
                | FootnoteDefinition(children=children)
                | Emphasis(children=children)
                | Link(children=children)
            ):
                for child in children:
                    self.visit(child)
            case _:
                pass  # Leaf nodes: no children


def transform(doc: Document, fn: Callable[[Node], Node | None]) -> Document:
    """Apply a function to every node in the AST, returning a new tree.

    The function ``fn`` is called bottom-up: children are transformed first,
    then the parent is transformed with its new children.

    Return ``None`` from ``fn`` to remove a node from the tree. The root
    Document cannot be removed; returning None for it raises TypeError.

    Args:
        doc: The document to transform.
        fn: Function that receives a node and returns a (possibly new) node,
            or None to remove the node from the tree.

    Returns:
        A new Document with the transformation applied.

    """
    result = _transform_node(doc, fn)
    if result is None or not isinstance(result, Document):
        msg = "transform fn must return a Document for the root (cannot remove root)"
        raise TypeError(msg)
    return result


def _transform_node(node: Node, fn: Callable[[Node], Node | None]) -> Node | None:
    """Transform a single node bottom-up: children first, then self."""
    transformed = _transform_children(node, fn)
    return fn(transformed)


def _transform_children(node: Node, fn: Callable[[Node], Node | None]) -> Node:
    """Produce a new node with children transformed; filter out None (removed) nodes."""

    def _filtered(children: tuple[Node, ...]) -> tuple[Node, ...]:
        return tuple(
            result for c in children
            if (result := _transform_node(c, fn)) is not None
        )

    match node:
        case Document(children=children, footnotes=footnotes):
            new_children = _filtered(children)
            new_footnotes = _filtered(footnotes)
            if new_children != children or new_footnotes != footnotes:
                return dataclasses.replace(node, children=new_children, footnotes=new_footnotes)
        case (
            Heading(children=children)
            | Paragraph(children=children)
            | BlockQuote(children=children)
            | FootnoteDefinition(children=children)
            | Emphasis(children=children)
            | Link(children=children)
        ):
            new_children = _filtered(children)
            if new_children != children:
                return dataclasses.replace(node, children=new_children)
        case _:
            pass  # Leaf nodes: return as-is

    return node
