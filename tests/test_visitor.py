"""Tests for the AST visitor and transform utilities."""

import dataclasses

import pytest

from quire import parse
from quire.location import SourceLocation
from quire.nodes import (
    BlockQuote,
    Document,
    Emphasis,
    FootnoteDefinition,
    FootnoteReference,
    Heading,
    Image,
    Node,
    Paragraph,
    Text,
)
from quire.visitor import BaseVisitor, transform

LOC = SourceLocation(lineno=1, col_offset=1)


def _doc(*blocks) -> Document:  # type: ignore[no-untyped-def]
    return Document(location=LOC, children=tuple(blocks))


def _text(content: str) -> Text:
    return Text(location=LOC, content=content)


# =============================================================================
# Visitor dispatch tests
# =============================================================================


class _TypeCollector(BaseVisitor[None]):
    def __init__(self) -> None:
        self.names: list[str] = []

    def visit_default(self, node: Node) -> None:
        self.names.append(type(node).__name__)


class TestVisitorDispatch:
    """Each node type reaches its visit_* method."""

    def test_walk_order(self) -> None:
        doc = parse("# *Hi*\n\n>> quoted [link](u)").document
        collector = _TypeCollector()
        collector.visit(doc)
        assert collector.names == [
            "Document",
            "Heading",
            "Emphasis",
            "Text",
            "BlockQuote",
            "Paragraph",
            "Text",
            "Link",
            "Text",
        ]

    def test_footnotes_visited_after_blocks(self) -> None:
        doc = parse("a[^n]\n\n[^n]: body").document
        collector = _TypeCollector()
        collector.visit(doc)
        assert collector.names[-2:] == ["FootnoteDefinition", "Text"]

    def test_override_replaces_default(self) -> None:
        """Children are still walked after an overridden visit_* method."""
        class HeadingOnly(_TypeCollector):
            def visit_heading(self, node: Heading) -> None:
                self.names.append("heading!")

        collector = HeadingOnly()
        collector.visit(parse("# *deep*").document)
        assert collector.names == ["Document", "heading!", "Emphasis", "Text"]

    def test_image_collector(self) -> None:
        class ImageCollector(BaseVisitor[None]):
            def __init__(self) -> None:
                self.targets: list[str] = []

            def visit_image(self, node: Image) -> None:
                self.targets.append(node.target)

        collector = ImageCollector()
        collector.visit(parse("![a](1.png) and *![b](2.png)*\n\n>> ![c](3.png)").document)
        assert collector.targets == ["1.png", "2.png", "3.png"]


# =============================================================================
# Transform tests
# =============================================================================


class TestTransform:
    """transform() rebuilds frozen trees bottom-up."""

    def test_identity_returns_equal_tree(self) -> None:
        doc = parse("# a\n\n>> b *c*").document
        assert transform(doc, lambda node: node) == doc

    def test_shift_headings(self) -> None:
        def shift(node: Node) -> Node:
            if isinstance(node, Heading):
                return dataclasses.replace(node, level=min(node.level + 1, 6))
            return node

        doc = transform(parse("# one\n\n###### six").document, shift)
        assert [h.level for h in doc.children] == [2, 6]

    def test_remove_nodes(self) -> None:
        def drop_emphasis(node: Node) -> Node | None:
            return None if isinstance(node, Emphasis) else node

        doc = transform(parse("keep *drop* keep").document, drop_emphasis)
        [para] = doc.children
        assert [c.content for c in para.children] == ["keep ", " keep"]

    def test_footnotes_transformed(self) -> None:
        def upper(node: Node) -> Node:
            if isinstance(node, Text):
                return dataclasses.replace(node, content=node.content.upper())
            return node

        doc = transform(parse("a[^n]\n\n[^n]: quiet").document, upper)
        assert doc.footnote_map["n"][0].content == "QUIET"

    def test_remove_definitions(self) -> None:
        def drop(node: Node) -> Node | None:
            return None if isinstance(node, FootnoteDefinition) else node

        doc = transform(parse("a[^n]\n\n[^n]: x").document, drop)
        assert doc.footnotes == ()

    def test_nested_quote(self) -> None:
        def strip_refs(node: Node) -> Node | None:
            return None if isinstance(node, FootnoteReference) else node

        doc = transform(parse(">> a[^x] b").document, strip_refs)
        [quote] = doc.children
        assert isinstance(quote, BlockQuote)
        [para] = quote.children
        assert isinstance(para, Paragraph)
        assert all(isinstance(c, Text) for c in para.children)

    def test_cannot_remove_root(self) -> None:
        with pytest.raises(TypeError, match="root"):
            transform(_doc(), lambda node: None)

    def test_original_untouched(self) -> None:
        doc = _doc(Paragraph(location=LOC, children=(_text("x"),)))
        transform(doc, lambda node: None if isinstance(node, Text) else node)
        assert doc.children[0].children == (_text("x"),)
