"""Tests for the high-level Quire API."""

from quire.nodes import Document, Node, Text
from quire.visitor import BaseVisitor


class _PlainRenderer:
    """Concatenates every Text node; enough to exercise the renderer seam."""

    def render(self, document: Document) -> str:
        parts: list[str] = []

        class Collector(BaseVisitor[None]):
            def visit_text(self, node: Text) -> None:
                parts.append(node.content)

        Collector().visit(document)
        return "|".join(parts)


class TestParseFunction:
    """Tests for the parse() function."""

    def test_parse_heading(self) -> None:
        """Test parsing a heading."""
        from quire import Heading, parse

        result = parse("# Hello World")
        assert len(result.document.children) == 1
        assert isinstance(result.document.children[0], Heading)
        assert result.document.children[0].level == 1
        assert result.ok

    def test_parse_paragraph(self) -> None:
        """Test parsing a paragraph."""
        from quire import Paragraph, parse

        result = parse("Hello World")
        assert isinstance(result.document.children[0], Paragraph)

    def test_parse_with_source_file(self) -> None:
        """Locations carry the source file."""
        from quire import parse

        result = parse("# Test", source_file="test.md")
        assert result.document.location.source_file == "test.md"
        assert result.document.children[0].location.source_file == "test.md"

    def test_diagnostics_sorted_by_line(self) -> None:
        from quire import parse

        result = parse("[^b]\n\n[^a]: x\n[^a]: y")
        assert [d.location.lineno for d in result.diagnostics] == [1, 4]

    def test_document_nodes_are_hashable(self) -> None:
        from quire import parse

        doc = parse("# a\n\n>> *b*").document
        assert hash(doc) == hash(parse("# a\n\n>> *b*").document)


class TestMarkdownClass:
    """Tests for the Markdown class."""

    def test_call_renders(self) -> None:
        from quire import Markdown

        md = Markdown(renderer=_PlainRenderer())
        assert md("# Hello *World*") == "Hello |World"

    def test_parse_method(self) -> None:
        from quire import Markdown, ParseResult

        result = Markdown().parse("# Test", source_file="t.md")
        assert isinstance(result, ParseResult)
        assert result.document.location.source_file == "t.md"

    def test_parse_many(self) -> None:
        from quire import Markdown

        results = Markdown().parse_many(["# Post 1", "# Post 2", "x[^gone]"])
        assert len(results) == 3
        assert results[0].ok and results[1].ok
        assert not results[2].ok

    def test_renderer_protocol(self) -> None:
        from quire import DocumentRenderer

        assert isinstance(_PlainRenderer(), DocumentRenderer)
        assert not isinstance(object(), DocumentRenderer)


class TestLowLevelAPI:
    """Lexer and Parser are usable directly."""

    def test_lexer_tokens(self) -> None:
        from quire import Lexer, TokenType

        types = [t.type for t in Lexer("# a\n\nb").tokenize()]
        assert types == [
            TokenType.ATX_HEADING,
            TokenType.BLANK_LINE,
            TokenType.PARAGRAPH_LINE,
            TokenType.EOF,
        ]

    def test_parser_collects_footnotes(self) -> None:
        from quire import Parser

        parser = Parser("[^a]: x\n\nbody")
        blocks = parser.parse()
        assert len(blocks) == 1
        assert "a" in parser.footnotes


class TestExports:
    """Public names."""

    def test_all_names_importable(self) -> None:
        import quire

        for name in quire.__all__:
            assert hasattr(quire, name), name

    def test_version(self) -> None:
        import quire

        assert quire.__version__ == "0.1.0"

    def test_node_base_exported(self) -> None:
        import quire

        assert issubclass(quire.Heading, Node)
