"""Footnote table, resolution and diagnostics."""

import logging

import pytest

from quire import DiagnosticKind, ParseConfig, parse
from quire.diagnostics import DiagnosticSink
from quire.footnotes import FootnoteTable, collect_references
from quire.location import SourceLocation
from quire.nodes import BlockQuote, FootnoteDefinition, Text


def _body(definition: FootnoteDefinition) -> str:
    return "".join(c.content for c in definition.children if isinstance(c, Text))


class TestResolution:
    """References bind to definitions anywhere in the document."""

    def test_definition_after_reference(self) -> None:
        result = parse("Claim.[^1]\n\n[^1]: The source.")
        assert result.ok
        assert _body(result.document.footnote("1")) == "The source."

    def test_definition_before_reference(self) -> None:
        result = parse("[^1]: The source.\n\nClaim.[^1]")
        assert result.ok

    def test_definitions_leave_no_block(self) -> None:
        result = parse("[^a]: one\n\n[^b]: two")
        assert result.document.children == ()
        assert [d.label for d in result.document.footnotes] == ["a", "b"]

    def test_footnote_map(self) -> None:
        doc = parse("x[^n]\n\n[^n]: *bold* note").document
        [emphasis, text] = doc.footnote_map["n"]
        assert emphasis.kind == "bold"
        assert text.content == " note"

    def test_reference_inside_quote(self) -> None:
        assert parse(">> quoted[^q]\n\n[^q]: def").ok

    def test_definition_inside_quote_is_global(self) -> None:
        result = parse(">> [^q]: inside\n\ntext[^q]")
        assert result.ok
        [quote, _] = result.document.children
        assert isinstance(quote, BlockQuote)
        assert quote.children == ()

    def test_reference_in_link_text(self) -> None:
        assert parse("[see[^a]](u)\n\n[^a]: x").ok

    def test_reference_inside_footnote_body(self) -> None:
        result = parse("x[^a]\n\n[^a]: see also[^b]\n[^b]: done")
        assert result.ok


class TestUnresolved:
    """References with no definition produce diagnostics."""

    def test_unresolved_reported(self) -> None:
        result = parse("See [^missing].")
        assert not result.ok
        [diagnostic] = result.diagnostics
        assert diagnostic.kind is DiagnosticKind.UNRESOLVED_FOOTNOTE
        assert diagnostic.label == "missing"
        assert diagnostic.location.lineno == 1

    def test_node_stays_in_tree(self) -> None:
        result = parse("See [^missing].")
        [para] = result.document.children
        assert [type(c).__name__ for c in para.children] == ["Text", "FootnoteReference", "Text"]

    def test_one_diagnostic_per_occurrence(self) -> None:
        result = parse("[^x] and [^x]\n\n# Head [^x]")
        unresolved = result.of_kind(DiagnosticKind.UNRESOLVED_FOOTNOTE)
        assert len(unresolved) == 3
        assert [d.location.lineno for d in unresolved] == [1, 1, 3]

    def test_unresolved_inside_definition(self) -> None:
        result = parse("x[^a]\n\n[^a]: see[^nope]")
        [diagnostic] = result.diagnostics
        assert diagnostic.label == "nope"

    def test_source_file_in_message(self) -> None:
        result = parse("[^gone]", source_file="post.md")
        assert str(result.diagnostics[0]).startswith("post.md:1:")

    def test_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="quire"):
            parse("[^gone]")
        assert any("unresolved-footnote" in r.getMessage() for r in caplog.records)


class TestDuplicates:
    """Duplicate labels follow the configured policy."""

    SOURCE = "x[^a]\n\n[^a]: one\n[^a]: two"

    def test_last_wins_by_default(self) -> None:
        result = parse(self.SOURCE)
        assert _body(result.document.footnote("a")) == "two"
        [diagnostic] = result.diagnostics
        assert diagnostic.kind is DiagnosticKind.DUPLICATE_FOOTNOTE
        assert diagnostic.location.lineno == 4

    def test_first_wins(self) -> None:
        result = parse(self.SOURCE, config=ParseConfig(duplicate_footnotes="first"))
        assert _body(result.document.footnote("a")) == "one"
        assert len(result.of_kind(DiagnosticKind.DUPLICATE_FOOTNOTE)) == 1

    def test_order_of_first_definition_kept(self) -> None:
        doc = parse("[^a]: 1\n[^b]: 2\n[^a]: 3").document
        assert [d.label for d in doc.footnotes] == ["a", "b"]


class TestContinuation:
    """Indented lines after a definition, when enabled."""

    SOURCE = "x[^a]\n\n[^a]: first\n    second\n\nafter"

    def test_disabled_by_default(self) -> None:
        result = parse(self.SOURCE)
        assert _body(result.document.footnote("a")) == "first"
        assert len(result.document.children) == 3

    def test_enabled(self) -> None:
        result = parse(self.SOURCE, config=ParseConfig(footnote_continuation=True))
        assert _body(result.document.footnote("a")) == "first\nsecond"
        assert len(result.document.children) == 2


class TestFootnoteTable:
    """The table on its own."""

    def _definition(self, label: str, lineno: int) -> FootnoteDefinition:
        return FootnoteDefinition(
            location=SourceLocation(lineno), label=label, children=()
        )

    def test_register_and_lookup(self) -> None:
        table = FootnoteTable(DiagnosticSink())
        table.register(self._definition("a", 1))
        assert "a" in table
        assert "b" not in table
        assert len(table) == 1
        assert table.get("a") is not None

    def test_duplicate_reported_to_sink(self) -> None:
        sink = DiagnosticSink()
        table = FootnoteTable(sink)
        table.register(self._definition("a", 1))
        table.register(self._definition("a", 5))
        assert len(sink) == 1
        assert table.get("a").location.lineno == 5

    def test_collect_references_from_document(self) -> None:
        doc = parse("a[^1] *b[^2]*\n\n[^1]: c[^3]").document
        assert [r.label for r in collect_references(doc)] == ["1", "2", "3"]
