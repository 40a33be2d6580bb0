"""Footnote table and resolution pass.

Definitions are registered into a per-parse FootnoteTable while blocks are
assembled (including definitions inside block quotes). Once the whole tree
exists, resolve_footnotes() walks every inline sequence and checks each
FootnoteReference label against the table. Because resolution runs after
assembly, references may appear before their definitions.

Thread Safety:
A FootnoteTable belongs to exactly one parse. It is created when the parse
starts and discarded when the Document is returned.

"""

from __future__ import annotations

from collections.abc import Iterable

from quire.config import get_parse_config
from quire.diagnostics import DiagnosticKind, DiagnosticSink
from quire.nodes import Block, Document, FootnoteDefinition, FootnoteReference
from quire.visitor import BaseVisitor


class FootnoteTable:
    """Label -> definition mapping for one parse.

    Duplicate labels are resolved by ParseConfig.duplicate_footnotes
    ("last" wins by default). Every duplicate is reported to the sink.
    Iteration order is the order in which labels were first defined.

    """

    __slots__ = ("_definitions", "_sink")

    def __init__(self, sink: DiagnosticSink) -> None:
        self._definitions: dict[str, FootnoteDefinition] = {}
        self._sink = sink

    def register(self, definition: FootnoteDefinition) -> None:
        """Add a definition, applying the duplicate-label policy."""
        label = definition.label
        existing = self._definitions.get(label)
        if existing is None:
            self._definitions[label] = definition
            return

        policy = get_parse_config().duplicate_footnotes
        self._sink.report(
            DiagnosticKind.DUPLICATE_FOOTNOTE,
            f"footnote [^{label}] already defined at line {existing.location.lineno}; "
            f"keeping the {policy} definition",
            definition.location,
            label=label,
        )
        if policy == "last":
            self._definitions[label] = definition

    def get(self, label: str) -> FootnoteDefinition | None:
        return self._definitions.get(label)

    def __contains__(self, label: object) -> bool:
        return label in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)

    def definitions(self) -> tuple[FootnoteDefinition, ...]:
        """Registered definitions in first-definition order."""
        return tuple(self._definitions.values())


class _ReferenceCollector(BaseVisitor[None]):
    """Collects every FootnoteReference reachable from the visited nodes."""

    def __init__(self) -> None:
        self.references: list[FootnoteReference] = []

    def visit_footnote_reference(self, node: FootnoteReference) -> None:
        self.references.append(node)


def collect_references(nodes: Iterable[Block] | Document) -> list[FootnoteReference]:
    """All footnote references in document order.

    Accepts a Document (blocks, then footnote bodies) or any iterable of
    blocks. Nested quotes, links and emphasis are searched too.
    """
    collector = _ReferenceCollector()
    if isinstance(nodes, Document):
        collector.visit(nodes)
    else:
        for node in nodes:
            collector.visit(node)
    return collector.references


def resolve_footnotes(
    blocks: Iterable[Block],
    table: FootnoteTable,
    sink: DiagnosticSink,
) -> tuple[FootnoteReference, ...]:
    """Bind references to definitions and report the ones with no match.

    References in footnote bodies are checked as well. Nothing is removed
    from the tree: an unresolved reference stays in place and only a
    diagnostic is recorded for it.

    Args:
        blocks: Top-level blocks of the document
        table: Definitions registered during block assembly
        sink: Receives UNRESOLVED_FOOTNOTE diagnostics

    Returns:
        The references that did not resolve, in document order.
    """
    references = collect_references(blocks)
    references.extend(collect_references(table.definitions()))

    unresolved: list[FootnoteReference] = []
    for reference in references:
        if reference.label in table:
            continue
        unresolved.append(reference)
        sink.report(
            DiagnosticKind.UNRESOLVED_FOOTNOTE,
            f"footnote [^{reference.label}] is referenced but never defined",
            reference.location,
            label=reference.label,
        )
    return tuple(unresolved)
