"""Parse result returned by quire.parse().

Bundles the immutable Document with the diagnostics recorded while
building it.
"""

from __future__ import annotations

from dataclasses import dataclass

from quire.diagnostics import Diagnostic, DiagnosticKind
from quire.nodes import Document


@dataclass(frozen=True, slots=True)
class ParseResult:
    """A complete Document plus a (possibly empty) list of diagnostics.

    Attributes:
        document: The parsed document tree
        diagnostics: Non-fatal findings, ordered by line

    """

    document: Document
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def ok(self) -> bool:
        """True when nothing was reported."""
        return not self.diagnostics

    def of_kind(self, kind: DiagnosticKind) -> tuple[Diagnostic, ...]:
        """Diagnostics of one kind."""
        return tuple(d for d in self.diagnostics if d.kind is kind)
