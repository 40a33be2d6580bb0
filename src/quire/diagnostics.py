"""Non-fatal diagnostics attached to a parse result.

Parsing never fails on malformed Markdown. Semantic problems that a caller
may want to act on (a reference to an undefined footnote, a label defined
twice) are recorded here instead. The caller decides whether they are
warnings or hard failures.

Thread Safety:
Diagnostic is frozen. DiagnosticSink is per-parse state and is never
shared between parses.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from quire.location import SourceLocation
from quire.utils.logger import get_logger

logger = get_logger(__name__)


class DiagnosticKind(Enum):
    """Kinds of semantic diagnostics."""

    UNRESOLVED_FOOTNOTE = "unresolved-footnote"
    DUPLICATE_FOOTNOTE = "duplicate-footnote"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A single non-fatal finding.

    Attributes:
        kind: What was found
        message: Human-readable description
        location: Where it was found
        label: Footnote label involved, if any

    """

    kind: DiagnosticKind
    message: str
    location: SourceLocation
    label: str | None = None

    def __str__(self) -> str:
        return f"{self.location}: {self.kind.value}: {self.message}"


@dataclass(slots=True)
class DiagnosticSink:
    """Collects diagnostics during one parse.

    Sub-parsers for block quotes share their parent's sink so every
    diagnostic ends up on the same result.

    """

    diagnostics: list[Diagnostic] = field(default_factory=list)

    def report(
        self,
        kind: DiagnosticKind,
        message: str,
        location: SourceLocation,
        *,
        label: str | None = None,
    ) -> Diagnostic:
        """Record a diagnostic and return it."""
        diagnostic = Diagnostic(kind=kind, message=message, location=location, label=label)
        self.diagnostics.append(diagnostic)
        logger.debug("%s", diagnostic)
        return diagnostic

    def freeze(self) -> tuple[Diagnostic, ...]:
        """Diagnostics sorted by line, for the final result."""
        return tuple(sorted(self.diagnostics, key=lambda d: d.location.lineno))

    def __len__(self) -> int:
        return len(self.diagnostics)
