"""DocumentRenderer protocol: the interface output formats implement.

Quire ships no renderer of its own. HTML, PDF or terminal output live
outside the core and only need a ``render(document) -> str`` method.

Example:
    from quire.renderers.protocol import DocumentRenderer

    def render_post(renderer: DocumentRenderer, doc: Document) -> str:
        return renderer.render(doc)

"""

from typing import Protocol, runtime_checkable

from quire.nodes import Document


@runtime_checkable
class DocumentRenderer(Protocol):
    """Protocol for document renderers.

    Implementations accept a Document and return the rendered string. The
    document's footnote table is on ``document.footnotes``.

    """

    def render(self, document: Document) -> str:
        """Render a Document to a string.

        Args:
            document: The document tree to render.

        Returns:
            Rendered string output.

        """
        ...
