"""Renderer interface for Quire.

Renderers convert a Document into an output format. Only the protocol is
defined here; implementations are supplied by the caller.

"""

from quire.renderers.protocol import DocumentRenderer

__all__ = ["DocumentRenderer"]
