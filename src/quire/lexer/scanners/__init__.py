"""Mode-specific scanners for the Quire lexer.

Each scanner is a mixin that provides scanning logic for a specific
lexer mode (BLOCK, CODE_FENCE, MATH_BLOCK, HTML_BLOCK).
"""

from __future__ import annotations

from quire.lexer.scanners.block import BlockScannerMixin
from quire.lexer.scanners.fence import FenceScannerMixin
from quire.lexer.scanners.html import HtmlScannerMixin
from quire.lexer.scanners.math import MathScannerMixin

__all__ = [
    "BlockScannerMixin",
    "FenceScannerMixin",
    "HtmlScannerMixin",
    "MathScannerMixin",
]
