"""Line-classifying state-machine lexer for the Quire parser.

The lexer reads one line at a time, classifies it, then commits. Each
line is looked at once, so tokenizing is O(n).

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, LexerMode
├── core.py              # Lexer class (mixin composition + navigation)
├── modes.py             # LexerMode enum, syntax constants
├── classifiers/         # Block-type classification mixins
│   ├── comment.py       # HTML comment stripping
│   ├── heading.py       # ATX heading (blank-line guard)
│   ├── fence.py         # Fenced code
│   ├── math.py          # \\[ ... \\] display math
│   ├── html.py          # HTML blocks
│   ├── quote.py         # >> block quotes
│   └── footnote.py      # Footnote definitions
└── scanners/            # Mode-specific scanners
    ├── block.py         # Block mode (main dispatch)
    ├── fence.py         # Code fence mode
    ├── math.py          # Math block mode
    └── html.py          # HTML block mode

Usage:
    >>> from quire.lexer import Lexer
    >>> for token in Lexer("# Hello\\n\\nWorld").tokenize():
    ...     print(token)

"""

from quire.lexer.core import Lexer
from quire.lexer.modes import LexerMode

__all__ = ["Lexer", "LexerMode"]
