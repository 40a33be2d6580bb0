"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Usage:
    from quire.parsing.charsets import ASCII_PUNCTUATION

    if char in ASCII_PUNCTUATION:  # O(1) lookup
        ...
"""

# Characters a backslash can escape
ASCII_PUNCTUATION: frozenset[str] = frozenset("!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~")

WHITESPACE: frozenset[str] = frozenset(" \t\n\r\f\v")

# Emphasis delimiters: * is bold, _ is italic
EMPHASIS_CHARS: frozenset[str] = frozenset("*_")

# Characters that may start an inline construct; everything else is text
INLINE_SPECIAL: frozenset[str] = frozenset("\\`$![*_")


def is_whitespace(char: str) -> bool:
    """Whitespace check that treats the empty string (a boundary) as space."""
    return not char or char in WHITESPACE
