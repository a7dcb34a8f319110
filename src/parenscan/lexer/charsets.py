"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Usage:
    from parenscan.lexer.charsets import IDENTIFIER_CHARS

    if char in IDENTIFIER_CHARS:
        ...
"""

import string

# Only the plain space separates tokens; tabs and newlines do not.
SPACE = " "

OPEN_PAREN = "("
CLOSE_PAREN = ")"
DELIMITERS: frozenset[str] = frozenset(OPEN_PAREN + CLOSE_PAREN)

# Identifiers are ASCII letters only: no digits, underscores or punctuation.
IDENTIFIER_CHARS: frozenset[str] = frozenset(string.ascii_letters)
