"""Lexer for the parenscan parenthesized language.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer
├── core.py              # Lexer class (cursor + scanning rules)
└── charsets.py          # Character classification sets

Usage:
    >>> from parenscan.lexer import Lexer
    >>> for token in Lexer("(one two)"):
    ...     print(token)
Token(OPEN_PAREN, '(', [0,1))
Token(IDENTIFIER, 'one', [1,4))
Token(IDENTIFIER, 'two', [5,8))

"""

from parenscan.lexer.core import Lexer

__all__ = ["Lexer"]
