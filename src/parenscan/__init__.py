"""
parenscan — Tokenizer for a minimal parenthesized language

Turns ASCII source text into a lazy stream of OPEN_PAREN, CLOSE_PAREN and
IDENTIFIER tokens, each carrying its source slice and offset span.
Zero runtime dependencies.

Quick Start:
    >>> from parenscan import Lexer
    >>> for token in Lexer("(hello world)"):
    ...     print(token)
    Token(OPEN_PAREN, '(', [0,1))
    Token(IDENTIFIER, 'hello', [1,6))
    Token(IDENTIFIER, 'world', [7,12))

    >>> # Or collect everything at once
    >>> from parenscan import tokenize
    >>> [t.type.name for t in tokenize("()")]
    ['OPEN_PAREN', 'CLOSE_PAREN']

Installation:
    pip install parenscan
"""

from parenscan.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from parenscan.errors import NonAsciiInputError, ParenscanError
from parenscan.lexer import Lexer
from parenscan.location import Span
from parenscan.profiling import LexAccumulator, get_lex_accumulator, profiled_tokenize
from parenscan.tokens import Token, TokenType

__version__ = "0.1.0"


def tokenize(source: str, *, source_file: str | None = None) -> list[Token]:
    """Tokenize source into a list of tokens.

    Eager counterpart of iterating a Lexer. Records into the active
    LexAccumulator when called inside profiled_tokenize().

    Args:
        source: ASCII source text
        source_file: Optional source file path for error messages

    Returns:
        All tokens in source order

    Raises:
        NonAsciiInputError: If source contains a non-ASCII character.

    Example:
        >>> tokenize("(a b)")
        [Token(OPEN_PAREN, '(', [0,1)), Token(IDENTIFIER, 'a', [1,2)), Token(IDENTIFIER, 'b', [3,4))]
    """
    tokens = list(Lexer(source, source_file).tokenize())

    accumulator = get_lex_accumulator()
    if accumulator is not None:
        accumulator.record_tokenize(len(source), len(tokens))

    return tokens


__all__ = [
    # Core API
    "tokenize",
    "Lexer",
    "Token",
    "TokenType",
    "Span",
    # Errors
    "ParenscanError",
    "NonAsciiInputError",
    # Configuration
    "LexConfig",
    "get_lex_config",
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
    # Profiling
    "LexAccumulator",
    "get_lex_accumulator",
    "profiled_tokenize",
    "__version__",
]
