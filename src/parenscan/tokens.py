"""Token and TokenType definitions for the parenscan lexer.

The lexer produces a stream of Token objects. Each Token has a type,
the raw source slice it was read from, and its span in the source.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from dataclasses import dataclass
from enum import Enum, auto

from parenscan.location import Span


class TokenType(Enum):
    """Token types produced by the lexer.

    The set is closed: consumers match on these three members only.

    """

    OPEN_PAREN = auto()  # (
    CLOSE_PAREN = auto()  # )
    IDENTIFIER = auto()  # run of ASCII letters, possibly empty


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        value: The exact slice of source this token was read from.
            Always equal to ``source[span.start:span.end]``.
        span: Half-open offsets of the token in the source

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.

    """

    type: TokenType
    value: str
    span: Span

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self.span})"

    @property
    def name(self) -> str | None:
        """Identifier text, or None for delimiter tokens.

        An identifier's name may be the empty string when the lexer hit a
        character that is neither a letter nor a delimiter.
        """
        if self.type is TokenType.IDENTIFIER:
            return self.value
        return None

    @property
    def start(self) -> int:
        """Start offset (convenience accessor)."""
        return self.span.start

    @property
    def end(self) -> int:
        """End offset (convenience accessor)."""
        return self.span.end
