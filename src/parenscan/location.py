"""Source spans for tokens.

Provides the Span dataclass: a half-open ``[start, end)`` range of absolute
offsets into the source string a token was read from.

Thread Safety:
Span is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open offset range into the source text.

    Offsets are 0-indexed positions in the source string. Since the lexer only
    accepts ASCII input, character offsets and byte offsets are the same.

    Attributes:
        start: Offset of the first character (inclusive)
        end: Offset after the last character (exclusive)

    Examples:
            >>> span = Span(2, 5)
            >>> str(span)
            '[2,5)'
            >>> span.extract("  one two  ")
            'one'
            >>> len(span)
            3

    """

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0:
            raise ValueError(f"Span start must be >= 0, got {self.start}")
        if self.start > self.end:
            raise ValueError(f"Span start {self.start} is after end {self.end}")

    def __str__(self) -> str:
        return f"[{self.start},{self.end})"

    def __len__(self) -> int:
        return self.end - self.start

    def extract(self, source: str) -> str:
        """Return the slice of source covered by this span."""
        return source[self.start : self.end]
