"""LexAccumulator: opt-in profiling for tokenization.

This module provides accumulated metrics while tokenizing:
- Total elapsed time
- Source length
- Token count

Zero overhead when disabled (get_lex_accumulator() returns None).

Example:
    from parenscan import tokenize
    from parenscan.profiling import profiled_tokenize

    with profiled_tokenize() as metrics:
        tokens = tokenize("(define x)")

    print(metrics.summary())
    # {"total_ms": 0.1, "source_length": 10, "token_count": 3, "tokenize_calls": 1}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class LexAccumulator:
    """Accumulated metrics during tokenization.

    Attributes:
        start_time: Profiling start timestamp.
        source_length: Total length of sources tokenized.
        token_count: Number of tokens produced.
        tokenize_calls: Number of tokenize() calls recorded.

    """

    start_time: float = field(default_factory=perf_counter)
    source_length: int = 0
    token_count: int = 0
    tokenize_calls: int = 0

    def record_tokenize(self, source_length: int, token_count: int) -> None:
        """Record a tokenize call."""
        self.tokenize_calls += 1
        self.source_length += source_length
        self.token_count += token_count

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of tokenize metrics.

        Returns:
            Dict with total_ms, source_length, token_count, tokenize_calls.

        """
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "source_length": self.source_length,
            "token_count": self.token_count,
            "tokenize_calls": self.tokenize_calls,
        }


_accumulator: ContextVar[LexAccumulator | None] = ContextVar(
    "lex_accumulator",
    default=None,
)


def get_lex_accumulator() -> LexAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_tokenize() -> Iterator[LexAccumulator]:
    """Context manager for profiled tokenization.

    Creates a LexAccumulator and makes it available via
    get_lex_accumulator() for the duration of the with block.

    Yields:
        LexAccumulator that will be populated during tokenize calls.

    """
    acc = LexAccumulator()
    token: Token[LexAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
