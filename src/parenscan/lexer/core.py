"""Pull-based lexer for a minimal parenthesized language.

Each call to next_token() looks at the current character only, emits at
most one token and moves the cursor forward. There is no lookahead beyond
the current character and no backtracking, so a full scan is O(n).

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from parenscan.config import LexConfig, get_lex_config
from parenscan.errors import NonAsciiInputError
from parenscan.lexer.charsets import (
    DELIMITERS,
    IDENTIFIER_CHARS,
    OPEN_PAREN,
    SPACE,
)
from parenscan.location import Span
from parenscan.tokens import Token, TokenType
from parenscan.utils.logger import get_logger

logger = get_logger(__name__)


class Lexer:
    """Lexer producing OPEN_PAREN, CLOSE_PAREN and IDENTIFIER tokens.

    The lexer keeps a reference to the caller's string and never copies or
    modifies it; every token value is a slice of that string. Tokens are
    produced lazily, one per call.

    Scanning rules, applied on every call:
    1. At or past the end of source: no token (and none ever again)
    2. Skip plain spaces; reaching the end yields no token
    3. ``(`` or ``)`` emits a one-character delimiter token
    4. Otherwise scan a run of ASCII letters (possibly empty) and emit an
       IDENTIFIER, then skip the character right after it

    Usage:
            >>> lexer = Lexer("  ( one two )  ")
            >>> for token in lexer:
            ...     print(token)
        Token(OPEN_PAREN, '(', [2,3))
        Token(IDENTIFIER, 'one', [4,7))
        Token(IDENTIFIER, 'two', [8,11))
        Token(CLOSE_PAREN, ')', [12,13))

    Thread Safety:
        Lexer instances are single-use. Create one per source string.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source) to avoid repeated calls
        "_pos",
        "_source_file",
        "_skip_after_identifier",
    )

    def __init__(
        self,
        source: str,
        source_file: str | None = None,
        *,
        config: LexConfig | None = None,
    ) -> None:
        """Initialize lexer with source text.

        Args:
            source: Source text; must be ASCII only
            source_file: Optional source file path for error messages
            config: Lexer configuration (defaults to the active context config)

        Raises:
            NonAsciiInputError: If source contains a non-ASCII character.
        """
        if config is None:
            config = get_lex_config()
        if source_file is None:
            source_file = config.source_file

        if not source.isascii():
            offset, char = next(
                (i, ch) for i, ch in enumerate(source) if ord(ch) > 0x7F
            )
            logger.debug("Rejecting non-ASCII source: %r at offset %d", char, offset)
            raise NonAsciiInputError(offset, char, source_file)

        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._source_file = source_file
        self._skip_after_identifier = config.skip_after_identifier

    @property
    def source(self) -> str:
        """The source text being scanned."""
        return self._source

    @property
    def source_file(self) -> str | None:
        """Source file path used in error messages, if any."""
        return self._source_file

    @property
    def offset(self) -> int:
        """Current cursor position, ``0 <= offset <= len(source)``."""
        return self._pos

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token

    def tokenize(self) -> Iterator[Token]:
        """Tokenize the remaining source into a token stream.

        Yields:
            Token objects one at a time

        Memory: O(1) iterator (tokens yielded, not accumulated)
        """
        while (token := self.next_token()) is not None:
            yield token

    def next_token(self) -> Token | None:
        """Produce the next token, or None at end of input.

        Once None is returned, every later call returns None as well.
        """
        source = self._source
        source_len = self._source_len
        pos = self._pos

        if pos >= source_len:
            return None

        while source[pos] == SPACE:
            pos += 1
            if pos >= source_len:
                self._pos = pos
                return None

        char = source[pos]
        if char in DELIMITERS:
            token_type = (
                TokenType.OPEN_PAREN if char == OPEN_PAREN else TokenType.CLOSE_PAREN
            )
            self._pos = pos + 1
            return self._make_token(token_type, pos, pos + 1)

        end = pos
        while end < source_len and source[end] in IDENTIFIER_CHARS:
            end += 1

        self._pos = self._identifier_resume(pos, end)
        return self._make_token(TokenType.IDENTIFIER, pos, end)

    def _identifier_resume(self, start: int, end: int) -> int:
        """Compute the cursor position after an identifier at [start, end).

        The character after the identifier is skipped unconditionally unless
        skip_after_identifier is disabled. An empty identifier always advances
        by one so scanning makes progress.
        """
        if not self._skip_after_identifier and end > start:
            return end

        if end < self._source_len:
            skipped = self._source[end]
            if skipped != SPACE:
                logger.debug(
                    "Identifier at %d swallowed %r at offset %d", start, skipped, end
                )
        return min(end + 1, self._source_len)

    def _make_token(self, token_type: TokenType, start: int, end: int) -> Token:
        return Token(
            type=token_type,
            value=self._source[start:end],
            span=Span(start, end),
        )
