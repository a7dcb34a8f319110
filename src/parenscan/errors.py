"""Exception classes for parenscan.

Provides standardized exceptions for error handling throughout parenscan.
"""

from __future__ import annotations


class ParenscanError(Exception):
    """Base exception for all parenscan errors.

    Subclass this for specific error categories.
    """

    pass


class NonAsciiInputError(ParenscanError):
    """Source text contains a character outside the ASCII range.

    Raised once, eagerly, when a Lexer is constructed. The lexer never
    produces tokens for such input.
    """

    def __init__(
        self,
        offset: int,
        char: str,
        source_file: str | None = None,
    ) -> None:
        """Initialize error with the first offending character.

        Args:
            offset: Offset of the first non-ASCII character (0-indexed)
            char: The offending character
            source_file: Path to source file (optional)
        """
        self.offset = offset
        self.char = char
        self.source_file = source_file

        location = f"{source_file}: " if source_file else ""
        super().__init__(
            f"{location}Lexer can only read ascii input "
            f"(found {char!r} U+{ord(char):04X} at offset {offset})"
        )
