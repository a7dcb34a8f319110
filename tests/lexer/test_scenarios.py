"""Tests for token classification and span tracking on concrete inputs.

Spans are what downstream tools use for error messages and source mapping,
so these tests pin exact offsets, including the character skipped after
every identifier.
"""

from parenscan.lexer import Lexer
from parenscan.location import Span
from parenscan.tokens import TokenType


def _summary(source: str) -> list[tuple[TokenType, str, int, int]]:
    return [(t.type, t.value, t.start, t.end) for t in Lexer(source)]


class TestDelimiters:
    """Test parenthesis tokens."""

    def test_open_close(self) -> None:
        """Both delimiters are captured; delimiters advance by exactly one."""
        assert _summary("()") == [
            (TokenType.OPEN_PAREN, "(", 0, 1),
            (TokenType.CLOSE_PAREN, ")", 1, 2),
        ]

    def test_unbalanced_parens_are_tokenized(self) -> None:
        """No structural validation: stray delimiters are just tokens."""
        types = [t.type for t in Lexer("))(")]
        assert types == [
            TokenType.CLOSE_PAREN,
            TokenType.CLOSE_PAREN,
            TokenType.OPEN_PAREN,
        ]

    def test_delimiters_never_merge(self) -> None:
        """Adjacent delimiters are separate tokens."""
        tokens = list(Lexer("(("))
        assert [t.span for t in tokens] == [Span(0, 1), Span(1, 2)]


class TestIdentifiers:
    """Test identifier scanning and the skip after each identifier."""

    def test_identifier_swallows_close_paren(self) -> None:
        """The ')' right after an identifier is consumed without a token."""
        assert _summary("(a)") == [
            (TokenType.OPEN_PAREN, "(", 0, 1),
            (TokenType.IDENTIFIER, "a", 1, 2),
        ]

    def test_leading_and_trailing_spaces(self) -> None:
        """Spaces are skipped; the single space after 'one' is the skipped char."""
        assert _summary("  one two  ") == [
            (TokenType.IDENTIFIER, "one", 2, 5),
            (TokenType.IDENTIFIER, "two", 6, 9),
        ]

    def test_nested_expression(self) -> None:
        """Spaced-out expression produces every token."""
        assert _summary("  ( one two )  ") == [
            (TokenType.OPEN_PAREN, "(", 2, 3),
            (TokenType.IDENTIFIER, "one", 4, 7),
            (TokenType.IDENTIFIER, "two", 8, 11),
            (TokenType.CLOSE_PAREN, ")", 12, 13),
        ]

    def test_digit_terminates_identifier(self) -> None:
        """Digits end an identifier and the first one is skipped."""
        assert _summary("ab12") == [
            (TokenType.IDENTIFIER, "ab", 0, 2),
            (TokenType.IDENTIFIER, "", 3, 3),
        ]

    def test_underscore_terminates_identifier(self) -> None:
        """Underscore ends an identifier and is the skipped character."""
        tokens = list(Lexer("foo_bar"))
        assert [t.value for t in tokens] == ["foo", "bar"]
        assert tokens[1].span == Span(4, 7)

    def test_mixed_case_letters(self) -> None:
        """Upper and lower case letters both belong to identifiers."""
        (token,) = Lexer("HelloWorld")
        assert token.name == "HelloWorld"
        assert token.span == Span(0, 10)

    def test_identifier_at_end_of_input(self) -> None:
        """An identifier running to the end leaves the cursor at len(source)."""
        lexer = Lexer("abc")
        token = lexer.next_token()
        assert token is not None
        assert token.span == Span(0, 3)
        assert lexer.offset == 3
        assert lexer.next_token() is None


class TestEmptyIdentifiers:
    """Test zero-length identifiers on unclassifiable characters."""

    def test_tab_is_not_whitespace(self) -> None:
        """A tab starts an empty identifier, and is itself the skipped char."""
        assert _summary("\t(") == [
            (TokenType.IDENTIFIER, "", 0, 0),
            (TokenType.OPEN_PAREN, "(", 1, 2),
        ]

    def test_newline_is_not_whitespace(self) -> None:
        """Newlines are not skipped either."""
        tokens = list(Lexer("\nx"))
        assert tokens[0].type == TokenType.IDENTIFIER
        assert tokens[0].name == ""
        assert tokens[1].name == "x"

    def test_punctuation_only(self) -> None:
        """Each empty identifier consumes the character it stopped on."""
        tokens = list(Lexer("!?"))
        assert [t.span for t in tokens] == [Span(0, 0), Span(1, 1)]
        assert all(t.name == "" for t in tokens)

    def test_empty_name_is_not_none(self) -> None:
        """An empty identifier has name '' rather than None."""
        (token,) = Lexer("1")
        assert token.type is TokenType.IDENTIFIER
        assert token.name == ""


class TestEndOfInput:
    """Test the end-of-sequence conditions."""

    def test_empty_source(self) -> None:
        """Empty source yields nothing on the first call."""
        assert Lexer("").next_token() is None

    def test_spaces_only(self) -> None:
        """Skipping spaces to the end yields nothing."""
        lexer = Lexer("    ")
        assert lexer.next_token() is None
        assert lexer.offset == 4

    def test_trailing_spaces_end_sequence(self) -> None:
        """Trailing spaces after the last token end the sequence."""
        lexer = Lexer("( ")
        assert lexer.next_token() is not None
        assert lexer.next_token() is None
        assert lexer.next_token() is None
