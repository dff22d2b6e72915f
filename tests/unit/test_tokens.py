"""
Unit tests for the Monkey token model.
"""

import pytest

from monkey.compiler.tokens import KEYWORDS, Token, TokenType, lookup_ident
from monkey.utils.errors import SourceLocation


class TestKeywordLookup:
    """Tests for identifier/keyword classification."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("let", TokenType.LET),
            ("fn", TokenType.FUNCTION),
            ("return", TokenType.RETURN),
        ],
    )
    def test_keywords(self, text, expected):
        """Reserved words map to their keyword types."""
        assert lookup_ident(text) == expected

    @pytest.mark.parametrize("text", ["Let", "LET", "lets", "fnx", "_let", "Return", "x", "five"])
    def test_non_keywords_are_identifiers(self, text):
        """Anything that is not an exact keyword is an identifier."""
        assert lookup_ident(text) == TokenType.IDENT

    def test_keyword_table_contents(self):
        """The keyword table only holds the reserved words."""
        assert set(KEYWORDS) == {"fn", "let", "return"}


class TestToken:
    """Tests for the Token value type."""

    def test_equality_by_type_and_literal(self):
        """Tokens compare by type and literal."""
        assert Token(TokenType.IDENT, "x") == Token(TokenType.IDENT, "x")
        assert Token(TokenType.IDENT, "x") != Token(TokenType.IDENT, "y")
        assert Token(TokenType.INT, "5") != Token(TokenType.IDENT, "5")

    def test_location_ignored_in_equality(self):
        """Two tokens at different positions are still equal."""
        a = Token(TokenType.LET, "let", SourceLocation(1, 1))
        b = Token(TokenType.LET, "let", SourceLocation(3, 7))
        assert a == b
        assert hash(a) == hash(b)

    def test_tokens_are_immutable(self):
        """Tokens cannot be modified after creation."""
        token = Token(TokenType.IDENT, "x")
        with pytest.raises(AttributeError):
            token.literal = "y"

    def test_type_display_strings(self):
        """Token types display as the text used in error messages."""
        assert str(TokenType.IDENT) == "IDENT"
        assert str(TokenType.ASSIGN) == "="
        assert str(TokenType.LET) == "LET"
        assert str(TokenType.SEMICOLON) == ";"

    def test_is_keyword(self):
        assert Token(TokenType.LET, "let").is_keyword
        assert not Token(TokenType.IDENT, "x").is_keyword
