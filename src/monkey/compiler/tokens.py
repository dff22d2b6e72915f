"""
Token definitions for the Monkey lexer.

This module defines every token type the Monkey front end recognizes and the
keyword table used to tell reserved words from identifiers.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from monkey.utils.errors import SourceLocation


class TokenType(Enum):
    """
    Enumeration of all token types in Monkey.

    Each member's value is the text used for it in diagnostics.
    """

    ILLEGAL = "ILLEGAL"  # character we don't know about
    EOF = "EOF"

    # Identifiers and literals
    IDENT = "IDENT"  # add, foobar, x, y
    INT = "INT"  # 1343456

    # Operators
    ASSIGN = "="
    PLUS = "+"

    # Delimiters
    COMMA = ","
    SEMICOLON = ";"

    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"

    # Keywords
    FUNCTION = "FUNCTION"
    LET = "LET"
    RETURN = "RETURN"

    def __str__(self) -> str:
        return self.value


# Mapping of keywords to token types
KEYWORDS: dict[str, TokenType] = {
    "fn": TokenType.FUNCTION,
    "let": TokenType.LET,
    "return": TokenType.RETURN,
}

# Single character operators and delimiters
SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "=": TokenType.ASSIGN,
    "+": TokenType.PLUS,
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
}


def lookup_ident(ident: str) -> TokenType:
    """
    Classify identifier-shaped text.

    Returns the keyword type when ``ident`` exactly matches a reserved word,
    otherwise ``TokenType.IDENT``.
    """
    return KEYWORDS.get(ident, TokenType.IDENT)


@dataclass(frozen=True, slots=True)
class Token:
    """
    Represents a single token from the source code.

    Two tokens are equal when their type and literal are equal; the location
    is carried along for diagnostics only.

    Attributes:
        type: The type of this token
        literal: The source text of this token
        location: Source location of this token, if known
    """

    type: TokenType
    literal: str
    location: Optional[SourceLocation] = field(default=None, compare=False)

    def __repr__(self) -> str:
        if self.location is not None:
            return f"Token({self.type.name}, {self.literal!r}, {self.location})"
        return f"Token({self.type.name}, {self.literal!r})"

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a reserved word."""
        return self.type in KEYWORDS.values()
