"""
Monkey Lexer (Tokenizer).

Transforms Monkey source code into a stream of tokens. The parser only ever
asks for "the next token", so anything with a ``next_token()`` method can
stand in for the lexer; ``TokenStream`` does that for pre-built token lists.
"""

from typing import Iterable, Iterator, Optional, Protocol

from monkey.compiler.tokens import (
    SINGLE_CHAR_TOKENS,
    Token,
    TokenType,
    lookup_ident,
)
from monkey.utils.errors import SourceLocation


class TokenSource(Protocol):
    """Anything the parser can pull tokens from."""

    def next_token(self) -> Token:
        ...


class Lexer:
    """
    Tokenizer for Monkey source code.

    The lexer supports:
    - Identifiers and the keywords ``fn``, ``let`` and ``return``
    - Integer literals
    - Single character operators and delimiters (= + , ; ( ) { })

    Unknown characters become ILLEGAL tokens; the lexer never raises.
    Once the source is exhausted every call returns an EOF token.

    Usage:
        lexer = Lexer(source_code)
        tokens = lexer.tokenize()
        # or pull one at a time: lexer.next_token()
    """

    def __init__(self, source: str, filename: Optional[str] = None) -> None:
        """
        Initialize the lexer with source code.

        Args:
            source: The Monkey source code to tokenize
            filename: Optional filename for error reporting
        """
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: list[Token] = []

    @property
    def _current_char(self) -> Optional[str]:
        """Return the current character or None if at end."""
        if self.pos >= len(self.source):
            return None
        return self.source[self.pos]

    def _location(self) -> SourceLocation:
        """Create a SourceLocation for the current position."""
        return SourceLocation(
            line=self.line,
            column=self.column,
            offset=self.pos,
            filename=self.filename,
        )

    def _advance(self) -> str:
        """Consume and return the current character."""
        char = self.source[self.pos]
        self.pos += 1

        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        return char

    def _skip_whitespace(self) -> None:
        while self._current_char is not None and self._current_char in " \t\r\n":
            self._advance()

    def _read_while(self, predicate) -> str:
        chars: list[str] = []
        while self._current_char is not None and predicate(self._current_char):
            chars.append(self._advance())
        return "".join(chars)

    def _read_identifier_or_keyword(self) -> Token:
        """
        Read an identifier or keyword.

        Identifiers are runs of ASCII letters and underscores.
        """
        start_loc = self._location()
        identifier = self._read_while(_is_letter)
        return Token(lookup_ident(identifier), identifier, start_loc)

    def _read_number(self) -> Token:
        start_loc = self._location()
        digits = self._read_while(_is_digit)
        return Token(TokenType.INT, digits, start_loc)

    def next_token(self) -> Token:
        """
        Extract the next token from the source.

        Returns:
            The next token; EOF once the source is exhausted.
        """
        self._skip_whitespace()

        char = self._current_char
        if char is None:
            return Token(TokenType.EOF, "", self._location())

        if char in SINGLE_CHAR_TOKENS:
            loc = self._location()
            self._advance()
            return Token(SINGLE_CHAR_TOKENS[char], char, loc)

        if _is_letter(char):
            return self._read_identifier_or_keyword()

        if _is_digit(char):
            return self._read_number()

        loc = self._location()
        self._advance()
        return Token(TokenType.ILLEGAL, char, loc)

    def tokenize(self) -> list[Token]:
        """
        Tokenize the entire source code.

        Returns:
            A list of all tokens including the final EOF token.
        """
        self.tokens = []
        self.pos = 0
        self.line = 1
        self.column = 1

        while True:
            token = self.next_token()
            self.tokens.append(token)
            if token.type == TokenType.EOF:
                break

        return self.tokens

    def __iter__(self) -> Iterator[Token]:
        """Iterate over tokens (tokenizes on first use)."""
        if not self.tokens:
            self.tokenize()
        return iter(self.tokens)


class TokenStream:
    """
    Feed an already built sequence of tokens to the parser.

    Tokens are handed out in order; after the last one (or if the sequence
    never contained an EOF) an EOF token is returned on every call.
    """

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens = iter(tokens)
        self._exhausted = False

    def next_token(self) -> Token:
        if not self._exhausted:
            token = next(self._tokens, None)
            if token is not None:
                return token
            self._exhausted = True
        return Token(TokenType.EOF, "")


def _is_letter(char: str) -> bool:
    return ("a" <= char <= "z") or ("A" <= char <= "Z") or char == "_"


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def tokenize(source: str, filename: Optional[str] = None) -> list[Token]:
    """
    Convenience function to tokenize source code.

    Args:
        source: Monkey source code
        filename: Optional filename for error reporting

    Returns:
        List of tokens
    """
    return Lexer(source, filename).tokenize()
