"""
Pytest configuration and shared fixtures for Monkey tests.
"""

import pytest

from monkey.compiler.ast_nodes import Program
from monkey.compiler.lexer import Lexer, TokenStream
from monkey.compiler.parser import Parser
from monkey.compiler.tokens import Token, TokenType


@pytest.fixture
def lexer_factory():
    """Factory fixture for creating lexers."""

    def _create_lexer(source: str, filename: str = "test.mk") -> Lexer:
        return Lexer(source, filename)

    return _create_lexer


@pytest.fixture
def parser_factory(lexer_factory):
    """Factory fixture for creating parsers from source."""

    def _create_parser(source: str, rich: bool = False) -> Parser:
        lexer = lexer_factory(source)
        if rich:
            return Parser(lexer, source=source, filename="test.mk")
        return Parser(lexer)

    return _create_parser


@pytest.fixture
def tokenize(lexer_factory):
    """Fixture to tokenize source code."""

    def _tokenize(source: str) -> list[Token]:
        return lexer_factory(source).tokenize()

    return _tokenize


@pytest.fixture
def parse(parser_factory):
    """Fixture to parse source code into AST."""

    def _parse(source: str) -> Program:
        return parser_factory(source).parse_program()

    return _parse


@pytest.fixture
def parse_with_errors(parser_factory):
    """Fixture returning both the AST and the recorded errors."""

    def _parse(source: str) -> tuple[Program, list[str]]:
        parser = parser_factory(source)
        program = parser.parse_program()
        return program, parser.errors()

    return _parse


@pytest.fixture
def parse_tokens():
    """Fixture to parse a hand-built token sequence."""

    def _parse(*pairs: tuple[TokenType, str]) -> tuple[Program, list[str]]:
        stream = TokenStream(Token(token_type, literal) for token_type, literal in pairs)
        parser = Parser(stream)
        program = parser.parse_program()
        return program, parser.errors()

    return _parse
