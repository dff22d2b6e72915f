"""
Monkey Compiler Package.

This package contains the front-end components:
- Tokens: Token types and the keyword table
- Lexer: Tokenizes Monkey source code
- Parser: Produces an Abstract Syntax Tree from tokens
- AST: Node definitions for the syntax tree
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

from monkey.compiler.ast_nodes import (
    ASTNode,
    ASTVisitor,
    BaseASTVisitor,
    Expression,
    Identifier,
    LetStatement,
    Program,
    ReturnStatement,
    Statement,
)
from monkey.compiler.lexer import Lexer, TokenSource, TokenStream, tokenize
from monkey.compiler.parser import Parser
from monkey.compiler.tokens import KEYWORDS, Token, TokenType, lookup_ident
from monkey.utils.diagnostics import Diagnostic
from monkey.utils.errors import ParserError, SourceLocation

logger = logging.getLogger("monkey.compiler")


@dataclass
class ParseResult:
    """
    Outcome of parsing one source text.

    Attributes:
        program: The parsed program (always present, possibly partial)
        errors: Lookahead mismatch messages, in the order they were found
        diagnostics: Rich versions of the same errors
        source: The source that was parsed
        filename: Name used in locations
    """

    program: Program
    errors: list[str] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)
    source: str = ""
    filename: str = "<input>"

    @property
    def success(self) -> bool:
        """True when no errors were recorded."""
        return not self.errors

    def render_diagnostics(self, use_color: bool = True) -> str:
        return "\n\n".join(d.render(self.source, use_color) for d in self.diagnostics)


def parse_source(source: str, filename: str = "<input>", strict: bool = False) -> ParseResult:
    """
    Tokenize and parse Monkey source code.

    Args:
        source: Monkey source code string
        filename: Name used in token locations and diagnostics
        strict: Raise ParserError instead of returning a result with errors

    Returns:
        A ParseResult holding the program and any recorded errors

    Raises:
        ParserError: If strict is set and the parse recorded errors
    """
    parser = Parser(Lexer(source, filename), source=source, filename=filename)
    program = parser.parse_program()
    errors = parser.errors()

    logger.debug(
        "parsed %s: %d statement(s), %d error(s)",
        filename,
        len(program.statements),
        len(errors),
    )

    if strict and errors:
        location = None
        source_line = None
        diagnostics = parser.get_diagnostics()
        span = diagnostics[0].span if diagnostics else None
        if span is not None:
            location = SourceLocation(span.start_line, span.start_col, filename=filename)
            lines = source.splitlines()
            if 1 <= span.start_line <= len(lines):
                source_line = lines[span.start_line - 1]
        raise ParserError(errors, location, source_line)

    return ParseResult(
        program=program,
        errors=errors,
        diagnostics=list(parser.get_diagnostics()),
        source=source,
        filename=filename,
    )


def parse_file(filepath: Union[str, Path], strict: bool = False) -> ParseResult:
    """
    Parse a Monkey source file.

    Args:
        filepath: Path to the source file
        strict: Raise ParserError instead of returning a result with errors

    Returns:
        A ParseResult for the file's contents
    """
    path = Path(filepath)
    source = path.read_text(encoding="utf-8")
    return parse_source(source, filename=str(path), strict=strict)


__all__ = [
    # Pipeline
    "ParseResult",
    "parse_source",
    "parse_file",
    # Tokens
    "KEYWORDS",
    "Token",
    "TokenType",
    "lookup_ident",
    # Lexer
    "Lexer",
    "TokenSource",
    "TokenStream",
    "tokenize",
    # Parser
    "Parser",
    # AST
    "ASTNode",
    "ASTVisitor",
    "BaseASTVisitor",
    "Expression",
    "Identifier",
    "LetStatement",
    "Program",
    "ReturnStatement",
    "Statement",
]
