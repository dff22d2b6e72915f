"""
Monkey Parser.

A recursive descent parser that turns a token stream into an Abstract Syntax
Tree. It looks one token ahead (current + peek), records grammar violations
as messages instead of raising, and keeps going until the end of input.

Only statement structure is parsed for now: the value after ``let x =`` or
``return`` is skipped up to the terminating semicolon.
"""

import logging
from typing import Optional

from monkey.compiler.ast_nodes import (
    Identifier,
    LetStatement,
    Program,
    ReturnStatement,
    Statement,
)
from monkey.compiler.lexer import TokenSource
from monkey.compiler.tokens import Token, TokenType
from monkey.utils.diagnostics import (
    Diagnostic,
    DiagnosticEmitter,
    SourceSpan,
    create_unexpected_token_diagnostic,
)

logger = logging.getLogger("monkey.parser")


class Parser:
    """
    Recursive descent parser for Monkey.

    Usage:
        parser = Parser(Lexer(source))
        program = parser.parse_program()
        if parser.errors():
            ...
    """

    def __init__(
        self,
        scanner: TokenSource,
        source: str = "",
        filename: str = "<input>",
    ) -> None:
        """
        Initialize the parser and fill the lookahead window.

        Args:
            scanner: Token source, usually a Lexer
            source: Optional source code for rich diagnostics
            filename: Optional filename for error reporting
        """
        self._scanner = scanner
        self._source = source
        self._filename = filename
        self._errors: list[str] = []
        self._emitter: Optional[DiagnosticEmitter] = None

        if source:
            self._emitter = DiagnosticEmitter(source, filename)

        # Read two tokens, so cur_token and peek_token are both set
        self.cur_token: Token = Token(TokenType.EOF, "")
        self.peek_token: Token = Token(TokenType.EOF, "")
        self.next_token()
        self.next_token()

    def next_token(self) -> None:
        """Shift the window by one token."""
        self.cur_token = self.peek_token
        self.peek_token = self._scanner.next_token()

    def errors(self) -> list[str]:
        """All lookahead mismatches recorded so far, in order."""
        return list(self._errors)

    def get_diagnostics(self) -> list[Diagnostic]:
        """Rich diagnostics recorded so far, in order."""
        if self._emitter is None:
            return []
        return list(self._emitter.diagnostics)

    def render_diagnostics(self, use_color: bool = True) -> str:
        """Render all diagnostics as formatted strings."""
        if self._emitter:
            return self._emitter.render_all(use_color)
        return ""

    # -------------------------------------------------------------------------
    # Program Parsing
    # -------------------------------------------------------------------------

    def parse_program(self) -> Program:
        """
        Parse the entire program.

        A statement that fails to parse contributes no node; its error is
        recorded and parsing resumes with the next token.

        Returns:
            The root Program AST node.
        """
        statements: list[Statement] = []

        while not self._cur_token_is(TokenType.EOF):
            stmt = self._parse_statement()
            if stmt is not None:
                statements.append(stmt)
            self.next_token()

        return Program(tuple(statements))

    # -------------------------------------------------------------------------
    # Statement Parsing
    # -------------------------------------------------------------------------

    def _parse_statement(self) -> Optional[Statement]:
        """Parse a single statement, or return None if none starts here."""
        if self._cur_token_is(TokenType.LET):
            return self._parse_let_statement()
        if self._cur_token_is(TokenType.RETURN):
            return self._parse_return_statement()

        logger.debug("skipping %r: not a statement start", self.cur_token)
        return None

    def _parse_let_statement(self) -> Optional[LetStatement]:
        """
        Parse ``let <identifier> = <value>;``.

        Returns None when the identifier or the ``=`` is missing.
        """
        token = self.cur_token

        if not self._expect_peek(TokenType.IDENT):
            return None

        name = Identifier(token=self.cur_token, value=self.cur_token.literal)

        if not self._expect_peek(TokenType.ASSIGN):
            return None

        # TODO: parse the value expression once the expression grammar exists
        self._skip_to_terminator()

        return LetStatement(token=token, name=name)

    def _parse_return_statement(self) -> ReturnStatement:
        """Parse ``return <value>;``."""
        token = self.cur_token

        self.next_token()
        self._skip_to_terminator()

        return ReturnStatement(token=token)

    def _skip_to_terminator(self) -> None:
        """Advance until the current token is a semicolon or end of input."""
        while not self._cur_token_is(TokenType.SEMICOLON) and not self._cur_token_is(
            TokenType.EOF
        ):
            self.next_token()

    # -------------------------------------------------------------------------
    # Lookahead helpers
    # -------------------------------------------------------------------------

    def _cur_token_is(self, token_type: TokenType) -> bool:
        return self.cur_token.type == token_type

    def _peek_token_is(self, token_type: TokenType) -> bool:
        return self.peek_token.type == token_type

    def _expect_peek(self, token_type: TokenType) -> bool:
        """
        Advance if the peek token has the expected type.

        On a mismatch the error is recorded and the window is left as is;
        the caller abandons its statement.
        """
        if self._peek_token_is(token_type):
            self.next_token()
            return True
        self._peek_error(token_type)
        return False

    def _peek_error(self, token_type: TokenType) -> None:
        msg = (
            f"expected next token to be {token_type.value}, "
            f"got {self.peek_token.type.value} instead"
        )
        self._errors.append(msg)
        logger.debug("%s (at %s)", msg, self.peek_token.location or "<unknown>")

        if self._emitter is not None:
            self._unexpected_token_diagnostic(token_type, msg)

    def _unexpected_token_diagnostic(self, expected: TokenType, message: str) -> Diagnostic:
        token = self.peek_token
        if token.location is not None:
            span = SourceSpan.from_location(
                token.location.line,
                token.location.column,
                len(token.literal) or 1,
                self._filename,
            )
        else:
            # Tokens without positions are pinned to the current token, or to 1:1
            anchor = self.cur_token.location
            line = anchor.line if anchor else 1
            column = anchor.column if anchor else 1
            span = SourceSpan.from_location(line, column, 1, self._filename)

        found = "end of file" if token.type == TokenType.EOF else token.literal
        return create_unexpected_token_diagnostic(
            self._emitter,
            message,
            expected.value,
            found,
            span,
        )
