"""
Abstract Syntax Tree (AST) node definitions for Monkey.

Each node is immutable and keeps the token that introduced it, so later
passes can point diagnostics at the right place in the source.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

from monkey.compiler.tokens import Token
from monkey.utils.errors import SourceLocation


class ASTNode(ABC):
    """Base class for all AST nodes."""

    @abstractmethod
    def token_literal(self) -> str:
        """Literal text of the token this node was built from."""

    @abstractmethod
    def accept(self, visitor: "ASTVisitor") -> Any:
        """Accept a visitor for tree traversal."""


class ASTVisitor(ABC):
    """
    Visitor pattern base class for AST traversal.

    Implement this to write passes over the tree (name collectors,
    checkers, printers, ...).
    """

    def visit(self, node: ASTNode) -> Any:
        """Dispatch to the appropriate visit method."""
        return node.accept(self)


class Statement(ASTNode):
    """Base class for all statements."""

    token: Token

    @property
    def location(self) -> Optional[SourceLocation]:
        return self.token.location

    def token_literal(self) -> str:
        return self.token.literal


class Expression(ASTNode):
    """Base class for all expressions."""

    token: Token

    @property
    def location(self) -> Optional[SourceLocation]:
        return self.token.location

    def token_literal(self) -> str:
        return self.token.literal


# -----------------------------------------------------------------------------
# Expressions
# -----------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Identifier(Expression):
    """
    An identifier.

    Example:
        x, five, add_one
    """

    token: Token
    value: str

    def accept(self, visitor: "ASTVisitor") -> Any:
        return visitor.visit_identifier(self)


# -----------------------------------------------------------------------------
# Statements
# -----------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class LetStatement(Statement):
    """
    A binding statement.

    Example:
        let five = 5;

    The bound value is not parsed yet, so ``value`` is always None.
    """

    token: Token
    name: Identifier
    value: Optional[Expression] = None

    def accept(self, visitor: "ASTVisitor") -> Any:
        return visitor.visit_let_statement(self)


@dataclass(frozen=True, slots=True)
class ReturnStatement(Statement):
    """
    A return statement.

    Example:
        return 5;
    """

    token: Token
    return_value: Optional[Expression] = None

    def accept(self, visitor: "ASTVisitor") -> Any:
        return visitor.visit_return_statement(self)


# -----------------------------------------------------------------------------
# Program
# -----------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Program(ASTNode):
    """
    The root node of a Monkey program.

    Contains all top-level statements in source order.
    """

    statements: tuple[Statement, ...] = ()

    def token_literal(self) -> str:
        if self.statements:
            return self.statements[0].token_literal()
        return ""

    def accept(self, visitor: "ASTVisitor") -> Any:
        return visitor.visit_program(self)


# -----------------------------------------------------------------------------
# Visitor with default implementations
# -----------------------------------------------------------------------------


class BaseASTVisitor(ASTVisitor):
    """
    Base visitor with default implementations that traverse children.

    Subclass this and override specific visit_* methods as needed.
    """

    def visit_program(self, node: Program) -> Any:
        for stmt in node.statements:
            self.visit(stmt)

    def visit_let_statement(self, node: LetStatement) -> Any:
        self.visit(node.name)
        if node.value is not None:
            self.visit(node.value)

    def visit_return_statement(self, node: ReturnStatement) -> Any:
        if node.return_value is not None:
            self.visit(node.return_value)

    def visit_identifier(self, node: Identifier) -> Any:
        pass
