"""
Monkey - the syntactic front end of a small programming language.

Turns Monkey source into tokens and tokens into an abstract syntax tree,
collecting grammar errors instead of stopping at the first one.
"""

from monkey.compiler import ParseResult, parse_file, parse_source
from monkey.compiler.lexer import Lexer
from monkey.compiler.parser import Parser

__version__ = "0.1.0"
__all__ = [
    "parse_source",
    "parse_file",
    "ParseResult",
    "Lexer",
    "Parser",
]
