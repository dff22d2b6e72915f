"""
Error types and source location tracking for the Monkey front end.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Attributes:
        line: 1-indexed line number
        column: 1-indexed column number
        offset: 0-indexed character offset from start of source
        filename: Optional filename for error reporting
    """

    line: int
    column: int
    offset: int = 0
    filename: Optional[str] = None

    def __str__(self) -> str:
        if self.filename:
            return f"{self.filename}:{self.line}:{self.column}"
        return f"{self.line}:{self.column}"


class MonkeyError(Exception):
    """Base exception for all Monkey front-end errors."""

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ) -> None:
        self.message = message
        self.location = location
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        text = self.message
        if self.location is None:
            return text

        text = f"[{self.location}] {text}"
        if self.source_line:
            # Caret under the offending column
            padding = " " * (4 + self.location.column - 1)
            text += f"\n    {self.source_line}\n{padding}^"
        return text


class ParserError(MonkeyError):
    """
    Raised when a parse recorded syntax errors and the caller asked for
    strict handling.

    The parser itself never raises this; it only accumulates messages.
    """

    def __init__(
        self,
        errors: list[str],
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ) -> None:
        self.errors = list(errors)
        count = len(self.errors)
        noun = "error" if count == 1 else "errors"
        message = f"{count} syntax {noun}: " + "; ".join(self.errors)
        super().__init__(message, location, source_line)
