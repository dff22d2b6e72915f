"""
Rust-like rich diagnostics for the Monkey parser.

Turns the parser's lookahead mismatches into readable reports with source
context and a hint about what was expected.

Example output:
    error[E0201]: expected next token to be IDENT, got = instead
      --> example.mk:1:5
       |
     1 | let = 5;
       |     ^ expected IDENT
       |
       = help: insert a IDENT before '='
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

_RED = "\033[91m"
_BLUE = "\033[94m"
_GREEN = "\033[92m"
_BOLD = "\033[1m"
_RESET = "\033[0m"


class ErrorCode:
    """Error codes for Monkey diagnostics (E02xx: syntax errors)."""

    E0201 = "E0201"  # unexpected token


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """
    A run of characters on one source line.

    Attributes:
        start_line: 1-indexed line number
        start_col: 1-indexed starting column
        end_col: 1-indexed ending column (exclusive)
        filename: Filename for display
    """

    start_line: int
    start_col: int
    end_col: int
    filename: str = "<input>"

    @classmethod
    def from_location(
        cls, line: int, col: int, length: int = 1, filename: str = "<input>"
    ) -> "SourceSpan":
        return cls(line, col, col + length, filename)

    def __str__(self) -> str:
        return f"{self.filename}:{self.start_line}:{self.start_col}"

    @property
    def length(self) -> int:
        return max(1, self.end_col - self.start_col)


@dataclass
class Diagnostic:
    """
    One syntax error with the span it points at.

    Attributes:
        code: Error code (e.g., "E0201")
        message: The main diagnostic message
        span: Where the offending token sits, if known
        label: Text shown next to the underline
        helps: Help lines shown under the snippet
    """

    code: str
    message: str
    span: Optional[SourceSpan] = None
    label: str = ""
    helps: list[str] = field(default_factory=list)

    def render(self, source_code: str, use_color: bool = True) -> str:
        """
        Render this diagnostic as a multi-line report.

        Args:
            source_code: The original source code for context
            use_color: Whether to use ANSI color codes
        """
        red, blue, green, bold, reset = (
            (_RED, _BLUE, _GREEN, _BOLD, _RESET) if use_color else ("",) * 5
        )
        gutter = f"   {blue}|{reset}"

        out = [f"{red}{bold}error[{self.code}]{reset}: {bold}{self.message}{reset}"]

        if self.span is not None:
            out.append(f"  {blue}-->{reset} {self.span}")
            source_lines = source_code.splitlines()
            if 1 <= self.span.start_line <= len(source_lines):
                marker = " " * (self.span.start_col - 1) + "^" * self.span.length
                if self.label:
                    marker += f" {self.label}"
                out += [
                    gutter,
                    f"{blue}{self.span.start_line:3} |{reset} "
                    f"{source_lines[self.span.start_line - 1]}",
                    f"{gutter} {red}{marker}{reset}",
                    gutter,
                ]

        out += [f"   {blue}={reset} {green}help:{reset} {text}" for text in self.helps]
        return "\n".join(out)


class DiagnosticEmitter:
    """
    Collects and renders diagnostics for one source file.

    Usage:
        emitter = DiagnosticEmitter(source, "example.mk")
        emitter.error(ErrorCode.E0201, "expected ...", span)
        print(emitter.render_all(use_color=False))
    """

    def __init__(self, source: str, filename: str = "<input>") -> None:
        self.source = source
        self.filename = filename
        self.diagnostics: list[Diagnostic] = []

    def error(
        self,
        code: str,
        message: str,
        span: Optional[SourceSpan] = None,
        label: str = "",
        helps: Optional[list[str]] = None,
    ) -> Diagnostic:
        """Record an error diagnostic and return it."""
        diagnostic = Diagnostic(code, message, span, label, list(helps or []))
        self.diagnostics.append(diagnostic)
        return diagnostic

    def render_all(self, use_color: bool = True) -> str:
        """Render all diagnostics as a single string."""
        return "\n\n".join(d.render(self.source, use_color) for d in self.diagnostics)


def create_unexpected_token_diagnostic(
    emitter: DiagnosticEmitter,
    message: str,
    expected: str,
    found: str,
    span: SourceSpan,
) -> Diagnostic:
    """Record a diagnostic for a token that did not match the expected one."""
    if found == "end of file":
        hint = f"the input ended before a {expected} was found"
    else:
        hint = f"insert a {expected} before '{found}'"
    return emitter.error(ErrorCode.E0201, message, span, f"expected {expected}", [hint])


__all__ = [
    "ErrorCode",
    "SourceSpan",
    "Diagnostic",
    "DiagnosticEmitter",
    "create_unexpected_token_diagnostic",
]
