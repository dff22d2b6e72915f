"""
Monkey Utilities Package.

Common utilities for error handling, source locations, and diagnostics.
"""

from monkey.utils.diagnostics import (
    Diagnostic,
    DiagnosticEmitter,
    ErrorCode,
    SourceSpan,
    create_unexpected_token_diagnostic,
)
from monkey.utils.errors import (
    MonkeyError,
    ParserError,
    SourceLocation,
)

__all__ = [
    # Errors
    "MonkeyError",
    "ParserError",
    "SourceLocation",
    # Diagnostics
    "ErrorCode",
    "SourceSpan",
    "Diagnostic",
    "DiagnosticEmitter",
    "create_unexpected_token_diagnostic",
]
