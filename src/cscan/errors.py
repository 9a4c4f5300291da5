"""
cscan Error Hierarchy
=====================

This module defines the exception hierarchy for cscan. All exceptions
inherit from CScanError, allowing callers to catch every scanner-related
error with a single except clause if desired.

Malformed source text is NOT reported through exceptions. The scanner
turns unterminated or invalid literals into ERROR tokens and leaves the
decision to stop (or resynchronize) to the caller. Exceptions are reserved
for contract violations and for consumers that opt into strict mode.

Exception Hierarchy
-------------------
CScanError (base)
├── PushbackError - CharSource pushback contract violated
├── LexicalError - strict-mode wrapper around an ERROR token
└── ConfigurationError - invalid scan options

Error Message Format
--------------------
    filename:line:column: error: description
        source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from cscan.tokens import Token


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Base Exception Class
# =============================================================================

class CScanError(Exception):
    """
    Base exception for all cscan errors.

    Provides common formatting for error messages including source
    location tracking, source line context and an optional hint.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The actual source text at the error location (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            main.c:3:9: error: unterminated string literal
                s = "hello
                    ^
            hint: add a closing '"' before the end of the line
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


# =============================================================================
# Scanner Exceptions
# =============================================================================

class PushbackError(CScanError):
    """
    The single-slot pushback contract of CharSource was violated.

    Raised when a second character is pushed back before the first one
    was read again, or when a newline is pushed back (the width of the
    previous line is not retained, so the position cannot be restored).
    This always indicates a bug in the calling reader, never bad input.
    """
    pass


class LexicalError(CScanError):
    """
    Malformed literal in the source, raised only in strict mode.

    The scanner itself produces ERROR tokens; consumers that prefer
    exceptions convert them with LexicalError.from_token() (or
    Lexer.raise_for_error()).

    Attributes:
        token: The ERROR token this exception was built from
    """

    HINTS = {
        "Unterminated string literal": "add a closing '\"' to complete the string",
        "Unterminated string literal (newline in literal)":
            "strings cannot span lines; close the string or escape the newline",
        "Unterminated char literal": "add a closing \"'\" to complete the character literal",
        "Invalid/unterminated char literal":
            "character literals can only contain a single character",
    }

    def __init__(
        self,
        token: "Token",
        filename: str = "<input>",
        source_line: Optional[str] = None,
    ):
        self.token = token
        super().__init__(
            token.text[:1].lower() + token.text[1:],
            location=token.location_in(filename),
            hint=self.HINTS.get(token.text),
            source_line=source_line,
        )

    @classmethod
    def from_token(
        cls,
        token: "Token",
        filename: str = "<input>",
        source_text: Optional[str] = None,
    ) -> "LexicalError":
        """
        Build a LexicalError from an ERROR token.

        Args:
            token: The ERROR token
            filename: Source name used in the location prefix
            source_text: Complete source, used to quote the offending line
        """
        source_line = None
        if source_text is not None:
            lines = source_text.splitlines()
            if 0 < token.line <= len(lines):
                source_line = lines[token.line - 1]
        return cls(token, filename, source_line)


class ConfigurationError(CScanError):
    """
    Invalid scanner configuration.

    Raised by ScanOptions when a bound is not a positive integer, when the
    identifier bound exceeds the lexeme bound, when the lexeme bound is
    shorter than the longest keyword, or when an environment
    variable cannot be parsed.
    """
    pass
