"""
Position-Tracked Character Source
=================================

CharSource wraps a text stream and hands out one character at a time while
tracking the line and column of the most recently consumed character.

Position Rules
--------------
- The position starts at line 1, column 0 (nothing consumed yet).
- Reading a newline increments the line and resets the column to 0.
- Reading any other character increments the column.
- Reading at end of input returns "" and leaves the position unchanged.

Lookahead and Pushback
----------------------
peek() returns the next character without consuming it; it never moves the
position and never uses the pushback slot.

unread() returns exactly one consumed character to the source and rolls the
column back. The slot holds a single character: a second unread() before
the next read() raises PushbackError. A newline can never be unread, since
the width of the previous line is not retained. Readers terminate their
runs with peek(), so the only pushback in the scanner is the lone "/" that
turned out not to start a comment.

Example
-------
>>> src = CharSource.from_string("ab")
>>> src.read(), src.column
('a', 1)
>>> src.peek(), src.column
('b', 1)
>>> src.unread("a"); src.column
0
"""

import io
from typing import Optional, TextIO

from cscan.errors import PushbackError, SourceLocation


class CharSource:
    """
    Character stream with position tracking and one-character pushback.

    Each instance owns its own position state, so any number of sources
    can be scanned independently.

    Attributes:
        filename: Name of the source (for locations and diagnostics)
        line: Line of the most recently consumed character (1-indexed)
        column: Column of the most recently consumed character (0 before
            the first character of a line is consumed)
    """

    def __init__(self, stream: TextIO, filename: str = "<input>"):
        """
        Args:
            stream: Text stream to read from; read(1) must return "" at
                end of input
            filename: Name used in SourceLocation values
        """
        self._stream = stream
        self.filename = filename
        self.line = 1
        self.column = 0

        # Character returned by unread(), consumed again by the next read()
        self._pushback: Optional[str] = None

        # Character fetched by peek() but not yet consumed
        self._lookahead: Optional[str] = None

    @classmethod
    def from_string(cls, text: str, filename: str = "<input>") -> "CharSource":
        """Create a source over an in-memory string."""
        return cls(io.StringIO(text), filename)

    # =========================================================================
    # Character Access
    # =========================================================================

    def read(self) -> str:
        """
        Consume and return the next character ("" at end of input).

        Updates the line and column tracking.
        """
        if self._pushback is not None:
            char = self._pushback
            self._pushback = None
        elif self._lookahead is not None:
            char = self._lookahead
            self._lookahead = None
        else:
            char = self._stream.read(1)

        if char == "\n":
            self.line += 1
            self.column = 0
        elif char:
            self.column += 1

        return char

    def peek(self) -> str:
        """Return the next character without consuming it ("" at end of input)."""
        if self._pushback is not None:
            return self._pushback
        if self._lookahead is None:
            self._lookahead = self._stream.read(1)
        return self._lookahead

    def unread(self, char: str) -> None:
        """
        Push one consumed character back so the next read() returns it.

        Unreading "" (end of input) is a no-op.

        Raises:
            PushbackError: If the pushback slot is occupied or char is a newline
        """
        if not char:
            return

        if char == "\n":
            raise PushbackError(
                "cannot push back a newline",
                location=self.location,
                hint="terminate the run with peek() instead of read()/unread()",
            )

        if self._pushback is not None:
            raise PushbackError(
                f"pushback slot already holds {self._pushback!r}, cannot push back {char!r}",
                location=self.location,
            )

        self._pushback = char
        self.column -= 1

    def at_end(self) -> bool:
        """Check if the source is exhausted."""
        return self.peek() == ""

    # =========================================================================
    # Position
    # =========================================================================

    @property
    def location(self) -> SourceLocation:
        """Location of the most recently consumed character."""
        return SourceLocation(self.filename, self.line, self.column)

    @property
    def next_location(self) -> SourceLocation:
        """Location the next character will have once it is consumed."""
        return SourceLocation(self.filename, self.line, self.column + 1)

    def __repr__(self) -> str:
        return f"CharSource({self.filename!r}, {self.line}:{self.column})"
