"""
Token Model
===========

Token kinds, the immutable Token record, the fixed keyword and operator
tables, and the bounded lexeme buffer used by the category readers.

Token Categories
----------------
| Kind            | Label      | Example          |
|-----------------|------------|------------------|
| KEYWORD         | KEYWORD    | while            |
| IDENTIFIER      | IDENTIFIER | count_1          |
| INTEGER_LITERAL | INT        | 42               |
| FLOAT_LITERAL   | FLOAT      | 3.14             |
| STRING_LITERAL  | STRING     | "a\\tb" (raw)     |
| CHAR_LITERAL    | CHAR       | '\\n' (raw)       |
| OPERATOR        | OPERATOR   | ==  ->  +        |
| SEPARATOR       | SEPARATOR  | ( ) { } [ ] ; ,  |
| UNKNOWN         | UNKNOWN    | @  #  $          |
| ERROR           | ERROR      | (diagnostic)     |
| END_OF_INPUT    | EOF        |                  |

Literal text is stored raw: escape sequences are kept exactly as written
in the source and never decoded.
"""

from dataclasses import dataclass
from enum import Enum, auto, unique
import string

from cscan.errors import SourceLocation


# =============================================================================
# Bounds
# =============================================================================

# Recorded text per token (the C-era 256-byte buffer minus its terminator)
MAX_LEXEME_LENGTH = 255

# Identifier display limit; longer identifiers are still consumed in full
MAX_IDENTIFIER_LENGTH = 64


# =============================================================================
# Token Kind Enumeration
# =============================================================================

@unique
class TokenKind(Enum):
    """Closed set of token classifications."""

    END_OF_INPUT = auto()
    KEYWORD = auto()
    IDENTIFIER = auto()
    INTEGER_LITERAL = auto()
    FLOAT_LITERAL = auto()
    STRING_LITERAL = auto()
    CHAR_LITERAL = auto()
    OPERATOR = auto()
    SEPARATOR = auto()
    UNKNOWN = auto()
    ERROR = auto()

    @property
    def label(self) -> str:
        """Short display name used in token listings."""
        return _LABELS[self]


_LABELS = {
    TokenKind.END_OF_INPUT: "EOF",
    TokenKind.KEYWORD: "KEYWORD",
    TokenKind.IDENTIFIER: "IDENTIFIER",
    TokenKind.INTEGER_LITERAL: "INT",
    TokenKind.FLOAT_LITERAL: "FLOAT",
    TokenKind.STRING_LITERAL: "STRING",
    TokenKind.CHAR_LITERAL: "CHAR",
    TokenKind.OPERATOR: "OPERATOR",
    TokenKind.SEPARATOR: "SEPARATOR",
    TokenKind.UNKNOWN: "UNKNOWN",
    TokenKind.ERROR: "ERROR",
}


# =============================================================================
# Fixed Tables
# =============================================================================

KEYWORDS: frozenset[str] = frozenset({
    "if", "else", "while", "for", "return",
    "int", "float", "char", "void",
    "break", "continue", "struct", "const",
})

# Shortest lexeme bound that still records every keyword in full
LONGEST_KEYWORD = max(map(len, KEYWORDS))

SEPARATORS: frozenset[str] = frozenset("(){}[];,")

TWO_CHAR_OPERATORS: frozenset[str] = frozenset({
    "==", "!=", "<=", ">=", "&&", "||", "++",
    "--", "+=", "-=", "*=", "/=", "%=", "->",
})

SINGLE_CHAR_OPERATORS: frozenset[str] = frozenset("+-*/%<>=!&|^~?:.")

# ASCII-only classification; non-ASCII letters are not identifier characters
IDENT_START = frozenset(string.ascii_letters + "_")
IDENT_CHARS = frozenset(string.ascii_letters + string.digits + "_")
DIGITS = frozenset(string.digits)
WHITESPACE = frozenset(" \t\n\r\v\f")


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single classified lexeme.

    Attributes:
        kind: The TokenKind classification
        text: The exact lexeme (possibly truncated). For ERROR tokens this
            is a human-readable diagnostic instead of a lexeme
        line: Line of the token's first character (1-indexed)
        column: Column of the token's first character (1-indexed)
    """
    kind: TokenKind
    text: str
    line: int
    column: int

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.text!r}, {self.line}:{self.column})"

    def location_in(self, filename: str = "<input>") -> SourceLocation:
        """Return a SourceLocation in the named file for error reporting."""
        return SourceLocation(filename, self.line, self.column)

    @property
    def is_error(self) -> bool:
        return self.kind is TokenKind.ERROR

    @property
    def is_terminal(self) -> bool:
        """True for tokens after which a consumer is expected to stop."""
        return self.kind in (TokenKind.END_OF_INPUT, TokenKind.ERROR)


# =============================================================================
# Lexeme Buffer
# =============================================================================

class LexemeBuffer:
    """
    Bounded scratch buffer for a single lexeme.

    Characters offered past the limit are dropped silently. The reader
    keeps consuming them from the source, so the stream position stays
    correct while only the recorded text is shortened.
    """

    def __init__(self, limit: int = MAX_LEXEME_LENGTH):
        self.limit = limit
        self._chars: list[str] = []
        self.dropped = 0

    def append(self, char: str, reserve: int = 0) -> None:
        """
        Record `char` if the buffer has room.

        Args:
            char: Character to record
            reserve: Slots to keep free; escape pairs reserve one so the
                backslash is never recorded without room to spare
        """
        if len(self._chars) < self.limit - reserve:
            self._chars.append(char)
        else:
            self.dropped += 1

    @property
    def truncated(self) -> bool:
        return self.dropped > 0

    def __len__(self) -> int:
        return len(self._chars)

    def getvalue(self) -> str:
        return "".join(self._chars)
