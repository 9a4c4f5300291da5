"""
cscan - Lexical Scanner for a C-like Language
=============================================

This package converts source text into a stream of classified,
position-tagged tokens, as the front end of a compiler or static-analysis
tool.

Main Components
---------------
- **source**: CharSource, a character stream with line/column tracking,
  one-character pushback and non-consuming lookahead
- **lexer**: trivia skipping, the next_token driver, Lexer and tokenize()
- **readers**: one reader per token family (identifiers and keywords,
  numbers, strings, characters, operators and separators)
- **tokens**: TokenKind, Token, keyword and operator tables
- **report**: token listings and compiler-style diagnostics

Quick Start
-----------
    >>> from cscan import tokenize
    >>> [t.text for t in tokenize("a == b")]
    ['a', '==', 'b', 'EOF']

Or use the command-line tool:
    $ cscan hello.c
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from cscan.config import ScanOptions
from cscan.errors import (
    CScanError,
    ConfigurationError,
    LexicalError,
    PushbackError,
    SourceLocation,
)
from cscan.lexer import Lexer, next_token, skip_trivia, tokenize
from cscan.report import format_diagnostic, format_listing, format_token
from cscan.source import CharSource
from cscan.tokens import (
    KEYWORDS,
    MAX_IDENTIFIER_LENGTH,
    MAX_LEXEME_LENGTH,
    Token,
    TokenKind,
)

__all__ = [
    "__version__",
    # Scanning
    "CharSource",
    "Lexer",
    "next_token",
    "skip_trivia",
    "tokenize",
    # Token model
    "Token",
    "TokenKind",
    "KEYWORDS",
    "MAX_IDENTIFIER_LENGTH",
    "MAX_LEXEME_LENGTH",
    # Configuration
    "ScanOptions",
    # Presentation
    "format_diagnostic",
    "format_listing",
    "format_token",
    # Errors
    "CScanError",
    "ConfigurationError",
    "LexicalError",
    "PushbackError",
    "SourceLocation",
]
