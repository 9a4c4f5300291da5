"""
Category Readers
================

One reader per token family. The driver (cscan.lexer.next_token) picks a
reader from a single lookahead character; from then on only that reader
consumes characters for the current token.

Every reader:
- captures the start position before consuming anything,
- records text through a bounded LexemeBuffer,
- ends maximal runs with peek(), so no newline is ever pushed back,
- reports malformed literals as ERROR tokens positioned at the literal's
  first character, never by raising.
"""

import logging
from typing import Optional

from cscan.config import DEFAULT_OPTIONS, ScanOptions
from cscan.source import CharSource
from cscan.tokens import (
    DIGITS,
    IDENT_CHARS,
    KEYWORDS,
    SEPARATORS,
    SINGLE_CHAR_OPERATORS,
    TWO_CHAR_OPERATORS,
    LexemeBuffer,
    Token,
    TokenKind,
)

logger = logging.getLogger(__name__)


# Diagnostic texts carried by ERROR tokens
UNTERMINATED_STRING = "Unterminated string literal"
NEWLINE_IN_STRING = "Unterminated string literal (newline in literal)"
UNTERMINATED_CHAR = "Unterminated char literal"
INVALID_CHAR = "Invalid/unterminated char literal"


def _start(source: CharSource) -> tuple[int, int]:
    """Position of the character about to be consumed."""
    return source.line, source.column + 1


def _error(message: str, line: int, column: int) -> Token:
    logger.debug("error token at %d:%d: %s", line, column, message)
    return Token(TokenKind.ERROR, message, line, column)


# =============================================================================
# Identifiers and Keywords
# =============================================================================

def read_identifier(source: CharSource, options: Optional[ScanOptions] = None) -> Token:
    """
    Read an identifier or keyword.

    Consumes the maximal run of letters, digits and underscores. Keyword
    membership is decided on the full run; identifiers longer than
    options.max_identifier_length keep only their leading characters in
    the recorded text.
    """
    options = options or DEFAULT_OPTIONS
    line, column = _start(source)

    buf = LexemeBuffer(options.max_lexeme_length)
    while source.peek() in IDENT_CHARS:
        buf.append(source.read())

    name = buf.getvalue()
    if name in KEYWORDS:
        return Token(TokenKind.KEYWORD, name, line, column)

    if len(name) > options.max_identifier_length or buf.truncated:
        logger.debug(
            "identifier at %d:%d truncated to %d characters",
            line, column, options.max_identifier_length,
        )
        name = name[:options.max_identifier_length]

    return Token(TokenKind.IDENTIFIER, name, line, column)


# =============================================================================
# Numbers
# =============================================================================

def _read_digits(source: CharSource, buf: LexemeBuffer) -> None:
    while source.peek() in DIGITS:
        buf.append(source.read())


def read_number(source: CharSource, options: Optional[ScanOptions] = None) -> Token:
    """
    Read an integer or floating-point literal.

    A digit run followed by "." and an optional second digit run is a
    FLOAT_LITERAL ("1." included); a plain digit run is an
    INTEGER_LITERAL. No range or format validation is performed.
    """
    options = options or DEFAULT_OPTIONS
    line, column = _start(source)

    buf = LexemeBuffer(options.max_lexeme_length)
    _read_digits(source, buf)

    kind = TokenKind.INTEGER_LITERAL
    if source.peek() == ".":
        kind = TokenKind.FLOAT_LITERAL
        buf.append(source.read())
        _read_digits(source, buf)

    return Token(kind, buf.getvalue(), line, column)


# =============================================================================
# String Literals
# =============================================================================

def read_string(source: CharSource, options: Optional[ScanOptions] = None) -> Token:
    """
    Read a double-quoted string literal.

    The recorded text is the raw interior: a backslash and the character
    after it are copied verbatim. An escaped newline is part of the
    literal; an unescaped one ends it with an error.
    """
    options = options or DEFAULT_OPTIONS
    line, column = _start(source)
    source.read()  # consume opening "

    buf = LexemeBuffer(options.max_lexeme_length)
    while True:
        char = source.read()

        if char == "":
            return _error(UNTERMINATED_STRING, line, column)

        if char == '"':
            return Token(TokenKind.STRING_LITERAL, buf.getvalue(), line, column)

        if char == "\n":
            return _error(NEWLINE_IN_STRING, line, column)

        if char == "\\":
            buf.append(char, reserve=1)
            escaped = source.read()
            if escaped == "":
                return _error(UNTERMINATED_STRING, line, column)
            buf.append(escaped, reserve=1)
        else:
            buf.append(char)


# =============================================================================
# Character Literals
# =============================================================================

def read_char(source: CharSource, options: Optional[ScanOptions] = None) -> Token:
    """
    Read a single-quoted character literal.

    Exactly one character, or a raw two-character escape, must sit
    between the quotes.
    """
    options = options or DEFAULT_OPTIONS
    line, column = _start(source)
    source.read()  # consume opening '

    buf = LexemeBuffer(options.max_lexeme_length)

    char = source.read()
    if char in ("", "\n"):
        return _error(UNTERMINATED_CHAR, line, column)

    if char == "\\":
        buf.append(char, reserve=1)
        escaped = source.read()
        if escaped in ("", "\n"):
            return _error(UNTERMINATED_CHAR, line, column)
        buf.append(escaped, reserve=1)
    else:
        buf.append(char)

    if source.read() != "'":
        return _error(INVALID_CHAR, line, column)

    return Token(TokenKind.CHAR_LITERAL, buf.getvalue(), line, column)


# =============================================================================
# Operators and Separators
# =============================================================================

def read_operator(source: CharSource, options: Optional[ScanOptions] = None) -> Token:
    """
    Read a separator, an operator, or an unknown character.

    Separators are always a single character. Two-character operators
    take precedence over their one-character prefixes ("==" is never two
    "=" tokens); the second character is only consumed on a match.
    """
    line, column = _start(source)
    first = source.read()

    if first in SEPARATORS:
        return Token(TokenKind.SEPARATOR, first, line, column)

    pair = first + source.peek()
    if pair in TWO_CHAR_OPERATORS:
        source.read()
        return Token(TokenKind.OPERATOR, pair, line, column)

    if first in SINGLE_CHAR_OPERATORS:
        return Token(TokenKind.OPERATOR, first, line, column)

    logger.debug("unknown character %r at %d:%d", first, line, column)
    return Token(TokenKind.UNKNOWN, first, line, column)
