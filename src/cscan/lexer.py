"""
cscan Lexer (Tokenizer)
=======================

This module drives the scan: it elides trivia (whitespace and comments),
looks at one character, and dispatches to exactly one category reader.

Comments
--------
- Single-line: // comment (runs to end of line or end of input)
- Multi-line: /* comment */ (an unterminated one runs to end of input
  and is not an error)

Termination
-----------
The token stream ends with an END_OF_INPUT token, or with an ERROR token
for an unterminated or invalid literal. Malformed input never raises.

Example Usage
-------------
>>> from cscan.lexer import tokenize
>>> for token in tokenize("int x = 10;"):
...     print(token)
Token(KEYWORD, 'int', 1:1)
Token(IDENTIFIER, 'x', 1:5)
Token(OPERATOR, '=', 1:7)
Token(INTEGER_LITERAL, '10', 1:9)
Token(SEPARATOR, ';', 1:11)
Token(END_OF_INPUT, 'EOF', 1:12)
"""

import logging
from typing import Iterator, Optional, TextIO, Union

from cscan.config import DEFAULT_OPTIONS, ScanOptions
from cscan.errors import LexicalError
from cscan.readers import (
    read_char,
    read_identifier,
    read_number,
    read_operator,
    read_string,
)
from cscan.source import CharSource
from cscan.tokens import DIGITS, IDENT_START, WHITESPACE, Token, TokenKind

logger = logging.getLogger(__name__)


# =============================================================================
# Whitespace and Comment Handling
# =============================================================================

def skip_trivia(source: CharSource) -> None:
    """
    Skip whitespace and comments, in any order and any number.

    Leaves the source positioned before the first character of the next
    token, or at end of input.
    """
    while True:
        while source.peek() in WHITESPACE:
            source.read()

        if source.peek() != "/":
            return

        slash = source.read()
        following = source.peek()

        if following == "/":
            _skip_line_comment(source)
        elif following == "*":
            _skip_block_comment(source)
        else:
            # Division operator: give the slash back to the driver
            source.unread(slash)
            return


def _skip_line_comment(source: CharSource) -> None:
    source.read()  # consume second /
    char = source.read()
    while char not in ("\n", ""):
        char = source.read()


def _skip_block_comment(source: CharSource) -> None:
    line, column = source.line, source.column
    source.read()  # consume *

    previous = ""
    char = source.read()
    while char:
        if previous == "*" and char == "/":
            return
        previous = char
        char = source.read()

    logger.debug("unterminated block comment starting at %d:%d", line, column)


# =============================================================================
# Driver
# =============================================================================

def next_token(source: CharSource, options: Optional[ScanOptions] = None) -> Token:
    """
    Scan the next token from source.

    Args:
        source: The character source to consume from
        options: Scan options (bounds); defaults to DEFAULT_OPTIONS

    Returns:
        The next Token. END_OF_INPUT is positioned one column past the
        last consumed character.
    """
    options = options or DEFAULT_OPTIONS
    skip_trivia(source)

    char = source.peek()

    if char == "":
        return Token(TokenKind.END_OF_INPUT, "EOF", source.line, source.column + 1)

    if char in IDENT_START:
        return read_identifier(source, options)

    if char in DIGITS:
        return read_number(source, options)

    if char == '"':
        return read_string(source, options)

    if char == "'":
        return read_char(source, options)

    return read_operator(source, options)


# =============================================================================
# Lexer
# =============================================================================

class Lexer:
    """
    Tokenizes C-like source text.

    Usage:
        lexer = Lexer(source_text, ScanOptions(filename="main.c"))
        tokens = list(lexer.tokenize())

    The source can be a string, an open text stream, or a CharSource.
    A Lexer owns its CharSource; scanning the same text again requires a
    new Lexer.

    Attributes:
        source: The CharSource being consumed
        options: Scan options in effect
    """

    def __init__(
        self,
        source: Union[str, TextIO, CharSource],
        options: Optional[ScanOptions] = None,
    ):
        self.options = options or DEFAULT_OPTIONS
        self._text: Optional[str] = None

        if isinstance(source, CharSource):
            self.source = source
        elif isinstance(source, str):
            self._text = source
            self.source = CharSource.from_string(source, self.options.filename)
        else:
            self.source = CharSource(source, self.options.filename)

        self._finished = False

    def next_token(self) -> Token:
        """Scan and return the next token."""
        return next_token(self.source, self.options)

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens until the stream terminates.

        Yields every token up to and including END_OF_INPUT. With
        options.stop_on_error (the default) the first ERROR token also
        ends the stream; otherwise scanning resumes right after the
        malformed literal.
        """
        while not self._finished:
            token = self.next_token()
            if token.kind is TokenKind.END_OF_INPUT:
                self._finished = True
            elif token.is_error and self.options.stop_on_error:
                logger.debug("stopping at error token %r", token)
                self._finished = True
            yield token

    def __iter__(self) -> Iterator[Token]:
        return self.tokenize()

    def raise_for_error(self, token: Token) -> Token:
        """
        Return token unchanged, or raise LexicalError if it is an ERROR.

        Lets consumers opt into exception-based handling:

            for token in lexer:
                lexer.raise_for_error(token)
        """
        if token.is_error:
            raise LexicalError.from_token(token, self.options.filename, self._text)
        return token


def tokenize(
    source: Union[str, TextIO],
    filename: Optional[str] = None,
    options: Optional[ScanOptions] = None,
) -> Iterator[Token]:
    """
    Tokenize a string or text stream.

    Args:
        source: Source text or an open text stream
        filename: Name used in locations (overrides options.filename)
        options: Scan options; defaults to DEFAULT_OPTIONS

    Yields:
        Tokens, ending with END_OF_INPUT or, unless options.stop_on_error
        is False, the first ERROR token
    """
    options = options or DEFAULT_OPTIONS
    if filename is not None:
        options = options.with_filename(filename)
    yield from Lexer(source, options).tokenize()
