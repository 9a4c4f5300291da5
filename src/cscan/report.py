"""
Token Listing and Diagnostics
=============================

Presentation helpers for token streams. Nothing here affects scanning;
these functions only turn tokens into text.

Listing format (one token per line):

    [1:1] KEYWORD     "int"
    [1:5] IDENTIFIER  "x"
"""

from typing import Iterable, Iterator, Optional

from cscan.errors import LexicalError
from cscan.tokens import Token


LISTING_HEADER = "Lexical Analysis Output:"
LISTING_RULE = "-" * 24
STOP_MESSAGE = "Stopping due to error."


def format_token(token: Token) -> str:
    """Format a token as `[line:column] KIND  "lexeme"`."""
    return f'[{token.line}:{token.column}] {token.kind.label:<10}  "{token.text}"'


def format_listing(
    tokens: Iterable[Token],
    header: bool = True,
    stop_notice: bool = True,
) -> Iterator[str]:
    """
    Yield listing lines for a token stream.

    Emits the header (optionally), one line per token, and, when
    stop_notice is set, a stop notice after an ERROR token.
    """
    if header:
        yield LISTING_HEADER
        yield LISTING_RULE
    for token in tokens:
        yield format_token(token)
        if token.is_error and stop_notice:
            yield STOP_MESSAGE


def format_diagnostic(
    token: Token,
    source_text: Optional[str] = None,
    filename: str = "<input>",
) -> str:
    """
    Format an ERROR token as a compiler-style diagnostic.

    Example:
        main.c:2:9: error: unterminated string literal
            s = "abc
                ^
        hint: add a closing '"' to complete the string
    """
    return str(LexicalError.from_token(token, filename, source_text))
