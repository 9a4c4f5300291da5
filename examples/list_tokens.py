#!/usr/bin/env python3
"""
cscan Library Demo
==================

Scans examples/sample.c with the library API and prints a per-kind
summary followed by every identifier.

Usage:
    python examples/list_tokens.py [FILE]
"""

import sys
from collections import Counter
from pathlib import Path

from cscan import Lexer, ScanOptions, TokenKind, format_diagnostic


def main():
    path = Path(sys.argv[1]) if len(sys.argv) > 1 else Path(__file__).with_name("sample.c")
    text = path.read_text()

    lexer = Lexer(text, ScanOptions(filename=str(path)))
    tokens = list(lexer.tokenize())

    if tokens[-1].is_error:
        print(format_diagnostic(tokens[-1], text, str(path)), file=sys.stderr)
        return 1

    counts = Counter(token.kind for token in tokens)
    for kind in TokenKind:
        if counts[kind]:
            print(f"{kind.label:<10} {counts[kind]}")

    identifiers = sorted({t.text for t in tokens if t.kind is TokenKind.IDENTIFIER})
    print()
    print("Identifiers:", ", ".join(identifiers))
    return 0


if __name__ == "__main__":
    sys.exit(main())
