"""
cscan - Token Listing Command-Line Interface
============================================

Scans a source file and prints one line per token.

Usage Examples
--------------
Basic listing:
    $ cscan hello.c

Keep scanning past malformed literals:
    $ cscan --continue-on-error hello.c

Verbose mode (debug logging on stderr):
    $ cscan -v hello.c
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from cscan import __version__
from cscan.cli.errors import ExitCode, handle_cli_exception
from cscan.config import ScanOptions
from cscan.lexer import Lexer
from cscan.report import format_diagnostic, format_listing

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--max-identifier-length",
    type=click.IntRange(min=1),
    default=None,
    help="Truncate recorded identifiers to this many characters "
         "(default: 64, or CSCAN_MAX_IDENTIFIER_LENGTH).",
)
@click.option(
    "--continue-on-error",
    is_flag=True,
    help="Keep scanning after a malformed literal instead of stopping.",
)
@click.option(
    "--no-header",
    is_flag=True,
    help="Omit the listing header.",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="cscan")
def main(
    input_file: Path,
    max_identifier_length: Optional[int],
    continue_on_error: bool,
    no_header: bool,
    verbose: bool,
) -> None:
    """
    Print the lexical tokens of a C-like source file.

    INPUT_FILE is the source file to scan.

    \b
    Each token is printed as:
        [line:column] KIND  "lexeme"

    Scanning stops at the first unterminated or invalid literal, which is
    also reported on stderr; the exit status is then 1.
    """
    setup_logging(verbose)
    errors = []

    try:
        options = ScanOptions.from_env(
            max_identifier_length=max_identifier_length,
            stop_on_error=False if continue_on_error else None,
            filename=str(input_file),
        )

        logger.debug("scanning %s", input_file)
        source_text = input_file.read_text(encoding="utf-8", errors="replace")
        lexer = Lexer(source_text, options)

        def collect():
            for token in lexer.tokenize():
                if token.is_error:
                    errors.append(token)
                yield token

        listing = format_listing(
            collect(),
            header=not no_header,
            stop_notice=options.stop_on_error,
        )
        for line in listing:
            click.echo(line)

    except Exception as e:
        handle_cli_exception(e, verbose=verbose)

    if errors:
        for token in errors:
            click.echo(format_diagnostic(token, source_text, str(input_file)), err=True)
        sys.exit(ExitCode.SCAN_ERROR)


if __name__ == "__main__":
    main()
