"""
cscan Configuration
===================

Scanner configuration. Options can come from:
- Default values (defined here)
- Environment variables (ScanOptions.from_env)
- Command-line flags (see cscan.cli.cscan)

Environment variables
---------------------
CSCAN_MAX_IDENTIFIER_LENGTH: Identifier truncation bound (integer)
CSCAN_MAX_LEXEME_LENGTH: Recorded lexeme bound for all tokens (integer)
CSCAN_STOP_ON_ERROR: Stop tokenizing at the first ERROR token (1/0, true/false)
"""

from dataclasses import dataclass, replace
from typing import Mapping, Optional
import os

from cscan.errors import ConfigurationError
from cscan.tokens import LONGEST_KEYWORD, MAX_IDENTIFIER_LENGTH, MAX_LEXEME_LENGTH


_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


@dataclass(frozen=True)
class ScanOptions:
    """
    Configuration for a scan.

    Attributes:
        max_identifier_length: Identifiers longer than this are truncated in
            the recorded text (the full run is still consumed)
        max_lexeme_length: Upper bound on recorded text for any token; never
            below the longest keyword
        stop_on_error: If True, Lexer.tokenize() stops after the first ERROR
            token; otherwise it keeps scanning until end of input
        filename: Name used in locations and diagnostics
    """
    max_identifier_length: int = MAX_IDENTIFIER_LENGTH
    max_lexeme_length: int = MAX_LEXEME_LENGTH
    stop_on_error: bool = True
    filename: str = "<input>"

    def __post_init__(self):
        for name in ("max_identifier_length", "max_lexeme_length"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                raise ConfigurationError(
                    f"{name} must be a positive integer, got {value!r}"
                )
        if self.max_identifier_length > self.max_lexeme_length:
            raise ConfigurationError(
                f"max_identifier_length ({self.max_identifier_length}) cannot exceed "
                f"max_lexeme_length ({self.max_lexeme_length})",
            )
        if self.max_lexeme_length < LONGEST_KEYWORD:
            raise ConfigurationError(
                f"max_lexeme_length must be at least {LONGEST_KEYWORD}, got {self.max_lexeme_length}",
                hint="keywords are always recorded in full",
            )

    def with_filename(self, filename: str) -> "ScanOptions":
        """Return a copy of these options reporting locations in `filename`."""
        return replace(self, filename=filename)

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        **overrides,
    ) -> "ScanOptions":
        """
        Create ScanOptions from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)
            **overrides: Explicit values that take precedence over the
                environment (None values are ignored)

        Returns:
            ScanOptions with values from the environment

        Raises:
            ConfigurationError: If a variable holds an unparseable value
        """
        if environ is None:
            environ = os.environ

        values = {}

        if raw := environ.get("CSCAN_MAX_IDENTIFIER_LENGTH"):
            values["max_identifier_length"] = _parse_int("CSCAN_MAX_IDENTIFIER_LENGTH", raw)

        if raw := environ.get("CSCAN_MAX_LEXEME_LENGTH"):
            values["max_lexeme_length"] = _parse_int("CSCAN_MAX_LEXEME_LENGTH", raw)

        if raw := environ.get("CSCAN_STOP_ON_ERROR"):
            values["stop_on_error"] = _parse_bool("CSCAN_STOP_ON_ERROR", raw)

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


def _parse_int(name: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None


def _parse_bool(name: str, raw: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigurationError(
        f"{name} must be a boolean, got {raw!r}",
        hint=f"use one of: {', '.join(_TRUE_VALUES + _FALSE_VALUES)}",
    )


DEFAULT_OPTIONS = ScanOptions()
