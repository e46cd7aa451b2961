"""Exception types for transcript_text.

Parse failures are returned as values (see numbers.result.ParseResult);
these exceptions cover misuse and explicit unwrapping.
"""

from __future__ import annotations


class TextUtilsError(Exception):
    """Base error for transcript_text."""


class ParseFailedError(TextUtilsError):
    """Raised by ParseResult.unwrap() on a failed parse."""


class UnsupportedDtypeError(TextUtilsError, ValueError):
    """Raised when a numeric width other than float32/float64 is requested."""


class ConfigError(TextUtilsError, ValueError):
    """Raised when TextConfig holds an invalid value."""
