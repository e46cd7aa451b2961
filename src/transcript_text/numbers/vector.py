"""Parse a delimited list of reals, all or nothing."""

from __future__ import annotations

import logging

import numpy as np

from transcript_text.numbers.real import DtypeLike, convert_string_to_real, resolve_dtype
from transcript_text.numbers.result import ParseResult
from transcript_text.numbers.split import split_string_to_vector

log = logging.getLogger(__name__)


def split_string_to_floats(
    full: str,
    delimiters: str,
    omit_empty_strings: bool = False,
    dtype: DtypeLike = np.float32,
) -> ParseResult[np.ndarray]:
    """Split `full` and convert every field with convert_string_to_real.

    Args:
        full: e.g. "0.5,1.0,-inf".
        delimiters: Delimiter characters (see split_string_to_vector).
        omit_empty_strings: Skip empty fields instead of failing on them.
        dtype: np.float32 or np.float64.

    Returns:
        ParseResult holding a 1-D array of `dtype`. An empty string gives an
        empty array. If any field fails, the result is a failure naming that
        field and carries no values.
    """
    scalar_type = resolve_dtype(dtype)
    if not full:
        return ParseResult.success(np.zeros(0, dtype=scalar_type))

    fields = split_string_to_vector(full, delimiters, omit_empty_strings)
    out = np.empty(len(fields), dtype=scalar_type)
    for i, field in enumerate(fields):
        parsed = convert_string_to_real(field, scalar_type)
        if not parsed:
            log.debug("Field %d of %r is not a real: %r", i, full, field)
            return ParseResult.failure(f"field {i} ({field!r}): {parsed.reason}")
        out[i] = parsed.value
    return ParseResult.success(out)
