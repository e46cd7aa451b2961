"""String -> float32/float64 conversion that also reads inf/nan spellings.

Plain decimal and scientific literals are parsed first. If that fails and
the string is a single token, the token is looked up (upper-cased) in a
fixed table of infinity/NaN spellings, including the MSVC forms "1.#INF"
and "1.#QNAN" that older tools wrote into text files.

Interface:
  result = convert_string_to_real("-Infinity", np.float64)
  result.ok, result.value   # True, -inf
"""

from __future__ import annotations

import logging
import re
import threading
from decimal import Decimal, localcontext
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Union

import numpy as np

from transcript_text.constants import C_WHITESPACE
from transcript_text.errors import UnsupportedDtypeError
from transcript_text.numbers.result import ParseResult

log = logging.getLogger(__name__)

DtypeLike = Union[type, str, np.dtype]

SUPPORTED_DTYPES = (np.float32, np.float64)

# ASCII digits only; float() would also take "inf", "nan", "1_000" and
# non-ASCII digits, none of which are decimal literals here.
_DECIMAL_LITERAL = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_C_WHITESPACE_RUN = re.compile(f"[{re.escape(C_WHITESPACE)}]+")

_SPECIAL_TABLES: Dict[type, Mapping[str, np.floating]] = {}
_SPECIAL_TABLES_LOCK = threading.Lock()


def resolve_dtype(dtype: DtypeLike) -> type:
    """Normalize a dtype spec to np.float32 or np.float64."""
    try:
        scalar_type = np.dtype(dtype).type
    except TypeError as e:
        raise UnsupportedDtypeError(f"Unsupported dtype {dtype!r}") from e
    if scalar_type not in SUPPORTED_DTYPES:
        raise UnsupportedDtypeError(
            f"Unsupported dtype {dtype!r}; expected float32 or float64"
        )
    return scalar_type


def _build_special_values(scalar_type: type) -> Mapping[str, np.floating]:
    inf = scalar_type(np.inf)
    nan = scalar_type(np.nan)
    # Keys are upper case; lookups upper-case the token first.
    table = {
        "INF": inf,
        "+INF": inf,
        "-INF": -inf,
        "INFINITY": inf,
        "+INFINITY": inf,
        "-INFINITY": -inf,
        "NAN": nan,
        "+NAN": nan,
        "-NAN": -nan,
        # MSVC
        "1.#INF": inf,
        "-1.#INF": -inf,
        "1.#QNAN": nan,
        "-1.#QNAN": -nan,
    }
    return MappingProxyType(table)


def special_values(dtype: DtypeLike = np.float32) -> Mapping[str, np.floating]:
    """Read-only table of infinity/NaN spellings for one float width.

    Built on first use and shared afterwards; safe to call from any thread.
    """
    scalar_type = resolve_dtype(dtype)
    table = _SPECIAL_TABLES.get(scalar_type)
    if table is None:
        with _SPECIAL_TABLES_LOCK:
            table = _SPECIAL_TABLES.get(scalar_type)
            if table is None:
                table = _build_special_values(scalar_type)
                _SPECIAL_TABLES[scalar_type] = table
    return table


def _exact(value: np.float32) -> Decimal:
    """Exact decimal value of a float32; +-inf stands for +-2**128."""
    if np.isinf(value):
        return Decimal(2) ** 128 if value > 0 else -(Decimal(2) ** 128)
    return Decimal(float(value))


def _to_float32(literal: str, value: float) -> np.float32:
    """Round a decimal literal to float32 once, as strtof does.

    `value` is the correctly rounded float64. Casting it to float32 is
    only wrong when it sits exactly halfway between two float32 values;
    then the exact literal decides which side wins.
    """
    with np.errstate(over="ignore"):
        rounded = np.float64(value).astype(np.float32)
    if float(rounded) == value:
        return rounded
    toward = np.float32(np.inf) if value > float(rounded) else np.float32(-np.inf)
    neighbour = np.nextafter(rounded, toward)
    # Exact arithmetic; midpoints near the denormal range need hundreds of digits.
    with localcontext() as ctx:
        ctx.prec = 1200
        midpoint = (_exact(rounded) + _exact(neighbour)) / 2
        if Decimal(value) != midpoint:
            return rounded
        exact = Decimal(literal)
        if exact != midpoint and (exact > midpoint) == (_exact(neighbour) > midpoint):
            return neighbour
    return rounded


def _parse_decimal(text: str, scalar_type: type) -> Optional[np.floating]:
    """Parse a plain decimal/scientific literal; None if not one or out of range."""
    stripped = text.strip(C_WHITESPACE)
    if not _DECIMAL_LITERAL.fullmatch(stripped):
        return None
    if scalar_type is np.float32:
        value = _to_float32(stripped, float(stripped))
    else:
        value = np.float64(float(stripped))
    if np.isinf(value):
        # Finite literal too large for the target width.
        return None
    return value


def _parse_special(text: str, scalar_type: type) -> Optional[np.floating]:
    """Look up a single-token inf/nan spelling; None on any mismatch."""
    tokens = _C_WHITESPACE_RUN.split(text.strip(C_WHITESPACE))
    if len(tokens) != 1 or not tokens[0]:
        return None
    token = tokens[0]
    if not token.isascii():
        return None
    return special_values(scalar_type).get(token.upper())


def convert_string_to_real(
    text: str,
    dtype: DtypeLike = np.float32,
) -> ParseResult[np.floating]:
    """Convert a string to a float32/float64 scalar.

    Args:
        text: Input string. Surrounding whitespace is ignored; anything else
            after the number (a second token, trailing junk) fails.
        dtype: np.float32 or np.float64 (or their names).

    Returns:
        ParseResult with a numpy scalar of the requested width on success.
        inf/nan spellings are case-insensitive and keep their sign.

    Raises:
        UnsupportedDtypeError: dtype is not float32/float64.
    """
    scalar_type = resolve_dtype(dtype)

    value = _parse_decimal(text, scalar_type)
    if value is not None:
        return ParseResult.success(value)

    value = _parse_special(text, scalar_type)
    if value is not None:
        return ParseResult.success(value)

    log.debug("Cannot convert %r to %s", text, scalar_type.__name__)
    return ParseResult.failure(f"not a {scalar_type.__name__} value: {text!r}")
