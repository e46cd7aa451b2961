"""Locale-independent real-number parsing (with inf/nan spellings) and splitting."""

from transcript_text.numbers.real import convert_string_to_real, special_values
from transcript_text.numbers.result import ParseResult
from transcript_text.numbers.split import split_string_to_vector
from transcript_text.numbers.vector import split_string_to_floats

__all__ = [
    "ParseResult",
    "convert_string_to_real",
    "special_values",
    "split_string_to_floats",
    "split_string_to_vector",
]
