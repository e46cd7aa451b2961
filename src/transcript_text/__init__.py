"""Transcript text utilities - word merging for character-level ASR tokens, real-number parsing."""

from transcript_text.config import TextConfig
from transcript_text.numbers import (
    ParseResult,
    convert_string_to_real,
    split_string_to_floats,
    split_string_to_vector,
)
from transcript_text.words import (
    DiacriticKind,
    iter_merged_words,
    merge_characters_into_words,
    merge_text_tokens,
)

__all__ = [
    "DiacriticKind",
    "ParseResult",
    "TextConfig",
    "convert_string_to_real",
    "iter_merged_words",
    "merge_characters_into_words",
    "merge_text_tokens",
    "split_string_to_floats",
    "split_string_to_vector",
]
