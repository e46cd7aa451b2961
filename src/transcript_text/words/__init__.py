"""Word reconstruction from character-level decoder tokens."""

from transcript_text.words.diacritics import DiacriticKind, classify_fragment, is_special
from transcript_text.words.merge import (
    TokenKind,
    classify_token,
    iter_merged_words,
    merge_characters_into_words,
    merge_text_tokens,
)

__all__ = [
    "DiacriticKind",
    "TokenKind",
    "classify_fragment",
    "classify_token",
    "is_special",
    "iter_merged_words",
    "merge_characters_into_words",
    "merge_text_tokens",
]
