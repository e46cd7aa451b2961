"""Merge decoder-emitted character tokens back into displayable words.

Character-level vocabularies emit words letter by letter, and accented
letters as separate 2-byte units. Adjacent single-byte letters and
diacritic units are glued into one word; whitespace, punctuation and
anything already word-sized end the current word.

Example (German):
  [b"\\xc3\\xb6", b"f", b"f", b"n", b"e", b"n"] -> [b"\\xc3\\xb6ffnen"]  ("öffnen")
"""

from __future__ import annotations

import enum
import logging
import string
from typing import Iterable, Iterator, List, Union

from transcript_text.constants import C_WHITESPACE
from transcript_text.words.diacritics import DiacriticKind, is_special

log = logging.getLogger(__name__)

Token = Union[bytes, bytearray, str]

# C-locale ispunct() minus the apostrophe, which stays inside words (don't, l'eau).
_PUNCTUATION = frozenset(ord(c) for c in string.punctuation if c != "'")
_WHITESPACE = frozenset(C_WHITESPACE.encode("ascii"))


class TokenKind(enum.Enum):
    """Role of a single token in word merging."""

    WHITESPACE = "whitespace"
    PUNCTUATION = "punctuation"
    UNIT = "unit"
    LETTER = "letter"
    DIACRITIC = "diacritic"
    UNKNOWN = "unknown"


_BOUNDARY_KINDS = (TokenKind.WHITESPACE, TokenKind.PUNCTUATION, TokenKind.UNIT)
_MERGEABLE_KINDS = (TokenKind.LETTER, TokenKind.DIACRITIC)


def _as_bytes(token: Token) -> bytes:
    if isinstance(token, str):
        return token.encode("utf-8")
    return bytes(token)


def classify_token(token: Token, languages: DiacriticKind = DiacriticKind.ALL) -> TokenKind:
    """Classify one token by byte length and content.

    Args:
        token: Raw token (str is UTF-8 encoded first).
        languages: Diacritic tables that make a 2-byte token mergeable.

    Returns:
        TokenKind. 3+ byte tokens are always UNIT, even the elision
        apostrophe; only empty tokens are UNKNOWN.
    """
    raw = _as_bytes(token)
    n = len(raw)
    if n >= 3:
        return TokenKind.UNIT
    if n == 2:
        return TokenKind.DIACRITIC if is_special(raw, languages) else TokenKind.UNIT
    if n == 1:
        if raw[0] in _WHITESPACE:
            return TokenKind.WHITESPACE
        if raw[0] in _PUNCTUATION:
            return TokenKind.PUNCTUATION
        return TokenKind.LETTER
    return TokenKind.UNKNOWN


def iter_merged_words(
    tokens: Iterable[Token],
    languages: DiacriticKind = DiacriticKind.ALL,
) -> Iterator[bytes]:
    """Lazily merge tokens into words and standalone punctuation.

    Forward-only: consumes `tokens` once, in order, and yields each entry
    as soon as it is complete. A word still pending when the input ends is
    yielded as the last entry.

    Args:
        tokens: Tokens in emission order.
        languages: Diacritic tables that make a 2-byte token mergeable.

    Yields:
        Merged words (bytes) and non-whitespace boundary tokens, in order.
    """
    run: List[bytes] = []
    for token in tokens:
        raw = _as_bytes(token)
        kind = classify_token(raw, languages)

        if kind in _BOUNDARY_KINDS:
            if run:
                yield b"".join(run)
                run = []
            # Leading byte decides, so a unit like b" x" is dropped too.
            if raw[0] not in _WHITESPACE:
                yield raw
            continue

        if kind in _MERGEABLE_KINDS:
            run.append(raw)
            continue

        log.warning("Ignore %r", raw)

    if run:
        yield b"".join(run)


def merge_characters_into_words(
    tokens: Iterable[Token],
    languages: DiacriticKind = DiacriticKind.ALL,
) -> List[bytes]:
    """Eager form of iter_merged_words."""
    return list(iter_merged_words(tokens, languages))


def merge_text_tokens(
    tokens: Iterable[str],
    languages: DiacriticKind = DiacriticKind.ALL,
) -> List[str]:
    """Merge str tokens and return str entries.

    Tokens are UTF-8 encoded before merging; each merged entry is decoded
    back, with undecodable bytes (a word cut mid-character) replaced by
    U+FFFD.
    """
    return [
        word.decode("utf-8", errors="replace")
        for word in iter_merged_words(tokens, languages)
    ]
