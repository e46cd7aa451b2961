"""Byte-pattern classifier for accented Latin letters split out by ASR tokenizers.

A character-level vocabulary for German, Spanish or French stores accented
letters as their own 2-byte UTF-8 units (lead byte 0xC3). The merger needs
to know which 2-byte units are such letters so it can glue them to the
surrounding single-byte letters.

Lookup is a single read-only table: raw fragment -> DiacriticKind flags.
A fragment shared by several languages (e.g. "ü") carries all of them.

Minimal deps: none (stdlib only).
"""

from __future__ import annotations

import enum
from types import MappingProxyType
from typing import Dict, Mapping, Union


class DiacriticKind(enum.Flag):
    """Which table(s) a fragment was found in."""

    NONE = 0
    GERMAN = 1
    SPANISH = 2
    FRENCH = 4
    ELISION_APOSTROPHE = 8
    ALL = 15


LEAD_BYTE = 0xC3

# Trail bytes after 0xC3, lowercase then uppercase.
GERMAN_TRAIL_BYTES = (
    0xA4,  # ä
    0xB6,  # ö
    0xBC,  # ü
    0x84,  # Ä
    0x96,  # Ö
    0x9C,  # Ü
    0x9F,  # ß
)

SPANISH_TRAIL_BYTES = (
    0xA1,  # á
    0xA9,  # é
    0xAD,  # í
    0xB3,  # ó
    0xBA,  # ú
    0xBC,  # ü
    0xB1,  # ñ
    0x81,  # Á
    0x89,  # É
    0x8D,  # Í
    0x93,  # Ó
    0x9A,  # Ú
    0x9C,  # Ü
    0x91,  # Ñ
)

FRENCH_TRAIL_BYTES = (
    0xA9,  # é
    0xA0,  # à
    0xA8,  # è
    0xB9,  # ù
    0xA7,  # ç
    0xA2,  # â
    0xAA,  # ê
    0xAE,  # î
    0xB4,  # ô
    0xBB,  # û
    0xAB,  # ë
    0xAF,  # ï
    0xBC,  # ü
    0x89,  # É
    0x80,  # À
    0x88,  # È
    0x99,  # Ù
    0x87,  # Ç
    0x82,  # Â
    0x8A,  # Ê
    0x8E,  # Î
    0x94,  # Ô
    0x9B,  # Û
    0x8B,  # Ë
    0x8F,  # Ï
    0x9C,  # Ü
)

# U+2019 RIGHT SINGLE QUOTATION MARK, as in "d’impossible"
ELISION_APOSTROPHE = b"\xe2\x80\x99"


def _build_table() -> Mapping[bytes, DiacriticKind]:
    table: Dict[bytes, DiacriticKind] = {}
    for kind, trails in (
        (DiacriticKind.GERMAN, GERMAN_TRAIL_BYTES),
        (DiacriticKind.SPANISH, SPANISH_TRAIL_BYTES),
        (DiacriticKind.FRENCH, FRENCH_TRAIL_BYTES),
    ):
        for trail in trails:
            key = bytes((LEAD_BYTE, trail))
            table[key] = table.get(key, DiacriticKind.NONE) | kind
    table[ELISION_APOSTROPHE] = DiacriticKind.ELISION_APOSTROPHE
    return MappingProxyType(table)


DIACRITIC_TABLE = _build_table()


def _as_bytes(fragment: Union[bytes, bytearray, str]) -> bytes:
    if isinstance(fragment, str):
        return fragment.encode("utf-8")
    return bytes(fragment)


def classify_fragment(fragment: Union[bytes, bytearray, str]) -> DiacriticKind:
    """Return the tables a raw fragment belongs to (DiacriticKind.NONE if none).

    Only exact 2-byte (0xC3, trail) pairs and the 3-byte elision apostrophe
    can match; anything else classifies as NONE.
    """
    return DIACRITIC_TABLE.get(_as_bytes(fragment), DiacriticKind.NONE)


def is_special(
    fragment: Union[bytes, bytearray, str],
    languages: DiacriticKind = DiacriticKind.ALL,
) -> bool:
    """True if the fragment is in any of the enabled tables."""
    return bool(classify_fragment(fragment) & languages)

