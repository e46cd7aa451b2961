"""Centralized text reconstruction and numeric parsing configuration.

Defaults:
- Reals: 32-bit floats, comma-delimited lists, empty fields kept
- Word merging: German, Spanish and French diacritics plus the French
  elision apostrophe
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from transcript_text.errors import ConfigError
from transcript_text.words.diacritics import DiacriticKind


FLOAT_DTYPES = {
    "float32": np.float32,
    "float64": np.float64,
}

LANGUAGES = {
    "german": DiacriticKind.GERMAN,
    "spanish": DiacriticKind.SPANISH,
    "french": DiacriticKind.FRENCH,
    "elision": DiacriticKind.ELISION_APOSTROPHE,
}


@dataclass(frozen=True)
class TextConfig:
    """Numeric parsing and word merging configuration."""

    # Real-value parsing
    float_dtype: str = "float32"
    delimiters: str = ","
    omit_empty_strings: bool = False

    # Diacritic tables consulted when merging tokens into words
    languages: Tuple[str, ...] = ("german", "spanish", "french", "elision")

    def __post_init__(self) -> None:
        if self.float_dtype not in FLOAT_DTYPES:
            raise ConfigError(
                f"float_dtype must be one of {sorted(FLOAT_DTYPES)}, got {self.float_dtype!r}"
            )
        unknown = [name for name in self.languages if name not in LANGUAGES]
        if unknown:
            raise ConfigError(f"Unknown languages {unknown}; choose from {sorted(LANGUAGES)}")

    @property
    def numpy_dtype(self) -> type:
        """numpy scalar type for parsed reals."""
        return FLOAT_DTYPES[self.float_dtype]

    @property
    def diacritic_kinds(self) -> DiacriticKind:
        """Union of the enabled diacritic tables."""
        kinds = DiacriticKind.NONE
        for name in self.languages:
            kinds |= LANGUAGES[name]
        return kinds
