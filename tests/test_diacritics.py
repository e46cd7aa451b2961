"""Unit tests and toy example for the diacritic byte classifier."""

from __future__ import annotations

import unittest

from transcript_text.words.diacritics import (
    DIACRITIC_TABLE,
    ELISION_APOSTROPHE,
    DiacriticKind,
    classify_fragment,
    is_special,
)


class TestDiacriticClassifier(unittest.TestCase):
    """Tests for classify_fragment / is_special."""

    def test_german_umlauts(self) -> None:
        """All German letters classify as GERMAN."""
        for letter in "äöüÄÖÜß":
            with self.subTest(letter=letter):
                self.assertTrue(classify_fragment(letter.encode("utf-8")) & DiacriticKind.GERMAN)

    def test_spanish_diacritics(self) -> None:
        for letter in "áéíóúüñÁÉÍÓÚÜÑ":
            with self.subTest(letter=letter):
                self.assertTrue(classify_fragment(letter.encode("utf-8")) & DiacriticKind.SPANISH)

    def test_french_diacritics(self) -> None:
        for letter in "éàèùçâêîôûëïüÉÀÈÙÇÂÊÎÔÛËÏÜ":
            with self.subTest(letter=letter):
                self.assertTrue(classify_fragment(letter.encode("utf-8")) & DiacriticKind.FRENCH)

    def test_shared_letters_carry_all_languages(self) -> None:
        """ü is in all three tables; é in Spanish and French only."""
        self.assertEqual(
            classify_fragment("ü".encode("utf-8")),
            DiacriticKind.GERMAN | DiacriticKind.SPANISH | DiacriticKind.FRENCH,
        )
        self.assertEqual(
            classify_fragment("é".encode("utf-8")),
            DiacriticKind.SPANISH | DiacriticKind.FRENCH,
        )
        self.assertEqual(classify_fragment("ß".encode("utf-8")), DiacriticKind.GERMAN)

    def test_elision_apostrophe(self) -> None:
        """U+2019 (3 bytes) is the only 3-byte match."""
        self.assertEqual(ELISION_APOSTROPHE, "’".encode("utf-8"))
        self.assertEqual(classify_fragment(b"\xe2\x80\x99"), DiacriticKind.ELISION_APOSTROPHE)
        self.assertFalse(is_special(b"\xe2\x80\x98"))  # left quote

    def test_not_special(self) -> None:
        """Other Latin-1 letters, other lead bytes and other lengths are NONE."""
        for fragment in (
            "ø".encode("utf-8"),  # 0xC3 0xB8, not in any table
            "ã".encode("utf-8"),
            "ł".encode("utf-8"),  # lead byte 0xC5
            b"a",
            b"ab",
            b"",
            b"\xc3",
            "öf".encode("utf-8"),
        ):
            with self.subTest(fragment=fragment):
                self.assertEqual(classify_fragment(fragment), DiacriticKind.NONE)
                self.assertFalse(is_special(fragment))

    def test_language_filter(self) -> None:
        """is_special only consults the requested tables."""
        a_umlaut = "ä".encode("utf-8")
        self.assertTrue(is_special(a_umlaut, DiacriticKind.GERMAN))
        self.assertFalse(is_special(a_umlaut, DiacriticKind.FRENCH | DiacriticKind.SPANISH))
        self.assertFalse(is_special(a_umlaut, DiacriticKind.NONE))

    def test_str_input(self) -> None:
        self.assertTrue(is_special("ñ"))
        self.assertFalse(is_special("n"))

    def test_table_read_only(self) -> None:
        with self.assertRaises(TypeError):
            DIACRITIC_TABLE[b"\xc3\xb8"] = DiacriticKind.FRENCH  # type: ignore[index]

    def test_table_size(self) -> None:
        """Union of the three letter sets plus the apostrophe."""
        letters = set("äöüÄÖÜß") | set("áéíóúüñÁÉÍÓÚÜÑ") | set("éàèùçâêîôûëïüÉÀÈÙÇÂÊÎÔÛËÏÜ")
        self.assertEqual(len(DIACRITIC_TABLE), len(letters) + 1)


def run_toy_example() -> None:
    """Print the classification of a few fragments."""
    print("=== Toy example: diacritic classifier ===\n")
    for text in ("ö", "é", "ü", "ñ", "ç", "’", "ø", "a"):
        raw = text.encode("utf-8")
        print(f"  {text!r:8} {raw.hex():8} -> {classify_fragment(raw)}")
    print("\nDone.")


if __name__ == "__main__":
    run_toy_example()
    print("\n--- Running unit tests ---")
    unittest.main(argv=[""], exit=False, verbosity=2)
