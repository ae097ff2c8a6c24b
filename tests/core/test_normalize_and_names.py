"""Normalization and name encoding — pure tests for normalize, surname_code, given_name_code.

Tests cover:
    - normalize trims, uppercases, folds accented vowels only on request
    - Empty / None input returned unchanged
    - Surname: consonants, then vowels, then X padding
    - Given name: 4+ consonants use 1st, 3rd, 4th
    - Names with no letters encode to XXX
"""

from fiscalcode.core.normalize import normalize
from fiscalcode.core.encode_name import surname_code, given_name_code, CONSONANTS


# ─── normalize ───────────────────────────────────────────────────

def test_normalize_trims_and_uppercases():
    assert normalize("  rossi ") == "ROSSI"


def test_normalize_folds_diacritics_when_requested():
    assert normalize("Niccolò", strip_diacritics=True) == "NICCOLO"
    assert normalize("àèéìòù", strip_diacritics=True) == "AEEIOU"
    assert normalize("ÀÈÉÌÒÙ", strip_diacritics=True) == "AEEIOU"


def test_normalize_keeps_diacritics_by_default():
    assert normalize("Niccolò") == "NICCOLÒ"


def test_normalize_returns_empty_and_none_unchanged():
    assert normalize("") == ""
    assert normalize(None) is None


# ─── surname_code ────────────────────────────────────────────────

def test_surname_takes_first_three_consonants():
    assert surname_code("Rossi") == "RSS"
    assert surname_code("Bianchi") == "BNC"


def test_surname_skips_spaces_and_apostrophes():
    assert surname_code("De Angelis") == "DNG"
    assert surname_code("D'Amico") == "DMC"


def test_surname_fills_with_vowels_then_x():
    assert surname_code("Fo") == "FOX"
    assert surname_code("Rè") == "REX"
    assert surname_code("Ai") == "AIX"


def test_surname_only_vowels_never_yields_consonants():
    code = surname_code("AAAA")
    assert code == "AAA"
    assert not any(c in CONSONANTS for c in code)


def test_name_without_letters_encodes_to_xxx():
    assert surname_code("123") == "XXX"
    assert given_name_code("--") == "XXX"


def test_surname_is_case_and_whitespace_insensitive():
    assert surname_code("  rossi ") == surname_code("ROSSI")


# ─── given_name_code ─────────────────────────────────────────────

def test_given_name_with_three_consonants_uses_all():
    assert given_name_code("Matteo") == "MTT"
    assert given_name_code("Marco") == "MRC"


def test_given_name_with_four_or_more_consonants_drops_the_second():
    assert given_name_code("Gianfranco") == "GFR"
    assert given_name_code("BCDFG") == "BDF"


def test_given_name_with_accented_vowel():
    assert given_name_code("Niccolò") == "NCL"


def test_given_name_fills_with_vowels_then_x():
    assert given_name_code("Mario") == "MRA"
    assert given_name_code("Luca") == "LCU"
    assert given_name_code("Eva") == "VEA"
    assert given_name_code("Al") == "LAX"


def test_given_name_only_vowels():
    code = given_name_code("Aia")
    assert code == "AIA"
    assert given_name_code("Io") == "IOX"
