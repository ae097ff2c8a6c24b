"""Name Encoding — surname and given-name letter triplets.

Invariants:
    - Output is always exactly 3 uppercase letters
    - Consonants first, then vowels scanned from the start, then 'X' padding
    - Given names with 4+ consonants use the 1st, 3rd and 4th consonant
    - Characters outside CONSONANTS and VOWELS (spaces, apostrophes, digits) are skipped

Design Decisions:
    - Both names share _fill_code: the given-name rule only differs in how
      the consonant prefix is picked
"""

from fiscalcode.core.normalize import normalize

CONSONANTS = "BCDFGHJKLMNPQRSTVWXYZ"
VOWELS = "AEIOU"
CODE_LENGTH = 3


def _consonants(name: str) -> str:
    return "".join(c for c in name if c in CONSONANTS)


def _fill_code(code: str, name: str) -> str:
    """Append vowels of name (left to right) then pad with 'X' up to CODE_LENGTH."""
    for c in name:
        if len(code) >= CODE_LENGTH:
            break
        if c in VOWELS:
            code += c
    return code.ljust(CODE_LENGTH, "X")


def surname_code(name: str) -> str:
    """Encode a last name (e.g. "De Angelis" -> "DNG")."""
    name = normalize(name, strip_diacritics=True) or ""
    return _fill_code(_consonants(name)[:CODE_LENGTH], name)


def given_name_code(name: str) -> str:
    """Encode a first name (e.g. "Matteo" -> "MTT", "Gianfranco" -> "GFR")."""
    name = normalize(name, strip_diacritics=True) or ""
    consonants = _consonants(name)
    if len(consonants) > CODE_LENGTH:
        code = consonants[0] + consonants[2] + consonants[3]
    else:
        code = consonants
    return _fill_code(code, name)
