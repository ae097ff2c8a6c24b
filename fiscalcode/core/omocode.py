"""Omocode Handling — letter/digit substitution at the digit-bearing positions.

Invariants:
    - OMOCODE_POSITIONS are the 7 digit-bearing positions (year, day, place digits)
    - OMOCODE_LETTERS[i] stands for digit i
    - strip_omocode is idempotent and never touches positions outside OMOCODE_POSITIONS
    - Letters outside OMOCODE_LETTERS are left in place so the grammar check rejects them
    - Substitution order for generation is right to left (position 14 first)
"""

from fiscalcode.core.checksum import BODY_LENGTH, checksum
from fiscalcode.core.errors import InvalidFiscalCodeError

OMOCODE_LETTERS = "LMNPQRSTUV"
OMOCODE_POSITIONS = (6, 7, 9, 10, 12, 13, 14)


def strip_omocode(code: str) -> str:
    """Replace omocode letters with their digits, yielding the canonical form."""
    if len(code) < BODY_LENGTH:
        raise InvalidFiscalCodeError("too short to hold omocode positions")
    chars = list(code)
    for i in OMOCODE_POSITIONS:
        if chars[i] in OMOCODE_LETTERS:
            chars[i] = str(OMOCODE_LETTERS.index(chars[i]))
    return "".join(chars)


def omocode_level(code: str) -> int:
    """Number of digit-bearing positions holding an omocode letter."""
    return sum(1 for i in OMOCODE_POSITIONS if i < len(code) and code[i] in OMOCODE_LETTERS)


def substitute_omocodes(code: str) -> list[str]:
    """All 7 omocode variants of a code, least substituted first.

    Each variant substitutes one more digit (right to left) and carries its
    own recomputed checksum. Input may itself be an omocode: it is stripped first.
    """
    chars = list(strip_omocode(code)[:BODY_LENGTH])
    variants = []
    for i in reversed(OMOCODE_POSITIONS):
        chars[i] = OMOCODE_LETTERS[int(chars[i])]
        body = "".join(chars)
        variants.append(body + checksum(body))
    return variants


def strip_place_omocode(place_code: str) -> str:
    """Numeric form of a 4-character place code (e.g. 'H5LM' -> 'H501')."""
    return place_code[:1] + "".join(
        str(OMOCODE_LETTERS.index(c)) if c in OMOCODE_LETTERS else c
        for c in place_code[1:]
    )
