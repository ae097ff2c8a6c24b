"""Checksum — the 16th (control) character of a fiscal code.

Invariants:
    - Input is exactly 15 characters from A-Z and 0-9, else InvalidCharacterError
    - Letters are valued A=0..Z=25, digits 0..9
    - Even 1-indexed positions add the value; odd positions add ODD_POSITION_VALUES[value]
    - Both paths index by the raw character value, never a permuted one
    - Result is (total mod 26) as a letter
"""

import re
import string

from fiscalcode.core.errors import InvalidCharacterError

BODY_LENGTH = 15

ODD_POSITION_VALUES = (
    1, 0, 5, 7, 9, 13, 15, 17, 19, 21, 2, 4, 18, 20,
    11, 3, 6, 8, 12, 14, 16, 10, 22, 25, 24, 23,
)

_BODY_PATTERN = re.compile(r"[A-Z0-9]{15}")


def char_value(char: str) -> int:
    """Numeric value of a body character: A..Z -> 0..25, '0'..'9' -> 0..9."""
    if char in string.digits:
        return ord(char) - ord("0")
    return ord(char) - ord("A")


def checksum(body: str) -> str:
    """Compute the control letter for the first 15 characters of a fiscal code."""
    if not isinstance(body, str) or not _BODY_PATTERN.fullmatch(body):
        raise InvalidCharacterError(str(body))

    total = 0
    for position, char in enumerate(body, start=1):
        value = char_value(char)
        if position % 2 == 0:
            total += value
        else:
            total += ODD_POSITION_VALUES[value]
    return string.ascii_uppercase[total % 26]
