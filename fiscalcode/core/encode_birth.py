"""Birth Segment Encoding — year, month letter and gender-adjusted day.

Invariants:
    - birth_code output is exactly 5 characters: YY + month letter + DD
    - FEMALE day is day-of-month + 40 (41-71); MALE day is zero-padded (01-31)
    - MONTH_LETTERS index is month - 1 (January -> 'A', December -> 'T')
"""

from datetime import date

from fiscalcode.core.domain_types import Gender
from fiscalcode.core.errors import InvalidFiscalCodeError

MONTH_LETTERS = "ABCDEHLMPRST"
FEMALE_DAY_OFFSET = 40


def birth_code(birth_date: date, gender: Gender | str) -> str:
    """Encode birth date and gender. Raises InvalidGenderError for anything but M/F."""
    gender = Gender.parse(gender)
    day = birth_date.day
    if gender is Gender.FEMALE:
        day += FEMALE_DAY_OFFSET
    return f"{birth_date.year % 100:02d}{MONTH_LETTERS[birth_date.month - 1]}{day:02d}"


def decode_birth(segment: str, reference_date: date) -> tuple[date, Gender]:
    """Decode a non-omocode 5-character birth segment into (birth date, gender).

    The century is inferred against reference_date: a two-digit year greater
    than reference_date's is placed in the 1900s, otherwise in the 2000s.
    Raises InvalidFiscalCodeError for unknown month letters, out-of-range days
    or dates that do not exist.
    """
    year_part = int(segment[0:2])
    month_letter = segment[2]
    if month_letter not in MONTH_LETTERS:
        raise InvalidFiscalCodeError(f"unknown month letter {month_letter!r}")
    month = MONTH_LETTERS.index(month_letter) + 1

    day = int(segment[3:5])
    gender = Gender.MALE
    if day > FEMALE_DAY_OFFSET:
        gender = Gender.FEMALE
        day -= FEMALE_DAY_OFFSET
    if not 1 <= day <= 31:
        raise InvalidFiscalCodeError(f"day segment {segment[3:5]!r} out of range")

    century = 1900 if year_part > reference_date.year % 100 else 2000
    try:
        return date(century + year_part, month, day), gender
    except ValueError:
        raise InvalidFiscalCodeError("birth date does not exist") from None
