"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - Gender is a 2-value enum — no raw 'M'/'F' character checks in domain logic
    - Identity and DecodedFiscalCode are frozen: call-scoped values, never mutated
    - FiscalCode wraps a 16-character uppercase string

Design Decisions:
    - str Enum for Gender: serializes to "M"/"F" in JSON without custom encoders
    - NewType over wrapper classes for FiscalCode: zero runtime cost
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import NewType

from fiscalcode.core.errors import InvalidGenderError


FiscalCode = NewType("FiscalCode", str)


class Gender(str, Enum):
    """Gender as encoded in the day segment (+40 for FEMALE)."""
    MALE = "M"
    FEMALE = "F"

    @classmethod
    def parse(cls, value: "Gender | str | None") -> "Gender":
        """Accept a Gender or 'M'/'F' in any case. Raises InvalidGenderError otherwise."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                pass
        raise InvalidGenderError(value)


@dataclass(frozen=True)
class Identity:
    """Personal data a fiscal code is computed from."""
    first_name: str
    last_name: str
    birth_date: date
    gender: Gender
    place_code: str


@dataclass(frozen=True)
class DecodedFiscalCode:
    """Positional segments of a formally valid fiscal code."""
    code: FiscalCode
    surname_code: str
    given_name_code: str
    birth_date: date
    gender: Gender
    place_code: str
    omocode_level: int
