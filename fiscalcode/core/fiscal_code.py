"""Fiscal Code — encode, validate and decode Italian personal tax codes.

Invariants:
    - All functions are PURE: no IO, no clock, no shared mutable state
    - Encoded codes are always 16 characters: 15-char body + checksum
    - Encode and decode raise FiscalCodeError subclasses on bad input
    - is_valid / is_valid_for are total: invalid input yields False, never an exception
    - Checksum is verified on the code as issued (omocode letters included);
      segment comparisons use the omocode-stripped form

Design Decisions:
    - One module for the public surface; helpers live in encode_name,
      encode_birth, checksum and omocode
    - decode takes reference_date explicitly so the century pivot stays deterministic
"""

import re
from datetime import date

from fiscalcode.core.checksum import BODY_LENGTH, checksum
from fiscalcode.core.domain_types import DecodedFiscalCode, FiscalCode, Gender, Identity
from fiscalcode.core.encode_birth import birth_code, decode_birth
from fiscalcode.core.encode_name import given_name_code, surname_code
from fiscalcode.core.errors import (
    FiscalCodeError,
    InvalidFiscalCodeError,
    InvalidPlaceCodeError,
    MissingFieldError,
)
from fiscalcode.core.normalize import normalize
from fiscalcode.core.omocode import (
    omocode_level,
    strip_omocode,
    strip_place_omocode,
    substitute_omocodes,
)

CODE_LENGTH = 16
PLACE_CODE_LENGTH = 4

_CODE_PATTERN = re.compile(r"[A-Z]{6}[0-9]{2}[A-Z][0-9]{2}[A-Z][0-9]{3}[A-Z]")


# ─── Encode ──────────────────────────────────────────────────────

def encode(identity: Identity) -> FiscalCode:
    """Compute the fiscal code for an identity.

    Raises MissingFieldError, InvalidGenderError or InvalidPlaceCodeError for
    bad input, InvalidCharacterError if the place code holds characters
    outside A-Z / 0-9.
    """
    if not identity.first_name:
        raise MissingFieldError("first_name")
    if not identity.last_name:
        raise MissingFieldError("last_name")
    if identity.birth_date is None:
        raise MissingFieldError("birth_date")
    gender = Gender.parse(identity.gender)
    place_code = normalize(identity.place_code)
    if not place_code:
        raise MissingFieldError("place_code")
    if len(place_code) != PLACE_CODE_LENGTH:
        raise InvalidPlaceCodeError(place_code)

    body = (
        surname_code(identity.last_name)
        + given_name_code(identity.first_name)
        + birth_code(identity.birth_date, gender)
        + place_code
    )
    return FiscalCode(body + checksum(body))


def get_fiscal_code(
    first_name: str,
    last_name: str,
    birth_date: date,
    gender: Gender | str,
    place_code: str,
) -> FiscalCode:
    """Keyword-friendly wrapper around encode(); gender accepts 'M'/'F'."""
    return encode(Identity(
        first_name=first_name,
        last_name=last_name,
        birth_date=birth_date,
        gender=gender,
        place_code=place_code,
    ))


# ─── Validate ────────────────────────────────────────────────────

def has_valid_format(code: object) -> bool:
    """Grammar check only (no checksum), in plain or omocode form."""
    if not isinstance(code, str) or len(code) < CODE_LENGTH:
        return False
    code = normalize(code)
    if len(code) != CODE_LENGTH:
        return False
    return bool(
        _CODE_PATTERN.fullmatch(code)
        or _CODE_PATTERN.fullmatch(strip_omocode(code))
    )


def _formal_forms(code: object) -> tuple[str, str] | None:
    """Return (normalized, stripped) forms of a formally valid code, or None."""
    if not has_valid_format(code):
        return None
    code = normalize(code)
    stripped = strip_omocode(code)
    if code[BODY_LENGTH] != checksum(code[:BODY_LENGTH]):
        return None
    return code, stripped


def is_valid(code: object, identity: Identity | None = None) -> bool:
    """Check a fiscal code's format and checksum, and optionally its identity fields."""
    forms = _formal_forms(code)
    if forms is None:
        return False
    if identity is None:
        return True
    return _matches_identity(forms[1], identity)


def is_valid_for(
    code: object,
    first_name: str | None,
    last_name: str | None,
    birth_date: date | str | None,
    gender: Gender | str | None,
    place_code: str | None,
) -> bool:
    """Identity-aware validation over loose fields. Never raises."""
    try:
        identity = Identity(
            first_name=first_name,
            last_name=last_name,
            birth_date=birth_date,
            gender=Gender.parse(gender),
            place_code=place_code,
        )
    except FiscalCodeError:
        return False
    return is_valid(code, identity)


def _matches_identity(stripped: str, identity: Identity) -> bool:
    """Compare the stripped code's segments with codes computed from identity."""
    if not identity.first_name or not identity.last_name or not identity.place_code:
        return False
    if not isinstance(identity.birth_date, date):
        return False
    try:
        expected_birth = birth_code(identity.birth_date, identity.gender)
    except FiscalCodeError:
        return False
    return (
        stripped[0:3] == surname_code(identity.last_name)
        and stripped[3:6] == given_name_code(identity.first_name)
        and stripped[6:11] == expected_birth
        and stripped[11:15] == strip_place_omocode(normalize(identity.place_code))
    )


# ─── Decode ──────────────────────────────────────────────────────

def decode(code: str, reference_date: date) -> DecodedFiscalCode:
    """Split a formally valid code into its segments.

    reference_date anchors the century of the two-digit year (usually today).
    Raises InvalidFiscalCodeError if the code fails is_valid or carries an
    impossible month/day.
    """
    forms = _formal_forms(code)
    if forms is None:
        raise InvalidFiscalCodeError("format or checksum check failed")
    normalized, stripped = forms
    birth_date, gender = decode_birth(stripped[6:11], reference_date)
    return DecodedFiscalCode(
        code=FiscalCode(normalized),
        surname_code=stripped[0:3],
        given_name_code=stripped[3:6],
        birth_date=birth_date,
        gender=gender,
        place_code=stripped[11:15],
        omocode_level=omocode_level(normalized),
    )


def omocode_variants(code: str) -> list[FiscalCode]:
    """The 7 omocode variants of a valid code. Raises InvalidFiscalCodeError otherwise."""
    forms = _formal_forms(code)
    if forms is None:
        raise InvalidFiscalCodeError("format or checksum check failed")
    return [FiscalCode(v) for v in substitute_omocodes(forms[1])]
