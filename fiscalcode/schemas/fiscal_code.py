"""Fiscal Code Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - EncodeRequest: names non-empty after strip, place_code exactly 4 chars
    - ValidateRequest: code is free text; identity fields all optional and unbounded,
      so malformed input reaches the validator and yields valid=false
    - Responses never echo names or birth dates back

Design Decisions:
    - Gender enum from core/ as field type: Pydantic rejects anything but "M"/"F"
    - ValidateRequest accepts malformed codes: validity is a result, not a 400
"""

from datetime import date

from pydantic import BaseModel, Field, field_validator

from fiscalcode.core.domain_types import Gender


class EncodeRequest(BaseModel):
    """Identity fields a fiscal code is computed from."""
    first_name: str = Field(min_length=1, max_length=200)
    last_name: str = Field(min_length=1, max_length=200)
    birth_date: date
    gender: Gender
    place_code: str = Field(min_length=4, max_length=4)

    @field_validator("first_name", "last_name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v

    @field_validator("place_code", mode="before")
    @classmethod
    def strip_place_code(cls, v: object) -> object:
        return v.strip().upper() if isinstance(v, str) else v


class EncodeResponse(BaseModel):
    fiscal_code: str


class ValidateRequest(BaseModel):
    """Candidate code plus optional identity fields to check it against."""
    code: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    # Unparsable dates stay text so the identity check fails instead of a 400
    birth_date: date | str | None = Field(None, union_mode="left_to_right")
    gender: str | None = None
    place_code: str | None = None

    @property
    def has_identity(self) -> bool:
        """True when any identity field was supplied."""
        return any(
            v is not None for v in (
                self.first_name, self.last_name, self.birth_date,
                self.gender, self.place_code,
            )
        )


class ValidateResponse(BaseModel):
    code: str | None
    valid: bool
    omocode_level: int = 0
    identity_checked: bool = False


class DecodeResponse(BaseModel):
    """Segments of a formally valid code."""
    code: str
    surname_code: str
    given_name_code: str
    birth_date: date
    gender: Gender
    place_code: str
    omocode_level: int


class OmocodeResponse(BaseModel):
    code: str
    variants: list[str]
