"""Fiscal Code Routes — encode, validate, decode and omocode endpoints.

Invariants:
    - Encode/decode failures surface as FiscalCodeError → global handler (400)
    - Validate always answers 200: a malformed code is a result, not an error
    - Decode anchors the century of the two-digit year to today's date
    - Logs carry operation names and omocode levels, never names or codes
"""

import logging
from datetime import date

from fastapi import APIRouter, status

from fiscalcode.core import fiscal_code
from fiscalcode.core.domain_types import Identity
from fiscalcode.core.omocode import omocode_level
from fiscalcode.schemas.fiscal_code import (
    DecodeResponse,
    EncodeRequest,
    EncodeResponse,
    OmocodeResponse,
    ValidateRequest,
    ValidateResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/fiscal-codes", tags=["fiscal-codes"])


@router.post(
    "", response_model=EncodeResponse, status_code=status.HTTP_201_CREATED,
)
async def encode_fiscal_code(body: EncodeRequest):
    """Compute the fiscal code for the given identity."""
    code = fiscal_code.encode(Identity(
        first_name=body.first_name,
        last_name=body.last_name,
        birth_date=body.birth_date,
        gender=body.gender,
        place_code=body.place_code,
    ))
    logger.info("Fiscal code encoded", extra={"operation": "encode"})
    return EncodeResponse(fiscal_code=code)


@router.post("/validate", response_model=ValidateResponse)
async def validate_fiscal_code(body: ValidateRequest):
    """Check format and checksum, plus identity fields when any are supplied."""
    if body.has_identity:
        valid = fiscal_code.is_valid_for(
            body.code,
            body.first_name,
            body.last_name,
            body.birth_date,
            body.gender,
            body.place_code,
        )
    else:
        valid = fiscal_code.is_valid(body.code)

    level = omocode_level(body.code.strip().upper()) if valid else 0
    logger.info(
        f"Fiscal code validated: valid={valid}",
        extra={"operation": "validate", "omocode_level": level},
    )
    return ValidateResponse(
        code=body.code.strip().upper() if body.code else body.code,
        valid=valid,
        omocode_level=level,
        identity_checked=body.has_identity,
    )


@router.get("/{code}", response_model=DecodeResponse)
async def decode_fiscal_code(code: str):
    """Split a valid code into surname, name, birth and place segments."""
    decoded = fiscal_code.decode(code, reference_date=date.today())
    logger.info(
        "Fiscal code decoded",
        extra={"operation": "decode", "omocode_level": decoded.omocode_level},
    )
    return DecodeResponse(
        code=decoded.code,
        surname_code=decoded.surname_code,
        given_name_code=decoded.given_name_code,
        birth_date=decoded.birth_date,
        gender=decoded.gender,
        place_code=decoded.place_code,
        omocode_level=decoded.omocode_level,
    )


@router.get("/{code}/omocodes", response_model=OmocodeResponse)
async def list_omocodes(code: str):
    """The 7 omocode variants of a valid code, least substituted first."""
    variants = fiscal_code.omocode_variants(code)
    logger.info("Omocode variants generated", extra={"operation": "omocodes"})
    return OmocodeResponse(code=code.strip().upper(), variants=variants)
