"""Fiscal code routes — end-to-end tests through the FastAPI app.

Invariants:
    - POST /fiscal-codes returns 201 with the computed code
    - Pydantic failures → 400 VALIDATION_ERROR; core failures → 400 with their own code
    - POST /fiscal-codes/validate always answers 200
    - GET /fiscal-codes/{code} decodes; invalid codes → 400 INVALID_FISCAL_CODE
"""

BASE = "/api/v1/fiscal-codes"

MARIA = {
    "first_name": "Maria",
    "last_name": "Rossi",
    "birth_date": "1985-06-12",
    "gender": "F",
    "place_code": "F205",
}


# ─── encode ──────────────────────────────────────────────────────

async def test_encode_returns_201_with_code(client):
    res = await client.post(BASE, json=MARIA)
    assert res.status_code == 201
    assert res.json() == {"fiscal_code": "RSSMRA85H52F205C"}


async def test_encode_male_reference(client):
    payload = {
        "first_name": "Mario", "last_name": "Rossi", "birth_date": "1950-05-04",
        "gender": "M", "place_code": "a131",
    }
    res = await client.post(BASE, json=payload)
    assert res.status_code == 201
    assert res.json()["fiscal_code"] == "RSSMRA50E04A131O"


async def test_encode_rejects_unknown_gender(client):
    res = await client.post(BASE, json={**MARIA, "gender": "X"})
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert any(d["field"].endswith("gender") for d in error["details"])


async def test_encode_rejects_blank_name(client):
    res = await client.post(BASE, json={**MARIA, "first_name": "   "})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_encode_maps_core_error_to_400(client):
    res = await client.post(BASE, json={**MARIA, "place_code": "H5-1"})
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "INVALID_CHARACTER"
    assert error["category"] == "validation"
    assert error["context"]["operation"] == "encode_fiscal_code"


# ─── validate ────────────────────────────────────────────────────

async def test_validate_valid_code(client):
    res = await client.post(f"{BASE}/validate", json={"code": "rssmra85h52f205c"})
    assert res.status_code == 200
    assert res.json() == {
        "code": "RSSMRA85H52F205C",
        "valid": True,
        "omocode_level": 0,
        "identity_checked": False,
    }


async def test_validate_malformed_code_is_not_an_error(client):
    for code in ("short", "", None):
        res = await client.post(f"{BASE}/validate", json={"code": code})
        assert res.status_code == 200
        assert res.json()["valid"] is False


async def test_validate_oversized_code_is_not_an_error(client):
    res = await client.post(f"{BASE}/validate", json={"code": "A" * 65})
    assert res.status_code == 200
    assert res.json()["valid"] is False


async def test_validate_unknown_gender_is_not_an_error(client):
    res = await client.post(
        f"{BASE}/validate",
        json={"code": "RSSMRA85H52F205C", **MARIA, "gender": "FEMALEXXX"},
    )
    assert res.status_code == 200
    assert res.json()["valid"] is False
    assert res.json()["identity_checked"] is True


async def test_validate_unparsable_birth_date_is_not_an_error(client):
    res = await client.post(
        f"{BASE}/validate",
        json={"code": "RSSMRA85H52F205C", **MARIA, "birth_date": "12/06/1985"},
    )
    assert res.status_code == 200
    assert res.json()["valid"] is False


async def test_validate_reports_omocode_level(client):
    res = await client.post(f"{BASE}/validate", json={"code": "RSSMRA85H52F2LRI"})
    assert res.json()["valid"] is True
    assert res.json()["omocode_level"] == 2


async def test_validate_against_identity(client):
    res = await client.post(
        f"{BASE}/validate", json={"code": "RSSMRA85H52F20RX", **MARIA},
    )
    body = res.json()
    assert body["valid"] is True
    assert body["identity_checked"] is True


async def test_validate_identity_mismatch(client):
    res = await client.post(
        f"{BASE}/validate",
        json={"code": "RSSMRA85H52F205C", **MARIA, "gender": "M"},
    )
    assert res.json()["valid"] is False
    assert res.json()["identity_checked"] is True


async def test_validate_partial_identity_fails(client):
    res = await client.post(
        f"{BASE}/validate", json={"code": "RSSMRA85H52F205C", "first_name": "Maria"},
    )
    assert res.status_code == 200
    assert res.json()["valid"] is False


# ─── decode / omocodes ───────────────────────────────────────────

async def test_decode_code(client):
    res = await client.get(f"{BASE}/RSSMRA85H52F205C")
    assert res.status_code == 200
    body = res.json()
    assert body["birth_date"] == "1985-06-12"
    assert body["gender"] == "F"
    assert body["place_code"] == "F205"
    assert body["surname_code"] == "RSS"
    assert body["given_name_code"] == "MRA"


async def test_decode_invalid_code_returns_400(client):
    res = await client.get(f"{BASE}/RSSMRA85H52F205A")
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "INVALID_FISCAL_CODE"


async def test_list_omocodes(client):
    res = await client.get(f"{BASE}/RSSMRA85H52F205C/omocodes")
    assert res.status_code == 200
    body = res.json()
    assert body["code"] == "RSSMRA85H52F205C"
    assert len(body["variants"]) == 7
    assert body["variants"][0] == "RSSMRA85H52F20RX"
