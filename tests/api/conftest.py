"""API test fixtures — FastAPI test client over ASGI transport.

Invariants:
    - No network: httpx talks to the app in-process
    - No state to reset between tests: the service holds none
"""

import pytest
from httpx import ASGITransport, AsyncClient

from fiscalcode.main import app


@pytest.fixture
async def client():
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
