"""Shared test fixtures for the diceroller test suite.

async_client
    AsyncClient wired to the FastAPI app through ASGITransport. Requests use
    a fresh unseeded generator, as in production.

seeded_client
    Same as async_client, but get_rng is overridden with a seeded Random so
    roll results are repeatable within a test.

Unit tests of diceroller.dice need no fixture.
"""

from __future__ import annotations

import random

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from diceroller.dependencies import get_rng
from diceroller.main import app


@pytest.fixture
def rng_seed() -> int:
    return 1234


@pytest_asyncio.fixture
async def async_client():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def seeded_client(rng_seed):
    app.dependency_overrides[get_rng] = lambda: random.Random(rng_seed)

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.pop(get_rng, None)
