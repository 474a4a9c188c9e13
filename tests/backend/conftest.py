import os
import uuid

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from tortoise import Tortoise

from forum.core import db as db_module
from forum.main import app


TEST_DB_URL = "sqlite://:memory:"
os.environ["DATABASE_URL"] = TEST_DB_URL
db_module.DB_URL = TEST_DB_URL
db_module.TORTOISE_ORM["connections"]["default"] = TEST_DB_URL


async def _init_test_db() -> None:
    """
    Initialize a clean in-memory SQLite database for every test.
    Ensures tables are recreated from scratch.
    """
    if Tortoise._inited:
        await Tortoise.close_connections()
    await Tortoise.init(config=db_module.TORTOISE_ORM)
    await Tortoise.generate_schemas()


@pytest_asyncio.fixture
async def db():
    """
    Fresh database for concept-level tests that don't go through HTTP.
    """
    await _init_test_db()
    yield
    await Tortoise.close_connections()


@pytest_asyncio.fixture
async def client(db):
    """
    Provide an HTTPX AsyncClient bound to the FastAPI app with a fresh DB.
    The app's startup hook is not run; the `db` fixture owns the connection.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client


@pytest_asyncio.fixture
async def register_and_login(client):
    """
    Factory fixture: register a user through the API, log in, and return
    Authorization headers for that user.

    Cookies set by the login response are cleared so several users can act
    through the same client, each identified only by its bearer token.
    """

    async def _register_and_login(username: str | None = None, password: str = "UserPass!23") -> dict[str, str]:
        username = username or f"user_{uuid.uuid4().hex[:6]}"
        resp = await client.post("/api/users", json={"username": username, "password": password})
        assert resp.status_code == 200, resp.text
        resp = await client.post("/api/login", json={"username": username, "password": password})
        assert resp.status_code == 200, resp.text
        client.cookies.clear()
        return {"Authorization": f"Bearer {resp.json()['accessToken']}"}

    return _register_and_login
