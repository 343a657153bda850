import os
import uuid

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from tortoise import Tortoise

from notes_api.core import db as db_module
from notes_api.core.security import hash_password
from notes_api.main import app
from notes_api.models import Note, User
from notes_api.models.user import default_roles
from notes_api.services import UserAccountService
from notes_api.storage import MemoryCollection


TEST_DB_URL = "sqlite://:memory:?cache=shared"
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
async def client():
    """
    Provide an HTTPX AsyncClient bound to the FastAPI app with a fresh DB.
    Startup hooks are not run, so no default admin is seeded.
    """
    await _init_test_db()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client
    await Tortoise.close_connections()


@pytest_asyncio.fixture
async def create_user():
    """
    Factory fixture to create users directly via ORM.
    """

    async def _create_user(
        username: str | None = None,
        password: str = "UserPass!23",
        roles: list[str] | None = None,
    ) -> tuple[User, str]:
        user = await User.create(
            username=username or f"user_{uuid.uuid4().hex[:6]}",
            password=hash_password(password),
            roles=roles or ["Employee"],
        )
        return user, password

    return _create_user


@pytest_asyncio.fixture
async def create_note():
    """
    Factory fixture to attach a note to a user.
    """

    async def _create_note(user: User, title: str = "Fix printer") -> Note:
        return await Note.create(user=user, title=title, text="Paper jam in tray 2")

    return _create_note


@pytest.fixture
def users_store() -> MemoryCollection:
    """In-memory users collection with the same defaults as the User model."""
    return MemoryCollection(defaults={"roles": default_roles, "active": True})


@pytest.fixture
def notes_store() -> MemoryCollection:
    return MemoryCollection(defaults={"completed": False})


@pytest.fixture
def service(users_store, notes_store) -> UserAccountService:
    return UserAccountService(users=users_store, notes=notes_store)
