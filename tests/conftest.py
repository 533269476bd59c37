"""
Pytest Configuration and Fixtures.

Every test gets a fresh SQLite file database; API tests drive the FastAPI
app in-process through httpx with `get_db` pointed at that database.
"""
import os

# Must be set before the app modules read settings
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["SEED_ON_STARTUP"] = "false"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from cars_practice.db.base import Base
from cars_practice.db.session import build_engine, build_sessionmaker, get_db
from cars_practice.main import app
from cars_practice.services import auth as auth_service
from cars_practice.services import passages as passage_service
from cars_practice.services.seeding import build_passage
from tests.helpers import THREE_QUESTION_PASSAGE


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests (database and HTTP)")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_sessionmaker(engine)


@pytest_asyncio.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def passage(db):
    """Passage with 3 questions, 4 choices each, B correct. Returns the assembled schema."""
    row = build_passage(THREE_QUESTION_PASSAGE)
    db.add(row)
    await db.commit()
    return await passage_service.get_passage_with_questions(db, row.id)


@pytest_asyncio.fixture
async def user(db):
    """Registered user; returns the AuthOutSchema (user + token)."""
    return await auth_service.register(db, "student@example.com", "correct-horse", "Student")


@pytest_asyncio.fixture
async def other_user(db):
    return await auth_service.register(db, "other@example.com", "battery-staple", "Other")


@pytest_asyncio.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(user):
    return {"Authorization": f"Bearer {user.token}"}
