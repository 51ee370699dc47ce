import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession

from plotbook.db.session import Database
from plotbook.main import create_api_app


@pytest_asyncio.fixture
async def database(tmp_path):
    # A fresh SQLite file per test keeps tests independent
    database = Database(f"sqlite+aiosqlite:///{tmp_path / 'test.sqlite'}")
    await database.create_all()
    yield database
    await database.dispose()


@pytest_asyncio.fixture
async def db(database: Database):
    async with database.session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(database: Database):
    app = create_api_app(database)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
