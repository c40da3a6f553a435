import os
import tempfile

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

# must be set before ptfms.config is imported anywhere
_TEST_DB_DIR = tempfile.mkdtemp(prefix="ptfms-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DB_DIR}/test.sqlite3"


@pytest.fixture(autouse=True, scope="session")
def setup_test_db():
    import asyncio

    from ptfms.database import create_tables, async_session
    from ptfms.seed import seed_data

    async def _setup():
        await create_tables()
        async with async_session() as session:
            await seed_data(session)

    asyncio.run(_setup())


@pytest_asyncio.fixture
async def session_factory():
    """Throwaway in-memory database for DAO and service tests."""
    from ptfms.database import Base, enable_sqlite_foreign_keys
    import ptfms.models  # noqa: F401

    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()
