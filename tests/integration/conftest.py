import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

import src.domain  # noqa: F401  registers tables on SQLModel.metadata
from src.depends import (
    enable_sqlite_foreign_keys,
    get_session,
    get_token_service,
    get_password_hasher,
)
from src.adapter.repositories.user_repository import SqlAlchemyUserRepository
from src.adapter.services.password_hasher import BcryptPasswordHasher
from src.adapter.services.token_service import JoseTokenService
from src.domain.user import User

from tests.fixtures.constants import TEST_SECRET, TEST_PASSWORD


@pytest_asyncio.fixture(scope="function")
async def engine():
    """In-memory SQLite database shared by every connection of one test"""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        future=True,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    enable_sqlite_foreign_keys(engine)

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    """Create a new database session for each test"""
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
def token_service():
    return JoseTokenService(secret=TEST_SECRET)


@pytest_asyncio.fixture
def password_hasher():
    return BcryptPasswordHasher(rounds=4)


async def _create_user(db_session, password_hasher, username, email):
    user = await SqlAlchemyUserRepository(db_session).create(
        User(
            username=username,
            email=email,
            password_hash=password_hasher.hash(TEST_PASSWORD),
            full_name="Administrator",
        )
    )
    await db_session.commit()
    # detach so a later session rollback does not expire the fixture object
    db_session.expunge(user)
    return user


@pytest_asyncio.fixture
async def user(db_session, password_hasher):
    return await _create_user(db_session, password_hasher, "admin", "admin@company.com")


@pytest_asyncio.fixture
async def other_user(db_session, password_hasher):
    return await _create_user(db_session, password_hasher, "mallory", "mallory@example.com")


@pytest_asyncio.fixture
async def client(db_session, token_service, password_hasher):
    """Create test client with database session override"""
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    # Override the session dependency to use test session
    async def override_get_session():
        yield db_session

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_token_service] = lambda: token_service
    app.dependency_overrides[get_password_hasher] = lambda: password_hasher

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
