from datetime import timedelta
from sqlalchemy import event
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.adapter.services.token_service import JoseTokenService
from src.adapter.services.password_hasher import BcryptPasswordHasher


def is_sqlite(db_uri: str) -> bool:
    return db_uri.startswith("sqlite")


def enable_sqlite_foreign_keys(engine) -> None:
    """Item rows rely on ON DELETE CASCADE, which SQLite ignores by default"""

    @event.listens_for(engine.sync_engine, "connect")
    def _set_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def build_engine(db_uri: str = ApplicationConfig.DB_URI, **kwargs):
    options = dict(echo=ApplicationConfig.DB_ECHO, future=True)
    if not is_sqlite(db_uri):
        # Fixed-size pool; requests beyond it wait up to DB_POOL_TIMEOUT
        options.update(
            pool_size=ApplicationConfig.DB_POOL_SIZE,
            max_overflow=0,
            pool_timeout=ApplicationConfig.DB_POOL_TIMEOUT,
            pool_pre_ping=True,
        )
    options.update(kwargs)
    new_engine = create_async_engine(db_uri, **options)
    if is_sqlite(db_uri):
        enable_sqlite_foreign_keys(new_engine)
    return new_engine


engine = build_engine()

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def get_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_token_service() -> JoseTokenService:
    return JoseTokenService(
        secret=ApplicationConfig.JWT_SECRET,
        algorithm=ApplicationConfig.JWT_ALGORITHM,
        expires_in=timedelta(hours=ApplicationConfig.JWT_EXPIRES_HOURS),
    )


def get_password_hasher() -> BcryptPasswordHasher:
    return BcryptPasswordHasher(rounds=ApplicationConfig.BCRYPT_ROUNDS)
