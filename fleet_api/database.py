"""Database engine and session management."""

from typing import AsyncIterator, Optional

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from fleet_api.config import Settings


class Base(DeclarativeBase):
    """Declarative base shared by all models."""


engine: Optional[AsyncEngine] = None
async_session_maker: Optional[async_sessionmaker[AsyncSession]] = None


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(database_url: str, echo: bool = False, **kwargs) -> AsyncEngine:
    """Create an async engine, enabling foreign keys for SQLite."""
    new_engine = create_async_engine(database_url, echo=echo, future=True, **kwargs)
    if new_engine.dialect.name == "sqlite":
        event.listen(new_engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return new_engine


def build_session_maker(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind, class_=AsyncSession, expire_on_commit=False)


async def create_tables(bind: AsyncEngine) -> None:
    # Import models so they register on Base.metadata
    import fleet_api.models  # noqa: F401

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def init_db(settings: Settings) -> None:
    """Initialize database engine and create tables."""
    global engine, async_session_maker

    engine = build_engine(
        settings.database_url,
        echo=settings.debug,
        pool_pre_ping=True,
    )
    async_session_maker = build_session_maker(engine)
    await create_tables(engine)


async def close_db() -> None:
    """Close database engine."""
    global engine
    if engine:
        await engine.dispose()
        engine = None


async def get_db() -> AsyncIterator[AsyncSession]:
    """Get database session."""
    async with async_session_maker() as session:
        yield session


def get_engine() -> AsyncEngine:
    """Get the application engine."""
    return engine
