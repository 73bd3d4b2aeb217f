import uuid
from datetime import datetime, timezone
from typing import Any, AsyncIterator, Dict

from sqlalchemy import JSON
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, AsyncEngine, async_sessionmaker
from sqlalchemy.orm import declarative_base

import config


def engine_options(url: str) -> Dict[str, Any]:
    """SQLite drivers reject pool sizing arguments, Postgres gets a small pool."""
    options: Dict[str, Any] = {"echo": config.DATABASE_ECHO}
    if not url.startswith("sqlite"):
        options.update(pool_size=5, max_overflow=10, pool_pre_ping=True)
    return options


def make_engine(url: str) -> AsyncEngine:
    return create_async_engine(url, **engine_options(url))


def make_session_factory(bind: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(bind, class_=AsyncSession, expire_on_commit=False)


# Create async engine
engine = make_engine(config.DATABASE_URL)

# Create async session factory
async_session = make_session_factory(engine)

# Base class for models
Base = declarative_base()

# JSONB on Postgres, plain JSON text everywhere else
JSONType = JSON().with_variant(JSONB(), "postgresql")


def new_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RecordMixin:
    """Serializes an ORM row into the plain dict shape the API returns."""

    def to_dict(self) -> Dict[str, Any]:
        data = {}
        for column in self.__table__.columns:
            value = getattr(self, column.name)
            if isinstance(value, datetime):
                value = value.isoformat()
            data[column.name] = value
        return data


async def get_db() -> AsyncIterator[AsyncSession]:
    """Dependency to get database session"""
    async with async_session() as session:
        try:
            yield session
        finally:
            await session.close()


async def init_db():
    """Create all database tables"""
    # Importing the ORM modules registers their tables on Base.metadata
    from models import (  # noqa: F401
        DashboardDBModel,
        GrowthChatDBModel,
        IdeaValidationDBModel,
        MarketResearchDBModel,
        PitchDBModel,
        UserDBModel,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db():
    """Close database connection"""
    await engine.dispose()
