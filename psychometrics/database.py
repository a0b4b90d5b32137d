"""
LLM Psychometrics — Async Database Engine & Session Factory

Connects to the database named by ``DATABASE_URL``:

* **SQLite** (default, local development) through ``aiosqlite``.
* **PostgreSQL** through ``asyncpg``; a plain ``postgresql://`` URL is
  upgraded to the asyncpg dialect transparently.

Exposes the shared declarative ``Base``, the module-level ``engine`` and
``async_session_factory``, and a ``get_db`` async generator for FastAPI
dependency injection.
"""

from __future__ import annotations

import logging
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from psychometrics.config import get_settings

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------ #
# Declarative base for all ORM models
# ------------------------------------------------------------------ #

class Base(DeclarativeBase):
    """Shared declarative base.

    Every SQLAlchemy model in the project should inherit from this class::

        from psychometrics.database import Base

        class ModelRun(Base):
            __tablename__ = "runs"
            ...
    """
    pass


# ------------------------------------------------------------------ #
# Pool configuration (server databases only)
# ------------------------------------------------------------------ #

_POOL_KWARGS = {
    "pool_size": 10,
    "max_overflow": 5,
    "pool_timeout": 30,
    "pool_recycle": 1800,
    "pool_pre_ping": True,
}


# ------------------------------------------------------------------ #
# Engine construction helpers
# ------------------------------------------------------------------ #

def normalise_database_url(url: str) -> str:
    """Upgrade a plain ``postgresql://`` scheme to the asyncpg dialect."""
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url


def build_engine(url: str | None = None, echo: bool | None = None) -> AsyncEngine:
    """Create an async engine for ``url`` (defaults to ``DATABASE_URL``)."""
    settings = get_settings()
    url = normalise_database_url(url or settings.DATABASE_URL)
    if echo is None:
        echo = settings.LOG_LEVEL == "DEBUG"

    kwargs = {} if url.startswith("sqlite") else dict(_POOL_KWARGS)
    engine = create_async_engine(url, echo=echo, **kwargs)

    logger.info("Database engine created (%s)", engine.url.get_backend_name())
    return engine


# ------------------------------------------------------------------ #
# Module-level engine & session factory
# ------------------------------------------------------------------ #

engine = build_engine()

async_session_factory: async_sessionmaker[AsyncSession] = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def create_tables(bind: AsyncEngine | None = None) -> None:
    """Create every table registered on ``Base.metadata`` if missing."""
    import psychometrics.models  # noqa: F401  (register tables)

    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


# ------------------------------------------------------------------ #
# FastAPI dependency
# ------------------------------------------------------------------ #

async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield an ``AsyncSession`` and ensure it is closed afterwards.

    Usage in a FastAPI route::

        from fastapi import Depends
        from psychometrics.database import get_db

        @router.get("/runs")
        async def list_runs(db: AsyncSession = Depends(get_db)):
            ...
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
