"""
Database utility functions for engine, pool and repository wiring.

Nothing here runs at import time: the caller opens the pool at startup and
disposes of it at shutdown.

Functions:
- create_engine: Creates async SQLAlchemy engine with URL normalization
- create_pool: Wraps an engine in a ``SqlAlchemyPool``
- create_all: Creates all tables from entity metadata (for tests/dev)
- build_repos: Builds the repository bundle for dependency injection
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from .base import Base
from .pool import QueryPool, SqlAlchemyPool
from .repositories.properties import PropertyRepository
from .repositories.reservations import ReservationRepository
from .repositories.users import UserRepository

logger = logging.getLogger(__name__)


def create_engine(db_url: str) -> AsyncEngine:
    """Create an async SQLAlchemy engine.

    The helper normalizes Postgres URLs to ensure the async driver is used.
    For example, it rewrites ``postgresql://`` and other variants to
    ``postgresql+asyncpg://``.

    Args:
        db_url: Database connection URL

    Returns:
        Configured AsyncEngine instance
    """
    url = re.sub(r"^postgres(?:ql)?(?:\+[a-z0-9_]+)?://", "postgresql+asyncpg://", db_url, count=1)
    return create_async_engine(url, pool_pre_ping=True)


def create_pool(db_url: Optional[str] = None) -> SqlAlchemyPool:
    """Open a connection pool.

    Args:
        db_url: Database URL; defaults to ``settings.resolved_database_url``

    Returns:
        A ready ``SqlAlchemyPool``
    """
    if db_url is None:
        from lightbnb.core.config import settings

        db_url = settings.resolved_database_url

    engine = create_engine(db_url)
    logger.info(f"Connecting to db: {make_url(db_url).database}")
    return SqlAlchemyPool(engine)


async def create_all(engine: AsyncEngine) -> None:
    """Create all tables for the current entity metadata.

    This is mainly intended for tests and local development.
    Production should use Alembic migrations instead.

    Args:
        engine: Async SQLAlchemy engine
    """
    # Register every table on Base.metadata
    from . import entities  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


@dataclass(frozen=True)
class RepoBundle:
    """Convenience bundle of all repositories for dependency injection."""

    users: UserRepository
    reservations: ReservationRepository
    properties: PropertyRepository


def build_repos(pool: QueryPool) -> RepoBundle:
    """Build a ``RepoBundle`` sharing one pool.

    Args:
        pool: Pool used by every repository

    Returns:
        Bundle containing all repository instances
    """
    return RepoBundle(
        users=UserRepository(pool),
        reservations=ReservationRepository(pool),
        properties=PropertyRepository(pool),
    )
