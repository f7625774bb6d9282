"""
Connection pool capability and its SQLAlchemy implementation.

The data-access layer only needs one thing from a pool: run a single statement
with positional parameters and return the resulting rows. ``QueryPool`` states
that contract; ``SqlAlchemyPool`` fulfils it on top of an ``AsyncEngine``.

Statements use PostgreSQL-style ``$n`` placeholders. ``SqlAlchemyPool`` rewrites
them into SQLAlchemy named bind parameters (``:p1``, ``:p2``, ...) so the same
statement text works with asyncpg in production and aiosqlite in tests.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol, Sequence, runtime_checkable

from sqlalchemy import bindparam, text
from sqlalchemy.ext.asyncio import AsyncEngine

logger = logging.getLogger(__name__)

_PLACEHOLDER = re.compile(r"\$(\d+)")

Row = Dict[str, Any]


@dataclass(frozen=True)
class QueryResult:
    """Rows returned by a statement plus the driver-reported row count."""

    rows: List[Row] = field(default_factory=list)
    row_count: int = 0


@runtime_checkable
class QueryPool(Protocol):
    """Anything able to execute one parameterized statement."""

    async def query(self, text: str, params: Optional[Sequence[Any]] = None) -> QueryResult: ...


def to_named_binds(sql: str, params: Optional[Sequence[Any]] = None):
    """Rewrite ``$n`` placeholders into SQLAlchemy bind parameters.

    Args:
        sql: Statement text using ``$1``-style placeholders
        params: Values where ``params[k - 1]`` belongs to ``$k``

    Returns:
        A ``TextClause`` with one typed ``bindparam`` per referenced position

    Raises:
        IndexError: If the text references a position with no value
    """
    values = list(params or [])
    referenced = sorted({int(n) for n in _PLACEHOLDER.findall(sql)})
    for position in referenced:
        if position < 1 or position > len(values):
            raise IndexError(f"Placeholder ${position} has no bound value ({len(values)} given)")

    stmt = text(_PLACEHOLDER.sub(lambda m: f":p{m.group(1)}", sql))
    if referenced:
        # bindparam infers a SQL type from the value, which lets asyncpg cast correctly
        stmt = stmt.bindparams(*(bindparam(f"p{n}", values[n - 1]) for n in referenced))
    return stmt


class SqlAlchemyPool:
    """``QueryPool`` backed by a SQLAlchemy ``AsyncEngine``.

    Each call checks out one connection, runs the statement, commits and
    returns the connection to the engine's pool. The engine's lifecycle belongs
    to whoever created the pool; call ``dispose`` at shutdown.
    """

    def __init__(self, engine: AsyncEngine) -> None:
        self.engine = engine

    async def query(self, sql: str, params: Optional[Sequence[Any]] = None) -> QueryResult:
        stmt = to_named_binds(sql, params)
        async with self.engine.connect() as conn:
            result = await conn.execute(stmt)
            if result.returns_rows:
                rows: List[Row] = [dict(row) for row in result.mappings().all()]
                row_count = len(rows)
            else:
                rows = []
                row_count = max(result.rowcount or 0, 0)
            await conn.commit()
        return QueryResult(rows=rows, row_count=row_count)

    async def dispose(self) -> None:
        """Close every pooled connection."""
        logger.info("Disposing database connection pool")
        await self.engine.dispose()
