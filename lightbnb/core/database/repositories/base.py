"""
Base repository utilities.

This module provides the foundation shared by every LightBnB repository: an
explicit pool dependency and helpers that run exactly one compiled statement,
turning pool failures into typed ``DataAccessError`` subclasses.
"""

from __future__ import annotations

import logging
from abc import ABC
from typing import Generic, List, Optional, Type, TypeVar

from sqlmodel import SQLModel

from ..errors import DataAccessError, QueryExecutionError
from ..pool import QueryPool, QueryResult, Row
from ..sql import CompiledQuery

logger = logging.getLogger(__name__)

# Generic type for SQLModel entities
EntityType = TypeVar("EntityType", bound=SQLModel)


class AsyncBaseRepository(ABC, Generic[EntityType]):
    """Base async repository running compiled statements through a pool."""

    def __init__(self, pool: QueryPool, model: Type[EntityType]) -> None:
        """Initialize repository with a pool and the SQLModel entity it serves.

        Args:
            pool: Anything implementing ``QueryPool.query``
            model: SQLModel entity class for this repository
        """
        self.pool = pool
        self.model = model

    @property
    def table(self) -> str:
        return self.model.__tablename__

    async def _execute(self, query: CompiledQuery) -> QueryResult:
        """Run one statement.

        Raises:
            QueryExecutionError: If the pool rejects the statement
        """
        logger.debug("Executing on %s: %s %s", self.table, query.text, query.params)
        try:
            return await self.pool.query(query.text, query.params)
        except DataAccessError:
            raise
        except Exception as exc:
            raise QueryExecutionError(str(exc) or type(exc).__name__, sql=query.text, params=query.params) from exc

    async def _fetch_one(self, query: CompiledQuery) -> Optional[Row]:
        """First row of the result, or ``None`` when nothing matched."""
        result = await self._execute(query)
        if result.row_count >= 1 and result.rows:
            return result.rows[0]
        return None

    async def _fetch_all(self, query: CompiledQuery) -> List[Row]:
        result = await self._execute(query)
        return list(result.rows)
