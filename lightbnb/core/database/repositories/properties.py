"""
Property repository.

This module provides property search (with averaged review ratings) and
property creation.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Union

from ..entities.properties import Property
from ..errors import QueryExecutionError
from ..pool import QueryPool, Row
from ..queries import DEFAULT_LIMIT, FilterInput, build_property_search_query, coerce_input, insert_property_query
from ..schemas.properties import PropertyCreate
from .base import AsyncBaseRepository


class PropertyRepository(AsyncBaseRepository[Property]):
    """Repository for property data access operations."""

    def __init__(self, pool: QueryPool) -> None:
        super().__init__(pool, Property)

    async def search(self, filters: FilterInput = None, limit: Optional[int] = DEFAULT_LIMIT) -> List[Row]:
        """Search properties, cheapest first.

        Args:
            filters: ``PropertySearchFilters`` or a mapping of search options
            limit: Maximum rows to return, defaults to 10

        Returns:
            Property rows, each with an ``average_rating`` column
        """
        return await self._fetch_all(build_property_search_query(filters, limit))

    async def create(self, prop: Union[PropertyCreate, Mapping[str, Any]]) -> Row:
        """Insert a property using only the fields that carry a value.

        Args:
            prop: ``PropertyCreate`` or a mapping of property columns

        Returns:
            The inserted row

        Raises:
            InvalidQueryError: If no usable field was supplied
            QueryExecutionError: If the insert fails or returns nothing
        """
        query = insert_property_query(coerce_input(PropertyCreate, prop))
        row = await self._fetch_one(query)
        if row is None:
            raise QueryExecutionError("Insert into properties returned no row", sql=query.text, params=query.params)
        return row
